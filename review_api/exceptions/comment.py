from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR

from review_api.exceptions.base import AppHTTPException


class CommentCreationException(AppHTTPException):
    """Failed to store the comment."""

    status_code = HTTP_500_INTERNAL_SERVER_ERROR
    detail = "Exception occurred while adding comment"
    example = {"detail": "Exception occurred while adding comment"}


class CommentQueryException(AppHTTPException):
    """Failed to read comments."""

    status_code = HTTP_500_INTERNAL_SERVER_ERROR
    detail = "Exception occurred while fetching comments"
    example = {"detail": "Exception occurred while fetching comments"}
