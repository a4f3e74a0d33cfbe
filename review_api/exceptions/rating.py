from starlette.status import HTTP_400_BAD_REQUEST, HTTP_500_INTERNAL_SERVER_ERROR

from review_api.exceptions.base import AppHTTPException


class InvalidRatingParametersException(AppHTTPException):
    """Movie id, rating or caller identity is missing or malformed."""

    status_code = HTTP_400_BAD_REQUEST
    detail = "Missing or invalid parameters"
    example = {"detail": "Missing or invalid parameters"}


class RatingOutOfRangeException(AppHTTPException):
    """Rating is outside of [1, 5]."""

    status_code = HTTP_400_BAD_REQUEST
    detail = "Rating must be between 1 and 5"
    example = {"detail": "Rating must be between 1 and 5"}


class AlreadyRatedException(AppHTTPException):
    """The caller already rated this movie."""

    status_code = HTTP_400_BAD_REQUEST
    detail = "You have already rated this movie"
    example = {"detail": "You have already rated this movie"}


class RatingQueryException(AppHTTPException):
    """Store failure while adding the rating."""

    status_code = HTTP_500_INTERNAL_SERVER_ERROR
    detail = "Exception occurred while adding rating"
    example = {"detail": "Exception occurred while adding rating"}
