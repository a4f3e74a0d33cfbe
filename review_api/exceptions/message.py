from starlette.status import HTTP_400_BAD_REQUEST, HTTP_404_NOT_FOUND, HTTP_500_INTERNAL_SERVER_ERROR

from review_api.exceptions.base import AppHTTPException


class MessageIdRequiredException(AppHTTPException):
    """Message id is missing."""

    status_code = HTTP_400_BAD_REQUEST
    detail = "Message ID is required"
    example = {"detail": "Message ID is required"}


class MessageNotFoundException(AppHTTPException):
    """No message with this id."""

    status_code = HTTP_404_NOT_FOUND
    detail = "Message not found"
    example = {"detail": "Message not found"}


class MessageQueryException(AppHTTPException):
    """Failed to read messages."""

    status_code = HTTP_500_INTERNAL_SERVER_ERROR
    detail = "Error while getting messages"
    example = {"detail": "Error while getting messages"}


class MessageCreationException(MessageQueryException):
    """Failed to store the message."""

    detail = "Error while adding message"
    example = {"detail": "Error while adding message"}


class MessageUpdateException(MessageQueryException):
    """Failed to update the message."""

    detail = "Error while updating message"
    example = {"detail": "Error while updating message"}


class MessageDeletionException(MessageQueryException):
    """Failed to delete the message."""

    detail = "Error while deleting message"
    example = {"detail": "Error while deleting message"}
