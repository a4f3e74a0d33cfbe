from typing import Any

from starlette.status import HTTP_400_BAD_REQUEST

from review_api.exceptions.base import AppHTTPException
from review_api.schemas.validation import FieldError


class InvalidRequestDataException(AppHTTPException):
    """The request body could not be normalized."""

    status_code = HTTP_400_BAD_REQUEST
    detail = "Invalid request data"
    example = {"detail": "Invalid request data: Expecting value: line 1 column 1 (char 0)"}

    def __init__(self, reason: str) -> None:
        """
        Initialize the exception with the underlying failure.

        :param reason: Message of the original error.
        """
        super().__init__(detail=f"{self.detail}: {reason}")


class RequestValidationException(AppHTTPException):
    """One or more fields failed validation."""

    status_code = HTTP_400_BAD_REQUEST
    detail = "Missing parameters"
    example = {"detail": [{"field": "email", "message": "Email is required"}]}

    def __init__(self, errors: list[FieldError]) -> None:
        """
        Initialize the exception with the field errors.

        :param errors: Field-level errors, in the order they were found.
        """
        self.errors = errors
        detail: list[dict[str, Any]] = [error.model_dump() for error in errors]
        super().__init__(detail=detail)
