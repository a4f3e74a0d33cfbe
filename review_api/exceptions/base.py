from typing import Any

from fastapi import HTTPException
from starlette.status import HTTP_400_BAD_REQUEST


class AppHTTPException(HTTPException):
    """
    Base class for the application's HTTP exceptions.

    :cvar int status_code: Status code from starlette.
    :cvar str detail: Error description.
    :cvar dict example: Example body for the OpenAPI document.
    :cvar dict[str, str] headers: Response headers.
    """

    status_code: int = HTTP_400_BAD_REQUEST
    detail: Any = "An error occurred"
    example: dict[str, Any] = {"detail": "An error occurred"}
    headers: dict[str, str] = {}

    def __init__(
        self,
        status_code: int | None = None,
        detail: Any = None,
        example: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        """
        Initialize the exception.

        :param status_code: HTTP status code.
        :param detail: Error description.
        :param example: Example body for the OpenAPI document.
        :param headers: Response headers.
        """
        super().__init__(
            status_code=status_code or self.status_code, detail=detail or self.detail, headers=headers or self.headers
        )
        self.example = example or self.example
