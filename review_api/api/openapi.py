from typing import Any

from review_api.exceptions.auth import (
    AuthenticationFailedException,
    ExpiredTokenException,
    InvalidTokenException,
    InvalidTokenFormatException,
    InvalidTokenPayloadException,
    UnauthorizedException,
)
from review_api.exceptions.base import AppHTTPException

AUTH_EXCEPTIONS: tuple[type[AppHTTPException], ...] = (
    UnauthorizedException,
    InvalidTokenFormatException,
    InvalidTokenException,
    ExpiredTokenException,
    InvalidTokenPayloadException,
    AuthenticationFailedException,
)


def generate_responses(*exceptions: type[AppHTTPException]) -> dict[int | str, dict[str, Any]]:
    """
    Build the OpenAPI ``responses`` mapping from exception classes.

    Exceptions sharing a status code are listed as separate examples of the
    same response.

    :param exceptions: Subclasses of AppHTTPException.
    :return: Mapping for the ``responses`` argument of a route decorator.
    """
    responses: dict[int | str, dict[str, Any]] = {}
    for exc in exceptions:
        status_code = exc.status_code
        if status_code not in responses:
            responses[status_code] = {
                "description": exc.detail,
                "content": {"application/json": {"examples": {}}},
            }

        response_name = exc.__name__.replace("Exception", "")
        example_data: dict[str, Any] = {"summary": str(exc.detail), "value": exc.example}

        responses[status_code]["content"]["application/json"]["examples"][response_name] = example_data

    return responses
