from starlette.status import HTTP_400_BAD_REQUEST, HTTP_401_UNAUTHORIZED

from review_api.exceptions.base import AppHTTPException


class UnauthorizedException(AppHTTPException):
    """No Authorization header in the request."""

    status_code = HTTP_401_UNAUTHORIZED
    detail = "Unauthorized"
    example = {"detail": "Unauthorized"}
    headers = {"WWW-Authenticate": "Bearer"}


class InvalidTokenFormatException(AppHTTPException):
    """Authorization header is not of the form 'Bearer <token>'."""

    status_code = HTTP_401_UNAUTHORIZED
    detail = "Invalid token format"
    example = {"detail": "Invalid token format"}
    headers = {"WWW-Authenticate": "Bearer"}


class InvalidTokenException(AppHTTPException):
    """Token signature is invalid or the token can not be decoded."""

    status_code = HTTP_401_UNAUTHORIZED
    detail = "Invalid token"
    example = {"detail": "Invalid token"}
    headers = {"WWW-Authenticate": "Bearer"}


class ExpiredTokenException(AppHTTPException):
    """Token has expired."""

    status_code = HTTP_401_UNAUTHORIZED
    detail = "Token expired"
    example = {"detail": "Token expired"}
    headers = {"WWW-Authenticate": "Bearer"}


class InvalidTokenPayloadException(AppHTTPException):
    """Token is valid but carries no identity."""

    status_code = HTTP_401_UNAUTHORIZED
    detail = "Invalid token payload"
    example = {"detail": "Invalid token payload"}
    headers = {"WWW-Authenticate": "Bearer"}


class AuthenticationFailedException(AppHTTPException):
    """Unexpected failure while verifying the token."""

    status_code = HTTP_401_UNAUTHORIZED
    detail = "Authentication failed"
    example = {"detail": "Authentication failed"}
    headers = {"WWW-Authenticate": "Bearer"}


class NotAuthenticatedException(AppHTTPException):
    """Operation needs an authenticated caller."""

    status_code = HTTP_401_UNAUTHORIZED
    detail = "You are not authenticated"
    example = {"detail": "You are not authenticated"}


class InvalidCredentialsException(AppHTTPException):
    """Wrong email or password on /auth/login."""

    status_code = HTTP_401_UNAUTHORIZED
    detail = "Invalid credentials"
    example = {"detail": "Invalid credentials"}
    headers = {"WWW-Authenticate": "Bearer"}


class WrongPasswordException(AppHTTPException):
    """Old password does not match the stored one."""

    status_code = HTTP_400_BAD_REQUEST
    detail = "Incorrect password"
    example = {"detail": "Incorrect password"}
