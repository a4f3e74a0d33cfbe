from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_404_NOT_FOUND,
    HTTP_409_CONFLICT,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

from review_api.exceptions.base import AppHTTPException


class UserAlreadyExistsException(AppHTTPException):
    """Registration with an email that already has an account."""

    status_code = HTTP_409_CONFLICT
    detail = "User already has an account"
    example = {"detail": "User already has an account"}


class EmailAlreadyRegisteredException(AppHTTPException):
    """Signup with an email that already has a profile."""

    status_code = HTTP_400_BAD_REQUEST
    detail = "Email already registered"
    example = {"detail": "Email already registered"}


class RegistrationException(AppHTTPException):
    """Failed to store the user and the address."""

    status_code = HTTP_500_INTERNAL_SERVER_ERROR
    detail = "Exception occurred while registering"
    example = {"detail": "Exception occurred while registering"}


class SignupException(AppHTTPException):
    """Failed to store the user profile."""

    status_code = HTTP_500_INTERNAL_SERVER_ERROR
    detail = "Error registering user"
    example = {"detail": "Error registering user"}


class LoginException(AppHTTPException):
    """Store failure while logging in."""

    status_code = HTTP_500_INTERNAL_SERVER_ERROR
    detail = "Exception occurred while logging in"
    example = {"detail": "Exception occurred while logging in"}


class IncorrectCredentialsException(AppHTTPException):
    """No user with this email/password pair."""

    status_code = HTTP_404_NOT_FOUND
    detail = "Incorrect email/password"
    example = {"detail": "Incorrect email/password"}


class UserNotFoundException(AppHTTPException):
    """No user with this id."""

    status_code = HTTP_404_NOT_FOUND
    detail = "User not found"
    example = {"detail": "User not found"}


class UserUpdateException(AppHTTPException):
    """Failed to update the user."""

    status_code = HTTP_500_INTERNAL_SERVER_ERROR
    detail = "Exception occurred while updating password"
    example = {"detail": "Exception occurred while updating password"}


class ProfileQueryException(AppHTTPException):
    """Failed to read the user profile."""

    status_code = HTTP_500_INTERNAL_SERVER_ERROR
    detail = "Exception occurred while fetching profile"
    example = {"detail": "Exception occurred while fetching profile"}
