from .auth import (
    AuthenticationFailedException,
    ExpiredTokenException,
    InvalidCredentialsException,
    InvalidTokenException,
    InvalidTokenFormatException,
    InvalidTokenPayloadException,
    NotAuthenticatedException,
    UnauthorizedException,
    WrongPasswordException,
)
from .base import AppHTTPException
from .request import InvalidRequestDataException, RequestValidationException
