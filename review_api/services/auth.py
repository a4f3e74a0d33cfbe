import logging
from typing import Annotated, Any

from fastapi import Depends
from fastapi.security import APIKeyHeader
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import PyMongoError

from review_api.core.config import SESSION_USER_KEY
from review_api.db.crud.profile import create_profile, get_profile_by_email, get_profile_by_id
from review_api.exceptions.auth import (
    InvalidCredentialsException,
    InvalidTokenFormatException,
    UnauthorizedException,
)
from review_api.exceptions.request import RequestValidationException
from review_api.exceptions.user import (
    EmailAlreadyRegisteredException,
    LoginException,
    ProfileQueryException,
    SignupException,
    UserNotFoundException,
)
from review_api.schemas.documents import ProfileDocument
from review_api.schemas.success_msg import SuccessResponse
from review_api.schemas.token import TokenData
from review_api.schemas.user import MeResponse, ProfileResponse, SigninResponse
from review_api.services.security.hash import get_password_hash, verify_password
from review_api.services.security.jwt import form_access_token, validate_token
from review_api.services.validation import validate_signin, validate_signup

logger = logging.getLogger(__name__)

BEARER = "Bearer"


async def signup_service(body: dict[str, Any], docs: AsyncDatabase) -> SuccessResponse:
    """
    Create a profile in the document store.

    :param body: Normalized body (username, email, password).
    :param docs: Document store database.
    :return: Success message.
    :rtype: SuccessResponse
    :raises RequestValidationException: If a field is missing.
    :raises EmailAlreadyRegisteredException: If the email is taken.
    :raises SignupException: If the store fails.
    """
    errors = validate_signup(body)
    if errors:
        raise RequestValidationException(errors)

    try:
        if await get_profile_by_email(docs, body["email"]) is not None:
            raise EmailAlreadyRegisteredException

        profile = ProfileDocument(
            username=body["username"],
            email=body["email"],
            password=get_password_hash(body["password"]),
        )
        await create_profile(docs, profile)
    except PyMongoError as e:
        logger.exception("Error registering user", extra={"email": body["email"]})
        raise SignupException from e

    return SuccessResponse(msg="User registered successfully")


async def signin_service(body: dict[str, Any], docs: AsyncDatabase, session: dict[str, Any]) -> SigninResponse:
    """
    Log a profile in and issue an access token.

    The identity is also kept in the cookie session.

    :param body: Normalized body (email, password).
    :param docs: Document store database.
    :param session: Cookie session of the request.
    :return: Token and public profile.
    :rtype: SigninResponse
    :raises RequestValidationException: If a field is missing.
    :raises InvalidCredentialsException: If the email or the password is wrong.
    :raises LoginException: If the store fails.
    """
    errors = validate_signin(body)
    if errors:
        raise RequestValidationException(errors)

    try:
        profile = await get_profile_by_email(docs, body["email"])
    except PyMongoError as e:
        logger.exception("Error logging in", extra={"email": body["email"]})
        raise LoginException from e

    if profile is None or profile.id is None or not verify_password(body["password"], profile.password):
        raise InvalidCredentialsException

    session[SESSION_USER_KEY] = {"id": profile.id, "email": profile.email}
    token = form_access_token(user_id=profile.id, email=profile.email)
    return SigninResponse(
        token=token,
        user=ProfileResponse(id=profile.id, email=profile.email, username=profile.username),
    )


def logout_service(session: dict[str, Any]) -> SuccessResponse:
    session.pop(SESSION_USER_KEY, None)
    return SuccessResponse(msg="Logged out successfully")


async def get_me_service(current_user: TokenData, docs: AsyncDatabase) -> MeResponse:
    """
    Profile of the authenticated caller.

    :param current_user: Identity from the token.
    :param docs: Document store database.
    :return: Public profile.
    :rtype: MeResponse
    :raises UserNotFoundException: If the profile does not exist.
    :raises ProfileQueryException: If the store fails.
    """
    try:
        profile = await get_profile_by_id(docs, current_user.id)
    except PyMongoError as e:
        logger.exception("Exception occurred while fetching profile", extra={"email": current_user.email})
        raise ProfileQueryException from e

    if profile is None or profile.id is None:
        raise UserNotFoundException

    return MeResponse(user=ProfileResponse(id=profile.id, email=profile.email, username=profile.username))


authorization_scheme = APIKeyHeader(name="Authorization", scheme_name=BEARER, auto_error=False)
authorization_ann = Annotated[str | None, Depends(authorization_scheme)]


def extract_bearer_token(authorization: str | None) -> str:
    """
    Extract the token from an ``Authorization: Bearer <token>`` header.

    :param authorization: Raw header value.
    :return: Token.
    :rtype: Str
    :raises UnauthorizedException: If the header is absent.
    :raises InvalidTokenFormatException: If the header is not two parts starting with Bearer.
    """
    if not authorization:
        raise UnauthorizedException

    parts = authorization.strip().split()
    if len(parts) != 2 or parts[0] != BEARER:
        raise InvalidTokenFormatException

    return parts[1]


async def get_current_user(authorization: authorization_ann) -> TokenData:
    """
    DI for routes that need an authenticated caller.

    :param authorization: Value of the Authorization header.
    :return: Id and email of the caller.
    :rtype: TokenData
    :raises UnauthorizedException: If the header is absent.
    :raises InvalidTokenFormatException: If the header is malformed.
    :raises ExpiredTokenException: If the token has expired.
    :raises InvalidTokenException: If the token is invalid.
    :raises InvalidTokenPayloadException: If the token carries no identity.
    :raises AuthenticationFailedException: On any other failure.
    """
    token = extract_bearer_token(authorization)
    return validate_token(token=token)


get_current_user_ann = Annotated[TokenData, Depends(get_current_user)]
