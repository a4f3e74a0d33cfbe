from datetime import date
import logging
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from review_api.core.config import SESSION_USER_KEY
from review_api.db.crud.user import create_address, create_new_user, get_user_by_email
from review_api.exceptions.base import AppHTTPException
from review_api.exceptions.request import RequestValidationException
from review_api.exceptions.user import (
    IncorrectCredentialsException,
    LoginException,
    RegistrationException,
    UserAlreadyExistsException,
)
from review_api.schemas.success_msg import SuccessResponse
from review_api.schemas.user import LoginResponse
from review_api.services.security.hash import get_password_hash, verify_password
from review_api.services.security.jwt import form_access_token
from review_api.services.validation import validate_login, validate_registration

logger = logging.getLogger(__name__)


def _creation_date(body: dict[str, Any]) -> date:
    raw = body.get("creation_date")
    return date.fromisoformat(raw) if raw else date.today()


async def register_user_service(body: dict[str, Any], db: AsyncSession) -> SuccessResponse:
    """
    Register a user together with their address in one transaction.

    Either both rows are committed or none is: any failure after the lookup
    rolls the session back before the error is raised.

    :param body: Normalized body (email, username, password, country, city, street).
    :param db: Async database session.
    :return: Success message.
    :rtype: SuccessResponse
    :raises RequestValidationException: If a required field is missing.
    :raises UserAlreadyExistsException: If the email is already registered.
    :raises RegistrationException: On any other failure.
    """
    errors = validate_registration(body)
    if errors:
        raise RequestValidationException(errors)

    email = body["email"]
    try:
        if await get_user_by_email(db=db, email=email) is not None:
            await db.rollback()
            raise UserAlreadyExistsException

        await create_new_user(
            db=db,
            email=email,
            username=body["username"],
            password_hash=get_password_hash(body["password"]),
            creation_date=_creation_date(body),
        )
        logger.info("USER ADDED", extra={"email": email})

        await create_address(
            db=db,
            email=email,
            country=body.get("country"),
            street=body.get("street"),
            city=body.get("city"),
        )
        logger.info("ADDRESS ADDED", extra={"email": email})

        await db.commit()
    except AppHTTPException:
        raise
    except Exception as e:
        await db.rollback()
        logger.exception("Exception occurred while registering", extra={"email": email})
        raise RegistrationException from e

    return SuccessResponse(msg="User created")


async def login_user_service(body: dict[str, Any], db: AsyncSession, session: dict[str, Any]) -> LoginResponse:
    """
    Authenticate a registered user and issue an access token.

    :param body: Normalized body (email, password).
    :param db: Async database session.
    :param session: Cookie session of the request.
    :return: Token and user name.
    :rtype: LoginResponse
    :raises RequestValidationException: If a field is missing.
    :raises IncorrectCredentialsException: If the email or the password is wrong.
    :raises LoginException: If the database fails.
    """
    errors = validate_login(body)
    if errors:
        raise RequestValidationException(errors)

    email = body["email"]
    try:
        user = await get_user_by_email(db=db, email=email)
    except SQLAlchemyError as e:
        logger.exception("Exception occurred while logging in", extra={"email": email})
        raise LoginException from e

    if user is None or not verify_password(body["password"], user.password_hash):
        raise IncorrectCredentialsException

    session[SESSION_USER_KEY] = {"email": user.email}
    token = form_access_token(user_id=user.email, email=user.email)
    return LoginResponse(token=token, username=user.username)
