import logging
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from review_api.core.config import SESSION_USER_KEY
from review_api.db.crud.user import get_user_by_email, update_user_password
from review_api.exceptions.auth import WrongPasswordException
from review_api.exceptions.request import RequestValidationException
from review_api.exceptions.user import UserUpdateException
from review_api.schemas.success_msg import SuccessResponse
from review_api.schemas.token import TokenData
from review_api.services.security.hash import get_password_hash, verify_password
from review_api.services.validation import validate_password_change

logger = logging.getLogger(__name__)


async def update_password_service(body: dict[str, Any], current_user: TokenData, db: AsyncSession) -> SuccessResponse:
    """
    Change the password of the authenticated user.

    The target account is always the identity from the token, never the body.

    :param body: Normalized body (oldPassword, newPassword).
    :param current_user: Identity from the token.
    :param db: Async database session.
    :return: Success message.
    :rtype: SuccessResponse
    :raises RequestValidationException: If the passwords are missing or rejected.
    :raises WrongPasswordException: If the old password does not match.
    :raises UserUpdateException: If the database fails.
    """
    errors = validate_password_change(body, current_user)
    if errors:
        raise RequestValidationException(errors)

    try:
        user = await get_user_by_email(db=db, email=current_user.email)
        if user is None or not verify_password(body["oldPassword"], user.password_hash):
            raise WrongPasswordException

        await update_user_password(user=user, password_hash=get_password_hash(body["newPassword"]), db=db)
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        logger.exception("Exception occurred while updating password", extra={"email": current_user.email})
        raise UserUpdateException from e

    return SuccessResponse(msg="Password updated")


def logout_service(session: dict[str, Any]) -> SuccessResponse:
    session.pop(SESSION_USER_KEY, None)
    return SuccessResponse(msg="Disconnected")
