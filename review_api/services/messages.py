import logging
from typing import Any

from pydantic import ValidationError
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import PyMongoError

from review_api.db.crud.message import (
    add_message,
    delete_message,
    get_message_by_id,
    get_messages,
    update_message_name,
)
from review_api.exceptions.auth import NotAuthenticatedException
from review_api.exceptions.message import (
    MessageCreationException,
    MessageDeletionException,
    MessageIdRequiredException,
    MessageNotFoundException,
    MessageQueryException,
    MessageUpdateException,
)
from review_api.exceptions.request import RequestValidationException
from review_api.schemas.documents import MessageDocument
from review_api.schemas.success_msg import SuccessResponse
from review_api.schemas.token import TokenData
from review_api.services.validation import is_missing, validate_message, validate_message_update

logger = logging.getLogger(__name__)


async def get_messages_service(docs: AsyncDatabase) -> list[MessageDocument]:
    try:
        return await get_messages(docs)
    except (PyMongoError, ValidationError) as e:
        logger.exception("Error while getting messages")
        raise MessageQueryException from e


async def get_message_service(message_id: str, docs: AsyncDatabase) -> MessageDocument:
    """
    Fetch one message; malformed ids are reported as not found.

    :param message_id: Message id from the path.
    :param docs: Document store database.
    :return: Message.
    :rtype: MessageDocument
    :raises MessageNotFoundException: If there is no such message.
    :raises MessageQueryException: If the store fails.
    """
    try:
        message = await get_message_by_id(docs, message_id)
    except (PyMongoError, ValidationError) as e:
        logger.exception("Error while getting message")
        raise MessageQueryException from e

    if message is None:
        raise MessageNotFoundException
    return message


async def add_message_service(
    body: dict[str, Any],
    current_user: TokenData | None,
    docs: AsyncDatabase,
) -> MessageDocument:
    """
    Create a message authored by the caller.

    :param body: Normalized body (name, content).
    :param current_user: Identity from the token.
    :param docs: Document store database.
    :return: Created message.
    :rtype: MessageDocument
    :raises RequestValidationException: If the name or the content is out of bounds.
    :raises NotAuthenticatedException: If there is no caller identity.
    :raises MessageCreationException: If the store fails.
    """
    errors = validate_message(body)
    if errors:
        raise RequestValidationException(errors)
    if current_user is None:
        raise NotAuthenticatedException

    try:
        message = MessageDocument(name=body["name"], content=body["content"], user=current_user.id)
        return await add_message(docs, message)
    except (PyMongoError, ValidationError) as e:
        logger.exception("Error while adding message", extra={"email": current_user.email})
        raise MessageCreationException from e


async def update_message_service(message_id: str | None, body: dict[str, Any], docs: AsyncDatabase) -> MessageDocument:
    errors = validate_message_update(message_id, body)
    if errors:
        raise RequestValidationException(errors)

    try:
        message = await update_message_name(docs, message_id, body["name"])
    except (PyMongoError, ValidationError) as e:
        logger.exception("Error while updating message")
        raise MessageUpdateException from e

    if message is None:
        raise MessageNotFoundException
    return message


async def delete_message_service(message_id: str | None, docs: AsyncDatabase) -> SuccessResponse:
    """
    Delete a message.

    :param message_id: Message id from the path.
    :param docs: Document store database.
    :return: Success message.
    :rtype: SuccessResponse
    :raises MessageIdRequiredException: If no id is given.
    :raises MessageNotFoundException: If there is no such message.
    :raises MessageDeletionException: If the store fails.
    """
    if is_missing(message_id):
        raise MessageIdRequiredException

    try:
        deleted = await delete_message(docs, message_id)
    except (PyMongoError, ValidationError) as e:
        logger.exception("Error while deleting message")
        raise MessageDeletionException from e

    if deleted is None:
        raise MessageNotFoundException
    return SuccessResponse(msg="Message deleted")
