from datetime import UTC, datetime

from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ReturnDocument
from pymongo.asynchronous.database import AsyncDatabase

from review_api.db.documents import MESSAGES
from review_api.schemas.documents import MessageDocument


def _object_id(message_id: str) -> ObjectId | None:
    try:
        return ObjectId(message_id)
    except (InvalidId, TypeError):
        return None


async def get_messages(docs: AsyncDatabase) -> list[MessageDocument]:
    raws = await docs[MESSAGES].find({}).to_list(length=None)
    return [MessageDocument.from_raw(raw) for raw in raws]


async def get_message_by_id(docs: AsyncDatabase, message_id: str) -> MessageDocument | None:
    """
    Fetch a message by id.

    :param docs: Document database.
    :param message_id: String form of the message ObjectId.
    :return: Message or None when the id is malformed or unknown.
    :rtype: MessageDocument | None
    """
    oid = _object_id(message_id)
    if oid is None:
        return None
    raw = await docs[MESSAGES].find_one({"_id": oid})
    return MessageDocument.from_raw(raw) if raw is not None else None


async def add_message(docs: AsyncDatabase, message: MessageDocument) -> MessageDocument:
    result = await docs[MESSAGES].insert_one(message.to_raw())
    return message.model_copy(update={"id": str(result.inserted_id)})


async def update_message_name(docs: AsyncDatabase, message_id: str, name: str) -> MessageDocument | None:
    """
    Rename a message and bump ``updated_at``.

    :param docs: Document database.
    :param message_id: String form of the message ObjectId.
    :param name: New name.
    :return: Updated message or None when there is no such message.
    :rtype: MessageDocument | None
    """
    oid = _object_id(message_id)
    if oid is None:
        return None
    raw = await docs[MESSAGES].find_one_and_update(
        {"_id": oid},
        {"$set": {"name": name, "updated_at": datetime.now(UTC)}},
        return_document=ReturnDocument.AFTER,
    )
    return MessageDocument.from_raw(raw) if raw is not None else None


async def delete_message(docs: AsyncDatabase, message_id: str) -> MessageDocument | None:
    oid = _object_id(message_id)
    if oid is None:
        return None
    raw = await docs[MESSAGES].find_one_and_delete({"_id": oid})
    return MessageDocument.from_raw(raw) if raw is not None else None
