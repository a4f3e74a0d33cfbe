from bson import ObjectId
from bson.errors import InvalidId
from pymongo.asynchronous.database import AsyncDatabase

from review_api.db.documents import PROFILES
from review_api.schemas.documents import ProfileDocument


async def get_profile_by_email(docs: AsyncDatabase, email: str) -> ProfileDocument | None:
    raw = await docs[PROFILES].find_one({"email": email.strip().lower()})
    return ProfileDocument.from_raw(raw) if raw is not None else None


async def get_profile_by_id(docs: AsyncDatabase, profile_id: str) -> ProfileDocument | None:
    """
    Fetch a profile by id.

    :param docs: Document database.
    :param profile_id: String form of the profile ObjectId.
    :return: Profile or None when the id is malformed or unknown.
    :rtype: ProfileDocument | None
    """
    try:
        oid = ObjectId(profile_id)
    except (InvalidId, TypeError):
        return None
    raw = await docs[PROFILES].find_one({"_id": oid})
    return ProfileDocument.from_raw(raw) if raw is not None else None


async def create_profile(docs: AsyncDatabase, profile: ProfileDocument) -> ProfileDocument:
    result = await docs[PROFILES].insert_one(profile.to_raw())
    return profile.model_copy(update={"id": str(result.inserted_id)})
