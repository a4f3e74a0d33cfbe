from bson import ObjectId
from pymongo.asynchronous.database import AsyncDatabase

from review_api.db.documents import RATINGS
from review_api.schemas.documents import RatingDocument


async def get_rating(docs: AsyncDatabase, email: str, movie_id: int) -> RatingDocument | None:
    """
    Fetch the rating of a user for a movie.

    :param docs: Document database.
    :param email: Email of the author.
    :param movie_id: Rated movie.
    :return: Rating or None when the user has not rated the movie.
    :rtype: RatingDocument | None
    """
    raw = await docs[RATINGS].find_one({"email": email, "movie_id": movie_id})
    return RatingDocument.from_raw(raw) if raw is not None else None


async def add_rating(docs: AsyncDatabase, rating: RatingDocument) -> RatingDocument:
    result = await docs[RATINGS].insert_one(rating.to_raw())
    return rating.model_copy(update={"id": str(result.inserted_id)})


async def get_ratings_for_movie(docs: AsyncDatabase, movie_id: int) -> list[RatingDocument]:
    raws = await docs[RATINGS].find({"movie_id": movie_id}).to_list(length=None)
    return [RatingDocument.from_raw(raw) for raw in raws]


async def delete_rating(docs: AsyncDatabase, rating_id: str) -> bool:
    """
    Delete a rating by id.

    :param docs: Document database.
    :param rating_id: String form of the ``_id`` of the rating.
    :return: Whether a rating was deleted.
    :rtype: Bool
    """
    result = await docs[RATINGS].delete_one({"_id": ObjectId(rating_id)})
    return result.deleted_count > 0
