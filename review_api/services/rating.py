import logging
from typing import Any

from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import PyMongoError
from sqlalchemy.ext.asyncio import AsyncSession

from review_api.db.crud.movie import get_movie_by_id, update_movie_rating
from review_api.db.crud.rating import add_rating, delete_rating, get_rating, get_ratings_for_movie
from review_api.exceptions.base import AppHTTPException
from review_api.exceptions.movie import MovieNotFoundException
from review_api.exceptions.rating import (
    AlreadyRatedException,
    InvalidRatingParametersException,
    RatingOutOfRangeException,
    RatingQueryException,
)
from review_api.schemas.documents import RatingDocument
from review_api.schemas.success_msg import SuccessResponse
from review_api.schemas.token import TokenData
from review_api.services.validation import parse_int, parse_movie_id, validate_rating

logger = logging.getLogger(__name__)


def mean_rating(ratings: list[RatingDocument]) -> float:
    """Plain arithmetic mean, no rounding."""
    return sum(rating.rating for rating in ratings) / len(ratings)


async def _discard_rating(docs: AsyncDatabase, rating_id: str, movie_id: int, email: str) -> None:
    """Remove a rating whose movie mean could not be committed, so the caller can rate again."""
    try:
        await delete_rating(docs, rating_id)
    except PyMongoError:
        logger.exception("Could not discard rating", extra={"movie_id": movie_id, "email": email})


async def add_rating_service(
    movie_id_raw: str,
    body: dict[str, Any],
    current_user: TokenData | None,
    db: AsyncSession,
    docs: AsyncDatabase,
) -> SuccessResponse:
    """
    Record the rating of the caller for a movie and refresh the movie mean.

    The movie check, the rating insert and the mean update run inside one
    relational transaction. The rating itself lives in the document store, so
    the duplicate check and the insert are not atomic with each other. When a
    step after the insert fails, the stored rating is deleted again before the
    transaction is rolled back.

    :param movie_id_raw: Movie id from the path.
    :param body: Normalized body (rating).
    :param current_user: Identity from the token.
    :param db: Async database session.
    :param docs: Document store database.
    :return: Success message.
    :rtype: SuccessResponse
    :raises InvalidRatingParametersException: If the movie id, the rating or the identity is missing or malformed.
    :raises RatingOutOfRangeException: If the rating is outside of [1, 5].
    :raises MovieNotFoundException: If there is no such movie.
    :raises AlreadyRatedException: If the caller already rated the movie.
    :raises RatingQueryException: On any other failure.
    """
    errors = validate_rating(movie_id_raw, body, current_user)
    if errors:
        if errors[0].field == "rating":
            raise RatingOutOfRangeException
        raise InvalidRatingParametersException

    # validate_rating guarantees these parse and that there is a caller
    movie_id = parse_movie_id(movie_id_raw)
    rating = parse_int(body["rating"])
    email = current_user.email

    saved: RatingDocument | None = None
    try:
        if await get_movie_by_id(db, movie_id) is None:
            await db.rollback()
            raise MovieNotFoundException

        # TODO: a unique index on (email, movie_id) in the ratings collection would
        # close the window between this check and the insert below.
        if await get_rating(docs, email=email, movie_id=movie_id) is not None:
            await db.rollback()
            raise AlreadyRatedException

        saved = await add_rating(docs, RatingDocument(movie_id=movie_id, email=email, rating=rating))
        ratings = await get_ratings_for_movie(docs, movie_id)
        mean = mean_rating(ratings) if ratings else float(rating)
        await update_movie_rating(db, movie_id, mean)

        await db.commit()
    except AppHTTPException:
        raise
    except Exception as e:
        if saved is not None and saved.id is not None:
            await _discard_rating(docs, saved.id, movie_id=movie_id, email=email)
        await db.rollback()
        logger.exception("Exception occurred while adding rating", extra={"movie_id": movie_id, "email": email})
        raise RatingQueryException from e

    logger.info("Rating added", extra={"movie_id": movie_id, "email": email})
    return SuccessResponse(msg="Rating added successfully")
