import logging
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from review_api.db.crud.movie import (
    create_movie,
    delete_movie,
    get_movie_by_id,
    get_movies,
    get_seen_movies,
    get_top_rated_movies,
    update_movie,
)
from review_api.exceptions.movie import (
    InvalidMovieIdException,
    MovieCreationException,
    MovieDeletionException,
    MovieNotFoundException,
    MovieQueryException,
    MovieUpdateException,
    UserNotAuthenticatedException,
)
from review_api.exceptions.request import RequestValidationException
from review_api.schemas.movie import MovieResponse
from review_api.schemas.success_msg import SuccessResponse
from review_api.schemas.token import TokenData
from review_api.services.validation import parse_movie_id, validate_movie_create, validate_movie_update

logger = logging.getLogger(__name__)


def _movie_id(raw: str) -> int:
    movie_id = parse_movie_id(raw)
    if movie_id is None:
        raise InvalidMovieIdException
    return movie_id


async def get_movies_service(db: AsyncSession) -> list[MovieResponse]:
    try:
        movies = await get_movies(db)
    except SQLAlchemyError as e:
        logger.exception("Error fetching movies")
        raise MovieQueryException from e
    return [MovieResponse.model_validate(movie) for movie in movies]


async def get_top_rated_service(db: AsyncSession) -> list[MovieResponse]:
    try:
        movies = await get_top_rated_movies(db)
    except SQLAlchemyError as e:
        logger.exception("Error fetching top rated movies")
        raise MovieQueryException from e
    return [MovieResponse.model_validate(movie) for movie in movies]


async def get_seen_movies_service(current_user: TokenData | None, db: AsyncSession) -> list[MovieResponse]:
    """
    Movies seen by the authenticated caller.

    :param current_user: Identity from the token.
    :param db: Async database session.
    :return: Seen movies.
    :rtype: list[MovieResponse]
    :raises UserNotAuthenticatedException: If there is no caller identity.
    :raises MovieQueryException: If the database fails.
    """
    if current_user is None or not current_user.email:
        raise UserNotAuthenticatedException

    try:
        movies = await get_seen_movies(db, email=current_user.email)
    except SQLAlchemyError as e:
        logger.exception("Error fetching seen movies", extra={"email": current_user.email})
        raise MovieQueryException from e
    return [MovieResponse.model_validate(movie) for movie in movies]


async def get_movie_service(movie_id_raw: str, db: AsyncSession) -> MovieResponse:
    """
    Fetch one movie.

    :param movie_id_raw: Movie id from the path.
    :param db: Async database session.
    :return: Movie.
    :rtype: MovieResponse
    :raises InvalidMovieIdException: If the id is not a positive integer.
    :raises MovieNotFoundException: If there is no such movie.
    :raises MovieQueryException: If the database fails.
    """
    movie_id = _movie_id(movie_id_raw)
    try:
        movie = await get_movie_by_id(db, movie_id)
    except SQLAlchemyError as e:
        logger.exception("Error fetching movie", extra={"movie_id": movie_id})
        raise MovieQueryException from e

    if movie is None:
        raise MovieNotFoundException
    return MovieResponse.model_validate(movie)


async def create_movie_service(body: dict[str, Any], db: AsyncSession) -> MovieResponse:
    errors = validate_movie_create(body)
    if errors:
        raise RequestValidationException(errors)

    try:
        movie = await create_movie(db, title=body["title"], description=body["description"])
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        logger.exception("Error adding movie")
        raise MovieCreationException from e
    return MovieResponse.model_validate(movie)


async def update_movie_service(movie_id_raw: str, body: dict[str, Any], db: AsyncSession) -> MovieResponse:
    """
    Update title and/or description of a movie; absent fields keep their value.

    :param movie_id_raw: Movie id from the path.
    :param body: Normalized body (title, description).
    :param db: Async database session.
    :return: Updated movie.
    :rtype: MovieResponse
    :raises InvalidMovieIdException: If the id is not a positive integer.
    :raises RequestValidationException: If no field is given or a bound is violated.
    :raises MovieNotFoundException: If there is no such movie.
    :raises MovieUpdateException: If the database fails.
    """
    movie_id = _movie_id(movie_id_raw)
    errors = validate_movie_update(body)
    if errors:
        raise RequestValidationException(errors)

    try:
        movie = await update_movie(db, movie_id, title=body.get("title"), description=body.get("description"))
        if movie is None:
            await db.rollback()
            raise MovieNotFoundException
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        logger.exception("Error updating movie", extra={"movie_id": movie_id})
        raise MovieUpdateException from e
    return MovieResponse.model_validate(movie)


async def delete_movie_service(movie_id_raw: str, db: AsyncSession) -> SuccessResponse:
    movie_id = _movie_id(movie_id_raw)
    try:
        deleted = await delete_movie(db, movie_id)
        if not deleted:
            await db.rollback()
            raise MovieNotFoundException
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        logger.exception("Error deleting movie", extra={"movie_id": movie_id})
        raise MovieDeletionException from e
    return SuccessResponse(msg="Movie deleted successfully")
