from collections.abc import Sequence

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from review_api.db.model import Movie, SeenMovie

TOP_RATED_LIMIT = 10


async def get_movies(db: AsyncSession) -> Sequence[Movie]:
    query = select(Movie).order_by(Movie.movie_id)
    return (await db.execute(query)).scalars().all()


async def get_top_rated_movies(db: AsyncSession, limit: int = TOP_RATED_LIMIT) -> Sequence[Movie]:
    """
    Best rated movies first, unrated movies last.

    :param db: Async database session.
    :param limit: Maximum number of movies.
    :return: Movies ordered by rating.
    :rtype: Sequence[Movie]
    """
    query = select(Movie).order_by(Movie.rating.desc().nulls_last()).limit(limit)
    return (await db.execute(query)).scalars().all()


async def get_seen_movies(db: AsyncSession, email: str) -> Sequence[Movie]:
    """
    Movies seen by a user.

    :param db: Async database session.
    :param email: Email of the user.
    :return: Seen movies.
    :rtype: Sequence[Movie]
    """
    query = (
        select(Movie)
        .join(SeenMovie, SeenMovie.movie_id == Movie.movie_id)
        .where(SeenMovie.email == email)
        .order_by(Movie.movie_id)
    )
    return (await db.execute(query)).scalars().all()


async def get_movie_by_id(db: AsyncSession, movie_id: int) -> Movie | None:
    query = select(Movie).where(Movie.movie_id == movie_id)
    return (await db.execute(query)).scalar_one_or_none()


async def create_movie(db: AsyncSession, title: str, description: str) -> Movie:
    movie = Movie(title=title, description=description)
    db.add(movie)
    await db.flush()

    return movie


async def update_movie(db: AsyncSession, movie_id: int, title: str | None, description: str | None) -> Movie | None:
    """
    Update title and/or description, keeping the current value of the fields passed as None.

    :param db: Async database session.
    :param movie_id: Movie id.
    :param title: New title or None.
    :param description: New description or None.
    :return: Updated movie or None when there is no such movie.
    :rtype: Movie | None
    """
    movie = await get_movie_by_id(db, movie_id)
    if movie is None:
        return None

    if title is not None:
        movie.title = title
    if description is not None:
        movie.description = description
    await db.flush()

    return movie


async def delete_movie(db: AsyncSession, movie_id: int) -> bool:
    """
    Delete a movie.

    :param db: Async database session.
    :param movie_id: Movie id.
    :return: Whether a movie was deleted.
    :rtype: Bool
    """
    await db.execute(delete(SeenMovie).where(SeenMovie.movie_id == movie_id))
    result = await db.execute(delete(Movie).where(Movie.movie_id == movie_id))
    return bool(result.rowcount)


async def update_movie_rating(db: AsyncSession, movie_id: int, rating: float) -> None:
    query = update(Movie).where(Movie.movie_id == movie_id).values(rating=rating)
    await db.execute(query)
