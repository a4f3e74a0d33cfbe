import logging
from typing import Any

from pydantic import ValidationError
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import PyMongoError

from review_api.db.crud.comment import add_comment, get_comments_by_movie
from review_api.exceptions.comment import CommentCreationException, CommentQueryException
from review_api.exceptions.movie import InvalidMovieIdException
from review_api.exceptions.request import RequestValidationException
from review_api.schemas.comment import CommentsResponse
from review_api.schemas.documents import CommentDocument
from review_api.schemas.success_msg import SuccessResponse
from review_api.services.validation import parse_int, parse_movie_id, validate_comment

logger = logging.getLogger(__name__)


async def get_comments_service(movie_id_raw: str, docs: AsyncDatabase) -> CommentsResponse:
    """
    Comments of a movie.

    :param movie_id_raw: Movie id from the path.
    :param docs: Document store database.
    :return: Comments of the movie.
    :rtype: CommentsResponse
    :raises InvalidMovieIdException: If the id is not a positive integer.
    :raises CommentQueryException: If the store fails.
    """
    movie_id = parse_movie_id(movie_id_raw)
    if movie_id is None:
        raise InvalidMovieIdException

    try:
        comments = await get_comments_by_movie(docs, movie_id)
    except (PyMongoError, ValidationError) as e:
        logger.exception("Exception occurred while fetching comments", extra={"movie_id": movie_id})
        raise CommentQueryException from e

    return CommentsResponse(comments=comments)


async def add_comment_service(movie_id_raw: str, body: dict[str, Any], docs: AsyncDatabase) -> SuccessResponse:
    """
    Add a comment to a movie.

    :param movie_id_raw: Movie id from the path.
    :param body: Normalized body (rating, username, title, comment).
    :param docs: Document store database.
    :return: Success message.
    :rtype: SuccessResponse
    :raises RequestValidationException: On the first failing check.
    :raises CommentCreationException: If the store fails.
    """
    errors = validate_comment(movie_id_raw, body)
    if errors:
        raise RequestValidationException(errors)

    movie_id = parse_movie_id(movie_id_raw)
    try:
        comment = CommentDocument(
            movie_id=movie_id,
            username=body["username"],
            title=body["title"],
            comment=body["comment"],
            rating=parse_int(body["rating"]),
        )
        await add_comment(docs, comment)
    except (PyMongoError, ValidationError) as e:
        logger.exception("Exception occurred while adding comment", extra={"movie_id": movie_id})
        raise CommentCreationException from e

    return SuccessResponse(msg="Comment added")
