from fastapi import APIRouter
from starlette import status

from review_api.api.dependencies import get_documents_ann, get_session_ann, request_body_ann
from review_api.api.openapi import AUTH_EXCEPTIONS, generate_responses
from review_api.exceptions.movie import MovieNotFoundException
from review_api.exceptions.rating import (
    AlreadyRatedException,
    InvalidRatingParametersException,
    RatingOutOfRangeException,
    RatingQueryException,
)
from review_api.schemas.success_msg import SuccessResponse
from review_api.services.auth import get_current_user_ann
from review_api.services.rating import add_rating_service

router = APIRouter(prefix="/ratings", tags=["ratings"])


@router.post(
    "/{movie_id}",
    status_code=status.HTTP_200_OK,
    response_model=SuccessResponse,
    summary="Rate a movie",
    description="Each user rates a movie once, the movie rating becomes the mean of all its ratings",
    responses=generate_responses(
        *AUTH_EXCEPTIONS,
        InvalidRatingParametersException,
        RatingOutOfRangeException,
        AlreadyRatedException,
        MovieNotFoundException,
        RatingQueryException,
    ),
)
async def rate_movie(
    movie_id: str,
    current_user: get_current_user_ann,
    body: request_body_ann,
    db: get_session_ann,
    docs: get_documents_ann,
) -> SuccessResponse:
    """
    Rate a movie from 1 to 5.

    :param movie_id: Movie id.
    :param current_user: Current user.
    :param body: Rating.
    :param db: Async database session.
    :param docs: Document store database.
    :return: Success message.
    :rtype: SuccessResponse
    """
    return await add_rating_service(
        movie_id_raw=movie_id,
        body=body,
        current_user=current_user,
        db=db,
        docs=docs,
    )
