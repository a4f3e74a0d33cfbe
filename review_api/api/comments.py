from fastapi import APIRouter, Depends
from starlette import status

from review_api.api.dependencies import get_documents_ann, request_body_ann
from review_api.api.openapi import AUTH_EXCEPTIONS, generate_responses
from review_api.exceptions.comment import CommentCreationException, CommentQueryException
from review_api.exceptions.movie import InvalidMovieIdException
from review_api.exceptions.request import RequestValidationException
from review_api.schemas.comment import CommentsResponse
from review_api.schemas.success_msg import SuccessResponse
from review_api.services.auth import get_current_user
from review_api.services.comments import add_comment_service, get_comments_service

router = APIRouter(
    prefix="/comments",
    tags=["comments"],
    dependencies=[Depends(get_current_user)],
    responses=generate_responses(*AUTH_EXCEPTIONS),
)


@router.get(
    "/{movie_id}",
    status_code=status.HTTP_200_OK,
    response_model=CommentsResponse,
    summary="Comments of a movie",
    responses=generate_responses(InvalidMovieIdException, CommentQueryException),
)
async def list_comments(movie_id: str, docs: get_documents_ann) -> CommentsResponse:
    return await get_comments_service(movie_id_raw=movie_id, docs=docs)


@router.post(
    "/{movie_id}",
    status_code=status.HTTP_200_OK,
    response_model=SuccessResponse,
    summary="Comment a movie",
    responses=generate_responses(RequestValidationException, CommentCreationException),
)
async def add_comment(movie_id: str, body: request_body_ann, docs: get_documents_ann) -> SuccessResponse:
    """
    Leave a comment with a rating on a movie.

    :param movie_id: Movie id.
    :param body: Rating, username, title and comment.
    :param docs: Document store database.
    :return: Success message.
    :rtype: SuccessResponse
    """
    return await add_comment_service(movie_id_raw=movie_id, body=body, docs=docs)
