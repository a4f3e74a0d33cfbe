from fastapi import APIRouter
from starlette import status

from review_api.api.dependencies import get_session_ann, request_body_ann
from review_api.api.openapi import AUTH_EXCEPTIONS, generate_responses
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
from review_api.services.auth import get_current_user_ann
from review_api.services.movies import (
    create_movie_service,
    delete_movie_service,
    get_movie_service,
    get_movies_service,
    get_seen_movies_service,
    get_top_rated_service,
    update_movie_service,
)

router = APIRouter(prefix="/movies", tags=["movies"])


@router.get(
    "",
    status_code=status.HTTP_200_OK,
    response_model=list[MovieResponse],
    summary="List movies",
    responses=generate_responses(MovieQueryException),
)
async def list_movies(db: get_session_ann) -> list[MovieResponse]:
    return await get_movies_service(db=db)


@router.get(
    "/top",
    status_code=status.HTTP_200_OK,
    response_model=list[MovieResponse],
    summary="Top rated movies",
    description="Ten best rated movies, movies without a rating come last",
    responses=generate_responses(MovieQueryException),
)
async def top_rated_movies(db: get_session_ann) -> list[MovieResponse]:
    return await get_top_rated_service(db=db)


@router.get(
    "/me",
    status_code=status.HTTP_200_OK,
    response_model=list[MovieResponse],
    summary="Movies seen by the current user",
    responses=generate_responses(*AUTH_EXCEPTIONS, UserNotAuthenticatedException, MovieQueryException),
)
async def seen_movies(current_user: get_current_user_ann, db: get_session_ann) -> list[MovieResponse]:
    """
    Movies seen by the caller.

    :param current_user: Current user.
    :param db: Async database session.
    :return: Seen movies.
    :rtype: list[MovieResponse]
    """
    return await get_seen_movies_service(current_user=current_user, db=db)


@router.get(
    "/{movie_id}",
    status_code=status.HTTP_200_OK,
    response_model=MovieResponse,
    summary="Get a movie",
    responses=generate_responses(
        *AUTH_EXCEPTIONS,
        InvalidMovieIdException,
        MovieNotFoundException,
        MovieQueryException,
    ),
)
async def read_movie(movie_id: str, current_user: get_current_user_ann, db: get_session_ann) -> MovieResponse:
    return await get_movie_service(movie_id_raw=movie_id, db=db)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=MovieResponse,
    summary="Add a movie",
    responses=generate_responses(*AUTH_EXCEPTIONS, RequestValidationException, MovieCreationException),
)
async def add_movie(current_user: get_current_user_ann, body: request_body_ann, db: get_session_ann) -> MovieResponse:
    """
    Add a movie to the catalog.

    :param current_user: Current user.
    :param body: Title and description.
    :param db: Async database session.
    :return: Created movie.
    :rtype: MovieResponse
    """
    return await create_movie_service(body=body, db=db)


@router.put(
    "/{movie_id}",
    status_code=status.HTTP_200_OK,
    response_model=MovieResponse,
    summary="Update a movie",
    responses=generate_responses(
        *AUTH_EXCEPTIONS,
        InvalidMovieIdException,
        RequestValidationException,
        MovieNotFoundException,
        MovieUpdateException,
    ),
)
async def edit_movie(
    movie_id: str,
    current_user: get_current_user_ann,
    body: request_body_ann,
    db: get_session_ann,
) -> MovieResponse:
    """
    Update the title and/or the description of a movie.

    :param movie_id: Movie id.
    :param current_user: Current user.
    :param body: Title and/or description.
    :param db: Async database session.
    :return: Updated movie.
    :rtype: MovieResponse
    """
    return await update_movie_service(movie_id_raw=movie_id, body=body, db=db)


@router.delete(
    "/{movie_id}",
    status_code=status.HTTP_200_OK,
    response_model=SuccessResponse,
    summary="Delete a movie",
    responses=generate_responses(
        *AUTH_EXCEPTIONS,
        InvalidMovieIdException,
        MovieNotFoundException,
        MovieDeletionException,
    ),
)
async def remove_movie(movie_id: str, current_user: get_current_user_ann, db: get_session_ann) -> SuccessResponse:
    return await delete_movie_service(movie_id_raw=movie_id, db=db)
