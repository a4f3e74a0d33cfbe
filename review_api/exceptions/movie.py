from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_401_UNAUTHORIZED,
    HTTP_404_NOT_FOUND,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

from review_api.exceptions.base import AppHTTPException


class InvalidMovieIdException(AppHTTPException):
    """Movie id is not a positive integer."""

    status_code = HTTP_400_BAD_REQUEST
    detail = "Invalid movie ID"
    example = {"detail": "Invalid movie ID"}


class MovieNotFoundException(AppHTTPException):
    """No movie with this id."""

    status_code = HTTP_404_NOT_FOUND
    detail = "Movie not found"
    example = {"detail": "Movie not found"}


class MovieQueryException(AppHTTPException):
    """Relational store failure in the catalog endpoints."""

    status_code = HTTP_500_INTERNAL_SERVER_ERROR
    detail = "Error fetching movies"
    example = {"detail": "Error fetching movies"}


class MovieCreationException(MovieQueryException):
    """Failed to insert the movie."""

    detail = "Error adding movie"
    example = {"detail": "Error adding movie"}


class MovieUpdateException(MovieQueryException):
    """Failed to update the movie."""

    detail = "Error updating movie"
    example = {"detail": "Error updating movie"}


class MovieDeletionException(MovieQueryException):
    """Failed to delete the movie."""

    detail = "Error deleting movie"
    example = {"detail": "Error deleting movie"}


class UserNotAuthenticatedException(AppHTTPException):
    """Seen movies requested without an identity."""

    status_code = HTTP_401_UNAUTHORIZED
    detail = "User not authenticated"
    example = {"detail": "User not authenticated"}
