"""
Request validation.

Every ``validate_*`` function is pure: it inspects the (normalized) body and
returns the list of field errors, an empty list meaning the request may go to
the data layer. Bounds are inclusive.

Granularity differs between resources: signup/signin report one
error per missing field, comments/movies/messages report only the first failing
check, and ratings collapse presence, parsing and identity into one generic
error.
"""

from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any

from review_api.schemas.token import TokenData
from review_api.schemas.validation import FieldError

MISSING_PARAMETERS = "Missing parameters"
INVALID_MOVIE_ID = "Invalid movie ID"
INVALID_RATING_PARAMETERS = "Missing or invalid parameters"
RATING_RANGE = "Rating must be between 1 and 5"

USERNAME_LENGTH = (3, 50)
TITLE_LENGTH = (3, 100)
DESCRIPTION_LENGTH = (10, 1000)
COMMENT_LENGTH = (10, 1000)
MESSAGE_NAME_LENGTH = (3, 100)
MESSAGE_CONTENT_LENGTH = (10, 1000)
RATING_RANGE_BOUNDS = (1, 5)
MIN_PASSWORD_LENGTH = 6


def normalize_body(body: Mapping[str, Any], now: datetime | None = None) -> dict[str, Any]:
    """
    Canonicalize a request body before validation.

    Empty strings become None, so validators never have to tell "" from an
    absent field, and the request date is stamped under ``creation_date``.

    :param body: Decoded JSON body.
    :param now: Current time, defaults to now in UTC.
    :return: New normalized mapping.
    :rtype: dict[str, Any]
    :raises TypeError: If the body is not a JSON object.
    """
    if not isinstance(body, Mapping):
        raise TypeError(f"Request body must be a JSON object, got {type(body).__name__}")

    normalized: dict[str, Any] = {key: (None if value == "" else value) for key, value in body.items()}
    normalized["creation_date"] = (now or datetime.now(UTC)).date().isoformat()
    return normalized


def is_missing(value: Any) -> bool:
    return value is None or value == ""


def length_between(value: Any, bounds: tuple[int, int]) -> bool:
    low, high = bounds
    return isinstance(value, str) and low <= len(value) <= high


def parse_int(value: Any) -> int | None:
    """
    Parse an integer from a JSON value or a path parameter.

    :param value: Raw value.
    :return: Integer or None when the value is not integral.
    :rtype: int | None
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def parse_movie_id(value: Any) -> int | None:
    """Movie ids are positive integers."""
    movie_id = parse_int(value)
    if movie_id is None or movie_id <= 0:
        return None
    return movie_id


def _required(body: Mapping[str, Any], *fields: str) -> list[FieldError]:
    return [
        FieldError(field=field, message=f"{field.capitalize()} is required")
        for field in fields
        if is_missing(body.get(field))
    ]


def validate_signup(body: Mapping[str, Any]) -> list[FieldError]:
    return _required(body, "username", "email", "password")


def validate_signin(body: Mapping[str, Any]) -> list[FieldError]:
    return _required(body, "email", "password")


def validate_registration(body: Mapping[str, Any]) -> list[FieldError]:
    """Email, username, password and country are required; city and street are optional."""
    if any(is_missing(body.get(field)) for field in ("email", "username", "password", "country")):
        return [FieldError(message=MISSING_PARAMETERS)]
    return []


def validate_login(body: Mapping[str, Any]) -> list[FieldError]:
    if any(is_missing(body.get(field)) for field in ("email", "password")):
        return [FieldError(message=MISSING_PARAMETERS)]
    return []


def validate_comment(movie_id: Any, body: Mapping[str, Any]) -> list[FieldError]:
    """
    Validate a new comment, reporting only the first failing check.

    Order: movie id, presence, rating range, username, title, comment length.

    :param movie_id: Raw movie id from the path.
    :param body: Normalized body.
    :return: At most one error.
    :rtype: list[FieldError]
    """
    if parse_movie_id(movie_id) is None:
        return [FieldError(field="movie_id", message=INVALID_MOVIE_ID)]

    if any(is_missing(body.get(field)) for field in ("rating", "username", "title", "comment")):
        return [FieldError(message=MISSING_PARAMETERS)]

    rating = parse_int(body["rating"])
    low, high = RATING_RANGE_BOUNDS
    if rating is None or not low <= rating <= high:
        return [FieldError(field="rating", message=RATING_RANGE)]

    if not length_between(body["username"], USERNAME_LENGTH):
        return [FieldError(field="username", message="Username must be between 3 and 50 characters")]

    if not length_between(body["title"], TITLE_LENGTH):
        return [FieldError(field="title", message="Title must be between 3 and 100 characters")]

    if not length_between(body["comment"], COMMENT_LENGTH):
        return [FieldError(field="comment", message="Comment must be between 10 and 1000 characters")]

    return []


def _movie_bounds(body: Mapping[str, Any]) -> list[FieldError]:
    title = body.get("title")
    if title is not None and not length_between(title, TITLE_LENGTH):
        return [FieldError(field="title", message="Title must be between 3 and 100 characters")]

    description = body.get("description")
    if description is not None and not length_between(description, DESCRIPTION_LENGTH):
        return [FieldError(field="description", message="Description must be between 10 and 1000 characters")]

    return []


def validate_movie_create(body: Mapping[str, Any]) -> list[FieldError]:
    if is_missing(body.get("title")) or is_missing(body.get("description")):
        return [FieldError(message="Title and description are required")]
    return _movie_bounds(body)


def validate_movie_update(body: Mapping[str, Any]) -> list[FieldError]:
    if is_missing(body.get("title")) and is_missing(body.get("description")):
        return [FieldError(message="At least one field (title or description) is required")]
    return _movie_bounds(body)


def validate_message(body: Mapping[str, Any]) -> list[FieldError]:
    if not length_between(body.get("name"), MESSAGE_NAME_LENGTH):
        return [FieldError(field="name", message="Message name must be between 3 and 100 characters")]

    if not length_between(body.get("content"), MESSAGE_CONTENT_LENGTH):
        return [FieldError(field="content", message="Message content must be between 10 and 1000 characters")]

    return []


def validate_message_update(message_id: str | None, body: Mapping[str, Any]) -> list[FieldError]:
    if is_missing(message_id) or is_missing(body.get("name")):
        return [FieldError(message="Message name and ID are required")]

    if not length_between(body["name"], MESSAGE_NAME_LENGTH):
        return [FieldError(field="name", message="Message name must be between 3 and 100 characters")]

    return []


def validate_rating(movie_id: Any, body: Mapping[str, Any], user: TokenData | None) -> list[FieldError]:
    """
    Validate a rating submission.

    A missing or malformed movie id or rating, or a missing caller identity,
    are all reported as one generic error; only the range gets its own message.

    :param movie_id: Raw movie id from the path.
    :param body: Normalized body.
    :param user: Authenticated caller.
    :return: At most one error.
    :rtype: list[FieldError]
    """
    rating = parse_int(body.get("rating"))
    if parse_movie_id(movie_id) is None or rating is None or user is None or not user.email:
        return [FieldError(message=INVALID_RATING_PARAMETERS)]

    low, high = RATING_RANGE_BOUNDS
    if not low <= rating <= high:
        return [FieldError(field="rating", message=RATING_RANGE)]

    return []


def validate_password_change(body: Mapping[str, Any], user: TokenData | None) -> list[FieldError]:
    old_password = body.get("oldPassword")
    new_password = body.get("newPassword")
    if is_missing(old_password) or is_missing(new_password) or user is None or not user.email:
        return [FieldError(message=MISSING_PARAMETERS)]

    if old_password == new_password:
        return [FieldError(field="newPassword", message="New password cannot be equal to old password")]

    if not isinstance(new_password, str) or len(new_password) < MIN_PASSWORD_LENGTH:
        return [FieldError(field="newPassword", message="New password must be at least 6 characters long")]

    return []
