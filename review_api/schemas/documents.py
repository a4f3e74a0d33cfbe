from datetime import UTC, datetime
from typing import Any, Self

from pydantic import BaseModel, Field, field_validator


def _now() -> datetime:
    return datetime.now(UTC)


class Document(BaseModel):
    """
    Base class for documents kept in the document store.

    :cvar str | None id: String form of the ``_id`` assigned by the store.
    """

    id: str | None = None

    @classmethod
    def from_raw(cls, raw: dict[str, Any]) -> Self:
        """
        Build the schema from a raw document returned by the driver.

        :param raw: Document with an ``_id`` key.
        :return: Validated document.
        """
        data = {key: value for key, value in raw.items() if key != "_id"}
        data["id"] = str(raw["_id"])
        return cls.model_validate(data)

    def to_raw(self) -> dict[str, Any]:
        """Document ready to be inserted, without the id."""
        return self.model_dump(exclude={"id"})


class RatingDocument(Document):
    """
    Rating of one user for one movie.

    The store-level bound is [0, 5]; the write path narrows it to [1, 5].

    :cvar int movie_id: Rated movie.
    :cvar str email: Email of the author.
    :cvar float rating: Rating value.
    :cvar datetime created_at: Creation time.
    """

    movie_id: int
    email: str
    rating: float = Field(ge=0, le=5)
    created_at: datetime = Field(default_factory=_now)


class CommentDocument(Document):
    """
    Comment left on a movie.

    :cvar int movie_id: Commented movie.
    :cvar str username: Name of the author.
    :cvar str title: Comment title.
    :cvar str comment: Comment body.
    :cvar float rating: Rating given with the comment, [0, 5].
    :cvar int upvotes: Upvotes, never negative.
    :cvar int downvotes: Downvotes, never negative.
    :cvar datetime created_at: Creation time.
    """

    movie_id: int
    username: str
    title: str
    comment: str
    rating: float = Field(ge=0, le=5)
    upvotes: int = Field(default=0, ge=0)
    downvotes: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=_now)


class MessageDocument(Document):
    """
    Message written by a user.

    :cvar str | None name: Message name.
    :cvar str | None content: Message text.
    :cvar str | None user: Profile id of the author.
    :cvar datetime created_at: Creation time.
    :cvar datetime updated_at: Last update time.
    """

    name: str | None = None
    content: str | None = None
    user: str | None = None
    created_at: datetime = Field(default_factory=_now)
    updated_at: datetime = Field(default_factory=_now)


class ProfileDocument(Document):
    """
    Lightweight user profile used by the /auth flow.

    :cvar str | None username: Display name, trimmed.
    :cvar str email: Email, trimmed and lower-cased.
    :cvar str password: Password hash.
    :cvar list[str] messages: Ids of the messages of the user.
    """

    username: str | None = None
    email: str
    password: str
    messages: list[str] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=_now)
    updated_at: datetime = Field(default_factory=_now)

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, value: str) -> str:
        """Emails are stored trimmed and in lower case."""
        return value.strip().lower()

    @field_validator("username", mode="before")
    @classmethod
    def strip_username(cls, value: str | None) -> str | None:
        """Usernames are stored trimmed."""
        return value.strip() if isinstance(value, str) else value
