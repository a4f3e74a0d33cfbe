from unittest.mock import MagicMock

import pytest
from pytest_mock import MockerFixture
from pymongo.errors import PyMongoError

from review_api.exceptions.comment import CommentCreationException, CommentQueryException
from review_api.exceptions.movie import InvalidMovieIdException
from review_api.exceptions.request import RequestValidationException
from review_api.schemas.documents import CommentDocument
from review_api.services.comments import add_comment_service, get_comments_service

SERVICE = "review_api.services.comments"
BODY = {"rating": "4", "username": "reviewer", "title": "Great", "comment": "Loved every minute of it"}


@pytest.mark.asyncio
async def test_add_comment_service_success(mocker: MockerFixture) -> None:
    """The comment is stored with a numeric rating and zero votes."""
    mock_add = mocker.patch(f"{SERVICE}.add_comment")

    result = await add_comment_service("3", dict(BODY), MagicMock())

    assert result.msg == "Comment added"
    stored: CommentDocument = mock_add.call_args.args[1]
    assert (stored.movie_id, stored.rating, stored.upvotes, stored.downvotes) == (3, 4, 0, 0)


@pytest.mark.asyncio
async def test_add_comment_service_validation(mocker: MockerFixture) -> None:
    mock_add = mocker.patch(f"{SERVICE}.add_comment")

    with pytest.raises(RequestValidationException) as exc:
        await add_comment_service("3", {**BODY, "username": "ab"}, MagicMock())

    assert exc.value.detail == [{"field": "username", "message": "Username must be between 3 and 50 characters"}]
    mock_add.assert_not_awaited()


@pytest.mark.asyncio
async def test_add_comment_service_failure(mocker: MockerFixture) -> None:
    mocker.patch(f"{SERVICE}.add_comment", side_effect=PyMongoError("down"))

    with pytest.raises(CommentCreationException) as exc:
        await add_comment_service("3", dict(BODY), MagicMock())

    assert exc.value.detail == "Exception occurred while adding comment"


@pytest.mark.asyncio
async def test_get_comments_service(mocker: MockerFixture) -> None:
    comment = CommentDocument(movie_id=3, username="reviewer", title="Great", comment="Loved it a lot", rating=4)
    mocker.patch(f"{SERVICE}.get_comments_by_movie", return_value=[comment])

    result = await get_comments_service("3", MagicMock())

    assert result.comments == [comment]


@pytest.mark.asyncio
async def test_get_comments_service_errors(mocker: MockerFixture) -> None:
    with pytest.raises(InvalidMovieIdException):
        await get_comments_service("x", MagicMock())

    mocker.patch(f"{SERVICE}.get_comments_by_movie", side_effect=PyMongoError("down"))
    with pytest.raises(CommentQueryException) as exc:
        await get_comments_service("3", MagicMock())

    assert exc.value.detail == "Exception occurred while fetching comments"
