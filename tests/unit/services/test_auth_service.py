from typing import Any
from unittest.mock import AsyncMock

import pytest
from pytest_mock import MockerFixture
from pymongo.errors import PyMongoError

from review_api.core.config import SESSION_USER_KEY
from review_api.exceptions.auth import (
    ExpiredTokenException,
    InvalidCredentialsException,
    InvalidTokenException,
    InvalidTokenFormatException,
    UnauthorizedException,
)
from review_api.exceptions.request import RequestValidationException
from review_api.exceptions.user import (
    EmailAlreadyRegisteredException,
    LoginException,
    SignupException,
    UserNotFoundException,
)
from review_api.schemas.documents import ProfileDocument
from review_api.schemas.token import TokenData
from review_api.services.auth import (
    extract_bearer_token,
    get_current_user,
    get_me_service,
    logout_service,
    signin_service,
    signup_service,
)
from review_api.services.security.hash import get_password_hash
from review_api.services.security.jwt import form_access_token

PROFILE_ID = "507f1f77bcf86cd799439011"


@pytest.fixture
def mock_docs() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def profile() -> ProfileDocument:
    """Profile as stored in the document store."""
    return ProfileDocument(
        id=PROFILE_ID,
        username="tester",
        email="test@example.com",
        password=get_password_hash("secret123"),
    )


######################### TESTS extract_bearer_token ########################


def test_extract_bearer_token_success() -> None:
    assert extract_bearer_token("Bearer abc.def.ghi") == "abc.def.ghi"


def test_extract_bearer_token_trims_header() -> None:
    """Surrounding whitespace is ignored."""
    assert extract_bearer_token("  Bearer abc  ") == "abc"


@pytest.mark.parametrize("header", [None, ""])
def test_extract_bearer_token_missing(header: str | None) -> None:
    with pytest.raises(UnauthorizedException) as exc:
        extract_bearer_token(header)

    assert exc.value.detail == "Unauthorized"
    assert exc.value.headers == {"WWW-Authenticate": "Bearer"}


@pytest.mark.parametrize("header", ["abc", "Basic abc", "Bearer", "Bearer a b", "bearer abc"])
def test_extract_bearer_token_bad_format(header: str) -> None:
    with pytest.raises(InvalidTokenFormatException) as exc:
        extract_bearer_token(header)

    assert exc.value.detail == "Invalid token format"


######################### TESTS get_current_user ########################


@pytest.mark.asyncio
async def test_get_current_user_success() -> None:
    token = form_access_token(user_id=PROFILE_ID, email="test@example.com")

    user = await get_current_user(f"Bearer {token}")

    assert user == TokenData(id=PROFILE_ID, email="test@example.com")


@pytest.mark.asyncio
async def test_get_current_user_invalid_token() -> None:
    with pytest.raises(InvalidTokenException):
        await get_current_user("Bearer not-a-token")


@pytest.mark.asyncio
async def test_get_current_user_expired(mocker: MockerFixture) -> None:
    mocker.patch("review_api.services.auth.validate_token", side_effect=ExpiredTokenException)

    with pytest.raises(ExpiredTokenException):
        await get_current_user("Bearer token")


######################### TESTS signup_service ########################


@pytest.mark.asyncio
async def test_signup_service_success(mocker: MockerFixture, mock_docs: AsyncMock) -> None:
    """The profile is created with a hashed password."""
    mocker.patch("review_api.services.auth.get_profile_by_email", return_value=None)
    mock_create = mocker.patch("review_api.services.auth.create_profile")

    result = await signup_service({"username": "tester", "email": "Test@Example.com", "password": "secret123"}, mock_docs)

    assert result.msg == "User registered successfully"
    created: ProfileDocument = mock_create.call_args.args[1]
    assert created.email == "test@example.com"
    assert created.password != "secret123"


@pytest.mark.asyncio
async def test_signup_service_missing_fields(mock_docs: AsyncMock) -> None:
    with pytest.raises(RequestValidationException) as exc:
        await signup_service({"email": "test@example.com"}, mock_docs)

    assert exc.value.detail == [
        {"field": "username", "message": "Username is required"},
        {"field": "password", "message": "Password is required"},
    ]


@pytest.mark.asyncio
async def test_signup_service_email_taken(mocker: MockerFixture, mock_docs: AsyncMock, profile: ProfileDocument) -> None:
    mocker.patch("review_api.services.auth.get_profile_by_email", return_value=profile)

    with pytest.raises(EmailAlreadyRegisteredException) as exc:
        await signup_service({"username": "other", "email": "test@example.com", "password": "pw"}, mock_docs)

    assert exc.value.detail == "Email already registered"


@pytest.mark.asyncio
async def test_signup_service_store_failure(mocker: MockerFixture, mock_docs: AsyncMock) -> None:
    mocker.patch("review_api.services.auth.get_profile_by_email", side_effect=PyMongoError("down"))

    with pytest.raises(SignupException) as exc:
        await signup_service({"username": "tester", "email": "test@example.com", "password": "pw"}, mock_docs)

    assert exc.value.status_code == 500
    assert exc.value.detail == "Error registering user"


######################### TESTS signin_service ########################


@pytest.mark.asyncio
async def test_signin_service_success(mocker: MockerFixture, mock_docs: AsyncMock, profile: ProfileDocument) -> None:
    """A token is issued and the identity is stored in the session."""
    mocker.patch("review_api.services.auth.get_profile_by_email", return_value=profile)
    session: dict[str, Any] = {}

    result = await signin_service({"email": "test@example.com", "password": "secret123"}, mock_docs, session)

    assert result.user.id == PROFILE_ID
    assert result.user.username == "tester"
    assert session[SESSION_USER_KEY] == {"id": PROFILE_ID, "email": "test@example.com"}
    assert (await get_current_user(f"Bearer {result.token}")).id == PROFILE_ID


@pytest.mark.asyncio
@pytest.mark.parametrize("password", ["wrong-password", None])
async def test_signin_service_bad_credentials(
    mocker: MockerFixture,
    mock_docs: AsyncMock,
    profile: ProfileDocument,
    password: str | None,
) -> None:
    mocker.patch("review_api.services.auth.get_profile_by_email", return_value=profile if password else None)

    with pytest.raises(InvalidCredentialsException) as exc:
        await signin_service({"email": "test@example.com", "password": password or "secret123"}, mock_docs, {})

    assert exc.value.detail == "Invalid credentials"


@pytest.mark.asyncio
async def test_signin_service_store_failure(mocker: MockerFixture, mock_docs: AsyncMock) -> None:
    mocker.patch("review_api.services.auth.get_profile_by_email", side_effect=PyMongoError("down"))

    with pytest.raises(LoginException):
        await signin_service({"email": "test@example.com", "password": "secret123"}, mock_docs, {})


######################### TESTS logout / me ########################


def test_logout_service_clears_session() -> None:
    session: dict[str, Any] = {SESSION_USER_KEY: {"id": PROFILE_ID}}

    result = logout_service(session)

    assert result.msg == "Logged out successfully"
    assert SESSION_USER_KEY not in session


@pytest.mark.asyncio
async def test_get_me_service(mocker: MockerFixture, mock_docs: AsyncMock, profile: ProfileDocument) -> None:
    mocker.patch("review_api.services.auth.get_profile_by_id", return_value=profile)

    result = await get_me_service(TokenData(id=PROFILE_ID, email="test@example.com"), mock_docs)

    assert result.user.model_dump() == {"id": PROFILE_ID, "email": "test@example.com", "username": "tester"}


@pytest.mark.asyncio
async def test_get_me_service_not_found(mocker: MockerFixture, mock_docs: AsyncMock) -> None:
    mocker.patch("review_api.services.auth.get_profile_by_id", return_value=None)

    with pytest.raises(UserNotFoundException) as exc:
        await get_me_service(TokenData(id=PROFILE_ID, email="test@example.com"), mock_docs)

    assert exc.value.detail == "User not found"
