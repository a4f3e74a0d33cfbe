from typing import Any

from bson import ObjectId
from httpx import AsyncClient
import pytest
from starlette import status

TEST_EMAIL = "test@example.com"


async def _create(client: AsyncClient, headers: dict[str, str], **payload: Any) -> dict[str, Any]:
    body = {"name": "Greetings", "content": "Hello from the test suite", **payload}
    response = await client.post("/messages", json=body, headers=headers)
    assert response.status_code == status.HTTP_200_OK
    return response.json()


######################### TESTS POST, GET /messages ########################


@pytest.mark.asyncio
async def test_create_and_read(client: AsyncClient, auth_headers: dict[str, str]) -> None:
    """The author of a message is the caller."""
    created = await _create(client, auth_headers)

    assert created["id"]
    assert created["user"] == TEST_EMAIL

    response = await client.get(f"/messages/{created['id']}", headers=auth_headers)
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["content"] == "Hello from the test suite"

    response = await client.get("/messages", headers=auth_headers)
    assert [message["id"] for message in response.json()] == [created["id"]]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("payload", "error"),
    [
        ({"name": "Hi"}, {"field": "name", "message": "Message name must be between 3 and 100 characters"}),
        ({"content": "Short"}, {"field": "content", "message": "Message content must be between 10 and 1000 characters"}),
    ],
)
async def test_create_invalid(
    client: AsyncClient,
    auth_headers: dict[str, str],
    payload: dict[str, str],
    error: dict[str, str],
) -> None:
    body = {"name": "Greetings", "content": "Hello from the test suite", **payload}

    response = await client.post("/messages", json=body, headers=auth_headers)

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json() == {"detail": [error]}


@pytest.mark.asyncio
@pytest.mark.parametrize("message_id", ["not-an-object-id", str(ObjectId())])
async def test_read_missing(client: AsyncClient, auth_headers: dict[str, str], message_id: str) -> None:
    """Malformed and unknown ids are both not found."""
    response = await client.get(f"/messages/{message_id}", headers=auth_headers)

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {"detail": "Message not found"}


@pytest.mark.asyncio
async def test_messages_need_token(client: AsyncClient) -> None:
    response = await client.get("/messages")

    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert response.json() == {"detail": "Unauthorized"}


######################### TESTS PUT /messages ########################


@pytest.mark.asyncio
async def test_rename(client: AsyncClient, auth_headers: dict[str, str]) -> None:
    created = await _create(client, auth_headers)

    response = await client.put(f"/messages/{created['id']}", json={"name": "Renamed"}, headers=auth_headers)

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["name"] == "Renamed"
    assert response.json()["content"] == created["content"]


@pytest.mark.asyncio
async def test_rename_without_id(client: AsyncClient, auth_headers: dict[str, str]) -> None:
    response = await client.put("/messages", json={"name": "Renamed"}, headers=auth_headers)

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json() == {"detail": [{"field": None, "message": "Message name and ID are required"}]}


@pytest.mark.asyncio
async def test_rename_missing(client: AsyncClient, auth_headers: dict[str, str]) -> None:
    response = await client.put(f"/messages/{ObjectId()}", json={"name": "Renamed"}, headers=auth_headers)

    assert response.status_code == status.HTTP_404_NOT_FOUND


######################### TESTS DELETE /messages ########################


@pytest.mark.asyncio
async def test_delete(client: AsyncClient, auth_headers: dict[str, str]) -> None:
    created = await _create(client, auth_headers)

    response = await client.delete(f"/messages/{created['id']}", headers=auth_headers)

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"msg": "Message deleted"}

    response = await client.delete(f"/messages/{created['id']}", headers=auth_headers)
    assert response.status_code == status.HTTP_404_NOT_FOUND


@pytest.mark.asyncio
async def test_delete_without_id(client: AsyncClient, auth_headers: dict[str, str]) -> None:
    response = await client.delete("/messages", headers=auth_headers)

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json() == {"detail": "Message ID is required"}
