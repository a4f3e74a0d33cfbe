from pathlib import Path
import sys

# Project root on sys.path so that review_api imports without an install
sys.path.append(str(Path(__file__).resolve().parent.parent))

import os

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("SECRET_KEY", "test_secret_key_long_enough_for_hs256_signing")
os.environ.setdefault("TEST_DATABASE_URL", "sqlite+aiosqlite://")

from collections.abc import AsyncGenerator
import copy
from types import SimpleNamespace
from typing import Any

from bson import ObjectId
from httpx import ASGITransport, AsyncClient
import pytest
import pytest_asyncio
from pymongo import ReturnDocument
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from review_api.db.documents import get_documents
from review_api.db.model import Base
from review_api.db.session import get_session
from review_api.main import app
from review_api.services.security.jwt import form_access_token

TEST_EMAIL = "test@example.com"


def _matches(document: dict[str, Any], query: dict[str, Any]) -> bool:
    return all(document.get(key) == value for key, value in query.items())


class FakeCursor:
    """Result of ``FakeCollection.find``."""

    def __init__(self, documents: list[dict[str, Any]]) -> None:
        self._documents = documents

    async def to_list(self, length: int | None = None) -> list[dict[str, Any]]:
        return self._documents if length is None else self._documents[:length]


class FakeCollection:
    """In-memory collection with the subset of the async driver API used by the crud layer."""

    def __init__(self) -> None:
        self.documents: list[dict[str, Any]] = []

    async def insert_one(self, document: dict[str, Any]) -> SimpleNamespace:
        stored = copy.deepcopy(document)
        stored.setdefault("_id", ObjectId())
        self.documents.append(stored)
        return SimpleNamespace(inserted_id=stored["_id"])

    async def find_one(self, query: dict[str, Any]) -> dict[str, Any] | None:
        for document in self.documents:
            if _matches(document, query):
                return copy.deepcopy(document)
        return None

    def find(self, query: dict[str, Any]) -> FakeCursor:
        return FakeCursor([copy.deepcopy(document) for document in self.documents if _matches(document, query)])

    async def find_one_and_update(
        self,
        query: dict[str, Any],
        update: dict[str, Any],
        return_document: bool = ReturnDocument.BEFORE,
    ) -> dict[str, Any] | None:
        for document in self.documents:
            if _matches(document, query):
                before = copy.deepcopy(document)
                document.update(update.get("$set", {}))
                return copy.deepcopy(document) if return_document == ReturnDocument.AFTER else before
        return None

    async def delete_one(self, query: dict[str, Any]) -> SimpleNamespace:
        for index, document in enumerate(self.documents):
            if _matches(document, query):
                del self.documents[index]
                return SimpleNamespace(deleted_count=1)
        return SimpleNamespace(deleted_count=0)

    async def find_one_and_delete(self, query: dict[str, Any]) -> dict[str, Any] | None:
        for index, document in enumerate(self.documents):
            if _matches(document, query):
                return self.documents.pop(index)
        return None


class FakeDatabase:
    """In-memory stand-in for ``AsyncDatabase``, collections are created on first access."""

    def __init__(self) -> None:
        self.collections: dict[str, FakeCollection] = {}

    def __getitem__(self, name: str) -> FakeCollection:
        return self.collections.setdefault(name, FakeCollection())


@pytest_asyncio.fixture
async def db_engine() -> AsyncGenerator[AsyncEngine, None]:
    """In-memory SQLite engine with the schema created, one per test."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(db_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(db_engine, expire_on_commit=False)


@pytest_asyncio.fixture
async def async_session(session_factory: async_sessionmaker[AsyncSession]) -> AsyncGenerator[AsyncSession, None]:
    """
    Session for preparing and checking data in tests.

    :param session_factory: Session factory bound to the test engine.
    :return: Async database session.
    :rtype: AsyncGenerator[AsyncSession, None]
    """
    async with session_factory() as session:
        yield session


@pytest.fixture
def fake_docs() -> FakeDatabase:
    return FakeDatabase()


@pytest_asyncio.fixture
async def client(
    session_factory: async_sessionmaker[AsyncSession],
    fake_docs: FakeDatabase,
) -> AsyncGenerator[AsyncClient, None]:
    """
    Async test client with both stores replaced by the test doubles.

    Every request gets its own session, like with the real store.

    :param session_factory: Session factory bound to the test engine.
    :param fake_docs: In-memory document database.
    :returns: Async FastAPI client.
    :rtype: AsyncGenerator[AsyncClient, None]
    """

    async def override_get_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def override_get_documents() -> FakeDatabase:
        return fake_docs

    original_overrides = app.dependency_overrides.copy()

    app.dependency_overrides[get_session] = override_get_session
    app.dependency_overrides[get_documents] = override_get_documents

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test", follow_redirects=True) as client:
        yield client

    app.dependency_overrides = original_overrides


@pytest.fixture
def auth_headers() -> dict[str, str]:
    """Bearer header of a user identified by TEST_EMAIL."""
    token = form_access_token(user_id=TEST_EMAIL, email=TEST_EMAIL)
    return {"Authorization": f"Bearer {token}"}
