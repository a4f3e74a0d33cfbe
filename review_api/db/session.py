from collections.abc import AsyncGenerator
import logging

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from review_api.db.retry import RetryPolicy

logger = logging.getLogger(__name__)


class RelationalStore:
    """
    Owner of the SQLAlchemy engine and of the session factory.

    Built once at startup and kept on ``app.state``. ``pool_pre_ping`` makes
    the pool replace connections that were dropped by the server.
    """

    def __init__(self, url: str, retry_policy: RetryPolicy | None = None, echo: bool = False) -> None:
        self.engine = create_async_engine(url, echo=echo, pool_pre_ping=True)
        self.session_maker = async_sessionmaker(self.engine, expire_on_commit=False)
        self.retry_policy = retry_policy or RetryPolicy()

    async def _ping(self) -> None:
        async with self.engine.connect() as connection:
            await connection.execute(text("SELECT 1"))

    async def connect(self) -> bool:
        """
        Check that the database answers.

        :return: Whether the database answered within the retry policy.
        :rtype: Bool
        """
        try:
            await self.retry_policy.run(self._ping, store="postgres", retry_on=(SQLAlchemyError, OSError))
        except (SQLAlchemyError, OSError):
            logger.warning("PostgreSQL is unreachable, requests will retry on demand")
            return False
        return True

    async def dispose(self) -> None:
        await self.engine.dispose()


async def get_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    store: RelationalStore = request.app.state.relational
    async with store.session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
