import logging

from fastapi import Request
from pymongo import AsyncMongoClient
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import PyMongoError

from review_api.db.retry import RetryPolicy

logger = logging.getLogger(__name__)

RATINGS = "ratings"
COMMENTS = "comments"
MESSAGES = "messages"
PROFILES = "users"


class DocumentStore:
    """
    Owner of the MongoDB client.

    The driver reconnects on its own after a dropped connection, so a failed
    startup ping is logged and the application keeps running.
    """

    def __init__(
        self,
        uri: str,
        db_name: str,
        retry_policy: RetryPolicy | None = None,
        timeout_ms: int = 5000,
    ) -> None:
        self.client: AsyncMongoClient = AsyncMongoClient(uri, serverSelectionTimeoutMS=timeout_ms)
        self.db_name = db_name
        self.retry_policy = retry_policy or RetryPolicy()

    @property
    def database(self) -> AsyncDatabase:
        return self.client[self.db_name]

    async def _ping(self) -> None:
        await self.client.admin.command("ping")

    async def connect(self) -> bool:
        """
        Check that MongoDB answers.

        :return: Whether MongoDB answered within the retry policy.
        :rtype: Bool
        """
        try:
            await self.retry_policy.run(self._ping, store="mongodb", retry_on=(PyMongoError,))
        except PyMongoError:
            logger.warning("MongoDB is unreachable, the driver keeps reconnecting in the background")
            return False
        return True

    async def close(self) -> None:
        await self.client.close()


async def get_documents(request: Request) -> AsyncDatabase:
    store: DocumentStore = request.app.state.documents
    return store.database
