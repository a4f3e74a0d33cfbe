import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
import logging
from typing import TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class RetryPolicy:
    """
    Bounded retry with a fixed delay between attempts.

    ``max_retries + 1`` attempts are made in total: one initial attempt and up
    to ``max_retries`` retries.
    """

    max_retries: int = 3
    delay_seconds: float = 0.5

    async def run(
        self,
        operation: Callable[[], Awaitable[T]],
        store: str,
        retry_on: tuple[type[BaseException], ...],
    ) -> T:
        """
        Run ``operation`` until it succeeds or the attempts are exhausted.

        :param operation: Coroutine factory to call on every attempt.
        :param store: Store name, used in the log records.
        :param retry_on: Exceptions that trigger another attempt.
        :return: Result of the first successful attempt.
        :raises: The last error once every attempt has failed.
        """
        max_attempts = self.max_retries + 1
        for attempt in range(1, max_attempts + 1):
            try:
                result = await operation()
            except retry_on as exc:
                logger.error(
                    "connect_failure",
                    extra={"event": "connect_failure", "store": store, "attempt": attempt, "error_type": type(exc).__name__},
                )
                if attempt == max_attempts:
                    logger.error("connect_give_up", extra={"event": "connect_give_up", "store": store})
                    raise
                await asyncio.sleep(self.delay_seconds)
            else:
                logger.info("connect_success", extra={"event": "connect_success", "store": store, "attempt": attempt})
                return result

        raise RuntimeError("Retry loop exited without a result")
