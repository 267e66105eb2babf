"""Short retry policy for catalog calls."""

import asyncio
import logging
from collections.abc import Callable
from typing import TypeVar

_logger = logging.getLogger(__name__)

T = TypeVar("T")


async def call_with_retry(
    func: Callable[[], T],
    *,
    action: str,
    retry_attempts: int = 1,
    retry_delay_seconds: float = 0.3,
) -> T:
    """Call a repository function, retrying a bounded number of times."""
    attempt = 0
    while True:
        try:
            return func()
        except Exception as exc:
            attempt += 1
            _logger.warning(
                "Catalog %s failed (attempt %s/%s): %s",
                action,
                attempt,
                retry_attempts + 1,
                exc,
            )
            if attempt > retry_attempts:
                raise
            await asyncio.sleep(retry_delay_seconds)
