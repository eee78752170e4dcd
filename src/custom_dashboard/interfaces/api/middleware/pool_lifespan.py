"""ASGI lifespan hooks for the database pool."""

import logging
from typing import Any

from psycopg_pool import AsyncConnectionPool

logger = logging.getLogger(__name__)


class PoolLifespanMiddleware:
    """Open the pool on server startup and drain it on shutdown."""

    def __init__(self, pool: AsyncConnectionPool, wait_timeout: float = 30.0) -> None:
        self._pool = pool
        self._wait_timeout = wait_timeout

    async def process_startup(self, scope: dict[str, Any], event: dict[str, Any]) -> None:
        # Fail startup instead of the first request when the database is down.
        await self._pool.open(wait=True, timeout=self._wait_timeout)
        logger.info("Database pool ready (%s)", self._pool.get_stats().get("pool_size"))

    async def process_shutdown(self, scope: dict[str, Any], event: dict[str, Any]) -> None:
        await self._pool.close()
        logger.info("Database pool closed")
