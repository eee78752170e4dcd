"""PostgreSQL async connection pool."""

import logging

from psycopg_pool import AsyncConnectionPool

from custom_dashboard.config import Settings

logger = logging.getLogger(__name__)


def create_pool(settings: Settings) -> AsyncConnectionPool:
    """Build the pool unopened; the ASGI lifespan opens and closes it."""
    logger.debug(
        "Connection pool sized %s..%s",
        settings.db_pool_min_size,
        settings.db_pool_max_size,
    )
    return AsyncConnectionPool(
        conninfo=settings.database_url,
        min_size=settings.db_pool_min_size,
        max_size=max(settings.db_pool_min_size, settings.db_pool_max_size),
        timeout=settings.db_pool_timeout,
        open=False,
    )


async def ping(pool: AsyncConnectionPool, timeout: float = 5.0) -> None:
    """Round-trip ``SELECT 1``; raises psycopg or pool errors when unreachable."""
    async with pool.connection(timeout=timeout) as conn:
        await conn.execute("SELECT 1")
