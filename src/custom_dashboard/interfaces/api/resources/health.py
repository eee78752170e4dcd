"""Health check endpoints."""

import logging
from datetime import UTC, datetime

import falcon.asgi
import psycopg
from psycopg_pool import AsyncConnectionPool, PoolTimeout

from custom_dashboard.infrastructure.persistence.postgres.connection import ping

logger = logging.getLogger(__name__)


class HealthResource:
    """Health and readiness endpoints."""

    def __init__(self, pool: AsyncConnectionPool | None = None) -> None:
        self._pool = pool

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /api/health - liveness."""
        resp.media = {
            "status": "ok",
            "message": "Custom Dashboard API is running",
            "timestamp": datetime.now(UTC).isoformat(),
        }
        resp.status = falcon.HTTP_200

    async def on_get_ready(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /api/health/ready - readiness (database)."""
        if self._pool is not None:
            try:
                await ping(self._pool)
            except (psycopg.Error, PoolTimeout) as e:
                logger.warning("Readiness check failed: %s", e)
                resp.media = {"status": "unavailable"}
                resp.status = falcon.HTTP_503
                return
        resp.media = {"status": "ready"}
        resp.status = falcon.HTTP_200
