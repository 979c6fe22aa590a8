"""Pool lifespan middleware - opens pool on startup, closes on shutdown."""

import logging
from typing import Any

from psycopg_pool import AsyncConnectionPool, PoolTimeout

logger = logging.getLogger(__name__)


class PoolLifespanMiddleware:
    """Ties the connection pool to the ASGI lifespan.

    Startup waits until the pool holds min_size connections, so a server with
    an unreachable database fails at boot instead of on the first request.
    """

    def __init__(self, pool: AsyncConnectionPool, wait_timeout: float = 30.0) -> None:
        self._pool = pool
        self._wait_timeout = wait_timeout

    async def process_startup(self, scope: dict[str, Any], event: dict[str, Any]) -> None:
        await self._pool.open()
        try:
            await self._pool.wait(timeout=self._wait_timeout)
        except PoolTimeout:
            logger.error(
                "Database pool not ready after %.0fs; check DATABASE_URL", self._wait_timeout
            )
            raise
        logger.info(
            "Database pool ready (min=%s max=%s)", self._pool.min_size, self._pool.max_size
        )

    async def process_shutdown(self, scope: dict[str, Any], event: dict[str, Any]) -> None:
        await self._pool.close()
        logger.info("Database pool closed")
