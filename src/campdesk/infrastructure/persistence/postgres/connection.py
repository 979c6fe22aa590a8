"""PostgreSQL async connection pool."""

import logging

import psycopg
from psycopg_pool import AsyncConnectionPool

logger = logging.getLogger(__name__)


def create_pool(conninfo: str, min_size: int = 2, max_size: int = 10) -> AsyncConnectionPool:
    """Create async connection pool.

    Pool is created with open=False; PoolLifespanMiddleware opens it on
    ASGI startup.
    """
    return AsyncConnectionPool(
        conninfo=conninfo,
        min_size=min_size,
        max_size=max_size,
        open=False,
    )


async def ping(pool: AsyncConnectionPool) -> bool:
    """Return True when a connection can run a trivial query."""
    try:
        async with pool.connection() as conn:
            await conn.execute("SELECT 1")
    except psycopg.Error:
        logger.warning("Database readiness check failed", exc_info=True)
        return False
    return True
