"""PostgreSQL Unit of Work implementation."""

from collections.abc import AsyncIterator, Callable
from contextlib import AbstractAsyncContextManager, asynccontextmanager

from psycopg import AsyncConnection
from psycopg_pool import AsyncConnectionPool

from custom_dashboard.infrastructure.persistence.postgres.dashboard_repository import (
    PostgresDashboardRepository,
)
from custom_dashboard.infrastructure.persistence.postgres.role_repository import (
    PostgresRoleRepository,
)
from custom_dashboard.infrastructure.persistence.postgres.tenant_repository import (
    PostgresTenantRepository,
)
from custom_dashboard.infrastructure.persistence.postgres.user_repository import (
    PostgresUserRepository,
)
from custom_dashboard.infrastructure.persistence.postgres.widget_repository import (
    PostgresWidgetRepository,
)


class PostgresUnitOfWork:
    """Repositories sharing one pooled connection and its transaction."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn
        self.tenants = PostgresTenantRepository(conn)
        self.dashboards = PostgresDashboardRepository(conn)
        self.users = PostgresUserRepository(conn)
        self.roles = PostgresRoleRepository(conn)
        self.widgets = PostgresWidgetRepository(conn)

    async def commit(self) -> None:
        await self._conn.commit()

    async def rollback(self) -> None:
        await self._conn.rollback()


def create_uow_factory(
    pool: AsyncConnectionPool,
) -> Callable[[], AbstractAsyncContextManager[PostgresUnitOfWork]]:
    """Factory of units of work: commit on clean exit, roll back on error."""

    @asynccontextmanager
    async def factory() -> AsyncIterator[PostgresUnitOfWork]:
        async with pool.connection() as conn:
            uow = PostgresUnitOfWork(conn)
            try:
                yield uow
            except BaseException:
                await uow.rollback()
                raise
            await uow.commit()

    return factory
