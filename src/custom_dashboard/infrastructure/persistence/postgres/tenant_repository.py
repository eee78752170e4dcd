"""PostgreSQL tenant repository implementation."""

from psycopg import AsyncConnection

from custom_dashboard.domain.entities import Subtenant, Tenant


class PostgresTenantRepository:
    """Tenant code lookups."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_active_tenant(self, code: str) -> Tenant | None:
        """Get ACTIVE tenant by code."""
        cur = await self._conn.execute(
            "SELECT id, tenant_code, status FROM tenant "
            "WHERE tenant_code = %s AND status = 'ACTIVE' LIMIT 1",
            (code,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return Tenant(id=r[0], code=r[1], status=r[2])

    async def get_active_subtenant(self, tenant_id: int, code: str) -> Subtenant | None:
        """Get ACTIVE subtenant of tenant by code."""
        cur = await self._conn.execute(
            "SELECT id, tenant_id, subtenant_code, status FROM subtenant "
            "WHERE subtenant_code = %s AND tenant_id = %s AND status = 'ACTIVE' LIMIT 1",
            (code, tenant_id),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return Subtenant(id=r[0], tenant_id=r[1], code=r[2], status=r[3])
