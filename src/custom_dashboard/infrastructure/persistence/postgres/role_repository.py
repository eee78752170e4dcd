"""PostgreSQL role directory implementation."""

from psycopg import AsyncConnection

from custom_dashboard.domain.entities import Role, TenantContext


class PostgresRoleRepository:
    """Reads roles with their ordered member ids."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def list_with_members(self, tenant: TenantContext) -> list[Role]:
        """List roles ordered by id; members ordered by user id."""
        cur = await self._conn.execute(
            """
            SELECT r.id, r.role_name, r.role_type,
                   COALESCE(array_agg(m.user_id ORDER BY m.user_id)
                            FILTER (WHERE m.user_id IS NOT NULL), '{}')
            FROM role r
            LEFT JOIN role_member m ON m.role_id = r.id
            WHERE r.tenant_id = %s AND r.subtenant_id = %s
            GROUP BY r.id, r.role_name, r.role_type
            ORDER BY r.id
            """,
            (tenant.tenant_id, tenant.subtenant_id),
        )
        rows = await cur.fetchall()
        return [
            Role(id=r[0], name=r[1], role_type=r[2], members=tuple(r[3]))
            for r in rows
        ]
