"""PostgreSQL user directory implementation."""

from psycopg import AsyncConnection

from custom_dashboard.domain.entities import DirectoryUser, TenantContext
from custom_dashboard.domain.value_objects import ProfileName
from custom_dashboard.infrastructure.persistence.postgres.display_name import (
    resolve_display_name,
)


class PostgresUserRepository:
    """Reads active users with their profile and display name."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def list_active(self, tenant: TenantContext) -> list[DirectoryUser]:
        """List active, non-deleted users ordered by profile then id."""
        cur = await self._conn.execute(
            """
            SELECT u.id, u.user_attrs, u.status, p.profile_name, c.display_attr
            FROM app_user u
            JOIN identity_profile p
              ON p.id = u.profile_id AND p.tenant_id = u.tenant_id AND p.subtenant_id = u.subtenant_id
            LEFT JOIN identity_profile_attrcfg c
              ON c.profile_id = u.profile_id AND c.tenant_id = u.tenant_id AND c.subtenant_id = u.subtenant_id
            WHERE u.tenant_id = %s AND u.subtenant_id = %s
              AND NOT u.is_deleted AND u.status = 'ACTIVE'
            ORDER BY p.profile_name, u.id
            """,
            (tenant.tenant_id, tenant.subtenant_id),
        )
        rows = await cur.fetchall()
        return [
            DirectoryUser(
                id=r[0],
                display_name=resolve_display_name(r[0], r[4], r[1]),
                profile_name=ProfileName(r[3]) if r[3] else None,
                status=r[2],
            )
            for r in rows
        ]
