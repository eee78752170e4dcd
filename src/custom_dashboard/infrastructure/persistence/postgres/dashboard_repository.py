"""PostgreSQL dashboard repository implementation."""

from __future__ import annotations

import json

from psycopg import AsyncConnection
from psycopg.types.json import Jsonb

from custom_dashboard.domain.entities import (
    Dashboard,
    DashboardUser,
    TenantContext,
    WidgetSetting,
)
from custom_dashboard.infrastructure.persistence.postgres.display_name import (
    resolve_display_name,
)
from custom_dashboard.infrastructure.persistence.postgres.widget_repository import (
    row_to_widget,
)


def _parse_widget_cfg(raw: object) -> list[WidgetSetting]:
    """Widget settings from the stored JSON; unreadable config means none."""
    if raw is None:
        return []
    if isinstance(raw, (str, bytes)):
        try:
            raw = json.loads(raw)
        except json.JSONDecodeError:
            return []
    if not isinstance(raw, list):
        return []
    return [
        WidgetSetting(dwname=w["dwname"], status=str(w.get("status", "false")).lower())
        for w in raw
        if isinstance(w, dict) and "dwname" in w
    ]


def _row_to_dashboard(r: tuple, tenant: TenantContext) -> Dashboard:
    return Dashboard(
        id=r[0],
        tenant_id=tenant.tenant_id,
        subtenant_id=tenant.subtenant_id,
        name=r[1],
        description=r[2] or "",
        widget_cfg=_parse_widget_cfg(r[3]),
    )


class PostgresDashboardRepository:
    """Dashboard repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def list(self, tenant: TenantContext) -> list[Dashboard]:
        """List dashboards, newest first."""
        cur = await self._conn.execute(
            "SELECT id, dashboard_name, dashboard_desc, widget_cfg FROM dashboard "
            "WHERE tenant_id = %s AND subtenant_id = %s ORDER BY id DESC",
            (tenant.tenant_id, tenant.subtenant_id),
        )
        rows = await cur.fetchall()
        return [_row_to_dashboard(r, tenant) for r in rows]

    async def list_for_user(self, user_id: int, tenant: TenantContext) -> list[Dashboard]:
        """List dashboards a user is mapped to, by name."""
        cur = await self._conn.execute(
            "SELECT d.id, d.dashboard_name, d.dashboard_desc, d.widget_cfg "
            "FROM dashboard d JOIN dashboard_user_map m ON m.dashboard_id = d.id "
            "WHERE m.user_id = %s AND m.tenant_id = %s AND m.subtenant_id = %s "
            "ORDER BY d.dashboard_name",
            (user_id, tenant.tenant_id, tenant.subtenant_id),
        )
        rows = await cur.fetchall()
        return [_row_to_dashboard(r, tenant) for r in rows]

    async def get_by_id(self, dashboard_id: int, tenant: TenantContext) -> Dashboard | None:
        """Get dashboard with custom widgets and users."""
        params = (dashboard_id, tenant.tenant_id, tenant.subtenant_id)
        cur = await self._conn.execute(
            "SELECT id, dashboard_name, dashboard_desc, widget_cfg FROM dashboard "
            "WHERE id = %s AND tenant_id = %s AND subtenant_id = %s",
            params,
        )
        r = await cur.fetchone()
        if not r:
            return None
        dashboard = _row_to_dashboard(r, tenant)

        cur = await self._conn.execute(
            "SELECT w.id, w.widget_name, w.widget_desc, w.widget_url, w.widget_chart, w.widget_filter "
            "FROM dashboard_widget_map m JOIN dashboard_widget w ON w.id = m.widget_id "
            "WHERE m.dashboard_id = %s AND m.tenant_id = %s AND m.subtenant_id = %s "
            "ORDER BY m.id",
            params,
        )
        dashboard.custom_widgets = [row_to_widget(w) for w in await cur.fetchall()]

        cur = await self._conn.execute(
            """
            SELECT m.id, m.user_id, u.user_attrs, p.profile_name, c.display_attr
            FROM dashboard_user_map m
            LEFT JOIN app_user u
              ON u.id = m.user_id AND u.tenant_id = m.tenant_id AND u.subtenant_id = m.subtenant_id
            LEFT JOIN identity_profile p ON p.id = u.profile_id
            LEFT JOIN identity_profile_attrcfg c
              ON c.profile_id = u.profile_id AND c.tenant_id = m.tenant_id AND c.subtenant_id = m.subtenant_id
            WHERE m.dashboard_id = %s AND m.tenant_id = %s AND m.subtenant_id = %s
            ORDER BY m.id
            """,
            params,
        )
        dashboard.users = [
            DashboardUser(
                mapping_id=u[0],
                user_id=u[1],
                user_name=resolve_display_name(u[1], u[4], u[2]),
                profile=u[3],
            )
            for u in await cur.fetchall()
        ]
        return dashboard

    async def exists(self, dashboard_id: int, tenant: TenantContext) -> bool:
        """Check dashboard exists for tenant."""
        cur = await self._conn.execute(
            "SELECT 1 FROM dashboard WHERE id = %s AND tenant_id = %s AND subtenant_id = %s",
            (dashboard_id, tenant.tenant_id, tenant.subtenant_id),
        )
        return await cur.fetchone() is not None

    async def create(
        self,
        tenant: TenantContext,
        name: str,
        description: str,
        widget_cfg: list[WidgetSetting],
    ) -> int:
        """Create dashboard, return its id."""
        cur = await self._conn.execute(
            "INSERT INTO dashboard (tenant_id, subtenant_id, dashboard_name, dashboard_desc, widget_cfg) "
            "VALUES (%s, %s, %s, %s, %s) RETURNING id",
            (
                tenant.tenant_id,
                tenant.subtenant_id,
                name,
                description,
                Jsonb([{"dwname": w.dwname, "status": w.status} for w in widget_cfg]),
            ),
        )
        r = await cur.fetchone()
        return r[0]

    async def update(
        self,
        dashboard_id: int,
        tenant: TenantContext,
        name: str,
        description: str,
        widget_cfg: list[WidgetSetting],
    ) -> None:
        """Update name, description and widget config."""
        await self._conn.execute(
            "UPDATE dashboard SET dashboard_name=%s, dashboard_desc=%s, widget_cfg=%s "
            "WHERE id=%s AND tenant_id=%s AND subtenant_id=%s",
            (
                name,
                description,
                Jsonb([{"dwname": w.dwname, "status": w.status} for w in widget_cfg]),
                dashboard_id,
                tenant.tenant_id,
                tenant.subtenant_id,
            ),
        )

    async def delete(self, dashboard_ids: list[int], tenant: TenantContext) -> int:
        """Delete dashboards and their mappings, return number of dashboards deleted."""
        params = (dashboard_ids, tenant.tenant_id, tenant.subtenant_id)
        await self._conn.execute(
            "DELETE FROM dashboard_widget_map "
            "WHERE dashboard_id = ANY(%s) AND tenant_id = %s AND subtenant_id = %s",
            params,
        )
        await self._conn.execute(
            "DELETE FROM dashboard_user_map "
            "WHERE dashboard_id = ANY(%s) AND tenant_id = %s AND subtenant_id = %s",
            params,
        )
        cur = await self._conn.execute(
            "DELETE FROM dashboard WHERE id = ANY(%s) AND tenant_id = %s AND subtenant_id = %s",
            params,
        )
        return cur.rowcount

    async def replace_custom_widgets(
        self, dashboard_id: int, tenant: TenantContext, widget_ids: list[int]
    ) -> None:
        """Replace the custom widgets linked to a dashboard."""
        await self._conn.execute(
            "DELETE FROM dashboard_widget_map "
            "WHERE dashboard_id = %s AND tenant_id = %s AND subtenant_id = %s",
            (dashboard_id, tenant.tenant_id, tenant.subtenant_id),
        )
        for widget_id in widget_ids:
            await self._conn.execute(
                "INSERT INTO dashboard_widget_map (tenant_id, subtenant_id, dashboard_id, widget_id) "
                "VALUES (%s, %s, %s, %s)",
                (tenant.tenant_id, tenant.subtenant_id, dashboard_id, widget_id),
            )

    async def list_user_ids(self, dashboard_id: int, tenant: TenantContext) -> list[int]:
        """User ids mapped to a dashboard."""
        cur = await self._conn.execute(
            "SELECT user_id FROM dashboard_user_map "
            "WHERE dashboard_id = %s AND tenant_id = %s AND subtenant_id = %s ORDER BY user_id",
            (dashboard_id, tenant.tenant_id, tenant.subtenant_id),
        )
        return [r[0] for r in await cur.fetchall()]

    async def replace_users(
        self, dashboard_id: int, tenant: TenantContext, user_ids: list[int]
    ) -> None:
        """Replace the user access mapping of a dashboard."""
        await self._conn.execute(
            "DELETE FROM dashboard_user_map "
            "WHERE dashboard_id = %s AND tenant_id = %s AND subtenant_id = %s",
            (dashboard_id, tenant.tenant_id, tenant.subtenant_id),
        )
        for user_id in user_ids:
            await self._conn.execute(
                "INSERT INTO dashboard_user_map (tenant_id, subtenant_id, dashboard_id, user_id) "
                "VALUES (%s, %s, %s, %s)",
                (tenant.tenant_id, tenant.subtenant_id, dashboard_id, user_id),
            )

    async def has_user(self, dashboard_id: int, user_id: int, tenant: TenantContext) -> bool:
        """Check whether user is mapped to dashboard."""
        cur = await self._conn.execute(
            "SELECT 1 FROM dashboard_user_map "
            "WHERE dashboard_id = %s AND user_id = %s AND tenant_id = %s AND subtenant_id = %s",
            (dashboard_id, user_id, tenant.tenant_id, tenant.subtenant_id),
        )
        return await cur.fetchone() is not None

    async def add_user(self, dashboard_id: int, user_id: int, tenant: TenantContext) -> None:
        """Map user to dashboard."""
        await self._conn.execute(
            "INSERT INTO dashboard_user_map (tenant_id, subtenant_id, dashboard_id, user_id) "
            "VALUES (%s, %s, %s, %s)",
            (tenant.tenant_id, tenant.subtenant_id, dashboard_id, user_id),
        )

    async def remove_user(self, dashboard_id: int, user_id: int, tenant: TenantContext) -> bool:
        """Unmap user from dashboard, return whether a mapping existed."""
        cur = await self._conn.execute(
            "DELETE FROM dashboard_user_map "
            "WHERE dashboard_id = %s AND user_id = %s AND tenant_id = %s AND subtenant_id = %s",
            (dashboard_id, user_id, tenant.tenant_id, tenant.subtenant_id),
        )
        return cur.rowcount > 0
