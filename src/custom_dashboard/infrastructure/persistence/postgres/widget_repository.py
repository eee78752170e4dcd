"""PostgreSQL custom widget repository implementation."""

from psycopg import AsyncConnection

from custom_dashboard.domain.entities import CustomWidget, TenantContext

WIDGET_COLUMNS = "id, widget_name, widget_desc, widget_url, widget_chart, widget_filter"


def row_to_widget(r: tuple) -> CustomWidget:
    return CustomWidget(
        id=r[0],
        name=r[1],
        description=r[2],
        url=r[3],
        chart=r[4],
        filter=r[5],
    )


class PostgresWidgetRepository:
    """Custom widget repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def list_custom(self, tenant: TenantContext) -> list[CustomWidget]:
        """List tenant widgets by name."""
        cur = await self._conn.execute(
            f"SELECT {WIDGET_COLUMNS} FROM dashboard_widget "
            "WHERE tenant_id = %s AND subtenant_id = %s ORDER BY widget_name",
            (tenant.tenant_id, tenant.subtenant_id),
        )
        rows = await cur.fetchall()
        return [row_to_widget(r) for r in rows]
