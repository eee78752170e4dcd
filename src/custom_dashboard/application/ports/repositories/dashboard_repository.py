"""Dashboard repository port."""

from __future__ import annotations

from typing import Protocol

from custom_dashboard.domain.entities import Dashboard, TenantContext, WidgetSetting


class DashboardRepository(Protocol):
    """Port for dashboard persistence. Every call is scoped to a tenant."""

    async def list(self, tenant: TenantContext) -> list[Dashboard]: ...

    async def list_for_user(self, user_id: int, tenant: TenantContext) -> list[Dashboard]: ...

    async def get_by_id(self, dashboard_id: int, tenant: TenantContext) -> Dashboard | None: ...

    async def exists(self, dashboard_id: int, tenant: TenantContext) -> bool: ...

    async def create(
        self,
        tenant: TenantContext,
        name: str,
        description: str,
        widget_cfg: list[WidgetSetting],
    ) -> int: ...

    async def update(
        self,
        dashboard_id: int,
        tenant: TenantContext,
        name: str,
        description: str,
        widget_cfg: list[WidgetSetting],
    ) -> None: ...

    async def delete(self, dashboard_ids: list[int], tenant: TenantContext) -> int: ...

    async def replace_custom_widgets(
        self, dashboard_id: int, tenant: TenantContext, widget_ids: list[int]
    ) -> None: ...

    async def list_user_ids(self, dashboard_id: int, tenant: TenantContext) -> list[int]: ...

    async def replace_users(
        self, dashboard_id: int, tenant: TenantContext, user_ids: list[int]
    ) -> None: ...

    async def has_user(self, dashboard_id: int, user_id: int, tenant: TenantContext) -> bool: ...

    async def add_user(self, dashboard_id: int, user_id: int, tenant: TenantContext) -> None: ...

    async def remove_user(self, dashboard_id: int, user_id: int, tenant: TenantContext) -> bool: ...
