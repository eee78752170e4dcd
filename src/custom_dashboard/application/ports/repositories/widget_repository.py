"""Custom widget repository port."""

from typing import Protocol

from custom_dashboard.domain.entities import CustomWidget, TenantContext


class WidgetRepository(Protocol):
    """Port for tenant-defined widgets."""

    async def list_custom(self, tenant: TenantContext) -> list[CustomWidget]: ...
