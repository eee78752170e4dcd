"""Tenant repository port."""

from typing import Protocol

from custom_dashboard.domain.entities import Subtenant, Tenant


class TenantRepository(Protocol):
    """Port for tenant code lookups."""

    async def get_active_tenant(self, code: str) -> Tenant | None: ...

    async def get_active_subtenant(self, tenant_id: int, code: str) -> Subtenant | None: ...
