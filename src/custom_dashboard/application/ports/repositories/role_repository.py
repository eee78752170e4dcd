"""Role directory port."""

from typing import Protocol

from custom_dashboard.domain.entities import Role, TenantContext


class RoleRepository(Protocol):
    """Port for reading roles and their members."""

    async def list_with_members(self, tenant: TenantContext) -> list[Role]: ...
