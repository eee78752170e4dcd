"""User directory port."""

from typing import Protocol

from custom_dashboard.domain.entities import DirectoryUser, TenantContext


class UserRepository(Protocol):
    """Port for reading the tenant's user directory."""

    async def list_active(self, tenant: TenantContext) -> list[DirectoryUser]: ...
