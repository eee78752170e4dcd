"""Token provider port - signs and verifies tenant tokens."""

from typing import Protocol

from custom_dashboard.domain.entities import TenantContext


class TokenProvider(Protocol):
    """Port for issuing and verifying access tokens."""

    def issue(self, tenant: TenantContext) -> str: ...

    def verify(self, token: str) -> TenantContext: ...
