"""Token DTOs."""

from dataclasses import dataclass


@dataclass
class IssuedToken:
    """Signed token with the ids it was issued for."""

    token: str
    tenant_id: int
    subtenant_id: int
