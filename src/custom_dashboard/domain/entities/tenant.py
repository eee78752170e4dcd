"""Tenant and subtenant entities."""

from dataclasses import dataclass


@dataclass
class Tenant:
    """Top-level customer."""

    id: int
    code: str
    status: str


@dataclass
class Subtenant:
    """Customer partition inside a tenant."""

    id: int
    tenant_id: int
    code: str
    status: str


@dataclass(frozen=True)
class TenantContext:
    """Tenant scope carried by an authenticated request."""

    tenant_id: int
    subtenant_id: int
    tenant_code: str | None = None
    subtenant_code: str | None = None
