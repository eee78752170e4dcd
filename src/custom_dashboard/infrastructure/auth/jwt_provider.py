"""HS256 JWT provider for tenant tokens."""

import re
from datetime import UTC, datetime, timedelta

import jwt

from custom_dashboard.domain.entities import TenantContext
from custom_dashboard.domain.exceptions import AuthenticationFailed

_DURATION = re.compile(r"^\s*(\d+)\s*([smhd]?)\s*$")
_UNITS = {"": 1, "s": 1, "m": 60, "h": 3600, "d": 86400}


def parse_duration(value: str | int) -> timedelta:
    """Parse ``3600``, ``"45s"``, ``"30m"``, ``"24h"`` or ``"7d"``."""
    if isinstance(value, int):
        return timedelta(seconds=value)
    match = _DURATION.match(value)
    if not match:
        raise ValueError(f"Invalid duration: {value!r}")
    amount, unit = match.groups()
    return timedelta(seconds=int(amount) * _UNITS[unit])


class JWTProvider:
    """Signs tenant/subtenant ids into a token and reads them back."""

    algorithm = "HS256"

    def __init__(self, secret: str, expires_in: str | int = "24h") -> None:
        self._secret = secret
        self._ttl = parse_duration(expires_in)

    def issue(self, tenant: TenantContext) -> str:
        """Sign a token for the tenant context."""
        now = datetime.now(UTC)
        payload = {
            "tenant": tenant.tenant_id,
            "subtenant": tenant.subtenant_id,
            "tenantCode": tenant.tenant_code,
            "subtenantCode": tenant.subtenant_code,
            "iat": now,
            "exp": now + self._ttl,
        }
        return jwt.encode(payload, self._secret, algorithm=self.algorithm)

    def verify(self, token: str) -> TenantContext:
        """Decode and validate token; raise AuthenticationFailed otherwise."""
        try:
            payload = jwt.decode(token, self._secret, algorithms=[self.algorithm])
            return TenantContext(
                tenant_id=int(payload["tenant"]),
                subtenant_id=int(payload["subtenant"]),
                tenant_code=payload.get("tenantCode"),
                subtenant_code=payload.get("subtenantCode"),
            )
        except (jwt.InvalidTokenError, KeyError, TypeError, ValueError) as e:
            raise AuthenticationFailed("Invalid or expired token") from e
