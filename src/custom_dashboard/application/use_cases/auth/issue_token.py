"""Issue token use case."""

import logging

from custom_dashboard.application.dto.token_dto import IssuedToken
from custom_dashboard.application.ports import TokenProvider
from custom_dashboard.domain.entities import TenantContext
from custom_dashboard.domain.exceptions import NotFound, ValidationError

logger = logging.getLogger(__name__)


class IssueTokenUseCase:
    """Map tenant/subtenant codes to ids and sign a token for them."""

    def __init__(
        self,
        unit_of_work_factory: type,
        token_provider: TokenProvider,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._token_provider = token_provider

    async def execute(self, tenant_code: str | None, subtenant_code: str | None) -> IssuedToken:
        """Resolve ACTIVE tenant and subtenant by code and issue a token."""
        codes = (tenant_code, subtenant_code)
        if not all(isinstance(code, str) and code for code in codes):
            raise ValidationError("Tenant and subtenant are required")

        async with self._uow_factory() as uow:
            tenant = await uow.tenants.get_active_tenant(tenant_code)
            if not tenant:
                raise NotFound(f"Tenant '{tenant_code}' not found or inactive")

            subtenant = await uow.tenants.get_active_subtenant(tenant.id, subtenant_code)
            if not subtenant:
                raise NotFound(
                    f"Subtenant '{subtenant_code}' not found or inactive "
                    f"for tenant '{tenant_code}'"
                )

        logger.info(
            "Mapped tenant %r -> %s, subtenant %r -> %s",
            tenant_code,
            tenant.id,
            subtenant_code,
            subtenant.id,
        )
        token = self._token_provider.issue(
            TenantContext(
                tenant_id=tenant.id,
                subtenant_id=subtenant.id,
                tenant_code=tenant_code,
                subtenant_code=subtenant_code,
            )
        )
        return IssuedToken(token=token, tenant_id=tenant.id, subtenant_id=subtenant.id)
