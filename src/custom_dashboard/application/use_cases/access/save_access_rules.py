"""Save access rules use case."""

import logging
from collections.abc import Iterable

from custom_dashboard.domain.entities import AccessRule, TenantContext
from custom_dashboard.domain.exceptions import NotFound
from custom_dashboard.domain.services import flatten

logger = logging.getLogger(__name__)


class SaveAccessRulesUseCase:
    """Flatten rules and persist the resulting user assignment."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(
        self,
        tenant: TenantContext,
        dashboard_id: int,
        rules: Iterable[AccessRule],
    ) -> frozenset[int]:
        user_ids = flatten(rules)
        async with self._uow_factory() as uow:
            if not await uow.dashboards.exists(dashboard_id, tenant):
                raise NotFound("Dashboard not found")
            await uow.dashboards.replace_users(dashboard_id, tenant, sorted(user_ids))

        logger.info("Saved %s users for dashboard %s", len(user_ids), dashboard_id)
        return user_ids
