"""Delete dashboard use case."""

import logging

from custom_dashboard.domain.entities import TenantContext
from custom_dashboard.domain.exceptions import NotFound, ValidationError

logger = logging.getLogger(__name__)


class DeleteDashboardUseCase:
    """Delete one or many dashboards together with their mappings."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, tenant: TenantContext, dashboard_id: int) -> None:
        """Delete a single dashboard."""
        async with self._uow_factory() as uow:
            deleted = await uow.dashboards.delete([dashboard_id], tenant)
        if not deleted:
            raise NotFound("Dashboard not found")
        logger.info("Deleted dashboard %s", dashboard_id)

    async def execute_many(self, tenant: TenantContext, dashboard_ids: list[int]) -> int:
        """Delete several dashboards, return how many existed."""
        if not dashboard_ids:
            raise ValidationError("Please provide dashboard IDs to delete")
        async with self._uow_factory() as uow:
            deleted = await uow.dashboards.delete(list(dict.fromkeys(dashboard_ids)), tenant)
        logger.info("Deleted %s of %s dashboards", deleted, len(dashboard_ids))
        return deleted
