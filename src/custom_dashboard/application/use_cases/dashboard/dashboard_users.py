"""Add and remove single dashboard users."""

from custom_dashboard.domain.entities import TenantContext
from custom_dashboard.domain.exceptions import DuplicateAssignment, NotFound


class AddDashboardUserUseCase:
    """Map one user to a dashboard."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, tenant: TenantContext, dashboard_id: int, user_id: int) -> None:
        async with self._uow_factory() as uow:
            if not await uow.dashboards.exists(dashboard_id, tenant):
                raise NotFound("Dashboard not found")
            if await uow.dashboards.has_user(dashboard_id, user_id, tenant):
                raise DuplicateAssignment("User already added to this dashboard")
            await uow.dashboards.add_user(dashboard_id, user_id, tenant)


class RemoveDashboardUserUseCase:
    """Unmap one user from a dashboard."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, tenant: TenantContext, dashboard_id: int, user_id: int) -> None:
        async with self._uow_factory() as uow:
            removed = await uow.dashboards.remove_user(dashboard_id, user_id, tenant)
        if not removed:
            raise NotFound("User not found in dashboard")
