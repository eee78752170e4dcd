"""Get dashboard use case."""

from custom_dashboard.domain.entities import Dashboard, TenantContext
from custom_dashboard.domain.exceptions import NotFound


class GetDashboardUseCase:
    """Get dashboard with widget settings, custom widgets and users."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, tenant: TenantContext, dashboard_id: int) -> Dashboard:
        async with self._uow_factory() as uow:
            dashboard = await uow.dashboards.get_by_id(dashboard_id, tenant)
        if not dashboard:
            raise NotFound("Dashboard not found")
        return dashboard
