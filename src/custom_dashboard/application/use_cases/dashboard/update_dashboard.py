"""Update dashboard use case."""

import logging

from custom_dashboard.application.dto.dashboard_dto import DashboardInput, DashboardSummary
from custom_dashboard.application.use_cases.dashboard.create_dashboard import (
    build_widget_cfg,
    clean_input,
)
from custom_dashboard.domain.entities import TenantContext
from custom_dashboard.domain.exceptions import NotFound

logger = logging.getLogger(__name__)


class UpdateDashboardUseCase:
    """Update dashboard; omitted widget and user lists are left as they are."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(
        self, tenant: TenantContext, dashboard_id: int, data: DashboardInput
    ) -> DashboardSummary:
        name, description = clean_input(data)

        async with self._uow_factory() as uow:
            existing = await uow.dashboards.get_by_id(dashboard_id, tenant)
            if not existing:
                raise NotFound("Dashboard not found")

            selected = data.selected_predefined_widgets
            if selected is None:
                selected = existing.selected_predefined_widgets
            await uow.dashboards.update(
                dashboard_id,
                tenant,
                name,
                description,
                build_widget_cfg(selected),
            )
            if data.custom_widget_ids is not None:
                await uow.dashboards.replace_custom_widgets(
                    dashboard_id, tenant, data.custom_widget_ids
                )
            if data.user_ids is not None:
                await uow.dashboards.replace_users(
                    dashboard_id, tenant, list(dict.fromkeys(data.user_ids))
                )

        logger.info("Updated dashboard %s", dashboard_id)
        return DashboardSummary(id=dashboard_id, name=name, description=description)
