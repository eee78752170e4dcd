"""Create dashboard use case."""

import logging
from collections.abc import Iterable

from custom_dashboard.application.dto.dashboard_dto import DashboardInput, DashboardSummary
from custom_dashboard.domain.entities import TenantContext, WidgetSetting
from custom_dashboard.domain.exceptions import ValidationError
from custom_dashboard.domain.value_objects import PREDEFINED_WIDGETS

logger = logging.getLogger(__name__)


def build_widget_cfg(selected: Iterable[str] | None) -> list[WidgetSetting]:
    """One setting per predefined widget, enabled when selected."""
    chosen = set(selected or ())
    return [
        WidgetSetting(dwname=name, status="true" if name in chosen else "false")
        for name in PREDEFINED_WIDGETS
    ]


def clean_input(data: DashboardInput) -> tuple[str, str]:
    """Trimmed name and description; name is required."""
    name = (data.name or "").strip()
    if not name:
        raise ValidationError("Dashboard name is required")
    return name, (data.description or "").strip()


class CreateDashboardUseCase:
    """Create dashboard with widget selection and user access."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, tenant: TenantContext, data: DashboardInput) -> DashboardSummary:
        name, description = clean_input(data)

        async with self._uow_factory() as uow:
            dashboard_id = await uow.dashboards.create(
                tenant,
                name,
                description,
                build_widget_cfg(data.selected_predefined_widgets),
            )
            if data.custom_widget_ids:
                await uow.dashboards.replace_custom_widgets(
                    dashboard_id, tenant, data.custom_widget_ids
                )
            if data.user_ids:
                await uow.dashboards.replace_users(
                    dashboard_id, tenant, list(dict.fromkeys(data.user_ids))
                )

        logger.info(
            "Created dashboard %s for tenant %s/%s",
            dashboard_id,
            tenant.tenant_id,
            tenant.subtenant_id,
        )
        return DashboardSummary(id=dashboard_id, name=name, description=description)
