"""Get access rules use case."""

from collections.abc import Collection

from custom_dashboard.application.access_editor import AccessRuleEditor
from custom_dashboard.domain.entities import AccessRule, TenantContext
from custom_dashboard.domain.exceptions import NotFound
from custom_dashboard.domain.value_objects import RuleType


class GetAccessRulesUseCase:
    """Explain a dashboard's user assignment as access rules."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(
        self,
        tenant: TenantContext,
        dashboard_id: int,
        rule_types: Collection[RuleType] | None = None,
        search: str | None = None,
    ) -> list[AccessRule]:
        """Reconstruct rules from the current assignment and directory."""
        async with self._uow_factory() as uow:
            if not await uow.dashboards.exists(dashboard_id, tenant):
                raise NotFound("Dashboard not found")
            assigned = await uow.dashboards.list_user_ids(dashboard_id, tenant)
            users = await uow.users.list_active(tenant)
            roles = await uow.roles.list_with_members(tenant)

        editor = AccessRuleEditor(assigned, users, roles)
        editor.set_filter(rule_types)
        editor.set_search(search)
        return editor.visible_rules()
