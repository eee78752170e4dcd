"""Add access rules use case."""

from collections.abc import Iterable, Sequence

from custom_dashboard.domain.entities import AccessRule, TenantContext
from custom_dashboard.domain.exceptions import NotFound
from custom_dashboard.domain.services import add_rules
from custom_dashboard.domain.value_objects import RuleType


class AddAccessRulesUseCase:
    """Append rules for selected users, profiles or roles to a rule list."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(
        self,
        tenant: TenantContext,
        dashboard_id: int,
        rules: Sequence[AccessRule],
        rule_type: RuleType,
        keys: Iterable[int | str],
    ) -> list[AccessRule]:
        """Return ``rules`` followed by the newly added rules."""
        async with self._uow_factory() as uow:
            if not await uow.dashboards.exists(dashboard_id, tenant):
                raise NotFound("Dashboard not found")
            users = await uow.users.list_active(tenant)
            roles = await uow.roles.list_with_members(tenant)

        return add_rules(rules, rule_type, keys, users, roles)
