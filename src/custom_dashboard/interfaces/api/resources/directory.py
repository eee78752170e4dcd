"""Directory and widget lookup resources used to fill pickers."""

import falcon.asgi

from custom_dashboard.domain.value_objects import PREDEFINED_WIDGETS
from custom_dashboard.interfaces.api.resources.common import ok
from custom_dashboard.interfaces.api.resources.dashboards import widget_to_dict


class UsersResource:
    """GET /api/dashboards/users/all - active users with display names."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Active users for the user picker."""
        async with self._uow_factory() as uow:
            users = await uow.users.list_active(req.context.tenant)
        ok(
            resp,
            [
                {
                    "id": u.id,
                    "userName": u.display_name,
                    "profile": u.profile_name,
                    "status": u.status,
                }
                for u in users
            ],
        )


class RolesResource:
    """GET /api/dashboards/roles/all - roles with member ids."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Roles and their member ids for the role picker."""
        async with self._uow_factory() as uow:
            roles = await uow.roles.list_with_members(req.context.tenant)
        ok(
            resp,
            [
                {
                    "id": r.id,
                    "name": r.name,
                    "roleType": r.role_type,
                    "members": list(r.members),
                }
                for r in roles
            ],
        )


class CustomWidgetsResource:
    """GET /api/dashboards/widgets/all - tenant custom widgets."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Custom widgets of the tenant."""
        async with self._uow_factory() as uow:
            widgets = await uow.widgets.list_custom(req.context.tenant)
        ok(resp, [widget_to_dict(w) for w in widgets])


class PredefinedWidgetsResource:
    """GET /api/dashboards/widgets/predefined - system widget names."""

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Names of the built-in widgets."""
        ok(resp, list(PREDEFINED_WIDGETS))
