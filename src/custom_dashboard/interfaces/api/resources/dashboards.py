"""Dashboard API resources."""

import falcon.asgi

from custom_dashboard.application.dto.dashboard_dto import DashboardInput
from custom_dashboard.application.use_cases.dashboard.create_dashboard import (
    CreateDashboardUseCase,
)
from custom_dashboard.application.use_cases.dashboard.dashboard_users import (
    AddDashboardUserUseCase,
    RemoveDashboardUserUseCase,
)
from custom_dashboard.application.use_cases.dashboard.delete_dashboard import (
    DeleteDashboardUseCase,
)
from custom_dashboard.application.use_cases.dashboard.get_dashboard import GetDashboardUseCase
from custom_dashboard.application.use_cases.dashboard.update_dashboard import (
    UpdateDashboardUseCase,
)
from custom_dashboard.domain.entities import CustomWidget, Dashboard
from custom_dashboard.domain.exceptions import DuplicateAssignment, NotFound, ValidationError
from custom_dashboard.interfaces.api.resources.common import fail, ok, parse_int


def widget_to_dict(w: CustomWidget) -> dict:
    return {
        "id": w.id,
        "widget_name": w.name,
        "widget_desc": w.description,
        "widget_url": w.url,
        "widget_chart": w.chart,
        "widget_filter": w.filter,
    }


def _summary_to_dict(d: Dashboard) -> dict:
    return {
        "id": d.id,
        "dashboard_name": d.name,
        "dashboard_desc": d.description,
        "widget_cfg": [{"dwname": w.dwname, "status": w.status} for w in d.widget_cfg],
    }


def _detail_to_dict(d: Dashboard) -> dict:
    return {
        "id": d.id,
        "dashboard_name": d.name,
        "dashboard_desc": d.description,
        "widgetCfg": [{"dwname": w.dwname, "status": w.status} for w in d.widget_cfg],
        "customWidgets": [widget_to_dict(w) for w in d.custom_widgets],
        "users": [
            {
                "id": u.mapping_id,
                "userId": u.user_id,
                "userName": u.user_name,
                "profile": u.profile,
            }
            for u in d.users
        ],
    }


def _int_list(value: object, field: str) -> list[int] | None:
    if value is None:
        return None
    if not isinstance(value, list):
        raise ValidationError(f"{field} must be a list")
    ids = [parse_int(v) for v in value]
    if any(i is None for i in ids):
        raise ValidationError(f"{field} must contain integer ids")
    return ids


def _dashboard_input(body: object) -> DashboardInput:
    """Build DashboardInput from request JSON."""
    if not isinstance(body, dict):
        raise ValidationError("Invalid request body")
    widgets = body.get("selectedPredefinedWidgets")
    if widgets is not None and not isinstance(widgets, list):
        raise ValidationError("selectedPredefinedWidgets must be a list")
    return DashboardInput(
        name=str(body.get("dashboardName") or ""),
        description=str(body.get("dashboardDesc") or ""),
        selected_predefined_widgets=[str(w) for w in widgets] if widgets is not None else None,
        custom_widget_ids=_int_list(body.get("customWidgetIds"), "customWidgetIds"),
        user_ids=_int_list(body.get("users"), "users"),
    )


class DashboardsResource:
    """GET/POST /api/dashboards - list and create dashboards."""

    def __init__(self, create_dashboard: CreateDashboardUseCase, unit_of_work_factory: type) -> None:
        self._create_dashboard = create_dashboard
        self._uow_factory = unit_of_work_factory

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """List dashboards for the token's tenant."""
        async with self._uow_factory() as uow:
            dashboards = await uow.dashboards.list(req.context.tenant)
        ok(resp, [_summary_to_dict(d) for d in dashboards])

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Create dashboard."""
        try:
            data = _dashboard_input(await req.get_media(default_when_empty={}))
            result = await self._create_dashboard.execute(req.context.tenant, data)
        except ValidationError as e:
            fail(resp, falcon.HTTP_400, str(e))
            return

        ok(
            resp,
            {"id": result.id, "dashboardName": result.name, "dashboardDesc": result.description},
            message="Dashboard created successfully",
            status=falcon.HTTP_201,
        )


class DashboardResource:
    """GET/PUT/DELETE /api/dashboards/{dashboard_id}."""

    def __init__(
        self,
        get_dashboard: GetDashboardUseCase,
        update_dashboard: UpdateDashboardUseCase,
        delete_dashboard: DeleteDashboardUseCase,
    ) -> None:
        self._get = get_dashboard
        self._update = update_dashboard
        self._delete = delete_dashboard

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, dashboard_id: str
    ) -> None:
        """Get dashboard with widgets and users."""
        dash_id = parse_int(dashboard_id)
        if dash_id is None:
            fail(resp, falcon.HTTP_400, "Invalid dashboard ID")
            return
        try:
            dashboard = await self._get.execute(req.context.tenant, dash_id)
        except NotFound as e:
            fail(resp, falcon.HTTP_404, str(e))
            return
        ok(resp, _detail_to_dict(dashboard))

    async def on_put(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, dashboard_id: str
    ) -> None:
        """Update dashboard."""
        dash_id = parse_int(dashboard_id)
        if dash_id is None:
            fail(resp, falcon.HTTP_400, "Invalid dashboard ID")
            return
        try:
            data = _dashboard_input(await req.get_media(default_when_empty={}))
            result = await self._update.execute(req.context.tenant, dash_id, data)
        except ValidationError as e:
            fail(resp, falcon.HTTP_400, str(e))
            return
        except NotFound as e:
            fail(resp, falcon.HTTP_404, str(e))
            return

        ok(
            resp,
            {"id": result.id, "dashboardName": result.name, "dashboardDesc": result.description},
            message="Dashboard updated successfully",
        )

    async def on_delete(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, dashboard_id: str
    ) -> None:
        """Delete dashboard."""
        dash_id = parse_int(dashboard_id)
        if dash_id is None:
            fail(resp, falcon.HTTP_400, "Invalid dashboard ID")
            return
        try:
            await self._delete.execute(req.context.tenant, dash_id)
        except NotFound as e:
            fail(resp, falcon.HTTP_404, str(e))
            return
        ok(resp, message="Dashboard deleted successfully")


class DashboardsDeleteResource:
    """POST /api/dashboards/delete-multiple."""

    def __init__(self, delete_dashboard: DeleteDashboardUseCase) -> None:
        self._delete = delete_dashboard

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Delete several dashboards of the tenant, reporting how many went."""
        body = await req.get_media(default_when_empty={})
        raw_ids = body.get("ids") if isinstance(body, dict) else None
        try:
            ids = _int_list(raw_ids, "ids") if isinstance(raw_ids, list) else []
            deleted = await self._delete.execute_many(req.context.tenant, ids)
        except ValidationError as e:
            fail(resp, falcon.HTTP_400, str(e))
            return
        ok(
            resp,
            {"deletedCount": deleted},
            message=f"{deleted} dashboard(s) deleted successfully",
        )


class UserDashboardsResource:
    """GET /api/dashboards/user/{user_id} - dashboards assigned to a user."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, user_id: str
    ) -> None:
        """Dashboards assigned to the user, ordered by name."""
        uid = parse_int(user_id)
        if uid is None:
            fail(resp, falcon.HTTP_400, "Invalid user ID")
            return
        async with self._uow_factory() as uow:
            dashboards = await uow.dashboards.list_for_user(uid, req.context.tenant)
        ok(resp, [_summary_to_dict(d) for d in dashboards])


class DashboardUsersResource:
    """POST /api/dashboards/{dashboard_id}/users - add user to dashboard."""

    def __init__(self, add_user: AddDashboardUserUseCase) -> None:
        self._add = add_user

    async def on_post(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, dashboard_id: str
    ) -> None:
        """Assign one user. Already assigned users give 400."""
        dash_id = parse_int(dashboard_id)
        if dash_id is None:
            fail(resp, falcon.HTTP_400, "Invalid dashboard ID")
            return
        body = await req.get_media(default_when_empty={})
        user_id = parse_int(body.get("userId")) if isinstance(body, dict) else None
        if user_id is None:
            fail(resp, falcon.HTTP_400, "User ID is required")
            return
        try:
            await self._add.execute(req.context.tenant, dash_id, user_id)
        except DuplicateAssignment as e:
            fail(resp, falcon.HTTP_400, str(e))
            return
        except NotFound as e:
            fail(resp, falcon.HTTP_404, str(e))
            return
        ok(resp, message="User added to dashboard successfully")


class DashboardUserResource:
    """DELETE /api/dashboards/{dashboard_id}/users/{user_id}."""

    def __init__(self, remove_user: RemoveDashboardUserUseCase) -> None:
        self._remove = remove_user

    async def on_delete(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        dashboard_id: str,
        user_id: str,
    ) -> None:
        """Unassign one user. Users not on the dashboard give 404."""
        dash_id = parse_int(dashboard_id)
        uid = parse_int(user_id)
        if dash_id is None or uid is None:
            fail(resp, falcon.HTTP_400, "Invalid dashboard or user ID")
            return
        try:
            await self._remove.execute(req.context.tenant, dash_id, uid)
        except NotFound as e:
            fail(resp, falcon.HTTP_404, str(e))
            return
        ok(resp, message="User removed from dashboard successfully")
