"""Falcon ASGI application."""

import logging

import falcon
import falcon.asgi
from falcon.asgi import App

from custom_dashboard.interfaces.api.resources.access_rules import AccessRulesResource
from custom_dashboard.interfaces.api.resources.auth import TokenResource
from custom_dashboard.interfaces.api.resources.common import fail
from custom_dashboard.interfaces.api.resources.dashboards import (
    DashboardResource,
    DashboardsDeleteResource,
    DashboardsResource,
    DashboardUserResource,
    DashboardUsersResource,
    UserDashboardsResource,
)
from custom_dashboard.interfaces.api.resources.directory import (
    CustomWidgetsResource,
    PredefinedWidgetsResource,
    RolesResource,
    UsersResource,
)
from custom_dashboard.interfaces.api.resources.health import HealthResource

logger = logging.getLogger(__name__)


async def handle_route_not_found(
    req: falcon.asgi.Request, resp: falcon.asgi.Response, ex: Exception, params: dict
) -> None:
    fail(resp, falcon.HTTP_404, f"Route {req.method} {req.path} not found")


async def handle_unexpected_error(
    req: falcon.asgi.Request, resp: falcon.asgi.Response, ex: Exception, params: dict
) -> None:
    logger.error("Unhandled error on %s %s", req.method, req.path, exc_info=ex)
    fail(resp, falcon.HTTP_500, "Internal server error")


def create_app(
    *,
    health_resource: HealthResource,
    token_resource: TokenResource,
    dashboards_resource: DashboardsResource,
    dashboard_resource: DashboardResource,
    dashboards_delete_resource: DashboardsDeleteResource,
    user_dashboards_resource: UserDashboardsResource,
    dashboard_users_resource: DashboardUsersResource,
    dashboard_user_resource: DashboardUserResource,
    access_rules_resource: AccessRulesResource,
    users_resource: UsersResource,
    roles_resource: RolesResource,
    custom_widgets_resource: CustomWidgetsResource,
    predefined_widgets_resource: PredefinedWidgetsResource,
    middleware: list | None = None,
) -> App:
    """Create Falcon ASGI app with routes and error handlers."""
    app = falcon.asgi.App(middleware=middleware or [])
    app.add_error_handler(Exception, handle_unexpected_error)
    app.add_error_handler(falcon.HTTPRouteNotFound, handle_route_not_found)

    app.add_route("/api/health", health_resource)
    app.add_route("/api/health/ready", health_resource, suffix="ready")
    app.add_route("/api/auth/token", token_resource)

    # Literal segments below win over {dashboard_id} in Falcon's router.
    app.add_route("/api/dashboards/users/all", users_resource)
    app.add_route("/api/dashboards/roles/all", roles_resource)
    app.add_route("/api/dashboards/widgets/all", custom_widgets_resource)
    app.add_route("/api/dashboards/widgets/predefined", predefined_widgets_resource)
    app.add_route("/api/dashboards/delete-multiple", dashboards_delete_resource)
    app.add_route("/api/dashboards/user/{user_id}", user_dashboards_resource)

    app.add_route("/api/dashboards", dashboards_resource)
    app.add_route("/api/dashboards/{dashboard_id}", dashboard_resource)
    app.add_route("/api/dashboards/{dashboard_id}/users", dashboard_users_resource)
    app.add_route("/api/dashboards/{dashboard_id}/users/{user_id}", dashboard_user_resource)
    app.add_route("/api/dashboards/{dashboard_id}/access-rules", access_rules_resource)
    return app
