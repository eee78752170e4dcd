"""Application entry point and composition root."""

import logging

import uvicorn

from custom_dashboard import __version__
from custom_dashboard.application.use_cases.access.add_access_rules import (
    AddAccessRulesUseCase,
)
from custom_dashboard.application.use_cases.access.get_access_rules import (
    GetAccessRulesUseCase,
)
from custom_dashboard.application.use_cases.access.save_access_rules import (
    SaveAccessRulesUseCase,
)
from custom_dashboard.application.use_cases.auth.issue_token import IssueTokenUseCase
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
from custom_dashboard.config import Settings, get_settings
from custom_dashboard.infrastructure.auth.jwt_provider import JWTProvider
from custom_dashboard.infrastructure.persistence.postgres.connection import create_pool
from custom_dashboard.infrastructure.persistence.postgres.unit_of_work import (
    create_uow_factory,
)
from custom_dashboard.interfaces.api.app import create_app
from custom_dashboard.interfaces.api.middleware.auth import AuthMiddleware
from custom_dashboard.interfaces.api.middleware.cors import CORSMiddleware
from custom_dashboard.interfaces.api.middleware.pool_lifespan import PoolLifespanMiddleware
from custom_dashboard.interfaces.api.resources.access_rules import AccessRulesResource
from custom_dashboard.interfaces.api.resources.auth import TokenResource
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


def configure_logging(settings: Settings) -> None:
    """Configure root logging once from settings."""
    level = "DEBUG" if settings.debug else settings.log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_dashboard_app():
    """Composition root - build Falcon app with all dependencies."""
    settings = get_settings()
    pool = create_pool(settings)
    uow_factory = create_uow_factory(pool)
    token_provider = JWTProvider(settings.jwt_secret, settings.jwt_expires_in)

    issue_token = IssueTokenUseCase(
        unit_of_work_factory=uow_factory,
        token_provider=token_provider,
    )
    create_dashboard = CreateDashboardUseCase(unit_of_work_factory=uow_factory)
    get_dashboard = GetDashboardUseCase(unit_of_work_factory=uow_factory)
    update_dashboard = UpdateDashboardUseCase(unit_of_work_factory=uow_factory)
    delete_dashboard = DeleteDashboardUseCase(unit_of_work_factory=uow_factory)
    add_user = AddDashboardUserUseCase(unit_of_work_factory=uow_factory)
    remove_user = RemoveDashboardUserUseCase(unit_of_work_factory=uow_factory)
    get_rules = GetAccessRulesUseCase(unit_of_work_factory=uow_factory)
    add_rules = AddAccessRulesUseCase(unit_of_work_factory=uow_factory)
    save_rules = SaveAccessRulesUseCase(unit_of_work_factory=uow_factory)

    cors_origins = [
        o.strip() for o in settings.cors_origins.split(",") if o.strip()
    ]
    return create_app(
        health_resource=HealthResource(pool),
        token_resource=TokenResource(issue_token),
        dashboards_resource=DashboardsResource(create_dashboard, uow_factory),
        dashboard_resource=DashboardResource(get_dashboard, update_dashboard, delete_dashboard),
        dashboards_delete_resource=DashboardsDeleteResource(delete_dashboard),
        user_dashboards_resource=UserDashboardsResource(uow_factory),
        dashboard_users_resource=DashboardUsersResource(add_user),
        dashboard_user_resource=DashboardUserResource(remove_user),
        access_rules_resource=AccessRulesResource(get_rules, add_rules, save_rules),
        users_resource=UsersResource(uow_factory),
        roles_resource=RolesResource(uow_factory),
        custom_widgets_resource=CustomWidgetsResource(uow_factory),
        predefined_widgets_resource=PredefinedWidgetsResource(),
        middleware=[
            CORSMiddleware(cors_origins),
            PoolLifespanMiddleware(pool, settings.db_pool_timeout),
            AuthMiddleware(token_provider),
        ],
    )


def main() -> None:
    """CLI entry point - run uvicorn server."""
    settings = get_settings()
    configure_logging(settings)
    logger.info(
        "Custom Dashboard API v%s on http://%s:%s (%s)",
        __version__,
        settings.host,
        settings.port,
        settings.environment,
    )
    uvicorn.run(
        create_dashboard_app(),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
