"""Fixtures for API tests."""

import pytest

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
from custom_dashboard.domain.entities import CustomWidget, Subtenant, Tenant
from custom_dashboard.infrastructure.auth.jwt_provider import JWTProvider
from custom_dashboard.interfaces.api.app import create_app
from custom_dashboard.interfaces.api.middleware.auth import AuthMiddleware
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

from tests.conftest import TENANT

JWT_SECRET = "test-secret"


class AuthBypassMiddleware:
    """Middleware that sets context.tenant for testing."""

    async def process_request(self, req, resp):
        req.context.tenant = TENANT


@pytest.fixture
def token_provider() -> JWTProvider:
    return JWTProvider(JWT_SECRET, "1h")


@pytest.fixture
def build_app(fake_uow, uow_factory, token_provider):
    """Build the Falcon ASGI app over the fake UoW with the given middleware."""
    fake_uow.tenants.add_tenant(Tenant(id=1, code="acme", status="ACTIVE"))
    fake_uow.tenants.add_subtenant(Subtenant(id=10, tenant_id=1, code="emea", status="ACTIVE"))
    fake_uow.widgets.add_widgets(
        TENANT,
        [CustomWidget(id=7, name="Revenue", description="Monthly revenue", chart="bar")],
    )

    def _build(middleware):
        delete_dashboard = DeleteDashboardUseCase(uow_factory)
        return create_app(
            health_resource=HealthResource(),
            token_resource=TokenResource(IssueTokenUseCase(uow_factory, token_provider)),
            dashboards_resource=DashboardsResource(CreateDashboardUseCase(uow_factory), uow_factory),
            dashboard_resource=DashboardResource(
                GetDashboardUseCase(uow_factory),
                UpdateDashboardUseCase(uow_factory),
                delete_dashboard,
            ),
            dashboards_delete_resource=DashboardsDeleteResource(delete_dashboard),
            user_dashboards_resource=UserDashboardsResource(uow_factory),
            dashboard_users_resource=DashboardUsersResource(AddDashboardUserUseCase(uow_factory)),
            dashboard_user_resource=DashboardUserResource(RemoveDashboardUserUseCase(uow_factory)),
            access_rules_resource=AccessRulesResource(
                GetAccessRulesUseCase(uow_factory),
                AddAccessRulesUseCase(uow_factory),
                SaveAccessRulesUseCase(uow_factory),
            ),
            users_resource=UsersResource(uow_factory),
            roles_resource=RolesResource(uow_factory),
            custom_widgets_resource=CustomWidgetsResource(uow_factory),
            predefined_widgets_resource=PredefinedWidgetsResource(),
            middleware=middleware,
        )

    return _build


@pytest.fixture
def app(build_app):
    """Falcon ASGI app with auth bypassed."""
    return build_app([AuthBypassMiddleware()])


@pytest.fixture
def client(app):
    """Falcon ASGI test client."""
    from falcon.testing import TestClient
    return TestClient(app)


@pytest.fixture
def secured_client(build_app, token_provider):
    """Test client behind the real auth middleware."""
    from falcon.testing import TestClient
    return TestClient(build_app([AuthMiddleware(token_provider)]))
