"""Repository ports."""

from custom_dashboard.application.ports.repositories.dashboard_repository import (
    DashboardRepository,
)
from custom_dashboard.application.ports.repositories.role_repository import RoleRepository
from custom_dashboard.application.ports.repositories.tenant_repository import (
    TenantRepository,
)
from custom_dashboard.application.ports.repositories.user_repository import UserRepository
from custom_dashboard.application.ports.repositories.widget_repository import (
    WidgetRepository,
)

__all__ = [
    "DashboardRepository",
    "RoleRepository",
    "TenantRepository",
    "UserRepository",
    "WidgetRepository",
]
