"""Domain entities."""

from custom_dashboard.domain.entities.access_rule import AccessRule
from custom_dashboard.domain.entities.dashboard import (
    CustomWidget,
    Dashboard,
    DashboardUser,
    WidgetSetting,
)
from custom_dashboard.domain.entities.role import Role
from custom_dashboard.domain.entities.tenant import Subtenant, Tenant, TenantContext
from custom_dashboard.domain.entities.user import DirectoryUser

__all__ = [
    "AccessRule",
    "CustomWidget",
    "Dashboard",
    "DashboardUser",
    "DirectoryUser",
    "Role",
    "Subtenant",
    "Tenant",
    "TenantContext",
    "WidgetSetting",
]
