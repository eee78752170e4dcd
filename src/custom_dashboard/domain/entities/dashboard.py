"""Dashboard entity and its widget and user mappings."""

from dataclasses import dataclass, field


@dataclass
class WidgetSetting:
    """On/off state of one predefined widget."""

    dwname: str
    status: str  # "true" / "false"

    @property
    def enabled(self) -> bool:
        return self.status == "true"


@dataclass
class CustomWidget:
    """Tenant-defined widget."""

    id: int
    name: str
    description: str | None = None
    url: str | None = None
    chart: str | None = None
    filter: str | None = None


@dataclass
class DashboardUser:
    """User mapped to a dashboard."""

    mapping_id: int
    user_id: int
    user_name: str
    profile: str | None


@dataclass
class Dashboard:
    """Dashboard - name, description, widget selection and user access."""

    id: int
    tenant_id: int
    subtenant_id: int
    name: str
    description: str = ""
    widget_cfg: list[WidgetSetting] = field(default_factory=list)
    custom_widgets: list[CustomWidget] = field(default_factory=list)
    users: list[DashboardUser] = field(default_factory=list)

    @property
    def assigned_user_ids(self) -> frozenset[int]:
        return frozenset(u.user_id for u in self.users)

    @property
    def selected_predefined_widgets(self) -> list[str]:
        return [w.dwname for w in self.widget_cfg if w.enabled]
