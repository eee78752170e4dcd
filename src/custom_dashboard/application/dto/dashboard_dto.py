"""Dashboard DTOs."""

from dataclasses import dataclass


@dataclass
class DashboardInput:
    """Input for creating or updating a dashboard.

    ``None`` for a list means "leave unchanged" on update and "empty" on
    create.
    """

    name: str
    description: str = ""
    selected_predefined_widgets: list[str] | None = None
    custom_widget_ids: list[int] | None = None
    user_ids: list[int] | None = None


@dataclass
class DashboardSummary:
    """Dashboard identity returned after a write."""

    id: int
    name: str
    description: str
