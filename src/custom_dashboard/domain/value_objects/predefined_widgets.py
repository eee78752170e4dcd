"""System-defined widgets available on every dashboard."""

PREDEFINED_WIDGETS: tuple[str, ...] = (
    "Identity Distribution",
    "Role Distribution",
    "Orphan Account Distribution",
    "Tickets",
    "Cloud Resource Distribution",
    "Blocked Requests",
    "Overdue Approvals",
    "Overdue Reviews",
    "Overdue Campaigns",
    "Login",
    "Forgot Password",
    "Single Sign On",
    "Access Map",
)
