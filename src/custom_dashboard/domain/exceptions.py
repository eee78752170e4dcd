"""Domain exceptions."""


class DashboardError(Exception):
    """Base exception for the dashboard service."""

    pass


class NotFound(DashboardError):
    """Requested resource was not found."""

    pass


class ValidationError(DashboardError):
    """Validation failed for input data."""

    pass


class AuthenticationFailed(DashboardError):
    """Token is missing, malformed or expired."""

    pass


class DuplicateAssignment(DashboardError):
    """User is already mapped to the dashboard."""

    pass


class InvalidEditorState(DashboardError):
    """Editor operation is not allowed in the current state."""

    pass
