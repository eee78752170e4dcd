"""Access rule types."""

from enum import StrEnum


class RuleType(StrEnum):
    """Grouping that explains a set of assigned users."""

    USER = "User"
    PROFILE = "Profile"
    ROLE = "Role"
