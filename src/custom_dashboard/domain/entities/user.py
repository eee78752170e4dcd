"""Directory user entity."""

from dataclasses import dataclass

from custom_dashboard.domain.value_objects import ProfileName


@dataclass(frozen=True)
class DirectoryUser:
    """User as seen by the directory - identity, display name and profile."""

    id: int
    display_name: str
    profile_name: ProfileName | None
    status: str = "ACTIVE"
