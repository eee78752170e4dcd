"""Role entity - directory-managed group of users."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Role:
    """Role with a declared type and an ordered list of member user ids."""

    id: int
    name: str
    role_type: str
    members: tuple[int, ...] = field(default_factory=tuple)
