"""Access rule entity - derived grouping of dashboard users."""

from dataclasses import dataclass
from uuid import UUID

from custom_dashboard.domain.value_objects import RuleType


@dataclass(frozen=True)
class AccessRule:
    """Profile, Role or User rule explaining a non-empty set of assigned users.

    Rules are never persisted. They are rebuilt from the flat assignment
    every time a dashboard is opened for editing.
    """

    id: UUID
    rule_type: RuleType
    condition: str
    details: str
    user_ids: frozenset[int]
