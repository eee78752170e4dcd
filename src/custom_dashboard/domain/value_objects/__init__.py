"""Domain value objects."""

from custom_dashboard.domain.value_objects.predefined_widgets import PREDEFINED_WIDGETS
from custom_dashboard.domain.value_objects.profile_name import ProfileName
from custom_dashboard.domain.value_objects.rule_type import RuleType

__all__ = [
    "PREDEFINED_WIDGETS",
    "ProfileName",
    "RuleType",
]
