"""Domain services."""

from custom_dashboard.domain.services.access_rules import (
    add_rules,
    delete_rules,
    filter_rules,
    flatten,
    group_by_profile,
    placeholder_name,
    reconstruct,
    search_rules,
)

__all__ = [
    "add_rules",
    "delete_rules",
    "filter_rules",
    "flatten",
    "group_by_profile",
    "placeholder_name",
    "reconstruct",
    "search_rules",
]
