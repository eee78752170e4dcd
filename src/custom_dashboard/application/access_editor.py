"""Access rule editor - controller over a caller-owned rule list."""

from collections.abc import Collection, Iterable, Sequence
from enum import StrEnum
from uuid import UUID

from custom_dashboard.domain.entities import AccessRule, DirectoryUser, Role
from custom_dashboard.domain.exceptions import InvalidEditorState
from custom_dashboard.domain.services import access_rules
from custom_dashboard.domain.value_objects import RuleType


class EditorState(StrEnum):
    """States of the access tab."""

    VIEWING = "viewing"
    ADD_RULE_MODAL_OPEN = "add_rule_modal_open"


class AccessRuleEditor:
    """Holds the rule list of one dashboard while it is being edited.

    Rules are reconstructed from the assignment on open and only the
    flattened assignment leaves the editor on save.
    """

    def __init__(
        self,
        assigned_user_ids: Collection[int],
        users: Sequence[DirectoryUser],
        roles: Sequence[Role],
    ) -> None:
        self._users = tuple(users)
        self._roles = tuple(roles)
        self._rules = access_rules.reconstruct(assigned_user_ids, self._users, self._roles)
        self._state = EditorState.VIEWING
        self._filter: frozenset[RuleType] = frozenset(RuleType)
        self._search = ""

    @property
    def state(self) -> EditorState:
        return self._state

    @property
    def rules(self) -> list[AccessRule]:
        return list(self._rules)

    def open_add_rule_modal(self) -> None:
        self._state = EditorState.ADD_RULE_MODAL_OPEN

    def close_add_rule_modal(self) -> None:
        self._state = EditorState.VIEWING

    def add_rules(self, rule_type: RuleType, keys: Iterable[int | str]) -> list[AccessRule]:
        """Add rules for the selected groups and close the modal.

        Returns only the rules that were actually added.
        """
        if self._state is not EditorState.ADD_RULE_MODAL_OPEN:
            raise InvalidEditorState("Add rule modal is not open")
        before = len(self._rules)
        self._rules = access_rules.add_rules(
            self._rules, rule_type, keys, self._users, self._roles
        )
        self._state = EditorState.VIEWING
        return self._rules[before:]

    def delete_rules(self, rule_ids: Collection[UUID]) -> None:
        self._rules = access_rules.delete_rules(self._rules, rule_ids)

    def set_filter(self, rule_types: Collection[RuleType] | None) -> None:
        self._filter = frozenset(rule_types) if rule_types else frozenset(RuleType)

    def set_search(self, term: str | None) -> None:
        self._search = term or ""

    def visible_rules(self) -> list[AccessRule]:
        rules = access_rules.filter_rules(self._rules, self._filter)
        return access_rules.search_rules(rules, self._search, self._users)

    def assignment(self) -> frozenset[int]:
        """Flat set of user ids to persist."""
        return access_rules.flatten(self._rules)
