"""Unit tests for AccessRuleEditor."""

import pytest

from custom_dashboard.application.access_editor import AccessRuleEditor, EditorState
from custom_dashboard.domain.exceptions import InvalidEditorState
from custom_dashboard.domain.value_objects import RuleType


@pytest.fixture
def editor(directory_users, directory_roles) -> AccessRuleEditor:
    # every profile complete
    return AccessRuleEditor({1, 2, 3, 4, 5, 6}, directory_users, directory_roles)


def test_opens_in_viewing_state(editor: AccessRuleEditor) -> None:
    assert editor.state is EditorState.VIEWING
    assert editor.assignment() == {1, 2, 3, 4, 5, 6}


def test_add_requires_open_modal(editor: AccessRuleEditor) -> None:
    with pytest.raises(InvalidEditorState):
        editor.add_rules(RuleType.USER, [1])


def test_add_closes_modal_and_returns_added(directory_users, directory_roles) -> None:
    editor = AccessRuleEditor({1}, directory_users, directory_roles)
    editor.open_add_rule_modal()
    assert editor.state is EditorState.ADD_RULE_MODAL_OPEN

    added = editor.add_rules(RuleType.PROFILE, ["Sales"])

    assert editor.state is EditorState.VIEWING
    assert [r.user_ids for r in added] == [{2, 3}]
    assert editor.assignment() == {1, 2, 3}


def test_add_of_covered_group_adds_nothing(editor: AccessRuleEditor) -> None:
    before = editor.rules
    editor.open_add_rule_modal()
    assert editor.add_rules(RuleType.ROLE, [100]) == []
    assert editor.rules == before


def test_close_modal_without_adding(editor: AccessRuleEditor) -> None:
    editor.open_add_rule_modal()
    editor.close_add_rule_modal()
    assert editor.state is EditorState.VIEWING


def test_delete_unassigns_users(editor: AccessRuleEditor) -> None:
    profile_rule = next(r for r in editor.rules if r.rule_type is RuleType.PROFILE)
    editor.delete_rules([profile_rule.id])
    assert editor.assignment().isdisjoint(profile_rule.user_ids)


def test_filter_and_search_combine(editor: AccessRuleEditor) -> None:
    editor.set_filter([RuleType.PROFILE, RuleType.ROLE])
    assert {r.rule_type for r in editor.visible_rules()} <= {RuleType.PROFILE, RuleType.ROLE}

    editor.set_search("frank")
    assert [r.condition for r in editor.visible_rules()] == ["Finance"]

    editor.set_filter(None)
    editor.set_search(None)
    assert editor.visible_rules() == editor.rules


def test_rules_returns_copy(editor: AccessRuleEditor) -> None:
    editor.rules.clear()
    assert editor.rules
