"""Access rule reconciliation.

Dashboards persist only a flat set of assigned user ids. For editing, that
set is explained as a list of rules: a Profile rule when every user of a
profile is assigned, a Role rule when every not-yet-covered member of a role
is assigned, and one User rule for each remaining user. Saving flattens the
rules back into the set of user ids.

All functions are pure. They never mutate their inputs and return new lists.
"""

from collections.abc import Collection, Iterable, Mapping, Sequence
from uuid import UUID, uuid4

from custom_dashboard.domain.entities import AccessRule, DirectoryUser, Role
from custom_dashboard.domain.value_objects import ProfileName, RuleType


def group_by_profile(
    users: Iterable[DirectoryUser],
) -> dict[ProfileName, list[DirectoryUser]]:
    """Group users by profile name in first-seen order.

    Users without a profile name are left out; they can only ever be
    explained by individual User rules.
    """
    groups: dict[ProfileName, list[DirectoryUser]] = {}
    for user in users:
        if not user.profile_name:
            continue
        groups.setdefault(user.profile_name, []).append(user)
    return groups


def placeholder_name(user_id: int) -> str:
    """Display name for an id the directory does not know."""
    return f"User-{user_id}"


def _as_id(key: int | str) -> int | None:
    if isinstance(key, float) and not key.is_integer():
        return None
    try:
        return int(key)
    except (TypeError, ValueError):
        return None


def _index_users(users: Iterable[DirectoryUser]) -> dict[int, DirectoryUser]:
    return {u.id: u for u in users}


def _profile_rule(name: ProfileName, user_ids: frozenset[int]) -> AccessRule:
    return AccessRule(
        id=uuid4(),
        rule_type=RuleType.PROFILE,
        condition=name,
        details=f"All users with profile {name} ({len(user_ids)} users)",
        user_ids=user_ids,
    )


def _role_rule(role: Role, user_ids: frozenset[int]) -> AccessRule:
    total = len(set(role.members))
    return AccessRule(
        id=uuid4(),
        rule_type=RuleType.ROLE,
        condition=role.name,
        details=f"{role.role_type} role, {len(user_ids)} of {total} members",
        user_ids=user_ids,
    )


def _user_rule(user_id: int, user: DirectoryUser | None) -> AccessRule:
    if user is None:
        condition = placeholder_name(user_id)
        details = "Not found in directory"
    else:
        condition = user.display_name or placeholder_name(user_id)
        details = f"Profile: {user.profile_name}" if user.profile_name else "No profile"
    return AccessRule(
        id=uuid4(),
        rule_type=RuleType.USER,
        condition=condition,
        details=details,
        user_ids=frozenset({user_id}),
    )


def reconstruct(
    assigned_user_ids: Collection[int],
    all_users: Sequence[DirectoryUser],
    all_roles: Sequence[Role],
) -> list[AccessRule]:
    """Explain a flat assignment as Profile, Role and User rules.

    Passes run in that order and each only sees users not covered by an
    earlier pass. Roles are visited in input order, so with overlapping
    roles the first qualifying role wins.
    """
    assigned = frozenset(assigned_user_ids)
    if not assigned:
        return []

    rules: list[AccessRule] = []
    covered: set[int] = set()

    for name, members in group_by_profile(all_users).items():
        member_ids = frozenset(u.id for u in members)
        if member_ids and member_ids <= assigned:
            rules.append(_profile_rule(name, member_ids))
            covered |= member_ids

    for role in all_roles:
        if not role.members:
            continue
        uncovered = frozenset(role.members) - covered
        if uncovered and uncovered <= assigned:
            rules.append(_role_rule(role, uncovered))
            covered |= uncovered

    users_by_id = _index_users(all_users)
    for user_id in sorted(assigned - covered):
        rules.append(_user_rule(user_id, users_by_id.get(user_id)))

    return rules


def flatten(rules: Iterable[AccessRule]) -> frozenset[int]:
    """Union of every rule's user ids."""
    user_ids: set[int] = set()
    for rule in rules:
        user_ids |= rule.user_ids
    return frozenset(user_ids)


def add_rules(
    rules: Sequence[AccessRule],
    rule_type: RuleType,
    keys: Iterable[int | str],
    all_users: Sequence[DirectoryUser],
    all_roles: Sequence[Role],
) -> list[AccessRule]:
    """Append one rule per selected group, limited to its uncovered members.

    Keys are user ids, profile names or role ids depending on ``rule_type``.
    A group whose members are all covered already (by existing rules or by
    one added earlier in the same call) yields no rule. Unknown keys are
    ignored.
    """
    result = list(rules)
    covered = set(flatten(rules))
    users_by_id = _index_users(all_users)
    profiles = group_by_profile(all_users)
    roles_by_id = {r.id: r for r in all_roles}

    for key in keys:
        if rule_type is RuleType.USER:
            user = users_by_id.get(_as_id(key))
            if user is None or user.id in covered:
                continue
            rule = _user_rule(user.id, user)
        elif rule_type is RuleType.PROFILE:
            name = ProfileName(str(key))
            uncovered = frozenset(u.id for u in profiles.get(name, [])) - covered
            if not uncovered:
                continue
            rule = _profile_rule(name, uncovered)
        else:
            role = roles_by_id.get(_as_id(key))
            if role is None:
                continue
            uncovered = frozenset(role.members) - covered
            if not uncovered:
                continue
            rule = _role_rule(role, uncovered)
        result.append(rule)
        covered |= rule.user_ids

    return result


def delete_rules(rules: Iterable[AccessRule], rule_ids: Collection[UUID]) -> list[AccessRule]:
    """Drop rules by id. Their users simply become unassigned."""
    ids = set(rule_ids)
    return [r for r in rules if r.id not in ids]


def filter_rules(
    rules: Iterable[AccessRule], rule_types: Collection[RuleType] | None = None
) -> list[AccessRule]:
    """Keep rules of the given types; ``None`` or empty keeps all of them."""
    if not rule_types:
        return list(rules)
    return [r for r in rules if r.rule_type in rule_types]


def _rule_matches(
    rule: AccessRule, term: str, users_by_id: Mapping[int, DirectoryUser]
) -> bool:
    haystack = (rule.condition, rule.rule_type.value, rule.details)
    if any(term in text.lower() for text in haystack):
        return True
    if rule.rule_type is RuleType.USER:
        return False
    # Group rows are also found by the names of the users they cover.
    for user_id in rule.user_ids:
        user = users_by_id.get(user_id)
        if user and term in user.display_name.lower():
            return True
    return False


def search_rules(
    rules: Iterable[AccessRule],
    term: str | None,
    all_users: Sequence[DirectoryUser] = (),
) -> list[AccessRule]:
    """Case-insensitive free-text search over rules."""
    needle = (term or "").strip().lower()
    if not needle:
        return list(rules)
    users_by_id = _index_users(all_users)
    return [r for r in rules if _rule_matches(r, needle, users_by_id)]
