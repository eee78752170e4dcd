"""User display name resolution from profile attribute config."""

import json


def fallback_name(user_id: int) -> str:
    return f"User {user_id}"


def resolve_display_name(user_id: int, display_attr: object, user_attrs: object) -> str:
    """Pick the user's display name from its attribute list.

    ``user_attrs`` is a list of ``{"attrId": ..., "attrVal": ...}`` (or its
    JSON text). The attribute named by the profile's ``display_attr`` wins,
    then the first non-empty value, then ``"User <id>"``.
    """
    if display_attr is None:
        return fallback_name(user_id)

    attrs = user_attrs
    if isinstance(attrs, (str, bytes)):
        try:
            attrs = json.loads(attrs)
        except json.JSONDecodeError:
            return fallback_name(user_id)
    if not isinstance(attrs, list):
        return fallback_name(user_id)

    wanted = str(display_attr)
    for attr in attrs:
        if isinstance(attr, dict) and str(attr.get("attrId")) == wanted and attr.get("attrVal"):
            return str(attr["attrVal"])

    for attr in attrs:
        if isinstance(attr, dict) and attr.get("attrVal"):
            return str(attr["attrVal"])

    return fallback_name(user_id)
