"""Access rule API resource."""

from uuid import UUID, uuid4

import falcon.asgi

from custom_dashboard.application.use_cases.access.add_access_rules import (
    AddAccessRulesUseCase,
)
from custom_dashboard.application.use_cases.access.get_access_rules import (
    GetAccessRulesUseCase,
)
from custom_dashboard.application.use_cases.access.save_access_rules import (
    SaveAccessRulesUseCase,
)
from custom_dashboard.domain.entities import AccessRule
from custom_dashboard.domain.exceptions import NotFound, ValidationError
from custom_dashboard.domain.value_objects import RuleType
from custom_dashboard.interfaces.api.resources.common import fail, ok, parse_int


def rule_to_dict(rule: AccessRule) -> dict:
    return {
        "id": str(rule.id),
        "ruleType": rule.rule_type.value,
        "condition": rule.condition,
        "details": rule.details,
        "userIds": sorted(rule.user_ids),
    }


def _rule_type(value: object) -> RuleType:
    try:
        return RuleType(value)
    except ValueError:
        raise ValidationError(f"Unknown rule type: {value}") from None


def rule_from_dict(data: object) -> AccessRule:
    """Rebuild a client-held rule; ids are kept so rules stay addressable."""
    if not isinstance(data, dict):
        raise ValidationError("Rule must be an object")
    user_ids = data.get("userIds")
    if not isinstance(user_ids, list) or not user_ids:
        raise ValidationError("Rule userIds must be a non-empty list")
    parsed = [parse_int(u) for u in user_ids]
    if any(u is None for u in parsed):
        raise ValidationError("Rule userIds must contain integer ids")
    raw_id = data.get("id")
    try:
        rule_id = UUID(str(raw_id)) if raw_id else uuid4()
    except ValueError:
        raise ValidationError(f"Invalid rule id: {raw_id}") from None
    return AccessRule(
        id=rule_id,
        rule_type=_rule_type(data.get("ruleType", RuleType.USER.value)),
        condition=str(data.get("condition") or ""),
        details=str(data.get("details") or ""),
        user_ids=frozenset(parsed),
    )


def _rules_from_body(body: object) -> list[AccessRule]:
    if not isinstance(body, dict):
        raise ValidationError("Invalid request body")
    rules = body.get("rules", [])
    if not isinstance(rules, list):
        raise ValidationError("rules must be a list")
    return [rule_from_dict(r) for r in rules]


def _selection_keys(rule_type: RuleType, keys: object) -> list[int | str]:
    if not isinstance(keys, list) or not keys:
        raise ValidationError("keys must be a non-empty list")
    if rule_type is RuleType.PROFILE:
        return [str(k) for k in keys]
    ids = [parse_int(k) for k in keys]
    if any(i is None for i in ids):
        raise ValidationError(f"{rule_type.value} keys must be integer ids")
    return ids


class AccessRulesResource:
    """GET/POST/PUT /api/dashboards/{dashboard_id}/access-rules."""

    def __init__(
        self,
        get_rules: GetAccessRulesUseCase,
        add_rules: AddAccessRulesUseCase,
        save_rules: SaveAccessRulesUseCase,
    ) -> None:
        self._get = get_rules
        self._add = add_rules
        self._save = save_rules

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, dashboard_id: str
    ) -> None:
        """Rules reconstructed from the dashboard's assignment.

        ``type`` and ``search`` narrow the returned view only. Clients that
        filter must keep the unfiltered list for saving.
        """
        dash_id = parse_int(dashboard_id)
        if dash_id is None:
            fail(resp, falcon.HTTP_400, "Invalid dashboard ID")
            return
        try:
            types = [_rule_type(t) for t in req.get_param_as_list("type") or []]
            rules = await self._get.execute(
                req.context.tenant,
                dash_id,
                rule_types=types or None,
                search=req.get_param("search"),
            )
        except ValidationError as e:
            fail(resp, falcon.HTTP_400, str(e))
            return
        except NotFound as e:
            fail(resp, falcon.HTTP_404, str(e))
            return
        ok(resp, [rule_to_dict(r) for r in rules])

    async def on_post(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, dashboard_id: str
    ) -> None:
        """Append rules for selected users, profiles or roles."""
        dash_id = parse_int(dashboard_id)
        if dash_id is None:
            fail(resp, falcon.HTTP_400, "Invalid dashboard ID")
            return
        body = await req.get_media(default_when_empty={})
        try:
            rules = _rules_from_body(body)
            rule_type = _rule_type(body.get("ruleType"))
            keys = _selection_keys(rule_type, body.get("keys"))
            result = await self._add.execute(
                req.context.tenant, dash_id, rules, rule_type, keys
            )
        except ValidationError as e:
            fail(resp, falcon.HTTP_400, str(e))
            return
        except NotFound as e:
            fail(resp, falcon.HTTP_404, str(e))
            return
        ok(
            resp,
            {
                "items": [rule_to_dict(r) for r in result],
                "added": [rule_to_dict(r) for r in result[len(rules):]],
            },
        )

    async def on_put(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, dashboard_id: str
    ) -> None:
        """Flatten rules and persist the dashboard's user assignment.

        The body replaces the whole assignment, so it must carry the complete
        rule list. Users covered by no rule in it become unassigned, which
        includes rules hidden by a filtered or searched GET.
        """
        dash_id = parse_int(dashboard_id)
        if dash_id is None:
            fail(resp, falcon.HTTP_400, "Invalid dashboard ID")
            return
        try:
            rules = _rules_from_body(await req.get_media(default_when_empty={}))
            user_ids = await self._save.execute(req.context.tenant, dash_id, rules)
        except ValidationError as e:
            fail(resp, falcon.HTTP_400, str(e))
            return
        except NotFound as e:
            fail(resp, falcon.HTTP_404, str(e))
            return
        ok(resp, {"userIds": sorted(user_ids)}, message="Access rules saved successfully")
