"""Normalizer - maps raw DescribeRules payloads onto rule entities.

Payloads are the dicts boto3 returns for ``elbv2.describe_rules``. Slots are
copied only when present and never reordered, filtered or deduplicated.
"""
from typing import Any, Mapping

from awsx.domain.entities import (
    Action,
    Condition,
    FixedResponse,
    FixedResponseSlot,
    ForwardSlot,
    ForwardTarget,
    KeyValuePair,
    ListenerRule,
    QueryStringSlot,
    TargetGroupSlot,
    ValuesSlot,
)
from awsx.domain.entities import condition as slots
from awsx.domain.errors import ContractViolationError

# Remote config key -> flattened slot kind, in payload declaration order
CONDITION_CONFIG_KEYS = (
    ("HostHeaderConfig", slots.HOST_HEADER),
    ("HttpHeaderConfig", slots.HTTP_HEADER),
    ("HttpRequestMethodConfig", slots.HTTP_REQUEST_METHOD),
    ("PathPatternConfig", slots.PATH_PATTERN),
    ("SourceIpConfig", slots.SOURCE_IP),
)

OPERATION = "DescribeRules"


def _mapping(value: Any, where: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ContractViolationError(OPERATION, f"{where} is not an object: {value!r}")
    return value


def _optional_mapping(payload: Mapping[str, Any], key: str, where: str) -> Mapping[str, Any] | None:
    value = payload.get(key)
    return None if value is None else _mapping(value, f"{where}.{key}")


def _require(payload: Mapping[str, Any], key: str, where: str) -> Any:
    value = _mapping(payload, where).get(key)
    if value is None:
        raise ContractViolationError(OPERATION, f"required field {key!r} is absent in {where}")
    return value


def _as_int(value: Any, key: str, where: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise ContractViolationError(
            OPERATION, f"field {key!r} in {where} is not an integer: {value!r}"
        ) from e


def normalize_condition(payload: Mapping[str, Any], where: str = "condition") -> Condition:
    """
    Map one RuleCondition payload.

    Raises:
        ContractViolationError: If ``Field`` is absent or empty, or a
            query-string pair is missing its key or value, or a config slot
            is not an object
    """
    field = _mapping(payload, where).get("Field")
    if not field:
        raise ContractViolationError(OPERATION, f"{where} has no recognizable 'Field'")

    found: list = []
    for config_key, kind in CONDITION_CONFIG_KEYS:
        config = _optional_mapping(payload, config_key, where)
        if config is not None:
            found.append(ValuesSlot(kind=kind, values=tuple(config.get("Values") or ())))

    query_string = _optional_mapping(payload, "QueryStringConfig", where)
    if query_string is not None:
        pairs = []
        for idx, elem in enumerate(query_string.get("Values") or ()):
            pair_where = f"{where}.QueryStringConfig.Values[{idx}]"
            pairs.append(KeyValuePair(
                key=_require(elem, "Key", pair_where),
                value=_require(elem, "Value", pair_where),
            ))
        found.append(QueryStringSlot(pairs=tuple(pairs)))

    legacy_values = payload.get("Values")
    if legacy_values is not None:
        found.append(ValuesSlot(kind=slots.LEGACY_VALUES, values=tuple(legacy_values)))

    return Condition(field=field, slots=tuple(found))


def normalize_action(payload: Mapping[str, Any], where: str = "action") -> Action:
    """
    Map one Action payload.

    Raises:
        ContractViolationError: If ``Type`` or ``Order`` is absent, a forward
            target group lacks its ARN or weight, or a fixed response lacks
            any of its three fields, or a config slot is not an object
    """
    action_type = _require(payload, "Type", where)
    order = _as_int(_require(payload, "Order", where), "Order", where)

    found: list = []

    forward = _optional_mapping(payload, "ForwardConfig", where)
    if forward is not None:
        targets = []
        for idx, elem in enumerate(forward.get("TargetGroups") or ()):
            target_where = f"{where}.ForwardConfig.TargetGroups[{idx}]"
            targets.append(ForwardTarget(
                target_group_arn=_require(elem, "TargetGroupArn", target_where),
                weight=_as_int(_require(elem, "Weight", target_where), "Weight", target_where),
            ))
        found.append(ForwardSlot(targets=tuple(targets)))

    fixed = _optional_mapping(payload, "FixedResponseConfig", where)
    if fixed is not None:
        fixed_where = f"{where}.FixedResponseConfig"
        found.append(FixedResponseSlot(config=FixedResponse(
            status_code=_require(fixed, "StatusCode", fixed_where),
            message_body=_require(fixed, "MessageBody", fixed_where),
            content_type=_require(fixed, "ContentType", fixed_where),
        )))

    target_group_arn = payload.get("TargetGroupArn")
    if target_group_arn is not None:
        found.append(TargetGroupSlot(target_group_arn=target_group_arn))

    return Action(type=str(action_type), order=order, slots=tuple(found))


def normalize_rule(payload: Mapping[str, Any], where: str = "rule") -> ListenerRule:
    """
    Map one Rule payload, keeping condition and action order.

    Raises:
        ContractViolationError: If ``RuleArn``, ``IsDefault`` or ``Priority``
            is absent, or any nested entry violates its contract
    """
    rule_arn = _require(payload, "RuleArn", where)
    where = f"rule {rule_arn}"

    conditions = tuple(
        normalize_condition(c, f"{where} Conditions[{idx}]")
        for idx, c in enumerate(payload.get("Conditions") or ())
    )
    actions = tuple(
        normalize_action(a, f"{where} Actions[{idx}]")
        for idx, a in enumerate(payload.get("Actions") or ())
    )

    return ListenerRule(
        rule_arn=rule_arn,
        is_default=bool(_require(payload, "IsDefault", where)),
        priority=_require(payload, "Priority", where),
        conditions=conditions,
        actions=actions,
    )


def normalize_rules(payloads: list[Mapping[str, Any]]) -> list[ListenerRule]:
    """Map every rule payload; any violation aborts the whole batch."""
    return [normalize_rule(p, f"Rules[{idx}]") for idx, p in enumerate(payloads)]
