"""Mapping from rule entities to the flattened, all-slots-present record.

Every optional slot is always emitted. A slot the remote payload did not
populate is ``None``.
"""
from typing import Any

from awsx.domain.entities import Action, Condition, ListenerRule, QueryStringSlot, ValuesSlot
from awsx.domain.entities.condition import VALUES_SLOT_KINDS


def flatten_condition(condition: Condition) -> dict[str, Any]:
    record: dict[str, Any] = {"field": condition.field}
    for kind in VALUES_SLOT_KINDS:
        record[kind] = None
    record[QueryStringSlot.kind] = None

    for slot in condition.slots:
        if isinstance(slot, ValuesSlot):
            record[slot.kind] = list(slot.values)
        elif isinstance(slot, QueryStringSlot):
            record[slot.kind] = [{"key": p.key, "value": p.value} for p in slot.pairs]

    return record


def flatten_action(action: Action) -> dict[str, Any]:
    forward_config = None
    if action.forward_targets is not None:
        forward_config = [
            {"target_group_arn": t.target_group_arn, "weight": t.weight}
            for t in action.forward_targets
        ]

    fixed_response_config = None
    if action.fixed_response is not None:
        fixed_response_config = {
            "status_code": action.fixed_response.status_code,
            "message_body": action.fixed_response.message_body,
            "content_type": action.fixed_response.content_type,
        }

    return {
        "type": action.type,
        "order": action.order,
        "forward_config": forward_config,
        "fixed_response_config": fixed_response_config,
        "target_group_arn": action.target_group_arn,
    }


def flatten_rule(rule: ListenerRule) -> dict[str, Any]:
    """Flatten a rule into the record shape declared by ``RULES_SCHEMA``."""
    return {
        "rule_arn": rule.rule_arn,
        "is_default": rule.is_default,
        "priority": rule.priority,
        "conditions": [flatten_condition(c) for c in rule.conditions],
        "actions": [flatten_action(a) for a in rule.actions],
    }


def flatten_rules(rules: list[ListenerRule]) -> list[dict[str, Any]]:
    return [flatten_rule(rule) for rule in rules]
