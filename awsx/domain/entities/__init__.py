"""Domain entities for listener rule normalization."""
from awsx.domain.entities.action import (
    Action,
    FixedResponse,
    FixedResponseSlot,
    ForwardSlot,
    ForwardTarget,
    TargetGroupSlot,
)
from awsx.domain.entities.condition import (
    Condition,
    KeyValuePair,
    QueryStringSlot,
    ValuesSlot,
)
from awsx.domain.entities.credential_source import CredentialSet, CredentialSource
from awsx.domain.entities.listener_rule import ListenerRule

__all__ = [
    "Action",
    "FixedResponse",
    "FixedResponseSlot",
    "ForwardSlot",
    "ForwardTarget",
    "TargetGroupSlot",
    "Condition",
    "KeyValuePair",
    "QueryStringSlot",
    "ValuesSlot",
    "CredentialSet",
    "CredentialSource",
    "ListenerRule",
]
