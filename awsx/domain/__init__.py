"""Domain layer for ALB listener rule normalization."""
from awsx.domain.entities import Action, Condition, CredentialSource, ListenerRule
from awsx.domain.errors import (
    AwsxError,
    ConfigLoadError,
    ContractViolationError,
    InvalidSessionNameError,
    RemoteQueryError,
    RoleAssumptionError,
)
from awsx.domain.records import flatten_rule, flatten_rules
from awsx.domain.value_objects import ActionType, ConditionField, ProviderConfig

__all__ = [
    "Action",
    "Condition",
    "CredentialSource",
    "ListenerRule",
    "AwsxError",
    "ConfigLoadError",
    "ContractViolationError",
    "InvalidSessionNameError",
    "RemoteQueryError",
    "RoleAssumptionError",
    "flatten_rule",
    "flatten_rules",
    "ActionType",
    "ConditionField",
    "ProviderConfig",
]
