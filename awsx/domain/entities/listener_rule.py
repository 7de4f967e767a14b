"""ListenerRule entity representing one rule of an ALB listener."""
from dataclasses import dataclass

from awsx.domain.entities.action import Action
from awsx.domain.entities.condition import Condition


@dataclass(frozen=True)
class ListenerRule:
    """
    Represents an ALB listener rule.

    Conditions and actions keep the order returned by DescribeRules; it is
    evaluation-significant on the load balancer.
    """

    rule_arn: str
    is_default: bool
    priority: str
    conditions: tuple[Condition, ...] = ()
    actions: tuple[Action, ...] = ()

    def __str__(self) -> str:
        default_str = "default" if self.is_default else f"priority {self.priority}"
        return f"ListenerRule({self.rule_arn}, {default_str})"
