"""Action entity and its slot variants."""
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class ForwardTarget:
    """One weighted target group of a multi-target forward action."""

    target_group_arn: str
    weight: int


@dataclass(frozen=True)
class FixedResponse:
    """Fixed response returned by the load balancer."""

    status_code: str
    message_body: str
    content_type: str


@dataclass(frozen=True)
class ForwardSlot:
    targets: tuple[ForwardTarget, ...]

    kind = "forward_config"


@dataclass(frozen=True)
class FixedResponseSlot:
    config: FixedResponse

    kind = "fixed_response_config"


@dataclass(frozen=True)
class TargetGroupSlot:
    """Legacy single target group of a forward action."""

    target_group_arn: str

    kind = "target_group_arn"


ActionSlot = Union[ForwardSlot, FixedResponseSlot, TargetGroupSlot]


@dataclass(frozen=True)
class Action:
    """A listener rule action. ``order`` is 1-based and unique within a rule."""

    type: str
    order: int
    slots: tuple[ActionSlot, ...] = ()

    def get_slot(self, kind: str) -> ActionSlot | None:
        """Get the slot of the given kind, if populated."""
        for slot in self.slots:
            if slot.kind == kind:
                return slot
        return None

    @property
    def forward_targets(self) -> tuple[ForwardTarget, ...] | None:
        slot = self.get_slot(ForwardSlot.kind)
        return slot.targets if slot else None

    @property
    def fixed_response(self) -> FixedResponse | None:
        slot = self.get_slot(FixedResponseSlot.kind)
        return slot.config if slot else None

    @property
    def target_group_arn(self) -> str | None:
        slot = self.get_slot(TargetGroupSlot.kind)
        return slot.target_group_arn if slot else None

    def __str__(self) -> str:
        return f"Action({self.order}, {self.type})"
