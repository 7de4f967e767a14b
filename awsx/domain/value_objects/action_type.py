"""Action type vocabulary for ALB listener rules."""
from enum import Enum


class ActionType(str, Enum):
    """
    Action types a listener rule can carry.

    Only forward and fixed-response payloads are decoded; the other types
    are represented by their type string and order alone.
    """

    FORWARD = "forward"
    FIXED_RESPONSE = "fixed-response"
    REDIRECT = "redirect"
    AUTHENTICATE_OIDC = "authenticate-oidc"
    AUTHENTICATE_COGNITO = "authenticate-cognito"

    @classmethod
    def is_known(cls, value: str) -> bool:
        """Check if a raw type string belongs to the vocabulary."""
        return value in cls._value2member_map_

    @property
    def is_decoded(self) -> bool:
        """Check if this type's payload is mapped into the flattened record."""
        return self in (ActionType.FORWARD, ActionType.FIXED_RESPONSE)
