"""Condition entity and its slot variants."""
from dataclasses import dataclass
from typing import Union

from awsx.domain.value_objects.condition_field import ConditionField

# Slot kinds holding a plain list of strings
HOST_HEADER = "host_header_config"
HTTP_HEADER = "http_header_config"
HTTP_REQUEST_METHOD = "http_request_method_config"
PATH_PATTERN = "path_pattern_config"
SOURCE_IP = "source_ip_config"
LEGACY_VALUES = "values"

VALUES_SLOT_KINDS = (
    HOST_HEADER,
    HTTP_HEADER,
    HTTP_REQUEST_METHOD,
    PATH_PATTERN,
    SOURCE_IP,
    LEGACY_VALUES,
)


@dataclass(frozen=True)
class KeyValuePair:
    """A query-string match pair. Both halves are required."""

    key: str
    value: str


@dataclass(frozen=True)
class ValuesSlot:
    """A populated list-of-strings slot, tagged by its kind."""

    kind: str
    values: tuple[str, ...]


@dataclass(frozen=True)
class QueryStringSlot:
    """A populated query-string slot."""

    pairs: tuple[KeyValuePair, ...]

    kind = "query_string_config"


ConditionSlot = Union[ValuesSlot, QueryStringSlot]


@dataclass(frozen=True)
class Condition:
    """
    A listener rule condition.

    Holds the field tag plus every slot the remote payload populated, in
    payload order. Well-formed data populates a single slot, but that is
    not enforced here.
    """

    field: str
    slots: tuple[ConditionSlot, ...] = ()

    def get_slot(self, kind: str) -> ConditionSlot | None:
        """Get the slot of the given kind, if populated."""
        for slot in self.slots:
            if slot.kind == kind:
                return slot
        return None

    @property
    def expected_slot(self) -> str | None:
        """Slot kind that the field tag calls for, or None for legacy fields."""
        if ConditionField.is_known(self.field):
            return ConditionField(self.field).config_slot
        return None

    def is_legacy(self) -> bool:
        """Check if the condition only uses the legacy values list."""
        return [slot.kind for slot in self.slots] == [LEGACY_VALUES]

    def __str__(self) -> str:
        kinds = ", ".join(slot.kind for slot in self.slots) or "no slots"
        return f"Condition({self.field}, {kinds})"
