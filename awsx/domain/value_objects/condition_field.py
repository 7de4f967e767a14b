"""Condition field vocabulary for ALB listener rules."""
from enum import Enum


class ConditionField(str, Enum):
    """Fields a listener rule condition can match on."""

    HOST_HEADER = "host-header"
    HTTP_HEADER = "http-header"
    HTTP_REQUEST_METHOD = "http-request-method"
    PATH_PATTERN = "path-pattern"
    QUERY_STRING = "query-string"
    SOURCE_IP = "source-ip"

    @classmethod
    def is_known(cls, value: str) -> bool:
        """Check if a raw field string belongs to the vocabulary."""
        return value in cls._value2member_map_

    @property
    def config_slot(self) -> str:
        """Name of the flattened slot that carries this field's values."""
        mapping = {
            ConditionField.HOST_HEADER: "host_header_config",
            ConditionField.HTTP_HEADER: "http_header_config",
            ConditionField.HTTP_REQUEST_METHOD: "http_request_method_config",
            ConditionField.PATH_PATTERN: "path_pattern_config",
            ConditionField.QUERY_STRING: "query_string_config",
            ConditionField.SOURCE_IP: "source_ip_config",
        }
        return mapping[self]

    @property
    def display_name(self) -> str:
        """Human-readable name for the condition field."""
        mapping = {
            ConditionField.HOST_HEADER: "Host header",
            ConditionField.HTTP_HEADER: "HTTP header",
            ConditionField.HTTP_REQUEST_METHOD: "HTTP request method",
            ConditionField.PATH_PATTERN: "Path pattern",
            ConditionField.QUERY_STRING: "Query string",
            ConditionField.SOURCE_IP: "Source IP",
        }
        return mapping[self]
