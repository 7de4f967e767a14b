"""Attribute schema of the listener rules data source.

The host validates state strictly against this shape, so the flattened
records in ``awsx.domain.records`` must carry exactly these keys.
"""

STRING = "string"
BOOL = "bool"
NUMBER = "number"


def list_of(elem_type):
    return {"list": elem_type}


def object_of(**attr_types):
    return {"object": attr_types}


KEY_VALUE_TYPE = object_of(key=STRING, value=STRING)

CONDITION_TYPE = object_of(
    field=STRING,
    host_header_config=list_of(STRING),
    http_header_config=list_of(STRING),
    http_request_method_config=list_of(STRING),
    path_pattern_config=list_of(STRING),
    query_string_config=list_of(KEY_VALUE_TYPE),
    source_ip_config=list_of(STRING),
    values=list_of(STRING),
)

FORWARD_TARGET_TYPE = object_of(target_group_arn=STRING, weight=NUMBER)

FIXED_RESPONSE_TYPE = object_of(status_code=STRING, message_body=STRING, content_type=STRING)

ACTION_TYPE = object_of(
    type=STRING,
    order=NUMBER,
    forward_config=list_of(FORWARD_TARGET_TYPE),
    fixed_response_config=FIXED_RESPONSE_TYPE,
    target_group_arn=STRING,
)

RULE_TYPE = object_of(
    rule_arn=STRING,
    is_default=BOOL,
    priority=STRING,
    conditions=list_of(CONDITION_TYPE),
    actions=list_of(ACTION_TYPE),
)

RULES_SCHEMA = {
    "listener_arn": {
        "type": STRING,
        "required": True,
        "description": "ARN of an ELB listener",
    },
    "rules": {
        "type": list_of(RULE_TYPE),
        "computed": True,
        "description": "List of ELB rules",
    },
}


def attribute_names(type_spec: dict) -> list[str]:
    """Return the attribute names of an object type, unwrapping lists."""
    while "list" in type_spec:
        type_spec = type_spec["list"]
    return list(type_spec["object"])


def describe(type_spec, indent: int = 0) -> list[str]:
    """Render a type spec as indented ``name: type`` lines."""
    lines = []
    pad = "  " * indent
    obj = type_spec
    while isinstance(obj, dict) and "list" in obj:
        obj = obj["list"]
    for name, attr_type in obj["object"].items():
        if isinstance(attr_type, str):
            lines.append(f"{pad}{name}: {attr_type}")
            continue
        kind = "list(object)" if "list" in attr_type else "object"
        if "list" in attr_type and isinstance(attr_type["list"], str):
            lines.append(f"{pad}{name}: list({attr_type['list']})")
            continue
        lines.append(f"{pad}{name}: {kind}")
        lines.extend(describe(attr_type, indent + 1))
    return lines
