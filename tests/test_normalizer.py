"""Tests for the DescribeRules payload normalizer and record flattening."""
import pytest

from awsx.application.normalizer import (
    normalize_action,
    normalize_condition,
    normalize_rule,
    normalize_rules,
)
from awsx.domain.errors import ContractViolationError
from awsx.domain.records import flatten_action, flatten_condition, flatten_rule, flatten_rules
from conftest import RULE_ARN, TARGET_GROUP_ARN

CONDITION_SLOTS = [
    "host_header_config",
    "http_header_config",
    "http_request_method_config",
    "path_pattern_config",
    "query_string_config",
    "source_ip_config",
    "values",
]


class TestNormalizeRules:
    """Test rule-level mapping."""

    def test_path_pattern_forward_scenario(self, path_pattern_rule):
        """One path-pattern rule maps to that exact record, all else empty."""
        [record] = flatten_rules(normalize_rules([path_pattern_rule]))

        assert record == {
            "rule_arn": RULE_ARN,
            "is_default": False,
            "priority": "1",
            "conditions": [{
                "field": "path-pattern",
                "host_header_config": None,
                "http_header_config": None,
                "http_request_method_config": None,
                "path_pattern_config": ["/api/*"],
                "query_string_config": None,
                "source_ip_config": None,
                "values": None,
            }],
            "actions": [{
                "type": "forward",
                "order": 1,
                "forward_config": None,
                "fixed_response_config": None,
                "target_group_arn": TARGET_GROUP_ARN,
            }],
        }

    def test_preserves_count_and_order(self, path_pattern_rule, default_rule):
        """Output mirrors the remote rule list one-to-one."""
        second = dict(path_pattern_rule, RuleArn=RULE_ARN + "-b", Priority="2")
        payloads = [second, default_rule, path_pattern_rule]

        rules = normalize_rules(payloads)

        assert len(rules) == len(payloads)
        assert [r.rule_arn for r in rules] == [p["RuleArn"] for p in payloads]

    def test_no_deduplication(self, path_pattern_rule):
        """Identical rules are not merged."""
        rules = normalize_rules([path_pattern_rule, path_pattern_rule])
        assert len(rules) == 2

    def test_empty_response(self):
        assert normalize_rules([]) == []

    def test_default_rule(self, default_rule):
        rule = normalize_rule(default_rule)
        assert rule.is_default is True
        assert rule.priority == "default"
        assert rule.conditions == ()

    @pytest.mark.parametrize("key", ["RuleArn", "IsDefault", "Priority"])
    def test_missing_rule_scalar(self, path_pattern_rule, key):
        """Absent rule scalars are contract violations."""
        del path_pattern_rule[key]
        with pytest.raises(ContractViolationError) as exc_info:
            normalize_rules([path_pattern_rule])
        assert key in str(exc_info.value)

    def test_violation_aborts_batch(self, path_pattern_rule, default_rule):
        """A bad rule anywhere yields no partial output."""
        bad = dict(path_pattern_rule, Conditions=[{"Values": ["/x"]}])
        with pytest.raises(ContractViolationError):
            normalize_rules([default_rule, bad])

    def test_condition_and_action_order_preserved(self, path_pattern_rule):
        path_pattern_rule["Conditions"].append({
            "Field": "host-header",
            "HostHeaderConfig": {"Values": ["b.example.com", "a.example.com"]},
        })
        path_pattern_rule["Actions"].insert(0, {"Type": "authenticate-oidc", "Order": 2})

        rule = normalize_rule(path_pattern_rule)

        assert [c.field for c in rule.conditions] == ["path-pattern", "host-header"]
        assert [a.order for a in rule.actions] == [2, 1]
        record = flatten_rule(rule)
        assert record["conditions"][1]["host_header_config"] == ["b.example.com", "a.example.com"]


class TestNormalizeCondition:
    """Test condition union mapping."""

    @pytest.mark.parametrize("field,config_key,slot", [
        ("host-header", "HostHeaderConfig", "host_header_config"),
        ("http-header", "HttpHeaderConfig", "http_header_config"),
        ("http-request-method", "HttpRequestMethodConfig", "http_request_method_config"),
        ("path-pattern", "PathPatternConfig", "path_pattern_config"),
        ("source-ip", "SourceIpConfig", "source_ip_config"),
    ])
    def test_only_present_slot_is_populated(self, field, config_key, slot):
        """Exactly the slot present in the payload is non-empty."""
        payload = {"Field": field, config_key: {"Values": ["v1", "v2"]}}

        record = flatten_condition(normalize_condition(payload))

        assert record["field"] == field
        assert record[slot] == ["v1", "v2"]
        for other in CONDITION_SLOTS:
            if other != slot:
                assert record[other] is None

    def test_http_header_keeps_values_only(self):
        payload = {
            "Field": "http-header",
            "HttpHeaderConfig": {"HttpHeaderName": "X-Env", "Values": ["prod"]},
        }
        record = flatten_condition(normalize_condition(payload))
        assert record["http_header_config"] == ["prod"]

    def test_legacy_values_condition(self):
        """Legacy form fills values only, structured slots stay empty."""
        payload = {"Field": "path-pattern", "Values": ["/legacy/*", "/old/*"]}

        condition = normalize_condition(payload)
        record = flatten_condition(condition)

        assert condition.is_legacy()
        assert record["values"] == ["/legacy/*", "/old/*"]
        for slot in CONDITION_SLOTS[:-1]:
            assert record[slot] is None

    def test_query_string_pairs(self):
        payload = {
            "Field": "query-string",
            "QueryStringConfig": {"Values": [
                {"Key": "version", "Value": "v1"},
                {"Key": "lang", "Value": "en"},
            ]},
        }

        record = flatten_condition(normalize_condition(payload))

        assert record["query_string_config"] == [
            {"key": "version", "value": "v1"},
            {"key": "lang", "value": "en"},
        ]

    @pytest.mark.parametrize("pair", [{"Key": "version"}, {"Value": "v1"}])
    def test_query_string_pair_missing_half(self, pair):
        payload = {"Field": "query-string", "QueryStringConfig": {"Values": [pair]}}
        with pytest.raises(ContractViolationError):
            normalize_condition(payload)

    @pytest.mark.parametrize("payload", [
        {"Field": "path-pattern", "PathPatternConfig": ["/x"]},
        {"Field": "query-string", "QueryStringConfig": "version=v1"},
        {"Field": "query-string", "QueryStringConfig": {"Values": ["version=v1"]}},
    ])
    def test_config_slot_not_an_object(self, payload):
        with pytest.raises(ContractViolationError) as exc_info:
            normalize_condition(payload)
        assert "is not an object" in str(exc_info.value)

    def test_missing_field(self):
        with pytest.raises(ContractViolationError) as exc_info:
            normalize_condition({"PathPatternConfig": {"Values": ["/x"]}})
        assert "Field" in str(exc_info.value)

    def test_present_but_empty_slot_stays_empty_list(self):
        """A present slot with no values is copied as an empty list, not None."""
        record = flatten_condition(normalize_condition({
            "Field": "source-ip",
            "SourceIpConfig": {"Values": []},
        }))
        assert record["source_ip_config"] == []

    def test_multiple_slots_pass_through(self):
        """The one-slot invariant is not enforced."""
        payload = {
            "Field": "path-pattern",
            "PathPatternConfig": {"Values": ["/api/*"]},
            "Values": ["/api/*"],
        }
        record = flatten_condition(normalize_condition(payload))
        assert record["path_pattern_config"] == ["/api/*"]
        assert record["values"] == ["/api/*"]

    def test_unknown_field_passes_through(self):
        condition = normalize_condition({"Field": "future-field", "Values": ["x"]})
        assert condition.field == "future-field"
        assert condition.expected_slot is None


class TestNormalizeAction:
    """Test action union mapping."""

    def test_weighted_forward(self):
        payload = {
            "Type": "forward",
            "Order": 1,
            "ForwardConfig": {
                "TargetGroups": [
                    {"TargetGroupArn": "arn:tg/blue", "Weight": 80},
                    {"TargetGroupArn": "arn:tg/green", "Weight": 20},
                ],
                "TargetGroupStickinessConfig": {"Enabled": False},
            },
        }

        record = flatten_action(normalize_action(payload))

        assert record["forward_config"] == [
            {"target_group_arn": "arn:tg/blue", "weight": 80},
            {"target_group_arn": "arn:tg/green", "weight": 20},
        ]
        assert record["fixed_response_config"] is None
        assert record["target_group_arn"] is None

    def test_forward_with_both_shapes(self):
        """Single-target forwards often carry both the legacy ARN and ForwardConfig."""
        payload = {
            "Type": "forward",
            "Order": 1,
            "TargetGroupArn": "arn:tg/blue",
            "ForwardConfig": {"TargetGroups": [{"TargetGroupArn": "arn:tg/blue", "Weight": 1}]},
        }
        record = flatten_action(normalize_action(payload))
        assert record["target_group_arn"] == "arn:tg/blue"
        assert len(record["forward_config"]) == 1

    @pytest.mark.parametrize("target", [{"Weight": 1}, {"TargetGroupArn": "arn:tg/blue"}])
    def test_forward_target_missing_field(self, target):
        payload = {"Type": "forward", "Order": 1, "ForwardConfig": {"TargetGroups": [target]}}
        with pytest.raises(ContractViolationError):
            normalize_action(payload)

    def test_fixed_response(self, default_rule):
        record = flatten_action(normalize_action(default_rule["Actions"][0]))
        assert record["fixed_response_config"] == {
            "status_code": "404",
            "message_body": "not found",
            "content_type": "text/plain",
        }
        assert record["forward_config"] is None

    @pytest.mark.parametrize("key", ["StatusCode", "MessageBody", "ContentType"])
    def test_fixed_response_missing_field(self, default_rule, key):
        payload = default_rule["Actions"][0]
        del payload["FixedResponseConfig"][key]
        with pytest.raises(ContractViolationError):
            normalize_action(payload)

    @pytest.mark.parametrize("payload", [
        {"Type": "forward", "Order": 1, "ForwardConfig": ["arn:tg/blue"]},
        {"Type": "forward", "Order": 1, "ForwardConfig": {"TargetGroups": ["arn:tg/blue"]}},
        {"Type": "fixed-response", "Order": 1, "FixedResponseConfig": "404"},
    ])
    def test_config_slot_not_an_object(self, payload):
        with pytest.raises(ContractViolationError) as exc_info:
            normalize_action(payload)
        assert "is not an object" in str(exc_info.value)

    def test_non_object_condition_aborts_rule(self, path_pattern_rule):
        path_pattern_rule["Conditions"] = ["path-pattern"]
        with pytest.raises(ContractViolationError):
            normalize_rule(path_pattern_rule)

    def test_redirect_is_type_only(self):
        """Undecoded action types carry no slots."""
        payload = {
            "Type": "redirect",
            "Order": 3,
            "RedirectConfig": {"Protocol": "HTTPS", "Port": "443", "StatusCode": "HTTP_301"},
        }
        record = flatten_action(normalize_action(payload))
        assert record == {
            "type": "redirect",
            "order": 3,
            "forward_config": None,
            "fixed_response_config": None,
            "target_group_arn": None,
        }

    @pytest.mark.parametrize("key", ["Type", "Order"])
    def test_missing_type_or_order(self, key):
        payload = {"Type": "forward", "Order": 1, "TargetGroupArn": "arn:tg/blue"}
        del payload[key]
        with pytest.raises(ContractViolationError):
            normalize_action(payload)
