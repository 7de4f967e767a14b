"""Test configuration and shared fixtures."""
from typing import Any

import pytest

from awsx.ports.outbound import TemporaryCredentials

LISTENER_ARN = (
    "arn:aws:elasticloadbalancing:us-east-1:123456789012:listener/app/x/1/2"
)
RULE_ARN = (
    "arn:aws:elasticloadbalancing:us-east-1:123456789012:listener-rule/app/x/1/2/3"
)
TARGET_GROUP_ARN = (
    "arn:aws:elasticloadbalancing:us-east-1:123456789012:targetgroup/tg/4"
)
ROLE_ARN = "arn:aws:iam::123456789012:role/ListenerReader"


class RecordingLogger:
    """LoggerPort implementation that keeps every entry in memory."""

    def __init__(self):
        self.entries: list[tuple[str, str, dict]] = []

    def debug(self, message: str, **kwargs: Any) -> None:
        self.entries.append(("DEBUG", message, kwargs))

    def info(self, message: str, **kwargs: Any) -> None:
        self.entries.append(("INFO", message, kwargs))

    def warning(self, message: str, **kwargs: Any) -> None:
        self.entries.append(("WARNING", message, kwargs))

    def error(self, message: str, exception: Exception | None = None, **kwargs: Any) -> None:
        self.entries.append(("ERROR", message, {"exception": exception, **kwargs}))

    def set_level(self, level: str) -> None:
        pass

    def messages(self, level: str) -> list[str]:
        return [message for lvl, message, _ in self.entries if lvl == level]


class FakeAWSClient:
    """AWSClientPort implementation recording every remote call."""

    def __init__(
        self,
        rules: list[dict] | None = None,
        temporary: TemporaryCredentials | None = None,
        error: Exception | None = None,
    ):
        self.rules = rules or []
        self.temporary = temporary or TemporaryCredentials("ASIATEMP", "temp-secret", "temp-token")
        self.error = error
        self.assume_role_calls: list[tuple[str, str]] = []
        self.describe_rules_calls: list[str] = []

    def assume_role(self, role_arn: str, session_name: str) -> TemporaryCredentials:
        self.assume_role_calls.append((role_arn, session_name))
        if self.error:
            raise self.error
        return self.temporary

    def describe_rules(self, listener_arn: str) -> list[dict]:
        self.describe_rules_calls.append(listener_arn)
        if self.error:
            raise self.error
        return self.rules


class FakeSession:
    """Stand-in for boto3.Session recording its construction kwargs."""

    def __init__(self, credentials: Any = None, clients: dict | None = None, **kwargs: Any):
        self.kwargs = kwargs
        self._credentials = credentials
        self._clients = clients or {}
        self.client_calls: list[tuple[str, dict]] = []

    def get_credentials(self) -> Any:
        return self._credentials

    def client(self, service: str, **kwargs: Any) -> Any:
        self.client_calls.append((service, kwargs))
        return self._clients[service]


class FakeSessionFactory:
    """Callable building FakeSessions, one per call."""

    def __init__(self, error: Exception | None = None):
        self.error = error
        self.sessions: list[FakeSession] = []

    def __call__(self, **kwargs: Any) -> FakeSession:
        if self.error:
            raise self.error
        session = FakeSession(**kwargs)
        self.sessions.append(session)
        return session


@pytest.fixture
def sample_region() -> str:
    """Sample AWS region for testing."""
    return "us-east-1"


@pytest.fixture
def listener_arn() -> str:
    return LISTENER_ARN


@pytest.fixture
def logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def path_pattern_rule() -> dict:
    """Single forward rule matching /api/* as returned by describe_rules."""
    return {
        "RuleArn": RULE_ARN,
        "Priority": "1",
        "IsDefault": False,
        "Conditions": [
            {
                "Field": "path-pattern",
                "PathPatternConfig": {"Values": ["/api/*"]},
            },
        ],
        "Actions": [
            {
                "Type": "forward",
                "Order": 1,
                "TargetGroupArn": TARGET_GROUP_ARN,
            },
        ],
    }


@pytest.fixture
def default_rule() -> dict:
    """Default rule returning a fixed 404 response."""
    return {
        "RuleArn": RULE_ARN.replace("/3", "/default"),
        "Priority": "default",
        "IsDefault": True,
        "Conditions": [],
        "Actions": [
            {
                "Type": "fixed-response",
                "Order": 1,
                "FixedResponseConfig": {
                    "StatusCode": "404",
                    "MessageBody": "not found",
                    "ContentType": "text/plain",
                },
            },
        ],
    }
