"""Provider configuration value object."""
import re
from dataclasses import dataclass
from typing import Any, Mapping

from awsx.domain.errors import ConfigLoadError, InvalidSessionNameError

DEFAULT_SESSION_NAME = "awsx-lb-listener-rules"
DEFAULT_CONNECT_TIMEOUT = 60.0
DEFAULT_READ_TIMEOUT = 60.0

SESSION_NAME_MIN_LENGTH = 2
SESSION_NAME_MAX_LENGTH = 64
SESSION_NAME_PATTERN = re.compile(r"[A-Za-z0-9+=,.@_-]+")


@dataclass(frozen=True)
class ProviderConfig:
    """
    Immutable provider configuration threaded into every operation.

    Timeouts bound each remote call and are passed to botocore as-is.
    """

    region: str
    assume_role_arn: str | None = None
    session_name: str | None = None
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT
    read_timeout: float = DEFAULT_READ_TIMEOUT

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ProviderConfig":
        """
        Decode a configuration record.

        Args:
            data: Mapping with ``region`` and optional ``assume_role_arn``,
                ``session_name``, ``connect_timeout``, ``read_timeout``

        Returns:
            ProviderConfig instance

        Raises:
            ConfigLoadError: If region is missing or a timeout is not a number
        """
        region = _optional_str(data.get("region"))
        if not region:
            raise ConfigLoadError("Configure", "the 'region' attribute is required")

        try:
            connect_timeout = float(data.get("connect_timeout") or DEFAULT_CONNECT_TIMEOUT)
            read_timeout = float(data.get("read_timeout") or DEFAULT_READ_TIMEOUT)
        except (TypeError, ValueError) as e:
            raise ConfigLoadError("Configure", f"invalid timeout: {e}") from e

        return cls(
            region=region,
            assume_role_arn=_optional_str(data.get("assume_role_arn")),
            session_name=_session_name(data.get("session_name")),
            connect_timeout=connect_timeout,
            read_timeout=read_timeout,
        )

    @property
    def should_assume_role(self) -> bool:
        """True only when the role ARN is a non-empty, known value."""
        return bool(self.assume_role_arn)

    @property
    def effective_session_name(self) -> str:
        return self.session_name if self.session_name is not None else DEFAULT_SESSION_NAME


def _optional_str(value: Any) -> str | None:
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def _session_name(value: Any) -> str | None:
    # Supplied names go to validation unchanged, even blank ones
    return None if value is None else str(value)


def validate_session_name(session_name: str) -> str:
    """
    Validate a role session name against the STS constraints.

    Raises:
        InvalidSessionNameError: If length is outside 2-64 or a character is
            outside ``[A-Za-z0-9+=,.@_-]``
    """
    if not SESSION_NAME_MIN_LENGTH <= len(session_name) <= SESSION_NAME_MAX_LENGTH:
        raise InvalidSessionNameError(
            "ValidateSessionName",
            f"session name must be between {SESSION_NAME_MIN_LENGTH} and "
            f"{SESSION_NAME_MAX_LENGTH} characters, got {len(session_name)}",
        )
    if not SESSION_NAME_PATTERN.fullmatch(session_name):
        raise InvalidSessionNameError(
            "ValidateSessionName",
            "Name must be a string of characters consisting of upper- and lower-case alphanumeric"
            " characters with no spaces. You can also include underscores or any of"
            " the following characters: =,.@-",
        )
    return session_name
