"""AWS Client Port - Interface for the remote calls made by the provider."""
from datetime import datetime
from typing import NamedTuple, Protocol


class TemporaryCredentials(NamedTuple):
    """Key/secret/token triple returned by an STS role assumption."""

    access_key_id: str
    secret_access_key: str
    session_token: str
    expiration: datetime | None = None


class AWSClientPort(Protocol):
    """
    Port interface for AWS operations.

    Retry and backoff belong to the implementation's transport; callers see
    a single success or a single error per call.
    """

    def assume_role(self, role_arn: str, session_name: str) -> TemporaryCredentials:
        """
        Exchange the client's credentials for a role's temporary credentials.

        Args:
            role_arn: ARN of the role to assume
            session_name: Name for the assumed role session

        Returns:
            TemporaryCredentials for the role

        Raises:
            RoleAssumptionError: If the exchange fails or is incomplete
        """
        ...

    def describe_rules(self, listener_arn: str) -> list[dict]:
        """
        Describe the rules of a listener in a single call.

        Args:
            listener_arn: ARN of the ALB listener

        Returns:
            Raw rule payloads in the order returned by ELBv2

        Raises:
            RemoteQueryError: If the call fails
        """
        ...
