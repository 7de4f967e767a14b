"""Boto3 AWS Client Adapter - Implementation of AWSClientPort using boto3."""
from typing import Any

from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from awsx.domain.entities import CredentialSource
from awsx.domain.errors import RemoteQueryError, RoleAssumptionError
from awsx.domain.value_objects.provider_config import DEFAULT_CONNECT_TIMEOUT, DEFAULT_READ_TIMEOUT
from awsx.ports.outbound import LoggerPort, TemporaryCredentials

RETRY_MODE = "adaptive"
MAX_ATTEMPTS = 10


class Boto3AWSClient:
    """
    Implementation of AWSClientPort using boto3.

    Clients are built from the credential source's session, scoped to its
    region, with botocore's adaptive retry mode.
    """

    def __init__(
        self,
        logger: LoggerPort,
        credentials: CredentialSource,
        connect_timeout: float = DEFAULT_CONNECT_TIMEOUT,
        read_timeout: float = DEFAULT_READ_TIMEOUT,
    ):
        """
        Initialize the AWS client.

        Args:
            logger: Logger for operation logging
            credentials: Resolved credential source (session + region)
            connect_timeout: Seconds to wait for a connection
            read_timeout: Seconds to wait for a response
        """
        self._logger = logger
        self._credentials = credentials
        self._config = Config(
            region_name=credentials.region,
            retries={"mode": RETRY_MODE, "max_attempts": MAX_ATTEMPTS},
            connect_timeout=connect_timeout,
            read_timeout=read_timeout,
        )
        self._client_cache: dict[str, Any] = {}

    def _get_client(self, service: str) -> Any:
        """Get or create a boto3 client for a service."""
        if service not in self._client_cache:
            self._client_cache[service] = self._credentials.session.client(
                service,
                region_name=self._credentials.region,
                config=self._config,
            )
        return self._client_cache[service]

    def assume_role(self, role_arn: str, session_name: str) -> TemporaryCredentials:
        """
        Assume a role and return its temporary credentials.

        Args:
            role_arn: ARN of the role to assume
            session_name: Name for the assumed role session

        Returns:
            TemporaryCredentials from the STS response
        """
        self._logger.info(f"Assuming role: {role_arn}", session_name=session_name)

        try:
            sts = self._get_client("sts")
            response = sts.assume_role(RoleArn=role_arn, RoleSessionName=session_name)
        except (ClientError, BotoCoreError) as e:
            raise RoleAssumptionError("AssumeRole", e) from e

        credentials = response.get("Credentials") or {}
        missing = [
            key for key in ("AccessKeyId", "SecretAccessKey", "SessionToken")
            if not credentials.get(key)
        ]
        if missing:
            raise RoleAssumptionError(
                "AssumeRole",
                f"response is missing {', '.join(missing)}",
            )

        return TemporaryCredentials(
            access_key_id=credentials["AccessKeyId"],
            secret_access_key=credentials["SecretAccessKey"],
            session_token=credentials["SessionToken"],
            expiration=credentials.get("Expiration"),
        )

    def describe_rules(self, listener_arn: str) -> list[dict]:
        """Describe the rules of a listener. One call, no pagination."""
        self._logger.debug(f"Describing rules for {listener_arn}")

        try:
            elbv2 = self._get_client("elbv2")
            response = elbv2.describe_rules(ListenerArn=listener_arn)
        except (ClientError, BotoCoreError) as e:
            raise RemoteQueryError("DescribeRules", e) from e

        return response.get("Rules", [])
