"""Credential Resolver - default chain with optional STS role assumption."""
from typing import Any, Callable

import boto3
from botocore.exceptions import BotoCoreError

from awsx.domain.entities import CredentialSource
from awsx.domain.entities.credential_source import ASSUMED_ROLE, DEFAULT_CHAIN
from awsx.domain.errors import ConfigLoadError
from awsx.domain.value_objects import ProviderConfig, validate_session_name
from awsx.ports.outbound import AWSClientPort, LoggerPort

SessionFactory = Callable[..., Any]
ClientFactory = Callable[..., AWSClientPort]


class CredentialResolver:
    """
    Resolves the credential source used by every rules read.

    The default chain is always loaded first. When a role ARN is configured,
    its credentials are exchanged for the role's temporary credentials.
    There is no fallback between the two and nothing is cached.
    """

    def __init__(
        self,
        logger: LoggerPort,
        session_factory: SessionFactory | None = None,
        client_factory: ClientFactory | None = None,
    ):
        """
        Initialize the resolver.

        Args:
            logger: Logger for operation logging
            session_factory: Builds boto3 sessions (defaults to boto3.Session)
            client_factory: Builds an AWSClientPort from a logger and a
                CredentialSource (defaults to Boto3AWSClient)
        """
        self._logger = logger
        self._session_factory = session_factory or boto3.Session
        self._client_factory = client_factory

    def resolve(self, config: ProviderConfig) -> CredentialSource:
        """
        Resolve credentials for the configured region.

        Args:
            config: Provider configuration

        Returns:
            Default-chain source, or assumed-role source when a role ARN is set

        Raises:
            ConfigLoadError: If default credential discovery fails
            RoleAssumptionError: If the session name is invalid or STS fails
        """
        default_source = self._load_default_chain(config.region)

        if not config.should_assume_role:
            self._logger.debug("No role to assume, using default credential chain", region=config.region)
            return default_source

        session_name = validate_session_name(config.effective_session_name)
        client = self._build_client(default_source, config)
        temporary = client.assume_role(config.assume_role_arn, session_name)

        try:
            session = self._session_factory(
                aws_access_key_id=temporary.access_key_id,
                aws_secret_access_key=temporary.secret_access_key,
                aws_session_token=temporary.session_token,
                region_name=config.region,
            )
        except BotoCoreError as e:
            raise ConfigLoadError("NewStaticCredentialsProvider", e) from e

        self._logger.info(
            "Assumed role",
            role_arn=config.assume_role_arn,
            expiration=temporary.expiration,
        )
        return CredentialSource(
            kind=ASSUMED_ROLE,
            region=config.region,
            session=session,
            expiration=temporary.expiration,
            role_arn=config.assume_role_arn,
        )

    def _load_default_chain(self, region: str) -> CredentialSource:
        try:
            session = self._session_factory(region_name=region)
        except BotoCoreError as e:
            raise ConfigLoadError("LoadDefaultConfig", e) from e
        return CredentialSource(kind=DEFAULT_CHAIN, region=region, session=session)

    def _build_client(self, credentials: CredentialSource, config: ProviderConfig) -> AWSClientPort:
        if self._client_factory is not None:
            return self._client_factory(logger=self._logger, credentials=credentials)

        from awsx.adapters.outbound import Boto3AWSClient

        return Boto3AWSClient(
            logger=self._logger,
            credentials=credentials,
            connect_timeout=config.connect_timeout,
            read_timeout=config.read_timeout,
        )
