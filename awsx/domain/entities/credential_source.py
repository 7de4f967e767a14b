"""CredentialSource entity - resolved AWS credentials scoped to a region."""
from dataclasses import dataclass
from datetime import datetime
from typing import Any, NamedTuple

from awsx.domain.errors import ConfigLoadError

DEFAULT_CHAIN = "default-chain"
ASSUMED_ROLE = "assumed-role"


class CredentialSet(NamedTuple):
    access_key: str
    secret_key: str
    token: str | None
    expiration: datetime | None


@dataclass(frozen=True)
class CredentialSource:
    """
    Immutable credential capability for one region.

    ``session`` is a boto3 session: the default chain for ``default-chain``
    sources, a static key/secret/token session for ``assumed-role`` ones.
    """

    kind: str
    region: str
    session: Any
    expiration: datetime | None = None
    role_arn: str | None = None

    def credentials(self) -> CredentialSet:
        """
        Produce the current access key, secret key, session token and expiry.

        Raises:
            ConfigLoadError: If the default chain found no credentials
        """
        found = self.session.get_credentials()
        if found is None:
            raise ConfigLoadError(
                "LoadDefaultConfig",
                "no credentials found in environment, shared config or instance metadata",
            )
        frozen = found.get_frozen_credentials()
        return CredentialSet(
            access_key=frozen.access_key,
            secret_key=frozen.secret_key,
            token=frozen.token,
            expiration=self.expiration,
        )

    def __str__(self) -> str:
        return f"CredentialSource({self.kind}, {self.region})"
