"""Error hierarchy for credential resolution and listener rule normalization."""


class AwsxError(Exception):
    """
    Base error carrying a human-readable diagnostic.

    Every error names the operation that failed and the underlying cause,
    and renders as ``"<summary>: <operation> failed:\\n\\n<cause>"``.
    """

    summary = "AWS operation failed"

    def __init__(self, operation: str, cause: str | Exception, summary: str | None = None):
        self.operation = operation
        self.cause = str(cause)
        if summary:
            self.summary = summary
        super().__init__(self.diagnostic)

    @property
    def detail(self) -> str:
        """Operation name plus the underlying cause text."""
        return f"{self.operation} failed:\n\n{self.cause}"

    @property
    def diagnostic(self) -> str:
        return f"{self.summary}: {self.detail}"


class ConfigLoadError(AwsxError):
    """Default credential or region discovery failed."""

    summary = "Unable to load AWS config"


class RoleAssumptionError(AwsxError):
    """STS role assumption failed or returned incomplete credentials."""

    summary = "Unable to assume role"


class InvalidSessionNameError(RoleAssumptionError):
    """Session name rejected before any STS call was attempted."""

    summary = "Invalid role session name"


class RemoteQueryError(AwsxError):
    """The describe-rules call failed, including exhausted retries."""

    summary = "Failed to describe ELB rules"


class ContractViolationError(AwsxError):
    """A required field was absent from the remote payload."""

    summary = "Malformed ELB rules response"
