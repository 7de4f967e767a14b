"""Output Port - Interface for writing normalized listener rules."""
from typing import Any, Protocol


class OutputPort(Protocol):
    """
    Port interface for encoding the flattened rule records.

    Implementations could output to:
    - JSON file (main use case)
    - Console (stdout)
    """

    def write(self, listener_arn: str, records: list[dict[str, Any]], output_path: str) -> str:
        """
        Write flattened rule records to the specified output.

        Args:
            listener_arn: ARN of the listener the rules belong to
            records: Flattened rule records
            output_path: Path or destination for the output

        Returns:
            The actual path/location where data was written
        """
        ...

    def get_format_name(self) -> str:
        """
        Get the name of the output format.

        Returns:
            Format name (e.g., "JSON")
        """
        ...
