"""JSON Exporter Adapter - Writes flattened listener rule records as JSON."""
import json
import os
import sys
from datetime import datetime, timezone
from typing import Any


class JSONExporter:
    """
    Implementation of OutputPort that writes rule records to JSON files.

    The document mirrors the data source state: the listener ARN plus the
    ``rules`` list with every optional slot present.
    """

    def __init__(self, indent: int | None = 2):
        self._indent = indent

    def write(self, listener_arn: str, records: list[dict[str, Any]], output_path: str) -> str:
        """
        Write rule records to a JSON file.

        Args:
            listener_arn: ARN of the listener the rules belong to
            records: Flattened rule records
            output_path: Path for the output file. If no extension, .json is added.
                        Use "stdout" to print to console instead.

        Returns:
            The actual path where data was written
        """
        document = self._build_document(listener_arn, records)

        if output_path.lower() == "stdout":
            json.dump(document, sys.stdout, indent=self._indent)
            sys.stdout.write("\n")
            return "stdout"

        if not output_path.endswith(".json"):
            output_path += ".json"

        output_dir = os.path.dirname(output_path)
        if output_dir and not os.path.exists(output_dir):
            os.makedirs(output_dir)

        with open(output_path, "w", encoding="utf-8") as jsonfile:
            json.dump(document, jsonfile, indent=self._indent)
            jsonfile.write("\n")

        return output_path

    def get_format_name(self) -> str:
        """Get the name of the output format."""
        return "JSON"

    def _build_document(self, listener_arn: str, records: list[dict[str, Any]]) -> dict:
        return {"listener_arn": listener_arn, "rules": records}


def generate_output_filename(listener_arn: str, prefix: str = "listener-rules") -> str:
    """
    Generate a default output filename.

    Format: {prefix}-{load balancer name}-{listener id}-{timestamp}.json
    """
    # arn:aws:elasticloadbalancing:region:account:listener/app/name/lb-id/listener-id
    resource = listener_arn.split(":")[-1]
    parts = resource.split("/")
    if len(parts) >= 5:
        name = f"{parts[2]}-{parts[4]}"
    else:
        name = parts[-1] or "listener"
    timestamp = datetime.now(timezone.utc).strftime("%Y%m%d-%H%M%S")
    return f"{prefix}-{name}-{timestamp}.json"
