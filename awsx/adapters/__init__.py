"""Adapters - Concrete implementations of ports."""
from awsx.adapters.outbound import (
    Boto3AWSClient,
    CloudWatchLogger,
    ConsoleLogger,
    JSONExporter,
    generate_output_filename,
)

__all__ = [
    "Boto3AWSClient",
    "JSONExporter",
    "generate_output_filename",
    "ConsoleLogger",
    "CloudWatchLogger",
]
