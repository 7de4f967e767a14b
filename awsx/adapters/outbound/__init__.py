"""Outbound adapters - External services (AWS, JSON output, Logging)."""
from awsx.adapters.outbound.boto3_aws_client import Boto3AWSClient
from awsx.adapters.outbound.cloudwatch_logger import CloudWatchLogger
from awsx.adapters.outbound.console_logger import ConsoleLogger
from awsx.adapters.outbound.json_exporter import JSONExporter, generate_output_filename

__all__ = [
    "Boto3AWSClient",
    "JSONExporter",
    "generate_output_filename",
    "ConsoleLogger",
    "CloudWatchLogger",
]
