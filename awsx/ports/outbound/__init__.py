"""Outbound ports - Interfaces for driven adapters."""
from awsx.ports.outbound.aws_client_port import AWSClientPort, TemporaryCredentials
from awsx.ports.outbound.logger_port import LoggerPort
from awsx.ports.outbound.output_port import OutputPort

__all__ = ["AWSClientPort", "OutputPort", "LoggerPort", "TemporaryCredentials"]
