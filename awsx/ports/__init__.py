"""Ports - Abstract interfaces for external dependencies."""
from awsx.ports.outbound import AWSClientPort, LoggerPort, OutputPort, TemporaryCredentials

__all__ = ["AWSClientPort", "OutputPort", "LoggerPort", "TemporaryCredentials"]
