"""Listener Rules Service - Reads and normalizes the rules of an ALB listener."""
from typing import Any

from awsx.application.normalizer import normalize_rules
from awsx.domain.entities import CredentialSource, ListenerRule
from awsx.domain.records import flatten_rules
from awsx.domain.value_objects import ActionType, ConditionField, ProviderConfig
from awsx.ports.outbound import AWSClientPort, LoggerPort, OutputPort


class ListenerRulesService:
    """
    Core application service for listener rule reads.

    Each read issues exactly one DescribeRules call and returns the rules in
    the order the load balancer evaluates them. Concurrent reads share
    nothing but the immutable credential source.
    """

    def __init__(
        self,
        aws_client: AWSClientPort,
        logger: LoggerPort,
        output: OutputPort | None = None,
    ):
        """
        Initialize the service.

        Args:
            aws_client: AWS client for the DescribeRules call
            logger: Logger for operation logging
            output: Optional output adapter for exporting records
        """
        self._aws_client = aws_client
        self._logger = logger
        self._output = output

    def list_rules(self, listener_arn: str) -> list[ListenerRule]:
        """
        Read and normalize the rules of a listener.

        Args:
            listener_arn: ARN of the ALB listener

        Returns:
            Rules in remote order, one per remote rule

        Raises:
            RemoteQueryError: If the DescribeRules call fails
            ContractViolationError: If the payload is missing required fields
        """
        self._logger.info("Reading listener rules", listener_arn=listener_arn)

        payloads = self._aws_client.describe_rules(listener_arn)
        rules = normalize_rules(payloads)

        for rule in rules:
            self._report_unrecognized(rule)

        self._logger.info(
            "Listener rules read",
            listener_arn=listener_arn,
            rules_count=len(rules),
        )
        return rules

    def list_rule_records(self, listener_arn: str) -> list[dict[str, Any]]:
        """Read the rules and flatten them into host-schema records."""
        return flatten_rules(self.list_rules(listener_arn))

    def export_rules(self, listener_arn: str, output_path: str) -> str:
        """
        Read the rules and write their records with the output adapter.

        Args:
            listener_arn: ARN of the ALB listener
            output_path: Path for the output

        Returns:
            The actual path where records were written
        """
        if self._output is None:
            raise ValueError("No output adapter configured")

        records = self.list_rule_records(listener_arn)
        output_location = self._output.write(listener_arn, records, output_path)
        self._logger.info(
            f"Rules exported to {output_location}",
            format=self._output.get_format_name(),
        )
        return output_location

    def _report_unrecognized(self, rule: ListenerRule) -> None:
        for condition in rule.conditions:
            if not ConditionField.is_known(condition.field):
                self._logger.warning(
                    f"Unrecognized condition field: {condition.field}",
                    rule_arn=rule.rule_arn,
                )
            elif condition.get_slot(condition.expected_slot) is None and not condition.is_legacy():
                self._logger.debug(
                    f"Condition {condition.field} does not populate {condition.expected_slot}",
                    rule_arn=rule.rule_arn,
                    slots=[slot.kind for slot in condition.slots],
                )
        for action in rule.actions:
            if not ActionType.is_known(action.type) or not ActionType(action.type).is_decoded:
                self._logger.debug(
                    f"Payload of {action.type} action is not decoded",
                    rule_arn=rule.rule_arn,
                    order=action.order,
                )


def create_listener_rules_service(
    credentials: CredentialSource,
    logger: LoggerPort,
    config: ProviderConfig | None = None,
    output: OutputPort | None = None,
) -> ListenerRulesService:
    """
    Factory function to create a ListenerRulesService for resolved credentials.

    Args:
        credentials: Resolved credential source (carries the region)
        logger: Logger instance to use
        config: Provider configuration supplying call timeouts
        output: Output adapter (defaults to JSONExporter)

    Returns:
        Configured ListenerRulesService instance
    """
    from awsx.adapters.outbound import Boto3AWSClient, JSONExporter

    client_kwargs = {}
    if config is not None:
        client_kwargs = {
            "connect_timeout": config.connect_timeout,
            "read_timeout": config.read_timeout,
        }

    aws_client = Boto3AWSClient(logger=logger, credentials=credentials, **client_kwargs)

    return ListenerRulesService(
        aws_client=aws_client,
        logger=logger,
        output=output or JSONExporter(),
    )
