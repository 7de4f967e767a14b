"""Lambda Handler - AWS Lambda entry point for reading listener rules."""
import os
from typing import Any

from awsx.adapters.outbound import CloudWatchLogger
from awsx.application import CredentialResolver, create_listener_rules_service
from awsx.domain.errors import AwsxError, ConfigLoadError, ContractViolationError, RemoteQueryError
from awsx.domain.value_objects import ProviderConfig

# Upstream failures map to 502, everything else (config, role) to 400
UPSTREAM_ERRORS = (RemoteQueryError, ContractViolationError)


def handler(event: dict, context: Any) -> dict:
    """
    AWS Lambda handler returning the normalized rules of one listener.

    Event fields:
        listener_arn: ARN of the ALB listener (required)
        region: AWS region (defaults to AWS_REGION of the Lambda runtime)
        assume_role_arn: Optional IAM role ARN to assume
        session_name: Optional name for the assumed role session

    Environment Variables:
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)

    Args:
        event: Lambda event
        context: Lambda context

    Returns:
        Dict with statusCode and either the rules or the error diagnostic
    """
    log_level = os.environ.get("LOG_LEVEL", "INFO")
    logger = CloudWatchLogger(level=log_level)

    request_id = getattr(context, "aws_request_id", None)
    if request_id:
        logger.set_context(request_id=request_id)

    listener_arn = event.get("listener_arn")
    logger.info("lambda_invoked", listener_arn=listener_arn)

    try:
        if not listener_arn:
            raise ConfigLoadError("Read", "the 'listener_arn' attribute is required")

        config = ProviderConfig.from_mapping({
            "region": event.get("region") or os.environ.get("AWS_REGION"),
            "assume_role_arn": event.get("assume_role_arn"),
            "session_name": event.get("session_name"),
            "connect_timeout": event.get("connect_timeout"),
            "read_timeout": event.get("read_timeout"),
        })
        logger.set_context(listener_arn=listener_arn, region=config.region)

        credentials = CredentialResolver(logger=logger).resolve(config)
        service = create_listener_rules_service(
            credentials=credentials,
            logger=logger,
            config=config,
        )
        records = service.list_rule_records(listener_arn)

    except AwsxError as e:
        logger.error("lambda_failed", exception=e)
        return {
            "statusCode": 502 if isinstance(e, UPSTREAM_ERRORS) else 400,
            "body": {
                "error": e.summary,
                "detail": e.detail,
            },
        }

    logger.info("lambda_completed", rules_count=len(records))

    return {
        "statusCode": 200,
        "body": {
            "listener_arn": listener_arn,
            "rules": records,
        },
    }
