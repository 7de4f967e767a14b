"""CLI Adapter - Command-line interface for reading ALB listener rules."""
import sys

import click

from awsx import __version__
from awsx.adapters.outbound import ConsoleLogger, JSONExporter, generate_output_filename
from awsx.application import CredentialResolver, create_listener_rules_service
from awsx.domain.errors import AwsxError
from awsx.domain.schema import RULES_SCHEMA, describe
from awsx.domain.value_objects import ConditionField, ProviderConfig


@click.group()
@click.version_option(version=__version__, prog_name="awsx-lb-rules")
def cli() -> None:
    """
    awsx-lb-rules - Read normalized AWS ALB listener rules.

    Conditions and actions of every rule are flattened into one fixed-shape
    record, ready for a strongly-typed configuration schema.
    """
    pass


@cli.command()
@click.option(
    "--listener-arn", "-l",
    required=True,
    help="ARN of the ALB listener whose rules to read.",
)
@click.option(
    "--region", "-r",
    required=True,
    help="AWS region of the listener.",
)
@click.option(
    "--assume-role-arn",
    default=None,
    help="IAM role ARN to assume before reading the rules.",
)
@click.option(
    "--session-name",
    default=None,
    help="Name for the assumed role session (2-64 characters of [A-Za-z0-9+=,.@_-]).",
)
@click.option(
    "--output", "-o",
    default=None,
    help="Output file path for JSON results. Default: auto-generated filename.",
)
@click.option(
    "--timeout",
    type=float,
    default=None,
    help="Connect and read timeout in seconds for each AWS call.",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Enable verbose output (DEBUG level logging).",
)
@click.option(
    "--quiet", "-q",
    is_flag=True,
    help="Suppress all output except errors.",
)
@click.option(
    "--stdout",
    is_flag=True,
    help="Output JSON to stdout instead of a file.",
)
def rules(
    listener_arn: str,
    region: str,
    assume_role_arn: str | None,
    session_name: str | None,
    output: str | None,
    timeout: float | None,
    verbose: bool,
    quiet: bool,
    stdout: bool,
) -> None:
    """
    Read the rules of an ALB listener.

    Examples:

        # Write rules to an auto-named JSON file
        awsx-lb-rules rules -r us-east-1 -l arn:aws:elasticloadbalancing:...:listener/app/x/1/2

        # Read through an assumed role and print to stdout
        awsx-lb-rules rules -r us-east-1 -l ARN --assume-role-arn arn:aws:iam::123456789012:role/Reader --stdout
    """
    log_level = "DEBUG" if verbose else ("ERROR" if quiet else "INFO")
    logger = ConsoleLogger(level=log_level)

    try:
        config = ProviderConfig.from_mapping({
            "region": region,
            "assume_role_arn": assume_role_arn,
            "session_name": session_name,
            "connect_timeout": timeout,
            "read_timeout": timeout,
        })

        credentials = CredentialResolver(logger=logger).resolve(config)
        service = create_listener_rules_service(
            credentials=credentials,
            logger=logger,
            config=config,
            output=JSONExporter(),
        )

        if stdout:
            output_path = "stdout"
        elif output:
            output_path = output
        else:
            output_path = generate_output_filename(listener_arn)

        actual_path = service.export_rules(listener_arn, output_path)

        if not stdout and not quiet:
            click.echo(f"Rules written to: {actual_path}")

    except AwsxError as e:
        logger.error(e.summary, exception=e)
        sys.exit(1)


@cli.command()
def schema() -> None:
    """
    Show the attribute schema of the listener rules data source.
    """
    for name, attr in RULES_SCHEMA.items():
        mode = "required" if attr.get("required") else "computed"
        if isinstance(attr["type"], str):
            click.echo(f"{name}: {attr['type']} ({mode}) - {attr['description']}")
            continue
        click.echo(f"{name}: list(object) ({mode}) - {attr['description']}")
        for line in describe(attr["type"], indent=1):
            click.echo(line)


@cli.command()
def list_condition_fields() -> None:
    """
    List the condition fields a listener rule can match on.
    """
    click.echo("Supported condition fields:\n")
    for condition_field in ConditionField:
        click.echo(f"  {condition_field.value}")
        click.echo(f"    Display name: {condition_field.display_name}")
        click.echo(f"    Record slot: {condition_field.config_slot}")
        click.echo()


def main() -> None:
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
