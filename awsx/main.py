"""awsx-lb-listener-rules - Main entry point.

Read normalized ALB listener rules.
"""
from awsx.adapters.inbound.cli_adapter import main as cli_main


def main() -> None:
    """Main entry point - delegates to CLI adapter."""
    cli_main()


if __name__ == "__main__":
    main()
