"""Main entry point for ECS Tools."""

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console

from ecs_tools.aws.client import AWSClients
from ecs_tools.aws.fetcher import ECSFetcher
from ecs_tools.commands import run_image, run_monitor, run_scale
from ecs_tools.config import ConfigError, load_config
from ecs_tools.errors import ECSToolsError

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """Set up logging configuration.

    Args:
        verbose: If True, enable info logging
        debug: If True, enable debug logging
    """
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def non_negative_int(value: str) -> int:
    """argparse type for a desired count."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"count must be >= 0, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog="ecs-tools",
        description="ECS Tools - monitor and scale AWS ECS services",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  ecs-tools monitor                          # Unhealthy services in all clusters
  ecs-tools monitor -f prod -a               # Every service in clusters matching "prod"
  ecs-tools scale --cluster demo --service web --count 3
  ecs-tools -r eu-west-1 image --cluster demo --service web
        """,
    )

    parser.add_argument("-r", "--region", default=None, help="AWS Region")
    parser.add_argument("-p", "--profile", default=None, help="AWS profile name")
    parser.add_argument(
        "-c",
        "--config",
        type=str,
        default=None,
        help="Path to configuration file (default: ./config.toml)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    monitor = subparsers.add_parser(
        "monitor", help="List unhealthy services in your ECS clusters"
    )
    monitor.add_argument("--cluster", default=None, help="Select the ECS cluster to monitor")
    monitor.add_argument(
        "-f", "--filter", default="", help="Filter by the name of the ECS cluster"
    )
    monitor.add_argument(
        "-l",
        "--long",
        action="store_true",
        help="Enable detailed output of containers parameters",
    )
    monitor.add_argument(
        "-a", "--all", action="store_true", help="List healthy services too"
    )

    scale = subparsers.add_parser(
        "scale", help="Scale the service to a specific DesiredCount"
    )
    scale.add_argument("--cluster", required=True, help="Name of the ECS cluster")
    scale.add_argument("--service", required=True, help="Name of the service")
    scale.add_argument(
        "--count", required=True, type=non_negative_int, help="New DesiredCount"
    )

    image = subparsers.add_parser(
        "image", help="Return the Docker image of a service running in ECS"
    )
    image.add_argument("--cluster", required=True, help="Name of the ECS cluster")
    image.add_argument("--service", required=True, help="Name of the service")

    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Returns:
        Parsed arguments namespace
    """
    return build_parser().parse_args(argv)


def run_command(
    args: argparse.Namespace, fetcher: ECSFetcher, console: Console
) -> None:
    """Dispatch a parsed command to its implementation."""
    if args.command == "monitor":
        run_monitor(
            fetcher,
            console,
            cluster=args.cluster,
            name_filter=args.filter,
            long_output=args.long,
            show_all=args.all,
        )
    elif args.command == "scale":
        run_scale(fetcher, console, args.cluster, args.service, args.count)
    elif args.command == "image":
        run_image(fetcher, console, args.cluster, args.service)


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    args = parse_args(argv)
    setup_logging(args.verbose, args.debug)

    try:
        return run(args)
    except KeyboardInterrupt:
        logger.debug("Interrupted")
        return 130


def run(args: argparse.Namespace) -> int:
    """Load configuration, build the ECS client and run the command.

    Returns:
        Exit code
    """
    try:
        if args.config:
            config = load_config(Path(args.config), required=True)
        else:
            config = load_config()
        config = config.with_overrides(region=args.region, profile=args.profile)
        fetcher = ECSFetcher(AWSClients(config.aws))
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    console = Console(highlight=False, soft_wrap=True, emoji=False)
    try:
        run_command(args, fetcher, console)
    except ECSToolsError as e:
        logger.debug("Command failed", exc_info=True)
        print(str(e), file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
