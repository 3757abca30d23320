"""CLI entry point — ``python -m demo_tools`` or ``demo-tools``."""

from __future__ import annotations

import argparse
import logging
import sys

from dotenv import load_dotenv

load_dotenv()

from demo_tools import generator, monitor, report, validator
from demo_tools.config import ToolSettings, load_settings
from demo_tools.errors import DemoToolsError
from demo_tools.prober import ApiProber

logger = logging.getLogger("demo_tools")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {number}")
    return number


def _positive_float(value: str) -> float:
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}") from None
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be > 0, got {number}")
    return number


# ---------------------------------------------------------------------------
# Command handlers: each returns the process exit code
# ---------------------------------------------------------------------------

def _generate_users(args: argparse.Namespace, settings: ToolSettings) -> int:
    count = settings.user_count if args.count is None else args.count
    output = args.output or settings.output_path

    print(f"🔧 Generating {count} test users...")
    try:
        users = generator.generate(count, output)
    except DemoToolsError as exc:
        logger.debug("generate-users failed", exc_info=True)
        report.print_error(f"Failed to write user data: {exc}")
        return 1
    report.print_generated(len(users), output)
    return 0


def _validate_json(args: argparse.Namespace, settings: ToolSettings) -> int:
    print(f"🔍 Validating JSON file: {args.file}")
    try:
        result = validator.validate(args.file)
    except DemoToolsError as exc:
        logger.debug("validate-json failed", exc_info=True)
        report.print_error(f"Validation failed: {exc}")
        return 1
    report.print_validation(result)
    return 0


def _monitor_system(args: argparse.Namespace, settings: ToolSettings) -> int:
    print("🖥️  System monitor")
    report.print_system(monitor.system_info())
    return 0


def _monitor_process(args: argparse.Namespace, settings: ToolSettings) -> int:
    report.print_processes(monitor.process_info(args.name), args.name)
    return 0


def _api_health(args: argparse.Namespace, settings: ToolSettings) -> int:
    url = args.url or settings.api_url
    print(f"🏥 Checking API health: {url}")
    with ApiProber(timeout=settings.timeout, headers=settings.auth_headers()) as prober:
        outcome = prober.health_check(url)
    report.print_outcome(outcome)
    return 0 if outcome.ok else 1


def _api_test_users(args: argparse.Namespace, settings: ToolSettings) -> int:
    url = args.url or settings.api_url
    print(f"👥 Testing users API: {url}")
    with ApiProber(timeout=settings.timeout, headers=settings.auth_headers()) as prober:
        listing, creation = prober.test_users(url)

    print("🔍 Listing users...")
    report.print_outcome(listing)
    print("\n📝 Creating a user...")
    report.print_outcome(creation)
    return 0 if listing.ok and creation.ok else 1


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="demo-tools",
        description="Smoke-test helpers: test data, mock monitoring and API probing.",
    )
    parser.add_argument(
        "--config",
        help="Path to a YAML settings file (default: $DEMO_TOOLS_CONFIG).",
    )
    parser.add_argument(
        "--log-level",
        help="Logging level, e.g. DEBUG or INFO (default: WARNING).",
    )
    parser.add_argument(
        "--timeout",
        type=_positive_float,
        help="Per-request HTTP timeout in seconds (default: 10).",
    )
    groups = parser.add_subparsers(dest="group", required=True, metavar="{data,monitor,api}")

    # -- data --------------------------------------------------------------
    data = groups.add_parser("data", help="Test data generation and validation.")
    data_cmds = data.add_subparsers(dest="action", required=True)

    gen = data_cmds.add_parser("generate-users", help="Generate synthetic user records.")
    gen.add_argument("-c", "--count", type=_non_negative_int, help="Number of users (default: 10).")
    gen.add_argument("-o", "--output", help="Output file path (default: users.json).")
    gen.set_defaults(handler=_generate_users)

    val = data_cmds.add_parser("validate-json", help="Validate a JSON file.")
    val.add_argument("-f", "--file", required=True, help="JSON file to validate.")
    val.set_defaults(handler=_validate_json)

    # -- monitor -----------------------------------------------------------
    mon = groups.add_parser("monitor", help="Mock system and process monitoring.")
    mon_cmds = mon.add_subparsers(dest="action", required=True)

    mon_cmds.add_parser("system", help="Show system status.").set_defaults(handler=_monitor_system)

    proc = mon_cmds.add_parser("process", help="Show process status.")
    proc.add_argument("-n", "--name", help="Process name (default: overview of all).")
    proc.set_defaults(handler=_monitor_process)

    # -- api ---------------------------------------------------------------
    api = groups.add_parser("api", help="Smoke-test a running API service.")
    api_cmds = api.add_subparsers(dest="action", required=True)

    health = api_cmds.add_parser("health", help="Check the health endpoint.")
    health.add_argument("-u", "--url", help="API base URL (default: http://localhost:8080).")
    health.set_defaults(handler=_api_health)

    users = api_cmds.add_parser("test-users", help="Probe the users endpoint (GET + POST).")
    users.add_argument("-u", "--url", help="API base URL (default: http://localhost:8080).")
    users.set_defaults(handler=_api_test_users)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings(args.config)
    except DemoToolsError as exc:
        report.print_error(str(exc))
        return 1

    overrides = {}
    if args.log_level:
        overrides["log_level"] = args.log_level
    if args.timeout is not None:
        overrides["timeout"] = args.timeout
    if overrides:
        try:
            settings = ToolSettings.model_validate({**settings.model_dump(), **overrides})
        except ValueError as exc:
            parser.error(str(exc))

    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
    logger.debug("Running %s %s", args.group, args.action)

    return args.handler(args, settings)


if __name__ == "__main__":
    sys.exit(main())
