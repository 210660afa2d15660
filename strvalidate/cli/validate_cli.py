"""
Command-line interface for validating strings.

Usage:
    strvalidate-check id-card <value> [<value> ...]
    strvalidate-check phone <value> [<value> ...]
    strvalidate-check username <value> [<value> ...] [--rules <path>]
    strvalidate-check password <value> [<value> ...] [--rules <path>]
    strvalidate-check summary [--rules <path>]
"""

import argparse
import json
import sys

from strvalidate.core.rules import StringValidator
from strvalidate.observability.logger import DEFAULT_LOGGER_NAME, setup_logger

EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_USAGE = 2

# CLI command name -> engine domain
KIND_COMMANDS = {
    "id-card": "id_card",
    "phone": "mobile_phone",
    "username": "username",
    "password": "password",
}


def build_engine(args) -> StringValidator:
    """Create the validation engine, from a rule file when one is given."""
    if args.rules:
        return StringValidator.from_yaml(args.rules)
    return StringValidator()


def display_value(kind: str, value: str, index: int) -> str:
    """Passwords are never echoed."""
    if kind == "password":
        return f"<password #{index}>"
    return value


def check_command(args, log) -> int:
    """
    Validate every value given on the command line.

    Returns:
        EXIT_VALID when all values pass, EXIT_INVALID otherwise
    """
    kind = KIND_COMMANDS[args.command]
    engine = build_engine(args)

    results = engine.validate_batch(kind, args.values)
    for index, (value, result) in enumerate(zip(args.values, results), start=1):
        shown = display_value(kind, value, index)
        if result.passed:
            log.info(f"{shown}: valid")
        elif result.reason is not None:
            log.warning(f"{shown}: invalid ({result.message})", extra={"reason": result.reason.value})
        else:
            log.warning(f"{shown}: invalid")

    invalid = sum(1 for result in results if not result.passed)
    log.info(f"Checked {len(results)} value(s), {invalid} invalid")
    return EXIT_VALID if invalid == 0 else EXIT_INVALID


def summary_command(args, log) -> int:
    """Print the effective rule sets as JSON."""
    engine = build_engine(args)
    print(json.dumps(engine.get_rule_summary(), indent=2))
    return EXIT_VALID


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="strvalidate-check",
        description="Validate ID card numbers, phone numbers, usernames and passwords",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Check phone numbers
  strvalidate-check phone 13800138000 10000

  # Check passwords against a custom rule file
  strvalidate-check password 'Password2@' 'aaaabbbb' --rules config/rules.yaml

  # Show effective rules as JSON
  strvalidate-check summary --rules config/rules.yaml
        """
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level (default: LOG_LEVEL env var or INFO)"
    )
    parser.add_argument(
        "--log-format",
        choices=["json", "text"],
        default="text",
        help="Log output format (default: text)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    for command in KIND_COMMANDS:
        kind_parser = subparsers.add_parser(command, help=f"Validate {command} values")
        kind_parser.add_argument("values", nargs="+", help="Values to validate")
        kind_parser.add_argument("--rules", help="YAML rule file for username/password rules")

    summary_parser = subparsers.add_parser("summary", help="Show effective rule sets")
    summary_parser.add_argument("--rules", help="YAML rule file for username/password rules")

    return parser


def main(argv=None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return EXIT_USAGE

    log = setup_logger(DEFAULT_LOGGER_NAME, level=args.log_level, format_type=args.log_format)

    try:
        if args.command == "summary":
            return summary_command(args, log)
        return check_command(args, log)
    except FileNotFoundError as e:
        log.error(str(e))
        return EXIT_USAGE
    except ValueError as e:
        log.error(f"Invalid rule configuration: {e}")
        return EXIT_USAGE


if __name__ == "__main__":
    sys.exit(main())
