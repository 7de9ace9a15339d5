"""CLI entry point for the forecast normalizer."""

import argparse
import json
import logging
import sys

from meteo.config.loader import load_config
from meteo.errors import ForecastBuildError
from meteo.normalize.forecast import Forecast
from meteo.reporting.formatters import (
    format_day_json,
    format_day_text,
    format_long_range_json,
)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="meteo",
        description="Normalize MeteoSchweiz forecast chart data",
    )
    parser.add_argument(
        "--config", default=None, help="Config YAML path (defaults if omitted)"
    )
    parser.add_argument(
        "--debug", action="store_true", help="Enable debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    # build
    build_p = sub.add_parser("build", help="Normalize a forecast payload")
    build_p.add_argument("payload", help="Forecast chart JSON file")
    which = build_p.add_mutually_exclusive_group()
    which.add_argument(
        "-d", "--day", type=int, default=0, help="Show the specified day"
    )
    which.add_argument(
        "-l", "--long", action="store_true", help="Show all days"
    )
    build_p.add_argument(
        "--text",
        action="store_true",
        help="Print a text summary of the day (not with --long)",
    )

    # config show
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)

    if args.command == "build":
        return _cmd_build(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_build(config, args) -> int:
    if args.long and args.text:
        print("Error: --text cannot be combined with --long", file=sys.stderr)
        return 1

    try:
        with open(args.payload) as f:
            payload = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        print(f"Error: cannot read payload: {e}", file=sys.stderr)
        return 1

    try:
        fc = Forecast.from_payload(payload, config.icon_path, config.get_tzinfo())
        if args.long:
            print(format_long_range_json(fc.long_range(config.day_label_separator)))
        elif args.text:
            print(format_day_text(fc.day(args.day)))
        else:
            print(format_day_json(fc.day(args.day)))
    except ForecastBuildError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


def _cmd_config(config, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    print("Error: unknown config command", file=sys.stderr)
    return 1


if __name__ == "__main__":
    sys.exit(main())
