"""CLI entry point for the weather comparison tool."""

import argparse
import logging
from dataclasses import replace

from weathercompare.config.defaults import API_KEY_ENV_VAR
from weathercompare.config.loader import (
    get_config_value,
    load_config,
    redacted,
    redacted_dump,
)
from weathercompare.controller.comparison_controller import build_controller
from weathercompare.models.common import TemperatureUnit
from weathercompare.reporting.formatters import (
    format_comparison_json,
    format_comparison_text,
)
from weathercompare.search.city_database import search_cities

DEFAULT_CONFIG = "weathercompare.yaml"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="weathercompare",
        description="Compare current weather and 5-day forecasts across cities",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )

    sub = parser.add_subparsers(dest="command")

    # compare
    compare_p = sub.add_parser("compare", help="Fetch and compare cities")
    compare_p.add_argument("cities", nargs="+", help="City names")
    compare_p.add_argument(
        "--fahrenheit", action="store_true", help="Display in Fahrenheit"
    )
    compare_p.add_argument("--json", action="store_true", help="JSON output")

    # suggest
    suggest_p = sub.add_parser("suggest", help="Autocomplete a city name")
    suggest_p.add_argument("text", help="Partial city name")

    # config show / config get
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    get_p = config_sub.add_parser("get", help="Print one config value")
    get_p.add_argument("key", help="Dotted key, e.g. api.timeout")

    # serve
    serve_p = sub.add_parser("serve", help="Run the comparison dashboard")
    serve_p.add_argument("--host", default=None)
    serve_p.add_argument("--port", type=int, default=None)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)

    if args.command == "compare":
        return _cmd_compare(config, args)
    elif args.command == "suggest":
        return _cmd_suggest(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    elif args.command == "serve":
        return _cmd_serve(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_compare(config, args) -> int:
    if not config.api.api_key:
        print(f"Error: {API_KEY_ENV_VAR} not set")
        return 1
    controller = build_controller(config)
    if args.fahrenheit and controller.state.unit == TemperatureUnit.CELSIUS:
        controller.toggle_unit()

    failures = []
    for city in args.cities:
        if not city.strip() or controller.state.has_city(city.strip()):
            continue
        state = controller.add_city(city)
        if not state.has_city(city.strip()):
            failures.append(f"{city}: {state.error}")

    state = controller.state
    if args.json:
        print(format_comparison_json(state))
    else:
        print(format_comparison_text(replace(state, error="")))
        for line in failures:
            print(f"Error: {line}")
    return 1 if failures else 0


def _cmd_suggest(config, args) -> int:
    for name in search_cities(args.text, limit=config.search.max_suggestions):
        print(name)
    return 0


def _cmd_config(config, args) -> int:
    if args.config_command == "show":
        print(redacted_dump(config))
        return 0
    elif args.config_command == "get":
        try:
            print(get_config_value(redacted(config), args.key))
            return 0
        except KeyError as e:
            print(f"Error: {e}")
            return 1
    print("Use: config show | config get KEY")
    return 1


def _cmd_serve(config, args) -> int:
    import uvicorn

    from weathercompare.dashboard import create_app

    uvicorn.run(
        create_app(config),
        host=args.host or config.dashboard.host,
        port=args.port or config.dashboard.port,
    )
    return 0
