"""Command-line interface for logfields.

Renders one log event as a JSON line, using the same configuration a
service would load, to preview how arguments end up in the output.
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
import sys
from typing import Any

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from logfields.core.arguments.structured import kv
from logfields.core.config.loader import build_arguments_provider, load_app_config
from logfields.core.exceptions import ConfigError
from logfields.core.logging.formatter import ArgumentsJSONFormatter
from logfields.core.status.models import StatusLevel
from logfields.core.status.reporters import StatusCollector

# Diagnostics go to stderr so stdout stays a clean JSON line
console = Console(stderr=True)

LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def parse_cli_argument(token: str, plain: bool = False) -> Any:
    """Turn a command-line token into a log argument.

    ``key=value`` becomes a ``kv`` structured argument (the value is read as
    JSON when possible, else kept as text). Anything else, or every token
    when ``plain`` is set, stays a plain string argument.

    Args:
        token: Command-line token
        plain: Pass the token through as a plain argument

    Returns:
        Log argument
    """
    if plain or "=" not in token:
        return token

    key, text = token.split("=", 1)
    try:
        value: Any = json.loads(text)
    except ValueError:
        value = text
    return kv(key, value)


def render_event(args: argparse.Namespace) -> int:
    """Render one log event to stdout.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    config_path = Path(args.config).resolve() if args.config else None
    if config_path is not None and not config_path.exists():
        console.print(f"[red]ERROR: Config file not found: {config_path}[/red]")
        return 1

    try:
        app_config = load_app_config(config_path)
    except (ConfigError, ValidationError) as e:
        console.print(f"[red]ERROR: Invalid configuration: {escape(str(e))}[/red]")
        return 1

    collector = StatusCollector()
    provider = build_arguments_provider(app_config, reporter=collector)
    formatter = ArgumentsJSONFormatter(provider=provider, field_names=app_config.field_names)

    record = logging.LogRecord(
        name=args.logger,
        level=getattr(logging, args.level),
        pathname=__file__,
        lineno=0,
        msg=args.message,
        args=tuple(parse_cli_argument(token, plain=args.plain) for token in args.arguments),
        exc_info=None,
    )
    sys.stdout.write(formatter.format(record) + "\n")

    if args.show_status:
        for status in collector.statuses:
            color = "red" if status.level is StatusLevel.ERROR else "yellow"
            console.print(f"[{color}]{status.level.value}[/{color}] {escape(status.message)}")
            if status.error:
                console.print(f"   {escape(status.error)}")

    return 0


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for CLI."""
    p = argparse.ArgumentParser(
        prog="logfields",
        description="logfields - JSON log output for structured log arguments",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    render = sub.add_parser("render", help="Render one log event as a JSON line")
    render.add_argument("arguments", nargs="*", help="Log arguments (key=value or plain text)")
    render.add_argument(
        "--config",
        default=None,
        help="Path to app config (.json/.yaml; default: logfields.yaml if present)",
    )
    render.add_argument("--message", default="", help="Log message format string")
    render.add_argument("--level", default="INFO", choices=LEVELS, help="Log level")
    render.add_argument("--logger", default="logfields.cli", help="Logger name")
    render.add_argument(
        "--plain",
        action="store_true",
        help="Pass every argument as plain text, even key=value",
    )
    render.add_argument(
        "--show-status",
        action="store_true",
        help="Print configuration statuses (e.g. mapping errors) to stderr",
    )

    return p


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI."""
    p = build_arg_parser()
    args = p.parse_args(argv)

    if args.cmd == "render":
        return render_event(args)
    return 1


if __name__ == "__main__":
    sys.exit(main())
