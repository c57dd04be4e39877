#!/usr/bin/env python3
"""script-helper CLI - Main Entry Point.

Exposes the library to shell scripts.

Usage:
    script-helper <command> [options]

Commands:
    resolve   Resolve a long/short flag pair and print the value that was set
    error     Print an ERROR line (exit afterwards with --fatal)
    success   Print a SUCCESS line
    warning   Print a WARNING line

Example:
    name=$(script-helper resolve --long "$NAME" --short "$N" --label name)
"""

from __future__ import annotations

import sys

import click

from script_helper.helpers.helpers_logging import get_reporter
from script_helper.validators.flag_validator import FlagResolutionError, resolve_flag

# Exit status for Ctrl-C, as shells report it
_ABORT_EXIT_CODE = 130

_FLAG_TYPES: dict[str, click.ParamType] = {
    "text": click.STRING,
    "integer": click.INT,
    "boolean": click.BOOL,
}

_DEFAULT_SENTINELS: dict[str, str] = {
    "text": "",
    "integer": "0",
    "boolean": "false",
}


def _convert(raw: str, type_name: str, option: str) -> str | int | bool:
    """Convert a raw option string with the click type for ``type_name``."""
    param_type = _FLAG_TYPES[type_name]
    try:
        return param_type.convert(raw, None, None)
    except click.BadParameter as exc:
        raise click.BadParameter(exc.message, param_hint=option) from exc


def _format_value(value: str | int | bool) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


@click.group()
def _click_cli() -> None:
    """Flag resolution and colored status messages for shell scripts."""


@_click_cli.command(name="resolve", help="Resolve a long/short flag pair")
@click.option("--long", "long_value", default=None, help="Value of the long flag")
@click.option("--short", "short_value", default=None, help="Value of the short flag")
@click.option("--sentinel", default=None,
              help="Value meaning 'not provided' (default: empty, 0 or false)")
@click.option("--label", default="flags", show_default=True,
              help="Flag name used in error messages")
@click.option("--type", "type_name", type=click.Choice(sorted(_FLAG_TYPES)),
              default="text", show_default=True, help="Value type")
def resolve_cmd(
    long_value: str | None,
    short_value: str | None,
    sentinel: str | None,
    label: str,
    type_name: str,
) -> int:
    # An empty value (e.g. an unset shell variable) counts as not provided
    raw_sentinel = sentinel if sentinel else _DEFAULT_SENTINELS[type_name]
    sentinel_value = _convert(raw_sentinel, type_name, "--sentinel")
    long_converted = (
        _convert(long_value, type_name, "--long") if long_value
        else sentinel_value
    )
    short_converted = (
        _convert(short_value, type_name, "--short") if short_value
        else sentinel_value
    )

    try:
        value = resolve_flag(long_converted, short_converted, sentinel_value, label)
    except FlagResolutionError as exc:
        reporter = get_reporter()
        reporter.error(str(exc))
        return reporter.fatal_exit_code

    click.echo(_format_value(value))
    return 0


@_click_cli.command(name="error", help="Print an ERROR line")
@click.argument("message")
@click.option("--fatal", is_flag=True, help="Exit with a non-zero status afterwards")
def error_cmd(message: str, fatal: bool) -> int:
    get_reporter().error(message, fatal=fatal)
    return 0


@_click_cli.command(name="success", help="Print a SUCCESS line")
@click.argument("message")
def success_cmd(message: str) -> int:
    get_reporter().success(message)
    return 0


@_click_cli.command(name="warning", help="Print a WARNING line")
@click.argument("message")
def warning_cmd(message: str) -> int:
    get_reporter().warning(message)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    args = sys.argv[1:] if argv is None else argv
    try:
        result = _click_cli.main(
            args=args,
            prog_name="script-helper",
            standalone_mode=False,
        )
    except click.Abort:
        get_reporter().warning("Cancelled by user")
        return _ABORT_EXIT_CODE
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code

    return 0 if result is None else int(result)


if __name__ == "__main__":
    sys.exit(main())
