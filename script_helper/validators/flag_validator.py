"""
Long/short flag pair resolution for command-line scripts.

Scripts often accept the same option twice, as ``--name`` and ``-n``. Both
land in separate variables that start out at the same default (the
sentinel). Exactly one of them must be set; this module picks it.

Example:
    >>> resolve_flag("custom", "", "")
    'custom'
    >>> resolve_flag(0, 5, 0)
    5
    >>> resolve_flag("a", "b", "", "name flags")
    Traceback (most recent call last):
    ...
    script_helper.validators.flag_validator.ConflictingFlagValuesError: Both name flags are set. Please provide only one.
"""

from __future__ import annotations

import argparse
from typing import TypeVar

from script_helper.helpers.helpers_logging import Reporter, get_reporter

FlagValue = TypeVar("FlagValue", str, int, bool)

DEFAULT_LABEL = "flags"

_SUPPORTED_TYPES: tuple[type, ...] = (str, int, bool)


class FlagResolutionError(ValueError):
    """A long/short flag pair could not be resolved to one value.

    Attributes:
        label: Human-readable name of the flag pair
    """

    def __init__(self, label: str, message: str) -> None:
        super().__init__(message)
        self.label = label


class MissingFlagValueError(FlagResolutionError):
    """Neither the long nor the short flag was set."""

    def __init__(self, label: str = DEFAULT_LABEL) -> None:
        super().__init__(label, f"Missing values for {label}. Please provide one.")


class ConflictingFlagValuesError(FlagResolutionError):
    """Both the long and the short flag were set."""

    def __init__(self, label: str = DEFAULT_LABEL) -> None:
        super().__init__(label, f"Both {label} are set. Please provide only one.")


def _check_types(long_value: object, short_value: object, sentinel: object) -> None:
    """Reject values that are not text/integer/boolean or do not share a type.

    ``bool`` is a subclass of ``int``, so exact types are compared.
    """
    sentinel_type = type(sentinel)
    if sentinel_type not in _SUPPORTED_TYPES:
        raise TypeError(
            f"Unsupported flag type {sentinel_type.__name__}; "
            + "expected str, int or bool",
        )
    for name, value in (("long_value", long_value), ("short_value", short_value)):
        if type(value) is not sentinel_type:
            raise TypeError(
                f"{name} is {type(value).__name__}, "
                + f"expected {sentinel_type.__name__} to match the sentinel",
            )


def resolve_flag(
    long_value: FlagValue,
    short_value: FlagValue,
    sentinel: FlagValue,
    label: str = DEFAULT_LABEL,
) -> FlagValue:
    """Return whichever of the two flag values differs from the sentinel.

    Args:
        long_value: Value of the long-form flag (e.g. ``--name``)
        short_value: Value of the short-form flag (e.g. ``-n``)
        sentinel: Value both flags hold when not provided
        label: Name of the flag pair used in error messages

    Returns:
        The value of the flag that was set

    Raises:
        MissingFlagValueError: If both values equal the sentinel
        ConflictingFlagValuesError: If both values differ from the sentinel
        TypeError: If the values are not all the same str/int/bool type
    """
    _check_types(long_value, short_value, sentinel)

    long_set = long_value != sentinel
    short_set = short_value != sentinel

    if not long_set and not short_set:
        raise MissingFlagValueError(label)

    if long_set and short_set:
        raise ConflictingFlagValuesError(label)

    return long_value if long_set else short_value


def get_flag(
    long_value: FlagValue,
    short_value: FlagValue,
    sentinel: FlagValue,
    label: str = DEFAULT_LABEL,
    *,
    reporter: Reporter | None = None,
) -> FlagValue:
    """Resolve a flag pair, terminating the process if that fails.

    Intended for the top of a script's entry point. On failure a single
    ERROR line is written through the reporter's fatal path.

    Raises:
        SystemExit: If the pair is missing or conflicting
    """
    target = reporter if reporter is not None else get_reporter()
    try:
        return resolve_flag(long_value, short_value, sentinel, label)
    except FlagResolutionError as exc:
        target.error(str(exc), fatal=True)
        # Only reached if a Reporter subclass does not exit
        raise


def _flag_label(long_dest: str, short_dest: str) -> str:
    long_flag = f"--{long_dest.replace('_', '-')}"
    short_flag = f"-{short_dest}" if len(short_dest) == 1 else f"--{short_dest.replace('_', '-')}"
    return f"{long_flag}/{short_flag}"


def resolve_namespace_flag(
    args: argparse.Namespace,
    long_dest: str,
    short_dest: str,
    sentinel: FlagValue,
    label: str | None = None,
) -> FlagValue:
    """Resolve a flag pair stored on an ``argparse.Namespace``.

    An attribute missing from ``args``, or left at ``None`` by an option
    declared without a default, counts as not provided.

    Example:
        >>> args = argparse.Namespace(name="", n="svc")
        >>> resolve_namespace_flag(args, "name", "n", "")
        'svc'
    """
    long_value = getattr(args, long_dest, None)
    short_value = getattr(args, short_dest, None)
    if long_value is None:
        long_value = sentinel
    if short_value is None:
        short_value = sentinel
    return resolve_flag(
        long_value,
        short_value,
        sentinel,
        label if label is not None else _flag_label(long_dest, short_dest),
    )
