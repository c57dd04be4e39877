"""Environment-driven settings for the default reporter."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

STREAM_ENV = "SCRIPT_HELPER_STREAM"
NO_COLOR_ENV = "NO_COLOR"
FATAL_EXIT_CODE_ENV = "SCRIPT_HELPER_FATAL_EXIT_CODE"

VALID_STREAMS: frozenset[str] = frozenset({"stderr", "stdout"})
DEFAULT_STREAM = "stderr"
DEFAULT_FATAL_EXIT_CODE = 1

# Exit statuses are reported modulo 256, so only 1..255 stay non-zero
MIN_EXIT_CODE = 1
MAX_EXIT_CODE = 255


@dataclass(frozen=True)
class HelperSettings:
    """Settings used to build the process-wide reporter.

    Attributes:
        stream_name: 'stderr' or 'stdout'
        color: Whether messages are wrapped in ANSI color codes
        fatal_exit_code: Exit status used by fatal error paths (1..255)
    """
    stream_name: str = DEFAULT_STREAM
    color: bool = True
    fatal_exit_code: int = DEFAULT_FATAL_EXIT_CODE


def _parse_stream(raw: str | None) -> str:
    if not raw:
        return DEFAULT_STREAM
    name = raw.strip().lower()
    if name not in VALID_STREAMS:
        valid = ", ".join(sorted(VALID_STREAMS))
        raise ValueError(f"{STREAM_ENV} must be one of: {valid} (got '{raw}')")
    return name


def _parse_exit_code(raw: str | None) -> int:
    if raw is None or not raw.strip():
        return DEFAULT_FATAL_EXIT_CODE
    try:
        code = int(raw.strip())
    except ValueError:
        raise ValueError(
            f"{FATAL_EXIT_CODE_ENV} must be an integer (got '{raw}')",
        ) from None
    if not MIN_EXIT_CODE <= code <= MAX_EXIT_CODE:
        raise ValueError(
            f"{FATAL_EXIT_CODE_ENV} must be between {MIN_EXIT_CODE} and {MAX_EXIT_CODE} "
            + f"(got {code})",
        )
    return code


def load_settings(environ: Mapping[str, str] | None = None) -> HelperSettings:
    """Read reporter settings from the environment.

    Args:
        environ: Mapping to read from (defaults to ``os.environ``)

    Returns:
        HelperSettings built from the environment

    Raises:
        ValueError: If a variable holds an unsupported value

    Example:
        >>> load_settings({"NO_COLOR": "1"}).color
        False
    """
    env = os.environ if environ is None else environ
    return HelperSettings(
        stream_name=_parse_stream(env.get(STREAM_ENV)),
        color=not env.get(NO_COLOR_ENV),
        fatal_exit_code=_parse_exit_code(env.get(FATAL_EXIT_CODE_ENV)),
    )
