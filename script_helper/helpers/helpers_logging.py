r"""Colored status messages for command-line scripts.

Every message is a single line on the diagnostic stream::

    ERROR: \x1b[31mconnection refused\x1b[0m
    SUCCESS: \x1b[32mdeployed\x1b[0m
    WARNING: \x1b[33mdisk low\x1b[0m

Fatal errors terminate the process after the line is written.
"""

from __future__ import annotations

import contextlib
import sys
import threading
from collections.abc import Callable, Iterator
from typing import TextIO

from script_helper.helpers.settings import (
    MAX_EXIT_CODE,
    MIN_EXIT_CODE,
    HelperSettings,
    load_settings,
)


class Colors:
    """ANSI color codes for terminal output."""
    RED = '\033[31m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    RESET = '\033[0m'


def red(text: str) -> str:
    """Wrap text in red."""
    return f"{Colors.RED}{text}{Colors.RESET}"


def green(text: str) -> str:
    """Wrap text in green."""
    return f"{Colors.GREEN}{text}{Colors.RESET}"


def yellow(text: str) -> str:
    """Wrap text in yellow."""
    return f"{Colors.YELLOW}{text}{Colors.RESET}"


class Reporter:
    """Writes ERROR / SUCCESS / WARNING lines to one output sink.

    Args:
        stream: Sink to write to. ``None`` means whatever ``sys.stderr``
            (or ``sys.stdout`` when ``fallback`` is 'stdout') is at
            write time.
        color: Wrap messages in ANSI color codes.
        fatal_exit_code: Exit status raised by fatal errors.
        fallback: Standard stream used when ``stream`` is None.

    Raises:
        ValueError: If ``fatal_exit_code`` is outside 1..255
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        *,
        color: bool = True,
        fatal_exit_code: int = 1,
        fallback: str = "stderr",
    ) -> None:
        if not MIN_EXIT_CODE <= fatal_exit_code <= MAX_EXIT_CODE:
            raise ValueError(
                f"fatal_exit_code must be between {MIN_EXIT_CODE} and {MAX_EXIT_CODE} "
                + f"(got {fatal_exit_code})",
            )
        self._stream = stream
        self._fallback = fallback
        self.color = color
        self.fatal_exit_code = fatal_exit_code
        self._lock = threading.Lock()

    @classmethod
    def from_settings(cls, settings: HelperSettings) -> Reporter:
        """Build a reporter from environment settings."""
        return cls(
            color=settings.color,
            fatal_exit_code=settings.fatal_exit_code,
            fallback=settings.stream_name,
        )

    @property
    def stream(self) -> TextIO:
        if self._stream is not None:
            return self._stream
        return sys.stdout if self._fallback == "stdout" else sys.stderr

    def _emit(self, level: str, paint: Callable[[str], str], message: str) -> None:
        body = paint(message) if self.color else message
        line = f"{level}: {body}\n"
        with self._lock:
            out = self.stream
            out.write(line)
            out.flush()

    def error(self, message: str, fatal: bool = False) -> None:
        """Write an ERROR line; exit the process afterwards if ``fatal``.

        Raises:
            SystemExit: If ``fatal`` is true
        """
        self._emit("ERROR", red, message)
        if fatal:
            raise SystemExit(self.fatal_exit_code)

    def success(self, message: str) -> None:
        """Write a SUCCESS line."""
        self._emit("SUCCESS", green, message)

    def warning(self, message: str) -> None:
        """Write a WARNING line."""
        self._emit("WARNING", yellow, message)


_default_reporter: Reporter | None = None
_default_lock = threading.Lock()


def get_reporter() -> Reporter:
    """Return the process-wide reporter, creating it from the environment."""
    global _default_reporter
    with _default_lock:
        if _default_reporter is None:
            _default_reporter = Reporter.from_settings(load_settings())
        return _default_reporter


def set_reporter(reporter: Reporter | None) -> Reporter | None:
    """Replace the process-wide reporter and return the previous one.

    Passing ``None`` resets it, so the next call rebuilds it from the
    environment.
    """
    global _default_reporter
    with _default_lock:
        previous = _default_reporter
        _default_reporter = reporter
        return previous


@contextlib.contextmanager
def use_reporter(reporter: Reporter) -> Iterator[Reporter]:
    """Temporarily route the module-level report functions to ``reporter``."""
    previous = set_reporter(reporter)
    try:
        yield reporter
    finally:
        set_reporter(previous)


def report_error(message: str, fatal: bool = False) -> None:
    """Print an error message; terminate the process if ``fatal``."""
    get_reporter().error(message, fatal=fatal)


def report_success(message: str) -> None:
    """Print a success message."""
    get_reporter().success(message)


def report_warning(message: str) -> None:
    """Print a warning message."""
    get_reporter().warning(message)
