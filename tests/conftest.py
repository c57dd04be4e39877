"""Shared fixtures for the script-helper test suite.

Every test starts with a fresh process-wide reporter built from a clean
environment, so colors are on and output goes to ``sys.stderr`` (which
``capsys`` captures).
"""

from __future__ import annotations

import io
from collections.abc import Iterator

import pytest

from script_helper.helpers.helpers_logging import Reporter, set_reporter, use_reporter
from script_helper.helpers.settings import FATAL_EXIT_CODE_ENV, NO_COLOR_ENV, STREAM_ENV


@pytest.fixture(autouse=True)
def _clean_reporter(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Reset the default reporter and the env vars it is built from."""
    for var in (STREAM_ENV, NO_COLOR_ENV, FATAL_EXIT_CODE_ENV):
        monkeypatch.delenv(var, raising=False)
    set_reporter(None)
    try:
        yield
    finally:
        set_reporter(None)


@pytest.fixture()
def sink() -> io.StringIO:
    """In-memory output sink."""
    return io.StringIO()


@pytest.fixture()
def capture_reporter(sink: io.StringIO) -> Iterator[Reporter]:
    """Route the module-level report functions to an in-memory sink.

    Usage in tests::

        def test_x(capture_reporter, sink):
            report_warning("disk low")
            assert sink.getvalue() == "WARNING: ..."
    """
    with use_reporter(Reporter(sink)) as reporter:
        yield reporter
