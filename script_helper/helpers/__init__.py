"""Logging and settings helpers."""

from script_helper.helpers.helpers_logging import (
    Colors,
    Reporter,
    get_reporter,
    report_error,
    report_success,
    report_warning,
    set_reporter,
    use_reporter,
)
from script_helper.helpers.settings import HelperSettings, load_settings

__all__ = [
    "Colors",
    "HelperSettings",
    "Reporter",
    "get_reporter",
    "load_settings",
    "report_error",
    "report_success",
    "report_warning",
    "set_reporter",
    "use_reporter",
]
