"""
Script Helper

Helpers for command-line scripts: resolve mutually exclusive long/short
flag pairs and print color-coded ERROR / SUCCESS / WARNING lines.
"""

__version__ = "0.1.0"

from script_helper.helpers.helpers_logging import (
    Reporter,
    report_error,
    report_success,
    report_warning,
)
from script_helper.validators.flag_validator import (
    ConflictingFlagValuesError,
    FlagResolutionError,
    MissingFlagValueError,
    get_flag,
    resolve_flag,
)

__all__ = [
    "ConflictingFlagValuesError",
    "FlagResolutionError",
    "MissingFlagValueError",
    "Reporter",
    "get_flag",
    "report_error",
    "report_success",
    "report_warning",
    "resolve_flag",
]
