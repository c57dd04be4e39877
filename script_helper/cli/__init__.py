"""
CLI module for script-helper.

Provides the main entry point installed as the ``script-helper`` console script.
"""

from .commands import main

__all__ = ["main"]
