"""Flag validation for command-line scripts."""
