"""CLI command implementations for the glazing application.

- validate: Validate a grid configuration file
"""

from glazing.cli.commands.validate import display_load_error, validate_command

__all__ = ["display_load_error", "validate_command"]
