"""Validate command for checking grid configuration files.

Checks a JSON configuration for syntax, schema and grid constraint errors
plus preview advisories, without computing a layout.
"""

from decimal import Decimal
from pathlib import Path
from typing import Annotated

import typer

from glazing.application.config import (
    ConfigError,
    ValidationResult,
    load_config,
    validate_config,
)


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration file to validate"),
    ],
) -> None:
    """Validate a grid configuration file.

    Exit codes:
        0 - Configuration is valid with no warnings
        1 - Configuration has errors (cannot be laid out)
        2 - Configuration is valid but has warnings

    Example:
        glazing validate storefront.json
    """
    typer.echo(f"Validating {config_file}...")
    typer.echo()

    try:
        config = load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    result = validate_config(config)
    _display_validation_result(result)
    raise typer.Exit(code=result.exit_code)


def display_load_error(error: ConfigError) -> None:
    """Report why a configuration could not be loaded or built."""
    typer.echo("Errors:", err=True)
    for line in _load_error_lines(error):
        typer.echo(f"  {line}", err=True)
    typer.echo()
    typer.echo("Validation failed.", err=True)


def _load_error_lines(error: ConfigError) -> list[str]:
    if error.error_type == "file_not_found":
        return [f"File not found: {error.path}"]
    if error.error_type == "permission_denied":
        return [
            f"Permission denied: {error.path}",
            "  Check that the file is readable by the current user",
        ]
    if error.error_type == "file_read_error":
        return [error.message]
    if error.error_type == "json_parse":
        lines = ["Invalid JSON syntax"]
        for detail in error.details:
            lines.append(
                f"  Line {detail.get('line', '?')}, Column {detail.get('column', '?')}: "
                f"{detail.get('message', 'Unknown error')}"
            )
        return lines
    if error.error_type == "validation":
        lines = []
        for detail in error.details:
            lines.append(f"{detail.get('path', 'unknown')}: {detail.get('message')}")
            value = detail.get("value")
            # Dimensions arrive as Decimal; show them the way they were typed
            if isinstance(value, (Decimal, int, float, str)) and not isinstance(value, bool):
                lines.append(f"  Value: {value}")
        return lines
    return [error.message]


def _display_validation_result(result: ValidationResult) -> None:
    if result.errors:
        typer.echo("Errors:", err=True)
        for error in result.errors:
            typer.echo(f"  {error.field}: {error.message}", err=True)
            if error.value is not None:
                typer.echo(f"    Value: {error.value}", err=True)
        typer.echo()

    if result.warnings:
        typer.echo("Warnings:")
        for warning in result.warnings:
            typer.echo(f"  {warning.path}: {warning.message}")
            if warning.suggestion:
                typer.echo(f"    Suggestion: {warning.suggestion}")
        typer.echo()

    if result.errors:
        typer.echo(
            f"Validation failed: {len(result.errors)} error(s), "
            f"{len(result.warnings)} warning(s)",
            err=True,
        )
    elif result.warnings:
        typer.echo(f"Validation passed with {len(result.warnings)} warning(s)")
    else:
        typer.echo("Validation passed. Configuration is valid.")
