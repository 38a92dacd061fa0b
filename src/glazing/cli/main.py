"""Typer CLI for opening grid layout and takeoff."""

import logging
from decimal import Decimal
from pathlib import Path
from typing import Annotated

import typer

from glazing.application import GridOutput
from glazing.application.config import (
    ConfigError,
    GridConfiguration,
    build_config_from_cli,
    load_config,
    merge_config_with_cli,
)
from glazing.application.factory import get_factory
from glazing.cli.commands import display_load_error, validate_command
from glazing.domain import UnsupportedFeatureError
from glazing.domain.value_objects import to_decimal
from glazing.infrastructure import (
    GridReportFormatter,
    JsonExporter,
    LayoutFormatter,
    StatisticsFormatter,
    TakeoffFormatter,
)

app = typer.Typer(
    name="glazing",
    help="Lay out storefront and curtain-wall opening grids and take off quantities.",
)

# Register validate command
app.command(name="validate")(validate_command)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Opening grid layout and takeoff tools."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="Path to JSON configuration file"),
]
WidthOption = Annotated[
    float | None, typer.Option("--width", "-w", help="Opening width in feet")
]
HeightOption = Annotated[
    float | None, typer.Option("--height", "-h", help="Opening height in feet")
]
SillOption = Annotated[
    float | None, typer.Option("--sill-height", help="Sill height in feet")
]
TransomOption = Annotated[
    float | None,
    typer.Option("--transom-height", help="Transom height in feet (enables transom)"),
]
ColumnsOption = Annotated[
    int | None, typer.Option("--columns", help="Number of lites across")
]
RowsOption = Annotated[int | None, typer.Option("--rows", help="Number of lites up")]
MullionOption = Annotated[
    float | None,
    typer.Option("--mullion-width", "-m", help="Mullion face width in inches"),
]
FormatOption = Annotated[
    str, typer.Option("--format", "-f", help="Output format: text or json")
]


def _dec(value: float | None) -> Decimal | None:
    return None if value is None else to_decimal(value)


def _resolve_config(
    config_file: Path | None,
    width: float | None,
    height: float | None,
    sill_height: float | None,
    transom_height: float | None,
    columns: int | None,
    rows: int | None,
    mullion_width: float | None,
) -> GridConfiguration:
    """Build the configuration from a file and/or command-line options."""
    overrides = {
        "sill_height": _dec(sill_height),
        "transom_height": _dec(transom_height),
        "columns": columns,
        "rows": rows,
        "mullion_width": _dec(mullion_width),
    }
    try:
        if config_file is not None:
            config = load_config(config_file)
            return merge_config_with_cli(
                config, width=_dec(width), height=_dec(height), **overrides
            )
        if width is None or height is None:
            typer.echo("Error: provide --config or both --width and --height", err=True)
            raise typer.Exit(code=1)
        return build_config_from_cli(
            width=to_decimal(width), height=to_decimal(height), **overrides
        )
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)


def _run(config: GridConfiguration) -> GridOutput:
    command = get_factory().create_generate_command()
    try:
        result = command.execute_config(config)
    except UnsupportedFeatureError as e:
        typer.echo(f"Error: {e.message}", err=True)
        raise typer.Exit(code=1)

    if not result.is_valid:
        for error in result.errors:
            typer.echo(f"Error: {error.message}", err=True)
        raise typer.Exit(code=1)
    return result


def _check_format(output_format: str) -> str:
    fmt = output_format.lower()
    if fmt not in ("text", "json"):
        typer.echo(f"Unknown format: {output_format}. Use text or json.", err=True)
        raise typer.Exit(code=1)
    return fmt


@app.command()
def layout(
    config_file: ConfigOption = None,
    width: WidthOption = None,
    height: HeightOption = None,
    sill_height: SillOption = None,
    transom_height: TransomOption = None,
    columns: ColumnsOption = None,
    rows: RowsOption = None,
    mullion_width: MullionOption = None,
    output_format: FormatOption = "text",
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write output to this file"),
    ] = None,
) -> None:
    """Compute the grid layout, takeoff and statistics for an opening.

    Example:
        glazing layout --width 10 --height 8 --columns 3 --rows 2
    """
    fmt = _check_format(output_format)
    config = _resolve_config(
        config_file, width, height, sill_height, transom_height, columns, rows, mullion_width
    )
    result = _run(config)

    if fmt == "json":
        text = JsonExporter().export(result)
    else:
        text = GridReportFormatter().format(result)

    if output_file is not None:
        output_file.write_text(text, encoding="utf-8")
        typer.echo(f"Wrote {output_file}")
    else:
        typer.echo(text)


@app.command()
def takeoff(
    config_file: ConfigOption = None,
    width: WidthOption = None,
    height: HeightOption = None,
    sill_height: SillOption = None,
    transom_height: TransomOption = None,
    columns: ColumnsOption = None,
    rows: RowsOption = None,
    mullion_width: MullionOption = None,
    output_format: FormatOption = "text",
) -> None:
    """Show framing and glass quantities for an opening."""
    fmt = _check_format(output_format)
    config = _resolve_config(
        config_file, width, height, sill_height, transom_height, columns, rows, mullion_width
    )
    result = _run(config)

    if fmt == "json":
        data = JsonExporter().to_dict(result)
        typer.echo(
            JsonExporter.dumps({"quantities": data["quantities"], "glass": data["glass"]})
        )
    else:
        typer.echo(TakeoffFormatter().format(result.quantities, result.takeoff.glass))


@app.command()
def preview(
    config_file: ConfigOption = None,
    width: WidthOption = None,
    height: HeightOption = None,
    sill_height: SillOption = None,
    transom_height: TransomOption = None,
    columns: ColumnsOption = None,
    rows: RowsOption = None,
    mullion_width: MullionOption = None,
) -> None:
    """Show mullion positions, lites and grid statistics."""
    config = _resolve_config(
        config_file, width, height, sill_height, transom_height, columns, rows, mullion_width
    )
    result = _run(config)
    typer.echo(LayoutFormatter().format(result.layout))
    typer.echo()
    typer.echo(StatisticsFormatter().format(result.statistics))


if __name__ == "__main__":
    app()
