"""Command-line interface for the region build."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from region_builder.core.config import BuildConfig
from region_builder.core.exceptions import PipelineError

if TYPE_CHECKING:
    from region_builder.models.region import RegionCollection

app = typer.Typer(
    name="region-builder",
    help="Validate and combine region boundary files into one dataset.",
    no_args_is_help=True,
)

console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)


@app.callback()
def _main_callback() -> None:
    """Region boundary build tools."""


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False, show_time=False)],
        force=True,
    )


def _report_error(exc: PipelineError) -> None:
    err_console.print(f"[red]Error - {escape(exc.message)}:[/red]")
    for line in exc.details():
        err_console.print(f"  [yellow]{escape(line)}[/yellow]")


def write_regions(collection: RegionCollection, output: Path) -> None:
    """Write *collection* as a JSON array, one region per line."""
    lines = [json.dumps(region, separators=(",", ":")) for region in collection.to_list()]
    body = "[\n" + ",\n".join(lines) + "\n]\n" if lines else "[]\n"
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(body, encoding="utf-8")


@app.command()
def build(
    root: Annotated[
        Path | None,
        typer.Argument(help="Directory containing region files (default: $REGIONS_ROOT)."),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the combined regions to this JSON file."),
    ] = None,
    precision: Annotated[
        int | None,
        typer.Option("--precision", "-p", help="Decimal digits kept on coordinates."),
    ] = None,
    geometry_schema: Annotated[
        Path | None,
        typer.Option("--geometry-schema", help="Region geometry JSON Schema.", dir_okay=False),
    ] = None,
    geojson_schema: Annotated[
        Path | None,
        typer.Option("--geojson-schema", help="GeoJSON envelope JSON Schema.", dir_okay=False),
    ] = None,
    log_level: Annotated[
        str | None,
        typer.Option("--log-level", "-l", help="Logging level (DEBUG, INFO, ...)."),
    ] = None,
) -> None:
    """Build the combined region dataset, failing on the first invalid file."""
    from region_builder.pipeline import build_regions_from_config, schema_validator_for

    try:
        config = BuildConfig.from_env().with_overrides(
            regions_root=str(root) if root is not None else None,
            output_path=str(output) if output is not None else None,
            precision=precision,
            geometry_schema_path=str(geometry_schema) if geometry_schema is not None else None,
            geojson_schema_path=str(geojson_schema) if geojson_schema is not None else None,
            log_level=log_level,
        )
        _configure_logging(config.log_level)
        validator = schema_validator_for(config)
        collection = build_regions_from_config(config, validator)
    except PipelineError as exc:
        _report_error(exc)
        raise typer.Exit(code=1) from exc

    console.print(f"region count:\t{len(collection)}")
    if config.output_path:
        write_regions(collection, Path(config.output_path))
        console.print(f"[green]regions written to {escape(config.output_path)}[/green]")


if __name__ == "__main__":
    app()
