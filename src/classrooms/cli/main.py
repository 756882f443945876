"""Typer CLI for classroom layout generation."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from classrooms.application import get_factory
from classrooms.application.config import ConfigError, load_config, validate_config
from classrooms.cli.commands import display_load_error, validate_command
from classrooms.infrastructure import FloorPlanDiagramFormatter

OUTPUT_FORMATS = ("summary", "json", "diagram")

app = typer.Typer(
    name="classrooms",
    help="Lay out classroom desks and generate occupant escape/return routes.",
)

app.command(name="validate")(validate_command)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log generation details"),
    ] = False,
) -> None:
    """Configure logging for all commands."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def generate(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration file"),
    ],
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: summary, json, diagram"),
    ] = "summary",
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write output to this file instead of stdout"),
    ] = None,
) -> None:
    """Generate the desk grid, anchors and routes for a classroom."""
    if output_format not in OUTPUT_FORMATS:
        typer.echo(
            f"Unknown format: {output_format}. Available: {', '.join(OUTPUT_FORMATS)}",
            err=True,
        )
        raise typer.Exit(code=1)

    try:
        config = load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    validation = validate_config(config)
    if not validation.is_valid:
        for error in validation.errors:
            typer.echo(f"Error: {error.path}: {error.message}", err=True)
        raise typer.Exit(code=1)

    factory = get_factory()
    result = factory.create_generate_command().execute_config(config)
    if not result.is_valid:
        for error in result.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)

    if output_format == "json":
        text = factory.get_json_exporter().export(result)
    elif output_format == "diagram":
        text = FloorPlanDiagramFormatter().format(
            result, config.classroom.width, config.classroom.depth
        )
    else:
        text = factory.get_summary_formatter().format(result)

    if output_file is not None:
        output_file.write_text(text + "\n", encoding="utf-8")
        typer.echo(f"Layout written to {output_file}")
    else:
        typer.echo(text)

    for warning in result.warnings:
        typer.echo(f"Warning: {warning}", err=True)


if __name__ == "__main__":
    app()
