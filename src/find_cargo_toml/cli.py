from __future__ import annotations

import json
import logging
import pathlib
from typing import Optional

import typer

from find_cargo_toml.config import get_cli_settings
from find_cargo_toml.exceptions import ResolutionError
from find_cargo_toml.finder import MANIFEST_FILENAME, find

app = typer.Typer(add_completion=False)


@app.command()
def main(
    path: pathlib.Path = typer.Argument(
        pathlib.Path("."), help="File or directory to start searching from."
    ),
    boundary: Optional[pathlib.Path] = typer.Option(
        None,
        "--boundary",
        help="Stop after inspecting this directory (defaults to FIND_CARGO_TOML_BOUNDARY).",
    ),
    limit: Optional[int] = typer.Option(
        None, "--limit", min=0, help="Maximum number of manifests to report."
    ),
    base: Optional[pathlib.Path] = typer.Option(
        None, "--base", help="Directory relative paths are resolved against."
    ),
    as_json: bool = typer.Option(False, "--json", help="Print results as a JSON array."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Print every Cargo.toml found walking up from PATH, nearest first."""
    try:
        settings = get_cli_settings()
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(2)

    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger("find_cargo_toml").setLevel(
        logging.DEBUG if verbose else settings.log_level
    )
    if boundary is None:
        boundary = settings.default_boundary

    try:
        manifests = find(path, boundary, limit, base=base)
    except ResolutionError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(2)

    if as_json:
        typer.echo(json.dumps([str(p) for p in manifests], ensure_ascii=False))
    else:
        for manifest in manifests:
            typer.echo(f"Found: {manifest}")
        if not manifests:
            typer.echo(f"No {MANIFEST_FILENAME} found", err=True)

    if not manifests:
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
