"""Main CLI application."""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from opf_reader.commands.content import execute_content
from opf_reader.commands.info import execute_info
from opf_reader.exceptions import OpfError

app = typer.Typer(
    name="opf-reader",
    help="Inspect EPUB package documents (.opf files).",
    add_completion=False,
)

console = Console()
err_console = Console(stderr=True)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@app.command()
def info(
    opf_path: Annotated[
        Path,
        typer.Argument(
            help="Path to the package document (.opf)",
            exists=True,
            file_okay=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ],
    as_json: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Print the parsed package as JSON",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Show debug logging",
        ),
    ] = False,
) -> None:
    """Display package metadata, manifest, spine and guide."""
    _configure_logging(verbose)

    try:
        execute_info(opf_path=opf_path, as_json=as_json, console=console)
    except (OpfError, OSError) as e:
        err_console.print(f"[red]Error reading package: {e}[/]")
        raise typer.Exit(1)


@app.command()
def content(
    opf_path: Annotated[
        Path,
        typer.Argument(
            help="Path to the package document (.opf)",
            exists=True,
            file_okay=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ],
    item_id: Annotated[
        str,
        typer.Argument(help="Manifest item id"),
    ],
    resources_dir: Annotated[
        Optional[Path],
        typer.Option(
            "--resources",
            "-r",
            help="Directory that hrefs are relative to (default: the .opf directory)",
            exists=True,
            file_okay=False,
            dir_okay=True,
            resolve_path=True,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Show debug logging",
        ),
    ] = False,
) -> None:
    """Print the raw content of a manifest item."""
    _configure_logging(verbose)

    try:
        execute_content(
            opf_path=opf_path,
            item_id=item_id,
            resources_dir=resources_dir,
            console=err_console,
        )
    except (OpfError, OSError) as e:
        err_console.print(f"[red]Error: {e}[/]")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
