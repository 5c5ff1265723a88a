"""Content command implementation."""

from pathlib import Path

import typer
from rich.console import Console

from opf_reader.core.opf_parser import OpfParser
from opf_reader.core.resources import DirectoryResourceProvider


def execute_content(
    opf_path: Path,
    item_id: str,
    resources_dir: Path | None,
    console: Console,
) -> None:
    """Write the raw content of a manifest item to stdout.

    The console only receives the summary line; it should point at stderr
    so the content itself can be piped.
    """
    resources = DirectoryResourceProvider(resources_dir or opf_path.parent)
    package = OpfParser.from_file(opf_path, resources).parse()

    item = package.manifest.get(item_id)
    content = item.get_content()

    console.print(f"[dim]{item.href} ({item.media_type}, {len(content):,} bytes)[/]")
    typer.echo(content, nl=False)
