"""Info command implementation."""

from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from opf_reader.core.opf_parser import OpfParser
from opf_reader.models.package import Package


def display_package(package: Package, console: Console) -> None:
    """Display a parsed package in a formatted way."""
    title = package.metadata.first("title")
    creators = [item.value for item in package.metadata.get("creator")]
    language = package.metadata.first("language")
    nav = package.navigation_item

    console.print()
    console.print(
        Panel(
            f"[bold]{title.value if title else 'Unknown Title'}[/]\n\n"
            f"[dim]Author(s):[/] {', '.join(creators) or 'Unknown'}\n"
            f"[dim]Language:[/] {language.value if language else 'Unknown'}\n"
            f"[dim]Package version:[/] {package.version or 'Unknown'}\n"
            f"[dim]Navigation:[/] {nav.href if nav else '[yellow]not found[/]'}",
            title="Package Information",
            border_style="green",
        )
    )

    # Metadata table
    console.print()
    table = Table(title="Metadata", show_header=True, header_style="bold cyan")
    table.add_column("Name", style="cyan")
    table.add_column("Value", style="white")
    table.add_column("Attributes", style="dim")
    for item in package.metadata:
        attrs = " ".join(f"{k}={v}" for k, v in item.attributes.items())
        table.add_row(item.name, item.value, attrs)
    console.print(table)

    # Manifest table
    console.print()
    table = Table(title="Manifest", show_header=True, header_style="bold cyan")
    table.add_column("ID", style="cyan")
    table.add_column("Href", style="white")
    table.add_column("Media Type", style="dim")
    table.add_column("Properties", style="dim")
    for item in package.manifest:
        table.add_row(item.id, item.href, item.media_type, " ".join(item.properties))
    console.print(table)

    # Spine table
    console.print()
    table = Table(title="Spine", show_header=True, header_style="bold cyan")
    table.add_column("#", style="dim", width=4)
    table.add_column("ID", style="cyan")
    table.add_column("Href", style="white")
    table.add_column("Linear", justify="center", width=6)
    for item in package.spine:
        table.add_row(
            str(item.order),
            item.id,
            item.href,
            "[green]✓[/]" if item.linear else "[dim]—[/]",
        )
    console.print(table)

    if package.guide is not None:
        console.print()
        table = Table(title="Guide", show_header=True, header_style="bold cyan")
        table.add_column("Type", style="cyan")
        table.add_column("Title", style="white")
        table.add_column("Href", style="dim")
        for item in package.guide:
            table.add_row(item.type, item.title, item.href)
        console.print(table)

    console.print()


def execute_info(opf_path: Path, as_json: bool, console: Console) -> None:
    """Execute the info command."""
    package = OpfParser.from_file(opf_path).parse()

    if as_json:
        typer.echo(package.model_dump_json(indent=2))
        return

    display_package(package, console)
