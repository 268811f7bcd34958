"""PRD Kanban CLI — main entry point.

Commands:
    generate  — Generate a board from goal/constraints/duration/team
    render    — Re-render a JSON export as an outline or a fresh export
    templates — List available board templates
    serve     — Start the FastAPI server
"""

import logging
from enum import Enum
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from prd_kanban.board import (
    ExportFormatError,
    TemplateError,
    from_export,
    generate as generate_board,
    list_templates,
    load_template,
    to_export,
    to_outline,
)
from prd_kanban.board.loader import DEFAULT_TEMPLATE
from prd_kanban.cli.renderer import BoardRenderer
from prd_kanban.models.task import KanbanDocument, KanbanInput
from prd_kanban.utils.clipboard import copy_to_clipboard
from prd_kanban.utils.env import load_env

app = typer.Typer(
    name="prd-kanban",
    help="Turn a short PRD into a Todo/Doing/Done task board",
    add_completion=False,
)
# Rendered boards go to stdout; status messages and the board view go to stderr
console = Console(stderr=True)

logger = logging.getLogger(__name__)


class OutputFormat(str, Enum):
    """Text rendering of a board."""

    OUTLINE = "outline"
    EXPORT = "export"


# ---------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------

def _setup_logging(verbose: bool = False) -> None:
    """Configure logging — verbose shows generation detail."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(name)s | %(levelname)s | %(message)s",
    )
    # Reduce noise
    for noisy in ("httpx", "httpcore", "uvicorn.access"):
        logging.getLogger(noisy).setLevel(logging.WARNING)


def _render(doc: KanbanDocument, fmt: OutputFormat) -> str:
    if fmt == OutputFormat.EXPORT:
        return to_export(doc)
    return to_outline(doc)


def _emit(doc: KanbanDocument, fmt: OutputFormat, output: str | None) -> None:
    """Write the rendering to a file, or to stdout when no file is given."""
    text = _render(doc, fmt)
    if output:
        output_path = Path(output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(text, encoding="utf-8")
        logger.info("Wrote %s to %s", fmt.value, output_path)
        console.print(f"[green]Board saved to {output_path} ({len(doc.tasks)} tasks)[/green]")
    else:
        typer.echo(text, nl=not text.endswith("\n"))


def _copy(doc: KanbanDocument, fmt: OutputFormat) -> None:
    """Copy a rendering to the clipboard; failure is a warning, not an error."""
    if copy_to_clipboard(_render(doc, fmt)):
        console.print(f"[green]Copied {fmt.value} to clipboard[/green]")
    else:
        console.print(f"[yellow]Could not copy {fmt.value} to clipboard[/yellow]")


# ---------------------------------------------------------------
# generate command
# ---------------------------------------------------------------

@app.command()
def generate(
    goal: str = typer.Option("", "--goal", help="What the product should achieve"),
    constraints: str = typer.Option("", "--constraints", help="Constraints to respect"),
    duration: str = typer.Option("", "--duration", help="Available time, e.g. '2 days'"),
    team: str = typer.Option("", "--team", help="Team composition"),
    template: str = typer.Option(DEFAULT_TEMPLATE, "--template", help="Board template name"),
    fmt: OutputFormat = typer.Option(OutputFormat.OUTLINE, "--format", "-f", help="Output format"),
    output: str = typer.Option(None, "--output", "-o", help="Write the output to this file"),
    copy: OutputFormat = typer.Option(None, "--copy", help="Also copy this format to the clipboard"),
    board: bool = typer.Option(False, "--board/--no-board", help="Show the board in the terminal"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """Generate a Kanban board from the four PRD fields."""
    load_env()
    _setup_logging(verbose)

    kanban_input = KanbanInput(goal=goal, constraints=constraints, duration=duration, team=team)
    try:
        doc = generate_board(kanban_input, template=template)
    except (FileNotFoundError, TemplateError) as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    if board:
        BoardRenderer(console=console, verbose=verbose).render(doc)

    _emit(doc, fmt, output)

    if copy is not None:
        _copy(doc, copy)


# ---------------------------------------------------------------
# render command
# ---------------------------------------------------------------

@app.command()
def render(
    export_file: str = typer.Argument(..., help="Path to a JSON export"),
    fmt: OutputFormat = typer.Option(OutputFormat.OUTLINE, "--format", "-f", help="Output format"),
    output: str = typer.Option(None, "--output", "-o", help="Write the output to this file"),
    copy: OutputFormat = typer.Option(None, "--copy", help="Also copy this format to the clipboard"),
    board: bool = typer.Option(False, "--board/--no-board", help="Show the board in the terminal"),
) -> None:
    """Re-render a previously exported board."""
    _setup_logging()

    export_path = Path(export_file)
    if not export_path.exists():
        console.print(f"[red]Error: export file not found: {export_path}[/red]")
        raise typer.Exit(1)

    try:
        doc = from_export(export_path.read_text(encoding="utf-8"))
    except ExportFormatError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    if board:
        BoardRenderer(console=console).render(doc)

    _emit(doc, fmt, output)

    if copy is not None:
        _copy(doc, copy)


# ---------------------------------------------------------------
# templates command
# ---------------------------------------------------------------

@app.command()
def templates() -> None:
    """List available board templates."""
    load_env()

    names = list_templates()
    if not names:
        console.print("[yellow]No templates found.[/yellow]")
        raise typer.Exit(0)

    table = Table(title="Board Templates")
    table.add_column("Name", style="cyan")
    table.add_column("Title", style="white")
    table.add_column("Tasks", width=6)
    table.add_column("Extras", width=7)

    for name in names:
        try:
            tmpl = load_template(name)
        except TemplateError as e:
            table.add_row(name, f"[red]invalid: {escape(str(e))}[/red]", "-", "-")
            continue
        table.add_row(name, tmpl.name, str(len(tmpl.baseline)), str(len(tmpl.extras)))

    console.print(table)


# ---------------------------------------------------------------
# serve command
# ---------------------------------------------------------------

@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", "--host", help="Bind address"),
    port: int = typer.Option(8000, "--port", help="Server port"),
    reload: bool = typer.Option(False, "--reload", help="Auto-reload on code changes"),
) -> None:
    """Start the FastAPI server."""
    load_env()
    _setup_logging()
    console.print(f"[bold blue]PRD Kanban[/bold blue] — Starting server on {host}:{port}")
    import uvicorn

    uvicorn.run("prd_kanban.api.server:app", host=host, port=port, reload=reload)


if __name__ == "__main__":
    app()
