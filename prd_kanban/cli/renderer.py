"""Rich terminal renderer for generated boards.

Shows a summary panel followed by a three-column board:
- Column headers with task counts
- One card per task (id, title, estimate, dependencies)
"""

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from prd_kanban.board.outline import format_hours
from prd_kanban.models.task import KanbanDocument, Task, TaskStatus, format_timestamp

# Column color scheme — each status gets a distinct color
STATUS_COLORS: dict[TaskStatus, str] = {
    TaskStatus.TODO: "yellow",
    TaskStatus.DOING: "cyan",
    TaskStatus.DONE: "green",
}


class BoardRenderer:
    """Renders a KanbanDocument to the terminal using Rich."""

    def __init__(self, console: Console | None = None, verbose: bool = False):
        self.console = console or Console()
        self.verbose = verbose

    def render(self, doc: KanbanDocument) -> None:
        """Render the summary panel and the board table."""
        self.console.print(self._summary(doc))
        self.console.print(self._board(doc))

    def _summary(self, doc: KanbanDocument) -> Panel:
        return Panel(
            f"[bold]Generated:[/bold] {format_timestamp(doc.created_at)}\n"
            f"[bold]Tasks:[/bold] {len(doc.tasks)}  |  "
            f"[bold]Estimate:[/bold] {format_hours(doc.total_estimate_hours)}",
            title=f"[bold blue]{escape(doc.title)}[/bold blue]",
        )

    def _board(self, doc: KanbanDocument) -> Table:
        by_status = doc.tasks_by_status()
        table = Table(show_lines=False, expand=True)
        for column in doc.columns:
            color = STATUS_COLORS.get(column.key, "white")
            count = len(by_status[column.key])
            table.add_column(f"[{color}]{column.title}[/{color}] [dim]({count})[/dim]", ratio=1)

        cells = [
            "\n\n".join(self._card(t) for t in by_status[column.key]) or "[dim]-[/dim]"
            for column in doc.columns
        ]
        table.add_row(*cells)
        return table

    def _card(self, task: Task) -> str:
        lines = [f"[cyan]{task.id}[/cyan] {escape(task.title)}"]
        meta: list[str] = []
        if task.estimate_hours is not None:
            meta.append(format_hours(task.estimate_hours))
        if task.depends_on:
            meta.append(f"after {', '.join(task.depends_on)}")
        if meta:
            lines.append(f"[dim]{' | '.join(meta)}[/dim]")
        if self.verbose and task.acceptance:
            lines.extend(f"[dim]  - {escape(a)}[/dim]" for a in task.acceptance)
        return "\n".join(lines)
