"""Markdown outline rendering of a Kanban document."""

from prd_kanban.models.task import KanbanDocument, Task, TaskStatus, format_timestamp

EMPTY_PLACEHOLDER = "(empty)"

# Input fields echoed in the outline header, in display order
INPUT_LABELS: list[tuple[str, str]] = [
    ("goal", "Goal"),
    ("constraints", "Constraints"),
    ("duration", "Duration"),
    ("team", "Team"),
]


def format_hours(hours: float) -> str:
    """``1.0`` -> ``"1h"``, ``0.25`` -> ``"0.25h"``.

    Whole numbers drop the decimal point; anything else keeps every
    significant digit (shortest round-tripping repr).
    """
    value = float(hours)
    if value.is_integer():
        return f"{int(value)}h"
    return f"{value!r}h"


def format_task(task: Task) -> str:
    """Render one task as a checkbox line plus an optional acceptance sub-list."""
    bits: list[str] = []
    if task.estimate_hours is not None:
        bits.append(f"⏱ {format_hours(task.estimate_hours)}")
    if task.depends_on:
        bits.append(f"🔗 depends: {', '.join(task.depends_on)}")
    meta = f" ({' | '.join(bits)})" if bits else ""

    # The box stays unchecked in every column; the section shows the status
    lines = [f"- [ ] **{task.id}** {task.title}{meta}"]

    if task.acceptance:
        lines.append("  - Acceptance:")
        lines.extend(f"    - {criterion}" for criterion in task.acceptance)
    return "\n".join(lines)


def to_outline(doc: KanbanDocument) -> str:
    """Render the document as a Markdown outline.

    Header and input echo first, then one section per column (Todo, Doing,
    Done) listing its tasks in their original order.
    """
    by_status = doc.tasks_by_status()
    titles = {column.key: column.title for column in doc.columns}

    lines = [
        f"# {doc.title}",
        "",
        f"Generated: {format_timestamp(doc.created_at)}",
        "",
        "## Input",
    ]
    for field, label in INPUT_LABELS:
        lines.append(f"- {label}: {getattr(doc.input, field) or EMPTY_PLACEHOLDER}")

    lines.extend(["", "## Kanban", ""])
    for status in TaskStatus:
        lines.append(f"### {titles.get(status, status.value.title())}")
        lines.extend(format_task(task) for task in by_status[status])
        lines.append("")

    return "\n".join(lines)
