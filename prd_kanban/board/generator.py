"""Board generator — deterministic PRD-to-Kanban task synthesis.

Pipeline: baseline templates -> input-derived extras -> identifiers ->
declared dependencies resolved to identifiers -> document.
"""

import logging
from datetime import datetime, timezone

from prd_kanban.board.loader import DEFAULT_TEMPLATE, load_template
from prd_kanban.board.models import BoardTemplate, ExtraTemplate, TaskTemplate
from prd_kanban.models.task import KanbanDocument, KanbanInput, Task, TaskStatus

logger = logging.getLogger(__name__)


def generate(
    kanban_input: KanbanInput,
    template: str = DEFAULT_TEMPLATE,
    now: datetime | None = None,
) -> KanbanDocument:
    """Generate a Kanban board from the four PRD fields.

    Every field may be empty. Apart from ``created_at`` the result is a pure
    function of the input and the template.

    Args:
        kanban_input: Goal, constraints, duration and team text.
        template: Board template name (see ``list_templates()``).
        now: Creation time; defaults to the current UTC time.

    Returns:
        A frozen KanbanDocument with all tasks in ``todo``.

    Raises:
        FileNotFoundError: If the template doesn't exist.
        TemplateError: If the template file is invalid.
    """
    board = load_template(template)
    return build_document(board, kanban_input, now)


def build_document(
    board: BoardTemplate,
    kanban_input: KanbanInput,
    now: datetime | None = None,
) -> KanbanDocument:
    """Build a document from an already-loaded template."""
    created_at = _truncate_to_millis(now or datetime.now(timezone.utc))

    templates: list[TaskTemplate | ExtraTemplate] = list(board.baseline)
    extras = select_extras(board, kanban_input)
    templates.extend(extras)

    ids = {
        tmpl.key: task_id(board.id_prefix, index)
        for index, tmpl in enumerate(templates)
    }

    tasks: list[Task] = []
    for tmpl in templates:
        if isinstance(tmpl, ExtraTemplate):
            title = render_extra_title(tmpl, getattr(kanban_input, tmpl.field.value), board.ellipsis)
        else:
            title = tmpl.title
        depends_on = tuple(ids[dep] for dep in tmpl.depends_on)
        tasks.append(Task(
            id=ids[tmpl.key],
            title=title,
            status=TaskStatus.TODO,
            estimate_hours=tmpl.estimate_hours,
            depends_on=depends_on or None,
            acceptance=tuple(tmpl.acceptance) or None,
        ))

    doc = KanbanDocument(
        title=board_title(board, kanban_input.goal),
        created_at=created_at,
        input=kanban_input,
        columns=tuple(board.columns),
        tasks=tuple(tasks),
    )

    logger.debug(
        "Generated board '%s': %d tasks (%d from input)",
        doc.title,
        len(tasks),
        len(extras),
    )
    return doc


def select_extras(board: BoardTemplate, kanban_input: KanbanInput) -> list[ExtraTemplate]:
    """Return the extra templates whose input field is non-empty after trimming."""
    return [
        extra for extra in board.extras
        if getattr(kanban_input, extra.field.value).strip()
    ]


def render_extra_title(extra: ExtraTemplate, value: str, ellipsis: str = "…") -> str:
    """Interpolate the trimmed field value into an extra task title."""
    value = value.strip()
    if extra.max_chars and len(value) > extra.max_chars:
        value = value[: extra.max_chars] + ellipsis
    return extra.title.format(value=value)


def board_title(board: BoardTemplate, goal: str) -> str:
    """``"<board title>: <goal>"``, or just the board title when the goal is blank."""
    goal = goal.strip()
    return f"{board.board_title}: {goal}" if goal else board.board_title


def task_id(prefix: str, index: int) -> str:
    """Identifier for the task at 0-based ``index``, e.g. ``T-01``."""
    return f"{prefix}-{index + 1:02d}"


def _truncate_to_millis(value: datetime) -> datetime:
    """Drop sub-millisecond precision so the exported timestamp round-trips exactly."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.replace(microsecond=value.microsecond // 1000 * 1000)
