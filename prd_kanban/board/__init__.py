"""PRD → Kanban board generation and rendering."""

from prd_kanban.board.export import ExportFormatError, from_export, to_export
from prd_kanban.board.generator import generate
from prd_kanban.board.loader import TemplateError, list_templates, load_template
from prd_kanban.board.outline import to_outline

__all__ = [
    "ExportFormatError",
    "from_export",
    "generate",
    "list_templates",
    "load_template",
    "TemplateError",
    "to_export",
    "to_outline",
]
