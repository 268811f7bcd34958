"""JSON export of a Kanban document, and parsing it back."""

import json

from pydantic import ValidationError

from prd_kanban.models.task import KanbanDocument

EXPORT_INDENT = 2


class ExportFormatError(ValueError):
    """Text is not a valid Kanban JSON export."""


def to_export(doc: KanbanDocument) -> str:
    """Serialize the whole document as indented JSON.

    Keys follow model field order; optional task fields that are unset are
    left out rather than written as null.
    """
    data = doc.model_dump(mode="json", exclude_none=True)
    return json.dumps(data, indent=EXPORT_INDENT, ensure_ascii=False)


def from_export(text: str) -> KanbanDocument:
    """Parse a JSON export back into an equal KanbanDocument.

    Raises:
        ExportFormatError: If the text is not JSON or doesn't match the schema.
    """
    try:
        return KanbanDocument.model_validate_json(text)
    except ValidationError as e:
        raise ExportFormatError(f"Invalid Kanban export: {e}") from e
