"""YAML template loader and registry for board generation."""

import logging
import os
import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from prd_kanban.board.models import BoardTemplate

logger = logging.getLogger(__name__)

BUILTIN_DIR = Path(__file__).parent / "templates"
TEMPLATES_DIR_ENV = "PRD_KANBAN_TEMPLATES_DIR"
DEFAULT_TEMPLATE = "mvp"

# Template names are bare file stems; no separators or dots
_TEMPLATE_NAME_RE = re.compile(r"[A-Za-z0-9_-]+")

# Module-level cache, keyed by resolved file path
_template_cache: dict[Path, BoardTemplate] = {}


class TemplateError(ValueError):
    """A board template exists but is not valid."""


def _search_dirs() -> list[Path]:
    """Return template directories, user override first (re-reads env on each call)."""
    dirs: list[Path] = []
    override = os.environ.get(TEMPLATES_DIR_ENV)
    if override:
        dirs.append(Path(override))
    dirs.append(BUILTIN_DIR)
    return dirs


def _find_template(name: str) -> Path | None:
    if not _TEMPLATE_NAME_RE.fullmatch(name):
        return None
    for directory in _search_dirs():
        candidate = directory / f"{name}.yaml"
        if candidate.exists():
            return candidate.resolve()
    return None


def load_template(name: str = DEFAULT_TEMPLATE) -> BoardTemplate:
    """Load a board template by name.

    Raises:
        FileNotFoundError: If no ``<name>.yaml`` exists in any template directory.
        TemplateError: If the YAML is invalid or doesn't match the schema.
    """
    yaml_path = _find_template(name)
    if yaml_path is None:
        available = list_templates()
        raise FileNotFoundError(
            f"Template '{name}' not found. Available: {', '.join(available)}"
        )

    if yaml_path in _template_cache:
        return _template_cache[yaml_path]

    raw = yaml_path.read_text(encoding="utf-8")
    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise TemplateError(f"Template '{name}' is not valid YAML: {e}") from e

    if not isinstance(data, dict):
        raise TemplateError(f"Template '{name}' is not a valid YAML mapping")

    try:
        template = BoardTemplate(**data)
    except ValidationError as e:
        raise TemplateError(f"Template '{name}' is invalid: {e}") from e

    _template_cache[yaml_path] = template
    logger.debug("Loaded template: %s (%s) from %s", template.name, template.id, yaml_path)
    return template


def list_templates() -> list[str]:
    """Return available template names (filenames without .yaml)."""
    names: set[str] = set()
    for directory in _search_dirs():
        if directory.is_dir():
            names.update(p.stem for p in directory.glob("*.yaml"))
    return sorted(names)


def clear_cache() -> None:
    """Clear the template cache (useful for testing)."""
    _template_cache.clear()
