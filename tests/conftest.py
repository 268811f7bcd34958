"""Shared fixtures for prd_kanban tests."""

from datetime import datetime, timezone

import pytest

from prd_kanban.board.loader import TEMPLATES_DIR_ENV, clear_cache
from prd_kanban.models.task import (
    Column,
    KanbanDocument,
    KanbanInput,
    Task,
    TaskStatus,
)
from prd_kanban.utils.env import API_KEY_ENV, CORS_ORIGINS_ENV

FIXED_NOW = datetime(2026, 10, 19, 8, 0, 0, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    """Start every test with no config overrides and an empty template cache."""
    for name in (TEMPLATES_DIR_ENV, API_KEY_ENV, CORS_ORIGINS_ENV):
        monkeypatch.delenv(name, raising=False)
    clear_cache()
    yield
    clear_cache()


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def columns() -> tuple[Column, ...]:
    return (
        Column(key=TaskStatus.TODO, title="Todo"),
        Column(key=TaskStatus.DOING, title="Doing"),
        Column(key=TaskStatus.DONE, title="Done"),
    )


@pytest.fixture
def small_doc(columns) -> KanbanDocument:
    """A hand-built board with one task per column."""
    return KanbanDocument(
        title="Board",
        created_at=FIXED_NOW,
        input=KanbanInput(goal="Ship"),
        columns=columns,
        tasks=(
            Task(id="T-01", title="Plan", estimate_hours=1, acceptance=("Written",)),
            Task(id="T-02", title="Build", status=TaskStatus.DOING, estimate_hours=0.5, depends_on=("T-01",)),
            Task(id="T-03", title="Ship", status=TaskStatus.DONE),
        ),
    )


@pytest.fixture
def custom_templates_dir(tmp_path, monkeypatch):
    """Point the loader at a temporary template directory."""
    directory = tmp_path / "templates"
    directory.mkdir()
    monkeypatch.setenv(TEMPLATES_DIR_ENV, str(directory))
    return directory
