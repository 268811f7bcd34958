"""PRD Kanban — deterministic PRD to Kanban board generator."""

__version__ = "0.1.0"
