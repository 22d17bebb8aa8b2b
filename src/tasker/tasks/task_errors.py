# src/tasker/tasks/task_errors.py

"""
Outcomes of task operations that are not a plain success.

Everything that should end a command derives from TaskerError.
NoTasksFound is kept outside that hierarchy: an empty listing is a normal
state that every list caller has to branch on explicitly.
"""

from __future__ import annotations


class TaskerError(Exception):
    """Base class for failures that end the current command."""


class EmptyTaskError(TaskerError, ValueError):
    def __init__(self, message: str = "cannot add an empty task") -> None:
        super().__init__(message)


class DuplicateTaskError(TaskerError):
    def __init__(self, text: str) -> None:
        super().__init__(f"a task with text {text!r} already exists")
        self.text = text


class TaskNotFoundError(TaskerError, LookupError):
    pass


class TaskStoreError(TaskerError):
    """Transport, write or server failure reported by the document store."""


class TaskDecodeError(TaskStoreError):
    """A stored document does not have the shape of a task."""


class NoTasksFound(LookupError):
    """A list query matched zero tasks."""

    def __init__(self, filter_doc: dict | None = None) -> None:
        super().__init__("no tasks matched")
        self.filter = dict(filter_doc or {})
