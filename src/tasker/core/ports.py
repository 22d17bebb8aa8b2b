# src/tasker/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the command layer.

Commands depend on this Protocol instead of TaskStore, so tests can swap in
a fake repository or a store over an in-memory collection.
"""

from typing import Protocol

from ..tasks.task_models import Task


class TaskRepo(Protocol):
    def count_tasks(self) -> int: ...
    def create(self, task: Task) -> None: ...

    # Listings raise NoTasksFound when nothing matches.
    def list_all(self) -> list[Task]: ...
    def list_pending(self) -> list[Task]: ...
    def list_finished(self) -> list[Task]: ...

    # Lookups by text raise TaskNotFoundError when nothing matches.
    def complete(self, text: str) -> Task: ...
    def delete(self, text: str) -> None: ...
