# src/tasker/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from .ports import TaskRepo


@dataclass
class AppState:
    # Settings are kept on the state so commands never read config globals.
    settings: object

    # Opened lazily by the first command that needs it.
    task_store: TaskRepo | None = None
