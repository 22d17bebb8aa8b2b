# src/tasker/cli/render.py

from __future__ import annotations

from collections.abc import Iterable

import click

from ..tasks.task_models import Task

COMPLETED_COLOR = "green"
PENDING_COLOR = "yellow"

HINT_ADD = "Nothing to see here.\nRun `add 'task'` to add a task"
HINT_DONE = "Nothing to see here.\nRun `done 'task'` to complete a task"


def print_tasks(tasks: Iterable[Task]) -> None:
    """Print `<n>: <text>` per task, in the order given; colour only marks completion."""
    for i, task in enumerate(tasks, start=1):
        fg = COMPLETED_COLOR if task.completed else PENDING_COLOR
        click.secho(f"{i}: {task.text}", fg=fg)


def print_hint(text: str) -> None:
    click.echo(text)
