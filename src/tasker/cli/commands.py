# src/tasker/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

import click

from .. import __version__
from ..config import get_settings
from ..core.ports import TaskRepo
from ..core.state import AppState
from ..tasks.task_errors import NoTasksFound, TaskerError
from ..tasks.task_models import Task
from .bootstrap import open_task_store
from .render import HINT_ADD, HINT_DONE, print_hint, print_tasks

logger = logging.getLogger(__name__)


class AliasedGroup(click.Group):
    """
    click.Group with a short-alias table (a -> add, l -> all, ...).
    Names and aliases are both case-sensitive.

    Any TaskerError raised by the group or a subcommand is logged and turned
    into exit status 1.
    """

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._aliases: dict[str, str] = {}

    def add_alias(self, alias: str, name: str) -> None:
        if name not in self.commands:
            raise ValueError(f"cannot alias unknown command {name!r}")
        self._aliases[alias] = name

    def aliases_for(self, name: str) -> list[str]:
        return sorted(a for a, target in self._aliases.items() if target == name)

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        cmd = super().get_command(ctx, cmd_name)
        if cmd is not None:
            return cmd
        target = self._aliases.get(cmd_name)
        if target is None:
            return None
        return super().get_command(ctx, target)

    def resolve_command(self, ctx: click.Context, args: list[str]):
        # Report the canonical name, so ctx.invoked_subcommand is never an alias.
        _, cmd, rest = super().resolve_command(ctx, args)
        return (cmd.name if cmd is not None else None), cmd, rest

    def format_commands(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        rows: list[tuple[str, str]] = []
        for name in self.list_commands(ctx):
            cmd = self.get_command(ctx, name)
            if cmd is None or cmd.hidden:
                continue
            aliases = self.aliases_for(name)
            label = f"{name} ({', '.join(aliases)})" if aliases else name
            rows.append((label, cmd.get_short_help_str(limit=formatter.width - 6 - len(label))))

        if rows:
            with formatter.section("Commands"):
                formatter.write_dl(rows)

    def invoke(self, ctx: click.Context):
        try:
            return super().invoke(ctx)
        except TaskerError as exc:
            logger.error("%s", exc)
            ctx.exit(1)


def _get_store(ctx: click.Context) -> TaskRepo:
    """Return the task store, opening it on the root context the first time."""
    state = ctx.find_object(AppState)
    if state is None:
        raise click.UsageError("application state is not initialised", ctx=ctx)
    if state.task_store is None:
        state.task_store = ctx.find_root().with_resource(open_task_store(state.settings))
    return state.task_store


def _join(words: tuple[str, ...]) -> str:
    return " ".join(words)


def _show(fetch: Callable[[], list[Task]], hint: str) -> None:
    try:
        tasks = fetch()
    except NoTasksFound:
        print_hint(hint)
        return
    print_tasks(tasks)


@click.group(
    cls=AliasedGroup,
    invoke_without_command=True,
    context_settings=dict(help_option_names=["-h", "--help"]),
)
@click.version_option(__version__, "-v", "--version", help="Show the version and exit.")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """A simple CLI program to manage your tasks.

    Without a command, lists pending tasks.
    """
    if ctx.obj is None:
        ctx.obj = AppState(settings=get_settings())

    if ctx.invoked_subcommand is None:
        _show(_get_store(ctx).list_pending, HINT_ADD)


@cli.command("add")
@click.argument("words", nargs=-1)
@click.pass_context
def cmd_add(ctx: click.Context, words: tuple[str, ...]) -> None:
    """Add a task to the list."""
    # Validation happens before the store is even opened.
    task = Task.new(_join(words))
    _get_store(ctx).create(task)


@cli.command("all")
@click.pass_context
def cmd_all(ctx: click.Context) -> None:
    """List all tasks."""
    _show(_get_store(ctx).list_all, HINT_ADD)


@cli.command("done")
@click.argument("words", nargs=-1)
@click.pass_context
def cmd_done(ctx: click.Context, words: tuple[str, ...]) -> None:
    """Complete a task on the list."""
    _get_store(ctx).complete(_join(words))


@cli.command("finished")
@click.pass_context
def cmd_finished(ctx: click.Context) -> None:
    """List completed tasks."""
    _show(_get_store(ctx).list_finished, HINT_DONE)


@cli.command("rm")
@click.argument("words", nargs=-1)
@click.pass_context
def cmd_rm(ctx: click.Context, words: tuple[str, ...]) -> None:
    """Delete a task on the list."""
    _get_store(ctx).delete(_join(words))


cli.add_alias("a", "add")
cli.add_alias("l", "all")
cli.add_alias("d", "done")
cli.add_alias("f", "finished")
