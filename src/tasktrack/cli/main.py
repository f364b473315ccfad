# src/tasktrack/cli/main.py

"""
CLI entrypoint.

One invocation = load -> recompute/sort -> one command -> save.
The recompute result is saved even when the command itself is rejected.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

import click

from ..cli import commands
from ..cli.bootstrap import create_initial_state, load_tasks, save_tasks
from ..config import get_settings
from ..core.state import AppState
from ..logging_setup import setup_logging
from ..tasks.errors import TaskError, TaskPreconditionError
from ..tasks.task_api import refresh
from ..tasks.task_store import TaskStoreError

logger = logging.getLogger(__name__)

_PREPARED_KEY = "tasktrack.prepared"

# IDs may be negative; let them reach TaskList.resolve instead of parsing as options.
_ID_COMMAND = {"ignore_unknown_options": True}


def _configure_logging(settings, verbose: bool) -> None:
    level_name = "DEBUG" if verbose else str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    log_file = settings.log_file_path if getattr(settings, "log_file_enabled", False) else None
    setup_logging(log_file=log_file, console_level=console_level)


class _TaskGroup(click.Group):
    """Group that still saves the recompute when a subcommand has bad arguments."""

    def invoke(self, ctx: click.Context):
        try:
            return super().invoke(ctx)
        except click.UsageError:
            if ctx.meta.get(_PREPARED_KEY):
                try:
                    save_tasks(ctx.obj)
                except TaskStoreError as e:
                    logger.error("Save failed: %s", e)
            raise


def _run(ctx: click.Context, action: Callable[[AppState], str]) -> None:
    state: AppState = ctx.obj
    exit_code = 0
    try:
        output = action(state)
    except TaskError as e:
        logger.warning("Command %s rejected: %s", ctx.info_name, e)
        click.echo(f"Error: {e}", err=True)
        exit_code = 1
    else:
        if output:
            click.echo(output)

    try:
        save_tasks(state)
    except TaskStoreError as e:
        logger.error("Save failed: %s", e)
        raise click.ClickException(str(e)) from e

    ctx.exit(exit_code)


@click.group(
    cls=_TaskGroup,
    help="Another task manager: tasks ordered by urgency, urgency grows with time.",
)
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    if ctx.obj is None:
        settings = get_settings()
        _configure_logging(settings, verbose)
        ctx.obj = create_initial_state(settings=settings)

    state: AppState = ctx.obj
    state.now = state.clock.now()
    try:
        load_tasks(state)
        raised = refresh(state)
    except TaskStoreError as e:
        logger.error("Load failed: %s", e)
        raise click.ClickException(str(e)) from e
    except TaskPreconditionError as e:
        # Fatal: nothing is saved, the file stays as it was.
        logger.error("Recompute failed: %s", e)
        raise click.ClickException(str(e)) from e
    ctx.meta[_PREPARED_KEY] = True
    logger.debug("Prepared %d tasks (%d urgencies raised)", len(state.tasks), raised)


@cli.command("add", help="Add a new task")
@click.argument("name")
@click.option("-d", "--description", help="Description of task")
@click.option("-u", "--urgency", type=float, help="Urgency of task (0.0-10.0)")
@click.option("-D", "--due-time", help="Due date of task, e.g. 31/12/2025")
@click.pass_context
def add_cmd(ctx, name, description, urgency, due_time):
    _run(
        ctx,
        lambda s: commands.cmd_add(
            s, name, description=description, urgency=urgency, due_time=due_time
        ),
    )


@cli.command("view", help="View task by ID", context_settings=_ID_COMMAND)
@click.argument("task_id", metavar="ID", type=int)
@click.pass_context
def view_cmd(ctx, task_id):
    _run(ctx, lambda s: commands.cmd_view(s, task_id))


@cli.command("list", help="List all the tasks")
@click.pass_context
def list_cmd(ctx):
    _run(ctx, commands.cmd_list)


@cli.command("edit", help="Edit a task's values by ID", context_settings=_ID_COMMAND)
@click.argument("task_id", metavar="ID", type=int)
@click.option("-n", "--name", help="Name of the task")
@click.option("-d", "--description", help="Description of task")
@click.option("-u", "--urgency", type=float, help="Urgency of task (0.0-10.0)")
@click.option("-D", "--due-time", help="Due date of task, e.g. 31/12/2025")
@click.pass_context
def edit_cmd(ctx, task_id, name, description, urgency, due_time):
    _run(
        ctx,
        lambda s: commands.cmd_edit(
            s, task_id, name=name, description=description, urgency=urgency, due_time=due_time
        ),
    )


@cli.command("start", help="Set a task to active by ID", context_settings=_ID_COMMAND)
@click.argument("task_id", metavar="ID", type=int)
@click.pass_context
def start_cmd(ctx, task_id):
    _run(ctx, lambda s: commands.cmd_start(s, task_id))


@cli.command("stop", help="Set a task to inactive by ID", context_settings=_ID_COMMAND)
@click.argument("task_id", metavar="ID", type=int)
@click.pass_context
def stop_cmd(ctx, task_id):
    _run(ctx, lambda s: commands.cmd_stop(s, task_id))


@cli.command("done", help="Set a task to complete by ID", context_settings=_ID_COMMAND)
@click.argument("task_id", metavar="ID", type=int)
@click.pass_context
def done_cmd(ctx, task_id):
    _run(ctx, lambda s: commands.cmd_done(s, task_id))


@cli.command("remove", help="Remove a task by ID", context_settings=_ID_COMMAND)
@click.argument("task_id", metavar="ID", type=int)
@click.pass_context
def remove_cmd(ctx, task_id):
    _run(ctx, lambda s: commands.cmd_remove(s, task_id))


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
