"""Command-line interface for the todotxt CLI."""

import logging
import sys
from functools import wraps
from pathlib import Path

import click
from rich.markup import escape

from .config import load_config, save_config
from .exceptions import TodoTxtError
from .logging_setup import configure_logging
from .priority import Priority
from .storage import Storage
from .task import Task
from .theme import TaskRenderer, get_themed_console

logger = logging.getLogger(__name__)


def fail(message: str) -> None:
    """Print an error to stderr and exit with status 1."""
    console = get_themed_console(plain=_plain(), stderr=True)
    console.print(f"[error]Error: {escape(message)}[/error]", soft_wrap=True)
    sys.exit(1)


def _plain() -> bool:
    ctx = click.get_current_context(silent=True)
    if ctx is None or ctx.obj is None:
        return False
    return ctx.obj.get("plain", False)


def handle_errors(command):
    """Turn domain and I/O errors into a clean error message."""
    @wraps(command)
    def wrapper(*args, **kwargs):
        try:
            return command(*args, **kwargs)
        except (TodoTxtError, OSError) as e:
            logger.debug("Command failed", exc_info=True)
            fail(str(e))
    return wrapper


def print_tasks(ctx) -> None:
    """Print the list as ``<number> <task>`` lines."""
    storage = ctx.obj["storage"]
    renderer = ctx.obj["renderer"]
    console = get_themed_console(plain=ctx.obj["plain"])
    for number, task in enumerate(storage.load(), start=1):
        if ctx.obj["config"].show_numbers:
            console.print(renderer.render_numbered(number, task), soft_wrap=True)
        else:
            console.print(renderer.render(task), soft_wrap=True)


def update_task(ctx, number: int, change) -> Task:
    """Load the list, apply ``change`` to task ``number`` and save."""
    storage = ctx.obj["storage"]
    tasks = storage.load()
    task = tasks.get(number)
    change(task)
    storage.save(tasks)
    return task


@click.group(invoke_without_command=True)
@click.option("--file", "-f", "todo_file", help="Use this file instead of the default todo.txt")
@click.option("--plain", "-p", is_flag=True, help="Plain mode turns off colors")
@click.option("--force", "-F", is_flag=True, help="Force actions without confirmation")
@click.option("--config", "config_path", type=click.Path(dir_okay=False), help="Path to config file")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.pass_context
def cli(ctx, todo_file, plain, force, config_path, verbose):
    """Manage a todo.txt task list."""
    configure_logging(verbose)
    ctx.ensure_object(dict)

    try:
        config = load_config(Path(config_path) if config_path else None)
    except (OSError, ValueError, TypeError) as e:
        fail(f"Configuration error: {e}")

    ctx.obj["config"] = config
    ctx.obj["plain"] = plain or config.plain
    ctx.obj["force"] = force or not config.confirm_actions
    ctx.obj["storage"] = Storage(config, todo_file)
    ctx.obj["renderer"] = TaskRenderer()
    logger.debug(f"Using todo file {ctx.obj['storage'].path}")

    if ctx.invoked_subcommand is None:
        ctx.invoke(list_tasks)


@cli.command("list")
@click.pass_context
@handle_errors
def list_tasks(ctx):
    """List all tasks."""
    print_tasks(ctx)


@cli.command()
@click.argument("text", nargs=-1, required=True)
@click.pass_context
@handle_errors
def add(ctx, text):
    """Add a task."""
    line = " ".join(text)
    config = ctx.obj["config"]
    task = Task.new(line) if config.stamp_creation_date else Task.parse(line)

    storage = ctx.obj["storage"]
    tasks = storage.load()
    tasks.append(task)
    storage.save(tasks)
    logger.info(f"Added task {len(tasks)}")
    print_tasks(ctx)


@cli.command()
@click.argument("number", type=int)
@click.argument("text", nargs=-1, required=True)
@click.pass_context
@handle_errors
def append(ctx, number, text):
    """Append text to task NUMBER."""
    update_task(ctx, number, lambda task: task.append_description(" ".join(text)))


@cli.command()
@click.argument("number", type=int)
@click.pass_context
@handle_errors
def do(ctx, number):
    """Mark task NUMBER as completed."""
    task = update_task(ctx, number, Task.mark_completed)
    console = get_themed_console(plain=ctx.obj["plain"])
    console.print(f"[success]Completed {number}:[/success] {escape(str(task))}", soft_wrap=True)


@cli.command()
@click.argument("number", type=int)
@click.argument("priority")
@click.pass_context
@handle_errors
def pri(ctx, number, priority):
    """Set the PRIORITY (A-Z) of task NUMBER."""
    update_task(ctx, number, lambda task: task.set_priority(Priority.parse(priority)))


@cli.command()
@click.argument("number", type=int)
@click.pass_context
@handle_errors
def depri(ctx, number):
    """Remove the priority of task NUMBER."""
    update_task(ctx, number, Task.clear_priority)


@cli.command()
@click.pass_context
@handle_errors
def sort(ctx):
    """Sort the file by each task's text."""
    if not ctx.obj["force"] and not click.confirm("Rewrite the task file in sorted order?"):
        return
    storage = ctx.obj["storage"]
    tasks = storage.load()
    tasks.sort_by_canonical_form()
    storage.save(tasks)


@cli.command("config")
@click.option("--save", "save_path", type=click.Path(dir_okay=False), help="Write the active configuration to this file")
@click.pass_context
@handle_errors
def show_config(ctx, save_path):
    """Show the active configuration."""
    config = ctx.obj["config"]
    if save_path:
        save_config(config, Path(save_path))
    click.echo(config.to_yaml(), nl=False)


def main():
    """Console script entry point."""
    cli(obj={})


if __name__ == "__main__":
    main()
