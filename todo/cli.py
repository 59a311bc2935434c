import typer
from pathlib import Path
from typing import List, NoReturn, Optional

from typer.core import TyperGroup

from .config import DB_PATH_ENV, configure_logging
from .domain import LIST_NAMES
from .errors import TodoError
from .render import USAGE, render_lists
from .store import Store


class TodoGroup(TyperGroup):
    """Command group that answers unknown commands with the usage text."""

    def get_command(self, ctx, cmd_name):
        return super().get_command(ctx, cmd_name) or super().get_command(ctx, "help")


app = typer.Typer(help="Personal todo list manager", cls=TodoGroup, add_completion=False)

# Let stray words and negative numbers through as plain arguments.
LOOSE_ARGS = {"allow_extra_args": True, "ignore_unknown_options": True}


def fail(message: str) -> NoReturn:
    typer.echo(message, err=True)
    typer.echo(USAGE)
    raise typer.Exit(code=1)


def run(action, *args):
    """Call a store operation, turning store errors into exit status 1."""
    try:
        return action(*args)
    except TodoError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


def parse_index(value: Optional[str]) -> int:
    if value is None:
        fail("Argument required")
    try:
        return int(value)
    except ValueError:
        fail("Invalid argument")


def show(store: Store) -> None:
    typer.echo(render_lists(store.list_todo(), store.list_done()))


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    db: Optional[Path] = typer.Option(None, "--db", envvar=DB_PATH_ENV, help="JSON file holding the lists. Defaults to ~/.todo.json."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr."),
):
    """Add, complete and remove items of a personal todo list."""
    if verbose:
        configure_logging(verbose=True)
    store = Store(db)
    run(store.initialize)
    ctx.obj = store
    if ctx.invoked_subcommand is None:
        show(store)


@app.command(context_settings=LOOSE_ARGS)
def ls(ctx: typer.Context):
    """List all items."""
    show(ctx.obj)


@app.command("help", context_settings=LOOSE_ARGS)
def help_():
    """Show usage."""
    typer.echo(USAGE)


@app.command(context_settings=LOOSE_ARGS)
def add(ctx: typer.Context, words: Optional[List[str]] = typer.Argument(None, help="Text of the new item.")):
    """Add an item."""
    if not words:
        fail("Argument required")
    run(ctx.obj.add, " ".join(words))
    show(ctx.obj)


@app.command(context_settings=LOOSE_ARGS)
def rm(ctx: typer.Context, index: Optional[str] = typer.Argument(None, help="Position of the item in the todo list.")):
    """Remove an item."""
    run(ctx.obj.remove, parse_index(index))
    show(ctx.obj)


@app.command(context_settings=LOOSE_ARGS)
def done(ctx: typer.Context, index: Optional[str] = typer.Argument(None, help="Position of the item in the todo list.")):
    """Mark an item as done."""
    run(ctx.obj.mark_done, parse_index(index))
    show(ctx.obj)


@app.command(context_settings=LOOSE_ARGS)
def clear(ctx: typer.Context, list_name: Optional[str] = typer.Argument(None, metavar="{todo|done}")):
    """Clear all items of the list."""
    # Anything but a known list name leaves both lists alone.
    if list_name in LIST_NAMES:
        run(ctx.obj.clear, list_name)
    show(ctx.obj)


if __name__ == "__main__":
    app()
