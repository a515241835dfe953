"""Main CLI entry point for SVCS."""

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape

from svcs.constants import DEFAULT_STORAGE_DIR, ENV_STORAGE_DIR, EXIT_SYSTEM_ERROR
from svcs.core import Repository
from svcs.errors import StorageError, UserError
from svcs.logger import setup_logging

console = Console()
err_console = Console(stderr=True)
app = typer.Typer(
    name="svcs",
    help="These are SVCS commands:",
    add_completion=False,
    no_args_is_help=True,
)


def _say(text: str) -> None:
    """Print core output verbatim (no markup, no wrapping)."""
    console.print(text, markup=False, highlight=False, soft_wrap=True)


def _open_repository(ctx: typer.Context) -> Repository:
    workspace_root = Path.cwd()
    storage_dir = Path(ctx.obj["repo"])
    if not storage_dir.is_absolute():
        storage_dir = workspace_root / storage_dir
    return Repository.open(storage_dir, workspace_root)


def _storage_failure(e: StorageError) -> None:
    err_console.print(f"[bold red]Error:[/bold red] {escape(str(e))}", soft_wrap=True)
    raise typer.Exit(EXIT_SYSTEM_ERROR)


@app.callback()
def main_callback(
    ctx: typer.Context,
    repo: str = typer.Option(
        DEFAULT_STORAGE_DIR,
        "--repo",
        envvar=ENV_STORAGE_DIR,
        help="Directory holding the index, log and snapshots",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug logging",
    ),
) -> None:
    """Simple version control for a handful of files."""
    setup_logging(verbose=verbose, console=err_console)
    ctx.obj = {"repo": repo}


@app.command()
def version() -> None:
    """Show SVCS version."""
    from svcs import __version__
    typer.echo(f"SVCS version {__version__}")


@app.command()
def config(
    ctx: typer.Context,
    name: Optional[str] = typer.Argument(None, help="Username to set"),
) -> None:
    """Get and set a username."""
    try:
        repo = _open_repository(ctx)
        if name:
            _say(repo.config.set(name))
        else:
            _say(repo.config.describe())
    except UserError as e:
        _say(str(e))
    except StorageError as e:
        _storage_failure(e)


@app.command()
def add(
    ctx: typer.Context,
    path: Optional[str] = typer.Argument(None, help="File to track"),
) -> None:
    """Add a file to the index."""
    try:
        repo = _open_repository(ctx)

        # Without a path, list what is tracked
        if not path:
            tracked = repo.tracked()
            _say("Tracked files:")
            for tracked_path in tracked:
                _say(tracked_path)
            return

        # Absolute paths inside the working tree become relative
        candidate = Path(path)
        if candidate.is_absolute():
            try:
                path = candidate.relative_to(Path.cwd()).as_posix()
            except ValueError:
                pass

        _say(repo.stage(path))
    except UserError as e:
        _say(str(e))
    except StorageError as e:
        _storage_failure(e)


@app.command()
def log(ctx: typer.Context) -> None:
    """Show commit logs."""
    try:
        repo = _open_repository(ctx)
        _say(repo.log().rstrip("\n"))
    except UserError as e:
        _say(str(e))
    except StorageError as e:
        _storage_failure(e)


@app.command()
def commit(
    ctx: typer.Context,
    message: Optional[List[str]] = typer.Argument(None, help="Commit message"),
) -> None:
    """Save changes."""
    try:
        repo = _open_repository(ctx)
        new_commit = repo.commit(" ".join(message or []))
        _say("Changes are committed.")
        console.print(
            f"  [dim]commit[/dim] [bold cyan]{new_commit.short_id}[/bold cyan]"
            f"  [dim]Author:[/dim] {escape(new_commit.author)}",
            soft_wrap=True,
        )
    except UserError as e:
        _say(str(e))
    except StorageError as e:
        _storage_failure(e)


@app.command()
def checkout(
    ctx: typer.Context,
    identifier: Optional[str] = typer.Argument(None, help="Commit id"),
    preserve_paths: bool = typer.Option(
        False,
        "--preserve-paths",
        help="Also restore files from nested snapshot directories at their relative paths",
    ),
) -> None:
    """Restore a file."""
    if not identifier:
        _say("Commit id was not passed.")
        return

    try:
        repo = _open_repository(ctx)
        result = repo.checkout(identifier, preserve_paths=preserve_paths)
        _say(result.message)
    except UserError as e:
        _say(str(e))
    except StorageError as e:
        _storage_failure(e)


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
