"""Terminal output helpers shared by hdlbox and eman."""

from __future__ import annotations

from collections.abc import Callable, Sequence

import click
import typer


def _tag(label: str, color: str) -> str:
    return typer.style(f"[{label}]", fg=color)


def print_info(message: str) -> None:
    """Print an informational message to stdout."""
    typer.echo(f"{_tag('info', typer.colors.CYAN)} {message}")


def print_success(message: str) -> None:
    """Print a success message to stdout."""
    typer.echo(f"{_tag('success', typer.colors.GREEN)} {message}")


def print_warning(message: str) -> None:
    """Print a warning to stderr."""
    typer.echo(f"{_tag('warning', typer.colors.YELLOW)} {message}", err=True)


def print_error(message: str) -> None:
    """Print an error to stderr."""
    typer.echo(f"{_tag('error', typer.colors.RED)} {message}", err=True)


def print_command(cmd: Sequence[str]) -> None:
    """Echo an external command before it runs (verbose mode)."""
    typer.echo(f"$ {' '.join(cmd)}", err=True)


def run_app(
    app: typer.Typer,
    show_usage: Callable[[], None],
    args: Sequence[str] | None = None,
) -> int:
    """Run a typer app and return its exit code.

    Click reports usage errors with exit code 2. Both hdlbox and eman
    promise exit code 1 for every handled failure, so the app runs in
    non-standalone mode and usage errors are mapped here.

    Args:
        app: The typer application.
        show_usage: Prints the usage text after a usage error.
        args: Arguments to parse (defaults to sys.argv[1:]).

    Returns:
        Process exit code.
    """
    try:
        result = app(
            args=list(args) if args is not None else None,
            standalone_mode=False,
        )
    except click.UsageError as e:
        print_error(e.format_message())
        typer.echo("")
        show_usage()
        return 1
    except click.ClickException as e:
        print_error(e.format_message())
        return 1
    except click.Abort:
        typer.echo("", err=True)
        return 1
    return result if isinstance(result, int) else 0
