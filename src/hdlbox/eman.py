"""eman - toolchain helper used inside the hdlbox container."""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path
from typing import Annotated

import typer

from hdlbox.console import print_error, run_app

app = typer.Typer(
    name="eman",
    help="Check and exercise the toolchains in the hdlbox container.",
    add_completion=False,
    context_settings={"help_option_names": []},
)


def show_help() -> None:
    """Show the eman usage text."""
    help_text = """Usage:
    eman help                       : Show this help
    eman check-verilator            : Print the version of the first Verilator found on PATH
    eman verilator-example <PATH>   : Compile and run the Verilator example(s) in PATH
    eman c-compiler-version         : Print the version of the default C compiler and GNU Make
    eman c-compiler-example <PATH>  : Compile and run the C/C++ example(s) in PATH"""
    typer.echo(help_text)


def help_callback(value: bool) -> None:
    """Print help and exit."""
    if value:
        show_help()
        raise typer.Exit()


def forward(cmd: list[str], cwd: Path | None = None) -> int:
    """Run an external tool with inherited stdio.

    Returns:
        The tool's exit code, or 127 if it is not installed.
    """
    try:
        result = subprocess.run(cmd, cwd=cwd)
    except FileNotFoundError:
        print_error(f"{cmd[0]}: command not found")
        return 127
    return result.returncode


def _make_example(path: Path) -> int:
    if not path.is_dir():
        print_error(f"Example directory not found: {path}")
        return 1
    return forward(["make", "clean", "all"], cwd=path)


@app.callback(invoke_without_command=True)
def eman_callback(
    ctx: typer.Context,
    help_opt: Annotated[
        bool,
        typer.Option(
            "--help",
            "-h",
            callback=help_callback,
            is_eager=True,
            help="Show this help message and exit.",
        ),
    ] = False,
) -> None:
    """Check and exercise the toolchains in the hdlbox container."""
    if ctx.invoked_subcommand is None:
        show_help()
        raise typer.Exit(1)


@app.command("help")
def help_command() -> None:
    """Show the usage text."""
    show_help()


@app.command("check-verilator")
def check_verilator() -> None:
    """Print the Verilator version."""
    raise typer.Exit(forward(["verilator", "--version"]))


@app.command("c-compiler-version")
def c_compiler_version() -> None:
    """Print the gcc and GNU Make versions."""
    exit_code = forward(["gcc", "--version"])
    make_exit_code = forward(["make", "--version"])
    raise typer.Exit(exit_code or make_exit_code)


@app.command("verilator-example")
def verilator_example(
    path: Annotated[Path, typer.Argument(help="Directory holding the example Makefile.")],
) -> None:
    """Build and run a Verilator example with make."""
    raise typer.Exit(_make_example(path))


@app.command("c-compiler-example")
def c_compiler_example(
    path: Annotated[Path, typer.Argument(help="Directory holding the example Makefile.")],
) -> None:
    """Build and run a C/C++ example with make."""
    raise typer.Exit(_make_example(path))


def main() -> None:
    """Console script entry point."""
    sys.exit(run_app(app, show_help))
