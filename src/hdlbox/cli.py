"""Typer CLI for hdlbox."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Annotated, NoReturn

import typer

from hdlbox import __version__
from hdlbox.config import (
    DEFAULT_CONTAINER_NAME,
    DEFAULT_HOSTNAME,
    DEFAULT_IMAGE_NAME,
    Configuration,
    load_project_config,
    resolve_config,
)
from hdlbox.console import print_error, print_info, run_app
from hdlbox.container import ContainerEngine, ImageManager
from hdlbox.errors import HdlboxError, InvalidArgument, ResourceConflict
from hdlbox.lifecycle import Lifecycle

app = typer.Typer(
    name="hdlbox",
    help="Build, run and manage the HDL development container.",
    add_completion=False,
)


def show_usage() -> None:
    """Show the usage text."""
    usage_text = f"""hdlbox - HDL development container management

USAGE:
    hdlbox <command> [options]

COMMANDS:
    build       Build the image (skipped if it already exists)
    run         Create, start or enter the container
    stop        Stop the container
    remove      Remove the container (stopping it first if needed)
    clean       Remove the container and the image
    rebuild     Remove everything and build the image without cache
    help        Show this help message

OPTIONS:
    build   [-i|--image_name NAME]
    run     [-i|--image_name NAME] [-c|--cont_name NAME] [-u|--username NAME]
            [-h|--hostname NAME] [-m|--mount HOST[:CONTAINER]]...
    stop    [CONTAINER_NAME]
    remove  [CONTAINER_NAME]
    clean   [IMAGE_NAME] [CONTAINER_NAME]
    rebuild [IMAGE_NAME] [CONTAINER_NAME]

GLOBAL OPTIONS:
    --help              Show this help message and exit
    -V, --version       Show hdlbox version and exit
    -v, --verbose       Print each container engine command before running it

EXAMPLES:
    hdlbox build
    hdlbox run -m ./src:/home/user/src -m ./data
    hdlbox stop
    hdlbox rebuild

DEFAULTS:
    Image name:     {DEFAULT_IMAGE_NAME}
    Container name: {DEFAULT_CONTAINER_NAME}
    Hostname:       {DEFAULT_HOSTNAME}
    Mount:          ./projects -> /home/<username>/projects

ENVIRONMENT:
    HDLBOX_ENGINE           Container engine executable (default: docker)
    HDLBOX_BUILD_CONTEXT    Directory holding the Dockerfile (default: cwd)

An hdlbox.json file in the current directory can override the defaults."""
    typer.echo(usage_text)


def version_callback(value: bool) -> None:
    """Print version information and exit."""
    if value:
        typer.echo(f"hdlbox {__version__}")
        typer.echo(f"  engine: {ContainerEngine().binary}")
        raise typer.Exit()


def help_callback(value: bool) -> None:
    """Print help and exit."""
    if value:
        show_usage()
        raise typer.Exit()


def _fail(error: HdlboxError) -> NoReturn:
    print_error(str(error))
    if isinstance(error, ResourceConflict):
        print_info("Please stop and remove any containers using this image first.")
    elif isinstance(error, InvalidArgument):
        typer.echo("")
        show_usage()
    raise typer.Exit(1)


def _lifecycle(ctx: typer.Context) -> Lifecycle:
    engine = ContainerEngine(verbose=ctx.obj.get("verbose", False))
    return Lifecycle(engine, ImageManager(engine))


def _resolve(**values: str | list[str] | None) -> Configuration:
    workspace = Path.cwd()
    return resolve_config(
        project=load_project_config(workspace),
        cwd=workspace,
        **values,
    )


@app.callback(invoke_without_command=True)
def cli_callback(
    ctx: typer.Context,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show hdlbox version and exit.",
        ),
    ] = False,
    help_opt: Annotated[
        bool,
        typer.Option(
            "--help",
            callback=help_callback,
            is_eager=True,
            help="Show this help message and exit.",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Print each container engine command before running it.",
        ),
    ] = False,
) -> None:
    """Build, run and manage the HDL development container."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose

    if ctx.invoked_subcommand is None:
        show_usage()
        raise typer.Exit(1)


@app.command("help")
def help_command() -> None:
    """Show the usage text."""
    show_usage()


@app.command("build")
def build_command(
    ctx: typer.Context,
    image_name: Annotated[
        str | None,
        typer.Option("--image_name", "-i", help="Image name."),
    ] = None,
) -> None:
    """Build the image unless it already exists."""
    try:
        config = _resolve(image_name=image_name)
        _lifecycle(ctx).build(config.image_name)
    except HdlboxError as e:
        _fail(e)


@app.command("run")
def run_command(
    ctx: typer.Context,
    image_name: Annotated[
        str | None,
        typer.Option("--image_name", "-i", help="Image name."),
    ] = None,
    cont_name: Annotated[
        str | None,
        typer.Option("--cont_name", "-c", help="Container name."),
    ] = None,
    username: Annotated[
        str | None,
        typer.Option("--username", "-u", help="User inside the container."),
    ] = None,
    hostname: Annotated[
        str | None,
        typer.Option("--hostname", "-h", help="Container hostname."),
    ] = None,
    mount: Annotated[
        list[str] | None,
        typer.Option(
            "--mount",
            "-m",
            help="HOST[:CONTAINER] path to mount. Repeatable.",
        ),
    ] = None,
) -> None:
    """Create, start or enter the container and open a shell."""
    try:
        config = _resolve(
            image_name=image_name,
            container_name=cont_name,
            username=username,
            hostname=hostname,
            mounts=mount,
        )
        exit_code = _lifecycle(ctx).run(config)
    except HdlboxError as e:
        _fail(e)

    raise typer.Exit(exit_code)


@app.command("stop")
def stop_command(
    ctx: typer.Context,
    container_name: Annotated[
        str | None,
        typer.Argument(help="Container to stop."),
    ] = None,
) -> None:
    """Stop the container."""
    try:
        config = _resolve(container_name=container_name)
        _lifecycle(ctx).stop(config.container_name)
    except HdlboxError as e:
        _fail(e)


@app.command("remove")
def remove_command(
    ctx: typer.Context,
    container_name: Annotated[
        str | None,
        typer.Argument(help="Container to remove."),
    ] = None,
) -> None:
    """Remove the container, stopping it first if needed."""
    try:
        config = _resolve(container_name=container_name)
        _lifecycle(ctx).remove(config.container_name)
    except HdlboxError as e:
        _fail(e)


@app.command("clean")
def clean_command(
    ctx: typer.Context,
    image_name: Annotated[
        str | None,
        typer.Argument(help="Image to remove."),
    ] = None,
    container_name: Annotated[
        str | None,
        typer.Argument(help="Container to remove."),
    ] = None,
) -> None:
    """Remove the container and the image."""
    try:
        config = _resolve(image_name=image_name, container_name=container_name)
        _lifecycle(ctx).clean(config.image_name, config.container_name)
    except HdlboxError as e:
        _fail(e)


@app.command("rebuild")
def rebuild_command(
    ctx: typer.Context,
    image_name: Annotated[
        str | None,
        typer.Argument(help="Image to rebuild."),
    ] = None,
    container_name: Annotated[
        str | None,
        typer.Argument(help="Container to remove first."),
    ] = None,
) -> None:
    """Remove the container and image, then build without cache."""
    try:
        config = _resolve(image_name=image_name, container_name=container_name)
        _lifecycle(ctx).rebuild(config.image_name, config.container_name)
    except HdlboxError as e:
        _fail(e)


def main() -> None:
    """Console script entry point."""
    sys.exit(run_app(app, show_usage))
