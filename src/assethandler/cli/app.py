"""Command line interface for the asset handler."""

from __future__ import annotations

import os
import pathlib
from typing import List, NoReturn, Optional

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.table import Table, box

from assethandler import get_version
from assethandler.config import load_config
from assethandler.core import ANY, AssetHandlerError, AssetRegistry, ContainerRef
from assethandler.logging import configure_from_settings

app = typer.Typer(
    name="assethandler",
    help="Register web assets in containers and render their markup tags.",
    no_args_is_help=True,
    add_completion=False,
)


def _load_environment(env_file: Optional[pathlib.Path]) -> None:
    """Load environment variables from .env files."""

    if env_file is not None:
        load_dotenv(dotenv_path=env_file, override=True)
    else:
        load_dotenv(override=False)


def _version_callback(value: bool) -> None:
    """Print the package version and exit when requested."""

    if value:
        typer.echo(get_version())
        raise typer.Exit()


def _fail(exc: Exception) -> NoReturn:
    typer.echo(f"Error: {exc}", err=True)
    raise typer.Exit(code=1)


@app.callback()
def main(
    ctx: typer.Context,
    config: Optional[pathlib.Path] = typer.Option(
        None,
        "--config",
        metavar="PATH",
        envvar="ASSETHANDLER_CONFIG",
        help="Path to YAML configuration file (used exclusively).",
    ),
    env_file: Optional[pathlib.Path] = typer.Option(
        None,
        "--env-file",
        metavar="PATH",
        help="Load environment variables from .env-style file before execution.",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        metavar="LEVEL",
        help="Override the configured log level (debug, info, warn, error).",
    ),
    log_path: Optional[pathlib.Path] = typer.Option(
        None,
        "--log-path",
        metavar="PATH",
        help="Write logs to this file or directory.",
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the assethandler version and exit.",
    ),
) -> None:
    """CLI root; loads configuration, logging and the asset registry."""

    ctx.ensure_object(dict)
    _load_environment(env_file)

    # ASSETHANDLER_CONFIG may come from the .env file loaded above.
    if config is None:
        config = _config_from_environment()

    try:
        config_obj = load_config(config)
    except (FileNotFoundError, ValueError) as exc:
        raise typer.BadParameter(str(exc), param_hint="--config") from exc

    logger = configure_from_settings(
        config_obj.logging,
        level_override=log_level,
        path_override=log_path,
    )
    logger.debug("Configuration loaded from %s", ", ".join(config_obj.loaded_from))

    ctx.obj.update(
        {
            "config": config_obj,
            "logger": logger,
            "registry": AssetRegistry.from_config(config_obj),
        }
    )


def _config_from_environment() -> Optional[pathlib.Path]:
    value = os.environ.get("ASSETHANDLER_CONFIG", "").strip()
    return pathlib.Path(value) if value else None


@app.command()
def containers(ctx: typer.Context) -> None:
    """List the configured containers."""

    registry: AssetRegistry = ctx.obj["registry"]

    table = Table(box=box.SIMPLE_HEAD, show_edge=False)
    table.add_column("Container", style="bold")
    table.add_column("URL")
    table.add_column("Path")
    table.add_column("Pattern")
    table.add_column("Versioned")

    for name in registry.containers:
        container = registry.get_container(name)
        table.add_row(
            name,
            container.base_url,
            container.base_path or "--",
            escape(container.file_regex or "--"),
            "yes" if container.versioned else "no",
        )

    console = Console(soft_wrap=True)
    console.print(table)
    if not registry.containers:
        typer.echo("No containers configured.", err=True)


@app.command()
def render(
    ctx: typer.Context,
    assets: List[str] = typer.Argument(..., metavar="ASSET...", help="Asset paths to register and render."),
    container: Optional[str] = typer.Option(
        None,
        "--container",
        "-c",
        metavar="NAME",
        help="Container to add the assets to (default: detect from file name).",
    ),
    template: str = typer.Option(
        "",
        "--template",
        "-t",
        metavar="TEXT",
        help="Custom template using {{PATH}}, {{URL}}, {{URI}} and {{NAME}}.",
    ),
    base_path: Optional[str] = typer.Option(
        None,
        "--base-path",
        metavar="DIR",
        help="Override the base path of the target container(s).",
    ),
    versioned: Optional[bool] = typer.Option(
        None,
        "--versioned/--no-versioned",
        help="Append file modification times to URLs.",
    ),
) -> None:
    """Register assets and print their markup in the given order."""

    registry: AssetRegistry = ctx.obj["registry"]
    target: ContainerRef = container if container else ANY

    try:
        if base_path is not None:
            registry.set_base_path(base_path, target)
        if versioned is not None:
            registry.set_is_using_versioning(versioned, target)
        for asset in assets:
            registry.add(asset, container=target)
        output = "".join(registry.print(asset, target, template) for asset in assets)
    except AssetHandlerError as exc:
        _fail(exc)

    typer.echo(output, nl=False)
