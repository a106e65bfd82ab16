from __future__ import annotations

import json
import os
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer
import yaml

from appdir.logging import create_logger, setup_cli_logging
from appdir.models import AppDir, XdgDir
from appdir.resolver import get_resolver
from appdir.settings import get_settings

logger = create_logger("cli")


class DirKind(str, Enum):
    ALL = "all"
    DATA = "data"
    CONFIG = "config"
    CACHE = "cache"
    USER_DATA = "user-data"
    TEMP = "temp"


class OutputFormat(str, Enum):
    TEXT = "text"
    YAML = "yaml"
    JSON = "json"


KindOption = Annotated[
    DirKind,
    typer.Option("--kind", "-k", case_sensitive=False, help="Directory to resolve."),
]
FormatOption = Annotated[
    OutputFormat,
    typer.Option("--format", "-f", case_sensitive=False, help="Output format (text, yaml or json)."),
]

app = typer.Typer(
    help="Show standard per-application directories.",
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback(invoke_without_command=True)
def _root_callback(
    ctx: typer.Context,
    no_color: Annotated[bool, typer.Option("--no-color", help="Disable colored output")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log resolution details to stderr")] = False,
) -> None:
    # Respect NO_COLOR environment variable and --no-color flag
    if no_color or os.getenv("NO_COLOR"):
        ctx.color = False

    settings = get_settings()
    setup_cli_logging(app_info=settings.app, level="TRACE" if verbose else settings.log_level)

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("show")
def show(
    name: Annotated[str, typer.Argument(help="Application name")],
    kind: KindOption = DirKind.ALL,
    format: FormatOption = OutputFormat.TEXT,
) -> None:
    """Print resolved directories for an application.

    Examples:

        appdir show foo-bar-app

        appdir show foo-bar-app --kind config --format json
    """
    app_dir = AppDir(name)
    resolved = _resolve(app_dir, kind)
    logger.debug("Resolved directories", app=name, kind=kind.value, count=len(resolved))

    if kind is not DirKind.ALL and resolved[kind.value] is None:
        typer.secho(f"No {kind.value} directory available for '{app_dir}'", err=True, fg=typer.colors.RED)
        raise typer.Exit(code=1)

    typer.echo(_format_payload(resolved, format))


@app.command("platform")
def platform() -> None:
    """Print the active platform strategy."""
    typer.echo(get_resolver().strategy.name)


def _resolve(app_dir: AppDir, kind: DirKind) -> dict[str, Path | None]:
    resolver = get_resolver()
    lookups = {
        DirKind.DATA: lambda: resolver.xdg_dir(app_dir, XdgDir.DATA),
        DirKind.CONFIG: lambda: resolver.xdg_dir(app_dir, XdgDir.CONFIG),
        DirKind.CACHE: lambda: resolver.xdg_dir(app_dir, XdgDir.CACHE),
        DirKind.USER_DATA: lambda: resolver.user_data_dir(app_dir),
        DirKind.TEMP: lambda: resolver.temp_dir(app_dir),
    }
    if kind is DirKind.ALL:
        return {k.value: lookup() for k, lookup in lookups.items()}
    return {kind.value: lookups[kind]()}


def _format_payload(resolved: dict[str, Path | None], format: OutputFormat) -> str:
    payload = {key: str(path) if path is not None else None for key, path in resolved.items()}
    if format is OutputFormat.JSON:
        return json.dumps(payload, indent=2)
    if format is OutputFormat.YAML:
        return yaml.safe_dump(payload, sort_keys=False).rstrip("\n")
    if len(payload) == 1:
        return next(iter(payload.values())) or "-"
    width = max(len(key) for key in payload)
    return "\n".join(f"{key:<{width}}  {value or '-'}" for key, value in payload.items())


def main() -> None:
    """Entrypoint for the appdir CLI."""
    app()
