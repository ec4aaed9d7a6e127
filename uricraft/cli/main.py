"""Main CLI entry point for uricraft."""

import os
import sys
from pathlib import Path
from typing import Any

import click

from ..adapters.io.enhanced_logging import (
    LoggerManager,
    LogMode,
    get_logger,
    setup_enhanced_logging,
)
from ..adapters.io.rich_cli import RichCliComponents, make_console
from ..catalog.registry import EndpointRegistry, create_registry
from ..config.loader import ConfigLoader, ConfigurationError
from ..config.models import UriCraftConfig
from ..domain.models import UriCraftError
from .commands.syntaxes import add_syntax_commands


def detect_log_mode(ui_flag: str | None) -> LogMode:
    """Detect log mode based on flag, environment, and TTY status."""
    # Priority 1: Explicit --ui flag
    if ui_flag:
        return LogMode(ui_flag.lower())

    # Priority 2: Environment variable
    env_ui = os.getenv("URICRAFT_UI", "").lower()
    if env_ui in ("minimal", "classic"):
        return LogMode(env_ui)

    # Priority 3: Auto-detect based on environment
    if os.getenv("CI") == "true" or not sys.stderr.isatty():
        return LogMode.MINIMAL

    return LogMode.CLASSIC


class ClickContext:
    """Context object for Click commands."""

    def __init__(self) -> None:
        self.config: UriCraftConfig | None = None
        self.rich_cli: RichCliComponents | None = None  # Will be initialized in app()
        self.verbose: bool = False
        self.quiet: bool = False
        self._registry: EndpointRegistry | None = None

    def get_registry(self) -> EndpointRegistry:
        if self._registry is None:
            self._registry = create_registry(self.config)
        return self._registry


def _cli_overrides(
    space_encoding: str | None, catalogs: tuple[Path, ...], no_builtin: bool
) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    if space_encoding:
        overrides["query"] = {"space_encoding": space_encoding}
    catalog: dict[str, Any] = {}
    if catalogs:
        catalog["extra_files"] = [str(p) for p in catalogs]
    if no_builtin:
        catalog["include_builtin"] = False
    if catalog:
        overrides["catalog"] = catalog
    return overrides


def _parse_params(params: tuple[str, ...]) -> dict[str, str]:
    """Parse repeated ``key=value`` options; later keys win."""
    parsed: dict[str, str] = {}
    for item in params:
        key, sep, value = item.partition("=")
        if not sep or not key.strip():
            raise click.BadParameter(
                f"expected KEY=VALUE, got {item!r}", param_hint="'--param'"
            )
        parsed[key.strip()] = value
    return parsed


@click.group()
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    help="Path to configuration file",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option(
    "--quiet",
    "-q",
    is_flag=True,
    help="Reduce output: set log level to WARNING and hide INFO",
)
@click.option(
    "--ui",
    type=click.Choice(["minimal", "classic"], case_sensitive=False),
    help="Log style: 'minimal' for CI/non-TTY, 'classic' for interactive (auto-detected by default)",
)
@click.option(
    "--catalog",
    "catalogs",
    multiple=True,
    type=click.Path(path_type=Path),
    help="Additional endpoint catalog TOML file (repeatable)",
)
@click.option(
    "--no-builtin",
    is_flag=True,
    help="Do not load the built-in endpoint catalog",
)
@click.option(
    "--space-encoding",
    type=click.Choice(["percent", "plus"], case_sensitive=False),
    help="Encode spaces in query values as '%20' or '+'",
)
@click.pass_context
def app(
    ctx: click.Context,
    config: Path | None,
    verbose: bool,
    quiet: bool,
    ui: str | None,
    catalogs: tuple[Path, ...],
    no_builtin: bool,
    space_encoding: str | None,
) -> None:
    """uricraft - build canonical endpoint uris from syntax templates."""
    ctx.ensure_object(ClickContext)
    ctx.obj.verbose = verbose
    ctx.obj.quiet = quiet

    error_console = make_console(stderr=True)
    logger = setup_enhanced_logging(error_console)
    LoggerManager.set_log_mode(detect_log_mode(ui), verbose=verbose, quiet=quiet)
    ctx.obj.rich_cli = RichCliComponents(make_console(), error_console)

    if verbose and not quiet:
        logger.debug("Debug mode enabled - verbose logging active")

    try:
        loader = ConfigLoader(config)
        ctx.obj.config = loader.load_config(
            cli_overrides=_cli_overrides(
                space_encoding.lower() if space_encoding else None,
                catalogs,
                no_builtin,
            )
        )
    except ConfigurationError as e:
        ctx.obj.rich_cli.print_error(f"Configuration error: {e}", "Configuration Failed")
        logger.debug(f"Configuration initialization failed: {e}")
        sys.exit(1)


@app.command()
@click.argument("scheme")
@click.option(
    "--param",
    "-p",
    "params",
    multiple=True,
    metavar="KEY=VALUE",
    help="Endpoint parameter (repeatable); path placeholders are filled first",
)
@click.pass_context
def build(ctx: click.Context, scheme: str, params: tuple[str, ...]) -> None:
    """Build the endpoint uri for SCHEME from the given parameters."""
    parameters = _parse_params(params)
    log = get_logger("uricraft.cli.build")

    try:
        with log.operation_context("build_uri", scheme=scheme):
            uri = ctx.obj.get_registry().build_uri(scheme, parameters)
    except (UriCraftError, FileNotFoundError, ValueError) as e:
        ctx.obj.rich_cli.print_error(str(e), "Build Failed")
        sys.exit(1)

    click.echo(uri)


add_syntax_commands(app)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
