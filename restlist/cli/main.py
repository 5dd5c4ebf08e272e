"""Main CLI entry point and application setup."""

import logging
from dataclasses import dataclass
from pathlib import Path

import click
from click.exceptions import Exit
from rich.console import Console

from restlist import __version__
from restlist.cli.config import Settings, build_registry, load_settings
from restlist.cli.output import lists_table, list_table, print_error
from restlist.cli.session import ShellSession
from restlist.core.exceptions import RestlistError


@dataclass
class Context:
    """CLI context that holds shared resources."""

    settings: Settings
    console: Console
    debug: bool = False


def setup_logging(
    verbose: bool = False, quiet: bool = False, debug: bool = False
) -> None:
    """Configure logging based on CLI flags."""
    if quiet:
        level = logging.WARNING
    elif verbose or debug:
        level = logging.DEBUG
    else:
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s"
        if not debug
        else "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def create_console(no_color: bool = False, width: int | None = None) -> Console:
    """Create Rich console with appropriate settings."""
    return Console(
        no_color=no_color,
        width=width or 100,
        highlight=not no_color,
        color_system=None if no_color else "auto",
    )


class RestlistGroup(click.Group):
    """Custom group that reports core errors without a traceback."""

    def invoke(self, ctx):
        try:
            return super().invoke(ctx)
        except KeyboardInterrupt:
            console = getattr(ctx.obj, "console", None) if ctx.obj else None
            if console:
                console.print("[yellow]Interrupted[/yellow]")
            ctx.exit(130)
        except (click.ClickException, click.Abort, Exit, SystemExit):
            raise
        except RestlistError as e:
            debug = getattr(ctx.obj, "debug", False) if ctx.obj else False
            if debug:
                raise
            console = getattr(ctx.obj, "console", None) if ctx.obj else None
            if console:
                print_error(console, str(e))
            else:
                click.echo(f"Error: {e}", err=True)
            ctx.exit(1)


@click.group(cls=RestlistGroup)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-error output")
@click.option("--no-color", is_flag=True, help="Disable colored output")
@click.option("--debug", is_flag=True, help="Enable debug mode with full tracebacks")
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file",
)
@click.version_option(
    version=__version__, prog_name="restlist", message="restlist version %(version)s"
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    no_color: bool,
    debug: bool,
    config: Path | None,
) -> None:
    """Organize restaurants into lists.

    Seed lists come from the configuration file; changes made in a session
    are not saved.
    """
    setup_logging(verbose=verbose, quiet=quiet, debug=debug)

    try:
        settings = load_settings(config)
    except RestlistError as e:
        if debug:
            raise
        click.echo(f"Error loading config: {e}", err=True)
        ctx.exit(1)

    console = create_console(
        no_color=no_color or settings.no_color, width=settings.width
    )
    ctx.obj = Context(settings=settings, console=console, debug=debug)


@cli.command()
@click.argument("name", required=False)
@click.pass_context
def show(ctx: click.Context, name: str | None) -> None:
    """Show all lists, or the restaurants of the list called NAME."""
    console = ctx.obj.console
    registry = build_registry(ctx.obj.settings)

    if name is None:
        if not len(registry):
            console.print("[yellow]No lists configured[/yellow]")
            return
        console.print(lists_table(registry))
        for restaurant_list in registry:
            console.print(list_table(restaurant_list))
        return

    index = registry.find(name)
    if index is None:
        print_error(console, f"No list named {name!r}")
        ctx.exit(1)
    console.print(list_table(registry.get(index)))


@cli.command()
@click.pass_context
def shell(ctx: click.Context) -> None:
    """Browse and edit lists interactively."""
    registry = build_registry(ctx.obj.settings)
    ShellSession(registry, ctx.obj.console).run()


def main() -> None:
    """Console script entry point."""
    cli()
