"""Core CLI app definition and global state."""

import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from ..core.registry import ProfileRegistry

app = typer.Typer(
    name="namegen",
    help="Generate culture-aware personal names.",
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)

# Global state for JSON mode (set by callback)
_json_mode = False
_registry: ProfileRegistry | None = None


def get_json_mode() -> bool:
    """Get current JSON mode state."""
    return _json_mode


def get_registry() -> ProfileRegistry:
    """Registry of built-in profiles, built on first use."""
    global _registry
    if _registry is None:
        from ..names.builtin import build_registry

        _registry = build_registry()
    return _registry


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """Route log records to stderr through rich."""
    level = logging.WARNING
    if verbose:
        level = logging.INFO
    if debug:
        level = logging.DEBUG

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )
    logging.getLogger("namegen").setLevel(level)


def _version_callback(value: bool) -> None:
    if value:
        from .. import __version__

        print(f"namegen {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    json_output: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Output machine-readable JSON instead of human-friendly text",
            is_eager=True,
        ),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            help="Show version and exit",
            callback=_version_callback,
            is_eager=True,
        ),
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log progress to stderr")
    ] = False,
    debug: Annotated[
        bool, typer.Option("--debug", help="Log debug detail to stderr")
    ] = False,
):
    """namegen: culture-aware personal name generator.

    Use --json for machine-readable output suitable for scripting.
    """
    global _json_mode
    _json_mode = json_output
    setup_logging(verbose=verbose, debug=debug)


# Import commands to register them with the app
from .commands import (  # noqa: E402, F401
    generate,
    profiles,
    config_cmd,
)
