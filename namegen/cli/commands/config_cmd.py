"""Config command for viewing and managing namegen defaults."""

import typer

from ... import config as namegen_config
from ...config import get_config, reset_config, parse_bool
from ..app import app, console
from ..utils import ExitCode


VALID_KEYS = {
    "defaults.profile",
    "defaults.fallback_profile",
    "defaults.gender",
    "defaults.realism",
    "defaults.count",
    "defaults.include_last",
}


@app.command("config")
def config_command(
    action: str = typer.Argument(
        ...,
        help="Action: show, set, reset",
    ),
    key: str | None = typer.Argument(
        None,
        help="Config key (e.g. defaults.profile, defaults.realism)",
    ),
    value: str | None = typer.Argument(
        None,
        help="Value to set",
    ),
):
    """View or modify namegen configuration.

    Examples:
        namegen config show
        namegen config set defaults.profile greek
        namegen config set defaults.realism 80
        namegen config reset
    """
    if action == "show":
        _show_config()
    elif action == "set":
        if not key or value is None:
            console.print("[red]Usage:[/red] namegen config set <key> <value>")
            console.print()
            _print_valid_keys()
            raise typer.Exit(1)
        _set_config(key, value)
    elif action == "reset":
        _reset_config()
    else:
        console.print(f"[red]Unknown action:[/red] {action}")
        console.print("Valid actions: show, set, reset")
        raise typer.Exit(1)


def _print_valid_keys():
    console.print("Available keys:")
    for k in sorted(VALID_KEYS):
        console.print(f"  {k}")


def _show_config():
    """Display current resolved configuration."""
    config = get_config()
    defaults = config.defaults

    console.print()
    console.print("[bold]namegen Configuration[/bold]")
    console.print("─" * 40)
    console.print()
    console.print("[bold cyan]Defaults[/bold cyan]")
    console.print(f"  profile          = {defaults.profile}")
    console.print(f"  fallback_profile = {defaults.fallback_profile}")
    console.print(f"  gender           = {defaults.gender}")
    console.print(f"  realism          = {defaults.realism}")
    console.print(f"  count            = {defaults.count}")
    console.print(f"  include_last     = {defaults.include_last}")

    console.print()
    config_file = namegen_config.CONFIG_FILE
    if config_file.exists():
        console.print(f"Config file: {config_file}")
    else:
        console.print(f"Config file: [dim]not created yet[/dim] ({config_file})")
    console.print()


def _set_config(key: str, value: str):
    """Set a config value and save."""
    if key not in VALID_KEYS:
        console.print(f"[red]Unknown key:[/red] {key}")
        console.print()
        _print_valid_keys()
        raise typer.Exit(1)

    config = get_config()
    _, field_name = key.split(".", 1)
    target = config.defaults

    # Type coercion
    if field_name in namegen_config.INT_FIELDS:
        try:
            setattr(target, field_name, int(value))
        except ValueError:
            console.print(f"[red]Invalid integer value:[/red] {value}")
            raise typer.Exit(1)
    elif field_name in namegen_config.BOOL_FIELDS:
        try:
            setattr(target, field_name, parse_bool(value))
        except ValueError:
            console.print(f"[red]Invalid boolean value:[/red] {value}")
            raise typer.Exit(1)
    else:
        setattr(target, field_name, value)

    try:
        config.save()
    except OSError as e:
        console.print(f"[red]Failed to write config:[/red] {e}")
        raise typer.Exit(ExitCode.CONFIG_ERROR)
    reset_config()  # Clear cached singleton so next get_config() reloads

    console.print(f"[green]✓[/green] Set {key} = {value}")
    console.print(f"  Saved to {namegen_config.CONFIG_FILE}")


def _reset_config():
    """Reset config to defaults."""
    config_file = namegen_config.CONFIG_FILE
    if config_file.exists():
        try:
            config_file.unlink()
        except OSError as e:
            console.print(f"[red]Failed to remove config:[/red] {e}")
            raise typer.Exit(ExitCode.CONFIG_ERROR)
        reset_config()
        console.print("[green]✓[/green] Config reset to defaults")
        console.print(f"  Removed {config_file}")
    else:
        console.print("Config already at defaults (no config file exists)")
