"""Profile discovery commands: list registered profiles and show one."""

import typer

from ...core.registry import ProfileNotFoundError
from ..app import app, console, get_json_mode, get_registry
from ..utils import Output, ExitCode


@app.command("profiles")
def profiles_command():
    """
    List available profiles.

    Example:
        namegen profiles
        namegen --json profiles
    """
    out = Output(console=console, json_mode=get_json_mode())
    rows = []
    for name, profile in get_registry().items():
        info = profile.info()
        rows.append([name, info.get("display_name", ""), info.get("families", "")])

    out.table("Profiles", ["Name", "Display name", "Families"], rows)
    raise typer.Exit(out.finish())


@app.command("info")
def info_command(
    profile: str = typer.Argument(..., help="Profile name, e.g. greek"),
):
    """
    Show metadata for one profile.

    Example:
        namegen info celtic
    """
    out = Output(console=console, json_mode=get_json_mode())
    try:
        info = get_registry().get(profile).info()
    except ProfileNotFoundError as e:
        out.error(
            f"Profile not found: {e.name!r}",
            suggestion="Run `namegen profiles` to list available profiles",
            exit_code=ExitCode.PROFILE_NOT_FOUND,
        )
        raise typer.Exit(out.finish())

    out.set_data("profile", info)
    if not out.json_mode:
        console.print(f"[bold]{info.get('display_name') or info['name']}[/bold]")
        for key in ("name", "families", "notes"):
            if info.get(key):
                console.print(f"  {key:<9}= {info[key]}", markup=False)
    raise typer.Exit(out.finish())
