"""Generate command: produce one or more names from a profile."""

import typer

from ...config import get_config
from ...core.models import ProfileConfig
from ...core.registry import ProfileNotFoundError
from ...runner import generate_names
from ..app import app, console, get_json_mode, get_registry
from ..utils import Output, ExitCode


@app.command("generate")
def generate_command(
    mode: str = typer.Option(
        None, "--mode", "-m", help="Profile to use (see `namegen profiles`)"
    ),
    gender: str = typer.Option(
        None, "--gender", "-g", help="male, female or neutral"
    ),
    realism: int = typer.Option(
        None,
        "--realism",
        help="0-100: higher favours curated names, lower favours synthesis",
    ),
    family: str = typer.Option(
        "", "--family", help="Optional family/culture override within the profile"
    ),
    seed: int = typer.Option(
        0, "--seed", "-s", help="Deterministic seed (0 = random each run)"
    ),
    count: int = typer.Option(None, "--count", "-c", help="Number of names"),
    last: bool = typer.Option(
        None, "--last/--no-last", "-l", help="Include a surname (default from config)"
    ),
    reverse: bool = typer.Option(
        False, "--reverse", "-r", help="Print surname first"
    ),
    dev: bool = typer.Option(
        False, "--dev", "-d", help="Print the resolved request before the names"
    ),
):
    """
    Generate names.

    Unknown profiles fall back to the configured fallback (english by default).

    Example:
        namegen generate -m greek -g female --realism 80 -c 5
        namegen generate -m celtic -l -s 42
        namegen --json generate -m japanese -l -r -c 3
    """
    defaults = get_config().defaults
    out = Output(console=console, json_mode=get_json_mode())

    config = ProfileConfig(
        mode=mode if mode is not None else defaults.profile,
        gender=gender if gender is not None else defaults.gender,
        realism=realism if realism is not None else defaults.realism,
        family=family,
        seed=seed,
        count=count if count is not None else defaults.count,
        include_last=last if last is not None else defaults.include_last,
        reverse=reverse,
        dev_mode=dev,
    )

    try:
        result = generate_names(
            config, get_registry(), fallback=defaults.fallback_profile
        )
    except ProfileNotFoundError as e:
        out.error(
            f"Profile not found: {config.mode!r} (fallback {e.name!r} is not registered)",
            suggestion="Run `namegen profiles` to list available profiles",
            exit_code=ExitCode.PROFILE_NOT_FOUND,
        )
        raise typer.Exit(out.finish())

    # Human mode already sees fallback warnings on stderr through logging
    if out.json_mode:
        for message in result.warnings:
            out.warning(message)

    if config.dev_mode:
        if out.json_mode:
            out.set_data("config", config.model_dump(mode="json"))
        else:
            console.print_json(config.model_dump_json())

    lines = result.lines(reverse=config.reverse)
    out.set_data("profile", result.profile)
    out.set_data(
        "names",
        [
            {"first": n.first, "last": n.last, "display": line}
            for n, line in zip(result.names, lines)
        ],
    )
    for line in lines:
        out.text(line)

    raise typer.Exit(out.finish())
