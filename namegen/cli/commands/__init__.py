"""CLI commands for namegen."""

from . import generate, profiles, config_cmd

__all__ = ["generate", "profiles", "config_cmd"]
