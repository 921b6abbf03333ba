"""Configuration management for namegen.

Only generation defaults are configurable; every value can still be
overridden per call with CLI flags.

Config resolution order (highest priority first):
1. Programmatic (NamegenConfig constructed in code, installed with configure())
2. Environment variables (NAMEGEN_PROFILE, NAMEGEN_REALISM, etc.), including a .env file
3. Config file (~/.config/namegen/config.json, managed by `namegen config`)
4. Hardcoded defaults
"""

import json
import logging
import os
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any

from dotenv import find_dotenv, load_dotenv

logger = logging.getLogger(__name__)


# =============================================================================
# Config file location
# =============================================================================

CONFIG_DIR = Path.home() / ".config" / "namegen"
CONFIG_FILE = CONFIG_DIR / "config.json"


# =============================================================================
# Config dataclasses
# =============================================================================


@dataclass
class DefaultsConfig:
    """Defaults applied when a CLI flag is omitted."""

    profile: str = "english"
    fallback_profile: str = "english"  # used when the requested profile is unknown
    gender: str = "neutral"
    realism: int = 50
    count: int = 1
    include_last: bool = False


INT_FIELDS = {"realism", "count"}
BOOL_FIELDS = {"include_last"}

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}


def parse_bool(value: str | bool) -> bool:
    """Parse a config/env boolean.

    Raises:
        ValueError: If the value is not a recognised boolean spelling.
    """
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUTHY:
        return True
    if text in _FALSY:
        return False
    raise ValueError(f"Invalid boolean value: {value!r}")


# =============================================================================
# Main config class
# =============================================================================


@dataclass
class NamegenConfig:
    """Top-level namegen configuration.

    Examples:
        # Package use: no files needed
        config = NamegenConfig(defaults=DefaultsConfig(profile="greek", realism=80))

        # CLI use: loads from ~/.config/namegen/config.json + env vars
        config = NamegenConfig.load()
    """

    defaults: DefaultsConfig = field(default_factory=DefaultsConfig)

    @classmethod
    def load(cls) -> "NamegenConfig":
        """Load config from file + env vars.

        Priority: env var values > config.json values > defaults.
        """
        config = cls()

        # Layer 1: Load from config file if it exists
        if CONFIG_FILE.exists():
            try:
                with open(CONFIG_FILE) as f:
                    data = json.load(f)
                _apply_dict(config, data)
            except (json.JSONDecodeError, OSError, ValueError) as exc:
                logger.warning("Failed to load config from %s: %s", CONFIG_FILE, exc)

        # Layer 2: Env var overrides
        _ensure_dotenv()
        if val := os.environ.get("NAMEGEN_PROFILE"):
            config.defaults.profile = val
        if val := os.environ.get("NAMEGEN_FALLBACK_PROFILE"):
            config.defaults.fallback_profile = val
        if val := os.environ.get("NAMEGEN_GENDER"):
            config.defaults.gender = val
        if val := os.environ.get("NAMEGEN_REALISM"):
            try:
                config.defaults.realism = int(val)
            except ValueError:
                logger.warning("Invalid NAMEGEN_REALISM=%r, ignoring", val)
        if val := os.environ.get("NAMEGEN_COUNT"):
            try:
                config.defaults.count = int(val)
            except ValueError:
                logger.warning("Invalid NAMEGEN_COUNT=%r, ignoring", val)
        if val := os.environ.get("NAMEGEN_INCLUDE_LAST"):
            try:
                config.defaults.include_last = parse_bool(val)
            except ValueError:
                logger.warning("Invalid NAMEGEN_INCLUDE_LAST=%r, ignoring", val)

        return config

    def save(self) -> None:
        """Save config to ~/.config/namegen/config.json."""
        CONFIG_DIR.mkdir(parents=True, exist_ok=True)
        with open(CONFIG_FILE, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    def to_dict(self) -> dict[str, Any]:
        return {"defaults": asdict(self.defaults)}


# =============================================================================
# Config dict application
# =============================================================================


def _apply_dict(config: NamegenConfig, data: dict) -> None:
    """Apply a dict of values onto a NamegenConfig. Unknown keys are ignored."""
    if "defaults" in data and isinstance(data["defaults"], dict):
        for k, v in data["defaults"].items():
            if not hasattr(config.defaults, k):
                continue
            if k in INT_FIELDS:
                v = int(v)
            elif k in BOOL_FIELDS:
                v = parse_bool(v)
            setattr(config.defaults, k, v)


# =============================================================================
# .env loading
# =============================================================================

_dotenv_loaded = False


def _ensure_dotenv() -> None:
    """Load a .env file into os.environ if not already loaded."""
    global _dotenv_loaded
    if not _dotenv_loaded:
        _dotenv_loaded = True
        dotenv_path = find_dotenv(usecwd=True)
        if dotenv_path:
            load_dotenv(dotenv_path=dotenv_path, override=False)


# =============================================================================
# Global config singleton
# =============================================================================

_config: NamegenConfig | None = None


def get_config() -> NamegenConfig:
    """Get the global NamegenConfig instance.

    First call loads from file + env vars. Subsequent calls return cached instance.
    Use configure() to replace the global config programmatically.
    """
    global _config
    if _config is None:
        _config = NamegenConfig.load()
    return _config


def configure(config: NamegenConfig) -> None:
    """Set the global NamegenConfig programmatically."""
    global _config
    _config = config


def reset_config() -> None:
    """Reset the global config singleton (forces reload on next get_config())."""
    global _config
    _config = None
