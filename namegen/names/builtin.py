"""Built-in cultures and registry construction.

Each entry of BUILTIN_CULTURES has a YAML file in ``data/``. Registration is
explicit: build_registry() walks this list, nothing registers itself on import.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from ..core.registry import ProfileRegistry
from .culture import CultureSpec
from .engine import CultureProfile

_DATA_DIR = Path(__file__).parent / "data"

BUILTIN_CULTURES: tuple[str, ...] = (
    "amharic",
    "arabic",
    "aramaic",
    "baltic",
    "celtic",
    "chinese",
    "english",
    "farsi",
    "filipino",
    "french",
    "germanic",
    "greek",
    "hawaiian",
    "hebrew",
    "hindi",
    "igbo",
    "indonesian",
    "italian",
    "japanese",
    "kazakh",
    "korean",
    "malay",
    "maori",
    "nahuatl",
    "nordic",
    "portuguese",
    "samoan",
    "slavic",
    "spanish",
    "swahili",
    "tamil",
    "thai",
    "turkish",
    "uzbek",
    "vietnamese",
    "yoruba",
)


def culture_path(name: str) -> Path:
    return _DATA_DIR / f"{name}.yaml"


@lru_cache(maxsize=None)
def load_culture(name: str) -> CultureSpec:
    """Load a bundled culture by key (parsed once per process)."""
    return CultureSpec.from_yaml(culture_path(name))


def load_builtin_profiles() -> list[CultureProfile]:
    return [CultureProfile(load_culture(name)) for name in BUILTIN_CULTURES]


def register_builtin_profiles(registry: ProfileRegistry) -> ProfileRegistry:
    """Register every built-in culture on ``registry`` and return it."""
    for profile in load_builtin_profiles():
        registry.register(profile.name, profile)
    return registry


def build_registry() -> ProfileRegistry:
    """A fresh registry holding all built-in profiles."""
    return register_builtin_profiles(ProfileRegistry())
