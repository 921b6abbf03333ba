"""Culture-driven name generation."""

from .builtin import BUILTIN_CULTURES, build_registry, load_culture
from .culture import CultureSpec
from .engine import CultureProfile, title_case

__all__ = [
    "BUILTIN_CULTURES",
    "CultureProfile",
    "CultureSpec",
    "build_registry",
    "load_culture",
    "title_case",
]
