"""Core primitives: request/result models, RNG helpers and the profile registry."""

from .models import Gender, NameResult, ProfileConfig
from .registry import NameProfile, ProfileNotFoundError, ProfileRegistry
from .rng import RandomSource, chance, new_random, pick, pick_weighted

__all__ = [
    "Gender",
    "NameResult",
    "ProfileConfig",
    "NameProfile",
    "ProfileNotFoundError",
    "ProfileRegistry",
    "RandomSource",
    "chance",
    "new_random",
    "pick",
    "pick_weighted",
]
