"""namegen: culture-aware personal name generation.

Profiles blend curated name lists with procedural syllable synthesis,
controlled by a realism dial. Everything is deterministic for a non-zero seed.
"""

__version__ = "0.4.0"

from .core.models import NameResult, ProfileConfig
from .core.registry import ProfileNotFoundError, ProfileRegistry
from .names.builtin import build_registry
from .runner import generate_names

__all__ = [
    "__version__",
    "NameResult",
    "ProfileConfig",
    "ProfileNotFoundError",
    "ProfileRegistry",
    "build_registry",
    "generate_names",
]
