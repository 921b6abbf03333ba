"""Profile registry: a name -> generator lookup table.

Writers serialize on a lock and publish a fresh read-only snapshot; readers
grab whatever snapshot is current without locking. A lookup therefore sees
either the table before a registration or the table after it, never a
partially-updated one.
"""

from __future__ import annotations

import logging
import threading
from types import MappingProxyType
from typing import TYPE_CHECKING, Mapping, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .models import NameResult, ProfileConfig
    from .rng import RandomSource

logger = logging.getLogger(__name__)


@runtime_checkable
class NameProfile(Protocol):
    """Contract every name generator implements."""

    def generate(
        self, config: "ProfileConfig", rng: "RandomSource | None" = None
    ) -> "NameResult": ...

    def info(self) -> dict[str, str]: ...


class ProfileNotFoundError(LookupError):
    """Raised when a profile name is not registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"profile not found: {name!r}")


def normalize_name(name: str) -> str:
    return name.strip().lower()


class ProfileRegistry:
    """Thread-safe mapping of normalized profile names to generators.

    Example:
        registry = ProfileRegistry()
        registry.register("English", english_profile)
        registry.get(" english ")  # -> english_profile
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._snapshot: Mapping[str, NameProfile] = MappingProxyType({})

    def register(self, name: str, profile: NameProfile) -> None:
        """Register ``profile`` under ``name``. Last registration wins.

        Raises:
            ValueError: If the normalized name is empty or profile is None.
        """
        if name is None or not normalize_name(name):
            raise ValueError("profile name must be a non-empty string")
        if profile is None:
            raise ValueError(f"profile {name!r} must not be None")

        key = normalize_name(name)
        with self._lock:
            current = dict(self._snapshot)
            if key in current:
                logger.debug("Replacing registered profile %r", key)
            current[key] = profile
            self._snapshot = MappingProxyType(current)
        logger.debug("Registered profile %r", key)

    def get(self, name: str) -> NameProfile:
        """Look up a profile by (normalized) name.

        Raises:
            ProfileNotFoundError: If no profile is registered under ``name``.
        """
        key = normalize_name(name or "")
        try:
            return self._snapshot[key]
        except KeyError:
            raise ProfileNotFoundError(key) from None

    def list(self) -> list[str]:
        """All registered names, sorted ascending."""
        return sorted(self._snapshot)

    def items(self) -> list[tuple[str, NameProfile]]:
        snapshot = self._snapshot
        return [(key, snapshot[key]) for key in sorted(snapshot)]

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and normalize_name(name) in self._snapshot

    def __len__(self) -> int:
        return len(self._snapshot)

    def __repr__(self) -> str:
        return f"ProfileRegistry({len(self)} profiles)"
