"""Batch driver: resolve a profile, then run one generation per requested name.

A batch shares a single RandomSource built from ``config.seed``, so a fixed
seed replays the whole batch and the names within it still differ.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .core.models import NameResult, ProfileConfig
from .core.registry import NameProfile, ProfileNotFoundError, ProfileRegistry
from .core.rng import new_random

logger = logging.getLogger(__name__)

DEFAULT_PROFILE = "english"


@dataclass
class GenerationResult:
    """Names produced by one request, plus how the profile was resolved."""

    profile: str
    names: list[NameResult] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def lines(self, reverse: bool = False) -> list[str]:
        return format_lines(self.names, reverse=reverse)


def resolve_profile(
    registry: ProfileRegistry, name: str, fallback: str = DEFAULT_PROFILE
) -> tuple[str, NameProfile, list[str]]:
    """Look up ``name``, falling back to ``fallback`` when it is not registered.

    Returns:
        Tuple of (resolved name, profile, warnings).

    Raises:
        ProfileNotFoundError: If neither ``name`` nor ``fallback`` is registered.
    """
    try:
        return name.strip().lower(), registry.get(name), []
    except ProfileNotFoundError as exc:
        message = f"Mode {exc.name!r} not found, falling back to {fallback!r}"
        logger.warning(message)
        profile = registry.get(fallback)
        return fallback.strip().lower(), profile, [message]


def generate_names(
    config: ProfileConfig,
    registry: ProfileRegistry | None = None,
    fallback: str = DEFAULT_PROFILE,
) -> GenerationResult:
    """Generate ``config.count`` names with the profile named by ``config.mode``.

    Raises:
        ProfileNotFoundError: If neither the requested profile nor the fallback
            is registered.
    """
    if registry is None:
        from .names.builtin import build_registry

        registry = build_registry()

    resolved, profile, warnings = resolve_profile(registry, config.mode, fallback)
    rng = new_random(config.seed)
    logger.debug(
        "Generating %d name(s) with %s (seed=%d, realism=%d)",
        config.count,
        resolved,
        config.seed,
        config.realism,
    )
    names = [profile.generate(config, rng) for _ in range(config.count)]
    return GenerationResult(profile=resolved, names=names, warnings=warnings)


def format_lines(names: list[NameResult], reverse: bool = False) -> list[str]:
    return [name.display(reverse=reverse) for name in names]
