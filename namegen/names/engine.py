"""Generic name synthesis engine.

One CultureProfile per CultureSpec. For each name part the engine rolls the
culture's realism curve: a hit draws from the curated list, a miss builds a
name from syllables:

1. pick a syllable count from the weighted table for this realism
2. assemble each syllable (onset + vowel + optional coda, with the culture's
   inversions, clusters, real-name fragments and per-syllable endings)
3. maybe append a culture ending, skipping it if the name already ends so
4. maybe apply a gender suffix
5. title-case the result
"""

from __future__ import annotations

import logging
import re

from ..core.models import Gender, NameResult, ProfileConfig
from ..core.rng import RandomSource, chance, new_random, pick, pick_weighted
from .culture import CultureSpec, PartRules, step_value

logger = logging.getLogger(__name__)

_WORD_SPLIT = re.compile(r"([ \-])")


def title_case(value: str) -> str:
    """Upper-case the first letter of each word and lower-case the rest.

    Words are separated by spaces or hyphens (``dela cruz`` -> ``Dela Cruz``,
    ``BarYosef`` -> ``Baryosef``).
    """
    parts = _WORD_SPLIT.split(value)
    return "".join(p[:1].upper() + p[1:].lower() for p in parts)


def append_ending(name: str, ending: str) -> str:
    """Append ``ending`` unless it is empty or the name already ends with it."""
    if not ending or name.endswith(ending):
        return name
    return name + ending


class CultureProfile:
    """NameProfile implementation driven entirely by a CultureSpec."""

    def __init__(self, spec: CultureSpec):
        self.spec = spec
        self._families = {"", spec.name} | {f.strip().lower() for f in spec.families}

    @property
    def name(self) -> str:
        return self.spec.name

    def info(self) -> dict[str, str]:
        return {
            "name": self.spec.name,
            "display_name": self.spec.display_name,
            "notes": self.spec.notes,
            "families": ", ".join(sorted(self._families - {""})),
        }

    def generate(
        self, config: ProfileConfig, rng: RandomSource | None = None
    ) -> NameResult:
        if rng is None:
            rng = new_random(config.seed)
        spec = self.spec
        realism = config.realism
        curated_pct = spec.realism_curve.curated_chance(realism)

        use_curated = chance(curated_pct, rng)
        if use_curated:
            first = self._curated_given(config.gender, rng)
        else:
            first = self._synthesize(spec.given_rules, config.gender, realism, rng)

        middle = spec.middle_names
        if middle and realism < middle.max_realism and chance(middle.chance, rng):
            first = f"{first} {pick(middle.names, rng)}"

        last = ""
        if config.include_last and spec.has_surname:
            self._check_family(config.family)
            if not spec.realism_curve.shared_roll:
                use_curated = chance(curated_pct, rng)
            if use_curated:
                last = self._curated_surname(config.gender, rng)
            else:
                last = self._synthesize(
                    spec.surname_rules, config.gender, realism, rng
                )

        return NameResult(first=title_case(first), last=title_case(last))

    # ── Curated path ──

    def _curated_given(self, gender: Gender, rng: RandomSource) -> str:
        pools = self.spec.given
        if gender != Gender.NEUTRAL:
            return pick(pools.for_gender(gender), rng)

        mix = self.spec.neutral_mix
        if mix is None:
            return pick(pools.neutral, rng)
        roll = rng.intn(100)
        if roll < mix.neutral:
            return pick(pools.neutral, rng)
        if roll < mix.neutral + mix.male:
            return pick(pools.male, rng)
        return pick(pools.female, rng)

    def _curated_surname(self, gender: Gender, rng: RandomSource) -> str:
        patronymic = self.spec.patronymic
        if patronymic and chance(patronymic.chance, rng):
            prefix = pick(patronymic.prefixes, rng)
            if patronymic.source == "given":
                base = pick(self.spec.given.for_gender(gender), rng)
            else:
                base = pick(self.spec.surnames, rng)
            return prefix + title_case(base.replace(" ", ""))
        return pick(self.spec.surnames, rng)

    # ── Procedural path ──

    def _synthesize(
        self, rules: PartRules, gender: Gender, realism: int, rng: RandomSource
    ) -> str:
        count = pick_weighted(rules.syllables.table_for(realism), rng)
        name = "".join(self._syllable(realism, rng) for _ in range(count))

        endings = rules.endings.for_gender(gender)
        if endings and chance(step_value(rules.ending_chance, realism), rng):
            name = append_ending(name, pick(endings, rng))

        for rule in rules.gender_suffixes:
            if rule.gender != gender or realism < rule.min_realism:
                continue
            if not chance(rule.chance, rng):
                continue
            if rule.replaces is not None:
                if name.endswith(rule.replaces):
                    name = name[: len(name) - len(rule.replaces)] + rule.suffix
            elif not any(name.endswith(s) for s in rule.skip_if_ends_with):
                name = append_ending(name, rule.suffix)

        return name

    def _syllable(self, realism: int, rng: RandomSource) -> str:
        ph = self.spec.phonology

        if (
            ph.fragments
            and realism >= ph.fragment_min_realism
            and chance(realism // 2, rng)
        ):
            return pick(ph.fragments, rng)

        if ph.invert_chance and ph.onsets and chance(ph.invert_chance, rng):
            syl = pick(ph.vowels, rng) + pick(ph.onsets, rng)
            if ph.invert_shape == "vcv":
                syl += pick(ph.vowels, rng)
        else:
            onset = pick(ph.onsets, rng) if ph.onsets else ""
            if (
                ph.clusters
                and realism >= ph.cluster_min_realism
                and chance(ph.cluster_chance, rng)
            ):
                onset = pick(ph.clusters, rng)
            syl = onset + pick(ph.vowels, rng)
            if ph.codas and chance(ph.coda_chance, rng):
                syl += pick(ph.codas, rng)

        if ph.syllable_endings and chance(ph.syllable_ending_chance, rng):
            syl += pick(ph.syllable_endings, rng)
        return syl

    def _check_family(self, family: str) -> None:
        if family.lower() not in self._families:
            logger.debug(
                "Unrecognized family override %r for %s; using default rules",
                family,
                self.spec.name,
            )

    def __repr__(self) -> str:
        return f"CultureProfile({self.spec.name!r})"
