"""Culture tables and YAML I/O.

A CultureSpec is everything the synthesis engine needs to produce names in
one culture's style: curated name pools, a realism curve, the phonotactic
inventory (onsets, vowels, codas) and the syllable/ending rules for given
names and surnames. Specs live as YAML under ``names/data``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from ..core.models import Gender


# Default curated-list curve: realism threshold -> percent chance of a real name
DEFAULT_REALISM_STEPS: dict[int, int] = {
    95: 95,
    90: 90,
    80: 80,
    70: 55,
    60: 35,
    40: 20,
    0: 5,
}


def step_value(table: dict[int, int], realism: int) -> int:
    """Value of the highest threshold <= realism (0 if none apply)."""
    for threshold in sorted(table, reverse=True):
        if realism >= threshold:
            return table[threshold]
    return 0


# =============================================================================
# Realism curve / gender mix
# =============================================================================


class RealismCurve(BaseModel):
    """Maps realism (0..100) to the percent chance of using a curated name."""

    kind: Literal["stepped", "linear"] = "stepped"
    steps: dict[int, int] = Field(default_factory=lambda: dict(DEFAULT_REALISM_STEPS))
    offset: int = 0
    cap: int = 100
    shared_roll: bool = Field(
        default=False,
        description="One curated/procedural decision for both given name and surname",
    )

    def curated_chance(self, realism: int) -> int:
        if self.kind == "linear":
            return min(self.offset + realism, self.cap)
        return step_value(self.steps, realism)


class NeutralMix(BaseModel):
    """Which pool a neutral request draws from (percentages, summing to 100)."""

    neutral: int = 60
    male: int = 20
    female: int = 20

    @model_validator(mode="after")
    def check_total(self):
        if self.neutral + self.male + self.female != 100:
            raise ValueError("neutral_mix percentages must sum to 100")
        return self


class GivenPools(BaseModel):
    male: list[str] = Field(min_length=1)
    female: list[str] = Field(min_length=1)
    neutral: list[str] = Field(min_length=1)

    def for_gender(self, gender: Gender) -> list[str]:
        return getattr(self, gender.value)


# =============================================================================
# Phonology
# =============================================================================


class Phonology(BaseModel):
    """Syllable inventory. Empty strings in a pool act as "nothing" weights."""

    onsets: list[str] = Field(default_factory=list)
    vowels: list[str] = Field(min_length=1)
    codas: list[str] = Field(default_factory=list)
    coda_chance: int = 100
    invert_chance: int = Field(default=0, description="Chance of vowel+onset(+vowel)")
    invert_shape: Literal["vcv", "vc"] = "vcv"
    clusters: list[str] = Field(default_factory=list)
    cluster_chance: int = 0
    cluster_min_realism: int = 0
    fragments: list[str] = Field(default_factory=list)
    fragment_min_realism: int = 101
    syllable_endings: list[str] = Field(default_factory=list)
    syllable_ending_chance: int = 0


# =============================================================================
# Given name / surname rules
# =============================================================================


class SyllableCount(BaseModel):
    """Weighted syllable-count tables, with an alternative below low_below."""

    weights: dict[int, int] = Field(default_factory=lambda: {2: 1, 3: 1})
    low_weights: dict[int, int] | None = None
    low_below: int = 40

    @field_validator("weights", "low_weights")
    @classmethod
    def positive_counts(cls, v):
        if v is None:
            return v
        if not v or any(k < 1 or w < 0 for k, w in v.items()) or sum(v.values()) <= 0:
            raise ValueError("syllable weights need counts >= 1 and a positive total")
        return v

    def table_for(self, realism: int) -> dict[int, int]:
        if self.low_weights is not None and realism < self.low_below:
            return self.low_weights
        return self.weights


class EndingTable(BaseModel):
    """Endings by gender; male/female fall back to the neutral list."""

    neutral: list[str] = Field(default_factory=list)
    male: list[str] | None = None
    female: list[str] | None = None

    def for_gender(self, gender: Gender) -> list[str]:
        if gender == Gender.MALE and self.male:
            return self.male
        if gender == Gender.FEMALE and self.female:
            return self.female
        return self.neutral


class GenderSuffix(BaseModel):
    """Occasional gender marker appended after the ending (never doubled).

    With ``replaces`` set, the rule only fires on names ending in that
    string, which is swapped for ``suffix``.
    """

    gender: Gender
    suffix: str = Field(min_length=1)
    chance: int
    min_realism: int = 0
    replaces: str | None = None
    skip_if_ends_with: list[str] = Field(default_factory=list)


class PartRules(BaseModel):
    """How to synthesize one name part (given name or surname)."""

    syllables: SyllableCount = Field(default_factory=SyllableCount)
    endings: EndingTable = Field(default_factory=EndingTable)
    ending_chance: dict[int, int] = Field(default_factory=lambda: {0: 100})
    gender_suffixes: list[GenderSuffix] = Field(default_factory=list)


class Patronymic(BaseModel):
    """Prefix + base surnames (``MacLeod``, ``BarYosef``) on the curated path."""

    chance: int
    prefixes: list[str] = Field(min_length=1)
    source: Literal["surnames", "given"] = "surnames"


class MiddleNames(BaseModel):
    names: list[str] = Field(min_length=1)
    chance: int
    max_realism: int = 101


# =============================================================================
# Culture
# =============================================================================


class CultureSpec(BaseModel):
    """Complete description of one culture's naming style."""

    name: str
    display_name: str
    notes: str = ""
    families: list[str] = Field(
        default_factory=list, description="Extra family override values accepted"
    )
    realism_curve: RealismCurve = Field(default_factory=RealismCurve)
    neutral_mix: NeutralMix | None = Field(
        default_factory=NeutralMix,
        description="None means neutral requests only use the neutral pool",
    )
    given: GivenPools
    surnames: list[str] = Field(default_factory=list)
    has_surname: bool = True
    phonology: Phonology
    given_rules: PartRules = Field(default_factory=PartRules)
    surname_rules: PartRules = Field(default_factory=PartRules)
    patronymic: Patronymic | None = None
    middle_names: MiddleNames | None = None

    @field_validator("name")
    @classmethod
    def normalize_key(cls, v: str) -> str:
        v = v.strip().lower()
        if not v:
            raise ValueError("culture name must not be empty")
        return v

    @model_validator(mode="after")
    def check_surnames(self):
        if self.has_surname and not self.surnames:
            raise ValueError(f"{self.name}: has_surname requires a surnames list")
        return self

    @classmethod
    def from_yaml(cls, path: Path | str) -> "CultureSpec":
        """Load and validate a culture from a YAML file."""
        path = Path(path)
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return cls.model_validate(data)

    def to_yaml(self, path: Path | str) -> None:
        """Save the culture to a YAML file."""
        path = Path(path)
        data = self.model_dump(mode="json", exclude_defaults=True)
        data = {"name": self.name, "display_name": self.display_name, **data}
        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(
                data,
                f,
                default_flow_style=False,
                sort_keys=False,
                allow_unicode=True,
            )
