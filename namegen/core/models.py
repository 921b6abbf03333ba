"""Request and result models shared by every name profile.

A ProfileConfig describes one generation request; a NameResult is what a
profile hands back. Both are immutable so a single config can be reused
across a whole batch without any profile mutating it.
"""

from enum import Enum

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# Gender
# =============================================================================


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"
    NEUTRAL = "neutral"


# Accepted spellings for each gender; anything else resolves to neutral
_GENDER_ALIASES: dict[str, Gender] = {
    "male": Gender.MALE,
    "m": Gender.MALE,
    "man": Gender.MALE,
    "boy": Gender.MALE,
    "female": Gender.FEMALE,
    "f": Gender.FEMALE,
    "woman": Gender.FEMALE,
    "girl": Gender.FEMALE,
    "neutral": Gender.NEUTRAL,
    "n": Gender.NEUTRAL,
    "nonbinary": Gender.NEUTRAL,
    "non-binary": Gender.NEUTRAL,
    "any": Gender.NEUTRAL,
}


def normalize_gender(value: str | Gender | None) -> Gender:
    """Map loose gender strings onto a Gender, defaulting to neutral."""
    if isinstance(value, Gender):
        return value
    if value is None:
        return Gender.NEUTRAL
    return _GENDER_ALIASES.get(str(value).strip().lower(), Gender.NEUTRAL)


# =============================================================================
# Request / result
# =============================================================================


class ProfileConfig(BaseModel, frozen=True):
    """Immutable description of a name generation request."""

    mode: str = Field(default="english", description="Requested profile name")
    count: int = Field(default=1, description="Names to produce (<=0 means 1)")
    seed: int = Field(default=0, description="0 = time-seeded, otherwise deterministic")
    realism: int = Field(
        default=50, description="0 favours synthesis, 100 favours curated names"
    )
    gender: Gender = Gender.NEUTRAL
    family: str = Field(default="", description="Optional family/culture override")
    include_last: bool = False
    reverse: bool = False
    dev_mode: bool = False

    @field_validator("count", mode="before")
    @classmethod
    def coerce_count(cls, v):
        v = int(v)
        return v if v > 0 else 1

    @field_validator("realism", mode="before")
    @classmethod
    def clamp_realism(cls, v):
        return max(0, min(100, int(v)))

    @field_validator("gender", mode="before")
    @classmethod
    def coerce_gender(cls, v):
        return normalize_gender(v)

    @field_validator("family", "mode", mode="before")
    @classmethod
    def strip_text(cls, v):
        return "" if v is None else str(v).strip()


class NameResult(BaseModel, frozen=True):
    """A generated name. ``last`` is empty when no surname was produced."""

    first: str
    last: str = ""

    def display(self, reverse: bool = False) -> str:
        """Render as ``First``, ``First Last`` or ``Last First``."""
        if not self.last:
            return self.first
        if reverse:
            return f"{self.last} {self.first}"
        return f"{self.first} {self.last}"
