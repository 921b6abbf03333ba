"""Shared fixtures: every test gets a private config location and a clean env."""

import pytest

from namegen import config as namegen_config
from namegen.names.culture import CultureSpec

NAMEGEN_ENV_VARS = (
    "NAMEGEN_PROFILE",
    "NAMEGEN_FALLBACK_PROFILE",
    "NAMEGEN_GENDER",
    "NAMEGEN_REALISM",
    "NAMEGEN_COUNT",
    "NAMEGEN_INCLUDE_LAST",
)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    config_dir = tmp_path / "namegen-config"
    monkeypatch.setattr(namegen_config, "CONFIG_DIR", config_dir)
    monkeypatch.setattr(namegen_config, "CONFIG_FILE", config_dir / "config.json")
    monkeypatch.setattr(namegen_config, "_dotenv_loaded", True)
    for var in NAMEGEN_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    namegen_config.reset_config()
    yield config_dir / "config.json"
    namegen_config.reset_config()


def make_culture(**overrides) -> CultureSpec:
    """A tiny, fully predictable culture: every syllable is ``ka``."""
    data = {
        "name": "testland",
        "display_name": "Testland",
        "given": {"male": ["Bob"], "female": ["Ann"], "neutral": ["Sam"]},
        "surnames": ["Stone"],
        "phonology": {"onsets": ["k"], "vowels": ["a"]},
        "given_rules": {"syllables": {"weights": {2: 1}}},
        "surname_rules": {"syllables": {"weights": {3: 1}}},
    }
    data.update(overrides)
    return CultureSpec.model_validate(data)


@pytest.fixture
def culture_factory():
    return make_culture
