"""Tests for the profile registry."""

import threading

import pytest

from namegen.core.models import NameResult
from namegen.core.registry import (
    NameProfile,
    ProfileNotFoundError,
    ProfileRegistry,
)


class StubProfile:
    def __init__(self, label: str):
        self.label = label

    def generate(self, config, rng=None):
        return NameResult(first=self.label)

    def info(self):
        return {"name": self.label}


class TestRegisterAndGet:
    def test_round_trip(self):
        registry = ProfileRegistry()
        profile = StubProfile("a")
        registry.register("alpha", profile)
        assert registry.get("alpha") is profile

    def test_names_are_normalized(self):
        registry = ProfileRegistry()
        profile = StubProfile("a")
        registry.register("  Alpha ", profile)
        assert registry.get("ALPHA") is profile
        assert "alpha" in registry
        assert registry.list() == ["alpha"]

    def test_last_write_wins(self):
        registry = ProfileRegistry()
        registry.register("alpha", StubProfile("first"))
        second = StubProfile("second")
        registry.register("Alpha", second)
        assert registry.get("alpha") is second
        assert len(registry) == 1

    def test_missing_raises_lookup_error(self):
        registry = ProfileRegistry()
        with pytest.raises(ProfileNotFoundError) as exc_info:
            registry.get(" Klingon ")
        assert exc_info.value.name == "klingon"
        assert isinstance(exc_info.value, LookupError)

    @pytest.mark.parametrize("name", ["", "   "])
    def test_empty_name_rejected(self, name):
        with pytest.raises(ValueError):
            ProfileRegistry().register(name, StubProfile("x"))

    def test_none_profile_rejected(self):
        with pytest.raises(ValueError):
            ProfileRegistry().register("alpha", None)

    def test_list_is_sorted(self):
        registry = ProfileRegistry()
        for name in ["zulu", "alpha", "mike"]:
            registry.register(name, StubProfile(name))
        assert registry.list() == ["alpha", "mike", "zulu"]
        assert [name for name, _ in registry.items()] == ["alpha", "mike", "zulu"]

    def test_stub_satisfies_protocol(self):
        assert isinstance(StubProfile("x"), NameProfile)


class TestConcurrency:
    def test_concurrent_register_and_get(self):
        registry = ProfileRegistry()
        registry.register("base", StubProfile("base"))
        errors = []

        def writer(worker: int):
            for i in range(50):
                registry.register(f"w{worker}-{i}", StubProfile(f"{worker}-{i}"))

        def reader():
            try:
                for _ in range(200):
                    assert registry.get("base").label == "base"
                    registry.list()
            except Exception as exc:  # surfaced below
                errors.append(exc)

        threads = [threading.Thread(target=writer, args=(w,)) for w in range(8)]
        threads += [threading.Thread(target=reader) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert errors == []
        assert len(registry) == 8 * 50 + 1
        assert registry.get("w3-49").label == "3-49"
