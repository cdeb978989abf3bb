# tests/core/sources/test_sources_registry.py
from __future__ import annotations

import pytest

from conftest import FakeClientSource
from fxa.content.core.errors import SourceNotFoundError
from fxa.content.core.sources.registry import SourcesRegistry


class TestSourcesRegistry:
    def test_register_and_resolve(self):
        registry = SourcesRegistry()
        source = FakeClientSource()

        registry.register("fake", source)

        assert registry.resolve("fake") is source
        assert registry["fake"] is source

    def test_register_duplicate_raises(self):
        registry = SourcesRegistry()
        registry.register("fake", FakeClientSource())

        with pytest.raises(ValueError, match="already registered"):
            registry.register("fake", FakeClientSource())

    def test_register_non_source_raises(self):
        registry = SourcesRegistry()

        with pytest.raises(TypeError, match="fetch_devices"):
            registry.register("bad", object())

        assert "bad" not in registry

    def test_resolve_unknown_lists_known_names(self):
        registry = SourcesRegistry()
        registry.register("account_api", FakeClientSource())

        with pytest.raises(SourceNotFoundError, match=r"Known sources: \['account_api'\]"):
            registry.resolve("nonexistent")

    def test_mapping_lookup_of_unknown_name(self):
        registry = SourcesRegistry()

        assert registry.get("nonexistent") is None
        assert "nonexistent" not in registry

    def test_iteration_keeps_registration_order(self):
        registry = SourcesRegistry()
        b, a = FakeClientSource(), FakeClientSource()
        registry.register("b", b)
        registry.register("a", a)

        assert list(registry) == ["b", "a"]
        assert dict(registry) == {"b": b, "a": a}
        assert len(registry) == 2
