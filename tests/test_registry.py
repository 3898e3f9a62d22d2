"""Tests for the published registry and its cache."""

import threading

import pytest

from faker_dispatch.catalog.base import CatalogSection
from faker_dispatch.registry import registry as registry_module
from faker_dispatch.registry.ingestion import ZEN
from faker_dispatch.registry.registry import Registry, RegistryCache, get_registry


PUBLIC_CATEGORIES = {
    "address", "animal", "app", "beer", "book", "car", "celebrity", "color",
    "company", "emoji", "error", "file", "finance", "food", "game", "hacker",
    "hipster", "internet", "language", "minecraft", "movie", "numbers",
    "payment", "person", "product", "strings", "time", "word", "zen",
}


@pytest.fixture
def registry():
    return get_registry()


@pytest.fixture
def small_registry():
    section = CatalogSection("small")

    @section.func("firstname", "First Name", "person", description="First name")
    def first_name(fake, params):
        return "Ada"

    @section.func("city", "City", "address", description="City")
    def city(fake, params):
        return "Lisbon"

    return Registry.build(dict(section.items()))


class TestRegistry:
    """Tests for the process-wide registry."""

    def test_categories(self, registry):
        assert set(registry.category_names()) == PUBLIC_CATEGORIES
        assert registry.category_names() == sorted(PUBLIC_CATEGORIES)

    def test_zen_holds_every_function(self, registry):
        zen = registry.lookup_category(ZEN)
        assert set(zen) == set(registry.by_name)
        for name, descriptor in zen.items():
            assert registry.by_name[name] is descriptor

    def test_each_function_in_exactly_one_public_category(self, registry):
        counts = {name: 0 for name in registry.by_name}
        for category, funcs in registry.by_category.items():
            if category == ZEN:
                continue
            for name in funcs:
                counts[name] += 1
        assert set(counts.values()) == {1}

    def test_published_names(self, registry):
        for name in [
            "firstName", "creditCardCVV", "gRPCError", "bookTitle", "movieGenre",
            "uuid", "boolean", "imageUrl", "password", "school", "hexUint128",
            "digitN", "achRoutingNumber", "creditCardNumberFormatted",
        ]:
            assert name in registry, name

    def test_skipped_functions_absent(self, registry):
        for name in ["json", "csv", "map", "generate", "weighted", "flipACoin", "vowel"]:
            assert registry.lookup_by_name(name) is None

    def test_renamed_categories(self, registry):
        assert "creditCardCVV" in registry.lookup_category("payment")
        assert "uuid" in registry.lookup_category("strings")
        assert "boolean" in registry.lookup_category("numbers")
        assert "password" in registry.lookup_category("internet")
        assert "school" in registry.lookup_category("person")

    def test_unknown_lookups(self, registry):
        assert registry.lookup_by_name("nope") is None
        assert registry.lookup_category("misc") is None

    def test_read_only(self, registry):
        with pytest.raises(TypeError):
            registry.by_name["firstName"] = None
        with pytest.raises(TypeError):
            registry.by_category["person"]["firstName"] = None

    def test_same_instance(self):
        assert get_registry() is get_registry()

    def test_module_lookups_delegate(self, registry):
        assert registry_module.lookup_by_name("city") is registry.lookup_by_name("city")
        assert registry_module.lookup_category("person") is registry.lookup_category("person")
        assert registry_module.category_names() == registry.category_names()


class TestBuild:
    """Tests for building registries from raw catalogs."""

    def test_build(self, small_registry):
        assert len(small_registry) == 2
        assert small_registry.category_names() == ["address", "person", ZEN]
        assert small_registry.lookup_by_name("firstName").category == "person"

    def test_repr(self, small_registry):
        assert repr(small_registry) == "Registry(functions=2, categories=3)"

    def test_empty_registry(self):
        empty = Registry.build({})
        assert len(empty) == 0
        assert empty.category_names() == [ZEN]


class TestRegistryCache:
    """Tests for one-time registry construction."""

    def test_builds_lazily(self, small_registry):
        cache = RegistryCache(lambda: small_registry)
        assert not cache.built
        assert cache.get() is small_registry
        assert cache.built

    def test_concurrent_first_use_builds_once(self, small_registry):
        calls = []
        started = threading.Event()

        def builder():
            calls.append(1)
            started.wait(timeout=1)
            return small_registry

        cache = RegistryCache(builder)
        results = []

        def worker():
            results.append(cache.get())

        threads = [threading.Thread(target=worker) for _ in range(16)]
        for thread in threads:
            thread.start()
        started.set()
        for thread in threads:
            thread.join()

        assert len(calls) == 1
        assert len(results) == 16
        assert all(r is small_registry for r in results)
