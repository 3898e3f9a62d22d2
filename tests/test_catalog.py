"""Tests for the raw generator catalog."""

import pytest
from faker import Faker

from faker_dispatch.catalog import SECTIONS, load_raw_catalog
from faker_dispatch.catalog.base import CatalogSection, param, pick
from faker_dispatch.descriptors.base import OutputType, ParamType
from faker_dispatch.errors import CatalogError
from faker_dispatch.registry.ingestion import FUNC_TO_SKIP


@pytest.fixture
def raw_catalog():
    return load_raw_catalog()


class TestCatalogSection:
    """Tests for CatalogSection registration."""

    def test_func_registers_descriptor(self):
        section = CatalogSection("sample")

        @section.func(
            "numdice", "Number of Dice", "game",
            description="How many dice",
            output=OutputType.INT,
            params=[param("sides", "Sides", ParamType.UINT, default="6")],
        )
        def numdice(fake, params):
            return 1

        assert "numdice" in section
        assert len(section) == 1

        key, descriptor = next(section.items())
        assert key == "numdice"
        assert descriptor.generate is numdice
        assert descriptor.params[0].default == "6"
        assert descriptor.output == OutputType.INT

    def test_duplicate_key(self):
        section = CatalogSection("sample")
        section.func("city", "City", "address")(lambda fake, params: "x")

        with pytest.raises(ValueError, match="already registered"):
            section.func("city", "Town", "address")(lambda fake, params: "y")

    def test_pick_uses_generator_random(self):
        first = Faker()
        second = Faker()
        first.seed_instance(5)
        second.seed_instance(5)

        values = list(range(100))
        assert [pick(first, values) for _ in range(5)] == [pick(second, values) for _ in range(5)]


class TestLoadRawCatalog:
    """Tests for merging catalog sections."""

    def test_native_keys_are_lower_case(self, raw_catalog):
        for key in raw_catalog:
            assert key == key.lower(), key

    def test_contains_skipped_entries(self, raw_catalog):
        present = FUNC_TO_SKIP & set(raw_catalog)
        assert {"json", "csv", "flipacoin", "vowel", "generate", "weighted", "map"} <= present

    def test_fresh_copy(self, raw_catalog):
        raw_catalog.pop("city")
        assert "city" in load_raw_catalog()

    def test_section_count(self, raw_catalog):
        assert len(raw_catalog) == sum(len(section) for section in SECTIONS)

    def test_duplicate_across_sections(self):
        first = CatalogSection("first")
        second = CatalogSection("second")
        first.func("city", "City", "address")(lambda fake, params: "x")
        second.func("city", "City", "address")(lambda fake, params: "y")

        with pytest.raises(CatalogError, match="city"):
            load_raw_catalog([first, second])

    def test_descriptors_are_documented(self, raw_catalog):
        for key, descriptor in raw_catalog.items():
            assert descriptor.display, key
            assert descriptor.description, key
