"""Tests for raw catalog ingestion."""

import pytest

from faker_dispatch.catalog.base import CatalogSection
from faker_dispatch.errors import CatalogError
from faker_dispatch.registry.ingestion import (
    ADD_PREFIX,
    FUNC_TO_SKIP,
    ZEN,
    fix_lookup,
    ingest,
)


def _constant(value):
    def generate(fake, params):
        return value
    return generate


@pytest.fixture
def raw_catalog():
    """A small raw catalog touching every normalization table."""
    section = CatalogSection("test")
    entries = [
        ("firstname", "First Name", "person"),
        ("creditcardcvv", "Credit Card CVV", "payment"),
        ("errorgrpc", "gRPC Error", "error"),
        ("booktitle", "Title", "book"),
        ("moviegenre", "Genre", "movie"),
        ("bookgenre", "Genre", "book"),
        ("uuid", "UUID", "misc"),
        ("bool", "Boolean", "misc"),
        ("password", "Password", "auth"),
        ("imageurl", "Image URL", "image"),
        ("inputname", "Input Name", "html"),
        ("school", "School", "school"),
        ("digit", "Digit", "string"),
        ("int8", "Int8", "number"),
        ("json", "JSON", "file"),
        ("flipacoin", "Flip A Coin", "misc"),
    ]
    for key, display, category in entries:
        section.func(key, display, category)(_constant(key))
    return dict(section.items())


class TestFixLookup:
    """Tests for single-entry normalization."""

    def test_key_from_display(self, raw_catalog):
        key, descriptor = fix_lookup("firstname", raw_catalog["firstname"])
        assert key == "firstName"
        assert descriptor.name == "firstName"
        assert descriptor.category == "person"

    def test_function_rename(self, raw_catalog):
        assert fix_lookup("creditcardcvv", raw_catalog["creditcardcvv"])[0] == "creditCardCVV"
        assert fix_lookup("errorgrpc", raw_catalog["errorgrpc"])[0] == "gRPCError"

    def test_prefix_added_to_display(self, raw_catalog):
        key, descriptor = fix_lookup("booktitle", raw_catalog["booktitle"])
        assert key == "bookTitle"
        assert descriptor.display == "Book Title"

        assert fix_lookup("moviegenre", raw_catalog["moviegenre"])[0] == "movieGenre"

    def test_category_by_function(self, raw_catalog):
        assert fix_lookup("uuid", raw_catalog["uuid"])[1].category == "strings"
        key, descriptor = fix_lookup("bool", raw_catalog["bool"])
        assert key == "boolean"
        assert descriptor.category == "numbers"

    @pytest.mark.parametrize("native,expected", [
        ("password", "internet"),
        ("imageurl", "internet"),
        ("inputname", "internet"),
        ("school", "person"),
        ("digit", "strings"),
        ("int8", "numbers"),
    ])
    def test_category_rename(self, raw_catalog, native, expected):
        assert fix_lookup(native, raw_catalog[native])[1].category == expected

    def test_raw_descriptor_untouched(self, raw_catalog):
        raw = raw_catalog["booktitle"]
        _, fixed = fix_lookup("booktitle", raw)

        assert raw.name == "booktitle"
        assert raw.display == "Title"
        assert fixed is not raw
        assert fixed.generate is raw.generate


class TestIngest:
    """Tests for whole-catalog ingestion."""

    def test_skipped_entries_dropped(self, raw_catalog):
        by_name, _ = ingest(raw_catalog)
        assert "json" not in by_name
        assert "flipACoin" not in by_name
        assert {"json", "flipacoin"} <= FUNC_TO_SKIP

    def test_zen_is_exact_union(self, raw_catalog):
        by_name, by_category = ingest(raw_catalog)

        zen = by_category[ZEN]
        assert set(zen) == set(by_name)
        for name, descriptor in zen.items():
            assert descriptor is by_name[name]

        others = set()
        for category, funcs in by_category.items():
            if category != ZEN:
                others |= set(funcs)
        assert others == set(by_name)

    def test_category_entries_share_identity(self, raw_catalog):
        by_name, by_category = ingest(raw_catalog)
        for category, funcs in by_category.items():
            for name, descriptor in funcs.items():
                assert by_name[name] is descriptor

    def test_genres_do_not_collide(self, raw_catalog):
        by_name, by_category = ingest(raw_catalog)
        assert "bookGenre" in by_category["book"]
        assert "movieGenre" in by_category["movie"]
        assert "genre" not in by_name

    def test_collision_raises(self):
        section = CatalogSection("dupes")
        section.func("first", "Same Label", "person")(_constant(1))
        section.func("second", "Same Label", "person")(_constant(2))

        with pytest.raises(CatalogError, match="sameLabel"):
            ingest(dict(section.items()))

    def test_collision_without_prefix(self):
        section = CatalogSection("genres")
        section.func("booktype", "Genre", "book")(_constant(1))
        section.func("filmtype", "Genre", "movie")(_constant(2))

        assert "booktype" not in ADD_PREFIX
        with pytest.raises(CatalogError):
            ingest(dict(section.items()))

    def test_reserved_zen_category(self):
        section = CatalogSection("zen")
        section.func("calm", "Calm", "zen")(_constant(1))

        with pytest.raises(CatalogError, match="reserved"):
            ingest(dict(section.items()))
