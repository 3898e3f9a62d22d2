"""Tests for catalog export and signatures."""

import json

import pytest

from faker_dispatch.engine.catalog_export import (
    catalog_json,
    export_catalog,
    script_type,
    signature,
)
from faker_dispatch.registry.registry import get_registry


@pytest.fixture
def registry():
    return get_registry()


class TestScriptType:
    """Tests for native to script type mapping."""

    @pytest.mark.parametrize("native,expected", [
        ("string", "string"),
        ("bool", "boolean"),
        ("int", "number"),
        ("uint", "number"),
        ("float", "number"),
        ("[]string", "string[]"),
        ("[]uint", "number[]"),
        ("map[string]any", "Record<string,unknown>"),
        ("map[string][]string", "Record<string, Array<string>>"),
        ("any", "unknown"),
    ])
    def test_mapping(self, native, expected):
        assert script_type(native) == expected

    def test_unmapped(self):
        with pytest.raises(ValueError):
            script_type("complex128")


class TestSignature:
    """Tests for rendered function signatures."""

    @pytest.mark.parametrize("name,expected", [
        ("firstName", "firstName(): string"),
        ("boolean", "boolean(): boolean"),
        ("intRange", "intRange(min: number, max: number): number"),
        ("creditCardNumber", "creditCardNumber(types: string[], bins: string[], gaps: boolean): string"),
        ("dice", "dice(numdice: number, sides: number[]): number[]"),
        ("teams", "teams(people: string[], teams: string[]): Record<string, Array<string>>"),
    ])
    def test_signatures(self, registry, name, expected):
        assert signature(registry.lookup_by_name(name)) == expected

    def test_every_function_has_signature(self, registry):
        for descriptor in registry.by_name.values():
            assert signature(descriptor).startswith(descriptor.name + "(")


class TestExportCatalog:
    """Tests for the exported catalog."""

    def test_keys_sorted(self, registry):
        catalog = export_catalog(registry)
        assert list(catalog) == sorted(registry.by_name)

    def test_entry_shape(self, registry):
        entry = export_catalog(registry)["creditCardNumber"]

        assert entry["category"] == "payment"
        assert entry["output"] == "string"
        assert [p["field"] for p in entry["params"]] == ["types", "bins", "gaps"]
        assert entry["params"][1]["optional"] is True
        assert "generate" not in entry

    def test_json(self, registry):
        data = json.loads(catalog_json(registry, indent=2))
        assert data["creditCardCVV"]["display"] == "Credit Card CVV"
        assert "zen" not in {entry["category"] for entry in data.values()}
