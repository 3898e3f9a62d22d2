"""Tests for the validation engine."""

import pytest

from faker_dispatch.descriptors.base import Descriptor, Parameter, ParamType
from faker_dispatch.engine.catalog_export import export_catalog
from faker_dispatch.engine.validation_engine import (
    CATALOG_SCHEMA,
    ValidationEngine,
    ValidationResult,
    ValidationSeverity,
)
from faker_dispatch.registry.ingestion import ZEN
from faker_dispatch.registry.registry import Registry, get_registry


def _noop(fake, params):
    return None


@pytest.fixture
def engine():
    return ValidationEngine()


@pytest.fixture
def catalog():
    return export_catalog(get_registry())


class TestValidateDescriptor:
    """Tests for single descriptor checks."""

    def test_valid(self, engine):
        descriptor = get_registry().lookup_by_name("creditCardNumber")
        result = engine.validate_descriptor(descriptor)

        assert result.valid
        assert result.validated_count == 1

    def test_missing_description_warns(self, engine):
        result = engine.validate_descriptor(
            Descriptor(name="city", category="address", generate=_noop)
        )
        assert result.valid
        assert result.warning_count == 1

    def test_missing_category(self, engine):
        result = engine.validate_descriptor(
            Descriptor(name="city", category="", description="City", generate=_noop)
        )
        assert not result.valid
        assert result.issues[0].path == "city.category"

    def test_duplicate_field(self, engine):
        descriptor = Descriptor(
            name="intRange",
            category="numbers",
            description="Range",
            params=(Parameter(field="min", default="0"), Parameter(field="min", default="1")),
            generate=_noop,
        )
        result = engine.validate_descriptor(descriptor)

        assert not result.valid
        assert "Duplicate parameter field" in result.issues[0].message

    def test_default_outside_options(self, engine):
        descriptor = Descriptor(
            name="date",
            category="time",
            description="Date",
            params=(Parameter(field="format", default="Unix", options=("RFC3339", "ANSIC")),),
            generate=_noop,
        )
        result = engine.validate_descriptor(descriptor)

        assert not result.valid
        assert result.issues[0].context["options"] == ["RFC3339", "ANSIC"]

    def test_array_default_not_checked_against_options(self, engine):
        descriptor = Descriptor(
            name="creditCardNumber",
            category="payment",
            description="Card number",
            params=(
                Parameter(field="types", type=ParamType.STRING_ARRAY, default='["visa16"]', options=("visa16",)),
            ),
            generate=_noop,
        )
        assert engine.validate_descriptor(descriptor).valid

    def test_mandatory_after_optional_warns(self, engine):
        descriptor = Descriptor(
            name="teams",
            category="person",
            description="Teams",
            params=(
                Parameter(field="people", type=ParamType.STRING_ARRAY, optional=True),
                Parameter(field="teams", type=ParamType.STRING_ARRAY),
            ),
            generate=_noop,
        )
        result = engine.validate_descriptor(descriptor)

        assert result.valid
        assert result.issues[0].severity == ValidationSeverity.WARNING


class TestValidateRegistry:
    """Tests for registry invariant checks."""

    def test_published_registry(self, engine):
        registry = get_registry()
        result = engine.validate_registry(registry)

        assert result.valid, [i.message for i in result.issues]
        assert result.validated_count == len(registry)
        assert result.metadata["categories"] == len(registry.by_category)

    def test_missing_zen(self, engine):
        descriptor = Descriptor(name="city", category="address", description="City", generate=_noop)
        registry = Registry({"city": descriptor}, {"address": {"city": descriptor}})
        result = engine.validate_registry(registry)

        assert not result.valid
        assert result.issues[0].path == ZEN

    def test_zen_mismatch(self, engine):
        city = Descriptor(name="city", category="address", description="City", generate=_noop)
        state = Descriptor(name="state", category="address", description="State", generate=_noop)
        registry = Registry(
            {"city": city, "state": state},
            {"address": {"city": city, "state": state}, ZEN: {"city": city}},
        )
        result = engine.validate_registry(registry)

        assert not result.valid
        assert result.issues[0].context["missing"] == ["state"]

    def test_category_entry_not_published(self, engine):
        city = Descriptor(name="city", category="address", description="City", generate=_noop)
        copy = city.model_copy()
        registry = Registry({"city": city}, {"address": {"city": copy}, ZEN: {"city": city}})
        result = engine.validate_registry(registry)

        assert not result.valid
        paths = {issue.path for issue in result.issues}
        assert "address.city" in paths
        assert "city" in paths


class TestValidateCatalog:
    """Tests for exported catalog schema checks."""

    def test_published_catalog(self, engine, catalog):
        result = engine.validate_catalog(catalog)
        assert result.valid, [i.message for i in result.issues]
        assert result.validated_count == len(catalog)

    def test_zen_category_rejected(self, engine, catalog):
        catalog["city"] = {**catalog["city"], "category": ZEN}
        result = engine.validate_catalog(catalog)

        assert not result.valid
        assert result.issues[0].path == "city.category"

    def test_bad_key(self, engine, catalog):
        catalog["Bad-Key"] = {**catalog["city"], "name": "Bad-Key"}
        assert not engine.validate_catalog(catalog).valid

    def test_key_name_mismatch(self, engine, catalog):
        catalog["city"] = {**catalog["city"], "name": "town"}
        result = engine.validate_catalog(catalog)

        assert not result.valid
        assert "does not match" in result.issues[0].message

    def test_bad_param_type(self, engine, catalog):
        entry = catalog["intRange"]
        catalog["intRange"] = {**entry, "params": [{**entry["params"][0], "type": "decimal"}]}
        result = engine.validate_catalog(catalog)

        assert not result.valid
        assert result.issues[0].path == "intRange.params.0.type"

    def test_invalid_schema(self, engine, catalog):
        result = engine.validate_catalog(catalog, schema={**CATALOG_SCHEMA, "type": 12})

        assert not result.valid
        assert result.issues[0].path == "schema"


class TestValidationResult:
    """Tests for ValidationResult."""

    def test_merge(self):
        first = ValidationResult(valid=True, validated_count=1)
        second = ValidationResult(valid=True, validated_count=2)
        second.add_issue(ValidationSeverity.ERROR, "broken")

        merged = first.merge(second)
        assert not merged.valid
        assert merged.validated_count == 3
        assert merged.error_count == 1

    def test_to_dict(self):
        result = ValidationResult(valid=True)
        result.add_issue(ValidationSeverity.WARNING, "careful", path="city")

        data = result.to_dict()
        assert data["valid"] is True
        assert data["warning_count"] == 1
        assert data["issues"][0]["path"] == "city"
