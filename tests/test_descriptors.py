"""Tests for descriptor models and bound parameters."""

import pytest
from pydantic import ValidationError

from faker_dispatch.descriptors.base import (
    BoundParams,
    Descriptor,
    OutputType,
    Parameter,
    ParameterError,
    ParamType,
)


class TestParameter:
    """Tests for Parameter model."""

    def test_required_without_default(self):
        assert Parameter(field="strs", type=ParamType.STRING_ARRAY).required

    def test_default_is_not_required(self):
        assert not Parameter(field="count", type=ParamType.INT, default="10").required

    def test_optional_is_not_required(self):
        assert not Parameter(field="bins", optional=True).required

    def test_frozen(self):
        param = Parameter(field="count")
        with pytest.raises(ValidationError):
            param.default = "5"

    def test_array_types(self):
        assert ParamType.INT_ARRAY.is_array
        assert not ParamType.INT.is_array


class TestDescriptor:
    """Tests for Descriptor model."""

    @pytest.fixture
    def descriptor(self):
        return Descriptor(
            name="intRange",
            category="numbers",
            output=OutputType.INT,
            params=(
                Parameter(field="min", type=ParamType.INT, default="0"),
                Parameter(field="max", type=ParamType.INT, default="100"),
            ),
            generate=lambda fake, params: 0,
        )

    def test_get_param(self, descriptor):
        assert descriptor.get_param("max").default == "100"
        assert descriptor.get_param("step") is None

    def test_dump_excludes_generate(self, descriptor):
        data = descriptor.model_dump(mode="json")
        assert "generate" not in data
        assert data["output"] == "int"
        assert data["params"][0]["field"] == "min"

    def test_copy_leaves_original(self, descriptor):
        renamed = descriptor.model_copy(update={"name": "range"})
        assert renamed.name == "range"
        assert descriptor.name == "intRange"
        assert renamed.generate is descriptor.generate


class TestBoundParams:
    """Tests for typed accessors on bound parameters."""

    def test_scalars(self):
        params = BoundParams(
            text=["hello"], count=["7"], ratio=["0.25"], flag=["true"], whole=["5.0"]
        )

        assert params.get_string("text") == "hello"
        assert params.get_int("count") == 7
        assert params.get_uint("count") == 7
        assert params.get_float("ratio") == 0.25
        assert params.get_bool("flag") is True
        assert params.get_int("whole") == 5

    def test_add_appends(self):
        params = BoundParams()
        params.add("strs", "a")
        params.add("strs", "b")
        assert params.get_string_array("strs") == ["a", "b"]

    def test_json_list_default_expands(self):
        params = BoundParams(sides=["[6, 8]"], fields=['["name", "email"]'])
        assert params.get_uint_array("sides") == [6, 8]
        assert params.get_string_array("fields") == ["name", "email"]

    def test_bracketed_text_that_is_not_json_stays(self):
        params = BoundParams(strs=["[not json"])
        assert params.get_string_array("strs") == ["[not json"]

    def test_missing_value(self):
        with pytest.raises(ParameterError):
            BoundParams().get_string("text")

    def test_unparsable_int(self):
        with pytest.raises(ParameterError):
            BoundParams(count=["ten"]).get_int("count")

    def test_fractional_int(self):
        with pytest.raises(ParameterError):
            BoundParams(count=["2.5"]).get_int("count")

    def test_negative_uint(self):
        with pytest.raises(ParameterError):
            BoundParams(count=["-1"]).get_uint("count")

    def test_unparsable_bool(self):
        with pytest.raises(ParameterError):
            BoundParams(flag=["maybe"]).get_bool("flag")

    def test_parameter_error_is_value_error(self):
        assert issubclass(ParameterError, ValueError)
