"""Tests for positional parameter binding."""

import pytest

from faker_dispatch.descriptors.base import Descriptor, Parameter, ParamType
from faker_dispatch.engine.binder import bind_params
from faker_dispatch.errors import MissingParameter


def _noop(fake, params):
    return None


@pytest.fixture
def card_number():
    """Descriptor shaped like creditCardNumber."""
    return Descriptor(
        name="creditCardNumber",
        category="payment",
        params=(
            Parameter(field="types", type=ParamType.STRING_ARRAY, default="all"),
            Parameter(field="bins", type=ParamType.STRING_ARRAY, optional=True),
            Parameter(field="gaps", type=ParamType.BOOL, default="false"),
        ),
        generate=_noop,
    )


@pytest.fixture
def teams():
    return Descriptor(
        name="teams",
        category="person",
        params=(
            Parameter(field="people", type=ParamType.STRING_ARRAY),
            Parameter(field="teams", type=ParamType.STRING_ARRAY),
        ),
        generate=_noop,
    )


class TestBindParams:
    """Tests for bind_params."""

    def test_no_params(self):
        descriptor = Descriptor(name="city", category="address", generate=_noop)
        assert bind_params(descriptor, ["ignored"]) is None

    def test_defaults_fill_omitted(self, card_number):
        bound = bind_params(card_number)
        assert bound == {"types": ["all"], "gaps": ["false"]}
        assert "bins" not in bound

    def test_values_render_as_text(self, card_number):
        bound = bind_params(card_number, [["visa16", "amex"], None, True])
        assert bound["types"] == ["visa16", "amex"]
        assert bound["gaps"] == ["true"]
        assert bound.get_bool("gaps") is True

    def test_none_means_omitted(self, card_number):
        bound = bind_params(card_number, [None, None, None])
        assert bound == {"types": ["all"], "gaps": ["false"]}

    def test_tuple_binds_as_array(self, card_number):
        bound = bind_params(card_number, [(), ("4111",)])
        assert bound["types"] == []
        assert bound["bins"] == ["4111"]

    def test_scalar_for_array_binds_one_element(self, card_number):
        bound = bind_params(card_number, ["visa16"])
        assert bound.get_string_array("types") == ["visa16"]

    def test_numbers_render_without_fraction(self):
        descriptor = Descriptor(
            name="intRange",
            category="numbers",
            params=(
                Parameter(field="min", type=ParamType.INT, default="0"),
                Parameter(field="max", type=ParamType.INT, default="100"),
            ),
            generate=_noop,
        )
        bound = bind_params(descriptor, [5.0, [1, 2.0]])
        assert bound["min"] == ["5"]
        assert bound["max"] == ["1", "2"]

    def test_extra_args_ignored(self, card_number):
        bound = bind_params(card_number, ["visa16", None, False, "extra", 42])
        assert set(bound) == {"types", "gaps"}

    def test_missing_mandatory(self, teams):
        with pytest.raises(MissingParameter) as exc_info:
            bind_params(teams, [["Ada", "Grace"]])

        assert exc_info.value.function == "teams"
        assert exc_info.value.parameter == "teams"
        assert "missing parameter: teams" in str(exc_info.value)

    def test_missing_first_mandatory(self, teams):
        with pytest.raises(MissingParameter) as exc_info:
            bind_params(teams)
        assert exc_info.value.parameter == "people"
