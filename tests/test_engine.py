"""Tests for the Faker engine."""

import re
from datetime import date

import pytest

from faker_dispatch.engine.faker_engine import FakerEngine
from faker_dispatch.errors import GenerationFailure, MissingParameter, UnknownFunction
from faker_dispatch.registry.ingestion import ZEN
from faker_dispatch.registry.registry import get_registry


# Functions without usable defaults for every parameter.
NEEDS_ARGUMENTS = {"teams", "randomInt", "randomUint", "shuffleInts", "randomString", "shuffleStrings"}

# Functions whose values depend on the wall clock as well as the seed.
CLOCK_DEPENDENT = {"creditCard", "creditCardExp", "creditCardExpYear"}


def _reproducible_names():
    registry = get_registry()
    return sorted(
        name for name, descriptor in registry.by_name.items()
        if name not in NEEDS_ARGUMENTS
        and name not in CLOCK_DEPENDENT
        and descriptor.category != "time"
    )


@pytest.fixture
def engine():
    return FakerEngine(seed=11)


class TestFakerEngine:
    """Tests for FakerEngine."""

    def test_seed_and_locale(self, engine):
        assert engine.seed == 11
        assert engine.locale == "en_US"
        assert repr(engine) == "FakerEngine(seed=11, locale='en_US')"

    def test_none_seed_is_zero(self):
        assert FakerEngine(seed=None).seed == 0

    def test_same_seed_same_sequence(self):
        first = FakerEngine(seed=11)
        second = FakerEngine(seed=11)

        for name in _reproducible_names():
            assert first.call(name) == second.call(name), name

    def test_different_seeds_differ(self):
        assert FakerEngine(seed=1).call("uuid") != FakerEngine(seed=2).call("uuid")

    def test_calls_advance_sequence(self, engine):
        values = {engine.call("uuid") for _ in range(5)}
        assert len(values) == 5

    def test_every_function_runs_with_defaults(self, engine):
        for name in sorted(engine.registry.by_name):
            if name in NEEDS_ARGUMENTS:
                continue
            engine.call(name)

    def test_unknown_function(self, engine):
        with pytest.raises(UnknownFunction) as exc_info:
            engine.call("notAFunction")

        assert exc_info.value.name == "notAFunction"
        assert isinstance(exc_info.value, LookupError)

    def test_missing_parameter_draws_nothing(self):
        failed = FakerEngine(seed=11)
        fresh = FakerEngine(seed=11)

        with pytest.raises(MissingParameter):
            failed.call("teams", [["Ada", "Grace"]])

        assert failed.call("firstName") == fresh.call("firstName")

    def test_generator_failure(self, engine):
        with pytest.raises(GenerationFailure) as exc_info:
            engine.call("intRange", [10, 1])

        assert exc_info.value.function == "intRange"
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_unparsable_argument_is_failure(self, engine):
        with pytest.raises(GenerationFailure):
            engine.call("intRange", ["ten"])

    def test_category(self, engine):
        person = engine.category("person")
        assert person.name == "person"
        assert "firstName" in person.functions

        assert engine.category("misc") is None
        assert ZEN in engine.category_names()


class TestGenerators:
    """Spot checks on individual generators through the engine."""

    def test_int_range(self, engine):
        for _ in range(20):
            assert 3 <= engine.call("intRange", [3, 5]) <= 5

    def test_credit_card_number(self, engine):
        number = engine.call("creditCardNumber", [["visa16"], None, True])
        assert re.fullmatch(r"4\d{3} \d{4} \d{4} \d{4}", number)

    def test_credit_card_number_with_bins(self, engine):
        number = engine.call("creditCardNumber", [None, ["4111"]])
        assert number.startswith("4111")
        assert len(number) == 16

    def test_payment_extras(self, engine):
        assert re.fullmatch(r"\d{4}-\d{4}-\d{4}-\d{4}", engine.call("creditCardNumberFormatted"))

        month = engine.call("creditCardExpMonth")
        assert re.fullmatch(r"\d{2}", month)
        assert 1 <= int(month) <= 12

        current = date.today().year - 2000
        assert current + 1 <= int(engine.call("creditCardExpYear")) <= current + 10

    def test_unknown_card_type(self, engine):
        with pytest.raises(GenerationFailure):
            engine.call("creditCardNumber", [["store-card"]])

    def test_dice(self, engine):
        rolls = engine.call("dice")
        assert len(rolls) == 1
        assert 1 <= rolls[0] <= 6

        rolls = engine.call("dice", [3, [4]])
        assert len(rolls) == 3
        assert all(1 <= r <= 4 for r in rolls)

    def test_teams(self, engine):
        people = ["Ada", "Grace", "Alan", "Edsger"]
        result = engine.call("teams", [people, ["Red", "Blue"]])

        assert set(result) == {"Red", "Blue"}
        assert sorted(result["Red"] + result["Blue"]) == sorted(people)
        assert len(result["Red"]) == 2

    def test_random_string(self, engine):
        assert engine.call("randomString", [["a", "b", "c"]]) in {"a", "b", "c"}

    def test_shuffle_ints(self, engine):
        assert sorted(engine.call("shuffleInts", [[3, 1, 2]])) == [1, 2, 3]

    def test_boolean(self, engine):
        assert isinstance(engine.call("boolean"), bool)

    def test_hex(self, engine):
        assert re.fullmatch(r"0x[0-9a-f]{4}", engine.call("hexUint16"))

    def test_date_format(self, engine):
        assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}Z", engine.call("date"))
        assert re.fullmatch(r"\d{4}-\d{2}-\d{2}", engine.call("date", ["yyyy-MM-dd"]))

    def test_date_range(self, engine):
        value = engine.call("dateRange", ["2020-01-01", "2020-01-31"])
        assert value.startswith("2020-01-")
