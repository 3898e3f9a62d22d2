"""Tests for the script-facing dynamic objects and attribute proxies."""

import pytest

from faker_dispatch.dynamic.base import UNDEFINED
from faker_dispatch.dynamic.objects import CategoryObject, FakerObject
from faker_dispatch.dynamic.proxy import CategoryProxy, Faker
from faker_dispatch.engine.faker_engine import FakerEngine
from faker_dispatch.errors import InvalidInvocation, UnknownFunction
from faker_dispatch.registry.ingestion import ZEN


@pytest.fixture
def faker_object():
    return FakerObject(FakerEngine(seed=11))


@pytest.fixture
def faker():
    return Faker(seed=11)


class TestFakerObject:
    """Tests for the top-level dynamic object."""

    def test_get_call(self, faker_object):
        assert faker_object.get("call") == faker_object.call

    def test_get_category(self, faker_object):
        person = faker_object.get("person")
        assert isinstance(person, CategoryObject)
        assert person.engine is faker_object.engine

    def test_get_unknown(self, faker_object):
        assert faker_object.get("misc") is UNDEFINED
        assert not UNDEFINED

    def test_has_is_always_false(self, faker_object):
        assert not faker_object.has("person")
        assert not faker_object.has("call")

    def test_keys_are_category_names(self, faker_object):
        keys = faker_object.keys()
        assert "person" in keys
        assert ZEN in keys

    def test_writes_refused(self, faker_object):
        assert faker_object.set("person", 1) is False
        assert faker_object.delete("person") is False
        assert isinstance(faker_object.get("person"), CategoryObject)

    def test_call_requires_name(self, faker_object):
        with pytest.raises(InvalidInvocation):
            faker_object.call()
        with pytest.raises(InvalidInvocation):
            faker_object.call(42)

    def test_call_unknown(self, faker_object):
        with pytest.raises(UnknownFunction):
            faker_object.call("nope")


class TestCategoryObject:
    """Tests for per-category dynamic objects."""

    def test_get_function(self, faker_object):
        person = faker_object.get("person")
        first_name = person.get("firstName")

        assert callable(first_name)
        assert first_name.__name__ == "firstName"
        assert isinstance(first_name(), str)

    def test_function_outside_category(self, faker_object):
        assert faker_object.get("person").get("city") is UNDEFINED
        assert faker_object.get(ZEN).get("city") is not UNDEFINED

    def test_has_and_keys(self, faker_object):
        person = faker_object.get("person")
        assert not person.has("firstName")
        assert person.keys() == []

    def test_repr(self, faker_object):
        assert repr(faker_object.get("person")).startswith("CategoryObject('person'")


class TestFakerProxy:
    """Tests for attribute access on Faker."""

    def test_category_attribute(self, faker):
        assert isinstance(faker.person, CategoryProxy)
        assert isinstance(faker.person.firstName(), str)
        assert isinstance(faker.zen.city(), str)

    def test_call(self, faker):
        number = faker.call("creditCardNumber", ["visa16"], None, True)
        assert number.startswith("4")
        assert len(number.replace(" ", "")) == 16

    def test_call_without_name(self, faker):
        with pytest.raises(InvalidInvocation):
            faker.call()
        with pytest.raises(TypeError):
            faker.call(None)

    def test_unknown_attributes(self, faker):
        with pytest.raises(AttributeError):
            faker.misc
        with pytest.raises(AttributeError):
            faker.person.city
        assert not hasattr(faker, "_private")

    def test_read_only(self, faker):
        with pytest.raises(AttributeError):
            faker.person = None
        with pytest.raises(AttributeError):
            del faker.person
        with pytest.raises(AttributeError):
            faker.person.firstName = None

    def test_contains_and_dir(self, faker):
        assert "person" not in faker
        assert "person" in dir(faker)
        assert dir(faker.person) == []

    def test_shared_sequence(self):
        by_category = Faker(seed=11)
        by_call = Faker(seed=11)
        by_zen = Faker(seed=11)

        first = [by_category.person.firstName(), by_category.address.city()]
        second = [by_call.call("firstName"), by_call.call("city")]
        third = [by_zen.zen.firstName(), by_zen.zen.city()]

        assert first == second == third

    def test_engine_and_repr(self, faker):
        assert faker.engine.seed == 11
        assert repr(faker) == "Faker(seed=11)"
        assert repr(faker.person) == "CategoryProxy('person')"
