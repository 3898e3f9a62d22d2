"""Python attribute protocol over the dynamic objects.

    faker = Faker(seed=11)
    faker.person.firstName()
    faker.call("creditCardNumber", ["visa16"], None, True)
    faker.zen.city()

Attribute reads resolve through ``get``; an undefined property becomes an
AttributeError. Attributes cannot be assigned or deleted.
"""

from typing import Any

from faker_dispatch.dynamic.base import UNDEFINED, DynamicObject
from faker_dispatch.dynamic.objects import CategoryObject, FakerObject
from faker_dispatch.engine.faker_engine import FakerEngine
from faker_dispatch.registry.registry import Registry


class _Proxy:
    __slots__ = ("_target",)

    def __init__(self, target: DynamicObject):
        object.__setattr__(self, "_target", target)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        value = self._target.get(name)
        if value is UNDEFINED:
            raise AttributeError(f"{type(self).__name__} has no attribute {name!r}")
        if isinstance(value, CategoryObject):
            return CategoryProxy(value)
        return value

    def __setattr__(self, name: str, value: Any) -> None:
        if not self._target.set(name, value):
            raise AttributeError(f"{type(self).__name__} attributes are read-only")

    def __delattr__(self, name: str) -> None:
        if not self._target.delete(name):
            raise AttributeError(f"{type(self).__name__} attributes cannot be deleted")

    def __contains__(self, name: str) -> bool:
        return self._target.has(name)

    def __dir__(self) -> list[str]:
        return self._target.keys()


class Faker(_Proxy):
    """Seeded fake data generator with category attributes.

    Args:
        seed: Random seed; 0 means non-reproducible
        locale: Faker locale, defaults to en_US
        registry: Registry to resolve names against, defaults to the
            process-wide one
    """

    __slots__ = ()

    def __init__(self, seed: int | None = 0, locale: str | None = None, registry: Registry | None = None):
        super().__init__(FakerObject(FakerEngine(seed=seed, registry=registry, locale=locale)))

    def call(self, *args: Any) -> Any:
        """Invoke a function by name: ``call(name, *function_args)``."""
        return self._target.call(*args)

    @property
    def engine(self) -> FakerEngine:
        return self._target.engine

    def __repr__(self) -> str:
        return f"Faker(seed={self.engine.seed})"


class CategoryProxy(_Proxy):
    """Attribute view of one category: ``faker.person.firstName()``."""

    __slots__ = ()

    def __repr__(self) -> str:
        return f"CategoryProxy({self._target.name!r})"
