"""Top-level and per-category dynamic objects.

FakerObject resolves ``call`` and category names; CategoryObject resolves
function names inside one category. Both forward invocations to the same
engine, so they draw from one shared random sequence.
"""

from typing import TYPE_CHECKING, Any, Callable, Mapping

from faker_dispatch.descriptors.base import Descriptor
from faker_dispatch.dynamic.base import UNDEFINED, DynamicObject
from faker_dispatch.errors import InvalidInvocation

if TYPE_CHECKING:
    from faker_dispatch.engine.faker_engine import FakerEngine

CALL = "call"


class FakerObject(DynamicObject):
    """The script-visible generator: ``faker.call(...)`` and ``faker.<category>``."""

    def __init__(self, engine: "FakerEngine"):
        self.engine = engine

    def get(self, key: str) -> Any:
        if key == CALL:
            return self.call

        category = self.engine.category(key)
        if category is None:
            return UNDEFINED
        return category

    def has(self, key: str) -> bool:
        return False

    def keys(self) -> list[str]:
        return self.engine.category_names()

    def call(self, *args: Any) -> Any:
        """Invoke a function by name: ``call(name, *function_args)``.

        Raises:
            InvalidInvocation: If the first argument is missing or not a string
            UnknownFunction: If no function has that name
        """
        if not args or not isinstance(args[0], str):
            raise InvalidInvocation("call() requires a function name as its first argument")
        return self.engine.call(args[0], args[1:])


class CategoryObject(DynamicObject):
    """Stateless view of one category, bound to an engine."""

    def __init__(self, engine: "FakerEngine", name: str, functions: Mapping[str, Descriptor]):
        self.engine = engine
        self.name = name
        self.functions = functions

    def get(self, key: str) -> Any:
        descriptor = self.functions.get(key)
        if descriptor is None:
            return UNDEFINED
        return self._bind(descriptor)

    def has(self, key: str) -> bool:
        return False

    def keys(self) -> list[str]:
        return []

    def _bind(self, descriptor: Descriptor) -> Callable[..., Any]:
        engine = self.engine

        def invoke(*args: Any) -> Any:
            return engine.invoke(descriptor, args)

        invoke.__name__ = descriptor.name
        invoke.__doc__ = descriptor.description
        return invoke

    def __repr__(self) -> str:
        return f"CategoryObject({self.name!r}, functions={len(self.functions)})"
