"""Faker Engine - a seeded generator instance bound to the registry.

The Faker Engine owns:
- One random source (a seeded faker.Faker instance)
- A reference to the shared, read-only registry

Every invocation goes through lookup, then parameter binding, then the
generator function, so unknown names and missing parameters are reported
before any random draw happens.

An engine is not safe for concurrent use from several threads; give each
thread its own instance.
"""

import logging
from typing import Any, Sequence

from faker import Faker

from faker_dispatch.descriptors.base import Descriptor
from faker_dispatch.engine.binder import bind_params
from faker_dispatch.errors import FakerDispatchError, GenerationFailure, UnknownFunction
from faker_dispatch.registry.registry import Registry, get_registry
from faker_dispatch.settings.base import DEFAULT_LOCALE

logger = logging.getLogger(__name__)


class FakerEngine:
    """Seeded generator instance.

    A seed of 0 (or None) draws from an entropy-seeded source and is not
    reproducible. Any other seed makes the output depend only on the seed
    and the number of prior draws.
    """

    def __init__(
        self,
        seed: int | None = 0,
        registry: Registry | None = None,
        locale: str | None = None,
    ):
        self.registry = registry if registry is not None else get_registry()
        self.locale = locale or DEFAULT_LOCALE
        self._seed = seed or 0
        self._fake = Faker(self.locale)
        self._fake.seed_instance(self._seed or None)

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def fake(self) -> Faker:
        """The random source shared by every call on this engine."""
        return self._fake

    def call(self, name: str, args: Sequence[Any] = ()) -> Any:
        """Invoke a function by its public name.

        Args:
            name: Public function name, e.g. "firstName"
            args: Positional call-site values

        Returns:
            The generated value

        Raises:
            UnknownFunction: If no function has that name
            MissingParameter: If a mandatory parameter was not supplied
            GenerationFailure: If the generator function itself fails
        """
        descriptor = self.registry.lookup_by_name(name)
        if descriptor is None:
            raise UnknownFunction(name)
        return self.invoke(descriptor, args)

    def invoke(self, descriptor: Descriptor, args: Sequence[Any] = ()) -> Any:
        """Bind and invoke an already resolved descriptor."""
        params = bind_params(descriptor, args)
        try:
            return descriptor.generate(self._fake, params)
        except FakerDispatchError:
            raise
        except Exception as e:
            logger.debug("Generator %s failed: %s", descriptor.name, e)
            raise GenerationFailure(descriptor.name, str(e)) from e

    def category(self, name: str):
        """Get a view of one category bound to this engine.

        Returns:
            A CategoryObject, or None if the category does not exist
        """
        from faker_dispatch.dynamic.objects import CategoryObject

        functions = self.registry.lookup_category(name)
        if functions is None:
            return None
        return CategoryObject(self, name, functions)

    def category_names(self) -> list[str]:
        return self.registry.category_names()

    def __repr__(self) -> str:
        return f"FakerEngine(seed={self._seed}, locale={self.locale!r})"
