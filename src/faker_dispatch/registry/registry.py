"""Function registry and its process-wide cache."""

import logging
import threading
from types import MappingProxyType
from typing import Callable, Mapping

from faker_dispatch.descriptors.base import Descriptor
from faker_dispatch.registry.ingestion import ZEN, ingest

logger = logging.getLogger(__name__)


class Registry:
    """Read-only view of every published generator function.

    The registry ensures:
    - One descriptor per public name
    - by_category["zen"] holds exactly the by_name contents
    - The same descriptor object is reachable from by_name and its category
    """

    def __init__(
        self,
        by_name: Mapping[str, Descriptor],
        by_category: Mapping[str, Mapping[str, Descriptor]],
    ):
        self.by_name: Mapping[str, Descriptor] = MappingProxyType(dict(by_name))
        self.by_category: Mapping[str, Mapping[str, Descriptor]] = MappingProxyType(
            {name: MappingProxyType(dict(funcs)) for name, funcs in by_category.items()}
        )

    @classmethod
    def build(cls, raw_catalog: Mapping[str, Descriptor]) -> "Registry":
        """Build a registry from a raw catalog.

        Raises:
            CatalogError: If the catalog does not normalize cleanly
        """
        by_name, by_category = ingest(raw_catalog)
        return cls(by_name, by_category)

    def lookup_by_name(self, name: str) -> Descriptor | None:
        return self.by_name.get(name)

    def lookup_category(self, category: str) -> Mapping[str, Descriptor] | None:
        return self.by_category.get(category)

    def category_names(self) -> list[str]:
        """List all category names, including "zen", sorted."""
        return sorted(self.by_category)

    def __len__(self) -> int:
        return len(self.by_name)

    def __contains__(self, name: str) -> bool:
        return name in self.by_name

    def __repr__(self) -> str:
        return f"Registry(functions={len(self.by_name)}, categories={len(self.by_category)})"


class RegistryCache:
    """Builds a registry exactly once, on first use.

    Concurrent first callers block until the single build finishes and then
    all observe the same registry. Later calls read without locking.
    """

    def __init__(self, builder: Callable[[], Registry]):
        self._builder = builder
        self._lock = threading.Lock()
        self._registry: Registry | None = None

    def get(self) -> Registry:
        registry = self._registry
        if registry is not None:
            return registry

        with self._lock:
            if self._registry is None:
                self._registry = self._builder()
                logger.debug("Built %r", self._registry)
            return self._registry

    @property
    def built(self) -> bool:
        return self._registry is not None


def _build_default() -> Registry:
    from faker_dispatch.catalog import load_raw_catalog

    return Registry.build(load_raw_catalog())


_global_cache = RegistryCache(_build_default)


def get_registry() -> Registry:
    """Get the process-wide registry built from the Faker-backed catalog."""
    return _global_cache.get()


def lookup_by_name(name: str) -> Descriptor | None:
    return get_registry().lookup_by_name(name)


def lookup_category(category: str) -> Mapping[str, Descriptor] | None:
    return get_registry().lookup_category(category)


def category_names() -> list[str]:
    return get_registry().category_names()
