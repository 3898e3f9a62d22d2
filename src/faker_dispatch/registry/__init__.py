"""Registry module - the published function namespace.

Contains:
- Ingestion: Normalizes the raw catalog into public names and categories
- Registry: Read-only name and category maps plus the process-wide cache
"""

from faker_dispatch.registry.ingestion import ZEN, fix_lookup, ingest
from faker_dispatch.registry.registry import (
    Registry,
    RegistryCache,
    category_names,
    get_registry,
    lookup_by_name,
    lookup_category,
)

__all__ = [
    "ZEN",
    "Registry",
    "RegistryCache",
    "category_names",
    "fix_lookup",
    "get_registry",
    "ingest",
    "lookup_by_name",
    "lookup_category",
]
