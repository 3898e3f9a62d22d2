"""Source catalog ingestion.

Turns the raw catalog, keyed by native lowercase keys and grouped under
loosely organized categories, into the public namespace:
- Entries that cannot be driven positionally are dropped
- Display labels are prefixed where a bare label would collide
- Keys are derived from display labels in lower camel case
- A few keys and categories are renamed to their published spelling
- Every surviving function is also placed in the synthetic "zen" category
"""

import logging
from typing import Mapping

from faker_dispatch.descriptors.base import Descriptor
from faker_dispatch.errors import CatalogError
from faker_dispatch.utils.helpers import to_lower_camel

logger = logging.getLogger(__name__)

ZEN = "zen"

FUNC_TO_SKIP = frozenset({
    "template", "generate", "weighted",
    "imagejpeg", "imagepng", "imagesvg", "svg",
    "sql", "fixed_width", "map", "regex",
    "json", "xml", "csv",
    "email_text", "markdown",
    "vowel", "flipacoin",
})

ADD_PREFIX = {
    "booktitle": "Book",
    "bookauthor": "Book",
    "bookgenre": "Book",
    "moviegenre": "Movie",
}

FUNC_RENAME = {
    "gRpcError": "gRPCError",
    "creditCardCvv": "creditCardCVV",
}

CATEGORY_BY_FUNC = {
    "uuid": "string",
    "flipACoin": "string",
    "boolean": "number",
}

CATEGORY_RENAME = {
    "auth": "internet",
    "image": "internet",
    "html": "internet",
    "school": "person",
    "string": "strings",
    "number": "numbers",
}


def fix_lookup(native_key: str, descriptor: Descriptor) -> tuple[str, Descriptor]:
    """Derive the public key and normalized descriptor for one raw entry.

    The raw descriptor is left untouched; a new one is returned.

    Args:
        native_key: Key of the entry in the raw catalog
        descriptor: Raw descriptor

    Returns:
        Tuple of (public key, normalized descriptor)
    """
    display = descriptor.display
    if native_key in ADD_PREFIX:
        display = f"{ADD_PREFIX[native_key]} {display}"

    key = to_lower_camel(display)
    key = FUNC_RENAME.get(key, key)

    category = CATEGORY_BY_FUNC.get(key, descriptor.category)
    category = CATEGORY_RENAME.get(category, category)

    fixed = descriptor.model_copy(update={"name": key, "display": display, "category": category})
    return key, fixed


def ingest(
    raw_catalog: Mapping[str, Descriptor],
) -> tuple[dict[str, Descriptor], dict[str, dict[str, Descriptor]]]:
    """Normalize a raw catalog into name and category maps.

    Args:
        raw_catalog: Native key to raw descriptor

    Returns:
        Tuple of (by_name, by_category). by_category includes "zen", which
        holds exactly the by_name contents.

    Raises:
        CatalogError: If two entries end up under the same public key
    """
    by_name: dict[str, Descriptor] = {}
    by_category: dict[str, dict[str, Descriptor]] = {}
    sources: dict[str, str] = {}
    skipped = 0

    for native_key, raw in raw_catalog.items():
        if native_key in FUNC_TO_SKIP:
            skipped += 1
            continue

        key, descriptor = fix_lookup(native_key, raw)
        if key in by_name:
            raise CatalogError(
                f"Function name '{key}' produced by both '{sources[key]}' and '{native_key}'"
            )

        sources[key] = native_key
        by_name[key] = descriptor
        by_category.setdefault(descriptor.category, {})[key] = descriptor

    if ZEN in by_category:
        raise CatalogError(f"Category '{ZEN}' is reserved")
    by_category[ZEN] = dict(by_name)

    logger.debug(
        "Ingested %d functions in %d categories (%d skipped)",
        len(by_name), len(by_category), skipped,
    )
    return by_name, by_category
