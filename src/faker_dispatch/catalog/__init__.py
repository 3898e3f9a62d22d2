"""Raw generator catalog backed by the Faker library."""

from faker_dispatch.catalog import (
    address,
    company,
    dates,
    formats,
    internet,
    media,
    nature,
    numbers,
    payment,
    person,
    strings,
    tech,
    words,
)
from faker_dispatch.catalog.base import CatalogSection, param, pick
from faker_dispatch.descriptors.base import Descriptor
from faker_dispatch.errors import CatalogError

SECTIONS: list[CatalogSection] = [
    address.section,
    company.section,
    dates.section,
    formats.section,
    internet.section,
    media.section,
    nature.section,
    numbers.section,
    payment.section,
    person.section,
    strings.section,
    tech.section,
    words.section,
]


def load_raw_catalog(sections: list[CatalogSection] | None = None) -> dict[str, Descriptor]:
    """Merge catalog sections into a fresh native-key map.

    Args:
        sections: Sections to merge, defaults to every built-in section

    Returns:
        Dictionary of native key to raw Descriptor

    Raises:
        CatalogError: If two sections declare the same native key
    """
    catalog: dict[str, Descriptor] = {}
    for section in sections if sections is not None else SECTIONS:
        for key, descriptor in section.items():
            if key in catalog:
                raise CatalogError(
                    f"Native key '{key}' declared by both '{catalog[key].category}' and '{section.name}'"
                )
            catalog[key] = descriptor
    return catalog


__all__ = ["SECTIONS", "CatalogSection", "load_raw_catalog", "param", "pick"]
