"""Machine-readable catalog export.

Serializes the registry into the JSON catalog consumed by documentation and
typing generators, and renders script-facing signatures such as

    creditCardNumber(types: string[], bins: string[], gaps: boolean): string
"""

import json
from typing import Any

from faker_dispatch.descriptors.base import Descriptor
from faker_dispatch.registry.registry import Registry

SCRIPT_TYPES = {
    "string": "string",
    "bool": "boolean",
    "int": "number",
    "uint": "number",
    "float": "number",
    "map[string]any": "Record<string,unknown>",
    "map[string]string": "Record<string,string>",
    "map[string][]string": "Record<string, Array<string>>",
    "any": "unknown",
}


def script_type(native: str) -> str:
    """Map a declared native type to its script type name.

    Array types keep their array-ness: ``[]int`` becomes ``number[]``.

    Raises:
        ValueError: If the type has no script equivalent
    """
    array = native.startswith("[]")
    base = native[2:] if array else native
    if base not in SCRIPT_TYPES:
        raise ValueError(f"No script type for {native!r}")
    mapped = SCRIPT_TYPES[base]
    return f"{mapped}[]" if array else mapped


def signature(descriptor: Descriptor) -> str:
    """Render the script signature of a function."""
    params = ", ".join(
        f"{p.field}: {script_type(p.type.value)}" for p in descriptor.params
    )
    return f"{descriptor.name}({params}): {script_type(descriptor.output.value)}"


def descriptor_to_dict(descriptor: Descriptor) -> dict[str, Any]:
    """Serialize one descriptor, without its generator function."""
    return descriptor.model_dump(mode="json")


def export_catalog(registry: Registry) -> dict[str, dict[str, Any]]:
    """Serialize every published function, keyed and sorted by name.

    Args:
        registry: Registry to export

    Returns:
        Dictionary of function name to serialized descriptor
    """
    return {
        name: descriptor_to_dict(registry.by_name[name])
        for name in sorted(registry.by_name)
    }


def catalog_json(registry: Registry, indent: int | None = None) -> str:
    """Export the catalog as JSON text."""
    return json.dumps(export_catalog(registry), indent=indent, ensure_ascii=False)
