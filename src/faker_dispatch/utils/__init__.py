"""Utility functions for faker-dispatch."""

from faker_dispatch.utils.helpers import (
    is_array_shaped,
    to_lower_camel,
    to_text,
)

__all__ = [
    "is_array_shaped",
    "to_lower_camel",
    "to_text",
]
