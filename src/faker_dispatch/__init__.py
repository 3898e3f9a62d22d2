"""
faker-dispatch - Random data generators addressed by name.

A catalog of Faker-backed generator functions, normalized into categories and
exposed to dynamically typed callers through ``faker.<category>.<function>()``
and ``faker.call(name, ...)`` with positional, possibly omitted arguments.
"""

__version__ = "0.1.0"

from faker_dispatch.descriptors.base import Descriptor, Parameter, ParamType, OutputType
from faker_dispatch.dynamic.proxy import Faker
from faker_dispatch.engine.faker_engine import FakerEngine
from faker_dispatch.errors import (
    FakerDispatchError,
    CatalogError,
    UnknownFunction,
    MissingParameter,
    InvalidInvocation,
    GenerationFailure,
)
from faker_dispatch.registry.registry import Registry, get_registry

__all__ = [
    "Descriptor",
    "Parameter",
    "ParamType",
    "OutputType",
    "Faker",
    "FakerEngine",
    "FakerDispatchError",
    "CatalogError",
    "UnknownFunction",
    "MissingParameter",
    "InvalidInvocation",
    "GenerationFailure",
    "Registry",
    "get_registry",
]
