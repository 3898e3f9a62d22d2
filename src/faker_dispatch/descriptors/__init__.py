"""Descriptor models for generator functions."""

from faker_dispatch.descriptors.base import (
    BoundParams,
    Descriptor,
    OutputType,
    Parameter,
    ParameterError,
    ParamType,
)

__all__ = [
    "BoundParams",
    "Descriptor",
    "OutputType",
    "Parameter",
    "ParameterError",
    "ParamType",
]
