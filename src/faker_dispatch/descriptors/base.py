"""Descriptor models - the shape every generator function is published in.

A Descriptor is the immutable record for one generator function:
- Naming and categorization
- Documentation (description, example)
- Declared output type and ordered parameter list
- The generator function itself

The serialized shape of these models is the machine-readable catalog, so
field names here are part of the public contract.
"""

import json
from enum import Enum
from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, Field

from faker_dispatch.utils.helpers import to_text


class ParamType(str, Enum):
    """Declared type of a generator parameter."""

    STRING = "string"
    INT = "int"
    UINT = "uint"
    FLOAT = "float"
    BOOL = "bool"
    STRING_ARRAY = "[]string"
    INT_ARRAY = "[]int"
    UINT_ARRAY = "[]uint"
    FLOAT_ARRAY = "[]float"

    @property
    def is_array(self) -> bool:
        return self.value.startswith("[]")


class OutputType(str, Enum):
    """Declared type of a generator's result."""

    STRING = "string"
    INT = "int"
    UINT = "uint"
    FLOAT = "float"
    BOOL = "bool"
    STRING_ARRAY = "[]string"
    INT_ARRAY = "[]int"
    MAP_ANY = "map[string]any"
    MAP_STRING = "map[string]string"
    MAP_STRING_ARRAY = "map[string][]string"
    ANY = "any"


class Parameter(BaseModel):
    """A single declared parameter of a generator function.

    A parameter with neither a default nor the optional flag is mandatory.
    """

    model_config = ConfigDict(frozen=True)

    field: str = Field(..., description="Parameter name in the bound map")
    display: str = Field(default="", description="Human-readable label")
    type: ParamType = Field(default=ParamType.STRING, description="Declared type")
    default: str = Field(default="", description="Default literal, empty for none")
    optional: bool = Field(default=False, description="May be omitted entirely")
    options: tuple[str, ...] = Field(default=(), description="Allowed values")
    description: str = Field(default="", description="Human-readable description")

    @property
    def required(self) -> bool:
        return not self.default and not self.optional


GenerateFunc = Callable[..., Any]


class Descriptor(BaseModel):
    """Immutable metadata plus generator function for one named operation."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Function name")
    display: str = Field(default="", description="Display label")
    category: str = Field(..., description="Category the function belongs to")
    description: str = Field(default="", description="Human-readable description")
    example: str = Field(default="", description="Example output")
    output: OutputType = Field(default=OutputType.STRING, description="Output type")
    params: tuple[Parameter, ...] = Field(default=(), description="Ordered parameters")
    generate: GenerateFunc = Field(..., exclude=True, repr=False)

    def get_param(self, field: str) -> Parameter | None:
        """Get a declared parameter by field name."""
        for param in self.params:
            if param.field == field:
                return param
        return None


class ParameterError(ValueError):
    """A bound parameter is absent or cannot be parsed."""


_TRUE = {"true", "1", "yes", "on"}
_FALSE = {"false", "0", "no", "off", ""}


class BoundParams(dict[str, list[str]]):
    """Named parameter values for one invocation.

    Every value is a list of text elements: scalars bind as a single element,
    arrays as one element per item.
    """

    def add(self, field: str, value: str) -> None:
        self.setdefault(field, []).append(value)

    def _values(self, field: str) -> list[str]:
        values = self.get(field)
        if not values:
            raise ParameterError(f"parameter {field!r} is not set")
        return values

    def _array(self, field: str) -> list[str]:
        values = self._values(field)
        if len(values) == 1 and values[0].startswith("["):
            try:
                decoded = json.loads(values[0])
            except ValueError:
                return values
            if isinstance(decoded, list):
                return [to_text(v) for v in decoded]
        return values

    def get_string(self, field: str) -> str:
        return self._values(field)[0]

    def get_int(self, field: str) -> int:
        return _parse_int(field, self._values(field)[0])

    def get_uint(self, field: str) -> int:
        value = self.get_int(field)
        if value < 0:
            raise ParameterError(f"parameter {field!r} must not be negative: {value}")
        return value

    def get_float(self, field: str) -> float:
        return _parse_float(field, self._values(field)[0])

    def get_bool(self, field: str) -> bool:
        return _parse_bool(field, self._values(field)[0])

    def get_string_array(self, field: str) -> list[str]:
        return self._array(field)

    def get_int_array(self, field: str) -> list[int]:
        return [_parse_int(field, v) for v in self._array(field)]

    def get_uint_array(self, field: str) -> list[int]:
        values = self.get_int_array(field)
        if any(v < 0 for v in values):
            raise ParameterError(f"parameter {field!r} must not contain negative values")
        return values

    def get_float_array(self, field: str) -> list[float]:
        return [_parse_float(field, v) for v in self._array(field)]


def _parse_int(field: str, text: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        pass
    try:
        number = float(text)
    except ValueError:
        raise ParameterError(f"parameter {field!r} is not an integer: {text!r}") from None
    if not number.is_integer():
        raise ParameterError(f"parameter {field!r} is not an integer: {text!r}")
    return int(number)


def _parse_float(field: str, text: str) -> float:
    try:
        return float(text)
    except ValueError:
        raise ParameterError(f"parameter {field!r} is not a number: {text!r}") from None


def _parse_bool(field: str, text: str) -> bool:
    lowered = text.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ParameterError(f"parameter {field!r} is not a boolean: {text!r}")
