"""Positional argument binding.

Script callers pass arguments by position and may leave any of them out.
The binder maps them onto a descriptor's declared parameters, filling in
defaults and rendering every value as text the way the generator functions
expect it.
"""

from typing import Any, Sequence

from faker_dispatch.descriptors.base import BoundParams, Descriptor
from faker_dispatch.errors import MissingParameter
from faker_dispatch.utils.helpers import is_array_shaped, to_text


def bind_params(descriptor: Descriptor, args: Sequence[Any] = ()) -> BoundParams | None:
    """Bind positional call-site values to a descriptor's parameters.

    For each declared parameter, in order:
    - A value present at that position (and not None) binds as text. Lists
      and tuples bind one text element per item.
    - Otherwise a non-empty default binds as a single text element.
    - Otherwise an optional parameter is left out entirely.
    - Otherwise the parameter is missing.

    Arguments past the last declared parameter are ignored.

    Args:
        descriptor: The function being invoked
        args: Positional call-site values

    Returns:
        Bound parameters, or None when the function declares none

    Raises:
        MissingParameter: If a mandatory parameter has no value
    """
    if not descriptor.params:
        return None

    bound = BoundParams()
    for index, param in enumerate(descriptor.params):
        value = args[index] if index < len(args) else None

        if value is not None:
            if is_array_shaped(value):
                bound[param.field] = [to_text(item) for item in value]
            else:
                bound.add(param.field, to_text(value))
        elif param.default:
            bound.add(param.field, param.default)
        elif not param.optional:
            raise MissingParameter(descriptor.name, param.field)

    return bound
