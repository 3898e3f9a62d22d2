"""Building blocks for the raw generator catalog.

The raw catalog is keyed by native (all lower case) function keys and keeps
the loosely organized categories and display labels the functions were
written with. Ingestion turns it into the public namespace.
"""

from typing import Any, Callable, Iterator, Sequence

from faker import Faker

from faker_dispatch.descriptors.base import (
    Descriptor,
    OutputType,
    Parameter,
    ParamType,
)


class CatalogSection:
    """A named group of raw catalog entries.

    Entries are added with the ``func`` decorator:

        section = CatalogSection("person")

        @section.func("firstname", "First Name", "person", ...)
        def first_name(fake, params):
            return fake.first_name()
    """

    def __init__(self, name: str):
        self.name = name
        self._entries: dict[str, Descriptor] = {}

    def func(
        self,
        key: str,
        display: str,
        category: str,
        description: str = "",
        example: str = "",
        output: OutputType = OutputType.STRING,
        params: Sequence[Parameter] = (),
    ) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """Register the decorated function under a native key.

        Raises:
            ValueError: If the key is already registered in this section
        """

        def decorator(generate: Callable[..., Any]) -> Callable[..., Any]:
            if key in self._entries:
                raise ValueError(f"Catalog key '{key}' already registered in '{self.name}'")
            self._entries[key] = Descriptor(
                name=key,
                display=display,
                category=category,
                description=description,
                example=example,
                output=output,
                params=tuple(params),
                generate=generate,
            )
            return generate

        return decorator

    def items(self) -> Iterator[tuple[str, Descriptor]]:
        return iter(self._entries.items())

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return key in self._entries


def param(
    field: str,
    display: str,
    type: ParamType = ParamType.STRING,
    default: str = "",
    optional: bool = False,
    options: Sequence[str] = (),
    description: str = "",
) -> Parameter:
    """Shorthand for declaring a Parameter in catalog tables."""
    return Parameter(
        field=field,
        display=display,
        type=type,
        default=default,
        optional=optional,
        options=tuple(options),
        description=description,
    )


def pick(fake: Faker, values: Sequence[Any]) -> Any:
    """Choose one element using the generator's own random source."""
    return values[fake.random.randrange(len(values))]
