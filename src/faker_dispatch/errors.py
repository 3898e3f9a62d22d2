"""Error kinds raised by the registry and dispatch layer.

Lookup and binding always happen before a generator function runs, so none
of these errors leave partial side effects behind.
"""


class FakerDispatchError(Exception):
    """Base class for all faker-dispatch errors."""


class CatalogError(FakerDispatchError):
    """The raw catalog cannot be normalized into a collision-free registry."""


class UnknownFunction(FakerDispatchError, LookupError):
    """No function with the requested name exists in the registry."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"unknown function: {name!r}")


class MissingParameter(FakerDispatchError):
    """A mandatory parameter was omitted and declares no default."""

    def __init__(self, function: str, parameter: str):
        self.function = function
        self.parameter = parameter
        super().__init__(f"missing parameter: {parameter} (function {function!r})")


class InvalidInvocation(FakerDispatchError, TypeError):
    """The call itself is malformed, e.g. no function name was given."""


class GenerationFailure(FakerDispatchError):
    """The underlying generator function failed."""

    def __init__(self, function: str, reason: str):
        self.function = function
        self.reason = reason
        super().__init__(f"{function}: {reason}")
