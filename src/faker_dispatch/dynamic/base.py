"""Dynamic object interface exposed to script hosts.

A host resolves property reads, probes, enumeration, writes and deletes on
a script object through these five operations.
"""

from abc import ABC, abstractmethod
from typing import Any


class _Undefined:
    """Sentinel for "no such property"."""

    _instance: "_Undefined | None" = None

    def __new__(cls) -> "_Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNDEFINED"


UNDEFINED = _Undefined()


class DynamicObject(ABC):
    """A script-visible object whose properties are resolved on demand."""

    @abstractmethod
    def get(self, key: str) -> Any:
        """Return the property value, or UNDEFINED if there is none."""
        pass

    @abstractmethod
    def has(self, key: str) -> bool:
        pass

    @abstractmethod
    def keys(self) -> list[str]:
        pass

    def set(self, key: str, value: Any) -> bool:
        """Properties are read-only; writes are refused."""
        return False

    def delete(self, key: str) -> bool:
        """Properties are read-only; deletes are refused."""
        return False
