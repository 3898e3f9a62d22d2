"""Utility helper functions."""

from typing import Any

_SEPARATORS = {"_", " ", "-", "."}


def to_lower_camel(value: str) -> str:
    """Convert a display label into a lower camel case key.

    Separators (space, underscore, dash, dot) are dropped and capitalize the
    next letter. A digit also capitalizes the next letter. Inside a run of
    capitals only the first keeps its case, so acronyms fold:

        "Credit Card CVV" -> "creditCardCvv"
        "IPv4 Address"    -> "ipv4Address"

    Args:
        value: Label to convert

    Returns:
        The lower camel case key
    """
    value = value.strip()
    result: list[str] = []
    cap_next = False
    prev_is_cap = False

    for index, char in enumerate(value):
        is_cap = "A" <= char <= "Z"
        is_low = "a" <= char <= "z"

        if cap_next:
            if is_low:
                char = char.upper()
        elif index == 0:
            if is_cap:
                char = char.lower()
        elif prev_is_cap and is_cap:
            char = char.lower()

        prev_is_cap = is_cap

        if is_cap or is_low:
            result.append(char)
            cap_next = False
        elif "0" <= char <= "9":
            result.append(char)
            cap_next = True
        else:
            cap_next = char in _SEPARATORS

    return "".join(result)


def is_array_shaped(value: Any) -> bool:
    """Check whether a call-site value should bind as a list of values."""
    return isinstance(value, (list, tuple))


def to_text(value: Any) -> str:
    """Render a call-site value the way a script would print it.

    Booleans become "true"/"false" and integral floats lose their
    fractional part, so numbers read back as integers.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
