"""Time expression parsing for checkout-ago."""

from typing import Dict, Tuple


SHORTHAND_UNITS: Dict[str, str] = {
    "s": "seconds",
    "m": "minutes",
    "h": "hours",
    "d": "days",
    "w": "weeks",
}

_ASCII_DIGITS = "0123456789"


def split_shorthand(value: str) -> Tuple[str, str]:
    """Split ``value`` at the first character that is not an ASCII digit.

    Returns:
        ``(number, unit)``; ``unit`` is empty when ``value`` is all digits.
    """
    for index, char in enumerate(value):
        if char not in _ASCII_DIGITS:
            return value[:index], value[index:]
    return value, ""


def normalize_ago(value: str) -> str:
    """Convert shorthand like ``2d``, ``3h`` or ``1w`` into git's wording.

    Accepted shorthand is one or more ASCII digits followed by exactly one
    of ``s/m/h/d/w``. Anything else, including already spelled-out
    durations such as ``"2 days"``, is returned unchanged apart from
    surrounding whitespace being stripped.

    Examples:
        >>> normalize_ago("2d")
        '2 days'
        >>> normalize_ago("1 week")
        '1 week'
        >>> normalize_ago("10x")
        '10x'
    """
    value = value.strip()

    if not value:
        return value

    number, unit = split_shorthand(value)

    if not number or not unit:
        return value

    expanded_unit = SHORTHAND_UNITS.get(unit)
    if expanded_unit is None:
        return value

    return f"{number} {expanded_unit}"
