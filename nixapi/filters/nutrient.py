"""
Nutrient Filter - Nutritionix API Client

Finds a nutrient with a given attr_id in a list of nutrients, as returned
in the ``full_nutrients`` field of Nutritionix food objects.
"""

import math
import re
from collections.abc import Mapping, Sequence
from typing import Any

_LEADING_INT = re.compile(r"\s*([+-]?)(?:0[xX]([0-9a-fA-F]+)|(?!0[xX])([0-9]+))")


def parse_int(value: Any) -> int | None:
    """
    Parse a value as an integer the lenient way.

    Integers are returned as-is and floats are truncated. Strings may have
    leading whitespace and an optional sign; only the leading run of ASCII
    digits is used, so "303.0" and "303abc" both parse as 303. A "0x"
    prefix reads the digits as hexadecimal ("0x12D" is 301).

    Returns:
        The parsed integer, or None if the value can't be parsed
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return None if not math.isfinite(value) else int(value)
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        if not match:
            return None
        sign, hex_digits, digits = match.groups()
        number = int(hex_digits, 16) if hex_digits else int(digits)
        return -number if sign == "-" else number
    return None


def find_nutrient(
    nutrients: Sequence[Mapping[str, Any]] | None,
    id: Any,
    attribute: str | None = None,
) -> Any:
    """
    Find the nutrient with the specified id in a list of nutrients.

    The first nutrient whose ``attr_id`` matches wins. Invalid input never
    raises: a zero or unparseable id, or ``nutrients`` not being a list,
    gives None.

    Args:
        nutrients: Collection of nutrient dictionaries
        id: Nutrient attr_id to search for
        attribute: Optional key to return from the found nutrient instead of the nutrient itself

    Returns:
        The nutrient, its ``attribute`` value, or None if nothing matched

    Example:
        >>> find_nutrient([{"attr_id": 301, "value": 120}, {"attr_id": 303, "value": 2.1}], "303", "value")
        2.1
    """
    target = parse_int(id)
    if not target or not isinstance(nutrients, (list, tuple)):
        return None

    for nutrient in nutrients:
        if not isinstance(nutrient, Mapping):
            continue
        if parse_int(nutrient.get("attr_id")) == target:
            return nutrient.get(attribute) if attribute else nutrient

    return None
