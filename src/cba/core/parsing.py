"""Numeric coercion for free-form text entered by the user.

Runs at the collaborator boundary, before values reach the store, so the
engine only ever sees floats.
"""

import math
import re
from typing import Any

# Thousands separators, spaces and currency signs are dropped before parsing
_STRIP_PATTERN = re.compile(r"[,\s$£€]")

_BLANK_TOKENS = {"", "?", "na", "n/a"}


def parse_number(value: Any) -> float:
    """Coerce a raw input value to a float.

    Accepts numbers and text such as "480,000" or "$ 1,250.50".
    Anything that does not parse to a finite number becomes 0.0.

    Args:
        value: Raw value from a form field.

    Returns:
        Parsed float, or 0.0 for blank or malformed input.
    """
    if value is None or isinstance(value, bool):
        return 0.0

    if isinstance(value, (int, float)):
        number = float(value)
        return number if math.isfinite(number) else 0.0

    text = str(value).strip()
    if text.lower() in _BLANK_TOKENS:
        return 0.0

    try:
        number = float(_STRIP_PATTERN.sub("", text))
    except ValueError:
        return 0.0

    return number if math.isfinite(number) else 0.0
