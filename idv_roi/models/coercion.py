"""Zero-default coercion for raw form values.

Text entry fields send whatever the user typed. Text is read up to the first
character that cannot continue a number ("12abc" -> 12, "1,000" -> 1). Anything
with no leading number, and any value that is not finite, becomes 0 before it
reaches the engine.
"""

from __future__ import annotations

import math
import re
from typing import Any

_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def coerce_number(raw: Any) -> float:
    """Parse a form value as a float, falling back to 0.0."""
    if raw is None or isinstance(raw, bool):
        return 0.0
    if isinstance(raw, (int, float)):
        value = float(raw)
    else:
        match = _FLOAT_PREFIX.match(str(raw))
        if match is None:
            return 0.0
        value = float(match.group(1))
    if not math.isfinite(value):
        return 0.0
    return value


def coerce_integer(raw: Any) -> int:
    """Parse a form value as an integer count.

    Numbers truncate toward zero; text keeps only its leading digits, so
    "1e3" is 1.
    """
    if raw is None or isinstance(raw, bool):
        return 0
    if isinstance(raw, (int, float)):
        value = coerce_number(raw)
        return int(value)
    match = _INT_PREFIX.match(str(raw))
    if match is None:
        return 0
    return int(match.group(1))
