# statlab - Data Sanitizer
# Header normalization and numeric coercion of raw cell values

from __future__ import annotations

import math
import numbers
import re
from typing import Any, Mapping, Optional

import numpy as np

# Whitespace plus the invisible characters spreadsheets leave around headers
# (UTF-8 byte-order-mark, no-break space).
_BOUNDARY_CHARS = re.compile(r"^[\s\ufeff\xa0]+|[\s\ufeff\xa0]+$")

# Leading float literal; trailing text after it is ignored ("12.5kg" -> 12.5).
_FLOAT_PREFIX = re.compile(r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def normalize_key(raw_key: Any) -> Optional[str]:
    """Clean a column header; returns None when nothing is left."""
    if raw_key is None:
        return None
    key = _BOUNDARY_CHARS.sub("", str(raw_key).strip())
    return key or None


def normalize_row(row: Mapping[Any, Any]) -> dict[str, Any]:
    """Return a new row with normalized keys; empty keys are dropped."""
    normalized: dict[str, Any] = {}
    for raw_key, value in row.items():
        key = normalize_key(raw_key)
        if key is not None:
            normalized[key] = value
    return normalized


def is_boolean(value: Any) -> bool:
    return isinstance(value, (bool, np.bool_))


def sanitize_value(raw_value: Any) -> Optional[float]:
    """
    Coerce a raw cell value to a float, or None when it is not numeric.

    Numbers pass through (NaN counts as missing), strings are trimmed and
    parsed from their leading float literal, and anything else, including
    booleans, is None. None means "excluded from computation", never zero.
    """
    if is_boolean(raw_value):
        return None

    if isinstance(raw_value, numbers.Real):
        try:
            value = float(raw_value)
        except OverflowError:
            # integers beyond the float range
            return math.copysign(math.inf, raw_value)
        return None if math.isnan(value) else value

    if isinstance(raw_value, str):
        trimmed = raw_value.strip()
        if not trimmed:
            return None
        match = _FLOAT_PREFIX.match(trimmed)
        if match is None:
            return None
        return float(match.group(0))

    return None


def is_missing(raw_value: Any) -> bool:
    """True for absent cells: None, NaN, or a blank string."""
    if raw_value is None:
        return True
    if isinstance(raw_value, str):
        return not raw_value.strip()
    if isinstance(raw_value, (float, np.floating)):
        return math.isnan(raw_value)
    return False
