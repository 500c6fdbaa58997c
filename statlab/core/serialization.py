from __future__ import annotations

import math
from dataclasses import asdict, is_dataclass
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from typing import Any
from uuid import UUID

import numpy as np
import pandas as pd


def to_jsonable(value: Any) -> Any:
    """
    Best-effort conversion to JSON-serializable primitives.

    Used at the engine boundary so results can cross any transport
    (numpy scalars and non-finite floats are not valid JSON).
    """

    if value is None:
        return None

    if isinstance(value, Enum):
        return to_jsonable(value.value)

    if isinstance(value, bool):
        return value

    if isinstance(value, (np.floating, float)):
        value = float(value)
        return value if math.isfinite(value) else None

    if isinstance(value, (str, int)):
        return value

    if isinstance(value, np.generic):
        return value.item()

    if isinstance(value, UUID):
        return str(value)

    if isinstance(value, pd.Timestamp):
        return value.isoformat()

    if isinstance(value, (datetime, date, time)):
        return value.isoformat()

    if isinstance(value, Decimal):
        return float(value)

    if isinstance(value, np.ndarray):
        return [to_jsonable(v) for v in value.tolist()]

    if is_dataclass(value) and not isinstance(value, type):
        return to_jsonable(asdict(value))

    if isinstance(value, dict):
        return {str(k): to_jsonable(v) for k, v in value.items()}

    if isinstance(value, (list, tuple, set)):
        return [to_jsonable(v) for v in value]

    # Fallback: preserve the value as a string rather than failing the response.
    return str(value)
