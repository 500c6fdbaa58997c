# statlab - Column Extractor
# Builds clean numeric, paired and grouped sequences from a row set

from __future__ import annotations

import math
import numbers
from typing import Any, Mapping, Optional, Sequence

import pandas as pd

from statlab.core.exceptions import ColumnNotFoundException
from statlab.stats.sanitizer import is_boolean, is_missing, normalize_row, sanitize_value

DataRow = Mapping[str, Any]


def extract_numeric(rows: Sequence[DataRow], column_name: str) -> list[float]:
    """Numeric values of one column in row order; non-numeric cells are skipped."""
    values = []
    for row in rows:
        value = sanitize_value(row.get(column_name))
        if value is not None:
            values.append(value)
    return values


def extract_column(rows: Sequence[DataRow], column_name: str) -> list[Any]:
    """Raw values of one column in row order (missing keys give None)."""
    return [row.get(column_name) for row in rows]


def extract_pairs(
    rows: Sequence[DataRow],
    x_name: str,
    y_name: str
) -> tuple[list[float], list[float]]:
    """
    Row-aligned numeric pairs for two columns.

    A row is skipped when either of its two values is not numeric, so
    xs[i] and ys[i] always come from the same row.
    """
    xs: list[float] = []
    ys: list[float] = []
    for row in rows:
        x = sanitize_value(row.get(x_name))
        y = sanitize_value(row.get(y_name))
        if x is None or y is None:
            continue
        xs.append(x)
        ys.append(y)
    return xs, ys


def group_label(raw_value: Any) -> Optional[str]:
    """Category label for a cell, or None for a missing cell."""
    if is_missing(raw_value):
        return None
    if isinstance(raw_value, numbers.Real) and not is_boolean(raw_value):
        value = float(raw_value)
        if math.isfinite(value) and value.is_integer():
            return str(int(value))
    return str(raw_value).strip()


def extract_groups(
    rows: Sequence[DataRow],
    value_name: str,
    group_name: str
) -> dict[str, list[float]]:
    """
    Partition one column's numeric values by another column's labels.

    Single pass over the rows; a row contributes only when its value is
    numeric and its label is present. Groups keep first-appearance order.
    """
    groups: dict[str, list[float]] = {}
    for row in rows:
        value = sanitize_value(row.get(value_name))
        label = group_label(row.get(group_name))
        if value is None or label is None:
            continue
        groups.setdefault(label, []).append(value)
    return groups


def collect_headers(rows: Sequence[DataRow]) -> list[str]:
    """Union of column names across rows, in first-appearance order."""
    headers: dict[str, None] = {}
    for row in rows:
        for key in row.keys():
            headers.setdefault(key, None)
    return list(headers)


def require_column(rows: Sequence[DataRow], column_name: str) -> None:
    """Raise ColumnNotFoundException unless some row carries the column."""
    if not any(column_name in row for row in rows):
        raise ColumnNotFoundException(column_name)


def rows_from_frame(df: pd.DataFrame) -> list[dict[str, Any]]:
    """
    Convert a DataFrame into normalized rows.

    NaN/NaT cells become None so they are treated as missing rather
    than as float values.
    """
    if df.empty:
        return []
    clean = df.astype(object).where(pd.notna(df), None)
    return [normalize_row(record) for record in clean.to_dict(orient="records")]
