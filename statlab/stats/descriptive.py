# statlab - Descriptive Statistics Calculator
# Per-column central tendency, dispersion, position and shape metrics
#
# All functions are pure; sample (n - 1) estimators are used throughout and
# quantiles interpolate linearly between order statistics.

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Sequence

import numpy as np
import pandas as pd
from scipy import stats as scipy_stats

from statlab.core.config import get_settings
from statlab.core.serialization import to_jsonable

NO_MODE = "no mode"
OVERFLOW_MARKER = "..."


# ============================================================================
# Data Classes
# ============================================================================

@dataclass(frozen=True)
class ModeResult:
    """Most frequent values of a sample, before display formatting."""
    values: tuple[float, ...] = ()
    frequency: int = 0
    overflow: bool = False  # more values tied than are kept in `values`

    @property
    def has_mode(self) -> bool:
        return bool(self.values)


@dataclass
class VariableStats:
    """Descriptive statistics for a single numeric column."""
    variable_name: str
    count: int
    mean: float
    median: float
    mode: str
    std_dev: float
    variance: float
    coeff_variation: float  # percent
    range: float
    min: float
    max: float
    q1: float
    q2: float
    q3: float
    p10: float
    p90: float
    skewness: float
    kurtosis: float
    mode_detail: ModeResult = field(default_factory=ModeResult, repr=False, compare=False)

    def to_dict(self) -> Dict[str, Any]:
        return to_jsonable({
            "variableName": self.variable_name,
            "count": self.count,
            "mean": self.mean,
            "median": self.median,
            "mode": self.mode,
            "stdDev": self.std_dev,
            "variance": self.variance,
            "coeffVariation": self.coeff_variation,
            "range": self.range,
            "min": self.min,
            "max": self.max,
            "q1": self.q1,
            "q2": self.q2,
            "q3": self.q3,
            "p10": self.p10,
            "p90": self.p90,
            "skewness": self.skewness,
            "kurtosis": self.kurtosis,
        })


# ============================================================================
# Primitive Estimators
# ============================================================================

def mean(values: Sequence[float]) -> float:
    """Arithmetic mean; 0.0 for an empty sequence."""
    if len(values) == 0:
        return 0.0
    return float(np.mean(np.asarray(values, dtype=float)))


def variance(values: Sequence[float]) -> float:
    """Unbiased sample variance; 0.0 when fewer than two values."""
    if len(values) < 2:
        return 0.0
    return float(np.var(np.asarray(values, dtype=float), ddof=1))


def std_dev(values: Sequence[float]) -> float:
    return math.sqrt(variance(values))


def quantile(sorted_values: Sequence[float], q: float) -> float:
    """
    Quantile by linear interpolation between order statistics.

    position = (n - 1) * q, which is pandas' default ``linear`` method.
    """
    if len(sorted_values) == 0:
        raise ValueError("quantile of an empty sequence")
    return float(pd.Series(sorted_values, dtype=float).quantile(q))


def median(values: Sequence[float]) -> float:
    return quantile(sorted(values), 0.5)


def compute_mode(values: Sequence[float], limit: Optional[int] = None) -> ModeResult:
    """
    Tied most-frequent values in ascending order.

    No mode when every value occurs once. At most ``limit`` values are
    kept; ``overflow`` records that more were tied.
    """
    if len(values) == 0:
        return ModeResult()
    if limit is None:
        limit = get_settings().stats.mode_display_limit

    uniques, counts = np.unique(np.asarray(values, dtype=float), return_counts=True)
    max_freq = int(counts.max())
    if max_freq == 1:
        return ModeResult()

    tied = [float(v) for v in uniques[counts == max_freq]]
    return ModeResult(
        values=tuple(tied[:limit]),
        frequency=max_freq,
        overflow=len(tied) > limit
    )


def _format_number(value: float) -> str:
    if math.isfinite(value) and value.is_integer():
        return str(int(value))
    return repr(value)


def format_mode(mode: ModeResult) -> str:
    """Display string for a mode: "5", "1, 2", "1, 2, 3, 4, 5..." or "no mode"."""
    if not mode.has_mode:
        return NO_MODE
    text = ", ".join(_format_number(v) for v in mode.values)
    return text + OVERFLOW_MARKER if mode.overflow else text


def coefficient_of_variation(std_value: float, mean_value: float) -> float:
    """Standard deviation as a percentage of |mean|; 0.0 when the mean is 0."""
    if mean_value == 0:
        return 0.0
    return std_value / abs(mean_value) * 100


def _shape_statistic(values: Sequence[float], min_count: int, statistic) -> float:
    if len(values) < min_count or std_dev(values) <= 0:
        return 0.0
    result = float(statistic(np.asarray(values, dtype=float), bias=False))
    # scipy returns NaN for nearly-constant data
    return result if math.isfinite(result) else 0.0


def skewness(values: Sequence[float]) -> float:
    """Adjusted Fisher-Pearson sample skewness; 0.0 below three values or without spread."""
    return _shape_statistic(values, 3, scipy_stats.skew)


def kurtosis(values: Sequence[float]) -> float:
    """Sample excess kurtosis; 0.0 below four values or without spread."""
    return _shape_statistic(values, 4, scipy_stats.kurtosis)


# ============================================================================
# Calculator
# ============================================================================

def calculate_stats(values: Iterable[float], label: str) -> Optional[VariableStats]:
    """
    Full metric set for one column.

    Returns None for an empty sequence; the column is then reported as
    having insufficient data rather than failing the pass.
    """
    ordered = sorted(float(v) for v in values)
    n = len(ordered)
    if n == 0:
        return None

    mean_value = mean(ordered)
    var_value = variance(ordered)
    std_value = math.sqrt(var_value)
    median_value = quantile(ordered, 0.5)
    mode = compute_mode(ordered)

    return VariableStats(
        variable_name=label,
        count=n,
        mean=mean_value,
        median=median_value,
        mode=format_mode(mode),
        std_dev=std_value,
        variance=var_value,
        coeff_variation=coefficient_of_variation(std_value, mean_value),
        range=ordered[-1] - ordered[0],
        min=ordered[0],
        max=ordered[-1],
        q1=quantile(ordered, 0.25),
        q2=median_value,
        q3=quantile(ordered, 0.75),
        p10=quantile(ordered, 0.10),
        p90=quantile(ordered, 0.90),
        skewness=skewness(ordered),
        kurtosis=kurtosis(ordered),
        mode_detail=mode,
    )


def stats_to_frame(stats: List[VariableStats]) -> pd.DataFrame:
    """Tabular view with one row per variable, indexed by variable name."""
    if not stats:
        return pd.DataFrame()
    records = [s.to_dict() for s in stats]
    return pd.DataFrame.from_records(records).set_index("variableName")
