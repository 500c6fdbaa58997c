# statlab - Statistical Primitives
# Confidence intervals, Pearson correlation, least-squares regression, pooled t

from __future__ import annotations

import math
import warnings
from dataclasses import dataclass
from typing import Sequence

import numpy as np
from scipy import stats as scipy_stats

from statlab.core.exceptions import (
    ComputationException,
    ErrorCode,
    InsufficientDataException,
    ZeroVarianceException,
)
from statlab.stats.descriptive import mean, std_dev, variance

warnings.filterwarnings('ignore')


# ============================================================================
# Data Classes
# ============================================================================

@dataclass(frozen=True)
class ConfidenceInterval:
    """Normal-approximation interval for a population mean."""
    mean: float
    std: float
    n: int
    z: float
    lower: float
    upper: float

    @property
    def margin(self) -> float:
        return self.upper - self.mean


@dataclass(frozen=True)
class RegressionLine:
    """Ordinary least-squares fit y = slope * x + intercept."""
    slope: float
    intercept: float
    r: float

    @property
    def r_squared(self) -> float:
        return self.r ** 2


@dataclass(frozen=True)
class TwoSampleTTest:
    """Pooled-variance independent two-sample t statistic."""
    t: float
    n1: int
    n2: int
    mean1: float
    mean2: float
    degrees_of_freedom: int


def _finite(value: float, statistic: str) -> float:
    value = float(value)
    if not math.isfinite(value):
        raise ComputationException(
            f"{statistic} is not finite",
            error_code=ErrorCode.NON_FINITE_RESULT
        )
    return value


# ============================================================================
# Estimation
# ============================================================================

def confidence_interval(values: Sequence[float], z: float) -> ConfidenceInterval:
    """mean +/- z * s / sqrt(n), with the sample standard deviation s."""
    n = len(values)
    if n == 0:
        raise InsufficientDataException(required_samples=1, actual_samples=0)
    m = mean(values)
    s = std_dev(values)
    margin = z * s / math.sqrt(n)
    return ConfidenceInterval(
        mean=m,
        std=s,
        n=n,
        z=z,
        lower=_finite(m - margin, "confidence interval"),
        upper=_finite(m + margin, "confidence interval"),
    )


# ============================================================================
# Association
# ============================================================================

def _check_paired(xs: Sequence[float], ys: Sequence[float]) -> None:
    if len(xs) != len(ys):
        raise ComputationException(
            f"paired samples differ in length ({len(xs)} vs {len(ys)})"
        )
    if len(xs) < 2:
        raise InsufficientDataException(required_samples=2, actual_samples=len(xs))


def pearson_correlation(xs: Sequence[float], ys: Sequence[float]) -> float:
    """Sample Pearson r of two row-aligned sequences."""
    _check_paired(xs, ys)
    if variance(xs) == 0 or variance(ys) == 0:
        raise ZeroVarianceException("Pearson correlation")
    r, _ = scipy_stats.pearsonr(np.asarray(xs, dtype=float), np.asarray(ys, dtype=float))
    return _finite(r, "Pearson correlation")


def linear_regression(xs: Sequence[float], ys: Sequence[float]) -> RegressionLine:
    """Least-squares line of ys on xs."""
    _check_paired(xs, ys)
    if variance(xs) == 0:
        raise ZeroVarianceException("Linear regression slope")
    fit = scipy_stats.linregress(np.asarray(xs, dtype=float), np.asarray(ys, dtype=float))
    return RegressionLine(
        slope=_finite(fit.slope, "regression slope"),
        intercept=_finite(fit.intercept, "regression intercept"),
        r=float(fit.rvalue) if math.isfinite(fit.rvalue) else 0.0,
    )


# ============================================================================
# Hypothesis Tests
# ============================================================================

def two_sample_t_test(sample1: Sequence[float], sample2: Sequence[float]) -> TwoSampleTTest:
    """
    Student's t for two independent samples with pooled variance.

    Each sample needs at least two values, and the pooled variance must be
    positive for the statistic to exist.
    """
    n1, n2 = len(sample1), len(sample2)
    if min(n1, n2) < 2:
        raise InsufficientDataException(required_samples=2, actual_samples=min(n1, n2))

    pooled = ((n1 - 1) * variance(sample1) + (n2 - 1) * variance(sample2)) / (n1 + n2 - 2)
    if pooled == 0:
        raise ZeroVarianceException("t statistic")

    result = scipy_stats.ttest_ind(
        np.asarray(sample1, dtype=float),
        np.asarray(sample2, dtype=float),
        equal_var=True
    )
    return TwoSampleTTest(
        t=_finite(result.statistic, "t statistic"),
        n1=n1,
        n2=n2,
        mean1=mean(sample1),
        mean2=mean(sample2),
        degrees_of_freedom=n1 + n2 - 2,
    )
