# statlab - Inferential Analysis Orchestrator
# Chooses and runs estimation, correlation/regression and group comparisons
# for one primary variable and an optional secondary variable

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Sequence, Union

from statlab.core.config import StatsConfig, get_settings
from statlab.core.exceptions import (
    BaseApplicationException,
    DataException,
    EmptyDatasetException,
    MissingVariableException,
)
from statlab.core.logging import get_logger, log_execution_time
from statlab.core.serialization import to_jsonable
from statlab.stats.classification import VariableKind, classify
from statlab.stats.extraction import (
    DataRow,
    extract_column,
    extract_groups,
    extract_numeric,
    extract_pairs,
    require_column,
)
from statlab.stats.primitives import (
    confidence_interval,
    linear_regression,
    pearson_correlation,
    two_sample_t_test,
)

logger = get_logger(__name__)

SIGNIFICANT_DIFFERENCE = "likely significant difference"
NO_EVIDENCE_OF_DIFFERENCE = "no strong evidence of difference"


# ============================================================================
# Enums and Data Classes
# ============================================================================

class AnalysisType(str, Enum):
    """Kind of inferential procedure behind a result."""
    ESTIMATION = "estimation"
    CORRELATION = "correlation"
    REGRESSION = "regression"
    HYPOTHESIS = "hypothesis"
    ANOVA = "anova"
    NONPARAMETRIC = "nonparametric"


class CorrelationStrength(str, Enum):
    """Qualitative strength of a Pearson coefficient."""
    STRONG = "strong"
    MODERATE = "moderate"
    WEAK = "weak"


@dataclass
class ResultMetric:
    """One labelled figure of an inferential result."""
    label: str
    value: Union[str, int, float]
    is_significant: Optional[bool] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"label": self.label, "value": self.value}
        if self.is_significant is not None:
            data["isSignificant"] = self.is_significant
        return to_jsonable(data)


@dataclass
class InferentialResult:
    """Outcome of a single inferential procedure."""
    title: str
    type: AnalysisType
    description: str
    metrics: List[ResultMetric] = field(default_factory=list)
    conclusion: Optional[str] = None

    def metric(self, label: str) -> Optional[ResultMetric]:
        """Look up a metric by label."""
        return next((m for m in self.metrics if m.label == label), None)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "title": self.title,
            "type": self.type.value,
            "description": self.description,
            "metrics": [m.to_dict() for m in self.metrics],
        }
        if self.conclusion is not None:
            data["conclusion"] = self.conclusion
        return data


# ============================================================================
# Inferential Analysis Engine
# ============================================================================

class InferentialAnalysisEngine:
    """
    Decides which procedures apply to a variable pair and runs them.

    Order of evaluation:
    1. Estimation of the primary variable's mean (always, given data)
    2. Correlation and regression when the secondary variable is numeric
    3. Two-group t-test or ANOVA placeholder when it is categorical

    A failure inside one procedure drops only that result.
    """

    def __init__(self, config: Optional[StatsConfig] = None, verbose: bool = True):
        self.config = config or get_settings().stats
        self.verbose = verbose

    @log_execution_time(operation_name="inferential_analysis")
    def analyze(
        self,
        var1: Optional[str],
        var2: Optional[str],
        rows: Sequence[DataRow]
    ) -> List[InferentialResult]:
        """Run every applicable procedure; raises only for malformed requests."""
        if not var1 or not str(var1).strip():
            raise MissingVariableException("var1")
        if not rows:
            raise EmptyDatasetException()
        var2 = var2 or None

        results: List[InferentialResult] = []

        try:
            require_column(rows, var1)
        except DataException as e:
            logger.warning(f"Skipping inferential analysis: {e.message}")
            return results

        primary = extract_numeric(rows, var1)
        if self.verbose:
            logger.info(
                f"Inferential analysis of '{var1}'" + (f" against '{var2}'" if var2 else ""),
                valid_values=len(primary)
            )

        if primary:
            self._attempt(results, "estimation", lambda: [self._estimation(var1, primary)])

        if var2 is None:
            return results

        try:
            require_column(rows, var2)
        except DataException as e:
            logger.warning(f"Skipping two-variable procedures: {e.message}")
            return results

        kind = classify(
            extract_column(rows, var2),
            sample_size=self.config.classifier_sample_size,
            threshold=self.config.categorical_threshold
        )

        if kind == VariableKind.NUMERIC:
            secondary = extract_numeric(rows, var2)
            if len(secondary) == len(primary):
                xs, ys = extract_pairs(rows, var1, var2)
                self._attempt(results, "correlation", lambda: [self._correlation(var1, var2, xs, ys)])
                self._attempt(results, "regression", lambda: [self._regression(xs, ys)])
            elif self.verbose:
                logger.info(
                    "Valid value counts differ; correlation skipped",
                    primary=len(primary),
                    secondary=len(secondary)
                )
        else:
            groups = extract_groups(rows, var1, var2)
            if len(groups) == 2:
                self._attempt(results, "t_test", lambda: [self._t_test(groups)])
            elif len(groups) > 2:
                self._attempt(results, "anova", lambda: [self._anova_placeholder(groups)])

        return results

    def _attempt(
        self,
        results: List[InferentialResult],
        name: str,
        build: Callable[[], List[InferentialResult]]
    ) -> None:
        try:
            results.extend(build())
        except (BaseApplicationException, ArithmeticError, ValueError) as e:
            logger.warning(f"Dropped {name} result: {e}")

    # ------------------------------------------------------------------------
    # Procedures
    # ------------------------------------------------------------------------

    def _fmt(self, value: float, decimals: Optional[int] = None) -> str:
        decimals = self.config.display_decimals if decimals is None else decimals
        # adding 0.0 turns a rounded -0.0 into 0.0
        return f"{round(value, decimals) + 0.0:.{decimals}f}"

    def _estimation(self, name: str, values: Sequence[float]) -> InferentialResult:
        ci95 = confidence_interval(values, self.config.z_95)
        ci99 = confidence_interval(values, self.config.z_99)
        return InferentialResult(
            title=f"Point and Interval Estimation: {name}",
            type=AnalysisType.ESTIMATION,
            description="Confidence intervals for the population mean (normal approximation).",
            metrics=[
                ResultMetric("Sample Mean", self._fmt(ci95.mean)),
                ResultMetric("Standard Deviation", self._fmt(ci95.std)),
                ResultMetric("N", ci95.n),
                ResultMetric("95% CI", f"[{self._fmt(ci95.lower)}, {self._fmt(ci95.upper)}]"),
                ResultMetric("99% CI", f"[{self._fmt(ci99.lower)}, {self._fmt(ci99.upper)}]"),
            ],
        )

    def correlation_strength(self, r: float) -> CorrelationStrength:
        magnitude = abs(r)
        if magnitude > self.config.strong_correlation:
            return CorrelationStrength.STRONG
        if magnitude > self.config.moderate_correlation:
            return CorrelationStrength.MODERATE
        return CorrelationStrength.WEAK

    def _correlation(
        self,
        x_name: str,
        y_name: str,
        xs: Sequence[float],
        ys: Sequence[float]
    ) -> InferentialResult:
        r = pearson_correlation(xs, ys)
        return InferentialResult(
            title="Pearson Correlation",
            type=AnalysisType.CORRELATION,
            description=f"Linear relationship between {x_name} (X) and {y_name} (Y).",
            metrics=[
                ResultMetric("Coefficient (r)", self._fmt(r)),
                ResultMetric("Interpretation", self.correlation_strength(r).value),
                ResultMetric("Pairs", len(xs)),
            ],
        )

    def equation(self, slope: float, intercept: float) -> str:
        decimals = self.config.equation_decimals
        intercept = round(intercept, decimals)
        sign = "-" if intercept < 0 else "+"
        return f"y = {self._fmt(slope, decimals)}x {sign} {self._fmt(abs(intercept), decimals)}"

    def _regression(self, xs: Sequence[float], ys: Sequence[float]) -> InferentialResult:
        line = linear_regression(xs, ys)
        return InferentialResult(
            title="Simple Linear Regression",
            type=AnalysisType.REGRESSION,
            description="Predictive model y = mx + b",
            metrics=[
                ResultMetric("Slope (m)", self._fmt(line.slope)),
                ResultMetric("Intercept (b)", self._fmt(line.intercept)),
                ResultMetric("R² (coef. of determination)", self._fmt(line.r_squared)),
                ResultMetric("Equation", self.equation(line.slope, line.intercept)),
            ],
        )

    def _t_test(self, groups: Dict[str, List[float]]) -> InferentialResult:
        (label1, sample1), (label2, sample2) = groups.items()
        test = two_sample_t_test(sample1, sample2)
        threshold = self.config.t_significance_threshold
        significant = abs(test.t) > threshold
        return InferentialResult(
            title="Student's t-Test (2 Groups)",
            type=AnalysisType.HYPOTHESIS,
            description=f"Comparison of means between {label1} and {label2}.",
            metrics=[
                ResultMetric("t Statistic", self._fmt(test.t), is_significant=significant),
                ResultMetric("Null Hypothesis (H0)", "Equal means"),
                ResultMetric("Size G1", test.n1),
                ResultMetric("Size G2", test.n2),
            ],
            conclusion=(
                f"{SIGNIFICANT_DIFFERENCE} (|t| > {threshold})" if significant
                else NO_EVIDENCE_OF_DIFFERENCE
            ),
        )

    def _anova_placeholder(self, groups: Dict[str, List[float]]) -> InferentialResult:
        return InferentialResult(
            title="Analysis of Variance (ANOVA)",
            type=AnalysisType.ANOVA,
            description=f"Comparison across {len(groups)} detected groups.",
            metrics=[
                ResultMetric("Groups", ", ".join(groups)),
                ResultMetric("Group Sizes", ", ".join(f"{k}: {len(v)}" for k, v in groups.items())),
                ResultMetric(
                    "Note",
                    "F-statistic and p-value are not computed; an F distribution is required for an exact p-value."
                ),
            ],
        )


# ============================================================================
# Factory Functions
# ============================================================================

def get_inferential_engine(config: Optional[StatsConfig] = None) -> InferentialAnalysisEngine:
    """Get inferential analysis engine."""
    return InferentialAnalysisEngine(config=config)
