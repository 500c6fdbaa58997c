# statlab - Statistics Package
"""Stateless statistics modules - Complete Module Exports."""

# Sanitizing and extraction
from statlab.stats.sanitizer import (
    normalize_key,
    normalize_row,
    sanitize_value,
)
from statlab.stats.extraction import (
    extract_numeric,
    extract_column,
    extract_pairs,
    extract_groups,
    rows_from_frame,
)

# Classification
from statlab.stats.classification import (
    VariableKind,
    classify,
)

# Descriptive
from statlab.stats.descriptive import (
    ModeResult,
    VariableStats,
    calculate_stats,
    compute_mode,
    format_mode,
    quantile,
    stats_to_frame,
)
from statlab.stats.metrics import (
    METRIC_DEFINITIONS,
    MetricCategory,
    MetricDefinition,
)

# Inferential
from statlab.stats.primitives import (
    confidence_interval,
    linear_regression,
    pearson_correlation,
    two_sample_t_test,
)
from statlab.stats.inferential import (
    AnalysisType,
    InferentialAnalysisEngine,
    InferentialResult,
    ResultMetric,
    get_inferential_engine,
)

__all__ = [
    "normalize_key",
    "normalize_row",
    "sanitize_value",
    "extract_numeric",
    "extract_column",
    "extract_pairs",
    "extract_groups",
    "rows_from_frame",
    "VariableKind",
    "classify",
    "ModeResult",
    "VariableStats",
    "calculate_stats",
    "compute_mode",
    "format_mode",
    "quantile",
    "stats_to_frame",
    "METRIC_DEFINITIONS",
    "MetricCategory",
    "MetricDefinition",
    "confidence_interval",
    "linear_regression",
    "pearson_correlation",
    "two_sample_t_test",
    "AnalysisType",
    "InferentialAnalysisEngine",
    "InferentialResult",
    "ResultMetric",
    "get_inferential_engine",
]
