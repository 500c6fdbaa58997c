# statlab - Statistics Engine
"""Descriptive and inferential statistics over tabular row data."""

from statlab.services.statistics_service import (
    DescriptiveResult,
    StatisticsService,
    compute_descriptive,
    get_statistics_service,
    run_inferential,
)
from statlab.stats.descriptive import VariableStats
from statlab.stats.inferential import AnalysisType, InferentialResult, ResultMetric
from statlab.stats.metrics import METRIC_DEFINITIONS, MetricDefinition

__version__ = "1.0.0"

__all__ = [
    "DescriptiveResult",
    "StatisticsService",
    "compute_descriptive",
    "get_statistics_service",
    "run_inferential",
    "VariableStats",
    "AnalysisType",
    "InferentialResult",
    "ResultMetric",
    "METRIC_DEFINITIONS",
    "MetricDefinition",
]
