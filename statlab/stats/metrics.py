# statlab - Metric Catalog
# Read-only presentation metadata for every descriptive metric

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional


class MetricCategory(str, Enum):
    """Grouping used when presenting descriptive metrics."""
    GENERAL = "General"
    CENTRAL_TENDENCY = "Central Tendency"
    DISPERSION = "Dispersion"
    POSITION = "Position"
    SHAPE = "Shape"


@dataclass(frozen=True)
class MetricDefinition:
    """Label and explanation for one VariableStats field."""
    id: str  # key in VariableStats.to_dict()
    label: str
    description: str
    category: MetricCategory

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "label": self.label,
            "description": self.description,
            "category": self.category.value,
        }


METRIC_DEFINITIONS: tuple[MetricDefinition, ...] = (
    MetricDefinition("count", "N", "Count of valid numeric observations.", MetricCategory.GENERAL),
    MetricDefinition("mean", "Mean", "Arithmetic average of the data set.", MetricCategory.CENTRAL_TENDENCY),
    MetricDefinition("median", "Median", "Middle value separating the upper half of the data from the lower half.", MetricCategory.CENTRAL_TENDENCY),
    MetricDefinition("mode", "Mode", "Value(s) that appear most often in the data set.", MetricCategory.CENTRAL_TENDENCY),
    MetricDefinition("stdDev", "Std. Dev.", "Standard deviation: amount of variation or dispersion of the values.", MetricCategory.DISPERSION),
    MetricDefinition("variance", "Variance", "Expected squared deviation of the values from their mean.", MetricCategory.DISPERSION),
    MetricDefinition("coeffVariation", "CV %", "Coefficient of variation: standard deviation relative to the mean.", MetricCategory.DISPERSION),
    MetricDefinition("range", "Range", "Difference between the largest and smallest values.", MetricCategory.DISPERSION),
    MetricDefinition("q1", "Q1", "First quartile (25th percentile).", MetricCategory.POSITION),
    MetricDefinition("q2", "Q2", "Second quartile (50th percentile), equal to the median.", MetricCategory.POSITION),
    MetricDefinition("q3", "Q3", "Third quartile (75th percentile).", MetricCategory.POSITION),
    MetricDefinition("p10", "P10", "10th percentile.", MetricCategory.POSITION),
    MetricDefinition("p90", "P90", "90th percentile.", MetricCategory.POSITION),
    MetricDefinition("skewness", "Skewness", "Asymmetry of the distribution about its mean.", MetricCategory.SHAPE),
    MetricDefinition("kurtosis", "Kurtosis", "Excess tail-heaviness relative to a normal distribution.", MetricCategory.SHAPE),
)

_BY_ID = {definition.id: definition for definition in METRIC_DEFINITIONS}


def get_metric_definition(metric_id: str) -> Optional[MetricDefinition]:
    return _BY_ID.get(metric_id)


def metrics_by_category(category: MetricCategory) -> List[MetricDefinition]:
    return [d for d in METRIC_DEFINITIONS if d.category == category]
