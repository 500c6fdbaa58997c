# statlab - Variable Type Classifier
# Prefix-sample heuristic labelling a column numeric or categorical

from __future__ import annotations

from enum import Enum
from typing import Any, Optional, Sequence

from statlab.core.config import get_settings
from statlab.core.logging import get_logger
from statlab.stats.sanitizer import is_boolean, is_missing, sanitize_value

logger = get_logger(__name__)


class VariableKind(str, Enum):
    """Measurement level of a column."""
    NUMERIC = "numeric"
    CATEGORICAL = "categorical"


def numeric_fraction(sample: Sequence[Any]) -> float:
    """Share of values in the sample that parse as numbers (booleans excluded)."""
    if not sample:
        return 0.0
    numeric = sum(
        1 for value in sample
        if not is_boolean(value) and sanitize_value(value) is not None
    )
    return numeric / len(sample)


def classify(
    column_values: Sequence[Any],
    sample_size: Optional[int] = None,
    threshold: Optional[float] = None
) -> VariableKind:
    """
    Classify a column from its leading values.

    Only the first ``sample_size`` non-missing values are inspected, so a
    column whose text labels start late is still reported numeric. Callers
    that need a guarantee must scan the column themselves.
    """
    config = get_settings().stats
    sample_size = config.classifier_sample_size if sample_size is None else sample_size
    threshold = config.categorical_threshold if threshold is None else threshold

    present = [value for value in column_values if not is_missing(value)]
    sample = present[:sample_size]
    fraction = numeric_fraction(sample)

    kind = VariableKind.CATEGORICAL if fraction < threshold else VariableKind.NUMERIC
    logger.debug(
        "Classified column sample",
        sample_size=len(sample),
        numeric_fraction=round(fraction, 3),
        kind=kind.value
    )
    return kind
