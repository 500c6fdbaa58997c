# statlab - Statistics Service
# Public entry points for descriptive and inferential requests

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence

from pydantic import ValidationError

from statlab.api.schemas import (
    DescriptiveRequest,
    EngineResponse,
    InferentialRequest,
    ResponseType,
    engine_request_adapter,
)
from statlab.core.exceptions import BaseApplicationException, EmptyDatasetException
from statlab.core.logging import (
    clear_request_context,
    get_logger,
    log_execution_time,
    set_request_context,
)
from statlab.stats.descriptive import VariableStats, calculate_stats
from statlab.stats.extraction import collect_headers, extract_numeric
from statlab.stats.inferential import InferentialAnalysisEngine, InferentialResult
from statlab.stats.sanitizer import normalize_key, normalize_row

logger = get_logger(__name__)


@dataclass
class DescriptiveResult:
    """Descriptive pass output for a whole dataset."""
    stats: List[VariableStats] = field(default_factory=list)
    headers: List[str] = field(default_factory=list)
    row_count: int = 0

    @property
    def skipped_columns(self) -> List[str]:
        """Headers without a single numeric value."""
        computed = {s.variable_name for s in self.stats}
        return [h for h in self.headers if h not in computed]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "stats": [s.to_dict() for s in self.stats],
            "headers": list(self.headers),
            "rowCount": self.row_count,
        }


def _normalize_rows(rows: Sequence[Mapping[Any, Any]]) -> List[Dict[str, Any]]:
    return [normalize_row(row) for row in rows]


@log_execution_time(operation_name="descriptive_analysis")
def compute_descriptive(rows: Sequence[Mapping[Any, Any]]) -> DescriptiveResult:
    """
    Descriptive statistics for every column of the dataset.

    Columns without numeric values are listed in ``headers`` but produce
    no VariableStats. Input rows are never modified.

    Raises:
        EmptyDatasetException: if ``rows`` is empty.
    """
    if not rows:
        raise EmptyDatasetException()

    normalized = _normalize_rows(rows)
    headers = collect_headers(normalized)

    stats = []
    for header in headers:
        column_stats = calculate_stats(extract_numeric(normalized, header), header)
        if column_stats is not None:
            stats.append(column_stats)

    logger.info(
        f"Computed descriptive statistics for {len(stats)} of {len(headers)} columns",
        rows=len(rows)
    )
    return DescriptiveResult(stats=stats, headers=headers, row_count=len(rows))


def run_inferential(
    var1: Optional[str],
    var2: Optional[str],
    rows: Sequence[Mapping[Any, Any]],
    engine: Optional[InferentialAnalysisEngine] = None
) -> List[InferentialResult]:
    """
    Inferential procedures for ``var1`` (and ``var2`` when given).

    Raises:
        MissingVariableException: if ``var1`` is empty.
        EmptyDatasetException: if ``rows`` is empty.
    """
    engine = engine or InferentialAnalysisEngine()
    return engine.analyze(
        normalize_key(var1) or "",
        normalize_key(var2),
        _normalize_rows(rows)
    )


class StatisticsService:
    """
    Request/response facade over the statistics engine.

    Every request yields exactly one EngineResponse; a failing request
    produces an ERROR response carrying a message and leaves the service
    ready for the next request.
    """

    def __init__(self, engine: Optional[InferentialAnalysisEngine] = None):
        self.engine = engine or InferentialAnalysisEngine()

    def handle_message(self, message: Mapping[str, Any]) -> EngineResponse:
        """Validate a raw message (e.g. decoded JSON) and handle it."""
        try:
            request = engine_request_adapter.validate_python(message)
        except ValidationError as e:
            logger.warning("Rejected malformed request", errors=e.error_count())
            return EngineResponse.error(f"Invalid request: {e.errors()[0]['msg']}")
        return self.handle(request)

    def handle(self, request: DescriptiveRequest | InferentialRequest) -> EngineResponse:
        request_id = set_request_context()
        try:
            if isinstance(request, DescriptiveRequest):
                result = compute_descriptive(request.rows)
                return EngineResponse(
                    type=ResponseType.DESCRIPTIVE_RESULT,
                    payload=result.to_dict(),
                    request_id=request_id
                )
            results = run_inferential(request.var1, request.var2, request.rows, engine=self.engine)
            return EngineResponse(
                type=ResponseType.INFERENTIAL_RESULT,
                payload=[r.to_dict() for r in results],
                request_id=request_id
            )
        except BaseApplicationException as e:
            logger.warning(f"Request failed: {e}", error=e.to_dict())
            return EngineResponse.error(e.message, request_id=request_id)
        except Exception as e:
            logger.exception(f"Unexpected failure while handling request: {e}")
            return EngineResponse.error(f"Processing failed: {e}", request_id=request_id)
        finally:
            clear_request_context()


def get_statistics_service() -> StatisticsService:
    """Get statistics service."""
    return StatisticsService()
