# statlab - Custom Exceptions
# Exception hierarchy with error codes, context, and recovery hints

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4


class ErrorCode(str, Enum):
    """Standardized error codes for engine responses and logging."""

    # General errors (1xxx)
    UNKNOWN_ERROR = "E1000"
    VALIDATION_ERROR = "E1001"
    CONFIGURATION_ERROR = "E1002"

    # Request errors (2xxx)
    INVALID_REQUEST = "E2000"
    MISSING_VARIABLE = "E2001"
    EMPTY_DATASET = "E2002"

    # Data errors (3xxx)
    COLUMN_NOT_FOUND = "E3000"
    INSUFFICIENT_DATA = "E3001"

    # Computation errors (4xxx)
    COMPUTATION_ERROR = "E4000"
    ZERO_VARIANCE = "E4001"
    NON_FINITE_RESULT = "E4002"


@dataclass(frozen=True)
class ErrorContext:
    """Immutable context information for error tracking and debugging."""

    error_id: UUID = field(default_factory=uuid4)
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    component: str = ""
    operation: str = ""
    request_id: Optional[str] = None
    additional_data: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging/serialization."""
        return {
            "error_id": str(self.error_id),
            "timestamp": self.timestamp.isoformat(),
            "component": self.component,
            "operation": self.operation,
            "request_id": self.request_id,
            "additional_data": self.additional_data
        }


class BaseApplicationException(Exception):
    """
    Base exception class for all statlab exceptions.

    Carries an error code, optional context and a recovery hint so that
    a failed request can be reported as a structured error message.
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.UNKNOWN_ERROR,
        context: Optional[ErrorContext] = None,
        cause: Optional[Exception] = None,
        recovery_hint: Optional[str] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context = context or ErrorContext()
        self.cause = cause
        self.recovery_hint = recovery_hint

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for error responses."""
        return {
            "error": True,
            "error_code": self.error_code.value,
            "error_type": self.__class__.__name__,
            "message": self.message,
            "recovery_hint": self.recovery_hint,
            "context": self.context.to_dict(),
            "cause": str(self.cause) if self.cause else None
        }

    def __str__(self) -> str:
        return f"[{self.error_code.value}] {self.message}"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message='{self.message}', "
            f"error_code={self.error_code}, "
            f"error_id={self.context.error_id})"
        )


# ============================================================================
# Request Exceptions
# ============================================================================

class ValidationException(BaseApplicationException):
    """Exception for input validation failures."""

    def __init__(
        self,
        message: str,
        field_errors: Optional[dict[str, list[str]]] = None,
        **kwargs: Any
    ) -> None:
        kwargs.setdefault("error_code", ErrorCode.VALIDATION_ERROR)
        super().__init__(message=message, **kwargs)
        self.field_errors = field_errors or {}

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["field_errors"] = self.field_errors
        return result


class RequestException(ValidationException):
    """
    Structurally invalid request (missing variable name, empty dataset).

    The only failure that surfaces to the caller; it ends the current
    request and leaves the engine usable for the next one.
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.INVALID_REQUEST,
        **kwargs: Any
    ) -> None:
        super().__init__(message=message, error_code=error_code, **kwargs)


class EmptyDatasetException(RequestException):
    """Exception when a request arrives with no rows."""

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(
            message="The dataset is empty",
            error_code=ErrorCode.EMPTY_DATASET,
            recovery_hint="Load a file that contains at least one data row",
            **kwargs
        )


class MissingVariableException(RequestException):
    """Exception when the required primary variable is not named."""

    def __init__(self, field_name: str = "var1", **kwargs: Any) -> None:
        super().__init__(
            message=f"A primary variable must be selected ('{field_name}' is empty)",
            error_code=ErrorCode.MISSING_VARIABLE,
            field_errors={field_name: ["required"]},
            recovery_hint="Select a numeric variable to analyze",
            **kwargs
        )
        self.field_name = field_name


# ============================================================================
# Data Exceptions
# ============================================================================

class DataException(BaseApplicationException):
    """Base exception for data-related conditions."""
    pass


class ColumnNotFoundException(DataException):
    """Exception when a referenced column is absent from every row."""

    def __init__(self, column_name: str, **kwargs: Any) -> None:
        super().__init__(
            message=f"Column '{column_name}' not found",
            error_code=ErrorCode.COLUMN_NOT_FOUND,
            recovery_hint="Verify the column header and try again",
            **kwargs
        )
        self.column_name = column_name


class InsufficientDataException(DataException):
    """Exception when data is insufficient for a statistic."""

    def __init__(
        self,
        required_samples: int,
        actual_samples: int,
        **kwargs: Any
    ) -> None:
        super().__init__(
            message=f"Insufficient data: required {required_samples}, got {actual_samples}",
            error_code=ErrorCode.INSUFFICIENT_DATA,
            recovery_hint=f"Provide at least {required_samples} valid values",
            **kwargs
        )
        self.required_samples = required_samples
        self.actual_samples = actual_samples


# ============================================================================
# Computation Exceptions
# ============================================================================

class ComputationException(BaseApplicationException):
    """Arithmetic singularity inside a single statistic."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.COMPUTATION_ERROR,
        **kwargs: Any
    ) -> None:
        super().__init__(message=message, error_code=error_code, **kwargs)


class ZeroVarianceException(ComputationException):
    """Exception when a ratio would divide by a zero spread."""

    def __init__(self, statistic: str, **kwargs: Any) -> None:
        super().__init__(
            message=f"{statistic} is undefined for zero-variance input",
            error_code=ErrorCode.ZERO_VARIANCE,
            **kwargs
        )
        self.statistic = statistic
