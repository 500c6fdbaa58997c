# statlab - Core Package
"""
Core package containing fundamental components:
- Configuration management
- Exception hierarchy
- Logging infrastructure
- Serialization helpers
"""

from statlab.core.config import Settings, StatsConfig, get_settings
from statlab.core.exceptions import (
    BaseApplicationException,
    ErrorCode,
    ValidationException,
    RequestException,
    EmptyDatasetException,
    MissingVariableException,
    DataException,
    ColumnNotFoundException,
    InsufficientDataException,
    ComputationException,
    ZeroVarianceException,
)
from statlab.core.logging import (
    LogContext,
    get_logger,
    set_request_context,
    clear_request_context,
    log_execution_time,
)
from statlab.core.serialization import to_jsonable

__all__ = [
    # Config
    "Settings",
    "StatsConfig",
    "get_settings",
    # Exceptions
    "BaseApplicationException",
    "ErrorCode",
    "ValidationException",
    "RequestException",
    "EmptyDatasetException",
    "MissingVariableException",
    "DataException",
    "ColumnNotFoundException",
    "InsufficientDataException",
    "ComputationException",
    "ZeroVarianceException",
    # Logging
    "LogContext",
    "get_logger",
    "set_request_context",
    "clear_request_context",
    "log_execution_time",
    # Serialization
    "to_jsonable",
]
