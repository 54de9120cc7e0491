"""
Infrastructure layer

Provides:
- RequestExecutor: single-shot httpx executor
- CorrelationContext, BatchLogger: batch-scoped correlation ids in logs
- setup_logging: console / rotating file handlers for the package logger
"""

from .http import RequestExecutor, extract_error_message
from .context import (
    BatchLogger,
    CorrelationContext,
    CorrelationFilter,
    get_correlation_id,
    setup_logging,
)

__all__ = [
    "RequestExecutor",
    "extract_error_message",
    "BatchLogger",
    "CorrelationContext",
    "CorrelationFilter",
    "get_correlation_id",
    "setup_logging",
]
