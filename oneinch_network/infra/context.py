"""
Batch-scoped logging

A batch runs inside a CorrelationContext; every record emitted while it is
active carries the same correlation_id attribute, so a whole batch can be
grepped out of a shared log.
"""

import contextvars
import logging
import uuid
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, MutableMapping, Optional, Tuple

from ..config import LoggingConfig, config as global_config

_correlation_id: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar(
    "oneinch_correlation_id", default=None
)

ROOT_LOGGER = "oneinch_network"


def get_correlation_id() -> Optional[str]:
    """Correlation id of the batch running in this context, if any"""
    return _correlation_id.get()


class CorrelationContext:
    """
    Bind a fresh correlation id for the duration of a with-block

    Usage:
        with CorrelationContext("swap.getQuote") as cid:
            ...  # cid == "swap.getQuote_3f9a1c0b2e4d"
    """

    def __init__(self, operation: str):
        self.correlation_id = f"{operation}_{uuid.uuid4().hex[:12]}"
        self._token: Optional[contextvars.Token] = None

    def __enter__(self) -> str:
        self._token = _correlation_id.set(self.correlation_id)
        return self.correlation_id

    def __exit__(self, exc_type, exc_val, exc_tb):
        _correlation_id.reset(self._token)
        self._token = None


class CorrelationFilter(logging.Filter):
    """Stamp records with the active correlation id ("-" outside a batch)"""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "correlation_id"):
            record.correlation_id = get_correlation_id() or "-"
        return True


class BatchLogger(logging.LoggerAdapter):
    """
    Logger for one batch run

    Prefixes messages with the operation key and, when an item index is
    passed, the 1-based position in the batch:

        log = BatchLogger(logger, "limitOrder.getOrder", total=3)
        log.warning("Item failed", index=1)   # "[limitOrder.getOrder] [2/3] Item failed"
    """

    def __init__(self, logger: logging.Logger, operation: str, total: int):
        super().__init__(logger, {"operation": operation, "batch_size": total})

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> Tuple[Any, MutableMapping[str, Any]]:
        index = kwargs.pop("index", None)
        position = f" [{index + 1}/{self.extra['batch_size']}]" if index is not None else ""

        extra = dict(self.extra)
        extra.update(kwargs.get("extra") or {})
        extra["item_index"] = index
        extra["correlation_id"] = get_correlation_id() or "-"
        kwargs["extra"] = extra
        return f"[{self.extra['operation']}]{position} {msg}", kwargs


def setup_logging(log_config: Optional[LoggingConfig] = None) -> logging.Logger:
    """
    Attach handlers to the oneinch_network logger

    Safe to call again: previous handlers are closed and replaced. Records
    from every submodule propagate here and get a correlation_id.

    Args:
        log_config: Logging settings (defaults to the LOG_* environment)

    Returns:
        The configured oneinch_network logger
    """
    log_config = log_config or global_config.logging
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(log_config.level)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    handlers = []
    if log_config.console_output:
        handlers.append(logging.StreamHandler())
    if log_config.log_file:
        Path(log_config.log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(RotatingFileHandler(
            log_config.log_file,
            maxBytes=log_config.max_bytes,
            backupCount=log_config.backup_count,
            encoding="utf-8",
        ))

    formatter = logging.Formatter(log_config.log_format)
    for handler in handlers:
        handler.setFormatter(formatter)
        handler.addFilter(CorrelationFilter())
        logger.addHandler(handler)

    return logger
