"""
Settings for the 1inch Network client

Values come from the process environment, after merging the nearest .env
file found from the working directory upwards. Logging handlers are wired
in oneinch_network.infra.context.setup_logging.
"""

import os
import logging
from dataclasses import dataclass, field
from typing import Callable, Optional, TypeVar

from dotenv import find_dotenv, load_dotenv


DEFAULT_BASE_URL = "https://api.1inch.dev"
DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s [%(correlation_id)s] %(message)s"

T = TypeVar("T")

_TRUE_VALUES = ("true", "1", "yes", "on")


def _load_env_file():
    # Existing environment variables win over .env entries
    env_file = find_dotenv(usecwd=True)
    if env_file:
        load_dotenv(env_file, override=False)


_load_env_file()


def _as_bool(raw: str) -> bool:
    return raw.strip().lower() in _TRUE_VALUES


def _setting(key: str, default: T, parse: Callable[[str], T] = str) -> T:
    """
    Read one environment setting

    Unset keys give the default. A value that fails to parse is logged and
    replaced by the default rather than breaking import of the package.
    """
    raw = os.getenv(key)
    if raw is None:
        return default
    try:
        return parse(raw)
    except ValueError:
        logging.getLogger(__name__).warning(f"Ignoring {key}={raw!r}, using {default!r}")
        return default


@dataclass
class OneInchConfig:
    """1inch API access"""
    base_url: str = field(default_factory=lambda: _setting("ONEINCH_BASE_URL", DEFAULT_BASE_URL))
    api_key: Optional[str] = field(default_factory=lambda: _setting("ONEINCH_API_KEY", None))
    # Client-wide timeout; requests never override it
    timeout: float = field(default_factory=lambda: _setting("ONEINCH_TIMEOUT", 30.0, float))


@dataclass
class BatchConfig:
    """Batch execution defaults"""
    # Capture per-item failures instead of aborting the batch
    continue_on_fail: bool = field(
        default_factory=lambda: _setting("ONEINCH_CONTINUE_ON_FAIL", False, _as_bool)
    )


@dataclass
class LoggingConfig:
    """
    Log output for the oneinch_network logger tree

    Environment variables:
        LOG_LEVEL: DEBUG, INFO, WARNING, ERROR (default: INFO)
        LOG_FORMAT: Format string; %(correlation_id)s is always available
        LOG_CONSOLE: Write to stderr (default: true)
        LOG_FILE: Rotating log file; unset or empty keeps file output off
        LOG_MAX_BYTES, LOG_BACKUP_COUNT: Rotation limits for LOG_FILE
    """
    log_level: str = field(default_factory=lambda: _setting("LOG_LEVEL", "INFO"))
    log_format: str = field(default_factory=lambda: _setting("LOG_FORMAT", DEFAULT_LOG_FORMAT))
    console_output: bool = field(default_factory=lambda: _setting("LOG_CONSOLE", True, _as_bool))
    log_file: str = field(default_factory=lambda: _setting("LOG_FILE", ""))
    max_bytes: int = field(default_factory=lambda: _setting("LOG_MAX_BYTES", 5 * 1024 * 1024, int))
    backup_count: int = field(default_factory=lambda: _setting("LOG_BACKUP_COUNT", 3, int))

    @property
    def level(self) -> int:
        level = logging.getLevelName(self.log_level.upper())
        return level if isinstance(level, int) else logging.INFO


@dataclass
class Config:
    """
    Settings container

    Usage:
        from oneinch_network.config import config

        timeout = config.oneinch.timeout
    """
    oneinch: OneInchConfig = field(default_factory=OneInchConfig)
    batch: BatchConfig = field(default_factory=BatchConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def reload(cls) -> "Config":
        """Re-read .env and the environment into a fresh Config"""
        _load_env_file()
        return cls()


config = Config()

