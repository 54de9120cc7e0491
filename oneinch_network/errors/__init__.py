"""
Error definitions for the 1inch Network client
"""

from .exceptions import (
    ErrorCode,
    OneInchNetworkError,
    UnsupportedResource,
    UnsupportedOperation,
    RemoteApiError,
    ConfigurationError,
)

__all__ = [
    "ErrorCode",
    "OneInchNetworkError",
    "UnsupportedResource",
    "UnsupportedOperation",
    "RemoteApiError",
    "ConfigurationError",
]
