"""
Exception definitions for the 1inch Network client
"""

from enum import Enum
from typing import Optional


class ErrorCode(Enum):
    """
    Unified error codes

    7xxx - Dispatch errors (batch-fatal)
    8xxx - Remote API errors
    9xxx - Configuration errors
    """
    # Dispatch errors
    UNSUPPORTED_RESOURCE = "7001"
    UNSUPPORTED_OPERATION = "7002"

    # Remote API errors
    API_ERROR = "8001"
    API_TIMEOUT = "8002"
    API_CONNECTION_FAILED = "8003"
    API_INVALID_RESPONSE = "8004"

    # Configuration errors
    CONFIG_INVALID = "9001"
    CONFIG_MISSING = "9002"


class OneInchNetworkError(Exception):
    """
    Base exception for all client errors

    Attributes:
        message: Human-readable error message
        code: Error code for programmatic handling
        original_error: The underlying exception if any
        details: Additional error context
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode,
        original_error: Optional[Exception] = None,
        details: Optional[dict] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.original_error = original_error
        self.details = details or {}

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.message}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code.value}, message={self.message!r})"

    @property
    def is_batch_fatal(self) -> bool:
        """Whether the error aborts a batch regardless of failure policy"""
        return False


class UnsupportedResource(OneInchNetworkError):
    """
    Resource tag is not one of the known resources

    Always aborts the batch: the resource is batch-level configuration.
    """

    def __init__(self, resource: str, available: Optional[list] = None):
        available = available or []
        super().__init__(
            f'The resource "{resource}" is not supported. '
            f"Available resources: {', '.join(available) or 'none'}",
            ErrorCode.UNSUPPORTED_RESOURCE,
            details={"resource": resource, "available": available},
        )
        self.resource = resource

    @property
    def is_batch_fatal(self) -> bool:
        return True


class UnsupportedOperation(OneInchNetworkError):
    """Operation tag is absent from the selected resource's table"""

    def __init__(self, resource: str, operation: str, available: Optional[list] = None):
        available = available or []
        super().__init__(
            f'Unknown operation "{operation}" for resource "{resource}". '
            f"Available operations: {', '.join(available) or 'none'}",
            ErrorCode.UNSUPPORTED_OPERATION,
            details={"resource": resource, "operation": operation, "available": available},
        )
        self.resource = resource
        self.operation = operation

    @property
    def is_batch_fatal(self) -> bool:
        return True


class RemoteApiError(OneInchNetworkError):
    """
    The remote endpoint failed

    Raised when:
    - The API returns a non-2xx status
    - The request times out or the connection fails
    - A 2xx response body is not valid JSON
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.API_ERROR,
        status_code: Optional[int] = None,
        url: Optional[str] = None,
        original_error: Optional[Exception] = None,
        response_body: Optional[object] = None,
    ):
        super().__init__(
            message,
            code,
            original_error=original_error,
            details={
                "status_code": status_code,
                "url": url,
                "response_body": response_body,
            },
        )
        self.status_code = status_code
        self.url = url

    @classmethod
    def from_status(
        cls,
        status_code: int,
        message: str,
        url: Optional[str] = None,
        response_body: Optional[object] = None,
    ) -> "RemoteApiError":
        return cls(
            f"1inch API error (HTTP {status_code}): {message}",
            ErrorCode.API_ERROR,
            status_code=status_code,
            url=url,
            response_body=response_body,
        )

    @classmethod
    def timeout(cls, url: str, error: Optional[Exception] = None) -> "RemoteApiError":
        return cls(
            "1inch API request timed out",
            ErrorCode.API_TIMEOUT,
            url=url,
            original_error=error,
        )

    @classmethod
    def connection_failed(cls, url: str, error: Exception) -> "RemoteApiError":
        return cls(
            f"1inch API request error: {error}",
            ErrorCode.API_CONNECTION_FAILED,
            url=url,
            original_error=error,
        )

    @classmethod
    def invalid_response(cls, url: str, status_code: int, error: Exception) -> "RemoteApiError":
        return cls(
            f"1inch API returned a non-JSON response (HTTP {status_code})",
            ErrorCode.API_INVALID_RESPONSE,
            status_code=status_code,
            url=url,
            original_error=error,
        )


class ConfigurationError(OneInchNetworkError):
    """
    Configuration-related errors

    Raised when:
    - Required configuration is missing (API key, parameter values)
    - Configuration values are invalid
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.CONFIG_INVALID,
    ):
        super().__init__(message, code)

    @classmethod
    def missing(cls, param: str, hint: Optional[str] = None) -> "ConfigurationError":
        message = f"Missing required configuration: {param}"
        if hint:
            message = f"{message}. {hint}"
        return cls(message, ErrorCode.CONFIG_MISSING)

    @classmethod
    def invalid(cls, param: str, reason: str) -> "ConfigurationError":
        return cls(f"Invalid configuration '{param}': {reason}", ErrorCode.CONFIG_INVALID)
