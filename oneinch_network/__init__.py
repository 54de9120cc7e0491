"""
1inch Network - Table-driven client for the 1inch developer API

Resources:
- swap: aggregation protocol quotes and swap calldata
- limitOrder: orderbook limit orders
- fusionOrder: gasless fusion orders
- portfolio: balances, value charts, transactions
- crossChain: cross-chain quotes, swaps and status

Each operation is a static (method, path, parameter placement) descriptor
interpreted by one resolver; batches run sequentially with either
fail-fast or continue-on-fail error handling.
"""

from .client import OneInchClient
from .types import (
    Credential,
    WorkItem,
    OutcomeRecord,
    FailurePolicy,
    OperationDescriptor,
    ResolvedRequest,
    StaticParameters,
    ItemParameters,
)
from .errors import (
    ErrorCode,
    OneInchNetworkError,
    UnsupportedResource,
    UnsupportedOperation,
    RemoteApiError,
    ConfigurationError,
)
from .resources import ResourceRouter, resolve_request
from .modules import BatchRunner
from .infra import RequestExecutor, setup_logging

__all__ = [
    # Client
    "OneInchClient",
    # Types
    "Credential",
    "WorkItem",
    "OutcomeRecord",
    "FailurePolicy",
    "OperationDescriptor",
    "ResolvedRequest",
    "StaticParameters",
    "ItemParameters",
    # Errors
    "ErrorCode",
    "OneInchNetworkError",
    "UnsupportedResource",
    "UnsupportedOperation",
    "RemoteApiError",
    "ConfigurationError",
    # Dispatch
    "ResourceRouter",
    "resolve_request",
    "BatchRunner",
    "RequestExecutor",
    # Logging
    "setup_logging",
]

__version__ = "1.0.0"
