"""
Swap resource (aggregation protocol v6.0)

Quotes and swap transaction data for a single chain.
"""

from typing import Dict

from ..types.request import OperationDescriptor, path, query

RESOURCE = "swap"

_BASE = "/swap/v6.0/{chainId}"

OPERATIONS: Dict[str, OperationDescriptor] = {d.operation: d for d in (
    OperationDescriptor(RESOURCE, "getQuote", "GET", f"{_BASE}/quote", (
        path("chainId"),
        query("src"),
        query("dst"),
        query("amount"),
        query("protocols", required=False, default=""),
    )),
    OperationDescriptor(RESOURCE, "getSwap", "GET", f"{_BASE}/swap", (
        path("chainId"),
        query("src"),
        query("dst"),
        query("amount"),
        query("from"),
        # Slippage tolerance in percent
        query("slippage", required=False, default="1", always_include=True),
    )),
    OperationDescriptor(RESOURCE, "getTokens", "GET", f"{_BASE}/tokens", (
        path("chainId"),
    )),
    OperationDescriptor(RESOURCE, "getProtocols", "GET", f"{_BASE}/protocols", (
        path("chainId"),
    )),
    OperationDescriptor(RESOURCE, "getPresets", "GET", f"{_BASE}/presets", (
        path("chainId"),
    )),
)}
