"""
Cross-chain resource (v1.0)
"""

from typing import Dict

from ..types.request import OperationDescriptor, path, query, body

RESOURCE = "crossChain"

_BASE = "/cross-chain/v1.0"

OPERATIONS: Dict[str, OperationDescriptor] = {d.operation: d for d in (
    OperationDescriptor(RESOURCE, "getCrossChainQuote", "GET", f"{_BASE}/quote", (
        query("fromChainId"),
        query("toChainId"),
        query("fromTokenAddress"),
        query("toTokenAddress"),
        query("amount"),
    )),
    OperationDescriptor(RESOURCE, "createCrossChainSwap", "POST", f"{_BASE}/swap", (
        body("fromChainId"),
        body("toChainId"),
        body("fromTokenAddress"),
        body("toTokenAddress"),
        body("amount"),
        body("receiver"),
    )),
    OperationDescriptor(RESOURCE, "getCrossChainStatus", "GET", f"{_BASE}/status/{{txHash}}", (
        path("txHash"),
        query("fromChainId"),
    )),
    OperationDescriptor(RESOURCE, "getSupportedChains", "GET", f"{_BASE}/chains"),
    OperationDescriptor(RESOURCE, "getCrossChainTokens", "GET", f"{_BASE}/tokens", (
        query("chainId"),
    )),
)}
