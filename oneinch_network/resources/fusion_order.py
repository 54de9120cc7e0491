"""
Fusion order resource

Gasless intent-based orders filled by resolvers on the maker's behalf.
"""

from typing import Dict

from ..types.request import OperationDescriptor, path, query, body

RESOURCE = "fusionOrder"

_BASE = "/swap/v6.0/{chainId}/fusion"

OPERATIONS: Dict[str, OperationDescriptor] = {d.operation: d for d in (
    OperationDescriptor(RESOURCE, "createFusionOrder", "POST", f"{_BASE}/orders", (
        path("chainId"),
        body("fromTokenAddress"),
        body("toTokenAddress"),
        body("amount"),
        body("walletAddress"),
    )),
    OperationDescriptor(RESOURCE, "getFusionOrder", "GET", f"{_BASE}/orders/{{orderHash}}", (
        path("chainId"),
        path("orderHash"),
    )),
    OperationDescriptor(RESOURCE, "getFusionOrders", "GET", f"{_BASE}/orders", (
        path("chainId"),
        query("address"),
        query("limit", required=False, default=50, always_include=True),
        query("offset", required=False, default=0, always_include=True),
    )),
    # DELETE with a JSON body, unlike limit order cancellation
    OperationDescriptor(RESOURCE, "cancelFusionOrder", "DELETE", f"{_BASE}/orders/{{orderHash}}", (
        path("chainId"),
        path("orderHash"),
        body("signature"),
    )),
    OperationDescriptor(RESOURCE, "getFusionQuote", "GET", f"{_BASE}/quoter/v1.0/quote", (
        path("chainId"),
        query("fromTokenAddress"),
        query("toTokenAddress"),
        query("amount"),
    )),
)}
