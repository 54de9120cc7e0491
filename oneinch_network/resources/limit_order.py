"""
Limit order resource (orderbook v4.0)
"""

from typing import Dict

from ..types.request import OperationDescriptor, path, query, body

RESOURCE = "limitOrder"

_BASE = "/orderbook/v4.0/{chainId}"

OPERATIONS: Dict[str, OperationDescriptor] = {d.operation: d for d in (
    OperationDescriptor(RESOURCE, "createOrder", "POST", f"{_BASE}/order", (
        path("chainId"),
        body("makerAsset"),
        body("takerAsset"),
        body("maker"),
        body("receiver"),
        body("makingAmount"),
        body("takingAmount"),
    )),
    OperationDescriptor(RESOURCE, "getOrder", "GET", f"{_BASE}/order/{{orderHash}}", (
        path("chainId"),
        path("orderHash"),
    )),
    OperationDescriptor(RESOURCE, "getOrders", "GET", f"{_BASE}/orders", (
        path("chainId"),
        query("maker"),
        query("limit", required=False, default=100, always_include=True),
        query("offset", required=False, default=0, always_include=True),
    )),
    # Signature travels in the query string, not a body
    OperationDescriptor(RESOURCE, "cancelOrder", "DELETE", f"{_BASE}/order/{{orderHash}}", (
        path("chainId"),
        path("orderHash"),
        query("signature"),
    )),
    OperationDescriptor(RESOURCE, "getOrderBook", "GET", f"{_BASE}/orders/book", (
        path("chainId"),
        query("makerAsset"),
        query("takerAsset"),
    )),
)}
