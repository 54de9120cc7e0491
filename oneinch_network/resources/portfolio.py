"""
Portfolio resource (portfolio v4)

Chain id is a query field here, not a path slot.
"""

from typing import Dict

from ..types.request import OperationDescriptor, path, query

RESOURCE = "portfolio"

_BASE = "/portfolio/portfolio/v4"

OPERATIONS: Dict[str, OperationDescriptor] = {d.operation: d for d in (
    OperationDescriptor(RESOURCE, "getPortfolioOverview", "GET", f"{_BASE}/overview/erc20", (
        query("addresses"),
        query("chainId"),
    )),
    OperationDescriptor(
        RESOURCE, "getProtocolBalances", "GET", f"{_BASE}/overview/protocols/{{protocolNames}}", (
            path("protocolNames"),
            query("addresses"),
            query("chainId"),
        ),
    ),
    OperationDescriptor(RESOURCE, "getValueChart", "GET", f"{_BASE}/general/value_chart", (
        query("addresses"),
        query("chainId"),
        query("timerange", required=False, default="1week", always_include=True),
    )),
    OperationDescriptor(RESOURCE, "getCurrentValue", "GET", f"{_BASE}/general/current_value", (
        query("addresses"),
        query("chainId"),
    )),
    OperationDescriptor(RESOURCE, "getTransactions", "GET", f"{_BASE}/transactions", (
        query("addresses"),
        query("chainId"),
        query("limit", required=False, default=100, always_include=True),
        query("offset", required=False, default=0, always_include=True),
    )),
)}
