"""
Resource operation tables and request resolution

Resources:
- swap: quotes, swap calldata, token/protocol/preset lists
- limitOrder: orderbook v4 orders
- fusionOrder: gasless fusion orders
- portfolio: balances, value charts, transactions
- crossChain: cross-chain quotes, swaps and status
"""

from .registry import ResourceRouter
from .resolver import ItemContext, resolve_request, build_headers

__all__ = [
    "ResourceRouter",
    "ItemContext",
    "resolve_request",
    "build_headers",
]
