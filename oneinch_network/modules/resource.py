"""
Resource Module

Thin per-resource wrapper so callers can write
client.limit_order.call("getOrder", chainId="1", orderHash="0x...").
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable, List, Optional

if TYPE_CHECKING:
    from ..client import OneInchClient

from ..resources import ResourceRouter
from ..types import FailurePolicy, OutcomeRecord


class ResourceModule:
    """Operations of one resource, bound to a client"""

    def __init__(self, client: "OneInchClient", resource: str):
        # Fails early for unknown resources
        ResourceRouter.get(resource)
        self._client = client
        self._resource = resource

    @property
    def resource(self) -> str:
        return self._resource

    def operations(self) -> List[str]:
        """List operation tags of this resource"""
        return ResourceRouter.operations(self._resource)

    def call(self, operation: str, **params: Any) -> Any:
        """Run one request and return its JSON payload"""
        return self._client.call(self._resource, operation, **params)

    def execute(
        self,
        operation: str,
        items: Optional[Iterable[Any]] = None,
        parameters: Any = None,
        policy: Optional[FailurePolicy] = None,
    ) -> List[OutcomeRecord]:
        """Run a batch against this resource"""
        return self._client.execute(self._resource, operation, items, parameters, policy)

    def __repr__(self) -> str:
        return f"ResourceModule({self._resource!r})"
