"""
OneInchClient - Unified entry point for 1inch Network API operations

Provides batch execution across the five resources (swap, limitOrder,
fusionOrder, portfolio, crossChain) and per-resource convenience modules.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Optional

import httpx

from .infra import RequestExecutor
from .modules import BatchRunner, ResourceModule
from .resources import ResourceRouter
from .types import (
    Credential,
    FailurePolicy,
    ItemParameters,
    OutcomeRecord,
    ParameterSource,
    StaticParameters,
    WorkItem,
)


def _as_parameter_source(parameters: Any) -> ParameterSource:
    """Accept a ParameterSource, a mapping, or a list of per-item mappings"""
    if parameters is None:
        return StaticParameters()
    if isinstance(parameters, Mapping):
        return StaticParameters(parameters)
    if isinstance(parameters, (list, tuple)):
        return ItemParameters(parameters)
    return parameters


def _as_work_items(items: Optional[Iterable[Any]], parameters: ParameterSource) -> List[WorkItem]:
    if items is None:
        count = len(parameters) if isinstance(parameters, ItemParameters) else 1
        return WorkItem.from_payloads([None] * count)
    # Materialize once; generators must not be read twice
    items = list(items)
    if all(isinstance(item, WorkItem) for item in items):
        return items
    return WorkItem.from_payloads(items)


class OneInchClient:
    """
    1inch Network API client

    Usage:
        client = OneInchClient(api_key="...")

        # Single call
        quote = client.swap.call(
            "getQuote", chainId="1", src="0x...", dst="0x...", amount="1000000",
        )

        # Batch, capturing per-item failures
        outcomes = client.execute(
            "limitOrder",
            "getOrder",
            parameters=[{"chainId": "1", "orderHash": h} for h in hashes],
            policy=FailurePolicy.CONTINUE,
        )
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        credential: Optional[Credential] = None,
        http_client: Optional[httpx.Client] = None,
        timeout: Optional[float] = None,
        policy: Optional[FailurePolicy] = None,
    ):
        """
        Initialize client

        Args:
            api_key: API key (or set ONEINCH_API_KEY env var)
            base_url: API base URL (or set ONEINCH_BASE_URL env var)
            credential: Prebuilt credential, overrides api_key/base_url
            http_client: Optional httpx client (owned by the caller)
            timeout: Client timeout in seconds
            policy: Default failure policy for batches
        """
        self._credential = credential or Credential.from_config(api_key, base_url)
        self._executor = RequestExecutor(client=http_client, timeout=timeout)
        self._policy = policy
        self._modules: Dict[str, ResourceModule] = {}

    @property
    def credential(self) -> Credential:
        return self._credential

    @property
    def executor(self) -> RequestExecutor:
        return self._executor

    def resources(self) -> List[str]:
        """List available resource tags"""
        return ResourceRouter.list()

    def resource(self, resource: str) -> ResourceModule:
        """Get (lazily created) module for a resource tag"""
        if resource not in self._modules:
            self._modules[resource] = ResourceModule(self, resource)
        return self._modules[resource]

    @property
    def swap(self) -> ResourceModule:
        """Swap quotes and calldata"""
        return self.resource("swap")

    @property
    def limit_order(self) -> ResourceModule:
        """Orderbook limit orders"""
        return self.resource("limitOrder")

    @property
    def fusion_order(self) -> ResourceModule:
        """Gasless fusion orders"""
        return self.resource("fusionOrder")

    @property
    def portfolio(self) -> ResourceModule:
        """Portfolio analytics"""
        return self.resource("portfolio")

    @property
    def cross_chain(self) -> ResourceModule:
        """Cross-chain swaps"""
        return self.resource("crossChain")

    def execute(
        self,
        resource: str,
        operation: str,
        items: Optional[Iterable[Any]] = None,
        parameters: Any = None,
        policy: Optional[FailurePolicy] = None,
    ) -> List[OutcomeRecord]:
        """
        Run an operation over a batch of items

        Args:
            resource: Resource tag
            operation: Operation tag
            items: Work items or opaque payloads (defaults to one item per
                parameter mapping, or a single item)
            parameters: ParameterSource, mapping shared by all items, or a
                list of per-item mappings
            policy: Failure policy for this batch

        Returns:
            One OutcomeRecord per item, in input order
        """
        source = _as_parameter_source(parameters)
        work_items = _as_work_items(items, source)
        runner = BatchRunner(self._credential, self._executor, policy or self._policy)
        return runner.run(resource, operation, work_items, source)

    def call(self, resource: str, operation: str, **params: Any) -> Any:
        """
        Run a single request in fail-fast mode

        Returns:
            Remote JSON payload

        Raises:
            RemoteApiError: If the request fails
        """
        outcomes = self.execute(
            resource,
            operation,
            parameters=StaticParameters(params),
            policy=FailurePolicy.FAIL_FAST,
        )
        return outcomes[0].json

    def close(self):
        """Close HTTP client"""
        self._executor.close()

    def __enter__(self) -> "OneInchClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def __repr__(self) -> str:
        return f"OneInchClient(base_url={self._credential.base_url!r})"
