"""
Batch Module

Runs one operation over an ordered batch of work items, one request at a
time, applying the batch's failure policy to per-item errors.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from ..config import config
from ..errors import OneInchNetworkError
from ..infra import BatchLogger, CorrelationContext, RequestExecutor
from ..resources import ResourceRouter, ItemContext, resolve_request
from ..types import (
    Credential,
    FailurePolicy,
    OperationDescriptor,
    OutcomeRecord,
    ParameterSource,
    WorkItem,
)

logger = logging.getLogger(__name__)


class BatchRunner:
    """
    Sequential batch executor

    Resource and operation are fixed for the whole batch; only parameter
    values vary per item. Unsupported resource/operation errors are raised
    before any request is made, whatever the policy.

    Usage:
        runner = BatchRunner(credential, executor, FailurePolicy.CONTINUE)
        outcomes = runner.run("swap", "getQuote", items, StaticParameters({...}))
    """

    def __init__(
        self,
        credential: Credential,
        executor: RequestExecutor,
        policy: Optional[FailurePolicy] = None,
    ):
        """
        Initialize batch runner

        Args:
            credential: Credential used for every request in the batch
            executor: Request executor
            policy: Failure policy (defaults to ONEINCH_CONTINUE_ON_FAIL)
        """
        self._credential = credential
        self._executor = executor
        self._policy = policy or FailurePolicy.from_flag(config.batch.continue_on_fail)

    @property
    def policy(self) -> FailurePolicy:
        return self._policy

    def run(
        self,
        resource: str,
        operation: str,
        items: Sequence[WorkItem],
        parameters: ParameterSource,
    ) -> List[OutcomeRecord]:
        """
        Execute the batch

        Args:
            resource: Resource tag
            operation: Operation tag
            items: Work items, in order
            parameters: Per-item parameter lookup

        Returns:
            One OutcomeRecord per item, in input order

        Raises:
            UnsupportedResource, UnsupportedOperation: Always, before any call
            OneInchNetworkError: First per-item failure, in fail-fast mode
        """
        descriptor = ResourceRouter.resolve(resource, operation)

        log = BatchLogger(logger, descriptor.key, len(items))

        with CorrelationContext(descriptor.key):
            log.info(f"Starting batch of {len(items)} item(s): {descriptor} ({self._policy.value})")
            outcomes = [self._run_item(descriptor, item, parameters, log) for item in items]

            failed = sum(1 for outcome in outcomes if outcome.is_error)
            log.info(f"Batch finished: {len(outcomes) - failed} succeeded, {failed} failed")
        return outcomes

    def _run_item(
        self,
        descriptor: OperationDescriptor,
        item: WorkItem,
        parameters: ParameterSource,
        log: BatchLogger,
    ) -> OutcomeRecord:
        context = ItemContext(self._credential, item.index, parameters)
        try:
            request = resolve_request(descriptor, context)
            payload = self._executor.execute(request)
        except OneInchNetworkError as e:
            if e.is_batch_fatal:
                raise
            if self._policy is FailurePolicy.FAIL_FAST:
                e.details["item_index"] = item.index
                log.error(f"Aborting batch: {e}", index=item.index)
                raise
            log.warning(
                f"Item failed, continuing: {e}",
                index=item.index,
                extra={"error_code": e.code.value},
            )
            return OutcomeRecord.failed(item.index, e.message, item.payload)

        return OutcomeRecord.success(item.index, payload, item.payload)
