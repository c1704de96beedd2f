"""
Batch orchestrator.

Sequences broadcasts and status monitors over several items. Items are
always processed one at a time, in input order.

Two failure policies apply:
- broadcast batches (with or without monitoring) are fail-fast: the first
  error aborts the batch and no partial result is returned
- monitor batches are best-effort: a failing hash is reported as a warning
  and left out of the result
"""

from typing import Callable, Iterable, List, Optional

import structlog

from pulse.core.asset import Asset
from pulse.core.broadcaster import Broadcaster
from pulse.core.errors import PulseError
from pulse.core.monitor import StatusMonitor
from pulse.core.record import TransactionHash, TransactionRecord

logger = structlog.get_logger(__name__)

STAGE_BROADCAST_AND_MONITOR = "broadcast_and_monitor"
STAGE_MULTIPLE_BROADCAST = "multiple_broadcast"
STAGE_MULTIPLE_BROADCAST_AND_MONITOR = "multiple_broadcast_and_monitor"

MonitorFailureCallback = Callable[[TransactionHash, PulseError], None]


class BatchOrchestrator:
    """
    Runs broadcaster and monitor over single items and batches.

    Usage:
        ```python
        orchestrator = BatchOrchestrator(broadcaster, monitor)
        hashes = await orchestrator.multiple_broadcast(assets)
        records = await orchestrator.multiple_monitor_status(*hashes)
        ```
    """

    def __init__(
        self,
        broadcaster: Broadcaster,
        monitor: StatusMonitor,
        on_monitor_failure: Optional[MonitorFailureCallback] = None,
    ):
        """
        Initialize the orchestrator.

        Args:
            broadcaster: Single-item broadcaster
            monitor: Single-item status monitor
            on_monitor_failure: Called with each hash skipped by multiple_monitor_status
        """
        self.broadcaster = broadcaster
        self.monitor = monitor
        self._on_monitor_failure = on_monitor_failure

    def on_monitor_failure(self, callback: Optional[MonitorFailureCallback]) -> None:
        """Set callback for hashes skipped by best-effort monitoring."""
        self._on_monitor_failure = callback

    async def broadcast_and_monitor(
        self,
        asset: Asset,
        timeout_seconds: Optional[float] = None,
    ) -> TransactionRecord:
        """
        Broadcast an asset and monitor the resulting transaction.

        Args:
            asset: Asset to submit
            timeout_seconds: Deadline for the monitoring stage

        Returns:
            Record holding the terminal status of the broadcast transaction

        Raises:
            PulseError: Whichever stage failed first, no partial record is returned
        """
        try:
            submitted = await self.broadcaster.submit(asset)
            return await self.monitor.monitor(submitted.tx_hash, timeout_seconds=timeout_seconds)
        except PulseError as e:
            raise e.in_stage(STAGE_BROADCAST_AND_MONITOR) from e

    async def multiple_broadcast(self, assets: Iterable[Asset]) -> List[TransactionHash]:
        """
        Broadcast assets in order, stopping at the first failure.

        Returns:
            Transaction hashes, in input order

        Raises:
            PulseError: The first failure; remaining assets are not attempted
        """
        hashes: List[TransactionHash] = []

        for index, asset in enumerate(assets):
            try:
                hashes.append(await self.broadcaster.broadcast(asset))
            except PulseError as e:
                logger.error(
                    "multiple_broadcast_aborted",
                    index=index,
                    completed=len(hashes),
                    error=str(e),
                )
                raise e.in_stage(STAGE_MULTIPLE_BROADCAST) from e

        return hashes

    async def multiple_monitor_status(
        self,
        *tx_hashes: TransactionHash,
        timeout_seconds: Optional[float] = None,
    ) -> List[TransactionRecord]:
        """
        Monitor several transactions, skipping the ones that fail.

        Never raises for a per-hash failure: the failure is logged as a
        warning, passed to the on_monitor_failure callback and the hash is
        left out of the result.

        Args:
            *tx_hashes: Transaction hashes to monitor
            timeout_seconds: Deadline applied to each hash separately

        Returns:
            Records of the hashes that were monitored successfully, in input order
        """
        records: List[TransactionRecord] = []

        for tx_hash in tx_hashes:
            try:
                record = await self.monitor.monitor(tx_hash, timeout_seconds=timeout_seconds)
            except PulseError as e:
                logger.warning("monitor_status_skipped", tx_hash=tx_hash, error=str(e))
                if self._on_monitor_failure:
                    self._on_monitor_failure(tx_hash, e)
                continue
            records.append(record)

        return records

    async def multiple_broadcast_and_monitor(
        self,
        assets: Iterable[Asset],
        timeout_seconds: Optional[float] = None,
    ) -> List[TransactionRecord]:
        """
        Broadcast and monitor assets in order, stopping at the first failure.

        Unlike multiple_monitor_status this is fail-fast: a monitoring failure
        for one asset aborts the whole batch.

        Returns:
            Records in input order

        Raises:
            PulseError: The first failure; remaining assets are not attempted
        """
        records: List[TransactionRecord] = []

        for index, asset in enumerate(assets):
            try:
                records.append(
                    await self.broadcast_and_monitor(asset, timeout_seconds=timeout_seconds)
                )
            except PulseError as e:
                logger.error(
                    "multiple_broadcast_and_monitor_aborted",
                    index=index,
                    completed=len(records),
                    error=str(e),
                )
                raise e.in_stage(STAGE_MULTIPLE_BROADCAST_AND_MONITOR) from e

        return records
