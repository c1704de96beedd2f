"""
Pulse client.

Entry point for broadcasting asset prices and monitoring their transactions.
"""

from datetime import timedelta
from typing import Iterable, List, Optional, Union

import structlog

from pulse.config import PulseConfig, get_config
from pulse.core.asset import Asset
from pulse.core.broadcaster import Broadcaster
from pulse.core.monitor import SleepFunc, StatusMonitor
from pulse.core.orchestrator import BatchOrchestrator, MonitorFailureCallback
from pulse.core.record import TransactionHash, TransactionRecord
from pulse.transport.http import HttpTransport
from pulse.transport.interface import TransportInterface

logger = structlog.get_logger(__name__)


class PulseClient:
    """
    Client for the pulse service.

    Coordinates all client components:
    - Asset validation and broadcast
    - Transaction status monitoring
    - Batch broadcast and monitoring

    The configuration is fixed for the lifetime of the client. The client
    holds no mutable state besides the transport's connection pool, and
    separate clients are fully independent.

    Usage:
        ```python
        async with PulseClient() as client:
            record = await client.broadcast_and_monitor(
                Asset(symbol="ETH", price=4500, timestamp=1678912345)
            )
        ```
    """

    def __init__(
        self,
        config: Optional[PulseConfig] = None,
        transport: Optional[TransportInterface] = None,
        sleep: Optional[SleepFunc] = None,
        on_monitor_failure: Optional[MonitorFailureCallback] = None,
    ):
        """
        Initialize the client.

        Args:
            config: Client configuration. Uses global config if not provided.
            transport: Custom transport (HttpTransport built from config if not provided)
            sleep: Custom coroutine for waiting between status checks
            on_monitor_failure: Called with each hash skipped by multiple_monitor_status
        """
        self.config = config or get_config()
        self.transport = transport or HttpTransport(self.config)

        monitor_kwargs = {}
        if sleep is not None:
            monitor_kwargs["sleep"] = sleep

        self.broadcaster = Broadcaster(self.transport)
        self.monitor = StatusMonitor(
            self.transport,
            poll_interval_seconds=self.config.poll_interval_seconds,
            timeout_seconds=self.config.monitor_timeout_seconds,
            **monitor_kwargs,
        )
        self.orchestrator = BatchOrchestrator(
            self.broadcaster,
            self.monitor,
            on_monitor_failure=on_monitor_failure,
        )

    @classmethod
    def from_options(
        cls,
        url: Optional[str] = None,
        poll_interval: Optional[Union[float, timedelta]] = None,
        **kwargs,
    ) -> "PulseClient":
        """
        Create a client for an explicit URL and poll interval.

        Unset options fall back to the defaults.
        """
        return cls(PulseConfig.from_options(url=url, poll_interval=poll_interval), **kwargs)

    async def connect(self) -> None:
        """Open the transport's connection pool."""
        await self.transport.connect()
        logger.debug("pulse_client_connected", base_url=self.config.base_url)

    async def close(self) -> None:
        """Close the transport's connection pool."""
        await self.transport.disconnect()

    async def __aenter__(self) -> "PulseClient":
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    # ------------------------------------------------------------------
    # Single items
    # ------------------------------------------------------------------

    async def broadcast(self, asset: Asset) -> TransactionHash:
        """Broadcast an asset, returning its transaction hash."""
        return await self.broadcaster.broadcast(asset)

    async def monitor_status(
        self,
        tx_hash: TransactionHash,
        timeout_seconds: Optional[float] = None,
    ) -> TransactionRecord:
        """Poll a transaction's status until it is no longer pending."""
        return await self.monitor.monitor(tx_hash, timeout_seconds=timeout_seconds)

    async def broadcast_and_monitor(
        self,
        asset: Asset,
        timeout_seconds: Optional[float] = None,
    ) -> TransactionRecord:
        """Broadcast an asset and poll its transaction until it is no longer pending."""
        return await self.orchestrator.broadcast_and_monitor(asset, timeout_seconds=timeout_seconds)

    # ------------------------------------------------------------------
    # Batches
    # ------------------------------------------------------------------

    async def multiple_broadcast(self, assets: Iterable[Asset]) -> List[TransactionHash]:
        """Broadcast assets in order; the first failure aborts the batch."""
        return await self.orchestrator.multiple_broadcast(assets)

    async def multiple_monitor_status(
        self,
        *tx_hashes: TransactionHash,
        timeout_seconds: Optional[float] = None,
    ) -> List[TransactionRecord]:
        """Monitor transactions in order; failing hashes are skipped."""
        return await self.orchestrator.multiple_monitor_status(
            *tx_hashes,
            timeout_seconds=timeout_seconds,
        )

    async def multiple_broadcast_and_monitor(
        self,
        assets: Iterable[Asset],
        timeout_seconds: Optional[float] = None,
    ) -> List[TransactionRecord]:
        """Broadcast and monitor assets in order; the first failure aborts the batch."""
        return await self.orchestrator.multiple_broadcast_and_monitor(
            assets,
            timeout_seconds=timeout_seconds,
        )
