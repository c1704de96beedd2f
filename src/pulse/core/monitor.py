"""
Transaction status monitor.

Polls the service for a transaction's status until it leaves PENDING.
"""

import asyncio
from typing import Awaitable, Callable, Optional

import structlog

from pulse.core.errors import MonitorTimeoutError, PulseError, TransportError
from pulse.core.record import TransactionHash, TransactionRecord
from pulse.core.status import is_terminal
from pulse.core.wire import StatusResponse, decode_body
from pulse.transport.interface import TransportInterface

logger = structlog.get_logger(__name__)

STAGE_MONITOR = "monitor_status"

SleepFunc = Callable[[float], Awaitable[None]]


class StatusMonitor:
    """
    Polling state machine for a single transaction hash.

    Each iteration issues one status check. PENDING waits exactly
    poll_interval_seconds and checks again; any other status ends the loop.
    There is no backoff, jitter or attempt limit. Monitoring only ends early
    on an error, on the optional deadline, or when the awaiting task is
    cancelled.
    """

    def __init__(
        self,
        transport: TransportInterface,
        poll_interval_seconds: float,
        timeout_seconds: Optional[float] = None,
        sleep: SleepFunc = asyncio.sleep,
    ):
        """
        Initialize the monitor.

        Args:
            transport: Transport used for status checks
            poll_interval_seconds: Wait between checks while pending
            timeout_seconds: Default deadline per monitored hash (None = unbounded)
            sleep: Coroutine used to wait between checks
        """
        self.transport = transport
        self.poll_interval_seconds = poll_interval_seconds
        self.timeout_seconds = timeout_seconds
        self._sleep = sleep

    async def check(self, tx_hash: TransactionHash) -> StatusResponse:
        """Issue a single status check and decode its response."""
        response = await self.transport.check(tx_hash)
        if response.is_error:
            logger.error(
                "status_check_rejected",
                tx_hash=tx_hash,
                status=response.status_code,
                error=response.text,
            )
            raise TransportError(
                f"monitor status failed: HTTP {response.status_code}",
                status_code=response.status_code,
            )
        return decode_body(StatusResponse, response.body)

    async def poll_until_terminal(self, tx_hash: TransactionHash) -> TransactionRecord:
        """Run the polling loop without a deadline. Errors are raised unwrapped."""
        attempt = 0
        while True:
            attempt += 1
            result = await self.check(tx_hash)

            if is_terminal(result.tx_status):
                record = TransactionRecord(tx_hash=tx_hash, status=result.tx_status)
                logger.info(
                    "tx_status_final",
                    tx_hash=tx_hash,
                    status=record.status,
                    attempts=attempt,
                )
                return record

            logger.debug(
                "tx_pending",
                tx_hash=tx_hash,
                attempt=attempt,
                retry_in=self.poll_interval_seconds,
            )
            await self._sleep(self.poll_interval_seconds)

    async def monitor(
        self,
        tx_hash: TransactionHash,
        timeout_seconds: Optional[float] = None,
    ) -> TransactionRecord:
        """
        Monitor a transaction until it reaches a terminal status.

        Args:
            tx_hash: Transaction hash obtained from a broadcast
            timeout_seconds: Deadline for this call, overrides the monitor default

        Returns:
            Record holding the terminal status and its message

        Raises:
            TransportError: If a status check fails or HTTP status >= 400
            DecodeError: If a status response is malformed
            MonitorTimeoutError: If the deadline passes first
        """
        timeout = timeout_seconds if timeout_seconds is not None else self.timeout_seconds

        try:
            if timeout is None:
                return await self.poll_until_terminal(tx_hash)
            try:
                return await asyncio.wait_for(self.poll_until_terminal(tx_hash), timeout)
            except asyncio.TimeoutError as e:
                logger.warning("tx_monitor_timeout", tx_hash=tx_hash, timeout=timeout)
                raise MonitorTimeoutError(
                    f"status of {tx_hash} still pending after {timeout}s",
                    cause=e,
                ) from e
        except PulseError as e:
            raise e.in_stage(STAGE_MONITOR) from e
