"""
Core client components.

This module contains the asset and transaction models, the broadcaster,
the status monitor and the batch orchestration built on top of them.
"""

from pulse.core.errors import (
    PulseError,
    ValidationError,
    TransportError,
    DecodeError,
    MonitorTimeoutError,
)
from pulse.core.status import TransactionStatus, classify
from pulse.core.asset import Asset
from pulse.core.record import TransactionHash, TransactionRecord
from pulse.core.broadcaster import Broadcaster
from pulse.core.monitor import StatusMonitor
from pulse.core.orchestrator import BatchOrchestrator
from pulse.core.client import PulseClient

__all__ = [
    "PulseError",
    "ValidationError",
    "TransportError",
    "DecodeError",
    "MonitorTimeoutError",
    "TransactionStatus",
    "classify",
    "Asset",
    "TransactionHash",
    "TransactionRecord",
    "Broadcaster",
    "StatusMonitor",
    "BatchOrchestrator",
    "PulseClient",
]
