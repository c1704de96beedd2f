"""
Asset Pulse

A client for broadcasting asset prices on-chain through the pulse service.
Broadcast transactions are monitored until the service reports a final
status, one at a time or in batches.
"""

__version__ = "0.1.0"

from pulse.config import PulseConfig
from pulse.core.asset import Asset
from pulse.core.client import PulseClient
from pulse.core.errors import (
    PulseError,
    ValidationError,
    TransportError,
    DecodeError,
    MonitorTimeoutError,
)
from pulse.core.record import TransactionRecord
from pulse.core.status import TransactionStatus, classify

__all__ = [
    "PulseConfig",
    "Asset",
    "PulseClient",
    "PulseError",
    "ValidationError",
    "TransportError",
    "DecodeError",
    "MonitorTimeoutError",
    "TransactionRecord",
    "TransactionStatus",
    "classify",
]
