"""
Transaction record model.

The outcome of monitoring a transaction hash: its terminal status and the
message that status is classified as.
"""

from dataclasses import dataclass, field

from pulse.core.status import TransactionStatus, classify

# Opaque identifier returned by the service after a broadcast
TransactionHash = str


@dataclass(frozen=True)
class TransactionRecord:
    """
    Status of a transaction enriched with a human-readable message.

    The message is always derived from the status, it cannot be passed in.

    Attributes:
        tx_hash: Hash of the monitored transaction
        status: Status code reported by the service
        message: Description of the status
    """

    tx_hash: TransactionHash
    status: str
    message: str = field(init=False)

    def __post_init__(self):
        if isinstance(self.status, TransactionStatus):
            object.__setattr__(self, "status", self.status.value)
        object.__setattr__(self, "message", classify(self.status))

    @property
    def is_confirmed(self) -> bool:
        return self.status == TransactionStatus.CONFIRMED.value

    def to_dict(self) -> dict:
        """Convert to the service's field names."""
        return {
            "tx_hash": self.tx_hash,
            "tx_status": self.status,
            "message": self.message,
        }
