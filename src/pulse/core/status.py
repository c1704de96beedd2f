"""
Transaction status classification.

Maps the status codes reported by the service to human-readable messages.
"""

from enum import Enum
from types import MappingProxyType
from typing import Mapping


class TransactionStatus(str, Enum):
    """Status of a broadcast transaction."""
    CONFIRMED = "CONFIRMED"       # Processed and confirmed
    PENDING = "PENDING"           # Awaiting processing, the only non-terminal state
    FAILED = "FAILED"             # Failed to process
    DNE = "DNE"                   # Does not exist

    @property
    def is_terminal(self) -> bool:
        return self is not TransactionStatus.PENDING


UNKNOWN_MESSAGE = "Unknown"

STATUS_MESSAGES: Mapping[str, str] = MappingProxyType({
    TransactionStatus.CONFIRMED.value: "Transaction has been processed and confirmed",
    # Leading space is part of the message
    TransactionStatus.PENDING.value: " Transaction is awaiting processing",
    TransactionStatus.FAILED.value: "Transaction failed to process",
    TransactionStatus.DNE.value: "Transaction does not exist",
})


def classify(status: str) -> str:
    """
    Get the message describing a status code.

    Unrecognized codes map to "Unknown" instead of raising.
    """
    if isinstance(status, TransactionStatus):
        status = status.value
    return STATUS_MESSAGES.get(status, UNKNOWN_MESSAGE)


def is_terminal(status: str) -> bool:
    """Anything other than PENDING ends the polling loop, unknown codes included."""
    if isinstance(status, TransactionStatus):
        status = status.value
    return status != TransactionStatus.PENDING.value
