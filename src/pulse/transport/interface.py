"""
Abstract interface for the pulse service transport.

Defines the contract for reaching the service that all transports must implement.
Transports deliver raw responses; classifying and decoding them is up to the caller.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


# HTTP statuses from here on are failures regardless of body
ERROR_STATUS_THRESHOLD = 400


@dataclass(frozen=True)
class TransportResponse:
    """Raw response from the service."""
    status_code: int
    body: bytes

    @property
    def is_error(self) -> bool:
        return self.status_code >= ERROR_STATUS_THRESHOLD

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")


class TransportInterface(ABC):
    """
    Abstract interface for service access.

    This interface defines the two calls the client makes:
    - Asset submission (POST /broadcast)
    - Status check (GET /check/{tx_hash})
    """

    @abstractmethod
    async def connect(self) -> None:
        """
        Set up the underlying connection pool.

        Raises:
            TransportError: If the transport cannot be set up
        """
        pass

    @abstractmethod
    async def disconnect(self) -> None:
        """Release the underlying connection pool."""
        pass

    @abstractmethod
    async def submit(self, payload: dict) -> TransportResponse:
        """
        Submit an asset for broadcast.

        Args:
            payload: Serialized asset

        Returns:
            Raw service response

        Raises:
            TransportError: If the request could not be completed
        """
        pass

    @abstractmethod
    async def check(self, tx_hash: str) -> TransportResponse:
        """
        Query the status of a transaction.

        Args:
            tx_hash: Transaction hash obtained from a broadcast

        Returns:
            Raw service response

        Raises:
            TransportError: If the request could not be completed
        """
        pass
