"""
Transport Layer.

Provides abstracted access to the pulse service.
"""

from pulse.transport.interface import TransportInterface, TransportResponse
from pulse.transport.http import HttpTransport

__all__ = [
    "TransportInterface",
    "TransportResponse",
    "HttpTransport",
]
