"""
HTTP transport for the pulse service.

Reaches the service over its REST API using a pooled httpx client.
"""

from typing import Optional
from urllib.parse import quote

import httpx
import structlog

from pulse.config import PulseConfig, get_config
from pulse.core.errors import TransportError
from pulse.transport.interface import TransportInterface, TransportResponse

logger = structlog.get_logger(__name__)

BROADCAST_PATH = "/broadcast"
CHECK_PATH = "/check/{tx_hash}"


class HttpTransport(TransportInterface):
    """
    httpx based transport.

    Implements the TransportInterface using the service's REST API. One
    AsyncClient (and its connection pool) is shared by every call.
    """

    def __init__(
        self,
        config: Optional[PulseConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the HTTP transport.

        Args:
            config: Client configuration. Uses global config if not provided.
            transport: Custom httpx transport (e.g. httpx.MockTransport)
        """
        self.config = config or get_config()
        self.base_url = self.config.base_url
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def headers(self) -> dict:
        return {
            "Accept": "application/json",
            "Content-Type": "application/json",
        }

    @property
    def is_connected(self) -> bool:
        return self._client is not None

    async def connect(self) -> None:
        """Establish connection (create HTTP client)."""
        if self._client is not None:
            return

        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            headers=self.headers,
            timeout=self.config.request_timeout_seconds,
            transport=self._transport,
        )
        logger.info("http_transport_connected", base_url=self.base_url)

    async def disconnect(self) -> None:
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None
            logger.info("http_transport_disconnected")

    async def _request(
        self,
        method: str,
        path: str,
        **kwargs,
    ) -> TransportResponse:
        """Make an API request."""
        if not self._client:
            await self.connect()

        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.RequestError as e:
            logger.error("http_request_error", method=method, path=path, error=str(e))
            raise TransportError(f"{method} {path} failed: {e}", cause=e) from e

        logger.debug("http_response", method=method, path=path, status=response.status_code)
        return TransportResponse(status_code=response.status_code, body=response.content)

    async def submit(self, payload: dict) -> TransportResponse:
        """Submit an asset to /broadcast."""
        return await self._request("POST", BROADCAST_PATH, json=payload)

    async def check(self, tx_hash: str) -> TransportResponse:
        """Query /check/{tx_hash}."""
        path = CHECK_PATH.format(tx_hash=quote(tx_hash, safe=""))
        return await self._request("GET", path)
