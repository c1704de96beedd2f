"""
Asset broadcaster.

Validates an asset and submits it to the service, yielding its transaction hash.
"""

import structlog

from pulse.core.asset import Asset
from pulse.core.errors import PulseError, TransportError
from pulse.core.record import TransactionHash
from pulse.core.wire import BroadcastResponse, decode_body
from pulse.transport.interface import TransportInterface

logger = structlog.get_logger(__name__)

STAGE_BROADCAST = "broadcast_asset"


class Broadcaster:
    """
    Submits single assets for on-chain broadcast.

    A failed attempt is surfaced immediately, nothing is retried here.
    """

    def __init__(self, transport: TransportInterface):
        self.transport = transport

    async def submit(self, asset: Asset) -> BroadcastResponse:
        """
        Validate and submit an asset, returning the decoded response.

        Errors are raised unwrapped; see broadcast() for the staged variant.
        """
        asset.validate()

        response = await self.transport.submit(asset.to_dict())
        if response.is_error:
            logger.error(
                "broadcast_rejected",
                symbol=asset.symbol,
                status=response.status_code,
                error=response.text,
            )
            raise TransportError(
                f"broadcast failed: HTTP {response.status_code}",
                status_code=response.status_code,
            )

        result = decode_body(BroadcastResponse, response.body)
        logger.info("asset_broadcast", symbol=asset.symbol, tx_hash=result.tx_hash)
        return result

    async def broadcast(self, asset: Asset) -> TransactionHash:
        """
        Broadcast an asset to the service.

        Args:
            asset: Asset to submit

        Returns:
            Transaction hash assigned by the service

        Raises:
            ValidationError: If the asset is invalid (no request is sent)
            TransportError: If the request fails or HTTP status >= 400
            DecodeError: If the response body is malformed
        """
        try:
            result = await self.submit(asset)
        except PulseError as e:
            raise e.in_stage(STAGE_BROADCAST) from e
        return result.tx_hash
