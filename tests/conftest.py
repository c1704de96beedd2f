"""
Pytest configuration and shared fixtures for the test suite.
"""

import json
from typing import Dict, List, Union

import pytest

from pulse.config import PulseConfig
from pulse.core.asset import Asset
from pulse.core.client import PulseClient
from pulse.core.errors import TransportError
from pulse.transport.interface import TransportInterface, TransportResponse


# ============================================================================
# Configuration Fixtures
# ============================================================================

TEST_URL = "http://pulse.test"
TEST_POLL_INTERVAL = 3.0


@pytest.fixture
def test_config() -> PulseConfig:
    """Create a test configuration."""
    return PulseConfig.from_options(
        url=TEST_URL,
        poll_interval=TEST_POLL_INTERVAL,
        log_level="DEBUG",
    )


# ============================================================================
# Test Data Generators
# ============================================================================

def generate_test_tx_hash(index: int = 0) -> str:
    """Generate a deterministic test transaction hash."""
    base = "044fd72d" * 8  # 64 chars
    return base[:60] + f"{index:04d}"


def json_response(data: object, status_code: int = 200) -> TransportResponse:
    """Build a raw transport response with a JSON body."""
    return TransportResponse(status_code=status_code, body=json.dumps(data).encode())


def status_response(status: str) -> TransportResponse:
    """Build a /check response reporting a status."""
    return json_response({"tx_status": status})


def hash_response(tx_hash: str) -> TransportResponse:
    """Build a /broadcast response carrying a transaction hash."""
    return json_response({"tx_hash": tx_hash})


@pytest.fixture
def make_response():
    return json_response


@pytest.fixture
def make_status():
    return status_response


@pytest.fixture
def make_hash():
    return hash_response


@pytest.fixture
def tx_hashes() -> List[str]:
    """Create several distinct transaction hashes."""
    return [generate_test_tx_hash(i) for i in range(3)]


@pytest.fixture
def eth_asset() -> Asset:
    return Asset(symbol="ETH", price=4500, timestamp=1678912345)


@pytest.fixture
def sample_assets() -> List[Asset]:
    """Create multiple valid assets."""
    return [
        Asset(symbol="ETH", price=4500, timestamp=1678912345),
        Asset(symbol="BTC", price=4500, timestamp=1678912345),
        Asset(symbol="ADA", price=35, timestamp=1678912346),
    ]


# ============================================================================
# Scripted Transport
# ============================================================================

Scripted = Union[TransportResponse, Exception]


class ScriptedTransport(TransportInterface):
    """
    In-memory transport replaying queued responses.

    Each call pops the next queued response (or raises it when it is an
    exception). The last queued response is repeated once the queue is
    down to a single entry.
    """

    def __init__(self):
        self.submit_queue: List[Scripted] = []
        self.check_queues: Dict[str, List[Scripted]] = {}
        self.submitted: List[dict] = []
        self.checked: List[str] = []
        self.connected = False

    def queue_submit(self, *responses: Scripted) -> None:
        self.submit_queue.extend(responses)

    def queue_check(self, tx_hash: str, *responses: Scripted) -> None:
        self.check_queues.setdefault(tx_hash, []).extend(responses)

    @staticmethod
    def _next(queue: List[Scripted], what: str) -> TransportResponse:
        if not queue:
            raise AssertionError(f"unexpected {what} call")
        item = queue.pop(0) if len(queue) > 1 else queue[0]
        if isinstance(item, Exception):
            raise item
        return item

    async def connect(self) -> None:
        self.connected = True

    async def disconnect(self) -> None:
        self.connected = False

    async def submit(self, payload: dict) -> TransportResponse:
        self.submitted.append(payload)
        return self._next(self.submit_queue, "submit")

    async def check(self, tx_hash: str) -> TransportResponse:
        self.checked.append(tx_hash)
        return self._next(self.check_queues.get(tx_hash, []), f"check({tx_hash})")


class RecordingSleep:
    """Stand-in for asyncio.sleep that records each requested delay."""

    def __init__(self):
        self.calls: List[float] = []

    async def __call__(self, delay: float) -> None:
        self.calls.append(delay)


@pytest.fixture
def transport() -> ScriptedTransport:
    """Create a scripted transport."""
    return ScriptedTransport()


@pytest.fixture
def network_error() -> TransportError:
    """Create the error a transport raises when the service is unreachable."""
    return TransportError("POST /broadcast failed: connection refused")


@pytest.fixture
def sleep() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture
def client(test_config, transport, sleep) -> PulseClient:
    """Create a client wired to the scripted transport."""
    return PulseClient(test_config, transport=transport, sleep=sleep)
