"""
Asset model.

An asset is a priced symbol submitted to the service for broadcast.
"""

from dataclasses import asdict, dataclass
from typing import Dict

from pulse.core.errors import ValidationError


def _is_positive_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


@dataclass(frozen=True)
class Asset:
    """
    A price observation for a symbol.

    Attributes:
        symbol: Ticker of the asset, e.g. "ETH"
        price: Price as an unsigned integer
        timestamp: Unix time the price was retrieved
    """

    symbol: str
    price: int
    timestamp: int

    def validate(self) -> None:
        """
        Check that every field is set.

        Raises:
            ValidationError: If the symbol is empty or price/timestamp are not positive
        """
        problems: Dict[str, str] = {}

        if not isinstance(self.symbol, str) or not self.symbol:
            problems["symbol"] = "cannot be blank"
        if not _is_positive_int(self.price):
            problems["price"] = "must be a positive integer"
        if not _is_positive_int(self.timestamp):
            problems["timestamp"] = "must be a positive integer"

        if problems:
            detail = "; ".join(f"{name}: {reason}" for name, reason in sorted(problems.items()))
            raise ValidationError(f"invalid asset ({detail})", fields=problems)

    @property
    def is_valid(self) -> bool:
        try:
            self.validate()
        except ValidationError:
            return False
        return True

    def to_dict(self) -> dict:
        """Convert to the request body for /broadcast."""
        return asdict(self)
