"""
Response bodies returned by the service, and decoding them.
"""

from typing import Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as SchemaError

from pulse.core.errors import DecodeError

ModelT = TypeVar("ModelT", bound=BaseModel)


class BroadcastResponse(BaseModel):
    """Body of a successful POST /broadcast."""
    model_config = ConfigDict(extra="ignore", frozen=True)

    tx_hash: str = Field(min_length=1)


class StatusResponse(BaseModel):
    """Body of a successful GET /check/{tx_hash}."""
    model_config = ConfigDict(extra="ignore", frozen=True)

    tx_status: str


def decode_body(model: Type[ModelT], body: bytes) -> ModelT:
    """
    Parse a JSON response body into a response model.

    Args:
        model: Expected response shape
        body: Raw response body

    Returns:
        Parsed model

    Raises:
        DecodeError: If the body is not JSON or does not match the model
    """
    try:
        return model.model_validate_json(body)
    except SchemaError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"]) or "body"
        raise DecodeError(
            f"unmarshal failed {model.__name__}: {location}: {first['msg']}",
            cause=e,
        ) from e
