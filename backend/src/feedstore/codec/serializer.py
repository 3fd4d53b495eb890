"""JSON and base64 conversions between disk/wire bytes and models."""

import base64
import binascii
import json
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from feedstore.exceptions import InvalidEncoding, ParseError
from feedstore.models import FeedMetaData, Item

M = TypeVar("M", bound=BaseModel)


def _decode(model: type[M], data: bytes) -> M:
    try:
        return model.model_validate_json(data)
    except ValidationError as e:
        raise ParseError(
            f"Cannot decode {model.__name__}: {e.error_count()} error(s)"
        ) from e


def decode_feed_metadata(data: bytes) -> FeedMetaData:
    return _decode(FeedMetaData, data)


def decode_item(data: bytes) -> Item:
    return _decode(Item, data)


def _to_plain(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(by_alias=True, exclude_none=True)
    if isinstance(value, dict):
        return {k: _to_plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_plain(v) for v in value]
    return value


def encode_json(value: Any) -> bytes:
    """Encode a model, or a mapping/list of models, as UTF-8 JSON.

    Wire field names (``Title`` ...) are kept verbatim and an item's ``Date``
    is left out when it is not set.
    """
    return json.dumps(_to_plain(value), ensure_ascii=False).encode("utf-8")


def decode_base64(text: str) -> bytes:
    """Decode standard, padded base64. Line breaks are ignored."""
    cleaned = text.replace("\r", "").replace("\n", "")
    try:
        return base64.b64decode(cleaned, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidEncoding(f"Invalid base64 content: {e}") from e


def decode_description(item: Item) -> str:
    return decode_base64(item.description).decode("utf-8", errors="replace")
