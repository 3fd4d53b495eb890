from .serializer import (
    decode_base64,
    decode_description,
    decode_feed_metadata,
    decode_item,
    encode_json,
)

__all__ = [
    "decode_base64",
    "decode_description",
    "decode_feed_metadata",
    "decode_item",
    "encode_json",
]
