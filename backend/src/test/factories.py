"""Payload builders shared by the test suite."""

import base64
import json


def b64(text: str) -> str:
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def make_metadata(**overrides) -> dict:
    data = {
        "Title": "Security news",
        "Description": "Daily digest",
        "Link": "https://example.com/news",
    }
    data.update(overrides)
    return data


def make_item(text: str = "<p>Body</p>", **overrides) -> dict:
    """Item payload whose ``Description`` is *text* base64-encoded."""
    data = {
        "Title": "First post",
        "Link": "https://example.com/news/1",
        "Description": b64(text),
    }
    data.update(overrides)
    return data


def to_bytes(payload: dict) -> bytes:
    return json.dumps(payload).encode("utf-8")
