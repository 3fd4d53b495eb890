from fastapi import Request

from feedstore.storage import FeedStore


def get_store(request: Request) -> FeedStore:
    """The store built by the app factory from the configured base path."""
    return request.app.state.store
