import logging

from fastapi import FastAPI

from feedstore.api import v1
from feedstore.api.response import feedstore_error_handler
from feedstore.conf import VERSION, Settings, load_settings
from feedstore.exceptions import FeedStoreError
from feedstore.middleware import RequestTimeoutMiddleware
from feedstore.storage import FeedStore

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the service, with the store rooted at ``settings.feeds_path``."""
    settings = settings or load_settings()
    app = FastAPI(title="Feedstore", version=VERSION)
    app.state.settings = settings
    app.state.store = FeedStore(settings.feeds_path)
    app.include_router(v1)
    app.add_exception_handler(FeedStoreError, feedstore_error_handler)
    if settings.request_timeout > 0:
        app.add_middleware(RequestTimeoutMiddleware, timeout=settings.request_timeout)
    logger.debug("App created with feeds path %s", settings.feeds_path)
    return app
