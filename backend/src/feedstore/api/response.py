import logging

from fastapi import Request
from fastapi.responses import JSONResponse, Response

from feedstore.exceptions import FeedStoreError
from feedstore.models import ResponseModel

logger = logging.getLogger(__name__)

JSON_MEDIA_TYPE = "application/json"
RSS_MEDIA_TYPE = "application/rss+xml"


def u_response(status_code: int, msg: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ResponseModel(
            status=status_code < 400, status_code=status_code, msg=msg
        ).model_dump(),
    )


def json_response(body: bytes) -> Response:
    """Already-encoded JSON, sent as is."""
    return Response(content=body, media_type=JSON_MEDIA_TYPE)


async def feedstore_error_handler(request: Request, exc: FeedStoreError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(
            "%s %s failed: %s", request.method, request.url.path, exc.message,
            exc_info=exc.__cause__,
        )
    else:
        logger.debug("%s %s rejected: %s", request.method, request.url.path, exc.message)
    return u_response(exc.status_code, exc.message)
