from fastapi import APIRouter, Depends, Header, Request
from fastapi.responses import Response
from starlette.concurrency import run_in_threadpool

from feedstore.codec import encode_json
from feedstore.render import decoded_feed, render_feed
from feedstore.storage import FeedStore

from .deps import get_store
from .response import JSON_MEDIA_TYPE, RSS_MEDIA_TYPE, json_response, u_response

router = APIRouter(prefix="/feeds", tags=["feeds"])


@router.get("")
async def list_feeds(store: FeedStore = Depends(get_store)):
    """Metadata of every stored feed, keyed by feed name."""
    feeds = await run_in_threadpool(store.list_feeds)
    return json_response(encode_json(feeds))


@router.post("/{feed}")
async def create_feed(feed: str, request: Request, store: FeedStore = Depends(get_store)):
    body = await request.body()
    await run_in_threadpool(store.create_feed, feed, body)
    return u_response(201, f"Feed {feed} created")


@router.get("/{feed}")
async def get_feed(
    feed: str,
    accept: str | None = Header(None),
    store: FeedStore = Depends(get_store),
):
    """The feed as RSS, or as JSON with decoded descriptions when asked for."""
    data = await run_in_threadpool(store.load_feed, feed)
    if accept == JSON_MEDIA_TYPE:
        return json_response(encode_json(decoded_feed(data)))
    return Response(content=render_feed(data), media_type=RSS_MEDIA_TYPE)
