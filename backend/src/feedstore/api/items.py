from fastapi import APIRouter, Depends, Request
from starlette.concurrency import run_in_threadpool

from feedstore.codec import encode_json
from feedstore.storage import FeedStore

from .deps import get_store
from .response import json_response, u_response

router = APIRouter(prefix="/feeds/{feed}/items", tags=["items"])


@router.get("")
async def list_items(feed: str, store: FeedStore = Depends(get_store)):
    items = await run_in_threadpool(store.load_feed_item_map, feed)
    return json_response(encode_json(items))


@router.post("")
async def create_item(feed: str, request: Request, store: FeedStore = Depends(get_store)):
    body = await request.body()
    key = await run_in_threadpool(store.create_item, feed, body)
    return u_response(201, f"Item {key} created")


@router.get("/{item}")
async def get_item(feed: str, item: str, store: FeedStore = Depends(get_store)):
    data = await run_in_threadpool(store.load_item, feed, item)
    return json_response(encode_json(data))
