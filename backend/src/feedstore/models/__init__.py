from .feed import Feed, FeedMetaData, Item
from .response import ResponseModel

__all__ = ["Feed", "FeedMetaData", "Item", "ResponseModel"]
