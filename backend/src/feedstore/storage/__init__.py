from .feed_store import META_FILE, CorruptEntry, FeedStore, collect_valid
from .keys import is_valid_name, sanitize_title

__all__ = [
    "META_FILE",
    "CorruptEntry",
    "FeedStore",
    "collect_valid",
    "is_valid_name",
    "sanitize_title",
]
