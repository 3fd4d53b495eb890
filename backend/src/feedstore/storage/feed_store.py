"""Filesystem-backed storage of feeds and items.

Layout under the base path::

    <base>/<feed>/meta.json      feed metadata
    <base>/<feed>/<item key>     one JSON document per item

Request bodies are persisted byte for byte once they have been validated.
"""

import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Callable, Iterable, TypeVar

from feedstore.codec import decode_base64, decode_feed_metadata, decode_item
from feedstore.exceptions import (
    AlreadyExists,
    FeedStoreError,
    InternalError,
    InvalidEncoding,
    InvalidItemKey,
    InvalidName,
    NotFound,
    ParseError,
)
from feedstore.models import Feed, FeedMetaData, Item

from .keys import NAME_MAX, fits_name_max, is_valid_name, sanitize_title

logger = logging.getLogger(__name__)

META_FILE = "meta.json"
_TMP_PREFIX = ".creating-"

T = TypeVar("T")


class CorruptEntry(InternalError):
    """A stored file exists but cannot be decoded."""


def collect_valid(
    names: Iterable[str], loader: Callable[[str], T]
) -> tuple[dict[str, T], int]:
    """Load every entry, keeping the ones that succeed.

    Returns the loaded entries keyed by name (in iteration order) and the
    number of entries that failed and were skipped.
    """
    valid: dict[str, T] = {}
    skipped = 0
    for name in names:
        try:
            valid[name] = loader(name)
        except FeedStoreError as e:
            skipped += 1
            logger.debug("Skip entry %s: %s", name, e.message)
    return valid, skipped


class FeedStore:
    def __init__(self, base_path: Path | str):
        self.base_path = Path(base_path)

    # -- paths --------------------------------------------------------------

    def _feed_path(self, name: str) -> Path:
        if not is_valid_name(name):
            raise NotFound(f"The feed {name} does not exist")
        return self.base_path / name

    def _existing_feed_path(self, name: str) -> Path:
        path = self._feed_path(name)
        if not path.is_dir():
            raise NotFound(f"The feed {name} does not exist")
        return path

    def _item_path(self, feed: str, key: str) -> Path:
        feed_path = self._existing_feed_path(feed)
        if key == META_FILE or not is_valid_name(key):
            raise NotFound(f"The item {key} does not exist")
        return feed_path / key

    # -- feeds --------------------------------------------------------------

    def feed_exists(self, name: str) -> bool:
        return is_valid_name(name) and (self.base_path / name).is_dir()

    def create_feed(self, name: str, metadata: bytes) -> FeedMetaData:
        """Create the feed directory holding *metadata* as ``meta.json``.

        The metadata is written into a temporary sibling directory that is
        then renamed into place, so a failed creation leaves nothing behind.
        """
        if not is_valid_name(name):
            raise InvalidName(f"Invalid feed name {name!r}")
        path = self.base_path / name
        if path.exists():
            raise AlreadyExists(f"Feed {name} already exist")
        try:
            meta = decode_feed_metadata(metadata)
        except ParseError as e:
            raise ParseError(f"Cannot create feed {name}, wrong metadata") from e

        tmp_path = None
        try:
            tmp_path = Path(tempfile.mkdtemp(prefix=_TMP_PREFIX, dir=self.base_path))
            (tmp_path / META_FILE).write_bytes(metadata)
            tmp_path.chmod(0o755)
            os.rename(tmp_path, path)
        except OSError as e:
            if tmp_path is not None:
                shutil.rmtree(tmp_path, ignore_errors=True)
            if path.exists():
                raise AlreadyExists(f"Feed {name} already exist") from e
            raise InternalError(f"Cannot create feed {name}: {e}") from e
        logger.info("Feed %s created", name)
        return meta

    def list_feed_names(self) -> list[str]:
        try:
            entries = sorted(os.scandir(self.base_path), key=lambda e: e.name)
        except OSError as e:
            raise InternalError(f"Cannot read dir {self.base_path}: {e}") from e
        return [
            entry.name
            for entry in entries
            if entry.is_dir() and not entry.name.startswith(".")
        ]

    def load_feed_metadata(self, name: str) -> FeedMetaData:
        path = self._existing_feed_path(name) / META_FILE
        try:
            data = path.read_bytes()
        except OSError as e:
            raise InternalError(f"Metadata file cannot be read for {name}: {e}") from e
        try:
            return decode_feed_metadata(data)
        except ParseError as e:
            raise CorruptEntry(f"Metadata cannot be decoded for {name}") from e

    def list_feeds(self) -> dict[str, FeedMetaData]:
        """Metadata of every feed, skipping feeds whose metadata is unusable."""
        feeds, skipped = collect_valid(self.list_feed_names(), self.load_feed_metadata)
        if skipped:
            logger.warning("Skipped %d unreadable feed(s) in %s", skipped, self.base_path)
        return feeds

    def load_feed(self, name: str) -> Feed:
        meta = self.load_feed_metadata(name)
        return Feed(meta_data=meta, items=self.load_feed_items(name))

    # -- items --------------------------------------------------------------

    def _read_item(self, path: Path) -> Item:
        try:
            data = path.read_bytes()
        except OSError as e:
            raise InternalError(f"Item file cannot be read for {path}: {e}") from e
        try:
            return decode_item(data)
        except ParseError as e:
            raise CorruptEntry(f"Item cannot be decoded for {path}") from e

    def load_feed_item_map(self, name: str) -> dict[str, Item]:
        """Items of a feed keyed by item key, skipping unreadable entries."""
        path = self._existing_feed_path(name)
        try:
            names = sorted(entry.name for entry in os.scandir(path))
        except OSError as e:
            raise InternalError(f"Cannot list items for {name}: {e}") from e
        items, skipped = collect_valid(
            (n for n in names if n != META_FILE),
            lambda key: self._read_item(path / key),
        )
        if skipped:
            logger.warning("Skipped %d unreadable item(s) in feed %s", skipped, name)
        return items

    def load_feed_items(self, name: str) -> list[Item]:
        return list(self.load_feed_item_map(name).values())

    def item_exists(self, feed: str, key: str) -> bool:
        try:
            return self._item_path(feed, key).exists()
        except NotFound:
            return False

    def create_item(self, feed: str, item: bytes) -> str:
        """Validate and store an item, returning its key."""
        feed_path = self._existing_feed_path(feed)
        try:
            parsed = decode_item(item)
        except ParseError as e:
            raise ParseError("Cannot create item") from e

        key = sanitize_title(parsed.title)
        if not key:
            raise InvalidItemKey("Item title must contain a letter or a digit")
        if not fits_name_max(key):
            raise InvalidItemKey(f"Item title is too long, {NAME_MAX} bytes at most")
        path = feed_path / key
        if path.exists():
            raise AlreadyExists("Item already exist")
        try:
            decode_base64(parsed.description)
        except InvalidEncoding as e:
            raise InvalidEncoding("Item description invalid") from e

        try:
            with open(path, "xb") as f:
                f.write(item)
        except FileExistsError as e:
            raise AlreadyExists("Item already exist") from e
        except OSError as e:
            raise InternalError(f"Cannot create file {path}: {e}") from e
        logger.info("Item %s created in feed %s", key, feed)
        return key

    def load_item(self, feed: str, key: str) -> Item:
        path = self._item_path(feed, key)
        if not path.is_file():
            raise NotFound(f"The item {key} does not exist")
        return self._read_item(path)
