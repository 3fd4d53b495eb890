"""RSS 2.0 rendering of stored feeds.

Title and link values are inserted as stored, without XML escaping.
Descriptions are base64-decoded and wrapped in CDATA.
"""

import logging

from jinja2 import Environment, PackageLoader

from feedstore.codec import decode_description
from feedstore.exceptions import InvalidEncoding
from feedstore.models import Feed, Item

logger = logging.getLogger(__name__)

_env = Environment(loader=PackageLoader("feedstore.render", "templates"), autoescape=False)


def _render_item(item: Item, description: str) -> str:
    # "]]>" would close the section early; split it across two sections.
    description = description.replace("]]>", "]]]]><![CDATA[>")
    return _env.get_template("item.xml").render(item=item, description=description)


def _decodable(feed: Feed) -> list[tuple[Item, str]]:
    items = []
    for item in feed.items:
        try:
            items.append((item, decode_description(item)))
        except InvalidEncoding as e:
            logger.warning("Cannot decode item %s description: %s", item.title, e.message)
    return items


def render_item(item: Item) -> str:
    """Render one ``<item>`` element.

    Raises ``InvalidEncoding`` when the description is not valid base64.
    """
    return _render_item(item, decode_description(item))


def render_feed(feed: Feed) -> str:
    """Render the whole feed; items with an undecodable description are left out."""
    items = [_render_item(item, text) for item, text in _decodable(feed)]
    return _env.get_template("feed.xml").render(meta=feed.meta_data, items=items)


def decoded_feed(feed: Feed) -> Feed:
    """Copy of *feed* with plain-text descriptions, for the JSON view."""
    return feed.model_copy(
        update={
            "items": [
                item.model_copy(update={"description": text})
                for item, text in _decodable(feed)
            ]
        }
    )
