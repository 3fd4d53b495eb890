from .rss import decoded_feed, render_feed, render_item

__all__ = ["decoded_feed", "render_feed", "render_item"]
