"""Feedstore: RSS feeds and items kept as files on disk, served over HTTP."""
