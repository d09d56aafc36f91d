"""
news_sync

A small read-only client for a news backend: topics, news resources, and the
change lists that tell a client what to refetch or delete since its last sync.

Core ideas:
- Resources: GET /topics and /newsresources, optionally filtered by repeated ``id``
- Change lists: GET /changelists/{topics,newsresources}?after=<cursor>
- Output: frozen dataclasses; any failure raises a NetworkFailure

Example
-------
import asyncio
from news_sync import create_data_source, split_changes, next_cursor

async def main():
    async with create_data_source("https://example.com/api") as source:
        changes = await source.fetch_topic_change_list(after=10)
        refetch, delete = split_changes(changes)
        topics = await source.fetch_topics(refetch) if refetch else []
        cursor = next_cursor(changes, current=10)

asyncio.run(main())
"""
from .models import ChangeListItem, NewsResource, Topic
from .exceptions import DecodeError, HttpStatusError, NetworkFailure, TransportError
from .config import NetworkOptions
from .changes import latest_changes, next_cursor, split_changes
from .core import NetworkDataSource, create_data_source

__all__ = [
    "ChangeListItem",
    "NewsResource",
    "Topic",
    "NetworkFailure",
    "TransportError",
    "HttpStatusError",
    "DecodeError",
    "NetworkOptions",
    "NetworkDataSource",
    "create_data_source",
    "latest_changes",
    "next_cursor",
    "split_changes",
]
