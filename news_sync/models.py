from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple


@dataclass(frozen=True)
class Topic:
    """
    A content topic as served by the backend.

    Only ``id`` is guaranteed; the descriptive fields default to empty.
    """
    id: str
    name: str = ""
    short_description: str = ""
    long_description: str = ""
    url: str = ""
    image_url: str = ""
    followed: bool = False


@dataclass(frozen=True)
class NewsResource:
    """A news item with the ids of the topics it belongs to."""
    id: str
    title: str
    content: str
    url: str
    publish_date: datetime
    type: str
    header_image_url: Optional[str] = None
    topics: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ChangeListItem:
    """
    One mutation event of a resource.

    ``change_list_version`` grows strictly across the server's sequence for a
    resource type. ``is_delete`` marks a tombstone.
    """
    id: str
    change_list_version: int
    is_delete: bool
