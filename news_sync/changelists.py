from __future__ import annotations

from typing import List, Optional

import httpx

from .fetcher import after_params, build_url, get_json
from .models import ChangeListItem
from .normalizer import to_change_list_item
from .parser import decode_items


class ChangeListFetcher:
    """
    Fetch change-list entries newer than a cursor.

    The body is a bare JSON array ordered by the server; it is returned as is,
    without re-sorting or re-filtering.
    """

    def __init__(self, client: httpx.AsyncClient, base_url: str) -> None:
        self._client = client
        self._base_url = base_url

    async def _fetch(self, path: str, after: Optional[int]) -> List[ChangeListItem]:
        params = after_params(after)
        url = build_url(self._base_url, path)
        body = await get_json(self._client, url, params)
        return decode_items(body, to_change_list_item, url=url)

    async def fetch_topic_change_list(self, after: Optional[int] = None) -> List[ChangeListItem]:
        return await self._fetch("changelists/topics", after)

    async def fetch_news_resource_change_list(self, after: Optional[int] = None) -> List[ChangeListItem]:
        return await self._fetch("changelists/newsresources", after)
