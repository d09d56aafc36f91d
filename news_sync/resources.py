from __future__ import annotations

from typing import Iterable, List, Optional

import httpx

from .fetcher import build_url, get_json, id_params
from .models import NewsResource, Topic
from .normalizer import to_news_resource, to_topic
from .parser import decode_items, unwrap_envelope


class ResourceFetcher:
    """
    Fetch topics and news resources, optionally filtered by id.

    Each call is one GET against an enveloped endpoint. Filtering is done
    by the server; ids are passed through verbatim.
    """

    def __init__(self, client: httpx.AsyncClient, base_url: str) -> None:
        self._client = client
        self._base_url = base_url

    async def fetch_topics(self, ids: Optional[Iterable[str]] = None) -> List[Topic]:
        url = build_url(self._base_url, "topics")
        body = await get_json(self._client, url, id_params(ids))
        return decode_items(unwrap_envelope(body, url=url), to_topic, url=url)

    async def fetch_news_resources(self, ids: Optional[Iterable[str]] = None) -> List[NewsResource]:
        url = build_url(self._base_url, "newsresources")
        body = await get_json(self._client, url, id_params(ids))
        return decode_items(unwrap_envelope(body, url=url), to_news_resource, url=url)
