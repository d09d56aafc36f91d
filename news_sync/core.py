from __future__ import annotations

import logging
import time
from typing import Dict, Iterable, List, Optional

import httpx

from .changelists import ChangeListFetcher
from .config import NetworkOptions
from .models import ChangeListItem, NewsResource, Topic
from .resources import ResourceFetcher

http_logger = logging.getLogger("news_sync.http")


async def _log_request(request: httpx.Request) -> None:
    request.extensions["news_sync.started"] = time.monotonic()
    http_logger.debug("--> %s %s", request.method, request.url)


async def _log_response(response: httpx.Response) -> None:
    request = response.request
    started = request.extensions.get("news_sync.started")
    elapsed_ms = (time.monotonic() - started) * 1000 if started is not None else 0.0
    http_logger.debug(
        "<-- %s %s %s (%.1f ms)", response.status_code, request.method, request.url, elapsed_ms
    )


def build_client(
    options: NetworkOptions,
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.AsyncClient:
    """Create the JSON transport client described by ``options``."""
    headers: Dict[str, str] = {"Accept": "application/json"}
    if options.headers:
        headers.update(options.headers)

    event_hooks = None
    if options.debug:
        event_hooks = {"request": [_log_request], "response": [_log_response]}

    return httpx.AsyncClient(
        headers=headers,
        timeout=options.timeout_sec,
        event_hooks=event_hooks,
        transport=transport,
    )


class NetworkDataSource:
    """
    Read-only access to topics, news resources and their change lists.

    Every method is one independent GET; the instance holds no request state
    and can serve any number of concurrent calls over the shared client.
    """

    def __init__(self, client: httpx.AsyncClient, base_url: str, *, owns_client: bool = False) -> None:
        if not base_url:
            raise ValueError("base_url is required")
        self._base_url = base_url.rstrip("/")
        self._client = client
        self._owns_client = owns_client
        self._resources = ResourceFetcher(client, self._base_url)
        self._changelists = ChangeListFetcher(client, self._base_url)

    @property
    def base_url(self) -> str:
        return self._base_url

    async def fetch_topics(self, ids: Optional[Iterable[str]] = None) -> List[Topic]:
        return await self._resources.fetch_topics(ids)

    async def fetch_news_resources(self, ids: Optional[Iterable[str]] = None) -> List[NewsResource]:
        return await self._resources.fetch_news_resources(ids)

    async def fetch_topic_change_list(self, after: Optional[int] = None) -> List[ChangeListItem]:
        return await self._changelists.fetch_topic_change_list(after)

    async def fetch_news_resource_change_list(self, after: Optional[int] = None) -> List[ChangeListItem]:
        return await self._changelists.fetch_news_resource_change_list(after)

    async def aclose(self) -> None:
        # A borrowed client belongs to the caller
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "NetworkDataSource":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()


def create_data_source(
    base_url: Optional[str] = None,
    *,
    client: Optional[httpx.AsyncClient] = None,
    options: Optional[NetworkOptions] = None,
) -> NetworkDataSource:
    """
    Build a NetworkDataSource.

    ``base_url`` overrides ``options.base_url``. Without ``client`` a new
    httpx.AsyncClient is built from ``options`` and owned by the data source.
    """
    opts = options or NetworkOptions()
    url = base_url or opts.base_url
    if not url:
        raise ValueError("A base URL is required (argument, options or NEWS_SYNC_BASE_URL).")

    if client is not None:
        return NetworkDataSource(client, url)
    return NetworkDataSource(build_client(opts), url, owns_client=True)
