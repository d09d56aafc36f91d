from __future__ import annotations

import logging
from typing import Any, Iterable, List, Optional, Tuple

import httpx

from .exceptions import DecodeError, HttpStatusError, TransportError

logger = logging.getLogger(__name__)

QueryParams = List[Tuple[str, str]]


def build_url(base_url: str, path: str) -> str:
    return f"{base_url.rstrip('/')}/{path.lstrip('/')}"


def id_params(ids: Optional[Iterable[str]]) -> QueryParams:
    """
    Repeated ``id`` query parameters, in caller order.

    ``None`` (fetch all) yields no parameters.
    """
    if ids is None:
        return []
    if isinstance(ids, str):
        raise TypeError("ids must be a collection of strings, not a single string")
    return [("id", i) for i in ids]


def after_params(after: Optional[int]) -> QueryParams:
    """The ``after`` cursor parameter, or nothing when the cursor is absent."""
    if after is None:
        return []
    if isinstance(after, bool) or not isinstance(after, int):
        raise TypeError(f"after must be an int, got {type(after).__name__}")
    if after < 0:
        raise ValueError(f"after must be non-negative, got {after}")
    return [("after", str(after))]


async def get_json(client: httpx.AsyncClient, url: str, params: Optional[QueryParams] = None) -> Any:
    """
    Issue a single GET and return the decoded JSON body.

    Raises TransportError, HttpStatusError or DecodeError; never retries.
    """
    try:
        response = await client.get(url, params=params or None)
    except httpx.RequestError as e:
        logger.warning("GET %s failed: %s", url, e)
        raise TransportError(f"Request failed: {url} ({e})", url=url) from e

    try:
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        status = e.response.status_code
        logger.warning("GET %s returned HTTP %s", url, status)
        raise HttpStatusError(f"HTTP {status} from {url}", url=url, status_code=status) from e

    try:
        return response.json()
    except ValueError as e:
        logger.warning("GET %s returned a body that is not JSON", url)
        raise DecodeError(f"Invalid JSON body: {url} ({e})", url=url) from e
