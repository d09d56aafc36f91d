from __future__ import annotations

from typing import Any, Callable, List, Optional, TypeVar

from .exceptions import DecodeError

T = TypeVar("T")


def unwrap_envelope(body: Any, *, url: Optional[str] = None) -> Any:
    """
    Return the payload nested under ``data`` in a ``{"data": ...}`` response.

    Raises DecodeError when the body is not an object or lacks ``data``.
    """
    if not isinstance(body, dict) or "data" not in body:
        raise DecodeError(f"Response is not a data envelope: {url}", url=url)
    return body["data"]


def decode_items(payload: Any, convert: Callable[[Any], T], *, url: Optional[str] = None) -> List[T]:
    """
    Convert a JSON array into typed records, preserving element order.

    All-or-nothing: a single malformed element fails the whole batch.
    """
    if not isinstance(payload, list):
        raise DecodeError(f"Expected a JSON array: {url}", url=url)

    out: List[T] = []
    for idx, raw in enumerate(payload):
        if not isinstance(raw, dict):
            raise DecodeError(f"Element {idx} is not an object: {url}", url=url)
        try:
            out.append(convert(raw))
        except (TypeError, ValueError) as e:
            raise DecodeError(f"Element {idx} could not be decoded: {url} ({e})", url=url) from e
    return out
