from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from .models import ChangeListItem, NewsResource, Topic

_FRACTION = re.compile(r"\.(\d+)")


def _require(entry: Dict[str, Any], key: str) -> Any:
    if key not in entry or entry[key] is None:
        raise ValueError(f"missing required field: {key}")
    return entry[key]


def _str(entry: Dict[str, Any], key: str, *, required: bool = False, default: Optional[str] = "") -> Optional[str]:
    val = _require(entry, key) if required else entry.get(key, default)
    if val is None:
        return default
    if not isinstance(val, str):
        raise ValueError(f"field {key} must be a string, got {type(val).__name__}")
    return val


def _bool(entry: Dict[str, Any], key: str, *, required: bool = False, default: bool = False) -> bool:
    val = _require(entry, key) if required else entry.get(key)
    if val is None:
        return default
    if not isinstance(val, bool):
        raise ValueError(f"field {key} must be a boolean, got {type(val).__name__}")
    return val


def _to_datetime(value: Any) -> datetime:
    """
    Parse an ISO-8601 instant into a timezone-aware UTC datetime.
    A trailing ``Z`` is accepted; naive values are taken as UTC.
    Fractional seconds of any length are cut or padded to microseconds.
    """
    if not isinstance(value, str) or not value:
        raise ValueError("publishDate must be an ISO-8601 string")
    s = value.strip()
    if s.endswith(("Z", "z")):
        s = s[:-1] + "+00:00"
    s = _FRACTION.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), s, count=1)
    dt = datetime.fromisoformat(s)
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    try:
        return dt.astimezone(timezone.utc)
    except OverflowError as e:
        raise ValueError(f"publishDate out of range: {value}") from e


def to_topic(entry: Dict[str, Any]) -> Topic:
    """
    Convert a decoded topic object into a Topic.
    Requires: id. Unknown keys are ignored.
    """
    return Topic(
        id=_str(entry, "id", required=True),
        name=_str(entry, "name"),
        short_description=_str(entry, "shortDescription"),
        long_description=_str(entry, "longDescription"),
        url=_str(entry, "url"),
        image_url=_str(entry, "imageUrl"),
        followed=_bool(entry, "followed"),
    )


def to_news_resource(entry: Dict[str, Any]) -> NewsResource:
    """
    Convert a decoded news resource object into a NewsResource.
    Requires: id, title, content, url, publishDate, type
    Optional: headerImageUrl, topics
    """
    topics = entry.get("topics")
    if topics is None:
        topics = []
    if not isinstance(topics, list) or not all(isinstance(t, str) for t in topics):
        raise ValueError("field topics must be a list of strings")

    return NewsResource(
        id=_str(entry, "id", required=True),
        title=_str(entry, "title", required=True),
        content=_str(entry, "content", required=True),
        url=_str(entry, "url", required=True),
        publish_date=_to_datetime(_require(entry, "publishDate")),
        type=_str(entry, "type", required=True),
        header_image_url=_str(entry, "headerImageUrl", default=None),
        topics=tuple(topics),
    )


def to_change_list_item(entry: Dict[str, Any]) -> ChangeListItem:
    version = _require(entry, "changeListVersion")
    # bool is an int subclass; reject it explicitly
    if isinstance(version, bool) or not isinstance(version, int):
        raise ValueError(f"field changeListVersion must be an integer, got {type(version).__name__}")

    return ChangeListItem(
        id=_str(entry, "id", required=True),
        change_list_version=version,
        is_delete=_bool(entry, "isDelete", required=True),
    )
