from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Tuple

from .models import ChangeListItem


def next_cursor(items: Iterable[ChangeListItem], current: Optional[int] = None) -> Optional[int]:
    """
    Highest change-list version seen so far.
    Returns ``current`` unchanged for an empty batch.
    """
    cursor = current
    for it in items:
        if cursor is None or it.change_list_version > cursor:
            cursor = it.change_list_version
    return cursor


def latest_changes(items: Iterable[ChangeListItem]) -> List[ChangeListItem]:
    """
    Keep only the newest entry per id, ordered by version.
    Later versions supersede earlier ones for the same id.
    """
    latest: Dict[str, ChangeListItem] = {}
    for it in items:
        prev = latest.get(it.id)
        if prev is None or it.change_list_version >= prev.change_list_version:
            latest[it.id] = it
    return sorted(latest.values(), key=lambda x: x.change_list_version)


def split_changes(items: Iterable[ChangeListItem]) -> Tuple[List[str], List[str]]:
    """Return ``(ids_to_refetch, ids_to_delete)`` after collapsing per id."""
    upserts: List[str] = []
    deletes: List[str] = []
    for it in latest_changes(items):
        (deletes if it.is_delete else upserts).append(it.id)
    return upserts, deletes
