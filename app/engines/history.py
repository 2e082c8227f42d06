"""
Result history — the in-memory structure both engines read.

A history is ``{user_id: {discipline_slug: [HistoryItem, ...]}}``.  Lists
are unordered as far as the engines are concerned: "latest" always means
the item with the greatest timestamp, never the last list position.

All helpers here are pure.  They return new containers and never mutate
their inputs, so a cached history can be shared between requests.
"""

from __future__ import annotations

import datetime
from typing import Hashable, Mapping, Optional, Sequence

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class HistoryItem(BaseModel):
    """One recorded result.

    Local exports name the timestamp ``ts``; both spellings are accepted.
    """

    model_config = ConfigDict(frozen=True)

    timestamp: datetime.datetime = Field(..., validation_alias=AliasChoices("timestamp", "ts"))
    value: float

    @field_validator("timestamp")
    @classmethod
    def _assume_utc(cls, v: datetime.datetime) -> datetime.datetime:
        # Naive timestamps come from the database (stored as UTC).
        if v.tzinfo is None:
            return v.replace(tzinfo=datetime.timezone.utc)
        return v


HistoryBySlug = Mapping[str, Sequence[HistoryItem]]
History = Mapping[Hashable, HistoryBySlug]


def get_latest(items: Optional[Sequence[HistoryItem]]) -> Optional[HistoryItem]:
    """Return the item with the greatest timestamp, or ``None``.

    On equal timestamps the first one encountered wins.
    """
    if not items:
        return None
    best = items[0]
    for item in items[1:]:
        if item.timestamp > best.timestamp:
            best = item
    return best


def latest_value(items: Optional[Sequence[HistoryItem]]) -> Optional[float]:
    latest = get_latest(items)
    return latest.value if latest is not None else None


def user_history(history: History, user_id: Hashable) -> HistoryBySlug:
    """Per-slug history of one user (empty mapping if unknown)."""
    return history.get(user_id) or {}


def add_result(history: History, user_id: Hashable, slug: str,
               item: HistoryItem) -> dict[Hashable, dict[str, list[HistoryItem]]]:
    """Return a new history with *item* appended for ``(user_id, slug)``.

    The touched list is re-sorted by timestamp.
    """
    result = _copy(history)
    by_slug = result.setdefault(user_id, {})
    items = by_slug.get(slug, []) + [item]
    items.sort(key=lambda i: i.timestamp)
    by_slug[slug] = items
    return result


def merge_history(local: History, remote: History) -> dict[Hashable, dict[str, list[HistoryItem]]]:
    """Merge two histories into a new one.

    Items are deduplicated per ``(user, slug)`` on their timestamp; when
    both sides hold the same timestamp the *remote* item wins.  Every list
    in the result is sorted by timestamp, so the output does not depend on
    the input list order.
    """
    merged: dict[Hashable, dict[str, list[HistoryItem]]] = {}

    for source in (local, remote):
        for user_id, by_slug in source.items():
            target = merged.setdefault(user_id, {})
            for slug, items in by_slug.items():
                keyed = {i.timestamp: i for i in target.get(slug, [])}
                for item in items:
                    keyed[item.timestamp] = item
                target[slug] = list(keyed.values())

    for by_slug in merged.values():
        for slug in by_slug:
            by_slug[slug] = sorted(by_slug[slug], key=lambda i: i.timestamp)
    return merged


def missing_items(existing: HistoryBySlug, incoming: HistoryBySlug) -> dict[str, list[HistoryItem]]:
    """Items of *incoming* whose timestamp is not yet present in *existing*.

    Used when importing a local history into the store: only the
    difference is persisted.
    """
    out: dict[str, list[HistoryItem]] = {}
    for slug, items in incoming.items():
        known = {i.timestamp for i in existing.get(slug, [])}
        fresh: dict[datetime.datetime, HistoryItem] = {}
        for item in items:
            if item.timestamp not in known:
                fresh.setdefault(item.timestamp, item)
        if fresh:
            out[slug] = sorted(fresh.values(), key=lambda i: i.timestamp)
    return out


def _copy(history: History) -> dict[Hashable, dict[str, list[HistoryItem]]]:
    return {uid: {slug: list(items) for slug, items in by_slug.items()} for uid, by_slug in history.items()}
