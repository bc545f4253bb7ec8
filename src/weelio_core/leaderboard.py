from __future__ import annotations

from typing import Iterable, Mapping


def rank_of(user_id: str, entries: Iterable[Mapping[str, object]]) -> int | None:
    """1-based position of ``user_id`` in an ordered top list, or ``None``."""
    for index, entry in enumerate(entries, start=1):
        if entry.get("user_id") == user_id:
            return index
    return None


def format_rank(rank: int | None, max_rank: int) -> str:
    if rank is None:
        return f"mimo TOP {max_rank}"
    return f"#{rank}"
