"""Keyset pagination helpers for the XP event history."""

from __future__ import annotations

import base64
import binascii
import json
import re
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping, Sequence

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 50

_EVENT_ID_PAT = re.compile(r"^[\w-]+$", re.ASCII)


@dataclass(frozen=True, slots=True)
class XpEventCursor:
    created_at: str
    id: str = ""

    @property
    def is_legacy(self) -> bool:
        return not self.id


def encode_cursor(created_at: str, event_id: str) -> str:
    raw = json.dumps({"created_at": created_at, "id": event_id})
    return base64.b64encode(raw.encode("utf-8")).decode("ascii")


def _is_timestamp(value: str) -> bool:
    # commas and parentheses would split or nest PostgREST filter terms
    if any(char in value for char in ",()"):
        return False
    try:
        datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return False
    return True


def _is_safe_cursor(created_at: str, event_id: str) -> bool:
    return _is_timestamp(created_at) and (not event_id or bool(_EVENT_ID_PAT.match(event_id)))


def decode_cursor(raw: str) -> XpEventCursor | None:
    """Decode a base64 JSON cursor.

    A bare ISO timestamp is accepted as a legacy ``created_at``-only cursor.
    Anything else, including cursors whose fields are not a timestamp and a
    plain identifier, yields ``None`` so the caller serves the first page.
    """
    if not raw:
        return None
    try:
        payload = json.loads(base64.b64decode(raw, validate=True).decode("utf-8"))
    except (binascii.Error, UnicodeDecodeError, ValueError):
        payload = None

    if isinstance(payload, dict) and payload.get("created_at") and payload.get("id"):
        created_at, event_id = str(payload["created_at"]), str(payload["id"])
        if not _is_safe_cursor(created_at, event_id):
            return None
        return XpEventCursor(created_at=created_at, id=event_id)

    if not _is_timestamp(raw):
        return None
    return XpEventCursor(created_at=raw)


def cursor_filter(cursor: XpEventCursor) -> str:
    """PostgREST filter selecting rows strictly after ``cursor`` in (created_at, id) DESC order."""
    if not _is_safe_cursor(cursor.created_at, cursor.id):
        raise ValueError(f"Unsafe XP event cursor: {cursor!r}")
    if cursor.is_legacy:
        return f"created_at.lt.{cursor.created_at}"
    return f"created_at.lt.{cursor.created_at},and(created_at.eq.{cursor.created_at},id.lt.{cursor.id})"


def clamp_page_size(raw: str | int | None, default: int = DEFAULT_PAGE_SIZE, maximum: int = MAX_PAGE_SIZE) -> int:
    try:
        size = int(raw) if raw is not None else default
    except (TypeError, ValueError):
        size = default
    return max(1, min(size, maximum))


def paginate(rows: Sequence[Mapping[str, Any]], limit: int) -> tuple[list[Mapping[str, Any]], str | None]:
    """Split rows fetched with ``limit + 1`` into a page and the next cursor."""
    page = list(rows[:limit])
    if len(rows) <= limit or not page:
        return page, None
    last = page[-1]
    return page, encode_cursor(str(last["created_at"]), str(last["id"]))
