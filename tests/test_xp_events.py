from __future__ import annotations

import base64
import json

import pytest

from weelio_core.xp_events import (
    XpEventCursor,
    clamp_page_size,
    cursor_filter,
    decode_cursor,
    encode_cursor,
    paginate,
)


def test_cursor_is_base64_json() -> None:
    raw = encode_cursor("2024-05-01T10:00:00+00:00", "evt-9")

    assert json.loads(base64.b64decode(raw)) == {"created_at": "2024-05-01T10:00:00+00:00", "id": "evt-9"}
    assert decode_cursor(raw) == XpEventCursor(created_at="2024-05-01T10:00:00+00:00", id="evt-9")


def test_plain_timestamp_is_a_legacy_cursor() -> None:
    cursor = decode_cursor("2024-05-01T10:00:00+00:00")

    assert cursor == XpEventCursor(created_at="2024-05-01T10:00:00+00:00")
    assert cursor is not None and cursor.is_legacy
    assert cursor_filter(cursor) == "created_at.lt.2024-05-01T10:00:00+00:00"


def test_garbage_cursor_is_ignored() -> None:
    assert decode_cursor("not a cursor!") is None
    assert decode_cursor("") is None


def test_tuple_cursor_filter() -> None:
    cursor = XpEventCursor(created_at="2024-05-01", id="e1")

    assert cursor_filter(cursor) == "created_at.lt.2024-05-01,and(created_at.eq.2024-05-01,id.lt.e1)"


def test_clamp_page_size() -> None:
    assert clamp_page_size(None) == 20
    assert clamp_page_size("10") == 10
    assert clamp_page_size("500") == 50
    assert clamp_page_size("zero") == 20
    assert clamp_page_size(0) == 1


def test_paginate_emits_cursor_only_when_more_rows_exist() -> None:
    rows = [{"id": f"e{i}", "created_at": f"2024-05-0{9 - i}"} for i in range(3)]

    page, next_cursor = paginate(rows, limit=2)
    assert [row["id"] for row in page] == ["e0", "e1"]
    assert decode_cursor(next_cursor or "") == XpEventCursor(created_at="2024-05-08", id="e1")

    page, next_cursor = paginate(rows, limit=3)
    assert len(page) == 3
    assert next_cursor is None


def _raw_cursor(payload: dict) -> str:
    return base64.b64encode(json.dumps(payload).encode("utf-8")).decode("ascii")


def test_cursor_with_filter_syntax_in_timestamp_is_rejected() -> None:
    raw = _raw_cursor({"created_at": "2099-01-01),user_id.neq.me,or(id.gt.0", "id": "x"})

    assert decode_cursor(raw) is None


def test_cursor_with_filter_syntax_in_id_is_rejected() -> None:
    raw = _raw_cursor({"created_at": "2024-05-01T10:00:00+00:00", "id": "e1),user_id.neq.me"})

    assert decode_cursor(raw) is None


def test_comma_fraction_timestamp_is_rejected() -> None:
    assert decode_cursor("2024-05-01T10:00:00,500") is None


def test_uuid_event_id_is_accepted() -> None:
    raw = encode_cursor("2024-05-01T10:00:00Z", "3f2b8c1e-9d4a-4b7e-8f21-6a0c5d9e7b13")

    cursor = decode_cursor(raw)
    assert cursor is not None
    assert cursor.id == "3f2b8c1e-9d4a-4b7e-8f21-6a0c5d9e7b13"


def test_filter_refuses_hand_built_unsafe_cursor() -> None:
    with pytest.raises(ValueError):
        cursor_filter(XpEventCursor(created_at="2024-05-01", id="e1),or(id.gt.0"))
