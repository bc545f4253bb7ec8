from __future__ import annotations

import pytest

from weelio_core.models import ProgressionState
from weelio_core.xp import XP_PER_LEVEL, calculate_level, calculate_level_progress, format_xp, xp_for_next_level


@pytest.mark.parametrize(("total_xp", "level"), [(0, 1), (99, 1), (100, 2), (500, 6), (1234, 13)])
def test_level_curve(total_xp: int, level: int) -> None:
    assert calculate_level(total_xp) == level


def test_each_hundred_xp_is_one_level() -> None:
    for total_xp in range(0, 1000, 37):
        assert calculate_level(total_xp + XP_PER_LEVEL) == calculate_level(total_xp) + 1
        assert calculate_level(total_xp) == calculate_level(total_xp)


def test_level_functions_are_total() -> None:
    # non-negative XP is the caller's job; nothing here raises
    assert calculate_level(-1) == 0
    assert 0.0 <= calculate_level_progress(-50).progress_percent <= 100.0


def test_progress_at_zero() -> None:
    assert calculate_level_progress(0) == ProgressionState(
        current_level=1,
        xp_in_current_level=0,
        xp_needed_for_next_level=100,
        progress_percent=0.0,
    )


def test_progress_mid_level() -> None:
    state = calculate_level_progress(250)

    assert state.current_level == 3
    assert state.xp_in_current_level == 50
    assert state.xp_needed_for_next_level == 100
    assert state.progress_percent == 50.0


def test_progress_resets_on_level_boundary() -> None:
    state = calculate_level_progress(300)

    assert state.current_level == 4
    assert state.xp_in_current_level == 0
    assert state.progress_percent == 0.0


def test_progress_percent_stays_within_bounds() -> None:
    for total_xp in range(0, 2000, 13):
        assert 0.0 <= calculate_level_progress(total_xp).progress_percent < 100.0


def test_next_level_threshold_and_display() -> None:
    assert xp_for_next_level(3) == 300
    assert format_xp(1234) == "1,234"
    assert format_xp(1234567) == "1,234,567"
    assert format_xp(0) == "0"
