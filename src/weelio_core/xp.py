"""XP and level calculation.

Every level costs a flat ``XP_PER_LEVEL`` points:

    0 XP   -> level 1
    99 XP  -> level 1
    100 XP -> level 2
    500 XP -> level 6
"""

from __future__ import annotations

from .models import ProgressionState

XP_PER_LEVEL = 100


def calculate_level(total_xp: int) -> int:
    """Level for ``total_xp``; callers pass non-negative XP."""
    return total_xp // XP_PER_LEVEL + 1


def xp_for_next_level(current_level: int) -> int:
    """Cumulative XP at which ``current_level`` ends."""
    return current_level * XP_PER_LEVEL


def calculate_level_progress(total_xp: int) -> ProgressionState:
    current_level = calculate_level(total_xp)
    xp_at_level_start = (current_level - 1) * XP_PER_LEVEL
    xp_in_current_level = total_xp - xp_at_level_start
    progress_percent = max(0.0, min(100.0, xp_in_current_level / XP_PER_LEVEL * 100))

    return ProgressionState(
        current_level=current_level,
        xp_in_current_level=xp_in_current_level,
        xp_needed_for_next_level=XP_PER_LEVEL,
        progress_percent=progress_percent,
    )


def format_xp(xp: int) -> str:
    """Thousands-separated XP amount, without a unit."""
    return f"{xp:,}"
