"""Riddle attempt policy: daily quota, answer checking and attempt evaluation."""

from __future__ import annotations

import logging
import math
from datetime import datetime, time
from zoneinfo import ZoneInfo

from .models import DailyRiddleQuota, RiddleAttemptOutcome

MAX_DAILY_ATTEMPTS = 5
DEFAULT_MAX_ATTEMPTS = 3
NUMBER_ANSWER = "number"

logger = logging.getLogger("weelio_core.riddles")


def daily_riddle_quota(attempted_today: int, limit: int = MAX_DAILY_ATTEMPTS) -> int:
    """Remaining attempts for today; never negative."""
    return max(0, limit - attempted_today)


def riddle_quota(attempted_today: int, limit: int = MAX_DAILY_ATTEMPTS) -> DailyRiddleQuota:
    return DailyRiddleQuota(limit=limit, remaining=daily_riddle_quota(attempted_today, limit))


def attempt_day_window(now: datetime, tz: str = "UTC") -> tuple[str, str]:
    """Return inclusive ISO bounds of the calendar day containing ``now`` in ``tz``.

    Both bounds carry the zone's UTC offset. Naive datetimes are taken to
    already be in ``tz``.
    """
    zone = ZoneInfo(tz)
    local = now.astimezone(zone) if now.tzinfo else now.replace(tzinfo=zone)
    start = datetime.combine(local.date(), time.min, tzinfo=zone)
    end = datetime.combine(local.date(), time.max, tzinfo=zone)
    return start.isoformat(), end.isoformat()


def attempts_left(max_attempts: int | None, attempts_used: int) -> int:
    limit = DEFAULT_MAX_ATTEMPTS if max_attempts is None else max_attempts
    return max(0, limit - attempts_used)


def _normalize_text(value: object) -> str:
    return str(value if value is not None else "").strip().lower()


def _to_number(value: object) -> float | None:
    try:
        number = float(str(value).strip())
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def check_answer(answer_type: str, expected: object, given: object) -> bool:
    if answer_type == NUMBER_ANSWER:
        expected_number = _to_number(expected)
        given_number = _to_number(given)
        return expected_number is not None and expected_number == given_number
    return _normalize_text(expected) == _normalize_text(given)


def evaluate_attempt(
    *,
    answer_type: str,
    expected: object,
    given: object,
    xp_reward: int | None,
    attempts_used_today: int,
    limit: int = MAX_DAILY_ATTEMPTS,
) -> RiddleAttemptOutcome:
    """Decide the result of one riddle attempt given today's attempt count.

    An exhausted quota short-circuits without checking the answer, and the
    outcome is marked as not to be recorded.
    """
    remaining = daily_riddle_quota(attempts_used_today, limit)
    if remaining <= 0:
        logger.info("riddle_attempt_quota_exhausted", extra={"attempts_used_today": attempts_used_today, "limit": limit})
        return RiddleAttemptOutcome(correct=False, xp_awarded=0, remaining_attempts=0, recorded=False)

    correct = check_answer(answer_type, expected, given)
    xp_awarded = (xp_reward or 0) if correct else 0
    logger.debug("riddle_attempt_evaluated", extra={"correct": correct, "xp_awarded": xp_awarded})
    return RiddleAttemptOutcome(correct=correct, xp_awarded=xp_awarded, remaining_attempts=remaining - 1)
