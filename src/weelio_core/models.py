from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum


class ParseErrorKind(str, Enum):
    EMPTY = "empty"
    NO_SEPARATOR = "no_separator"
    TOO_MANY_SEPARATORS = "too_many_separators"
    INVALID_NUMBER = "invalid_number"
    OUT_OF_RANGE = "out_of_range"
    AMBIGUOUS = "ambiguous"


@dataclass(frozen=True, slots=True)
class Coordinate:
    lat: float
    lng: float


@dataclass(frozen=True, slots=True)
class CoordinateParseError:
    kind: ParseErrorKind
    message: str


@dataclass(frozen=True, slots=True)
class ProgressionState:
    current_level: int
    xp_in_current_level: int
    xp_needed_for_next_level: int
    progress_percent: float


@dataclass(frozen=True, slots=True)
class DailyRiddleQuota:
    limit: int
    remaining: int


@dataclass(frozen=True, slots=True)
class RiddleAttemptOutcome:
    correct: bool
    xp_awarded: int
    remaining_attempts: int
    recorded: bool = True


class ReportStatus(str, Enum):
    OPEN = "open"
    RESOLVED = "resolved"
    DISMISSED = "dismissed"


@dataclass(frozen=True, slots=True)
class ModerationActionResult:
    ok: bool
    status: ReportStatus | None
    error_message: str | None = None


@dataclass(slots=True)
class RunRecord:
    distance_km: float
    ran_on: date


@dataclass(slots=True)
class RunningGoal:
    target_distance_km: float
    target_runs: int
    plan_total_runs: int
    period_start: date
    period_end: date


@dataclass(slots=True)
class GoalProgress:
    total_km: float
    total_runs: int
    km_pct: float
    runs_pct: float
    plan_pct: float
    elapsed_days: int
    total_days: int
    time_pct: float
    expected_km_by_now: float
    expected_runs_by_now: float
    delta_km: float
    delta_runs: float
    status: str
    expected_runs_by_now_plan: float
    expected_km_by_now_plan: float
    delta_runs_plan: float
    delta_km_plan: float
    status_plan: str
    goal_phase: str
    days_until_start: int | None = None
    days_since_end: int | None = None
