"""Progress of a running goal against its time-linear and weekly-plan expectations."""

from __future__ import annotations

import math
from datetime import date
from typing import Iterable

from .models import GoalProgress, RunningGoal, RunRecord

PLANNED_RUNS_PER_WEEK = 6
STATUS_THRESHOLD_RATIO = 0.05


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


def _ratio(part: float, whole: float) -> float:
    return _clamp(part / whole if whole > 0 else 0.0, 0.0, 1.0)


def _round1(value: float) -> float:
    return math.floor(value * 10 + 0.5) / 10


def _status(delta_km: float, threshold: float) -> str:
    if delta_km >= threshold:
        return "ahead"
    if delta_km <= -threshold:
        return "behind"
    return "on_track"


def compute_goal_progress(goal: RunningGoal, runs: Iterable[RunRecord], today: date) -> GoalProgress:
    run_list = list(runs)
    total_km = sum(run.distance_km for run in run_list)
    total_runs = len(run_list)

    total_days = (goal.period_end - goal.period_start).days + 1
    days_until_start: int | None = None
    days_since_end: int | None = None

    if today < goal.period_start:
        phase = "upcoming"
        days_until_start = (goal.period_start - today).days
        elapsed_days = 0
        time_pct = 0.0
    elif today > goal.period_end:
        phase = "finished"
        days_since_end = (today - goal.period_end).days
        elapsed_days = total_days
        time_pct = 1.0
    else:
        phase = "active"
        elapsed_days = int(_clamp((today - goal.period_start).days + 1, 0, total_days))
        time_pct = 1.0 if total_days == 0 else _clamp(elapsed_days / total_days, 0.0, 1.0)

    if phase == "upcoming":
        expected_km = expected_runs = expected_runs_plan = expected_km_plan = 0.0
    elif phase == "finished":
        expected_km = expected_km_plan = float(goal.target_distance_km)
        expected_runs = expected_runs_plan = float(goal.target_runs)
    else:
        expected_km = goal.target_distance_km * time_pct
        expected_runs = goal.target_runs * time_pct
        planned_runs = elapsed_days / 7 * PLANNED_RUNS_PER_WEEK
        expected_runs_plan = min(goal.target_runs, max(0.0, _round1(planned_runs)))
        planned_km = (
            goal.target_distance_km * (expected_runs_plan / goal.target_runs) if goal.target_runs > 0 else 0.0
        )
        expected_km_plan = min(goal.target_distance_km, max(0.0, _round1(planned_km)))

    delta_km = total_km - expected_km
    delta_km_plan = total_km - expected_km_plan

    if phase == "upcoming":
        status = status_plan = "on_track"
    else:
        threshold = STATUS_THRESHOLD_RATIO * goal.target_distance_km
        status = _status(delta_km, threshold)
        status_plan = _status(delta_km_plan, threshold)

    return GoalProgress(
        total_km=total_km,
        total_runs=total_runs,
        km_pct=_ratio(total_km, goal.target_distance_km),
        runs_pct=_ratio(total_runs, goal.target_runs),
        plan_pct=_ratio(total_runs, goal.plan_total_runs),
        elapsed_days=elapsed_days,
        total_days=total_days,
        time_pct=time_pct,
        expected_km_by_now=expected_km,
        expected_runs_by_now=expected_runs,
        delta_km=delta_km,
        delta_runs=total_runs - expected_runs,
        status=status,
        expected_runs_by_now_plan=expected_runs_plan,
        expected_km_by_now_plan=expected_km_plan,
        delta_runs_plan=total_runs - expected_runs_plan,
        delta_km_plan=delta_km_plan,
        status_plan=status_plan,
        goal_phase=phase,
        days_until_start=days_until_start,
        days_since_end=days_since_end,
    )
