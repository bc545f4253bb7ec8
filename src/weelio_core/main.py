"""CLI entrypoint for poking at the Weelio core from a shell."""

from __future__ import annotations

from dataclasses import asdict
from datetime import datetime, timezone

import typer
from rich import print

from weelio_core.config import settings
from weelio_core.coords import parse_coordinates
from weelio_core.models import Coordinate
from weelio_core.moderation import apply_moderation_action
from weelio_core.riddles import attempt_day_window, evaluate_attempt, riddle_quota
from weelio_core.telemetry import LoggingTelemetry, configure_logging
from weelio_core.xp import calculate_level_progress, format_xp

app = typer.Typer(help="Weelio core utilities")
telemetry = LoggingTelemetry()


@app.callback()
def _setup() -> None:
    configure_logging(settings.log_level)


@app.command()
def start() -> None:
    """Show runtime configuration."""
    print(
        {
            "app_name": settings.app_name,
            "daily_riddle_attempts": settings.daily_riddle_attempts,
            "default_riddle_max_attempts": settings.default_riddle_max_attempts,
            "reference_timezone": settings.reference_timezone,
        }
    )


@app.command("parse-coords")
def parse_coords(text: str) -> None:
    """Parse a pasted 'lat,lng' pair."""
    result = parse_coordinates(text)
    if not isinstance(result, Coordinate):
        telemetry.emit("coordinates_rejected", {"kind": result.kind.value})
        print({"ok": False, "kind": result.kind.value, "error": result.message})
        raise typer.Exit(code=1)
    print({"ok": True, "lat": result.lat, "lng": result.lng})


@app.command()
def level(total_xp: int = typer.Argument(..., min=0, help="Cumulative XP")) -> None:
    """Show level progress for a total XP amount."""
    state = calculate_level_progress(total_xp)
    print({"xp": f"{format_xp(total_xp)} XP", **asdict(state)})


@app.command()
def quota(
    attempted: int = typer.Argument(..., min=0, help="Attempts already made today"),
    limit: int = typer.Option(None, help="Daily attempt limit"),
) -> None:
    """Show the remaining riddle attempts for today."""
    effective_limit = settings.daily_riddle_attempts if limit is None else limit
    day_start, day_end = attempt_day_window(datetime.now(timezone.utc), settings.reference_timezone)
    print({**asdict(riddle_quota(attempted, effective_limit)), "window": [day_start, day_end]})


@app.command("check-answer")
def check_answer(
    expected: str = typer.Option(..., help="Stored correct answer"),
    given: str = typer.Option(..., help="Submitted answer"),
    answer_type: str = typer.Option("text", help="text or number"),
    xp_reward: int = typer.Option(0, help="XP granted for a correct answer"),
    attempted: int = typer.Option(0, help="Attempts already made today"),
) -> None:
    """Evaluate a riddle attempt against today's quota."""
    outcome = evaluate_attempt(
        answer_type=answer_type,
        expected=expected,
        given=given,
        xp_reward=xp_reward,
        attempts_used_today=attempted,
        limit=settings.daily_riddle_attempts,
    )
    telemetry.emit("riddle_attempt", asdict(outcome))
    print(asdict(outcome))


@app.command()
def moderate(
    action: str = typer.Argument(..., help="hide, delete or dismiss"),
    status: str = typer.Option("open", help="Current report status"),
) -> None:
    """Show the report status an admin action leads to."""
    result = apply_moderation_action(status, action)
    status_value = result.status.value if result.status else None
    print({"ok": result.ok, "status": status_value, "error": result.error_message})
    if not result.ok:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
