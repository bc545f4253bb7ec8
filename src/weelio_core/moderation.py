"""Moderation report intake and the admin action state transition.

A report starts ``open``. Hiding or deleting the reported content resolves
it; dismissing closes it without touching the content. Closed reports
accept no further actions.
"""

from __future__ import annotations

import logging
from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator

from .models import ModerationActionResult, ReportStatus

MIN_REASON_LENGTH = 5

logger = logging.getLogger("weelio_core.moderation")


class ReportTargetType(str, Enum):
    PLACE_PHOTO = "place_photo"
    PLACE_MEDIA = "place_media"
    JOURNAL_ENTRY = "journal_entry"
    RIDDLE = "riddle"


class ModerationAction(str, Enum):
    HIDE = "hide"
    DELETE = "delete"
    DISMISS = "dismiss"


_TRANSITIONS: dict[ModerationAction, ReportStatus] = {
    ModerationAction.HIDE: ReportStatus.RESOLVED,
    ModerationAction.DELETE: ReportStatus.RESOLVED,
    ModerationAction.DISMISS: ReportStatus.DISMISSED,
}


class ReportRequest(BaseModel):
    """A user's request to flag a piece of content."""

    model_config = ConfigDict(frozen=True)

    target_type: ReportTargetType
    target_id: str
    reason: str
    status: ReportStatus = ReportStatus.OPEN

    @field_validator("target_id")
    @classmethod
    def _check_target_id(cls, value: str) -> str:
        if not value:
            raise ValueError("target_id is required")
        return value

    @field_validator("reason")
    @classmethod
    def _check_reason(cls, value: str) -> str:
        trimmed = value.strip()
        if len(trimmed) < MIN_REASON_LENGTH:
            raise ValueError(f"Důvod musí mít alespoň {MIN_REASON_LENGTH} znaků")
        return trimmed


def apply_moderation_action(status: ReportStatus | str, action: ModerationAction | str) -> ModerationActionResult:
    """Return the report's next status, or a failed result for invalid moves."""
    try:
        current = ReportStatus(status)
    except ValueError:
        valid = ", ".join(item.value for item in ReportStatus)
        return ModerationActionResult(
            ok=False,
            status=None,
            error_message=f"Invalid report status. Must be one of: {valid}",
        )

    try:
        chosen = ModerationAction(action)
    except ValueError:
        valid = ", ".join(item.value for item in ModerationAction)
        return ModerationActionResult(
            ok=False,
            status=current,
            error_message=f"Invalid action. Must be one of: {valid}",
        )

    if current != ReportStatus.OPEN:
        logger.info("moderation_action_rejected", extra={"status": current.value, "action": chosen.value})
        return ModerationActionResult(ok=False, status=current, error_message="Report is already closed")

    next_status = _TRANSITIONS[chosen]
    logger.info(
        "moderation_action_applied",
        extra={"action": chosen.value, "from_status": current.value, "to_status": next_status.value},
    )
    return ModerationActionResult(ok=True, status=next_status)
