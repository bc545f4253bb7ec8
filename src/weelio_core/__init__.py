"""Pure gamification and geo-input logic behind the Weelio web app."""

from .coords import coord_error_message, parse_coordinates, parse_lat_lng
from .models import Coordinate, CoordinateParseError, DailyRiddleQuota, ParseErrorKind, ProgressionState
from .riddles import daily_riddle_quota, riddle_quota
from .xp import calculate_level, calculate_level_progress

__all__ = [
    "Coordinate",
    "CoordinateParseError",
    "DailyRiddleQuota",
    "ParseErrorKind",
    "ProgressionState",
    "calculate_level",
    "calculate_level_progress",
    "coord_error_message",
    "daily_riddle_quota",
    "parse_coordinates",
    "parse_lat_lng",
    "riddle_quota",
]
