"""Free-text latitude/longitude parsing for place creation.

Accepted shapes, after all whitespace is removed:

  - ``49.83412,18.28234``   one comma, dot decimals
  - ``49,8,18.28234``       two commas, one decimal comma (lat or lng)
  - ``49,83412,18,28234``   three commas, decimal commas in both values

With two commas the decimal comma and the separator look identical, so the
candidate splits are tried in order and the first geographically valid one
wins. Inputs valid under both splits resolve to the latitude-decimal reading.
"""

from __future__ import annotations

import logging
import math
import re
from typing import Callable

from .models import Coordinate, CoordinateParseError, ParseErrorKind

INVALID_FORMAT_MESSAGE = "Neplatný formát. Použij: lat,lng (např. 49.83412, 18.28234)"
REQUIRED_MESSAGE = "Souřadnice jsou povinné"

LAT_RANGE = (-90.0, 90.0)
LNG_RANGE = (-180.0, 180.0)

_NUMBER_PAT = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?$", re.ASCII)

_Candidate = Callable[[list[str]], tuple[str, str]]

_TWO_COMMA_CANDIDATES: tuple[_Candidate, ...] = (
    lambda parts: (f"{parts[0]}.{parts[1]}", parts[2]),
    lambda parts: (parts[0], f"{parts[1]}.{parts[2]}"),
)

logger = logging.getLogger("weelio_core.coords")


def is_valid_lat(lat: float) -> bool:
    return LAT_RANGE[0] <= lat <= LAT_RANGE[1]


def is_valid_lng(lng: float) -> bool:
    return LNG_RANGE[0] <= lng <= LNG_RANGE[1]


def _to_float(text: str) -> float | None:
    if not _NUMBER_PAT.match(text):
        return None
    value = float(text)
    return value if math.isfinite(value) else None


def _build(lat_text: str, lng_text: str) -> Coordinate | ParseErrorKind:
    lat = _to_float(lat_text)
    lng = _to_float(lng_text)
    if lat is None or lng is None:
        return ParseErrorKind.INVALID_NUMBER
    if not is_valid_lat(lat) or not is_valid_lng(lng):
        return ParseErrorKind.OUT_OF_RANGE
    return Coordinate(lat=lat, lng=lng)


def _reject(kind: ParseErrorKind, text: object) -> CoordinateParseError:
    logger.debug("coordinates_rejected", extra={"kind": kind.value, "raw_input": text})
    message = REQUIRED_MESSAGE if kind == ParseErrorKind.EMPTY else INVALID_FORMAT_MESSAGE
    return CoordinateParseError(kind=kind, message=message)


def parse_coordinates(text: str) -> Coordinate | CoordinateParseError:
    """Parse ``text`` into a Coordinate, or describe why it was rejected."""
    if not text or not isinstance(text, str):
        return _reject(ParseErrorKind.EMPTY, text)

    parts = "".join(text.split()).split(",")
    comma_count = len(parts) - 1

    if comma_count == 0:
        return _reject(ParseErrorKind.NO_SEPARATOR, text)

    if comma_count == 1:
        lat_text, lng_text = parts
    elif comma_count == 2:
        for candidate in _TWO_COMMA_CANDIDATES:
            result = _build(*candidate(parts))
            if isinstance(result, Coordinate):
                return result
        return _reject(ParseErrorKind.AMBIGUOUS, text)
    elif comma_count == 3:
        lat_text, lng_text = f"{parts[0]}.{parts[1]}", f"{parts[2]}.{parts[3]}"
    else:
        return _reject(ParseErrorKind.TOO_MANY_SEPARATORS, text)

    result = _build(lat_text, lng_text)
    if isinstance(result, ParseErrorKind):
        return _reject(result, text)
    return result


def parse_lat_lng(text: str) -> Coordinate | None:
    """Sentinel form of :func:`parse_coordinates`: ``None`` on any failure."""
    result = parse_coordinates(text)
    return result if isinstance(result, Coordinate) else None


def coord_error_message(text: str) -> str:
    """Return the user-facing validation message, or ``""`` for valid input."""
    result = parse_coordinates(text)
    if isinstance(result, CoordinateParseError):
        return result.message
    return ""
