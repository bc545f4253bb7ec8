"""Create-place form validation."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, ValidationInfo, field_validator

from .coords import INVALID_FORMAT_MESSAGE, parse_lat_lng
from .models import Coordinate


class PlaceType(str, Enum):
    URBAN_WALK = "urban_walk"
    NATURE_WALK = "nature_walk"
    VIEWPOINT = "viewpoint"
    PARK_FOREST = "park_forest"
    INDUSTRIAL = "industrial"
    LAKE_RIVER = "lake_river"
    OTHER = "other"


_TEXT_LIMITS: dict[str, tuple[int, str, str]] = {
    "name": (200, "Název je povinný", "Název je příliš dlouhý (max 200 znaků)"),
    "area": (100, "Oblast je povinná", "Oblast je příliš dlouhá (max 100 znaků)"),
    "why": (500, "Popis je povinný", "Popis je příliš dlouhý (max 500 znaků)"),
}

_INT_LIMITS: dict[str, tuple[int, int, str, str]] = {
    "time_min": (1, 1440, "Minimálně 1 minuta", "Maximum 1440 minut (24 hodin)"),
    "difficulty": (1, 5, "Minimálně 1", "Maximálně 5"),
}

_COORD_REQUIRED = {
    "start_coords": "Start souřadnice jsou povinné",
    "end_coords": "Cíl souřadnice jsou povinné",
}

# Messages for fields absent from the submission entirely.
_REQUIRED_MESSAGES: dict[str, str] = {
    **{name: limits[1] for name, limits in _TEXT_LIMITS.items()},
    **_COORD_REQUIRED,
    "type": "Vyber platný typ místa",
    "time_min": "Zadej číslo",
    "difficulty": "Zadej číslo",
}


class CreatePlaceInput(BaseModel):
    """Validated create-place form submission."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: PlaceType
    area: str
    why: str
    time_min: int
    difficulty: int
    start_coords: str
    end_coords: str

    @field_validator("name", "area", "why")
    @classmethod
    def _check_text(cls, value: str, info: ValidationInfo) -> str:
        max_len, empty_msg, long_msg = _TEXT_LIMITS[info.field_name]
        if len(value) < 1:
            raise ValueError(empty_msg)
        if len(value) > max_len:
            raise ValueError(long_msg)
        return value

    @field_validator("type", mode="before")
    @classmethod
    def _check_type(cls, value: Any) -> Any:
        if isinstance(value, PlaceType) or value in [member.value for member in PlaceType]:
            return value
        raise ValueError(_REQUIRED_MESSAGES["type"])

    @field_validator("time_min", "difficulty", mode="before")
    @classmethod
    def _check_int(cls, value: Any, info: ValidationInfo) -> int:
        low, high, low_msg, high_msg = _INT_LIMITS[info.field_name]
        try:
            number = float(str(value).strip()) if not isinstance(value, (int, float)) else float(value)
        except ValueError:
            raise ValueError("Zadej číslo") from None
        if number != number:
            raise ValueError("Zadej číslo")
        if not number.is_integer():
            raise ValueError("Musí být celé číslo")
        if number < low:
            raise ValueError(low_msg)
        if number > high:
            raise ValueError(high_msg)
        return int(number)

    @field_validator("start_coords", "end_coords")
    @classmethod
    def _check_coords(cls, value: str, info: ValidationInfo) -> str:
        if len(value) < 1:
            raise ValueError(_COORD_REQUIRED[info.field_name])
        if parse_lat_lng(value) is None:
            raise ValueError(INVALID_FORMAT_MESSAGE)
        return value

    @property
    def start(self) -> Coordinate:
        return parse_lat_lng(self.start_coords)  # type: ignore[return-value]

    @property
    def end(self) -> Coordinate:
        return parse_lat_lng(self.end_coords)  # type: ignore[return-value]


def _error_message(field_name: str, error: dict) -> str:
    if error["type"] == "missing" and field_name in _REQUIRED_MESSAGES:
        return _REQUIRED_MESSAGES[field_name]
    ctx = error.get("ctx") or {}
    if isinstance(ctx.get("error"), ValueError):
        return str(ctx["error"])
    return error["msg"]


def validate_place_form(data: dict[str, Any]) -> tuple[CreatePlaceInput | None, dict[str, str]]:
    """Validate raw form data, returning the model or per-field messages."""
    try:
        return CreatePlaceInput.model_validate(data), {}
    except ValidationError as exc:
        errors: dict[str, str] = {}
        for error in exc.errors():
            field_name = str(error["loc"][0]) if error["loc"] else "__root__"
            errors.setdefault(field_name, _error_message(field_name, error))
        return None, errors
