from __future__ import annotations

from typing import Any

from weelio_core.coords import INVALID_FORMAT_MESSAGE
from weelio_core.models import Coordinate
from weelio_core.places import PlaceType, validate_place_form


def _form(**overrides: Any) -> dict[str, Any]:
    data: dict[str, Any] = {
        "name": "Landek Park",
        "type": "park_forest",
        "area": "Ostrava",
        "why": "Old mine heaps turned into a forest park.",
        "time_min": "90",
        "difficulty": 2,
        "start_coords": "49,85612, 18,26234",
        "end_coords": "49.85801, 18.27012",
    }
    data.update(overrides)
    return data


def test_valid_form_is_accepted_and_coerced() -> None:
    place, errors = validate_place_form(_form())

    assert errors == {}
    assert place is not None
    assert place.type == PlaceType.PARK_FOREST
    assert place.time_min == 90
    assert place.start == Coordinate(lat=49.85612, lng=18.26234)
    assert place.end == Coordinate(lat=49.85801, lng=18.27012)


def test_bad_coordinates_get_format_guidance() -> None:
    place, errors = validate_place_form(_form(start_coords="Ostrava centrum", end_coords=""))

    assert place is None
    assert errors["start_coords"] == INVALID_FORMAT_MESSAGE
    assert errors["end_coords"] == "Cíl souřadnice jsou povinné"


def test_text_length_limits() -> None:
    _, errors = validate_place_form(_form(name="", area="x" * 101, why="y" * 501))

    assert errors == {
        "name": "Název je povinný",
        "area": "Oblast je příliš dlouhá (max 100 znaků)",
        "why": "Popis je příliš dlouhý (max 500 znaků)",
    }


def test_numeric_fields() -> None:
    _, errors = validate_place_form(_form(time_min="abc", difficulty="6"))
    assert errors == {"time_min": "Zadej číslo", "difficulty": "Maximálně 5"}

    _, errors = validate_place_form(_form(time_min="1.5", difficulty=0))
    assert errors == {"time_min": "Musí být celé číslo", "difficulty": "Minimálně 1"}

    _, errors = validate_place_form(_form(time_min=1441))
    assert errors == {"time_min": "Maximum 1440 minut (24 hodin)"}


def test_unknown_place_type() -> None:
    _, errors = validate_place_form(_form(type="castle"))

    assert errors == {"type": "Vyber platný typ místa"}


def test_missing_fields_use_required_messages() -> None:
    data = _form()
    del data["name"]
    del data["start_coords"]

    _, errors = validate_place_form(data)

    assert errors == {"name": "Název je povinný", "start_coords": "Start souřadnice jsou povinné"}
