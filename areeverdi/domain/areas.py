"""Field mapping and value coercion between disk records and API records.

The backing file uses human readable labels ("ID Localita", "Superficie
totale in mq", ...) and stores numbers as strings, with a comma decimal
separator for the surface area. The API works with the short field names
below and native JSON numbers.
"""
from __future__ import annotations

import math
import re
from typing import Any, Mapping

AREA_FIELDS: dict[str, str] = {
    "idLoc": "ID Localita",
    "zona": "Zona",
    "tipo": "Tipo",
    "area": "Area",
    "classificazione": "Classificazione",
    "affidatario": "AFFIDATARIO",
    "classificazione_istat": "Classificazione ISTAT",
    "superficie_totale": "Superficie totale in mq",
    "nome_loc": "Nome Localita",
    "descrizione": "Descrizione",
}

INT_FIELDS = frozenset({"idLoc", "zona", "area"})
FLOAT_FIELDS = frozenset({"superficie_totale"})

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_int(value: Any) -> int | None:
    """Leading integer of value, None when empty or not numeric ("12a" -> 12)."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    match = _INT_PREFIX.match(str(value))
    return int(match.group(1)) if match else None


def parse_decimal(value: Any) -> float | None:
    """Parse a decimal number, accepting "1234,5" as well as 1234.5."""
    if value is None or value == "" or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
        return number if math.isfinite(number) else None
    match = _FLOAT_PREFIX.match(str(value).replace(",", ".", 1))
    if not match:
        return None
    number = float(match.group(1))
    return number if math.isfinite(number) else None


def format_number(value: float) -> str:
    """Render a number the way it reads in the data file, 1000.0 -> "1000"."""
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return str(value)


def format_superficie(value: Any) -> str:
    """Encode a surface area for disk, 1234.5 -> "1234,5", None -> ""."""
    number = parse_decimal(value)
    if number is None:
        return ""
    return format_number(number).replace(".", ",")


def _coerce(field: str, value: Any) -> Any:
    if field in FLOAT_FIELDS:
        return parse_decimal(value)
    if field in INT_FIELDS:
        return parse_int(value)
    return value


def area_from_raw(entry: Mapping[str, Any]) -> dict:
    """Map one on-disk entry to an API record."""
    return {field: _coerce(field, entry.get(label)) for field, label in AREA_FIELDS.items()}


def area_to_raw(area: Mapping[str, Any]) -> dict:
    """Map one API record back to its on-disk shape."""
    raw: dict[str, Any] = {}
    for field, label in AREA_FIELDS.items():
        value = area.get(field)
        if field in FLOAT_FIELDS:
            raw[label] = format_superficie(value)
        elif field in INT_FIELDS:
            number = parse_int(value)
            raw[label] = None if number is None else str(number)
        else:
            raw[label] = value
    return raw


def normalize_area(payload: Mapping[str, Any]) -> dict:
    """Coerce an API payload to a full record; unknown keys are dropped."""
    return {field: _coerce(field, payload.get(field)) for field in AREA_FIELDS}


def as_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return format_number(value)
    return str(value)


def matches_filters(area: Mapping[str, Any], filters: Mapping[str, Any]) -> bool:
    """
    True when, for every filter key, the record's value equals the filter value
    ignoring case and surrounding whitespace. Missing or empty values never match.
    A key given several values (a list) must match all of them.
    """
    for key, expected in filters.items():
        value = area.get(key)
        if value is None or value == "":
            return False
        text = as_text(value).strip().lower()
        wanted = expected if isinstance(expected, (list, tuple)) else [expected]
        if any(text != str(item).strip().lower() for item in wanted):
            return False
    return True
