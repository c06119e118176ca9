"""Read-only access to the zone coordinate reference file."""

from __future__ import annotations

from pathlib import Path

from areeverdi.domain.areas import parse_int, parse_decimal
from areeverdi.repositories.json_storage import read_json_array


class ZoneStore:
    """Zone code -> approximate coordinates and municipality label."""

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def load(self) -> list[dict]:
        zones = []
        for entry in read_json_array(self.path):
            zones.append(
                {
                    "zona": parse_int(entry.get("Zona")),
                    "lat": parse_decimal(entry.get("Lat")),
                    "lon": parse_decimal(entry.get("Lon")),
                    "municipio": entry.get("Municipio"),
                }
            )
        return zones
