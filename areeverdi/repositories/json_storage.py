"""
JSON-file persistence for area records.

The whole collection is read on every load and rewritten on every save; there
is no cache shared between calls.
"""

from __future__ import annotations

from contextlib import suppress
from pathlib import Path
from typing import Any, Iterable, Mapping
import json
import logging
import os

from areeverdi.domain.areas import area_from_raw, area_to_raw

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Raised when a backing file cannot be read, parsed or written."""

    status_code = 500

    def __init__(self, message: str, path: Path | str | None = None, operation: str = "read"):
        super().__init__(message)
        self.message = message
        self.path = path
        self.operation = operation


def read_json_array(path: Path) -> list:
    """Read a JSON file whose top-level value must be an array."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise StorageError(f"Impossibile leggere {path}: {exc}", path) from exc
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise StorageError(f"JSON non valido in {path}: {exc}", path) from exc
    if not isinstance(data, list):
        raise StorageError(f"{path} deve contenere un array JSON", path)
    for index, entry in enumerate(data):
        if not isinstance(entry, dict):
            raise StorageError(f"{path}: voce {index} non è un oggetto", path)
    return data


class AreaStore:
    """Loads and saves the full area collection from a single JSON file."""

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def load(self) -> list[dict]:
        entries = read_json_array(self.path)
        return [area_from_raw(entry) for entry in entries]

    @property
    def tmp_path(self) -> Path:
        return self.path.with_name(self.path.name + ".tmp")

    def save(self, records: Iterable[Mapping[str, Any]]) -> None:
        """Write the whole collection to a sibling temp file, then swap it in."""
        raw = [area_to_raw(record) for record in records]
        tmp = self.tmp_path
        try:
            tmp.write_text(json.dumps(raw, ensure_ascii=False, indent=2), encoding="utf-8")
            os.replace(tmp, self.path)
        except OSError as exc:
            with suppress(OSError):
                if tmp.is_file():
                    tmp.unlink()
            logger.error("Errore nel salvataggio di %s", self.path, exc_info=True)
            raise StorageError(f"Impossibile scrivere {self.path}: {exc}", self.path, "write") from exc
        logger.info("File salvato correttamente: %s (%d aree)", self.path, len(raw))
