"""Area use cases: list/filter, create, update, delete."""
from __future__ import annotations

import logging
import re
import threading
from typing import Any, Mapping

from areeverdi.domain.areas import matches_filters, normalize_area
from areeverdi.repositories.json_storage import AreaStore

logger = logging.getLogger(__name__)

_ID_PATTERN = re.compile(r"[+-]?\d+")


class AreaError(Exception):
    def __init__(self, message: str, code: str = "invalid", status_code: int = 400):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code


class InvalidAreaIdError(AreaError):
    """Raised when an idLoc is missing or not an integer."""

    def __init__(self, message: str = "ID Località non valido"):
        super().__init__(message, "invalid_id", 400)


class InvalidAreaPayloadError(AreaError):
    def __init__(self, message: str = "Dati dell'area non validi"):
        super().__init__(message, "invalid_payload", 400)


class AreaNotFoundError(AreaError):
    def __init__(self, message: str = "Area non trovata"):
        super().__init__(message, "not_found", 404)


class AreaConflictError(AreaError):
    def __init__(self, message: str = "Area già esistente con questo ID Località"):
        super().__init__(message, "conflict", 409)


def parse_area_id(value: Any) -> int:
    """
    Convert a path parameter or payload value to an idLoc.
    Accepts ints and integer strings ("42", " 42 "); anything else is rejected.
    """
    if isinstance(value, bool) or value is None:
        raise InvalidAreaIdError()
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    text = str(value).strip()
    if not _ID_PATTERN.fullmatch(text):
        raise InvalidAreaIdError()
    return int(text)


class AreaService:
    """Provides CRUD over the area collection stored by an AreaStore."""

    def __init__(self, store: AreaStore) -> None:
        self.store = store
        # one writer at a time inside this process: load, mutate, save
        self._write_lock = threading.Lock()

    def _normalize(self, payload: Any) -> dict:
        if not isinstance(payload, Mapping):
            raise InvalidAreaPayloadError()
        area = normalize_area(payload)
        if payload.get("idLoc") is not None:
            area["idLoc"] = parse_area_id(payload.get("idLoc"))
        return area

    def list_areas(self, filters: Mapping[str, Any] | None = None) -> list[dict]:
        areas = self.store.load()
        if not filters:
            return areas
        return [area for area in areas if matches_filters(area, filters)]

    def create_area(self, payload: Any) -> dict:
        area = self._normalize(payload)
        if area["idLoc"] is None:
            raise InvalidAreaIdError("ID Località obbligatorio")
        with self._write_lock:
            areas = self.store.load()
            if any(existing.get("idLoc") == area["idLoc"] for existing in areas):
                raise AreaConflictError()
            areas.append(area)
            self.store.save(areas)
        logger.info("Area %s aggiunta", area["idLoc"])
        return area

    def update_area(self, id_loc: Any, payload: Any) -> dict:
        target = parse_area_id(id_loc)
        area = self._normalize(payload)
        if area["idLoc"] is None:
            area["idLoc"] = target
        with self._write_lock:
            areas = self.store.load()
            index = next((i for i, existing in enumerate(areas) if existing.get("idLoc") == target), None)
            if index is None:
                raise AreaNotFoundError()
            if area["idLoc"] != target and any(
                existing.get("idLoc") == area["idLoc"] for i, existing in enumerate(areas) if i != index
            ):
                raise AreaConflictError()
            areas[index] = area
            self.store.save(areas)
        logger.info("Area %s aggiornata", target)
        return area

    def delete_area(self, id_loc: Any) -> int:
        """Remove every record with this idLoc and return how many were removed."""
        target = parse_area_id(id_loc)
        with self._write_lock:
            areas = self.store.load()
            remaining = [area for area in areas if area.get("idLoc") != target]
            removed = len(areas) - len(remaining)
            if not removed:
                raise AreaNotFoundError()
            self.store.save(remaining)
        logger.info("Area %s eliminata (%d record)", target, removed)
        return removed
