from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Body, Request
from fastapi.responses import JSONResponse

from areeverdi.repositories.json_storage import StorageError
from areeverdi.services.area_service import AreaError, AreaService

router = APIRouter(prefix="/aree", tags=["aree"])
logger = logging.getLogger(__name__)

READ_ERROR = "Errore nella lettura dei dati"
WRITE_ERROR = "Errore nel salvataggio del file"


def _get_area_service(request: Request) -> AreaService:
    svc = getattr(getattr(request.app, "state", None), "area_service", None)
    if not svc:
        raise RuntimeError("AreaService non configurato")
    return svc


def _error_response(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"success": False, "error": message}, status_code=status_code)


def _storage_error(exc: StorageError) -> JSONResponse:
    logger.error("Errore di archiviazione: %s", exc.message)
    return _error_response(WRITE_ERROR if exc.operation == "write" else READ_ERROR, exc.status_code)


@router.get("")
def list_aree(request: Request):
    svc = _get_area_service(request)
    filters: dict[str, list[str]] = {}
    for key, value in request.query_params.multi_items():
        filters.setdefault(key, []).append(value)
    try:
        results = svc.list_areas(filters)
    except StorageError as exc:
        return _storage_error(exc)
    if not filters:
        message = f"Tutte le {len(results)} aree restituite con successo"
    elif results:
        message = f"{len(results)} aree trovate con successo"
    else:
        message = "Nessuna area trovata corrispondente ai parametri"
    return {"success": True, "message": message, "results": results}


@router.post("", status_code=201)
def create_area(request: Request, payload: Any = Body(None)):
    svc = _get_area_service(request)
    try:
        area = svc.create_area(payload)
    except AreaError as exc:
        return _error_response(exc.message, exc.status_code)
    except StorageError as exc:
        return _storage_error(exc)
    return {"success": True, "message": "Area aggiunta con successo", "area": area}


@router.put("/{id_loc}")
def update_area(id_loc: str, request: Request, payload: Any = Body(None)):
    svc = _get_area_service(request)
    try:
        area = svc.update_area(id_loc, payload)
    except AreaError as exc:
        return _error_response(exc.message, exc.status_code)
    except StorageError as exc:
        return _storage_error(exc)
    return {"success": True, "message": "Area aggiornata con successo", "area": area}


@router.delete("/{id_loc}")
def delete_area(id_loc: str, request: Request):
    svc = _get_area_service(request)
    try:
        svc.delete_area(id_loc)
    except AreaError as exc:
        return _error_response(exc.message, exc.status_code)
    except StorageError as exc:
        return _storage_error(exc)
    return {"success": True, "message": f"Area con ID Località {int(id_loc)} eliminata con successo"}
