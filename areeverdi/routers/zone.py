from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from areeverdi.repositories.json_storage import StorageError
from areeverdi.repositories.zone_storage import ZoneStore

router = APIRouter(prefix="/zone", tags=["zone"])


def _get_zone_store(request: Request) -> ZoneStore:
    store = getattr(getattr(request.app, "state", None), "zone_store", None)
    if not store:
        raise RuntimeError("ZoneStore non configurato")
    return store


@router.get("")
def list_zone(request: Request):
    try:
        zones = _get_zone_store(request).load()
    except StorageError:
        return JSONResponse({"success": False, "error": "Errore nella lettura delle zone"}, status_code=500)
    return {"success": True, "message": f"{len(zones)} zone restituite con successo", "results": zones}
