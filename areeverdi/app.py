import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from areeverdi.core.config import Settings, get_settings
from areeverdi.core.log import RequestLogMiddleware
from areeverdi.repositories.json_storage import AreaStore
from areeverdi.repositories.zone_storage import ZoneStore
from areeverdi.routers import aree as aree_router
from areeverdi.routers import zone as zone_router
from areeverdi.services.area_service import AreaService

logger = logging.getLogger(__name__)

DEV_ORIGINS = {
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "http://localhost:5173",
    "http://127.0.0.1:5173",
}


async def _invalid_request(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse({"success": False, "error": "Richiesta non valida"}, status_code=400)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application; store paths come from settings so tests can inject their own."""
    settings = settings or get_settings()
    app = FastAPI(title="Sistema Gestione Aree Verdi")

    allowed_cors = set(settings.cors_origins)
    if settings.app_env != "prod":
        allowed_cors.update(DEV_ORIGINS)
    if allowed_cors:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=sorted(allowed_cors),
            allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
            allow_headers=["*"],
        )
    app.add_middleware(RequestLogMiddleware)
    app.add_exception_handler(RequestValidationError, _invalid_request)

    app.state.settings = settings
    app.state.area_service = AreaService(AreaStore(settings.data_file))
    app.state.zone_store = ZoneStore(settings.zone_coords_file)

    app.include_router(aree_router.router)
    app.include_router(zone_router.router)

    @app.get("/health")
    def health():
        return {"ok": True}

    logger.info("Archivio aree: %s", settings.data_file)
    return app


app = create_app()
