"""Run the API with uvicorn: ``python -m areeverdi``."""
import logging

import uvicorn

from areeverdi.core.config import get_settings
from areeverdi.core.log import configure_logging

logger = logging.getLogger("areeverdi")


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("Sistema Gestione Aree Verdi avviato sulla porta %s", settings.port)
    logger.info("Apri http://localhost:%s per utilizzare", settings.port)
    uvicorn.run("areeverdi.app:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
