# gecom/interfaces/api/server.py
from __future__ import annotations

import logging
import sys

import uvicorn

from gecom.domain.errors import ErroConectividade
from gecom.infrastructure.config import get_settings
from gecom.infrastructure.database import Database
from gecom.interfaces.api.main import create_app

logger = logging.getLogger(__name__)


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    settings = get_settings()
    database = Database.from_settings(settings)
    try:
        database.abrir()
    except ErroConectividade as err:
        logger.error("%s", err)
        sys.exit(1)

    app = create_app(settings, database)
    logger.info("Servidor rodando em http://%s:%d", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
