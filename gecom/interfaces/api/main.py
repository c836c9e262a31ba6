# gecom/interfaces/api/main.py
from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from gecom.infrastructure.config import Settings, get_settings
from gecom.infrastructure.database import Database
from gecom.interfaces.api.routes.cargo_routes import router as cargo_router
from gecom.interfaces.api.routes.export_routes import router as export_router
from gecom.interfaces.api.routes.organizacao_routes import router as organizacao_router
from gecom.interfaces.api.routes.servidor_routes import router as servidor_router


def create_app(settings: Settings | None = None, database: Database | None = None) -> FastAPI:
    """Raiz de composicao: a Database e criada aqui e vive no lifespan."""
    settings = settings or get_settings()
    database = database or Database.from_settings(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        database.abrir()  # ErroConectividade aborta o startup
        database.aplicar_schema()
        app.state.database = database
        yield
        database.fechar()

    app = FastAPI(
        title="GECOM API",
        debug=settings.debug,
        lifespan=lifespan,
        docs_url="/api/docs",
        redoc_url=None,
    )

    @app.middleware("http")
    async def add_security_headers(request: Request, call_next: object) -> Response:
        response = await call_next(request)  # type: ignore[misc]
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        return response  # type: ignore[no-any-return]

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["*"],
    )

    # export ANTES de servidor (path conflict: /employees/export)
    app.include_router(export_router, prefix="/api")
    app.include_router(servidor_router, prefix="/api")
    app.include_router(organizacao_router, prefix="/api")
    app.include_router(cargo_router, prefix="/api")
    return app
