# gecom/interfaces/api/dependencies.py
from collections.abc import Generator

import duckdb
from fastapi import Depends, Request

from gecom.application.services.cargo_service import CargoService
from gecom.application.services.export_service import ExportService
from gecom.application.services.relatorio_service import RelatorioService
from gecom.application.services.servidor_service import ServidorService
from gecom.infrastructure.database import Database
from gecom.infrastructure.repositories.duckdb_cargo_repo import DuckDBCargoRepo
from gecom.infrastructure.repositories.duckdb_crescimento_repo import DuckDBCrescimentoRepo
from gecom.infrastructure.repositories.duckdb_organizacao_repo import DuckDBOrganizacaoRepo
from gecom.infrastructure.repositories.duckdb_servidor_repo import DuckDBServidorRepo


def get_database(request: Request) -> Database:
    return request.app.state.database  # type: ignore[no-any-return]


def get_cursor(
    database: Database = Depends(get_database),  # noqa: B008
) -> Generator[duckdb.DuckDBPyConnection, None, None]:
    cur = database.cursor()
    try:
        yield cur
    finally:
        cur.close()


def get_organizacao_repo(
    cur: duckdb.DuckDBPyConnection = Depends(get_cursor),  # noqa: B008
) -> DuckDBOrganizacaoRepo:
    return DuckDBOrganizacaoRepo(cur)


def get_crescimento_repo(
    cur: duckdb.DuckDBPyConnection = Depends(get_cursor),  # noqa: B008
) -> DuckDBCrescimentoRepo:
    return DuckDBCrescimentoRepo(cur)


def get_cargo_service(
    cur: duckdb.DuckDBPyConnection = Depends(get_cursor),  # noqa: B008
) -> CargoService:
    return CargoService(cargo_repo=DuckDBCargoRepo(cur))


def get_servidor_service(
    cur: duckdb.DuckDBPyConnection = Depends(get_cursor),  # noqa: B008
    database: Database = Depends(get_database),  # noqa: B008
) -> ServidorService:
    return ServidorService(servidor_repo=DuckDBServidorRepo(cur), database=database)


def get_relatorio_service(
    cur: duckdb.DuckDBPyConnection = Depends(get_cursor),  # noqa: B008
) -> RelatorioService:
    return RelatorioService(
        servidor_repo=DuckDBServidorRepo(cur),
        organizacao_repo=DuckDBOrganizacaoRepo(cur),
    )


def get_export_service() -> ExportService:
    return ExportService()
