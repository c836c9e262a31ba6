# gecom/infrastructure/repositories/duckdb_crescimento_repo.py
from __future__ import annotations

import duckdb

from gecom.domain.crescimento.entities import PontoCrescimento


class DuckDBCrescimentoRepo:
    def __init__(self, conn: duckdb.DuckDBPyConnection) -> None:
        self._conn = conn

    def listar(self) -> list[PontoCrescimento]:
        rows = self._conn.execute(
            "SELECT mes, total FROM organization_growth ORDER BY posicao"
        ).fetchall()
        return [PontoCrescimento(mes=str(r[0]), total=int(r[1])) for r in rows]
