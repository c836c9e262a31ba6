# gecom/infrastructure/repositories/duckdb_organizacao_repo.py
from __future__ import annotations

import duckdb

from gecom.domain.organizacao.entities import Classificacao, Organizacao


class DuckDBOrganizacaoRepo:
    def __init__(self, conn: duckdb.DuckDBPyConnection) -> None:
        self._conn = conn

    def listar(self) -> list[Organizacao]:
        rows = self._conn.execute("""
            SELECT codigo, secretaria, sigla, classificacao
            FROM organizations
            ORDER BY codigo
        """).fetchall()
        return [
            Organizacao(
                codigo=int(r[0]),
                secretaria=str(r[1]),
                sigla=str(r[2]),
                classificacao=Classificacao(str(r[3])),
            )
            for r in rows
        ]

    def mapa_secretaria_para_sigla(self) -> dict[str, str]:
        """lower(trim(secretaria)) -> sigla. Usado pela carga de servidores."""
        rows = self._conn.execute("SELECT secretaria, sigla FROM organizations").fetchall()
        return {str(r[0]).strip().lower(): str(r[1]) for r in rows}
