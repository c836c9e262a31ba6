# gecom/infrastructure/repositories/duckdb_cargo_repo.py
from __future__ import annotations

import duckdb

from gecom.domain.cargo.entities import Cargo
from gecom.domain.cargo.value_objects import ChaveCargo


class DuckDBCargoRepo:
    def __init__(self, conn: duckdb.DuckDBPyConnection) -> None:
        self._conn = conn

    def listar(self) -> list[Cargo]:
        rows = self._conn.execute("""
            SELECT id, numero, cargo_efetivo, simbolo
            FROM positions
            ORDER BY numero, id
        """).fetchall()
        return [self._hidratar(r) for r in rows]

    def buscar_por_chave(self, chave: ChaveCargo) -> Cargo | None:
        row = self._conn.execute(
            "SELECT id, numero, cargo_efetivo, simbolo FROM positions WHERE chave = ?",
            [chave.valor],
        ).fetchone()
        return self._hidratar(row) if row else None

    def maior_numero(self) -> int:
        row = self._conn.execute("SELECT COALESCE(max(numero), 0) FROM positions").fetchone()
        return int(row[0]) if row else 0

    def inserir(self, numero: int, cargo_efetivo: str, simbolo: str, chave: ChaveCargo) -> Cargo | None:
        """INSERT ... ON CONFLICT DO NOTHING. None quando a chave ja existia."""
        row = self._conn.execute("""
            INSERT INTO positions (numero, cargo_efetivo, simbolo, chave)
            VALUES (?, ?, ?, ?)
            ON CONFLICT (chave) DO NOTHING
            RETURNING id, numero, cargo_efetivo, simbolo
        """, [numero, cargo_efetivo.strip(), simbolo.strip(), chave.valor]).fetchone()
        return self._hidratar(row) if row else None

    def _hidratar(self, row: tuple) -> Cargo:  # type: ignore[type-arg]
        return Cargo(
            id=int(row[0]),
            numero=int(row[1]),
            cargo_efetivo=str(row[2]),
            simbolo=str(row[3]),
        )
