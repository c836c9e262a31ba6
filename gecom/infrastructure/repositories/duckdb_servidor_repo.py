# gecom/infrastructure/repositories/duckdb_servidor_repo.py
from __future__ import annotations

from datetime import date
from decimal import Decimal

import duckdb

from gecom.domain.servidor.entities import NovaOrdem, Servidor
from gecom.domain.servidor.value_objects import Salario, StatusServidor

_COLUNAS = (
    "id, servidor, cargo_efetivo, simbolo, data_nomeacao, salario, "
    "redistribuicao, status, secretaria, ordem"
)


class DuckDBServidorRepo:
    def __init__(self, conn: duckdb.DuckDBPyConnection) -> None:
        self._conn = conn

    def listar(self, secretaria: str | None = None) -> list[Servidor]:
        """Sempre ordenado por ordem ASC; id desempata linhas sem ordem."""
        where = ""
        params: list[object] = []
        if secretaria is not None:
            where = "WHERE secretaria = ?"
            params.append(secretaria)
        rows = self._conn.execute(f"""
            SELECT {_COLUNAS}
            FROM employees
            {where}
            ORDER BY ordem ASC NULLS LAST, id ASC
        """, params).fetchall()  # noqa: S608
        return [self._hidratar(r) for r in rows]

    def buscar_por_id(self, servidor_id: int) -> Servidor | None:
        row = self._conn.execute(
            f"SELECT {_COLUNAS} FROM employees WHERE id = ?",  # noqa: S608
            [servidor_id],
        ).fetchone()
        return self._hidratar(row) if row else None

    def maior_ordem(self, secretaria: str) -> int:
        row = self._conn.execute(
            "SELECT COALESCE(max(ordem), 0) FROM employees WHERE secretaria = ?",
            [secretaria],
        ).fetchone()
        return int(row[0]) if row else 0

    def inserir(self, servidor: Servidor) -> Servidor:
        row = self._conn.execute(f"""
            INSERT INTO employees
                (servidor, cargo_efetivo, simbolo, data_nomeacao, salario,
                 redistribuicao, status, secretaria, ordem)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
            RETURNING {_COLUNAS}
        """, self._valores(servidor)).fetchone()  # noqa: S608
        if row is None:
            raise RuntimeError("INSERT em employees nao devolveu a linha criada")
        return self._hidratar(row)

    def atualizar(self, servidor_id: int, servidor: Servidor) -> Servidor | None:
        """Update de linha inteira. None quando o id nao existe."""
        row = self._conn.execute(f"""
            UPDATE employees
            SET servidor = ?,
                cargo_efetivo = ?,
                simbolo = ?,
                data_nomeacao = ?,
                salario = ?,
                redistribuicao = ?,
                status = ?,
                secretaria = ?,
                ordem = ?
            WHERE id = ?
            RETURNING {_COLUNAS}
        """, [*self._valores(servidor), servidor_id]).fetchone()  # noqa: S608
        return self._hidratar(row) if row else None

    def excluir(self, servidor_id: int) -> bool:
        rows = self._conn.execute(
            "DELETE FROM employees WHERE id = ? RETURNING id", [servidor_id]
        ).fetchall()
        return len(rows) > 0

    def secretarias_de(self, ids: list[int]) -> dict[int, str]:
        if not ids:
            return {}
        rows = self._conn.execute(
            "SELECT id, secretaria FROM employees WHERE list_contains(?, id)",
            [ids],
        ).fetchall()
        return {int(r[0]): str(r[1]) for r in rows}

    def aplicar_ordens(self, ordens: list[NovaOrdem]) -> None:
        """Um UPDATE por entrada. Chamar dentro de Database.transacao()."""
        for item in ordens:
            self._conn.execute(
                "UPDATE employees SET ordem = ? WHERE id = ?", [item.ordem, item.id]
            )

    def _valores(self, s: Servidor) -> list[object]:
        return [
            s.servidor,
            s.cargo_efetivo,
            s.simbolo,
            s.data_nomeacao,
            s.salario.valor if s.salario else None,
            s.redistribuicao,
            s.status.value,
            s.secretaria,
            s.ordem,
        ]

    def _hidratar(self, row: tuple) -> Servidor:  # type: ignore[type-arg]
        return Servidor(
            id=int(row[0]),
            servidor=str(row[1]) if row[1] else None,
            cargo_efetivo=str(row[2]) if row[2] else "",
            simbolo=str(row[3]) if row[3] else "",
            data_nomeacao=row[4] if isinstance(row[4], date) else None,
            salario=Salario(Decimal(str(row[5]))) if row[5] is not None else None,
            redistribuicao=str(row[6]) if row[6] else None,
            status=StatusServidor(str(row[7])),
            secretaria=str(row[8]),
            ordem=int(row[9]) if row[9] is not None else None,
        )
