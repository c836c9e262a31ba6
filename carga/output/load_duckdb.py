# carga/output/load_duckdb.py
#
# Insercao dos DataFrames validados no DuckDB da API.
#
# Cada carga roda numa unica transacao (Database.transacao): qualquer excecao
# desfaz o lote inteiro.
#
# Conflitos sao pulados por anti-join em vez de ON CONFLICT:
#   - positions: chave ja existente.
#   - employees: mesma (servidor, cargo_efetivo, simbolo, data_nomeacao,
#     secretaria). Comparacao com "=", entao linhas com algum campo null
#     (vagas sem nome ou sem data) nunca colidem, como num UNIQUE do SQL.
#
# Os DataFrames passam ao DuckDB como parquet temporario lido por
# read_parquet(), sem materializar linhas em Python.
#
# ordem: continua a partir do maior valor existente da secretaria, na ordem
# em que as linhas aparecem no arquivo.
from __future__ import annotations

import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path

import polars as pl

from carga.log import log
from gecom.domain.errors import SecretariaNaoEncontrada
from gecom.infrastructure.database import Database
from gecom.infrastructure.repositories.duckdb_organizacao_repo import DuckDBOrganizacaoRepo

_CHAVE_SERVIDOR = ("servidor", "cargo_efetivo", "simbolo", "data_nomeacao", "sigla")


@dataclass(frozen=True)
class ResumoCarga:
    lidos: int
    inseridos: int
    rejeitados: int

    @property
    def ignorados(self) -> int:
        """Validos que ja existiam (ou repetidos no proprio arquivo)."""
        return self.lidos - self.rejeitados - self.inseridos


@contextmanager
def _staging(df: pl.DataFrame, nome: str) -> Iterator[str]:
    """Grava df num parquet temporario e devolve o literal SQL do caminho."""
    with tempfile.TemporaryDirectory(prefix="carga_") as tmp:
        path = Path(tmp) / f"{nome}.parquet"
        df.write_parquet(path)
        yield "'" + path.as_posix().replace("'", "''") + "'"


def carregar_cargos(db: Database, validos: pl.DataFrame) -> int:
    """Retorna a quantidade de posicoes inseridas."""
    stg = validos.select("numero", "cargo_efetivo", "simbolo", "chave")
    with db.transacao() as cur, _staging(stg, "positions") as origem:
        inseridos = cur.execute(f"""
            INSERT INTO positions (numero, cargo_efetivo, simbolo, chave)
            SELECT s.numero, s.cargo_efetivo, s.simbolo, s.chave
            FROM read_parquet({origem}) s
            WHERE NOT EXISTS (SELECT 1 FROM positions p WHERE p.chave = s.chave)
            RETURNING id
        """).fetchall()  # noqa: S608
    return len(inseridos)


def resolver_secretarias(validos: pl.DataFrame, mapa: dict[str, str]) -> pl.DataFrame:
    """Adiciona a coluna sigla (match exato sem caixa contra organizations.secretaria).

    Raises:
        SecretariaNaoEncontrada: com todos os nomes sem correspondencia.
    """
    resolvido = validos.with_columns(
        pl.col("secretaria")
        .str.to_lowercase()
        .replace_strict(mapa, default=None, return_dtype=pl.Utf8)
        .alias("sigla")
    )
    faltando = (
        resolvido.filter(pl.col("sigla").is_null())
        .get_column("secretaria")
        .unique(maintain_order=True)
        .to_list()
    )
    if faltando:
        for nome in faltando:
            log(f'  Secretaria "{nome}" não encontrada na tabela "organizations"')
        raise SecretariaNaoEncontrada(faltando)
    return resolvido


def carregar_servidores(db: Database, validos: pl.DataFrame) -> int:
    """Retorna a quantidade de servidores inseridos."""
    with db.transacao() as cur:
        mapa = DuckDBOrganizacaoRepo(cur).mapa_secretaria_para_sigla()
        resolvido = resolver_secretarias(validos, mapa)

        # Duplicatas dentro do proprio arquivo: so entre linhas com chave completa.
        completas = pl.all_horizontal([pl.col(c).is_not_null() for c in _CHAVE_SERVIDOR])
        repetida = completas & pl.struct(*_CHAVE_SERVIDOR).is_duplicated() & ~pl.struct(
            *_CHAVE_SERVIDOR
        ).is_first_distinct()
        stg = resolvido.filter(~repetida)

        with _staging(stg, "employees") as origem:
            inseridos = cur.execute(f"""
                INSERT INTO employees (
                    servidor, cargo_efetivo, simbolo, data_nomeacao, salario,
                    redistribuicao, status, secretaria, ordem
                )
                SELECT
                    s.servidor, s.cargo_efetivo, s.simbolo, s.data_nomeacao,
                    CAST(s.salario AS DECIMAL(12, 2)), s.redistribuicao, s.status, s.sigla,
                    COALESCE(m.maior, 0) + row_number() OVER (PARTITION BY s.sigla ORDER BY s._linha)
                FROM read_parquet({origem}) s
                LEFT JOIN (
                    SELECT secretaria, max(ordem) AS maior FROM employees GROUP BY secretaria
                ) m ON m.secretaria = s.sigla
                WHERE NOT EXISTS (
                    SELECT 1 FROM employees e
                    WHERE e.servidor = s.servidor
                      AND e.cargo_efetivo = s.cargo_efetivo
                      AND e.simbolo = s.simbolo
                      AND e.data_nomeacao = s.data_nomeacao
                      AND e.secretaria = s.sigla
                )
                RETURNING id
            """).fetchall()  # noqa: S608
    return len(inseridos)
