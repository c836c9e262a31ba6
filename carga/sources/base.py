# carga/sources/base.py
#
# Leitura comum dos fixtures JSON.
#
# Cada registro vira uma linha de um DataFrame so de Utf8 (valores nao-texto
# sao convertidos com str(), ausentes viram null) mais a coluna _linha com a
# posicao 1-based no arquivo, usada nos logs de rejeicao e para preservar a
# ordem de insercao.
from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import polars as pl

COLUNA_LINHA = "_linha"


def ler_json(path: Path) -> Any:
    if not path.exists():
        raise FileNotFoundError(f"Arquivo JSON não encontrado: {path}")
    return json.loads(path.read_text(encoding="utf-8"))


def _texto(valor: object) -> str | None:
    if valor is None:
        return None
    return valor if isinstance(valor, str) else str(valor)


def registros_para_df(registros: Sequence[Any], colunas: Sequence[str]) -> pl.DataFrame:
    dados: dict[str, list[Any]] = {COLUNA_LINHA: list(range(1, len(registros) + 1))}
    for coluna in colunas:
        dados[coluna] = [
            _texto(r.get(coluna)) if isinstance(r, dict) else None for r in registros
        ]
    schema = {COLUNA_LINHA: pl.Int64, **{c: pl.Utf8 for c in colunas}}
    return pl.DataFrame(dados, schema=schema)


def aparar(coluna: str, limite: int | None = None) -> pl.Expr:
    """trim; vazio vira null; corta em `limite` caracteres."""
    expr = pl.col(coluna).str.strip_chars()
    if limite is not None:
        expr = expr.str.slice(0, limite)
    return pl.when(expr == "").then(None).otherwise(expr).alias(coluna)


def separar(df: pl.DataFrame, motivo: pl.Expr) -> tuple[pl.DataFrame, pl.DataFrame]:
    """(validos, rejeitados). `motivo` e null para linhas validas."""
    marcado = df.with_columns(motivo.alias("motivo"))
    validos = marcado.filter(pl.col("motivo").is_null()).drop("motivo")
    rejeitados = marcado.filter(pl.col("motivo").is_not_null())
    return validos, rejeitados
