# carga/sources/cargos/validate.py
#
# Regras:
#   - numero, cargo_efetivo e simbolo obrigatorios; numero inteiro e != 0.
#   - chave = cargo|simbolo normalizados (trim, espacos colapsados, lower),
#     a mesma forma de ChaveCargo.valor.
#   - Repeticoes da mesma chave dentro do arquivo: fica a primeira.
from __future__ import annotations

import polars as pl

from carga.sources.base import aparar, separar


def _normalizada(coluna: str) -> pl.Expr:
    return pl.col(coluna).str.replace_all(r"\s+", " ").str.strip_chars().str.to_lowercase()


def validate_cargos(df: pl.DataFrame) -> tuple[pl.DataFrame, pl.DataFrame]:
    """Retorna (validos, rejeitados); rejeitados trazem a coluna motivo."""
    df = df.with_columns(aparar("numero"), aparar("cargo_efetivo"), aparar("simbolo"))
    df = df.with_columns(pl.col("numero").cast(pl.Int64, strict=False).alias("numero_int"))

    motivo = (
        pl.when(pl.col("numero").is_null() | pl.col("cargo_efetivo").is_null() | pl.col("simbolo").is_null())
        .then(pl.lit("campo obrigatório ausente"))
        .when(pl.col("numero_int").is_null() | (pl.col("numero_int") == 0))
        .then(pl.lit("numero inválido"))
        .otherwise(None)
    )
    validos, rejeitados = separar(df, motivo)

    validos = (
        validos.drop("numero")
        .rename({"numero_int": "numero"})
        .with_columns((_normalizada("cargo_efetivo") + "|" + _normalizada("simbolo")).alias("chave"))
        .unique(subset=["chave"], keep="first", maintain_order=True)
    )
    return validos, rejeitados.drop("numero_int")
