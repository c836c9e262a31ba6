# carga/sources/servidores/validate.py
#
# Regras por registro (rejeitado = logado e pulado, o lote continua):
#   - secretaria obrigatoria.
#   - status "provido"/"vago" em qualquer caixa -> "Provido"/"Vago".
#   - Provido exige nome; Vago descarta o nome.
#   - data_nomeacao DD/MM/AAAA -> Date; texto fora do formato rejeita.
#   - salario: so digitos e virgula, virgula vira ponto; mantido como texto
#     decimal ("13000.00") e convertido para DECIMAL(12,2) no INSERT.
#   - redistribuicao "Não"/"nao" -> null.
#   - Campos de texto aparados e cortados nos limites das colunas.
from __future__ import annotations

import polars as pl

from carga.sources.base import aparar, separar

LIMITES = {
    "servidor": 255,
    "cargo_efetivo": 255,
    "simbolo": 50,
    "redistribuicao": 100,
    "secretaria": 255,
}


def validate_servidores(df: pl.DataFrame) -> tuple[pl.DataFrame, pl.DataFrame]:
    """Retorna (validos, rejeitados); rejeitados trazem a coluna motivo."""
    df = df.with_columns(
        *(aparar(coluna, limite) for coluna, limite in LIMITES.items()),
        aparar("data_nomeacao"),
        aparar("salario"),
        aparar("status"),
    )

    status = pl.col("status").str.to_lowercase()
    salario = pl.col("salario").str.replace_all(r"[^\d,]", "").str.replace(",", ".")
    df = df.with_columns(
        pl.when(status == "provido")
        .then(pl.lit("Provido"))
        .when(status == "vago")
        .then(pl.lit("Vago"))
        .otherwise(None)
        .alias("status_norm"),
        pl.col("data_nomeacao").str.strptime(pl.Date, "%d/%m/%Y", strict=False).alias("data"),
        pl.when(salario == "").then(None).otherwise(salario).alias("salario_norm"),
        pl.when(pl.col("redistribuicao").str.to_lowercase().is_in(["nao", "não"]))
        .then(None)
        .otherwise(pl.col("redistribuicao"))
        .alias("redistribuicao"),
    )

    motivo = (
        pl.when(pl.col("secretaria").is_null())
        .then(pl.lit('campo "secretaria" ausente'))
        .when(pl.col("status").is_null())
        .then(pl.lit('campo "status" ausente'))
        .when(pl.col("status_norm").is_null())
        .then(pl.lit('campo "status" com valor inválido'))
        .when((pl.col("status_norm") == "Provido") & pl.col("servidor").is_null())
        .then(pl.lit("servidor provido sem nome"))
        .when(pl.col("data_nomeacao").is_not_null() & pl.col("data").is_null())
        .then(pl.lit("data_nomeacao inválida"))
        .when(
            pl.col("salario").is_not_null()
            & ~pl.col("salario_norm").fill_null("").str.contains(r"^\d+(\.\d+)?$")
        )
        .then(pl.lit("salario inválido"))
        .otherwise(None)
    )
    validos, rejeitados = separar(df, motivo)

    validos = validos.select(
        "_linha",
        pl.when(pl.col("status_norm") == "Vago").then(None).otherwise(pl.col("servidor")).alias("servidor"),
        "cargo_efetivo",
        "simbolo",
        pl.col("data").alias("data_nomeacao"),
        pl.col("salario_norm").alias("salario"),
        "redistribuicao",
        pl.col("status_norm").alias("status"),
        "secretaria",
    )
    return validos, rejeitados.select("_linha", "secretaria", "status", "servidor", "motivo")
