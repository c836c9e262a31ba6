# carga/sources/servidores/parse.py
#
# Fixture no formato {"employees": [...]}, datas DD/MM/AAAA e salario em
# texto pt-BR ("R$ 13.000,00"). Tudo e lido como texto; a conversao fica em
# validate.
from __future__ import annotations

from pathlib import Path

import polars as pl

from carga.sources.base import ler_json, registros_para_df

COLUNAS = (
    "servidor",
    "cargo_efetivo",
    "simbolo",
    "data_nomeacao",
    "salario",
    "redistribuicao",
    "status",
    "secretaria",
)


def parse_servidores(path: Path) -> pl.DataFrame:
    dados = ler_json(path)
    registros = dados.get("employees") if isinstance(dados, dict) else None
    if not isinstance(registros, list):
        raise ValueError('O JSON não contém a chave "employees" ou não é um array.')
    return registros_para_df(registros, COLUNAS)
