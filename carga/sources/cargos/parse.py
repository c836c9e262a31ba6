# carga/sources/cargos/parse.py
#
# Aceita um array JSON de cargos ou um objeto {"positions": [...]}.
from __future__ import annotations

from pathlib import Path

import polars as pl

from carga.sources.base import ler_json, registros_para_df

COLUNAS = ("numero", "cargo_efetivo", "simbolo")


def parse_cargos(path: Path) -> pl.DataFrame:
    dados = ler_json(path)
    if isinstance(dados, list):
        registros = dados
    else:
        registros = dados.get("positions") if isinstance(dados, dict) else None
    if not isinstance(registros, list):
        raise ValueError("JSON de posições não possui um array válido.")
    return registros_para_df(registros, COLUNAS)
