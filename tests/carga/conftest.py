# tests/carga/conftest.py
from __future__ import annotations

import json
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import duckdb
import pytest

from gecom.infrastructure.database import SCHEMA_PATH, Database

ORGANIZACOES = """
    INSERT INTO organizations VALUES
    (1, 'Casa Civil', 'CACIVIL', 'DIRETA'),
    (2, 'Secretaria da Fazenda', 'SEFAZ', 'DIRETA')
"""


def preparar(conn: duckdb.DuckDBPyConnection) -> None:
    conn.execute(SCHEMA_PATH.read_text(encoding="utf-8"))
    conn.execute(ORGANIZACOES)


@pytest.fixture()
def conn() -> Generator[duckdb.DuckDBPyConnection, None, None]:
    c = duckdb.connect(":memory:")
    preparar(c)
    yield c
    c.close()


@pytest.fixture()
def db(conn: duckdb.DuckDBPyConnection) -> Database:
    return Database.from_connection(conn)


@pytest.fixture()
def escrever_json(tmp_path: Path) -> Callable[[str, Any], Path]:
    def _escrever(nome: str, conteudo: Any) -> Path:
        path = tmp_path / nome
        path.write_text(json.dumps(conteudo, ensure_ascii=False), encoding="utf-8")
        return path

    return _escrever


@pytest.fixture()
def preparar_banco() -> Callable[[duckdb.DuckDBPyConnection], None]:
    """Schema + organizacoes num banco arbitrario (ex.: arquivo usado pelo main)."""
    return preparar
