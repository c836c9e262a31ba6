# tests/integration/conftest.py
from __future__ import annotations

from collections.abc import Generator
from datetime import date
from decimal import Decimal

import duckdb
import pytest
from fastapi.testclient import TestClient

from gecom.infrastructure.database import SCHEMA_PATH, Database
from gecom.interfaces.api.main import create_app
from gecom.interfaces.client.data_access import GecomClient

BASE_URL = "http://testserver/api"


def seed(conn: duckdb.DuckDBPyConnection) -> None:
    """Dados deterministicos. ids de employees saem da sequence: 1..4 na ordem abaixo."""
    conn.execute("""
        INSERT INTO organizations VALUES
        (1, 'Casa Civil', 'CACIVIL', 'DIRETA'),
        (2, 'Secretaria da Fazenda', 'SEFAZ', 'DIRETA'),
        (3, 'Departamento de Estradas', 'DER', 'INDIRETA'),
        (4, 'Secretaria Sem Lotacao', 'SEMLOT', 'INDIRETA')
    """)

    for numero, cargo, simbolo in [
        (1, "Assessor Especial", "CC-1"),
        (2, "Chefe de Gabinete", "CC-2"),
        (3, "Diretor", "DAS-3"),
    ]:
        conn.execute(
            "INSERT INTO positions (numero, cargo_efetivo, simbolo, chave) VALUES (?, ?, ?, ?)",
            [numero, cargo, simbolo, f"{cargo.lower()}|{simbolo.lower()}"],
        )

    # e1 (Provido, 13000) e e2 (Vago, 1300) na CACIVIL
    for row in [
        ("MARIA SILVA", "Chefe de Gabinete", "CC-2", date(2024, 3, 5), Decimal("13000.00"), None, "Provido", "CACIVIL", 1),
        (None, "Assessor Especial", "CC-1", None, Decimal("1300.00"), None, "Vago", "CACIVIL", 2),
        ("JOAO SOUZA", "Diretor", "DAS-3", date(2023, 1, 10), Decimal("8000.00"), "CACIVIL", "Provido", "SEFAZ", 1),
        (None, "Diretor", "DAS-3", None, Decimal("8000.00"), None, "Vago", "DER", 1),
    ]:
        conn.execute(
            """
            INSERT INTO employees (
                servidor, cargo_efetivo, simbolo, data_nomeacao, salario,
                redistribuicao, status, secretaria, ordem
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
            """,
            list(row),
        )

    conn.execute("""
        INSERT INTO organization_growth VALUES
        (1, 'Jan', 10),
        (2, 'Fev', 12),
        (3, 'Mar', 15)
    """)


@pytest.fixture()
def test_db() -> Generator[duckdb.DuckDBPyConnection, None, None]:
    """DuckDB in-memory novo por teste (os testes escrevem)."""
    conn = duckdb.connect(":memory:")
    conn.execute(SCHEMA_PATH.read_text(encoding="utf-8"))
    seed(conn)
    yield conn
    conn.close()


@pytest.fixture()
def database(test_db: duckdb.DuckDBPyConnection) -> Database:
    return Database.from_connection(test_db)


@pytest.fixture()
def client(database: Database) -> Generator[TestClient, None, None]:
    """TestClient do FastAPI com a Database injetada na raiz de composicao."""
    app = create_app(database=database)
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def gecom_client(client: TestClient) -> GecomClient:
    """Data-access real falando com a API em processo."""
    return GecomClient(base_url=BASE_URL, http=client)
