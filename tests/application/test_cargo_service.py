# tests/application/test_cargo_service.py
from collections.abc import Generator

import duckdb
import pytest

from gecom.application.services.cargo_service import CargoService
from gecom.domain.cargo.value_objects import ResultadoCriacao
from gecom.infrastructure.database import SCHEMA_PATH
from gecom.infrastructure.repositories.duckdb_cargo_repo import DuckDBCargoRepo


@pytest.fixture()
def service() -> Generator[CargoService, None, None]:
    conn = duckdb.connect(":memory:")
    conn.execute(SCHEMA_PATH.read_text(encoding="utf-8"))
    conn.execute(
        "INSERT INTO positions (numero, cargo_efetivo, simbolo, chave) VALUES (5, 'Diretor', 'DAS-3', 'diretor|das-3')"
    )
    yield CargoService(DuckDBCargoRepo(conn))
    conn.close()


def test_cria_com_numero_seguinte(service):
    cargo, resultado = service.obter_ou_criar("Novo Cargo", "X1")
    assert resultado is ResultadoCriacao.CRIADO
    assert cargo.numero == 6
    assert [c.numero for c in service.listar()] == [5, 6]


def test_chave_existente_devolve_canonico(service):
    """' DIRETOR ' / 'das-3' e o mesmo cargo; nada e inserido."""
    cargo, resultado = service.obter_ou_criar(" DIRETOR ", "das-3")
    assert resultado is ResultadoCriacao.JA_EXISTE
    assert (cargo.cargo_efetivo, cargo.simbolo, cargo.numero) == ("Diretor", "DAS-3", 5)
    assert len(service.listar()) == 1


def test_numero_explicito(service):
    dto = service.criar("Assessor", "CC-1", numero=42)
    assert dto.resultado == "CRIADO"
    assert dto.numero == 42


def test_campos_vazios_rejeitados(service):
    dto = service.criar("", "CC-1")
    assert dto.resultado == "REJEITADO"
    assert dto.id is None
    assert len(service.listar()) == 1
