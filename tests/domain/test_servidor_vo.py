# tests/domain/test_servidor_vo.py
from datetime import date
from decimal import Decimal

import pytest

from gecom.domain.servidor.value_objects import (
    Salario,
    StatusServidor,
    normalizar_redistribuicao,
    parse_data_br,
    parse_data_iso,
    parse_salario_br,
)


@pytest.mark.parametrize(
    ("texto", "esperado"),
    [("provido", StatusServidor.PROVIDO), (" PROVIDO ", StatusServidor.PROVIDO), ("Vago", StatusServidor.VAGO)],
)
def test_status_aceita_qualquer_caixa(texto, esperado):
    assert StatusServidor.from_texto(texto) is esperado


@pytest.mark.parametrize("texto", ["", None, "ocupado"])
def test_status_invalido(texto):
    with pytest.raises(ValueError, match="Status invalido"):
        StatusServidor.from_texto(texto)


def test_salario_negativo_invalido():
    with pytest.raises(ValueError):
        Salario(Decimal("-0.01"))
    assert Salario(Decimal("0")).valor == Decimal("0")


def test_parse_salario_br():
    """'R$ 13.000,00' -> Decimal('13000.00'); pontos de milhar sao descartados."""
    assert parse_salario_br("R$ 13.000,00") == Decimal("13000.00")
    assert parse_salario_br("1300") == Decimal("1300")
    assert parse_salario_br("  ") is None
    assert parse_salario_br(None) is None


@pytest.mark.parametrize("texto", ["abc", "1,2,3"])
def test_parse_salario_br_invalido(texto):
    with pytest.raises(ValueError, match="Salario invalido"):
        parse_salario_br(texto)


def test_parse_data_br():
    assert parse_data_br("05/03/2024") == date(2024, 3, 5)
    assert parse_data_br("5/3/2024") == date(2024, 3, 5)
    assert parse_data_br("") is None


@pytest.mark.parametrize("texto", ["2024-03-05", "31/02/2024", "05/03/24"])
def test_parse_data_br_invalida(texto):
    with pytest.raises(ValueError):
        parse_data_br(texto)


def test_parse_data_iso():
    assert parse_data_iso("2024-03-05") == date(2024, 3, 5)
    assert parse_data_iso(" ") is None
    with pytest.raises(ValueError):
        parse_data_iso("05/03/2024")


@pytest.mark.parametrize(("valor", "esperado"), [("Não", None), ("nao", None), ("", None), (None, None), (" SEFAZ ", "SEFAZ")])
def test_normalizar_redistribuicao(valor, esperado):
    assert normalizar_redistribuicao(valor) == esperado
