# tests/application/test_formatacao.py
from datetime import date
from decimal import Decimal

import pytest

from gecom.application.formatacao import formatar_data_br, formatar_moeda


@pytest.mark.parametrize(
    ("valor", "esperado"),
    [
        (Decimal("13000"), "R$ 13.000,00"),
        (Decimal("1300.5"), "R$ 1.300,50"),
        (Decimal("0.005"), "R$ 0,01"),
        (Decimal("1234567.89"), "R$ 1.234.567,89"),
        (None, "R$ 0,00"),
        (0, "R$ 0,00"),
    ],
)
def test_formatar_moeda_pt_br(valor, esperado):
    assert formatar_moeda(valor) == esperado


def test_formatar_data_br():
    assert formatar_data_br(date(2024, 3, 5)) == "05/03/2024"
    assert formatar_data_br("2024-03-05") == "05/03/2024"
    assert formatar_data_br("") == "-"
    assert formatar_data_br(None) == "-"
