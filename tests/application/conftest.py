# tests/application/conftest.py
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

import pytest

from gecom.domain.organizacao.entities import Classificacao, Organizacao


@dataclass(frozen=True)
class Linha:
    """Linha de lotacao minima para as agregacoes puras."""

    secretaria: str
    cargo_efetivo: str
    simbolo: str
    provido: bool
    valor_cc: Decimal
    nome_servidor: str = ""
    redistribuicao: str | None = None
    data_publicacao: str | None = None


@pytest.fixture()
def organizacoes() -> list[Organizacao]:
    return [
        Organizacao(1, "Casa Civil", "CACIVIL", Classificacao.DIRETA),
        Organizacao(2, "Secretaria da Fazenda", "SEFAZ", Classificacao.DIRETA),
        Organizacao(3, "Departamento de Estradas", "DER", Classificacao.INDIRETA),
    ]


@pytest.fixture()
def linhas() -> list[Linha]:
    return [
        Linha("CACIVIL", "Chefe de Gabinete", "CC-2", True, Decimal("13000"), "MARIA SILVA", None, "2024-03-05"),
        Linha("CACIVIL", "Assessor Especial", "CC-1", False, Decimal("1300")),
        Linha("CACIVIL", "Assessor Especial", "CC-1", False, Decimal("1500")),
        Linha("SEFAZ", "Diretor", "DAS-3", True, Decimal("8000"), "JOAO SOUZA", "CACIVIL", "2023-01-10"),
        Linha("DER", "Diretor", "DAS-3", False, Decimal("8000")),
        Linha("DER", "Motorista", "sem_simbolo", True, Decimal("100"), "ZE"),
    ]
