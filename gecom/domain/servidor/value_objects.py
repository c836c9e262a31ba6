# gecom/domain/servidor/value_objects.py
from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from enum import Enum

# Valor sentinela que o formulario usa para "sem redistribuicao".
SEM_REDISTRIBUICAO = "Não"

_SEM_REDISTRIBUICAO_ALIASES = {"", "nao", "não"}

_DATA_BR_RE = re.compile(r"^(\d{1,2})/(\d{1,2})/(\d{4})$")


class StatusServidor(str, Enum):
    PROVIDO = "Provido"
    VAGO = "Vago"

    @classmethod
    def from_texto(cls, texto: str | None) -> StatusServidor:
        """Aceita 'provido'/'vago' em qualquer caixa, com espacos nas pontas."""
        normalizado = (texto or "").strip().lower()
        for status in cls:
            if status.value.lower() == normalizado:
                return status
        raise ValueError(f"Status invalido: {texto!r}")


@dataclass(frozen=True)
class Salario:
    """Valor do cargo em comissao. Decimal, nunca float, nunca negativo."""

    valor: Decimal

    def __post_init__(self) -> None:
        if self.valor < Decimal("0"):
            raise ValueError("Salario nao pode ser negativo")


def normalizar_redistribuicao(valor: str | None) -> str | None:
    """'Não' e vazio viram None; qualquer outra sigla e mantida trimada."""
    if valor is None:
        return None
    stripped = valor.strip()
    if stripped.lower() in _SEM_REDISTRIBUICAO_ALIASES:
        return None
    return stripped


def parse_data_iso(texto: str | None) -> date | None:
    """YYYY-MM-DD -> date. Vazio vira None; formato invalido levanta ValueError."""
    if texto is None or not texto.strip():
        return None
    return datetime.strptime(texto.strip(), "%Y-%m-%d").date()


def parse_data_br(texto: str | None) -> date | None:
    """DD/MM/YYYY -> date. Vazio vira None; formato invalido levanta ValueError."""
    if texto is None or not texto.strip():
        return None
    match = _DATA_BR_RE.match(texto.strip())
    if not match:
        raise ValueError(f"Data invalida (esperado DD/MM/AAAA): {texto!r}")
    dia, mes, ano = (int(g) for g in match.groups())
    return date(ano, mes, dia)


def parse_salario_br(texto: str | None) -> Decimal | None:
    """'R$ 13.000,00' -> Decimal('13000.00'). Vazio vira None.

    Tudo que nao e digito ou virgula e descartado; a virgula e o separador
    decimal.
    """
    if texto is None or not texto.strip():
        return None
    limpo = re.sub(r"[^\d,]", "", texto).replace(",", ".")
    if not limpo or limpo.count(".") > 1:
        raise ValueError(f"Salario invalido: {texto!r}")
    try:
        return Decimal(limpo)
    except InvalidOperation as err:
        raise ValueError(f"Salario invalido: {texto!r}") from err
