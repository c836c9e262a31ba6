# gecom/application/formatacao.py
from __future__ import annotations

from datetime import date
from decimal import ROUND_HALF_UP, Decimal


def formatar_moeda(valor: Decimal | int | float | None) -> str:
    """Decimal('13000') -> 'R$ 13.000,00' (padrao pt-BR)."""
    quantia = Decimal(str(valor or 0)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    inteiro, _, centavos = f"{quantia:,.2f}".partition(".")
    return f"R$ {inteiro.replace(',', '.')},{centavos}"


def formatar_data_br(valor: date | str | None) -> str:
    """date(2024, 3, 5) ou '2024-03-05' -> '05/03/2024'. Vazio vira '-'."""
    if not valor:
        return "-"
    if isinstance(valor, date):
        return valor.strftime("%d/%m/%Y")
    ano, mes, dia = valor.split("-")
    return f"{dia}/{mes}/{ano}"
