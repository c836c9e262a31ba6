# gecom/interfaces/views/graficos.py
#
# Payloads no formato data do Chart.js (labels + datasets), serializaveis
# com model_dump() para o front-end.
from __future__ import annotations

from collections.abc import Sequence

from pydantic import BaseModel

PALETA = [
    "rgba(59, 130, 246, 0.6)",
    "rgba(34, 197, 94, 0.6)",
    "rgba(139, 92, 246, 0.6)",
    "rgba(251, 191, 36, 0.6)",
    "rgba(239, 68, 68, 0.6)",
    "rgba(236, 72, 153, 0.6)",
    "rgba(45, 212, 191, 0.6)",
    "rgba(250, 204, 21, 0.6)",
    "rgba(16, 185, 129, 0.6)",
]

AZUL = "rgba(59, 130, 246, 0.2)"
VERDE = "rgba(16, 185, 129, 0.2)"
VERMELHO = "rgba(239, 68, 68, 0.2)"


class SerieDTO(BaseModel):
    label: str = ""
    data: list[float]
    backgroundColor: list[str] | str = []  # noqa: N815
    borderColor: list[str] | str = []  # noqa: N815
    borderWidth: int = 2  # noqa: N815
    fill: bool = False


class GraficoDTO(BaseModel):
    tipo: str  # bar | pie | line
    labels: list[str]
    datasets: list[SerieDTO]


def _opaca(cor: str) -> str:
    return cor.rsplit(",", 1)[0] + ", 1)"


def barras(labels: Sequence[str], valores: Sequence[float], label: str, cores: Sequence[str] | None = None) -> GraficoDTO:
    """Uma serie; sem cores explicitas, cicla a PALETA por barra."""
    fundo = list(cores) if cores else [PALETA[i % len(PALETA)] for i in range(len(labels))]
    return GraficoDTO(
        tipo="bar",
        labels=list(labels),
        datasets=[
            SerieDTO(
                label=label,
                data=list(valores),
                backgroundColor=fundo,
                borderColor=[_opaca(c) for c in fundo],
            )
        ],
    )


def pizza(labels: Sequence[str], valores: Sequence[float], cores: Sequence[str]) -> GraficoDTO:
    return GraficoDTO(
        tipo="pie",
        labels=list(labels),
        datasets=[
            SerieDTO(
                data=list(valores),
                backgroundColor=list(cores),
                borderColor=[_opaca(c) for c in cores],
            )
        ],
    )


def linha(labels: Sequence[str], valores: Sequence[float], label: str) -> GraficoDTO:
    return GraficoDTO(
        tipo="line",
        labels=list(labels),
        datasets=[
            SerieDTO(
                label=label,
                data=list(valores),
                backgroundColor=AZUL,
                borderColor=_opaca(AZUL),
            )
        ],
    )
