# gecom/domain/organizacao/entities.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Classificacao(str, Enum):
    DIRETA = "DIRETA"
    INDIRETA = "INDIRETA"


@dataclass(frozen=True)
class Organizacao:
    """Orgao municipal. Dado de referencia: a aplicacao nunca cria nem edita."""

    codigo: int
    secretaria: str
    sigla: str
    classificacao: Classificacao
