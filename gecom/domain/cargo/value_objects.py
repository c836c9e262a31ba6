# gecom/domain/cargo/value_objects.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


def _normalizar(texto: str) -> str:
    return " ".join(texto.split()).lower()


@dataclass(frozen=True)
class ChaveCargo:
    """Chave composta normalizada de um cargo: (cargo_efetivo, simbolo).

    Dois cargos sao o mesmo quando os dois campos coincidem apos trim e
    lower(). Espacos internos repetidos sao colapsados.
    """

    cargo_efetivo: str
    simbolo: str

    def __init__(self, cargo_efetivo: str, simbolo: str) -> None:
        cargo = _normalizar(cargo_efetivo or "")
        simb = _normalizar(simbolo or "")
        if not cargo:
            raise ValueError("Cargo efetivo nao pode ser vazio")
        if not simb:
            raise ValueError("Simbolo nao pode ser vazio")
        object.__setattr__(self, "cargo_efetivo", cargo)
        object.__setattr__(self, "simbolo", simb)

    @property
    def valor(self) -> str:
        """Forma persistida na coluna positions.chave."""
        return f"{self.cargo_efetivo}|{self.simbolo}"

    def __str__(self) -> str:
        return self.valor


class ResultadoCriacao(str, Enum):
    CRIADO = "CRIADO"
    JA_EXISTE = "JA_EXISTE"
    REJEITADO = "REJEITADO"
