# gecom/domain/cargo/entities.py
from __future__ import annotations

from dataclasses import dataclass

from .value_objects import ChaveCargo


@dataclass(frozen=True)
class Cargo:
    """Cargo em comissao. numero e sequencia de exibicao, nao identificador."""

    id: int
    numero: int
    cargo_efetivo: str
    simbolo: str

    @property
    def chave(self) -> ChaveCargo:
        return ChaveCargo(self.cargo_efetivo, self.simbolo)
