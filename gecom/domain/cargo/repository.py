# gecom/domain/cargo/repository.py
from __future__ import annotations

from typing import Protocol

from .entities import Cargo
from .value_objects import ChaveCargo


class CargoRepository(Protocol):
    def listar(self) -> list[Cargo]: ...
    def buscar_por_chave(self, chave: ChaveCargo) -> Cargo | None: ...
    def maior_numero(self) -> int: ...
    def inserir(self, numero: int, cargo_efetivo: str, simbolo: str, chave: ChaveCargo) -> Cargo | None: ...
