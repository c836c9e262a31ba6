# gecom/domain/servidor/repository.py
from __future__ import annotations

from typing import Protocol

from .entities import NovaOrdem, Servidor


class ServidorRepository(Protocol):
    def listar(self, secretaria: str | None = None) -> list[Servidor]: ...
    def buscar_por_id(self, servidor_id: int) -> Servidor | None: ...
    def maior_ordem(self, secretaria: str) -> int: ...
    def inserir(self, servidor: Servidor) -> Servidor: ...
    def atualizar(self, servidor_id: int, servidor: Servidor) -> Servidor | None: ...
    def excluir(self, servidor_id: int) -> bool: ...
    def secretarias_de(self, ids: list[int]) -> dict[int, str]: ...
    def aplicar_ordens(self, ordens: list[NovaOrdem]) -> None: ...
