# gecom/domain/crescimento/repository.py
from __future__ import annotations

from typing import Protocol

from .entities import PontoCrescimento


class CrescimentoRepository(Protocol):
    def listar(self) -> list[PontoCrescimento]: ...
