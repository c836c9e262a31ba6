# gecom/domain/organizacao/repository.py
from __future__ import annotations

from typing import Protocol

from .entities import Organizacao


class OrganizacaoRepository(Protocol):
    def listar(self) -> list[Organizacao]: ...
