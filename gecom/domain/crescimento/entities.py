# gecom/domain/crescimento/entities.py
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PontoCrescimento:
    mes: str
    total: int
