# gecom/application/dtos/cargo_dto.py
from pydantic import BaseModel


class CargoDTO(BaseModel):
    id: int
    numero: int
    cargo_efetivo: str
    simbolo: str


class CargoCriacaoDTO(BaseModel):
    numero: int | None = None  # omitido: max(numero) + 1
    cargo_efetivo: str = ""
    simbolo: str = ""


class CargoResultadoDTO(BaseModel):
    """Linha do cargo + resultado explicito (CRIADO | JA_EXISTE | REJEITADO)."""

    id: int | None
    numero: int | None
    cargo_efetivo: str
    simbolo: str
    resultado: str
