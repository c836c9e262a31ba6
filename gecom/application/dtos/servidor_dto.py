# gecom/application/dtos/servidor_dto.py
from decimal import Decimal

from pydantic import BaseModel


class ServidorDTO(BaseModel):
    id: int
    servidor: str | None
    cargo_efetivo: str
    simbolo: str
    data_nomeacao: str | None  # YYYY-MM-DD
    salario: str | None  # Decimal serializado como string
    redistribuicao: str | None
    status: str
    secretaria: str
    ordem: int | None


class ServidorPayloadDTO(BaseModel):
    """Corpo de POST/PUT /employees, no formato que o cliente envia."""

    servidor: str | None = None
    cargo_efetivo: str = ""
    simbolo: str = ""
    data_nomeacao: str | None = None  # YYYY-MM-DD ou vazio
    salario: Decimal | None = None
    redistribuicao: str | None = None  # "Não" = sem redistribuicao
    status: str
    secretaria: str
    ordem: int | None = None


class ReordemItemDTO(BaseModel):
    id: int
    ordem: int


class ReordemDTO(BaseModel):
    employees: list[ReordemItemDTO]


class MensagemDTO(BaseModel):
    message: str
