# gecom/application/dtos/relatorio_dto.py
from decimal import Decimal

from pydantic import BaseModel


class CargoVagoDTO(BaseModel):
    cargo_efetivo: str
    qtd_vago: int
    remuneracao: Decimal


class SimboloVagosDTO(BaseModel):
    simbolo: str
    cargos: list[CargoVagoDTO]


class OrgaoVagosDTO(BaseModel):
    sigla: str
    nome: str
    simbolos: list[SimboloVagosDTO]


class SimboloQuantitativoDTO(BaseModel):
    simbolo: str
    remuneracao: Decimal
    total: int
    provido: int
    vago: int
    custo_providos: Decimal


class OrgaoQuantitativoDTO(BaseModel):
    sigla: str
    nome: str
    total: int
    provido: int
    vago: int
    custo_providos: Decimal
    simbolos: list[SimboloQuantitativoDTO]


class SimboloGeralDTO(BaseModel):
    simbolo: str
    remuneracao: Decimal
    qtd_secretarias: int
    provido: int
    vago: int
    custo_providos: Decimal


class ClassificacaoGeralDTO(BaseModel):
    classificacao: str
    total: int
    provido: int
    vago: int
    custo: Decimal
    simbolos: list[SimboloGeralDTO]
