# gecom/application/dtos/organizacao_dto.py
from pydantic import BaseModel


class OrganizacaoDTO(BaseModel):
    codigo: int
    secretaria: str
    sigla: str
    classificacao: str


class CrescimentoDTO(BaseModel):
    mes: str
    total: int
