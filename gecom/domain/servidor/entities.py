# gecom/domain/servidor/entities.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from gecom.domain.cargo.value_objects import ChaveCargo

from .value_objects import Salario, StatusServidor


@dataclass(frozen=True)
class Servidor:
    """Linha de lotacao: um cargo de uma secretaria, ocupado ou vago.

    Invariantes:
      - status VAGO implica servidor None (o nome e descartado).
      - status PROVIDO exige servidor nao vazio.
      - cargo e simbolo sao copiados por valor, sem FK para positions.
    """

    id: int | None
    servidor: str | None
    cargo_efetivo: str
    simbolo: str
    status: StatusServidor
    secretaria: str
    data_nomeacao: date | None = None
    salario: Salario | None = None
    redistribuicao: str | None = None
    ordem: int | None = None

    def __post_init__(self) -> None:
        nome = self.servidor.strip() if self.servidor else None
        if self.status is StatusServidor.VAGO:
            nome = None
        elif not nome:
            raise ValueError("Servidor provido exige nome")
        object.__setattr__(self, "servidor", nome)
        if not self.secretaria or not self.secretaria.strip():
            raise ValueError("Secretaria e obrigatoria")

    @property
    def provido(self) -> bool:
        return self.status is StatusServidor.PROVIDO

    @property
    def nome_servidor(self) -> str:
        return self.servidor or ""

    @property
    def data_publicacao(self) -> date | None:
        return self.data_nomeacao

    @property
    def valor_cc(self) -> Decimal:
        return self.salario.valor if self.salario else Decimal("0")

    @property
    def chave_cargo(self) -> ChaveCargo:
        return ChaveCargo(self.cargo_efetivo, self.simbolo)


@dataclass(frozen=True)
class NovaOrdem:
    id: int
    ordem: int
