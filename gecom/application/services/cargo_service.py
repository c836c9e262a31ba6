# gecom/application/services/cargo_service.py
from __future__ import annotations

from gecom.domain.cargo.entities import Cargo
from gecom.domain.cargo.repository import CargoRepository
from gecom.domain.cargo.value_objects import ChaveCargo, ResultadoCriacao

from ..dtos.cargo_dto import CargoDTO, CargoResultadoDTO


def cargo_para_dto(cargo: Cargo) -> CargoDTO:
    return CargoDTO(
        id=cargo.id,
        numero=cargo.numero,
        cargo_efetivo=cargo.cargo_efetivo,
        simbolo=cargo.simbolo,
    )


class CargoService:
    def __init__(self, cargo_repo: CargoRepository) -> None:
        self._cargo_repo = cargo_repo

    def listar(self) -> list[CargoDTO]:
        return [cargo_para_dto(c) for c in self._cargo_repo.listar()]

    def obter_ou_criar(
        self,
        cargo_efetivo: str,
        simbolo: str,
        numero: int | None = None,
    ) -> tuple[Cargo | None, ResultadoCriacao]:
        """Busca pela chave normalizada; cria com numero = max + 1 se nao achar.

        Nunca duplica: se outra requisicao inserir a mesma chave entre a busca
        e o INSERT, o ON CONFLICT devolve None e o cargo existente e relido.
        """
        try:
            chave = ChaveCargo(cargo_efetivo, simbolo)
        except ValueError:
            return None, ResultadoCriacao.REJEITADO

        existente = self._cargo_repo.buscar_por_chave(chave)
        if existente is not None:
            return existente, ResultadoCriacao.JA_EXISTE

        if numero is None:
            numero = self._cargo_repo.maior_numero() + 1
        criado = self._cargo_repo.inserir(numero, cargo_efetivo, simbolo, chave)
        if criado is not None:
            return criado, ResultadoCriacao.CRIADO

        return self._cargo_repo.buscar_por_chave(chave), ResultadoCriacao.JA_EXISTE

    def criar(self, cargo_efetivo: str, simbolo: str, numero: int | None = None) -> CargoResultadoDTO:
        cargo, resultado = self.obter_ou_criar(cargo_efetivo, simbolo, numero)
        if cargo is None:
            return CargoResultadoDTO(
                id=None,
                numero=numero,
                cargo_efetivo=cargo_efetivo,
                simbolo=simbolo,
                resultado=resultado.value,
            )
        return CargoResultadoDTO(**cargo_para_dto(cargo).model_dump(), resultado=resultado.value)
