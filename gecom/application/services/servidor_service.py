# gecom/application/services/servidor_service.py
from __future__ import annotations

import duckdb

from gecom.domain.errors import ConflitoConcorrente, NaoEncontrado, ValidacaoFalhou
from gecom.domain.servidor.entities import NovaOrdem, Servidor
from gecom.domain.servidor.repository import ServidorRepository
from gecom.domain.servidor.value_objects import (
    Salario,
    StatusServidor,
    normalizar_redistribuicao,
    parse_data_iso,
)
from gecom.infrastructure.database import Database
from gecom.infrastructure.repositories.duckdb_servidor_repo import DuckDBServidorRepo

from ..dtos.servidor_dto import ReordemItemDTO, ServidorDTO, ServidorPayloadDTO


def servidor_para_dto(s: Servidor) -> ServidorDTO:
    """Raises ValueError para entidade ainda nao persistida (id None)."""
    if s.id is None:
        raise ValueError("Servidor sem id nao pode ser serializado")
    return ServidorDTO(
        id=s.id,
        servidor=s.servidor,
        cargo_efetivo=s.cargo_efetivo,
        simbolo=s.simbolo,
        data_nomeacao=s.data_nomeacao.isoformat() if s.data_nomeacao else None,
        salario=str(s.salario.valor) if s.salario else None,
        redistribuicao=s.redistribuicao,
        status=s.status.value,
        secretaria=s.secretaria,
        ordem=s.ordem,
    )


def montar_servidor(payload: ServidorPayloadDTO, servidor_id: int | None, ordem: int | None) -> Servidor:
    """Payload de formulario -> entidade.

    data_nomeacao vazia vira None; redistribuicao "Não" vira None.

    Raises:
        ValidacaoFalhou: status desconhecido, data fora de YYYY-MM-DD, salario
            negativo, ou servidor provido sem nome.
    """
    try:
        return Servidor(
            id=servidor_id,
            servidor=payload.servidor,
            cargo_efetivo=payload.cargo_efetivo.strip(),
            simbolo=payload.simbolo.strip(),
            status=StatusServidor.from_texto(payload.status),
            secretaria=payload.secretaria.strip(),
            data_nomeacao=parse_data_iso(payload.data_nomeacao),
            salario=Salario(payload.salario) if payload.salario is not None else None,
            redistribuicao=normalizar_redistribuicao(payload.redistribuicao),
            ordem=ordem,
        )
    except ValueError as err:
        raise ValidacaoFalhou(str(err)) from err


def completar_ordens(itens: list[ReordemItemDTO], atuais: list[Servidor]) -> list[NovaOrdem]:
    """Enviados com a ordem pedida; os demais de `atuais` continuam em N+1.."""
    ordens = [NovaOrdem(id=i.id, ordem=i.ordem) for i in itens]
    enviados = {i.id for i in itens}
    restantes = [s.id for s in atuais if s.id is not None and s.id not in enviados]
    ordens.extend(
        NovaOrdem(id=servidor_id, ordem=posicao)
        for posicao, servidor_id in enumerate(restantes, start=len(itens) + 1)
    )
    return ordens


class ServidorService:
    def __init__(self, servidor_repo: ServidorRepository, database: Database) -> None:
        self._servidor_repo = servidor_repo
        self._database = database

    def listar(self, secretaria: str | None = None) -> list[ServidorDTO]:
        return [servidor_para_dto(s) for s in self._servidor_repo.listar(secretaria)]

    def listar_entidades(self, secretaria: str | None = None) -> list[Servidor]:
        return self._servidor_repo.listar(secretaria)

    def criar(self, payload: ServidorPayloadDTO) -> ServidorDTO:
        ordem = payload.ordem
        if ordem is None:
            ordem = self._servidor_repo.maior_ordem(payload.secretaria.strip()) + 1
        servidor = montar_servidor(payload, None, ordem)
        return servidor_para_dto(self._servidor_repo.inserir(servidor))

    def atualizar(self, servidor_id: int, payload: ServidorPayloadDTO) -> ServidorDTO:
        ordem = payload.ordem
        if ordem is None:
            atual = self._servidor_repo.buscar_por_id(servidor_id)
            if atual is None:
                raise NaoEncontrado("Funcionario", servidor_id)
            ordem = atual.ordem
        servidor = montar_servidor(payload, servidor_id, ordem)
        atualizado = self._servidor_repo.atualizar(servidor_id, servidor)
        if atualizado is None:
            raise NaoEncontrado("Funcionario", servidor_id)
        return servidor_para_dto(atualizado)

    def excluir(self, servidor_id: int) -> None:
        if not self._servidor_repo.excluir(servidor_id):
            raise NaoEncontrado("Funcionario", servidor_id)

    def reordenar(self, itens: list[ReordemItemDTO]) -> None:
        """Reescreve ordem de uma unica secretaria.

        Os enviados recebem exatamente {1..N}; as linhas da secretaria que
        ficaram de fora seguem com N+1.. na ordem relativa atual, na mesma
        transacao. Reorders da mesma secretaria sao serializados por um lock
        em processo; entre processos, o conflito de transacao do DuckDB vira
        ConflitoConcorrente.
        """
        if not itens:
            return
        ids = [i.id for i in itens]
        if len(set(ids)) != len(ids):
            raise ValidacaoFalhou("Funcionario repetido na reordenacao")
        if sorted(i.ordem for i in itens) != list(range(1, len(itens) + 1)):
            raise ValidacaoFalhou("Ordens devem ser exatamente 1..N, sem lacunas nem repeticoes")

        secretarias = self._servidor_repo.secretarias_de(ids)
        faltantes = [i for i in ids if i not in secretarias]
        if faltantes:
            raise NaoEncontrado("Funcionario", faltantes[0])
        distintas = set(secretarias.values())
        if len(distintas) != 1:
            raise ValidacaoFalhou("Reordenacao deve conter uma unica secretaria")
        secretaria = distintas.pop()

        with self._database.trava(f"reorder:{secretaria}"):
            try:
                with self._database.transacao() as cur:
                    repo = DuckDBServidorRepo(cur)
                    repo.aplicar_ordens(completar_ordens(itens, repo.listar(secretaria)))
            except duckdb.TransactionException as err:
                raise ConflitoConcorrente(
                    f"Reordenacao concorrente em {secretaria}; recarregue e tente novamente"
                ) from err
