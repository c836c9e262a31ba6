# gecom/interfaces/views/servidores_view.py
#
# Tela "Gerenciamento de Servidores": uma secretaria por vez, com filtros,
# formulario (editar / preencher vaga / novo), exclusao confirmada,
# reordenacao por arrastar e exportacao em PDF.
#
# Estado da lista:
#   _confirmados  ultima lista aceita pelo servidor
#   _rascunho     lista otimista durante uma reordenacao; descartada se a
#                 escrita falhar, promovida a confirmada se passar
from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, replace
from decimal import Decimal
from enum import Enum

from gecom.application.formatacao import formatar_moeda
from gecom.application.services.export_service import linhas_tabela
from gecom.application.services.relatorio_service import total_salarial
from gecom.domain.cargo.entities import Cargo
from gecom.domain.organizacao.entities import Organizacao
from gecom.infrastructure.pdf_generator import gerar_pdf_servidores
from gecom.interfaces.client.data_access import (
    ID_NOVO,
    CargoRef,
    ErroTransporte,
    GecomClient,
    RegistroServidor,
)

from . import graficos

logger = logging.getLogger(__name__)

MSG_CONFIRMAR_EXCLUSAO = "Tem certeza que deseja excluir este servidor?"
MSG_SALVO = "Servidor salvo com sucesso!"


class ModoFormulario(str, Enum):
    EDITAR = "edit"
    PREENCHER_VAGA = "addVacant"
    NOVO = "addNew"


# Campos travados por modo (o formulario nao os deixa editar)
CAMPOS_FIXOS = {
    ModoFormulario.EDITAR: frozenset(),
    ModoFormulario.PREENCHER_VAGA: frozenset({"cargo_efetivo", "simbolo", "valor_cc", "status"}),
    ModoFormulario.NOVO: frozenset({"status"}),
}


def modo_para(registro: RegistroServidor) -> ModoFormulario:
    if registro.novo:
        return ModoFormulario.NOVO
    if not registro.provido:
        return ModoFormulario.PREENCHER_VAGA
    return ModoFormulario.EDITAR


@dataclass
class Formulario:
    registro: RegistroServidor
    modo: ModoFormulario

    @property
    def titulo(self) -> str:
        if self.modo is ModoFormulario.NOVO:
            return "Adicionar Novo Servidor"
        if self.modo is ModoFormulario.PREENCHER_VAGA:
            return "Adicionar Servidor"
        return "Editar Servidor"


def _contem(texto: str, trecho: str) -> bool:
    return trecho.lower() in texto.lower()


class ServidoresView:
    def __init__(
        self,
        client: GecomClient,
        confirmar: Callable[[str], bool] = lambda _msg: True,
        avisar: Callable[[str], None] = lambda _msg: None,
    ) -> None:
        self._client = client
        self._confirmar = confirmar
        self._avisar = avisar
        self.organizacoes: list[Organizacao] = []
        self.cargos: list[Cargo] = []
        self._confirmados: list[RegistroServidor] = []
        self._rascunho: list[RegistroServidor] | None = None
        self.secretaria = ""
        self.filtro_cargo = ""
        self.filtro_status = ""
        self.filtro_simbolo = ""
        self.formulario: Formulario | None = None

    # ====================== CARGA ======================

    def carregar(self) -> None:
        """Busca sequencial: organizacoes, servidores, cargos."""
        self.organizacoes = self._client.listar_organizacoes()
        servidores = self._client.listar_servidores()
        self.cargos = self._client.listar_cargos()
        self._confirmados = sorted(servidores, key=lambda s: s.ordem)
        self._rascunho = None
        self._sincronizar_selecao()

    def _sincronizar_selecao(self) -> None:
        siglas = [o.sigla for o in self.organizacoes_disponiveis]
        if not siglas:
            self.secretaria = ""
        elif self.secretaria not in siglas:
            self.secretaria = siglas[0]

    def selecionar(self, sigla: str) -> None:
        self.secretaria = sigla
        self._sincronizar_selecao()

    # ====================== DERIVADOS ======================

    @property
    def servidores(self) -> list[RegistroServidor]:
        return self._rascunho if self._rascunho is not None else self._confirmados

    @property
    def em_rascunho(self) -> bool:
        return self._rascunho is not None

    @property
    def organizacoes_disponiveis(self) -> list[Organizacao]:
        """So orgaos com ao menos uma linha de lotacao."""
        usadas = {s.secretaria for s in self.servidores}
        return [o for o in self.organizacoes if o.sigla in usadas]

    @property
    def nome_organizacao(self) -> str:
        return next((o.secretaria for o in self.organizacoes if o.sigla == self.secretaria), "")

    @property
    def linhas_organizacao(self) -> list[RegistroServidor]:
        return sorted(
            (s for s in self.servidores if s.secretaria == self.secretaria),
            key=lambda s: s.ordem,
        )

    @property
    def opcoes_cargo(self) -> list[str]:
        return sorted({s.cargo_efetivo for s in self.linhas_organizacao})

    @property
    def opcoes_simbolo(self) -> list[str]:
        return sorted({s.simbolo for s in self.linhas_organizacao})

    @property
    def linhas(self) -> list[RegistroServidor]:
        """Linhas visiveis: orgao selecionado + filtros, por ordem."""
        return [
            s
            for s in self.linhas_organizacao
            if (not self.filtro_cargo or _contem(s.cargo_efetivo, self.filtro_cargo))
            and (not self.filtro_status or s.status == self.filtro_status)
            and (not self.filtro_simbolo or _contem(s.simbolo, self.filtro_simbolo))
        ]

    @property
    def total_salarial(self) -> Decimal:
        return total_salarial(self.servidores, self.secretaria)

    @property
    def total_formatado(self) -> str:
        return formatar_moeda(self.total_salarial)

    @property
    def tabela(self) -> list[list[str]]:
        return linhas_tabela(self.linhas)

    @property
    def grafico(self) -> graficos.GraficoDTO:
        providos = sum(1 for s in self.linhas if s.provido)
        return graficos.barras(
            ["Provido", "Vago"],
            [providos, len(self.linhas) - providos],
            "Cargos",
            cores=[graficos.AZUL, graficos.VERDE],
        )

    @property
    def opcoes_formulario_cargo(self) -> list[str]:
        return list(dict.fromkeys(c.cargo_efetivo for c in self.cargos))

    @property
    def opcoes_formulario_simbolo(self) -> list[str]:
        return list(dict.fromkeys(c.simbolo for c in self.cargos))

    # ====================== FORMULARIO ======================

    def abrir_formulario(self, servidor_id: str) -> Formulario:
        registro = next((s for s in self.servidores if s.id == servidor_id), None)
        if registro is None:
            raise KeyError(servidor_id)
        self.formulario = Formulario(registro=registro, modo=modo_para(registro))
        return self.formulario

    def abrir_novo(self) -> Formulario:
        registro = RegistroServidor(
            id=ID_NOVO,
            status="Vago",
            secretaria=self.secretaria,
            ordem=max((s.ordem for s in self.linhas_organizacao), default=0) + 1,
        )
        self.formulario = Formulario(registro=registro, modo=ModoFormulario.NOVO)
        return self.formulario

    def editar(self, **campos: object) -> RegistroServidor:
        """Aplica campos ao rascunho do formulario respeitando o modo.

        cargo_efetivo e simbolo vao para o CargoRef; o nome e forcado a
        maiusculas ao preencher vaga ou criar.
        """
        form = self._formulario_aberto()
        fixos = CAMPOS_FIXOS[form.modo] & campos.keys()
        if fixos:
            raise ValueError(f"Campos não editáveis neste modo: {', '.join(sorted(fixos))}")

        registro = form.registro
        cargo = registro.cargo
        if "cargo_efetivo" in campos:
            cargo = replace(cargo, cargo_efetivo=str(campos.pop("cargo_efetivo")))
        if "simbolo" in campos:
            cargo = replace(cargo, simbolo=str(campos.pop("simbolo")))
        if "nome_servidor" in campos and form.modo is not ModoFormulario.EDITAR:
            campos["nome_servidor"] = str(campos["nome_servidor"]).upper()
        if "valor_cc" in campos:
            campos["valor_cc"] = Decimal(str(campos["valor_cc"] or 0))

        form.registro = replace(registro, cargo=cargo, **campos)  # type: ignore[arg-type]
        return form.registro

    def cancelar(self) -> None:
        self.formulario = None

    def salvar(self) -> bool:
        form = self._formulario_aberto()
        registro = form.registro
        if form.modo is not ModoFormulario.EDITAR:
            registro = replace(registro, nome_servidor=registro.nome_servidor.upper(), status="Provido")
        if registro.provido and not registro.nome_servidor.strip():
            self._avisar("Informe o nome do servidor")
            return False

        if form.modo is ModoFormulario.NOVO:
            try:
                cargo, resultado = self._client.criar_cargo(registro.cargo_efetivo, registro.simbolo)
            except ErroTransporte:
                self._avisar("Erro ao criar nova posição")
                return False
            logger.info("Cargo %s/%s: %s", cargo.cargo_efetivo, cargo.simbolo, resultado.value)
            registro = replace(
                registro,
                cargo=CargoRef(
                    cargo_efetivo=cargo.cargo_efetivo,
                    simbolo=cargo.simbolo,
                    id=str(cargo.id),
                    numero=cargo.numero,
                ),
            )

        try:
            if registro.novo:
                self._client.criar_servidor(registro)
            else:
                self._client.atualizar_servidor(registro)
        except ErroTransporte as err:
            self._avisar(str(err))
            return False

        self._avisar(MSG_SALVO)
        self.formulario = None
        self.carregar()
        return True

    def _formulario_aberto(self) -> Formulario:
        if self.formulario is None:
            raise RuntimeError("Nenhum formulário aberto")
        return self.formulario

    # ====================== EXCLUSAO ======================

    def excluir(self, servidor_id: str) -> bool:
        """Remove a linha (nao vira vaga). Exige confirmacao."""
        if not self._confirmar(MSG_CONFIRMAR_EXCLUSAO):
            return False
        try:
            self._client.excluir_servidor(servidor_id)
        except ErroTransporte as err:
            self._avisar(str(err))
            return False
        self.carregar()
        return True

    # ====================== REORDENACAO ======================

    def mover(self, origem: int, destino: int) -> bool:
        """Arrasta a linha visivel `origem` para `destino` (indices de self.linhas)."""
        visiveis = list(self.linhas)
        visiveis.insert(destino, visiveis.pop(origem))
        return self.reordenar([s.id for s in visiveis])

    def reordenar(self, ids: list[str]) -> bool:
        """Reescreve ordem 1..N para as linhas visiveis na sequencia `ids`.

        Linhas da secretaria escondidas pelos filtros seguem em N+1.., na
        ordem atual, e vao na mesma escrita. A lista local passa a refletir o
        rascunho antes da escrita; se a API recusar, volta ao estado
        confirmado.
        """
        por_id = {s.id: s for s in self.linhas}
        if set(ids) != set(por_id) or len(ids) != len(por_id):
            raise ValueError("A nova ordem deve conter exatamente as linhas visíveis")

        ocultas = [s for s in self.linhas_organizacao if s.id not in por_id]
        sequencia = [por_id[i] for i in ids] + ocultas
        atualizados = {s.id: replace(s, ordem=posicao) for posicao, s in enumerate(sequencia, start=1)}
        self._rascunho = [atualizados.get(s.id, s) for s in self._confirmados]
        try:
            self._client.reordenar_servidores([atualizados[s.id] for s in sequencia])
        except ErroTransporte as err:
            logger.warning("Reordenacao de %s desfeita: %s", self.secretaria, err)
            self._rascunho = None
            self._avisar(str(err))
            return False

        self._confirmados = sorted(self._rascunho, key=lambda s: s.ordem)
        self._rascunho = None
        return True

    # ====================== EXPORTACAO ======================

    @property
    def nome_arquivo_pdf(self) -> str:
        return f"Relatorio-{self.nome_organizacao or self.secretaria}.pdf"

    def exportar_pdf(self) -> bytes:
        """Linhas filtradas, na ordem da tela. RuntimeError sem weasyprint."""
        return gerar_pdf_servidores(self.secretaria, self.nome_organizacao, self.linhas)
