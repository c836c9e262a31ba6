# gecom/interfaces/views/relatorios_view.py
from __future__ import annotations

from dataclasses import dataclass

from gecom.application.dtos.relatorio_dto import (
    ClassificacaoGeralDTO,
    OrgaoQuantitativoDTO,
    OrgaoVagosDTO,
)
from gecom.application.services.relatorio_service import TipoRelatorio, aplicar_filtros, gerar_dados
from gecom.domain.organizacao.entities import Organizacao
from gecom.infrastructure.pdf_generator import gerar_pdf_relatorio
from gecom.interfaces.client.data_access import GecomClient, RegistroServidor


@dataclass(frozen=True)
class Relatorio:
    tipo: TipoRelatorio
    titulo: str
    descricao: str


RELATORIOS = [
    Relatorio(
        TipoRelatorio.CARGOS_VAGOS,
        "Relação de Cargos Vagos por Órgão",
        "Relatório de cargos vagos agrupados por órgão e símbolo",
    ),
    Relatorio(
        TipoRelatorio.QUANTITATIVO_SIMBOLOS,
        "Quantitativo de Cargos (Símbolos)",
        "Relatório de cargos providos/vagos divididos por órgão e símbolo",
    ),
    Relatorio(
        TipoRelatorio.QUANTITATIVO_GERAL,
        "Quantitativo Geral de Símbolos",
        "Relatório geral por classificação (DIRETA/INDIRETA), simbolizado",
    ),
]


class RelatoriosView:
    def __init__(self, client: GecomClient) -> None:
        self._client = client
        self.organizacoes: list[Organizacao] = []
        self.servidores: list[RegistroServidor] = []
        self.filtro_orgao = ""
        self.filtro_cargo = ""
        self.filtro_simbolo = ""
        self.filtro_status = ""

    def carregar(self) -> None:
        self.organizacoes = self._client.listar_organizacoes()
        self.servidores = self._client.listar_servidores()

    @property
    def opcoes_orgao(self) -> list[str]:
        return sorted(o.sigla for o in self.organizacoes)

    @property
    def opcoes_cargo(self) -> list[str]:
        return sorted({s.cargo_efetivo for s in self.servidores})

    @property
    def opcoes_simbolo(self) -> list[str]:
        return sorted({s.simbolo for s in self.servidores})

    @property
    def filtrados(self) -> list[RegistroServidor]:
        return aplicar_filtros(
            self.servidores, self.filtro_orgao, self.filtro_cargo, self.filtro_simbolo, self.filtro_status
        )  # type: ignore[return-value]

    def dados(
        self, tipo: TipoRelatorio
    ) -> list[OrgaoVagosDTO] | list[OrgaoQuantitativoDTO] | list[ClassificacaoGeralDTO]:
        return gerar_dados(tipo, self.filtrados, self.organizacoes)

    def gerar_pdf(self, tipo: TipoRelatorio) -> bytes:
        """RuntimeError quando weasyprint nao esta instalado."""
        return gerar_pdf_relatorio(tipo, self.dados(tipo))
