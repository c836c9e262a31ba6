# gecom/interfaces/views/organizacoes_view.py
from __future__ import annotations

from gecom.domain.organizacao.entities import Organizacao
from gecom.interfaces.client.data_access import GecomClient, RegistroServidor

from . import graficos
from .painel_view import SEM_SIGLA


class OrganizacoesView:
    def __init__(self, client: GecomClient) -> None:
        self._client = client
        self.organizacoes: list[Organizacao] = []
        self.servidores: list[RegistroServidor] = []
        self.filtro_texto = ""
        self.filtro_classificacao = ""

    def carregar(self) -> None:
        self.organizacoes = self._client.listar_organizacoes()
        self.servidores = self._client.listar_servidores()

    @property
    def filtradas(self) -> list[Organizacao]:
        """Busca por nome, sigla ou codigo + classificacao exata."""
        texto = self.filtro_texto.lower()
        return [
            o
            for o in self.organizacoes
            if (texto in o.secretaria.lower() or texto in o.sigla.lower() or self.filtro_texto in str(o.codigo))
            and (not self.filtro_classificacao or o.classificacao.value == self.filtro_classificacao)
        ]

    @property
    def providos_por_orgao(self) -> list[tuple[str, int]]:
        contagem: dict[str, int] = {}
        for s in self.servidores:
            if s.provido:
                sigla = s.secretaria or SEM_SIGLA
                contagem[sigla] = contagem.get(sigla, 0) + 1
        return list(contagem.items())

    @property
    def grafico(self) -> graficos.GraficoDTO:
        itens = self.providos_por_orgao
        return graficos.barras([s for s, _ in itens], [n for _, n in itens], "Servidores Providos")
