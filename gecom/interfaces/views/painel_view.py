# gecom/interfaces/views/painel_view.py
from __future__ import annotations

from gecom.domain.cargo.entities import Cargo
from gecom.domain.crescimento.entities import PontoCrescimento
from gecom.domain.organizacao.entities import Classificacao, Organizacao
from gecom.interfaces.client.data_access import GecomClient, RegistroServidor

from . import graficos

SEM_SIGLA = "N/D"


class PainelView:
    """Dashboard: cartoes de resumo e graficos, somente leitura."""

    def __init__(self, client: GecomClient) -> None:
        self._client = client
        self.organizacoes: list[Organizacao] = []
        self.servidores: list[RegistroServidor] = []
        self.cargos: list[Cargo] = []
        self.crescimento: list[PontoCrescimento] = []

    def carregar(self) -> None:
        self.organizacoes = self._client.listar_organizacoes()
        self.servidores = self._client.listar_servidores()
        self.cargos = self._client.listar_cargos()
        self.crescimento = self._client.listar_crescimento()

    @property
    def ocupados(self) -> int:
        return sum(1 for s in self.servidores if s.provido)

    @property
    def vagos(self) -> int:
        return sum(1 for s in self.servidores if not s.provido)

    def _contar(self, classificacao: Classificacao) -> int:
        return sum(1 for o in self.organizacoes if o.classificacao is classificacao)

    @property
    def diretas(self) -> int:
        return self._contar(Classificacao.DIRETA)

    @property
    def indiretas(self) -> int:
        return self._contar(Classificacao.INDIRETA)

    @property
    def percentuais(self) -> tuple[float, float]:
        total = len(self.organizacoes)
        if not total:
            return 0.0, 0.0
        return self.diretas / total * 100, self.indiretas / total * 100

    @property
    def cargos_por_orgao(self) -> list[tuple[str, int]]:
        """Cargos efetivos distintos por sigla, na ordem em que aparecem."""
        mapa: dict[str, set[str]] = {}
        for s in self.servidores:
            mapa.setdefault(s.secretaria or SEM_SIGLA, set()).add(s.cargo_efetivo)
        return [(sigla, len(cargos)) for sigla, cargos in mapa.items()]

    @property
    def grafico_classificacao(self) -> graficos.GraficoDTO:
        return graficos.barras(
            ["DIRETA", "INDIRETA"],
            [self.diretas, self.indiretas],
            "Quantidade de Órgãos",
            cores=[graficos.AZUL, graficos.VERMELHO],
        )

    @property
    def grafico_percentual(self) -> graficos.GraficoDTO:
        return graficos.pizza(["DIRETA", "INDIRETA"], list(self.percentuais), [graficos.AZUL, graficos.VERMELHO])

    @property
    def grafico_cargos_por_orgao(self) -> graficos.GraficoDTO:
        itens = self.cargos_por_orgao
        return graficos.barras([s for s, _ in itens], [n for _, n in itens], "Cargos Efetivos Distintos")

    @property
    def grafico_crescimento(self) -> graficos.GraficoDTO:
        return graficos.linha(
            [p.mes for p in self.crescimento], [p.total for p in self.crescimento], "Crescimento"
        )
