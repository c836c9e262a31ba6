# gecom/interfaces/views/cargos_view.py
from __future__ import annotations

from gecom.domain.cargo.entities import Cargo
from gecom.interfaces.client.data_access import GecomClient, RegistroServidor

from . import graficos

TOP_PADRAO = 5


class CargosView:
    """Tabela de cargos + grafico comparativo de ocupantes.

    A selecao do grafico comeca com os TOP_PADRAO cargos mais ocupados e
    depois e controlada pelo usuario via alternar().
    """

    def __init__(self, client: GecomClient) -> None:
        self._client = client
        self.cargos: list[Cargo] = []
        self.servidores: list[RegistroServidor] = []
        self.busca = ""
        self.filtro_simbolo = ""
        self.busca_selecao = ""
        self.selecionados: list[str] = []

    def carregar(self) -> None:
        self.cargos = self._client.listar_cargos()
        self.servidores = self._client.listar_servidores()
        if not self.selecionados:
            self.selecionados = [nome for nome, _ in self.ranking[:TOP_PADRAO]]

    @property
    def filtrados(self) -> list[Cargo]:
        texto = self.busca.lower()
        return [
            c
            for c in self.cargos
            if (texto in c.cargo_efetivo.lower() or texto in c.simbolo.lower() or self.busca in str(c.numero))
            and (not self.filtro_simbolo or c.simbolo == self.filtro_simbolo)
        ]

    @property
    def opcoes_simbolo(self) -> list[str]:
        return sorted({c.simbolo for c in self.cargos})

    @property
    def ocupantes(self) -> dict[str, int]:
        """cargo_efetivo -> quantidade de servidores providos."""
        contagem: dict[str, int] = {}
        for s in self.servidores:
            if s.provido:
                contagem[s.cargo_efetivo] = contagem.get(s.cargo_efetivo, 0) + 1
        return contagem

    def ocupantes_de(self, cargo: Cargo) -> int:
        return self.ocupantes.get(cargo.cargo_efetivo, 0)

    @property
    def ranking(self) -> list[tuple[str, int]]:
        return sorted(self.ocupantes.items(), key=lambda item: item[1], reverse=True)

    @property
    def nomes_selecao(self) -> list[str]:
        """Lista de checkboxes, filtrada por busca_selecao."""
        trecho = self.busca_selecao.lower()
        return [nome for nome in sorted(self.ocupantes) if trecho in nome.lower()]

    def alternar(self, nome: str) -> None:
        if nome in self.selecionados:
            self.selecionados = [n for n in self.selecionados if n != nome]
        else:
            self.selecionados = [*self.selecionados, nome]

    @property
    def grafico(self) -> graficos.GraficoDTO:
        exibidos = [(n, q) for n, q in self.ranking if n in self.selecionados]
        return graficos.barras(
            [n for n, _ in exibidos],
            [q for _, q in exibidos],
            "Servidores Providos",
            cores=[graficos.AZUL] * len(exibidos),
        )
