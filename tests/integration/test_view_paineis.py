# tests/integration/test_view_paineis.py
from __future__ import annotations

import pytest

from gecom.application.services.relatorio_service import TipoRelatorio
from gecom.interfaces.client.data_access import GecomClient
from gecom.interfaces.views.cargos_view import CargosView
from gecom.interfaces.views.organizacoes_view import OrganizacoesView
from gecom.interfaces.views.painel_view import PainelView
from gecom.interfaces.views.relatorios_view import RELATORIOS, RelatoriosView


def test_painel_cartoes(gecom_client: GecomClient) -> None:
    painel = PainelView(gecom_client)
    painel.carregar()
    assert painel.ocupados == 2
    assert painel.vagos == 2
    assert (painel.diretas, painel.indiretas) == (2, 2)
    assert painel.percentuais == (50.0, 50.0)


def test_painel_cargos_por_orgao_e_graficos(gecom_client: GecomClient) -> None:
    painel = PainelView(gecom_client)
    painel.carregar()
    assert painel.cargos_por_orgao == [("CACIVIL", 2), ("SEFAZ", 1), ("DER", 1)]
    assert painel.grafico_cargos_por_orgao.labels == ["CACIVIL", "SEFAZ", "DER"]
    assert painel.grafico_classificacao.datasets[0].data == [2, 2]
    crescimento = painel.grafico_crescimento
    assert crescimento.tipo == "line"
    assert crescimento.labels == ["Jan", "Fev", "Mar"]
    assert crescimento.datasets[0].data == [10, 12, 15]


def test_painel_sem_organizacoes() -> None:
    class Vazio:
        def listar_organizacoes(self) -> list:
            return []

        listar_servidores = listar_cargos = listar_crescimento = listar_organizacoes

    painel = PainelView(Vazio())  # type: ignore[arg-type]
    painel.carregar()
    assert painel.percentuais == (0.0, 0.0)


def test_organizacoes_filtros(gecom_client: GecomClient) -> None:
    view = OrganizacoesView(gecom_client)
    view.carregar()
    assert len(view.filtradas) == 4

    view.filtro_texto = "secretaria"
    assert [o.sigla for o in view.filtradas] == ["SEFAZ", "SEMLOT"]

    view.filtro_texto = "3"
    assert [o.sigla for o in view.filtradas] == ["DER"]

    view.filtro_texto = ""
    view.filtro_classificacao = "INDIRETA"
    assert [o.sigla for o in view.filtradas] == ["DER", "SEMLOT"]


def test_organizacoes_providos_por_orgao(gecom_client: GecomClient) -> None:
    view = OrganizacoesView(gecom_client)
    view.carregar()
    assert view.providos_por_orgao == [("CACIVIL", 1), ("SEFAZ", 1)]
    assert view.grafico.datasets[0].label == "Servidores Providos"


def test_cargos_filtros_e_ocupantes(gecom_client: GecomClient) -> None:
    view = CargosView(gecom_client)
    view.carregar()
    assert view.opcoes_simbolo == ["CC-1", "CC-2", "DAS-3"]

    view.busca = "cc"
    assert [c.cargo_efetivo for c in view.filtrados] == ["Assessor Especial", "Chefe de Gabinete"]
    view.busca = "3"
    assert [c.cargo_efetivo for c in view.filtrados] == ["Diretor"]
    view.busca = ""
    view.filtro_simbolo = "CC-2"
    assert [c.cargo_efetivo for c in view.filtrados] == ["Chefe de Gabinete"]

    assert view.ocupantes == {"Chefe de Gabinete": 1, "Diretor": 1}
    assert view.ocupantes_de(view.filtrados[0]) == 1


def test_cargos_selecao_do_grafico(gecom_client: GecomClient) -> None:
    view = CargosView(gecom_client)
    view.carregar()
    assert view.selecionados == ["Chefe de Gabinete", "Diretor"]

    view.alternar("Diretor")
    assert view.grafico.labels == ["Chefe de Gabinete"]
    view.alternar("Diretor")
    assert view.grafico.labels == ["Chefe de Gabinete", "Diretor"]

    view.busca_selecao = "dir"
    assert view.nomes_selecao == ["Diretor"]


def test_relatorios_lista_os_tres_tipos() -> None:
    assert [r.tipo for r in RELATORIOS] == list(TipoRelatorio)


def test_relatorios_dados_com_filtros(gecom_client: GecomClient) -> None:
    view = RelatoriosView(gecom_client)
    view.carregar()
    assert view.opcoes_orgao == ["CACIVIL", "DER", "SEFAZ", "SEMLOT"]

    vagos = view.dados(TipoRelatorio.CARGOS_VAGOS)
    assert [o.sigla for o in vagos] == ["CACIVIL", "DER"]

    view.filtro_orgao = "DER"
    vagos = view.dados(TipoRelatorio.CARGOS_VAGOS)
    assert [o.sigla for o in vagos] == ["DER"]

    view.filtro_orgao = ""
    view.filtro_status = "Provido"
    geral = view.dados(TipoRelatorio.QUANTITATIVO_GERAL)
    assert [c.provido for c in geral] == [2, 0]


@pytest.mark.parametrize("tipo", list(TipoRelatorio))
def test_relatorios_pdf_ou_erro_sem_weasyprint(gecom_client: GecomClient, tipo: TipoRelatorio) -> None:
    view = RelatoriosView(gecom_client)
    view.carregar()
    try:
        pdf = view.gerar_pdf(tipo)
    except RuntimeError as err:
        assert "weasyprint" in str(err)
    else:
        assert pdf.startswith(b"%PDF")
