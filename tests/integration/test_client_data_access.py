# tests/integration/test_client_data_access.py
from __future__ import annotations

from dataclasses import replace
from decimal import Decimal

import httpx
import pytest

from gecom.domain.cargo.value_objects import ResultadoCriacao
from gecom.domain.organizacao.entities import Classificacao
from gecom.interfaces.client.data_access import (
    ID_NOVO,
    CargoRef,
    ErroTransporte,
    GecomClient,
    RegistroServidor,
    payload_de_registro,
    registro_de_linha,
)

BASE_URL = "http://testserver/api"


def _client_falhando(status: int = 500) -> GecomClient:
    transport = httpx.MockTransport(lambda request: httpx.Response(status, json={"detail": "erro"}))
    return GecomClient(base_url=BASE_URL, http=httpx.Client(transport=transport))


def _client_sem_rede() -> GecomClient:
    def recusar(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    return GecomClient(base_url=BASE_URL, http=httpx.Client(transport=httpx.MockTransport(recusar)))


def test_listar_organizacoes(gecom_client: GecomClient) -> None:
    orgs = gecom_client.listar_organizacoes()
    assert [o.sigla for o in orgs] == ["CACIVIL", "SEFAZ", "DER", "SEMLOT"]
    assert orgs[2].classificacao is Classificacao.INDIRETA


def test_listar_servidores_mapeia_registro(gecom_client: GecomClient) -> None:
    servidores = gecom_client.listar_servidores()
    e1 = next(s for s in servidores if s.id == "1")
    assert e1.nome_servidor == "MARIA SILVA"
    assert e1.cargo == CargoRef(cargo_efetivo="Chefe de Gabinete", simbolo="CC-2")
    assert e1.valor_cc == Decimal("13000.00")
    assert e1.dt_publicacao == "2024-03-05"
    assert e1.redistribuicao == "Não"
    assert e1.provido

    e2 = next(s for s in servidores if s.id == "2")
    assert e2.nome_servidor == ""
    assert e2.dt_publicacao == ""
    assert not e2.provido


def test_listar_cargos_e_crescimento(gecom_client: GecomClient) -> None:
    assert [c.numero for c in gecom_client.listar_cargos()] == [1, 2, 3]
    assert [p.mes for p in gecom_client.listar_crescimento()] == ["Jan", "Fev", "Mar"]


@pytest.mark.parametrize("fabrica", [_client_falhando, _client_sem_rede])
def test_leituras_degradam_para_lista_vazia(fabrica) -> None:
    client = fabrica()
    assert client.listar_organizacoes() == []
    assert client.listar_servidores() == []
    assert client.listar_cargos() == []
    assert client.listar_crescimento() == []


def test_leitura_com_corpo_invalido_retorna_vazio() -> None:
    transport = httpx.MockTransport(lambda request: httpx.Response(200, text="<html>"))
    client = GecomClient(base_url=BASE_URL, http=httpx.Client(transport=transport))
    assert client.listar_servidores() == []


def test_escrita_com_status_de_erro_levanta() -> None:
    client = _client_falhando(500)
    registro = RegistroServidor(id="1", nome_servidor="X", status="Provido", secretaria="CACIVIL")
    with pytest.raises(ErroTransporte) as exc:
        client.atualizar_servidor(registro)
    assert exc.value.status_code == 500


def test_escrita_sem_rede_levanta() -> None:
    with pytest.raises(ErroTransporte):
        _client_sem_rede().excluir_servidor("1")


def test_criar_e_excluir_servidor(gecom_client: GecomClient) -> None:
    novo = RegistroServidor(
        id=ID_NOVO,
        nome_servidor="ANA",
        cargo=CargoRef(cargo_efetivo="Diretor", simbolo="DAS-3"),
        status="Provido",
        dt_publicacao="2024-01-02",
        valor_cc=Decimal("500.25"),
        secretaria="DER",
        ordem=2,
    )
    criado = gecom_client.criar_servidor(novo)
    assert criado.id == "5"
    assert criado.valor_cc == Decimal("500.25")
    assert criado.ordem == 2

    gecom_client.excluir_servidor(criado.id)
    assert all(s.id != "5" for s in gecom_client.listar_servidores())


def test_excluir_inexistente_levanta_com_404(gecom_client: GecomClient) -> None:
    with pytest.raises(ErroTransporte) as exc:
        gecom_client.excluir_servidor("999")
    assert exc.value.status_code == 404


def test_criar_cargo_tri_estado(gecom_client: GecomClient) -> None:
    cargo, resultado = gecom_client.criar_cargo("Novo Cargo", "X1")
    assert resultado is ResultadoCriacao.CRIADO
    assert cargo.numero == 4

    mesmo, resultado = gecom_client.criar_cargo(" novo cargo", "X1 ")
    assert resultado is ResultadoCriacao.JA_EXISTE
    assert mesmo.id == cargo.id

    with pytest.raises(ErroTransporte) as exc:
        gecom_client.criar_cargo("", "X1")
    assert exc.value.status_code == 422


def test_reordenar_servidores(gecom_client: GecomClient) -> None:
    e1, e2 = [s for s in gecom_client.listar_servidores() if s.secretaria == "CACIVIL"]
    gecom_client.reordenar_servidores([replace(e2, ordem=1), replace(e1, ordem=2)])
    cacivil = [s.id for s in gecom_client.listar_servidores() if s.secretaria == "CACIVIL"]
    assert cacivil == ["2", "1"]


def test_payload_redistribuicao_vazia_vira_nao() -> None:
    registro = RegistroServidor(id="1", nome_servidor="X", status="Provido", secretaria="S", redistribuicao=" ")
    assert payload_de_registro(registro)["redistribuicao"] == "Não"


def test_registro_de_linha_sem_salario() -> None:
    registro = registro_de_linha(
        {"id": 7, "servidor": None, "cargo_efetivo": None, "simbolo": None, "status": "Vago",
         "secretaria": "DER", "salario": None, "ordem": None}
    )
    assert registro.valor_cc == Decimal("0")
    assert registro.ordem == 0
    assert registro.status == "Vago"
