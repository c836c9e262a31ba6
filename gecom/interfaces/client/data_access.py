# gecom/interfaces/client/data_access.py
#
# Camada de acesso a API usada pelas views.
#
# Leituras nunca levantam: qualquer falha de transporte ou status nao-2xx e
# logada e vira lista vazia. Escritas logam e levantam ErroTransporte para que
# a view mostre a mensagem ao usuario.
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any

import httpx

from gecom.domain.cargo.entities import Cargo
from gecom.domain.cargo.value_objects import ResultadoCriacao
from gecom.domain.crescimento.entities import PontoCrescimento
from gecom.domain.errors import GecomError
from gecom.domain.organizacao.entities import Classificacao, Organizacao
from gecom.domain.servidor.value_objects import SEM_REDISTRIBUICAO
from gecom.infrastructure.config import get_settings

logger = logging.getLogger(__name__)

# id de um registro ainda nao persistido (formulario "Adicionar Novo")
ID_NOVO = "new"


class ErroTransporte(GecomError):
    def __init__(self, mensagem: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(mensagem)


@dataclass(frozen=True)
class CargoRef:
    """Cargo copiado por valor dentro do registro do servidor."""

    cargo_efetivo: str = ""
    simbolo: str = ""
    id: str = ""
    numero: int = 0


@dataclass(frozen=True)
class RegistroServidor:
    id: str
    nome_servidor: str = ""
    cargo: CargoRef = field(default_factory=CargoRef)
    status: str = "Vago"
    redistribuicao: str = ""
    dt_publicacao: str = ""  # YYYY-MM-DD ou vazio
    valor_cc: Decimal = Decimal("0")
    secretaria: str = ""
    ordem: int = 0

    @property
    def novo(self) -> bool:
        return self.id == ID_NOVO

    @property
    def provido(self) -> bool:
        return self.status == "Provido"

    @property
    def cargo_efetivo(self) -> str:
        return self.cargo.cargo_efetivo

    @property
    def simbolo(self) -> str:
        return self.cargo.simbolo

    @property
    def data_publicacao(self) -> str:
        return self.dt_publicacao


def _decimal(valor: object) -> Decimal:
    try:
        return Decimal(str(valor)) if valor not in (None, "") else Decimal("0")
    except InvalidOperation:
        return Decimal("0")


def registro_de_linha(row: dict[str, Any]) -> RegistroServidor:
    """Linha da API (colunas do banco) -> registro da view."""
    data = row.get("data_nomeacao") or ""
    if isinstance(data, date):
        data = data.isoformat()
    return RegistroServidor(
        id=str(row["id"]),
        nome_servidor=row.get("servidor") or "",
        cargo=CargoRef(
            cargo_efetivo=row.get("cargo_efetivo") or "",
            simbolo=row.get("simbolo") or "",
        ),
        status="Provido" if row.get("status") == "Provido" else "Vago",
        redistribuicao=row.get("redistribuicao") or SEM_REDISTRIBUICAO,
        dt_publicacao=str(data)[:10],
        valor_cc=_decimal(row.get("salario")),
        secretaria=row.get("secretaria") or "",
        ordem=int(row.get("ordem") or 0),
    )


def payload_de_registro(registro: RegistroServidor) -> dict[str, Any]:
    """Registro da view -> corpo de POST/PUT /employees."""
    redistribuicao = registro.redistribuicao.strip()
    return {
        "servidor": registro.nome_servidor,
        "cargo_efetivo": registro.cargo.cargo_efetivo,
        "simbolo": registro.cargo.simbolo,
        "data_nomeacao": registro.dt_publicacao,
        "salario": str(registro.valor_cc),
        "redistribuicao": redistribuicao or SEM_REDISTRIBUICAO,
        "status": registro.status,
        "secretaria": registro.secretaria,
        "ordem": registro.ordem,
    }


class GecomClient:
    def __init__(self, base_url: str | None = None, http: httpx.Client | None = None) -> None:
        self._base_url = (base_url or get_settings().api_url).rstrip("/")
        self._http = http or httpx.Client()
        self._dono_do_http = http is None

    def close(self) -> None:
        if self._dono_do_http:
            self._http.close()

    def __enter__(self) -> GecomClient:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    # ====================== LEITURAS ======================

    def listar_organizacoes(self) -> list[Organizacao]:
        return [
            Organizacao(
                codigo=int(o["codigo"]),
                secretaria=o.get("secretaria") or "",
                sigla=o["sigla"],
                classificacao=Classificacao(o["classificacao"]),
            )
            for o in self._ler("/organizations", "organizações")
        ]

    def listar_servidores(self) -> list[RegistroServidor]:
        return [registro_de_linha(r) for r in self._ler("/employees", "funcionários")]

    def listar_cargos(self) -> list[Cargo]:
        return [
            Cargo(
                id=int(p["id"]),
                numero=int(p["numero"]),
                cargo_efetivo=p["cargo_efetivo"],
                simbolo=p["simbolo"],
            )
            for p in self._ler("/positions", "cargos")
        ]

    def listar_crescimento(self) -> list[PontoCrescimento]:
        return [
            PontoCrescimento(mes=p["mes"], total=int(p["total"]))
            for p in self._ler("/organization-growth", "crescimento organizacional")
        ]

    # ====================== ESCRITAS ======================

    def criar_servidor(self, registro: RegistroServidor) -> RegistroServidor:
        row = self._escrever("POST", "/employees", "criar funcionário", payload_de_registro(registro))
        return registro_de_linha(row)

    def atualizar_servidor(self, registro: RegistroServidor) -> RegistroServidor:
        row = self._escrever(
            "PUT", f"/employees/{registro.id}", "atualizar funcionário", payload_de_registro(registro)
        )
        return registro_de_linha(row)

    def excluir_servidor(self, servidor_id: str) -> None:
        self._escrever("DELETE", f"/employees/{servidor_id}", "excluir funcionário")

    def reordenar_servidores(self, registros: list[RegistroServidor]) -> None:
        corpo = {"employees": [{"id": r.id, "ordem": r.ordem} for r in registros]}
        self._escrever("PUT", "/employees/reorder", "atualizar posições dos funcionários", corpo)

    def criar_cargo(self, cargo_efetivo: str, simbolo: str, numero: int | None = None) -> tuple[Cargo, ResultadoCriacao]:
        corpo: dict[str, Any] = {"cargo_efetivo": cargo_efetivo, "simbolo": simbolo}
        if numero is not None:
            corpo["numero"] = numero
        row = self._escrever("POST", "/positions", "criar posição", corpo)
        cargo = Cargo(
            id=int(row["id"]),
            numero=int(row["numero"]),
            cargo_efetivo=row["cargo_efetivo"],
            simbolo=row["simbolo"],
        )
        return cargo, ResultadoCriacao(row["resultado"])

    # ======================================================

    def _ler(self, caminho: str, recurso: str) -> list[dict[str, Any]]:
        try:
            response = self._http.get(f"{self._base_url}{caminho}")
            response.raise_for_status()
            dados = response.json()
        except (httpx.HTTPError, ValueError) as err:
            logger.error("Erro ao buscar %s: %s", recurso, err)
            return []
        return dados if isinstance(dados, list) else []

    def _escrever(
        self, metodo: str, caminho: str, acao: str, corpo: dict[str, Any] | None = None
    ) -> Any:
        try:
            response = self._http.request(metodo, f"{self._base_url}{caminho}", json=corpo)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as err:
            logger.error("Erro ao %s: %s", acao, err)
            raise ErroTransporte(f"Erro ao {acao}", err.response.status_code) from err
        except (httpx.HTTPError, ValueError) as err:
            logger.error("Erro ao %s: %s", acao, err)
            raise ErroTransporte(f"Erro ao {acao}") from err
