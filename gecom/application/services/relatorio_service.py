# gecom/application/services/relatorio_service.py
#
# Agregacoes dos relatorios e do total salarial.
#
# Funcoes puras sobre qualquer linha que exponha secretaria, cargo_efetivo,
# simbolo, provido e valor_cc: servem tanto a entidade Servidor (API) quanto o
# registro do lado do cliente (views).
from __future__ import annotations

from collections.abc import Iterable, Sequence
from decimal import Decimal
from enum import Enum
from typing import Protocol

from gecom.domain.organizacao.entities import Classificacao, Organizacao
from gecom.domain.organizacao.repository import OrganizacaoRepository
from gecom.domain.servidor.repository import ServidorRepository

from ..dtos.relatorio_dto import (
    CargoVagoDTO,
    ClassificacaoGeralDTO,
    OrgaoQuantitativoDTO,
    OrgaoVagosDTO,
    SimboloGeralDTO,
    SimboloQuantitativoDTO,
    SimboloVagosDTO,
)

# Linhas com este simbolo ficam fora dos quantitativos.
SIMBOLO_IGNORADO = "sem_simbolo"
SEM_ORGAO = "SEM_ORGAO"


class LinhaLotacao(Protocol):
    @property
    def secretaria(self) -> str: ...
    @property
    def cargo_efetivo(self) -> str: ...
    @property
    def simbolo(self) -> str: ...
    @property
    def provido(self) -> bool: ...
    @property
    def valor_cc(self) -> Decimal: ...


class TipoRelatorio(str, Enum):
    CARGOS_VAGOS = "cargos-vagos"
    QUANTITATIVO_SIMBOLOS = "quantitativo-simbolos"
    QUANTITATIVO_GERAL = "quantitativo-geral"


def total_salarial(linhas: Iterable[LinhaLotacao], secretaria: str) -> Decimal:
    """Soma de valor_cc das linhas providas da secretaria. Vagos nao contam."""
    return sum(
        (l.valor_cc for l in linhas if l.secretaria == secretaria and l.provido),
        Decimal("0"),
    )


def aplicar_filtros(
    linhas: Iterable[LinhaLotacao],
    secretaria: str = "",
    cargo: str = "",
    simbolo: str = "",
    status: str = "",
) -> list[LinhaLotacao]:
    """Filtro exato; string vazia desliga o criterio."""
    resultado = []
    for l in linhas:
        if secretaria and l.secretaria != secretaria:
            continue
        if cargo and l.cargo_efetivo != cargo:
            continue
        if simbolo and l.simbolo != simbolo:
            continue
        if status and ("Provido" if l.provido else "Vago") != status:
            continue
        resultado.append(l)
    return resultado


def _nomes(organizacoes: Sequence[Organizacao]) -> dict[str, str]:
    return {o.sigla: o.secretaria for o in organizacoes}


def agrupar_vagos(
    linhas: Iterable[LinhaLotacao], organizacoes: Sequence[Organizacao]
) -> list[OrgaoVagosDTO]:
    """Vagos por orgao -> simbolo -> cargo; remuneracao e o maior valor_cc."""
    nomes = _nomes(organizacoes)
    grupos: dict[str, dict[str, dict[str, list[Decimal]]]] = {}
    for l in linhas:
        if l.provido:
            continue
        sigla = l.secretaria or SEM_ORGAO
        cargos = grupos.setdefault(sigla, {}).setdefault(l.simbolo.strip(), {})
        cargos.setdefault(l.cargo_efetivo.strip(), []).append(l.valor_cc)

    return [
        OrgaoVagosDTO(
            sigla=sigla,
            nome=nomes.get(sigla, ""),
            simbolos=[
                SimboloVagosDTO(
                    simbolo=simbolo,
                    cargos=[
                        CargoVagoDTO(cargo_efetivo=cargo, qtd_vago=len(valores), remuneracao=max(valores))
                        for cargo, valores in sorted(grupos[sigla][simbolo].items())
                    ],
                )
                for simbolo in sorted(grupos[sigla])
            ],
        )
        for sigla in sorted(grupos)
    ]


def agrupar_por_orgao_e_simbolo(
    linhas: Iterable[LinhaLotacao], organizacoes: Sequence[Organizacao]
) -> list[OrgaoQuantitativoDTO]:
    nomes = _nomes(organizacoes)
    grupos: dict[str, dict[str, SimboloQuantitativoDTO]] = {}
    for l in linhas:
        simbolo = l.simbolo.strip()
        if simbolo.lower() == SIMBOLO_IGNORADO:
            continue
        sigla = l.secretaria or SEM_ORGAO
        item = grupos.setdefault(sigla, {}).get(simbolo)
        if item is None:
            item = grupos[sigla][simbolo] = SimboloQuantitativoDTO(
                simbolo=simbolo,
                remuneracao=Decimal("0"),
                total=0,
                provido=0,
                vago=0,
                custo_providos=Decimal("0"),
            )
        item.total += 1
        if l.provido:
            item.provido += 1
            item.custo_providos += l.valor_cc
            item.remuneracao = max(item.remuneracao, l.valor_cc)
        else:
            item.vago += 1

    resultado = []
    for sigla in sorted(grupos):
        simbolos = [grupos[sigla][s] for s in sorted(grupos[sigla])]
        resultado.append(
            OrgaoQuantitativoDTO(
                sigla=sigla,
                nome=nomes.get(sigla, ""),
                total=sum(s.total for s in simbolos),
                provido=sum(s.provido for s in simbolos),
                vago=sum(s.vago for s in simbolos),
                custo_providos=sum((s.custo_providos for s in simbolos), Decimal("0")),
                simbolos=simbolos,
            )
        )
    return resultado


def agrupar_por_classificacao(
    linhas: Iterable[LinhaLotacao], organizacoes: Sequence[Organizacao]
) -> list[ClassificacaoGeralDTO]:
    """DIRETA x INDIRETA, depois simbolo. Orgao desconhecido conta como DIRETA."""
    classificacoes = {o.sigla: o.classificacao for o in organizacoes}
    baldes = {
        c: ClassificacaoGeralDTO(
            classificacao=c.value, total=0, provido=0, vago=0, custo=Decimal("0"), simbolos=[]
        )
        for c in Classificacao
    }
    simbolos: dict[Classificacao, dict[str, SimboloGeralDTO]] = {c: {} for c in Classificacao}
    secretarias: dict[tuple[Classificacao, str], set[str]] = {}

    for l in linhas:
        simbolo = l.simbolo.strip()
        if simbolo.lower() == SIMBOLO_IGNORADO:
            continue
        classe = classificacoes.get(l.secretaria, Classificacao.DIRETA)
        balde = baldes[classe]
        balde.total += 1
        item = simbolos[classe].get(simbolo)
        if item is None:
            item = simbolos[classe][simbolo] = SimboloGeralDTO(
                simbolo=simbolo,
                remuneracao=Decimal("0"),
                qtd_secretarias=0,
                provido=0,
                vago=0,
                custo_providos=Decimal("0"),
            )
        if l.provido:
            balde.provido += 1
            balde.custo += l.valor_cc
            item.provido += 1
            item.custo_providos += l.valor_cc
            item.remuneracao = max(item.remuneracao, l.valor_cc)
        else:
            balde.vago += 1
            item.vago += 1
        orgs = secretarias.setdefault((classe, simbolo), set())
        orgs.add(l.secretaria)
        item.qtd_secretarias = len(orgs)

    for classe, balde in baldes.items():
        balde.simbolos = [simbolos[classe][s] for s in sorted(simbolos[classe])]
    return [baldes[Classificacao.DIRETA], baldes[Classificacao.INDIRETA]]


def gerar_dados(
    tipo: TipoRelatorio, linhas: Iterable[LinhaLotacao], organizacoes: Sequence[Organizacao]
) -> list[OrgaoVagosDTO] | list[OrgaoQuantitativoDTO] | list[ClassificacaoGeralDTO]:
    if tipo is TipoRelatorio.CARGOS_VAGOS:
        return agrupar_vagos(linhas, organizacoes)
    if tipo is TipoRelatorio.QUANTITATIVO_SIMBOLOS:
        return agrupar_por_orgao_e_simbolo(linhas, organizacoes)
    return agrupar_por_classificacao(linhas, organizacoes)


class RelatorioService:
    """Imperative Shell: le os repos e chama as agregacoes puras acima."""

    def __init__(self, servidor_repo: ServidorRepository, organizacao_repo: OrganizacaoRepository) -> None:
        self._servidor_repo = servidor_repo
        self._organizacao_repo = organizacao_repo

    def organizacoes(self) -> list[Organizacao]:
        return self._organizacao_repo.listar()

    def gerar(
        self,
        tipo: TipoRelatorio,
        secretaria: str = "",
        cargo: str = "",
        simbolo: str = "",
        status: str = "",
    ) -> list[OrgaoVagosDTO] | list[OrgaoQuantitativoDTO] | list[ClassificacaoGeralDTO]:
        linhas = aplicar_filtros(self._servidor_repo.listar(), secretaria, cargo, simbolo, status)
        return gerar_dados(tipo, linhas, self._organizacao_repo.listar())
