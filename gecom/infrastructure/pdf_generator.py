# gecom/infrastructure/pdf_generator.py
from __future__ import annotations

from collections.abc import Sequence
from html import escape
from typing import TYPE_CHECKING

from gecom.application.formatacao import formatar_moeda
from gecom.application.services.export_service import CABECALHO_TABELA, linhas_tabela
from gecom.application.services.relatorio_service import TipoRelatorio

if TYPE_CHECKING:
    from gecom.application.dtos.relatorio_dto import (
        ClassificacaoGeralDTO,
        OrgaoQuantitativoDTO,
        OrgaoVagosDTO,
    )
    from gecom.application.services.export_service import LinhaTabela

TITULOS_RELATORIO = {
    TipoRelatorio.CARGOS_VAGOS: "RELAÇÃO DE CARGOS VAGOS POR ÓRGÃO",
    TipoRelatorio.QUANTITATIVO_SIMBOLOS: "QUANTITATIVO DE CARGOS POR ÓRGÃO/ESTRUTURA PROVIDOS/VAGOS",
    TipoRelatorio.QUANTITATIVO_GERAL: "QUANTITATIVO GERAL DE SÍMBOLOS",
}


def _html_para_pdf(html: str) -> bytes:
    """Raises RuntimeError if weasyprint is not installed."""
    try:
        from weasyprint import HTML  # type: ignore[import-untyped,import-not-found]
    except ImportError as err:
        msg = "PDF export requires weasyprint. Install with: pip install gecom[pdf]"
        raise RuntimeError(msg) from err
    return HTML(string=html).write_pdf()  # type: ignore[no-any-return]


def gerar_pdf_servidores(sigla: str, nome_orgao: str, linhas: Sequence[LinhaTabela]) -> bytes:
    """Tabela de servidores do orgao, na ordem recebida, em A4 paisagem."""
    return _html_para_pdf(build_html_servidores(sigla, nome_orgao, linhas))


def gerar_pdf_relatorio(
    tipo: TipoRelatorio,
    dados: Sequence[OrgaoVagosDTO] | Sequence[OrgaoQuantitativoDTO] | Sequence[ClassificacaoGeralDTO],
) -> bytes:
    return _html_para_pdf(build_html_relatorio(tipo, dados))


def _tabela(cabecalho: Sequence[str], linhas: Sequence[Sequence[object]]) -> str:
    head = "".join(f"<th>{escape(c)}</th>" for c in cabecalho)
    body = "".join(
        "<tr>" + "".join(f"<td>{escape(str(c))}</td>" for c in linha) + "</tr>" for linha in linhas
    )
    return f"<table><tr>{head}</tr>{body}</table>"


def build_html_servidores(sigla: str, nome_orgao: str, linhas: Sequence[LinhaTabela]) -> str:
    titulo = f"Relatório de Servidores - {nome_orgao or sigla}"
    corpo = f"""
    <h1>{escape(titulo)}</h1>
    <p class="subtitulo">{escape(sigla)}</p>
    {_tabela(CABECALHO_TABELA, linhas_tabela(linhas))}
    """
    return _documento(titulo, corpo, paisagem=True)


def build_html_relatorio(
    tipo: TipoRelatorio,
    dados: Sequence[OrgaoVagosDTO] | Sequence[OrgaoQuantitativoDTO] | Sequence[ClassificacaoGeralDTO],
) -> str:
    titulo = TITULOS_RELATORIO[tipo]
    secoes: list[str] = []

    # Uma pagina por orgao (ou por classificacao no quantitativo geral)
    for grupo in dados:
        partes = [f"<h1>{escape(titulo)}</h1>"]
        if tipo is TipoRelatorio.CARGOS_VAGOS:
            partes.append(f"<p class=\"orgao\">ÓRGÃO: {escape(grupo.nome)} ({escape(grupo.sigla)})</p>")  # type: ignore[union-attr]
            for simbolo in grupo.simbolos:  # type: ignore[union-attr]
                partes.append(f"<h2>Símbolo: {escape(simbolo.simbolo)}</h2>")
                partes.append(_tabela(
                    ["Cargo Efetivo", "Qtd. Vago", "Remuneração"],
                    [[c.cargo_efetivo, c.qtd_vago, formatar_moeda(c.remuneracao)] for c in simbolo.cargos],
                ))
        elif tipo is TipoRelatorio.QUANTITATIVO_SIMBOLOS:
            partes.append(f"<p class=\"orgao\">ÓRGÃO: {escape(grupo.nome)} ({escape(grupo.sigla)})</p>")  # type: ignore[union-attr]
            partes.append(
                f"<p class=\"totais\">TOTAL: {grupo.total} &nbsp; PROVIDO: {grupo.provido} &nbsp; "  # type: ignore[union-attr]
                f"VAGO: {grupo.vago} &nbsp; CUSTO PROVIDOS: {formatar_moeda(grupo.custo_providos)}</p>"  # type: ignore[union-attr]
            )
            partes.append(_tabela(
                ["SÍMBOLO", "REMUNERAÇÃO", "TOTAL", "PROVIDO", "VAGO", "CUSTO PROVIDOS"],
                [
                    [s.simbolo, formatar_moeda(s.remuneracao), s.total, s.provido, s.vago,
                     formatar_moeda(s.custo_providos)]
                    for s in grupo.simbolos  # type: ignore[union-attr]
                ],
            ))
        else:
            partes.append(f"<h2>{escape(grupo.classificacao)}</h2>")  # type: ignore[union-attr]
            partes.append(_tabela(
                ["Símbolo", "Remuneração", "Qt. Secretarias", "Providos", "Vago", "Custo p/ Provido"],
                [
                    [s.simbolo, formatar_moeda(s.remuneracao), s.qtd_secretarias, s.provido, s.vago,
                     formatar_moeda(s.custo_providos)]
                    for s in grupo.simbolos  # type: ignore[union-attr]
                ],
            ))
            partes.append(
                f"<p class=\"totais\">TOTAL: {grupo.total} &nbsp; PROVIDOS: {grupo.provido} &nbsp; "  # type: ignore[union-attr]
                f"VAGOS: {grupo.vago} &nbsp; CUSTO: {formatar_moeda(grupo.custo)}</p>"  # type: ignore[union-attr]
            )
        secoes.append(f"<section>{''.join(partes)}</section>")

    if not secoes:
        secoes.append(f"<section><h1>{escape(titulo)}</h1><p>Nenhum registro para os filtros.</p></section>")
    return _documento(titulo, "\n".join(secoes), paisagem=False)


def _documento(titulo: str, corpo: str, *, paisagem: bool) -> str:
    orientacao = "A4 landscape" if paisagem else "A4"
    return f"""<!DOCTYPE html>
<html lang="pt-BR">
<head>
<meta charset="utf-8">
<title>{escape(titulo)}</title>
<style>
    @page {{ size: {orientacao}; margin: 40px; }}
    body {{ font-family: Helvetica, Arial, sans-serif; font-size: 10px; color: #333; }}
    h1 {{ font-size: 14px; text-align: center; }}
    h2 {{ font-size: 12px; margin-top: 16px; }}
    section + section {{ page-break-before: always; }}
    table {{ width: 100%; border-collapse: collapse; margin-top: 8px; }}
    th, td {{ border: 1px solid #ddd; padding: 4px 6px; text-align: left; vertical-align: middle; }}
    th {{ background-color: #2980b9; color: #fff; font-weight: bold; }}
    .subtitulo, .orgao {{ font-size: 12px; }}
    .totais {{ font-weight: bold; font-size: 11px; }}
</style>
</head>
<body>
{corpo}
</body>
</html>"""
