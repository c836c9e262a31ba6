# gecom/application/services/export_service.py
from __future__ import annotations

import csv
import io
import json
from collections.abc import Sequence
from datetime import date
from typing import Protocol

from ..dtos.servidor_dto import ServidorDTO
from ..formatacao import formatar_data_br, formatar_moeda
from .relatorio_service import LinhaLotacao

CABECALHO_TABELA = [
    "#", "Cargo", "Símbolo", "Servidor", "Status", "Redistribuição", "Publicação", "Valor C.C.",
]


class LinhaTabela(LinhaLotacao, Protocol):
    @property
    def nome_servidor(self) -> str: ...
    @property
    def redistribuicao(self) -> str | None: ...
    @property
    def data_publicacao(self) -> date | str | None: ...


def linhas_tabela(linhas: Sequence[LinhaTabela]) -> list[list[str]]:
    """Linhas ja ordenadas -> celulas da tabela exportada (numeradas a partir de 1)."""
    return [
        [
            str(indice),
            l.cargo_efetivo,
            l.simbolo,
            l.nome_servidor if l.provido else "Vago",
            "Provido" if l.provido else "Vago",
            l.redistribuicao or "",
            formatar_data_br(l.data_publicacao),
            formatar_moeda(l.valor_cc) if l.provido else "-",
        ]
        for indice, l in enumerate(linhas, start=1)
    ]


class ExportService:
    def exportar_json(self, servidores: Sequence[ServidorDTO]) -> str:
        return json.dumps([s.model_dump() for s in servidores], ensure_ascii=False, indent=2)

    def exportar_csv(self, sigla: str, linhas: Sequence[LinhaTabela]) -> str:
        output = io.StringIO()
        output.write(f"# SERVIDORES - {sigla}\n")
        writer = csv.writer(output)
        writer.writerow(CABECALHO_TABELA)
        writer.writerows(linhas_tabela(linhas))
        return output.getvalue()
