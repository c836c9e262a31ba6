# tests/application/test_export_service.py
import csv
import io
import json

from gecom.application.dtos.servidor_dto import ServidorDTO
from gecom.application.services.export_service import CABECALHO_TABELA, ExportService, linhas_tabela


def test_linhas_tabela_numera_e_formata(linhas):
    tabela = linhas_tabela(linhas[:2])
    assert tabela[0] == [
        "1", "Chefe de Gabinete", "CC-2", "MARIA SILVA", "Provido", "", "05/03/2024", "R$ 13.000,00",
    ]
    assert tabela[1][0] == "2"
    assert tabela[1][3:] == ["Vago", "Vago", "", "-", "-"]


def test_exportar_csv(linhas):
    texto = ExportService().exportar_csv("CACIVIL", linhas[:2])
    primeira, resto = texto.split("\n", 1)
    assert primeira == "# SERVIDORES - CACIVIL"
    rows = list(csv.reader(io.StringIO(resto)))
    assert rows[0] == CABECALHO_TABELA
    assert len(rows) == 3


def test_exportar_json_preserva_acentos():
    dto = ServidorDTO(
        id=1,
        servidor="JOÃO",
        cargo_efetivo="Diretor",
        simbolo="DAS-3",
        data_nomeacao=None,
        salario="8000.00",
        redistribuicao=None,
        status="Provido",
        secretaria="SEFAZ",
        ordem=1,
    )
    texto = ExportService().exportar_json([dto])
    assert "JOÃO" in texto
    assert json.loads(texto)[0]["salario"] == "8000.00"
