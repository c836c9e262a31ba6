# tests/integration/test_api_exportacao.py
import json

from fastapi.testclient import TestClient


def test_export_json(client: TestClient) -> None:
    response = client.get("/api/employees/export?secretaria=CACIVIL&formato=json")
    assert response.status_code == 200
    assert response.headers["content-type"] == "application/json"
    data = json.loads(response.text)
    assert [e["id"] for e in data] == [1, 2]


def test_export_csv(client: TestClient) -> None:
    response = client.get("/api/employees/export?secretaria=CACIVIL&formato=csv")
    assert response.status_code == 200
    assert "text/csv" in response.headers["content-type"]
    linhas = response.text.splitlines()
    assert linhas[0] == "# SERVIDORES - CACIVIL"
    assert "Valor C.C." in linhas[1]
    assert linhas[2].startswith("1,Chefe de Gabinete,CC-2,MARIA SILVA,Provido")
    assert "05/03/2024" in linhas[2]
    assert '"R$ 13.000,00"' in linhas[2]
    assert linhas[3].startswith("2,Assessor Especial,CC-1,Vago,Vago")
    assert linhas[3].endswith(",-")


def test_export_pdf_200_ou_501(client: TestClient) -> None:
    """501 quando weasyprint nao esta instalado."""
    response = client.get("/api/employees/export?secretaria=CACIVIL&formato=pdf")
    assert response.status_code in (200, 501)
    if response.status_code == 200:
        assert response.headers["content-type"] == "application/pdf"


def test_export_secretaria_sem_linhas_retorna_404(client: TestClient) -> None:
    response = client.get("/api/employees/export?secretaria=SEMLOT&formato=json")
    assert response.status_code == 404


def test_export_formato_invalido_retorna_422(client: TestClient) -> None:
    response = client.get("/api/employees/export?secretaria=CACIVIL&formato=xml")
    assert response.status_code == 422
