# tests/integration/test_api_organizacoes.py
from fastapi.testclient import TestClient


def test_organizations_retorna_todas(client: TestClient) -> None:
    response = client.get("/api/organizations")
    assert response.status_code == 200
    data = response.json()
    assert [o["sigla"] for o in data] == ["CACIVIL", "SEFAZ", "DER", "SEMLOT"]
    assert data[0] == {
        "codigo": 1,
        "secretaria": "Casa Civil",
        "sigla": "CACIVIL",
        "classificacao": "DIRETA",
    }


def test_organization_growth_em_ordem(client: TestClient) -> None:
    response = client.get("/api/organization-growth")
    assert response.status_code == 200
    assert response.json() == [
        {"mes": "Jan", "total": 10},
        {"mes": "Fev", "total": 12},
        {"mes": "Mar", "total": 15},
    ]


def test_organization_growth_vazio(client: TestClient, test_db) -> None:
    test_db.execute("DELETE FROM organization_growth")
    response = client.get("/api/organization-growth")
    assert response.status_code == 200
    assert response.json() == []


def test_security_headers(client: TestClient) -> None:
    response = client.get("/api/organizations")
    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "DENY"
