import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from flowlang.config import FlowConfig
from flowlang.server import create_app


@pytest.fixture
def client(transport):
    app = create_app(FlowConfig(), http_client=transport)
    return TestClient(app)


def test_server_imports_and_app_creation():
    app = create_app(FlowConfig())
    assert isinstance(app, FastAPI)
    assert app.state.config.language == "en-US"


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_evaluate(client):
    response = client.post("/api/flow/evaluate", json={"code": "1 + 1"})
    assert response.status_code == 200
    assert response.json() == {"type": "integer", "value": 2, "representation": "2", "isError": False}


def test_evaluate_error(client):
    response = client.post("/api/flow/evaluate", json={"code": "1 / 0"})
    body = response.json()
    assert response.status_code == 200
    assert body["isError"] is True
    assert body["type"] == "error"
    assert body["value"]["type"] == "ZeroDivisionError"


def test_evaluate_in_pt_br(client):
    response = client.post("/api/flow/evaluate", json={"code": "1,5 + 1", "language": "pt-BR"})
    assert response.json()["representation"] == "2,5"


def test_evaluate_uses_the_http_client(client, transport):
    response = client.post("/api/flow/evaluate", json={"code": "HTTP.get('https://example.com').status_code"})
    assert response.json()["value"] == 200
    assert transport.calls[0]["url"] == "https://example.com"


def test_evaluate_validates_payload(client):
    response = client.post("/api/flow/evaluate", json={})
    assert response.status_code == 422


def test_documentation(client):
    body = client.get("/api/flow/documentation", params={"language": "pt-BR"}).json()
    assert body["language"] == "pt-BR"
    assert [module["name"] for module in body["modules"]] == ["HTTP"]
    parameters = body["modules"][0]["methods"]["get"]["parameters"]
    assert parameters[0]["name"] == "endereço"


def test_autocomplete(client):
    response = client.post("/api/flow/autocomplete", json={"source": "HT"})
    body = response.json()
    assert [option["label"] for option in body["options"]] == ["HTTP"]
    assert body["options"][0]["autocompleteText"] == "TP"
    assert body["cursor"]["name"] == "HT"


def test_autocomplete_with_formula_fields(client):
    payload = {"source": "{{Pr", "fields": [{"uuid": "1", "label": "Price"}, {"uuid": "2", "label": "Quantity"}]}
    body = client.post("/api/flow/autocomplete", json=payload).json()
    assert [option["label"] for option in body["options"]] == ["{{Price}}"]
    assert body["options"][0]["toSubstitute"] == {"from": 0, "to": 4}


def test_formula_binds_and_evaluates(client):
    payload = {
        "formula": "{{Price}} * {{Quantity}}",
        "fields": [{"uuid": "f1", "label": "Price"}, {"uuid": "f2", "label": "Quantity"}],
        "values": {"f1": 2, "f2": 3},
    }
    body = client.post("/api/flow/formula", json=payload).json()
    assert body["formula"] == "{{}} * {{}}"
    assert body["userFacingFormula"] == "{{Price}} * {{Quantity}}"
    assert [variable["variableUUID"] for variable in body["variables"]] == ["f1", "f2"]
    assert body["unresolved"] == []
    assert body["result"]["value"] == 6


def test_formula_reports_unresolved_labels(client):
    payload = {"formula": "{{Tax}} + 1", "fields": [], "evaluate": False}
    body = client.post("/api/flow/formula", json=payload).json()
    assert body["unresolved"] == [{"order": 0, "label": "Tax", "reason": "missing"}]
    assert body["result"] is None


def test_cors_headers(client):
    response = client.get("/health", headers={"Origin": "https://editor.example.com"})
    assert response.headers["access-control-allow-origin"] == "*"
