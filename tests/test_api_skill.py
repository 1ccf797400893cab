"""Integration tests for the FastAPI skill endpoint."""

import pytest
from fastapi.testclient import TestClient

from zonaei import config, speech
from zonaei.api_skill import create_app
from zonaei.state import APP_STATE, AppState


@pytest.fixture
def client(programs_client):
    with TestClient(create_app(programs_client)) as test_client:
        yield test_client


def test_skill_endpoint_returns_response_envelope(client, make_event, speech_of):
    response = client.post("/skill", json=make_event("LaunchRequest"))
    assert response.status_code == 200
    data = response.json()
    assert speech_of(data) == speech.WELCOME
    assert data["sessionAttributes"][APP_STATE] == AppState.START


def test_skill_endpoint_uses_programs_api(fake_api, client, make_event, make_slot, speech_of):
    fake_api.add("/project/name", "Alfa", {"name": "Alfa", "description": "la movilidad"})
    event = make_event(
        intent="proyectoInfo",
        slots=[make_slot("proyecto", value="alfa", resolved="Alfa")],
        attributes={APP_STATE: AppState.PROJECT_START},
    )
    response = client.post("/skill", json=event)
    assert speech_of(response.json()) == speech.project_description("Alfa", "la movilidad")


def test_missing_request_type(client):
    response = client.post("/skill", json={"version": "1.0"})
    assert response.status_code == 400
    assert response.json()["detail"] == "Missing request type"


def test_non_object_body_is_rejected(client):
    response = client.post("/skill", json=[1, 2])
    assert response.status_code == 400
    assert response.json()["detail"] == "Body must be a JSON object"


def test_non_json_body_is_rejected(client):
    response = client.post(
        "/skill", content=b"not json", headers={"content-type": "application/json"}
    )
    assert response.status_code == 400
    assert response.json()["detail"] == "Body is not JSON"


def test_other_skill_id_is_rejected(monkeypatch, programs_client, make_event):
    monkeypatch.setattr(config, "SKILL_ID", "amzn1.ask.skill.other")
    with TestClient(create_app(programs_client)) as client:
        response = client.post("/skill", json=make_event("LaunchRequest"))
    assert response.status_code == 400


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
