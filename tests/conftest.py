"""Shared fixtures: a fake programs API and Alexa event builders."""

import json

import httpx
import pytest

from zonaei.api_client import ProgramsClient
from zonaei.router import build_skill_builder

API_BASE = "https://api.test/api"


class FakeApi:
    """Answers programs API lookups from a table keyed by (path, query value)."""

    def __init__(self):
        self.records = {}
        self.failing = False
        self.requests = []

    def add(self, path, value, payload):
        self.records[(f"/api{path}", value)] = payload

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.failing:
            return httpx.Response(500, json={"error": "boom"})
        value = next(iter(request.url.params.values()), None)
        payload = self.records.get((request.url.path, value))
        return httpx.Response(200, content=json.dumps(payload).encode())


def _make_slot(name, value=None, resolved=None):
    slot = {"name": name, "confirmationStatus": "NONE"}
    if value is not None:
        slot["value"] = value
    if resolved is not None:
        slot["resolutions"] = {
            "resolutionsPerAuthority": [
                {
                    "authority": f"amzn1.er-authority.echo-sdk.test.{name}",
                    "status": {"code": "ER_SUCCESS_MATCH"},
                    "values": [{"value": {"name": resolved, "id": "1"}}],
                }
            ]
        }
    return slot


def _make_event(request_type="IntentRequest", intent=None, slots=None, attributes=None):
    request = {
        "type": request_type,
        "requestId": "amzn1.echo-api.request.test",
        "timestamp": "2026-10-19T12:00:00Z",
        "locale": "es-MX",
    }
    if request_type == "IntentRequest":
        request["intent"] = {
            "name": intent,
            "confirmationStatus": "NONE",
            "slots": {slot["name"]: slot for slot in (slots or [])},
        }
    if request_type == "SessionEndedRequest":
        request["reason"] = "USER_INITIATED"
    return {
        "version": "1.0",
        "session": {
            "new": attributes is None,
            "sessionId": "amzn1.echo-api.session.test",
            "application": {"applicationId": "amzn1.ask.skill.test"},
            "attributes": dict(attributes or {}),
            "user": {"userId": "amzn1.ask.account.test"},
        },
        "context": {
            "System": {
                "application": {"applicationId": "amzn1.ask.skill.test"},
                "user": {"userId": "amzn1.ask.account.test"},
                "apiEndpoint": "https://api.amazonalexa.com",
            }
        },
        "request": request,
    }


def _speech_of(result):
    ssml = result["response"]["outputSpeech"]["ssml"]
    return ssml.replace("<speak>", "").replace("</speak>", "")


@pytest.fixture
def fake_api():
    return FakeApi()


@pytest.fixture
def programs_client(fake_api):
    client = ProgramsClient(base_url=API_BASE, transport=httpx.MockTransport(fake_api))
    yield client
    client.close()


@pytest.fixture
def invoke(programs_client):
    """Run an event through the Lambda entry point backed by the fake API."""
    return lambda event: build_skill_builder(programs_client).lambda_handler()(event, None)


@pytest.fixture
def make_event():
    return _make_event


@pytest.fixture
def make_slot():
    return _make_slot


@pytest.fixture
def speech_of():
    return _speech_of
