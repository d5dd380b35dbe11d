import json

import pytest

from flowlang.config import FlowConfig
from flowlang.context import FlowContext
from flowlang.service import FlowService


class FakeTransport:
    """Records requests and answers every one of them with a canned response."""

    def __init__(self, status=200, payload=None, headers=None, error=None):
        self.status = status
        self.payload = {"ok": True} if payload is None else payload
        self.headers = headers or {"Content-Type": "application/json"}
        self.error = error
        self.calls = []

    def __call__(self, method, url, headers, body, timeout=None):
        self.calls.append({"method": method, "url": url, "headers": dict(headers), "body": body, "timeout": timeout})
        if self.error is not None:
            raise self.error
        text = self.payload if isinstance(self.payload, str) else json.dumps(self.payload)
        return self.status, dict(self.headers), text


@pytest.fixture(autouse=True)
def _clean_flow_env(monkeypatch):
    """Keep developer FLOW_* variables out of the tests."""
    for name in (
        "FLOW_LANGUAGE",
        "FLOW_HTTP_TIMEOUT",
        "FLOW_MAX_CALL_STACK",
        "FLOW_HTTP_CACHE",
        "FLOW_HTTP_CACHE_TTL",
        "FLOW_LOG_LEVEL",
        "FLOW_CORS_ORIGINS",
    ):
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def service(transport):
    return FlowService.create("en-US", FlowConfig(), http_client=transport)


@pytest.fixture
def pt_service(transport):
    return FlowService.create("pt-BR", FlowConfig(language="pt-BR"), http_client=transport)


@pytest.fixture
def en_context():
    return FlowContext.for_language("en-US")


@pytest.fixture
def pt_context():
    return FlowContext.for_language("pt-BR")


@pytest.fixture
def run(service):
    """Evaluate code and return the host value of the result."""

    def _run(code):
        return service.evaluate_sync(code).value

    return _run


@pytest.fixture
def make_transport():
    return FakeTransport
