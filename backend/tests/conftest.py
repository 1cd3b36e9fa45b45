"""Shared fixtures: a scripted fake provider behind httpx.MockTransport."""

import json
from urllib.parse import parse_qs

import httpx
import pytest

from mailalias.config import ServiceConfig
from mailalias.provider import AliasClient
from mailalias.vault import MemoryCredentialStore, SessionKeyHolder

BASE_URL = "https://provider.test"


class FakeProvider:
    """Answers provider endpoints from a path -> (status, body) table."""

    def __init__(self):
        self.routes: dict[str, tuple[int, object]] = {
            "/domains": (200, ["Example.COM ", "mail.test"]),
            "/api/alias/list": (200, []),
            "/api/alias/create": (200, {}),
            "/api/alias/delete": (200, {"deleted": True}),
        }
        self.requests: list[httpx.Request] = []

    def respond(self, path: str, status: int, body: object) -> None:
        self.routes[path] = (status, body)

    def calls(self, path: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path == path]

    @staticmethod
    def form(request: httpx.Request) -> dict[str, str]:
        return {k: v[0] for k, v in parse_qs(request.content.decode()).items()}

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        status, body = self.routes.get(request.url.path, (404, {"error": "not found"}))
        if isinstance(body, str):
            return httpx.Response(status, text=body)
        return httpx.Response(status, content=json.dumps(body).encode())


@pytest.fixture
def provider():
    return FakeProvider()


@pytest.fixture
def dictionary(tmp_path):
    path = tmp_path / "dictionary.json"
    path.write_text(json.dumps(["Amber", "birch", "Cedar-Tree"]), encoding="utf-8")
    return path


@pytest.fixture
def config(tmp_path, dictionary):
    return ServiceConfig(
        base_url=BASE_URL,
        dictionary_path=str(dictionary),
        store_path=str(tmp_path / "storage.json"),
    )


@pytest.fixture
def client(config, provider):
    return AliasClient(config, http_client=httpx.AsyncClient(transport=httpx.MockTransport(provider)))


@pytest.fixture
def store():
    return MemoryCredentialStore()


@pytest.fixture
def session():
    return SessionKeyHolder()
