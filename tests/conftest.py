"""
Shared fixtures for translator tests.
"""
import json
from typing import Callable, Dict, List

import httpx
import pytest


class RecordingHandler:
    """MockTransport handler that answers per host and records calls."""

    def __init__(self, responses: Dict[str, Callable[[httpx.Request], httpx.Response]]):
        self.responses = responses
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        responder = self.responses.get(request.url.host)
        if responder is None:
            return httpx.Response(503, json={"error": "unavailable"})
        return responder(request)

    @property
    def hosts(self) -> List[str]:
        return [request.url.host for request in self.requests]


def json_response(body, status: int = 200) -> Callable[[httpx.Request], httpx.Response]:
    """Responder returning a fixed JSON body."""
    return lambda request: httpx.Response(status, json=body)


def raw_response(content: str, status: int = 200) -> Callable[[httpx.Request], httpx.Response]:
    """Responder returning a fixed raw body."""
    return lambda request: httpx.Response(status, content=content.encode("utf-8"))


def failing_response(exc: Exception) -> Callable[[httpx.Request], httpx.Response]:
    """Responder raising a transport error."""
    def respond(request: httpx.Request) -> httpx.Response:
        raise exc
    return respond


@pytest.fixture
def make_client():
    """Build an AsyncClient backed by a RecordingHandler."""
    def build(responses):
        handler = RecordingHandler(responses)
        return httpx.AsyncClient(transport=httpx.MockTransport(handler)), handler
    return build


MYMEMORY_HOST = "api.mymemory.translated.net"
LIBRE_HOST = "libretranslate.de"
LIBRE_ALT_HOST = "translate.argosopentech.com"


def mymemory_ok(text: str):
    """MyMemory success body."""
    return json_response({"responseStatus": 200, "responseData": {"translatedText": text}})


def decode_json(request: httpx.Request):
    return json.loads(request.content.decode("utf-8"))
