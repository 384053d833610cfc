"""Shared fixtures: sample metadata documents and a ClojarsClient backed by httpx.MockTransport."""

from typing import Callable

import httpx
import pytest

from core.clojars import ClojarsClient
from core.config import Settings

REITIT_METADATA = """<?xml version="1.0" encoding="UTF-8"?>
<metadata>
  <groupId>metosin</groupId>
  <artifactId>reitit</artifactId>
  <versioning>
    <release>0.7.2</release>
    <latest>0.8.0-alpha1</latest>
    <versions>
      <version>0.7.0</version>
      <version>0.7.1</version>
      <version>0.7.2</version>
      <version>0.8.0-alpha1</version>
    </versions>
    <lastUpdated>20240901120000</lastUpdated>
  </versioning>
</metadata>
"""


@pytest.fixture
def reitit_metadata() -> str:
    return REITIT_METADATA


@pytest.fixture
def make_client() -> Callable[..., ClojarsClient]:
    """Build a ClojarsClient whose HTTP traffic goes to a handler function.

    The handler receives the httpx.Request and returns an httpx.Response
    (or raises an httpx exception).  Every request is recorded on the
    returned client as `client.requests`.
    """

    def factory(handler, settings: Settings | None = None) -> ClojarsClient:
        requests: list[httpx.Request] = []

        def recording_handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return handler(request)

        client = ClojarsClient(settings=settings, transport=httpx.MockTransport(recording_handler))
        client.requests = requests
        return client

    return factory


@pytest.fixture
def serve_text() -> Callable[..., Callable[[httpx.Request], httpx.Response]]:
    """Handler that answers every request with the given status and body."""

    def factory(body: str = "", status_code: int = 200):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(status_code, text=body)

        return handler

    return factory
