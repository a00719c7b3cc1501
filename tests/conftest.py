"""
Shared fixtures: a registry whose HTTP client talks to an in-process fake of
the CNPJ API instead of the network.
"""

from typing import Callable, List

import httpx
import pytest

from cnpj_mcp.core.tool_registry import ToolRegistry
from cnpj_mcp.server import CnpjServer
from cnpj_mcp.services.registry_client import RegistryClient

BASE_URL = "https://api.test"


class FakeUpstream:
    """Records every request and answers with a configurable handler."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.handler: Callable[[httpx.Request], httpx.Response] = lambda request: httpx.Response(200, json={})

    def reply(self, status_code: int = 200, **kwargs) -> None:
        self.handler = lambda request: httpx.Response(status_code, **kwargs)

    def fail(self, exc_factory: Callable[[httpx.Request], Exception]) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise exc_factory(request)
        self.handler = handler

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture
async def client(upstream):
    registry_client = RegistryClient(base_url=BASE_URL, transport=httpx.MockTransport(upstream))
    yield registry_client
    await registry_client.aclose()


@pytest.fixture
def registry(client) -> ToolRegistry:
    return ToolRegistry(client=client)


@pytest.fixture
def cnpj_server(registry) -> CnpjServer:
    return CnpjServer(registry=registry)
