# This module wraps the HTTP access to the public CNPJ registry API and normalizes its outcomes.
# Author: Shibo Li
# Date: 2025-06-13
# Version: 1.0.2

import httpx
from typing import Any, Dict, Mapping, Optional

from cnpj_mcp.core.config import get_settings
from cnpj_mcp.models.common import Envelope, ErrorCode, OutboundRequest, ToolError
from cnpj_mcp.utils.logger import console

GENERIC_API_ERROR = "API error"


def stringify(value: Any) -> str:
    """Renders a query value the way the registry API expects it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return ",".join(stringify(item) for item in value)
    return str(value)


def build_query(params: Optional[Mapping[str, Any]]) -> Dict[str, str]:
    """
    Flattens a mapping into query parameters. Keys whose value is None are
    dropped entirely, never sent as an empty or "null" string.
    """
    if not params:
        return {}
    return {key: stringify(value) for key, value in params.items() if value is not None}


def connection_error(exc: Exception) -> Dict[str, Any]:
    details = str(exc) or exc.__class__.__name__
    return ToolError(error=f"connection error: {details}", code=ErrorCode.CONNECTION_ERROR).to_envelope()


def normalize_response(response: httpx.Response) -> Envelope:
    """
    Maps an HTTP response to a result envelope:
    2xx -> decoded body, 404 -> NOT_FOUND, 429 -> RATE_LIMIT,
    anything else -> API_ERROR carrying the upstream message and status.
    """
    if response.is_success:
        try:
            return response.json()
        except ValueError:
            return ToolError(error="invalid JSON in upstream response", code=ErrorCode.API_ERROR,
                             status=response.status_code).to_envelope()

    if response.status_code == 404:
        return ToolError(error="not found", code=ErrorCode.NOT_FOUND).to_envelope()
    if response.status_code == 429:
        return ToolError(error="rate limit exceeded, wait and retry", code=ErrorCode.RATE_LIMIT).to_envelope()

    return ToolError(error=_error_message(response), code=ErrorCode.API_ERROR,
                     status=response.status_code).to_envelope()


def _error_message(response: httpx.Response) -> str:
    # A body that is not a JSON object with a message falls back to the generic text.
    try:
        body = response.json()
    except ValueError:
        return GENERIC_API_ERROR
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return GENERIC_API_ERROR


class RegistryClient:
    """
    Issues single-attempt requests against the registry API.

    One httpx.AsyncClient is kept per instance so consecutive tool calls reuse
    its connection pool. Timeouts are httpx defaults.
    """

    def __init__(self, base_url: Optional[str] = None, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = (base_url or get_settings().API_BASE_URL).rstrip("/")
        self._client = httpx.AsyncClient(base_url=self.base_url, transport=transport)

    async def send(self, request: OutboundRequest) -> Envelope:
        """Performs the request and returns its normalized envelope. Never raises for HTTP or network failures."""
        console.debug(f"{request.method} {self.base_url}{request.path} params={request.params}")
        try:
            if request.method == "POST":
                response = await self._client.post(request.path, params=request.params or None, json=request.body)
            else:
                response = await self._client.get(request.path, params=request.params or None)
        except httpx.RequestError as e:
            console.error(f"Connection to the registry API failed: {e!r}")
            return connection_error(e)

        result = normalize_response(response)
        if response.is_error:
            console.warning(f"Registry API answered {response.status_code} for {request.path}")
        return result

    async def aclose(self) -> None:
        await self._client.aclose()
