# The module wires the tool registry to the Model Context Protocol over stdio.
# Author: Shibo Li
# Date: 2025-06-13
# Version: 1.0.2

import json
from typing import Any, Dict, List, Optional

import mcp.server.stdio
from mcp.server.lowlevel import Server
from mcp.types import TextContent, Tool

from cnpj_mcp.core.config import get_settings
from cnpj_mcp.core.tool_registry import ToolRegistry
from cnpj_mcp.models.common import Envelope, ErrorCode, ToolError
from cnpj_mcp.utils.logger import console


def render(envelope: Envelope) -> str:
    """Pretty-prints an envelope the way it is handed back to the MCP client."""
    return json.dumps(envelope, indent=2, ensure_ascii=False)


class CnpjServer:
    """
    Front end exposing the two MCP operations, tools/list and tools/call.
    Every call is independent; nothing is kept between invocations.
    """

    def __init__(self, registry: Optional[ToolRegistry] = None):
        settings = get_settings()
        self.registry = registry or ToolRegistry()
        self.server = Server(settings.SERVER_NAME, version=settings.VERSION)
        self.server.list_tools()(self.list_tools)
        self.server.call_tool()(self.call_tool)

    async def list_tools(self) -> List[Tool]:
        return self.registry.get_definitions()

    async def call_tool(self, name: str, arguments: Optional[Dict[str, Any]]) -> List[TextContent]:
        """Runs one invocation. Whatever happens, the outcome is returned as text, never raised."""
        try:
            envelope = await self.registry.execute(name, arguments or {})
        except Exception as e:
            console.exception(f"Unexpected failure while executing tool '{name}'")
            envelope = ToolError(error=f"internal error: {e}", code=ErrorCode.API_ERROR).to_envelope()
        return [TextContent(type="text", text=render(envelope))]

    async def run_stdio(self) -> None:
        try:
            async with mcp.server.stdio.stdio_server() as (read_stream, write_stream):
                await self.server.run(read_stream, write_stream, self.server.create_initialization_options())
        finally:
            await self.registry.aclose()


async def serve() -> None:
    """Starts the server on stdin/stdout and announces it on stderr."""
    settings = get_settings()
    cnpj_server = CnpjServer()
    console.announce(f"MCP CNPJ Intelligence v{settings.VERSION} started")
    console.announce(f"Base: ~27M Brazilian companies | {len(cnpj_server.registry.tools)} tools available")
    await cnpj_server.run_stdio()
