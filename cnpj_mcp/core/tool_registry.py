# Discovers the tool catalog, keeps it in lockstep with the dispatch table and executes invocations.
# Version 1.0.2

import pkgutil
import importlib
import inspect
from typing import Any, Dict, List, Mapping, Optional
from mcp.types import Tool
from cnpj_mcp import tools as tools_package
from cnpj_mcp.core.dispatch import DISPATCH_TABLE, MissingArgumentError, Route
from cnpj_mcp.models.common import Envelope, ErrorCode, ToolError
from cnpj_mcp.services.registry_client import RegistryClient
from cnpj_mcp.tools.base_tool import BaseTool
from cnpj_mcp.utils.logger import console


def discover_tools() -> List[BaseTool]:
    """
    Scans the cnpj_mcp.tools package, imports all modules and instantiates every
    BaseTool subclass they define, in module order then definition order.
    """
    found: List[BaseTool] = []
    for _, modname, _ in sorted(pkgutil.iter_modules(tools_package.__path__, f"{tools_package.__name__}."),
                                key=lambda info: info.name):
        if modname == f"{tools_package.__name__}.base_tool":
            continue
        module = importlib.import_module(modname)
        for obj in vars(module).values():
            if (inspect.isclass(obj) and issubclass(obj, BaseTool) and obj is not BaseTool
                    and obj.__module__ == module.__name__):
                found.append(obj())
    return found


def check_lockstep(tool_names: List[str], table: Mapping[str, Route]) -> None:
    """Raises ValueError unless every tool has exactly one route and every route a tool."""
    duplicates = sorted({name for name in tool_names if tool_names.count(name) > 1})
    missing = sorted(set(tool_names) - set(table))
    orphans = sorted(set(table) - set(tool_names))
    if duplicates or missing or orphans:
        raise ValueError(
            f"Tool catalog and dispatch table are out of sync: duplicated={duplicates}, "
            f"without route={missing}, route without tool={orphans}"
        )


class ToolRegistry:
    """
    A class to discover, register and execute the catalog's tools.
    """
    def __init__(self, client: Optional[RegistryClient] = None, table: Optional[Mapping[str, Route]] = None):
        self.routes: Mapping[str, Route] = DISPATCH_TABLE if table is None else table
        self.tools: Dict[str, BaseTool] = {}
        discovered = discover_tools()
        check_lockstep([tool.name for tool in discovered], self.routes)
        for tool in discovered:
            self.tools[tool.name] = tool
        self.client = client or RegistryClient()
        console.debug(f"Tool discovery complete. Found {len(self.tools)} tools: {list(self.tools.keys())}")

    def get_definitions(self) -> List[Tool]:
        """Returns the catalog as MCP tool definitions."""
        return [tool.get_definition() for tool in self.tools.values()]

    async def execute(self, tool_name: str, arguments: Optional[Mapping[str, Any]] = None) -> Envelope:
        """
        Executes a tool by its name and returns its result envelope.
        Failures are returned as ToolError envelopes, never raised.
        """
        arguments = dict(arguments or {})
        route = self.routes.get(tool_name)
        if route is None:
            console.error(f"Attempted to execute unknown tool: {tool_name}")
            return ToolError(error=f"unknown tool: {tool_name}", code=ErrorCode.UNKNOWN_TOOL).to_envelope()

        console.info(f"Executing tool '{tool_name}' with arguments: {arguments}")
        try:
            request = route.bind(arguments)
        except MissingArgumentError as e:
            console.error(f"Tool '{tool_name}' rejected: {e}")
            return ToolError(error=str(e), code=ErrorCode.INVALID_ARGUMENTS).to_envelope()

        result = await self.client.send(request)
        if isinstance(result, dict) and "code" in result and "error" in result:
            console.warning(f"Tool '{tool_name}' finished with {result['code']}: {result['error']}")
        else:
            console.success(f"Tool '{tool_name}' executed successfully.")
        return result

    async def aclose(self) -> None:
        await self.client.aclose()
