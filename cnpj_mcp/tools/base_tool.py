# The module is to define the base class for all tools in the catalog.
# Author: Shibo Li
# Date: 2025-06-11
# Version: 1.0.2

from abc import ABC
from pydantic import BaseModel
from typing import Dict, Any, Type
from mcp.types import Tool


class BaseTool(ABC):
    """
    Abstract Base Class for all tools.

    A tool is pure description: how it is called is decided by its entry in
    the dispatch table (cnpj_mcp.core.dispatch), keyed by the same name.
    Attributes:
        name (str): The name of the tool, used for identification and dispatch.
        description (str): Usage guide shown to the model: when to use it and what it returns.
        args_schema (Type[BaseModel]): A Pydantic model describing the arguments
            that the tool accepts; it is published as the MCP input schema.
    """
    name: str
    description: str
    args_schema: Type[BaseModel]

    def input_schema(self) -> Dict[str, Any]:
        schema = self.args_schema.model_json_schema()
        schema.pop("title", None)
        schema.setdefault("properties", {})
        return schema

    def get_definition(self) -> Tool:
        """
        Returns the tool's definition in the form MCP clients receive from tools/list.
        This method is inherited by all tools.
        """
        return Tool(
            name=self.name,
            description=self.description,
            inputSchema=self.input_schema(),
        )
