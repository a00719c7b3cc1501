# The module defines the batch lookup tool.
# Author: Shibo Li
# Date: 2025-06-13
# Version: 1.0.2

from pydantic import BaseModel, Field
from typing import Type, List
from .base_tool import BaseTool


class BulkLookupInput(BaseModel):
    """
    Input model for the batch lookup.
    Attributes:
        cnpjs (List[str]): CNPJs to look up. The API accepts up to 100 per call
            and is the one that enforces it.
    """
    cnpjs: List[str] = Field(..., description="List of CNPJs (max 100).")


class BulkLookupTool(BaseTool):
    """Looks up many CNPJs in one POST request."""
    name: str = "bulk_lookup"
    description: str = """Looks up MULTIPLE CNPJs at once (batch).

WHEN TO USE:
- You have a list of CNPJs to enrich
- Importing data from a spreadsheet/CRM

LIMITS:
- At most 100 CNPJs per request"""
    args_schema: Type[BaseModel] = BulkLookupInput
