# The module defines the market statistics tools.
# Author: Shibo Li
# Date: 2025-06-12
# Version: 1.0.2

from pydantic import BaseModel, Field
from typing import Type, Optional
from .base_tool import BaseTool


class EstatisticasPorUfInput(BaseModel):
    """This tool takes no arguments."""


class EstatisticasPorUfTool(BaseTool):
    name: str = "estatisticas_por_uf"
    description: str = """Returns the NUMBER of companies per Brazilian state.

WHEN TO USE:
- Market analysis by region
- Prioritizing states for expansion

RETURNS:
- States with their number of active companies
- Sorted by count (largest first)"""
    args_schema: Type[BaseModel] = EstatisticasPorUfInput


class EstatisticasPorCnaeInput(BaseModel):
    limite: Optional[float] = Field(default=None, description="Number of CNAEs in the ranking (default: 20).")


class EstatisticasPorCnaeTool(BaseTool):
    name: str = "estatisticas_por_cnae"
    description: str = """Returns the SECTORS with the most companies (CNAE ranking).

WHEN TO USE:
- Identifying the largest markets
- Opportunity analysis by vertical

PARAMETERS:
- limite: top N CNAEs (default: 20)"""
    args_schema: Type[BaseModel] = EstatisticasPorCnaeInput
