# The module defines the analysis tools. Benchmarks, similarity scores and rankings are computed by the API.
# Author: Shibo Li
# Date: 2025-06-12
# Version: 1.0.2

from pydantic import BaseModel, Field
from typing import Type, Optional, Literal
from .base_tool import BaseTool


class BenchmarkEmpresaInput(BaseModel):
    cnpj: str = Field(..., description="Company CNPJ.")
    uf: Optional[str] = Field(default=None, description="Restrict the sector to one state (optional).")


class BenchmarkEmpresaTool(BaseTool):
    """Compares one company against its sector average."""
    name: str = "benchmark_empresa"
    description: str = """Compares a company with the SECTOR AVERAGE.

WHEN TO USE:
- You want to know whether a company is above or below average
- Comparative analysis of size/capital

RETURNS:
- Company data
- Sector statistics (mean, median, total)
- Relative position in the ranking"""
    args_schema: Type[BaseModel] = BenchmarkEmpresaInput


class BuscarSimilaresInput(BaseModel):
    """
    Input model for the lookalike search.
    Attributes:
        cnpj (str): Reference company.
        limite (Optional[float]): Maximum number of results (upstream default 50).
        score_minimo (Optional[float]): Minimum similarity score, 0-100 (upstream default 40).
        uf (Optional[str]): Two-letter state filter.
    """
    cnpj: str = Field(..., description="CNPJ of the reference company.")
    limite: Optional[float] = Field(default=None, description="Maximum number of results (default: 50).")
    score_minimo: Optional[float] = Field(default=None, description="Minimum similarity score 0-100 (default: 40).")
    uf: Optional[str] = Field(default=None, description="Filter by state (2-letter code).")


class BuscarSimilaresTool(BaseTool):
    name: str = "buscar_similares"
    description: str = """Finds SIMILAR companies using multi-dimensional scoring.

WHEN TO USE:
- You have a good customer and want more like it (lookalike)
- You want to grow a portfolio with companies of the same profile

SIMILARITY CRITERIA:
- Same CNAE (economic activity)
- Same size (similar share capital)
- Same region"""
    args_schema: Type[BaseModel] = BuscarSimilaresInput


class RankingCnaeInput(BaseModel):
    cnae: str = Field(..., description="7-digit CNAE code.")
    uf: Optional[str] = Field(default=None, description="Filter by state (optional).")
    limite: Optional[float] = Field(default=None, description="Top N results (default: 15).")
    ordenar_por: Optional[Literal["capital", "filiais"]] = Field(default=None, description="Sort criterion (default: capital).")


class RankingCnaeTool(BaseTool):
    name: str = "ranking_cnae"
    description: str = """RANKING of the largest companies of a sector.

WHEN TO USE:
- You want to identify the market leaders
- Account-Based Marketing (ABM)

SORTING:
- capital: by share capital (default)
- filiais: by number of units"""
    args_schema: Type[BaseModel] = RankingCnaeInput
