# The module defines the search and discovery tools: by name, sector, partner, postal code and combined filters.
# Author: Shibo Li
# Date: 2025-06-12
# Version: 1.0.2

from pydantic import BaseModel, Field
from typing import Type, Optional, Literal
from .base_tool import BaseTool


class BuscarPorNomeInput(BaseModel):
    """
    Input model for the name search.
    Attributes:
        nome (str): Search term, matched against legal and trade names.
        uf (Optional[str]): Two-letter state filter.
        limite (Optional[float]): Maximum number of results (upstream default 50).
    """
    nome: str = Field(..., description="Name or part of the company name (at least 3 characters).")
    uf: Optional[str] = Field(default=None, description="Filter by state (2-letter code).")
    limite: Optional[float] = Field(default=None, description="Maximum number of results (default: 50).")


class BuscarPorNomeTool(BaseTool):
    """Finds companies by legal name or trade name."""
    name: str = "buscar_por_nome"
    description: str = """Searches companies by NAME (razao social or nome fantasia).

WHEN TO USE:
- You know the name but not the CNPJ
- You want to find every unit of a chain

PARAMETERS:
- nome: search term (at least 3 characters)
- uf: filter by state (optional)
- limite: maximum results (default: 50)"""
    args_schema: Type[BaseModel] = BuscarPorNomeInput


class BuscarPorCnaeInput(BaseModel):
    cnae: str = Field(..., description="7-digit CNAE code. Example: 4711302")
    uf: Optional[str] = Field(default=None, description="Filter by state (2-letter code).")
    limite: Optional[float] = Field(default=None, description="Maximum number of results (default: 100).")


class BuscarPorCnaeTool(BaseTool):
    """Lists companies of one economic activity (CNAE)."""
    name: str = "buscar_por_cnae"
    description: str = """Lists companies of a specific SECTOR (by CNAE).

WHEN TO USE:
- You want every company of an economic activity
- Prospecting by vertical/segment

COMMON CNAES:
- 4711302: Supermarkets
- 5611201: Restaurants
- 2222600: Plastic packaging
- 4751201: Computer retail"""
    args_schema: Type[BaseModel] = BuscarPorCnaeInput


class BuscarPorSocioInput(BaseModel):
    nome: str = Field(..., description="Partner name (at least 3 characters).")
    uf: Optional[str] = Field(default=None, description="Filter by state (2-letter code).")
    limite: Optional[float] = Field(default=None, description="Maximum number of results (default: 50).")


class BuscarPorSocioTool(BaseTool):
    name: str = "buscar_por_socio"
    description: str = """Searches companies by PARTNER NAME.

WHEN TO USE:
- You want every company of a given businessperson
- You need to map an investor's portfolio

PARAMETERS:
- nome: partner name (at least 3 characters)
- uf: filter by state (optional)
- limite: maximum results (default: 50)"""
    args_schema: Type[BaseModel] = BuscarPorSocioInput


class BuscarPorCepInput(BaseModel):
    """
    Input model for the postal code search.
    Attributes:
        cep (str): 8-digit postal code, digits only.
        cnae (Optional[str]): CNAE filter.
        situacao (Optional[str]): Registration status filter (upstream default "02", active).
        limite (Optional[float]): Maximum number of results.
    """
    cep: str = Field(..., description="8-digit CEP (digits only).")
    cnae: Optional[str] = Field(default=None, description="Filter by CNAE (optional).")
    situacao: Optional[str] = Field(default=None, description="Registration status: 02=active, 01=null, etc (default: 02).")
    limite: Optional[float] = Field(default=None, description="Maximum number of results (default: 50).")


class BuscarPorCepTool(BaseTool):
    name: str = "buscar_por_cep"
    description: str = """Searches companies by CEP (postal code).

WHEN TO USE:
- You want companies in a specific area
- Localized geographic prospecting

PARAMETERS:
- cep: 8-digit CEP
- cnae: filter by CNAE (optional)
- situacao: filter by registration status (default: 02=active)
- limite: maximum results (default: 50)"""
    args_schema: Type[BaseModel] = BuscarPorCepInput


class BuscarAvancadoInput(BaseModel):
    """
    Input model for the combined-filter search. Every field is optional and
    every field given is forwarded to the API as-is.
    """
    cnae: Optional[str] = Field(default=None, description="7-digit CNAE code.")
    uf: Optional[str] = Field(default=None, description="State code (2 letters).")
    municipio: Optional[str] = Field(default=None, description="Municipality name.")
    porte: Optional[Literal["01", "03", "05"]] = Field(default=None, description="Size: 01=Micro, 03=Small, 05=Medium/Large.")
    capital_min: Optional[float] = Field(default=None, description="Minimum share capital in reais.")
    capital_max: Optional[float] = Field(default=None, description="Maximum share capital in reais.")
    situacao: Optional[str] = Field(default=None, description="Registration status.")
    limite: Optional[float] = Field(default=None, description="Number of results (default: 50).")


class BuscarAvancadoTool(BaseTool):
    name: str = "buscar_avancado"
    description: str = """Search with MULTIPLE combined FILTERS.

WHEN TO USE:
- You need filters the other tools do not offer
- A complex query combining several criteria

AVAILABLE FILTERS:
- cnae, uf, municipio, porte
- capital_min/capital_max
- situacao, limite"""
    args_schema: Type[BaseModel] = BuscarAvancadoInput
