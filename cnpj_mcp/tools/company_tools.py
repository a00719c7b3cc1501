# The module defines the single-company lookup tools: registration data, partners, branches and tax regime.
# Author: Shibo Li
# Date: 2025-06-12
# Version: 1.0.2

from pydantic import BaseModel, Field
from typing import Type
from .base_tool import BaseTool


class CnpjInput(BaseModel):
    """
    Input model shared by every lookup keyed on a single company.
    Attributes:
        cnpj (str): The company's CNPJ, 8 digits (head office base) or 14 digits (full).
    """
    cnpj: str = Field(..., description="Company CNPJ. Use 8 digits for the head office base or the full 14 digits.")


class BuscarEmpresaTool(BaseTool):
    """Registration data of one company, looked up by CNPJ."""
    name: str = "buscar_empresa"
    description: str = """Looks up the registration data of a Brazilian company by CNPJ.

WHEN TO USE:
- You have a specific CNPJ and need its registration record
- You need to check whether a CNPJ exists and is active
- You want the legal name, address, CNAE or size of a company

RETURNS:
- cnpj, razao_social, nome_fantasia
- full address (logradouro, municipio, uf, cep)
- cnae_principal, data_abertura, capital_social
- situacao_cadastral, porte_empresa

EXAMPLE: { "cnpj": "00000000000191" } (Banco do Brasil)"""
    args_schema: Type[BaseModel] = CnpjInput


class EmpresaCompletaTool(BaseTool):
    """Registration data plus partners plus tax regime in one call."""
    name: str = "empresa_completa"
    description: str = """Returns the COMPLETE record of a company: registration + partners + tax regime.

WHEN TO USE:
- You need detailed information for due diligence
- You want to know who the partners are and their roles
- You need to check whether the company is in Simples Nacional or MEI

RETURNS:
- Everything buscar_empresa returns, plus
- Partners with name, cpf/cnpj and qualification
- Tax regime: simples_nacional, mei"""
    args_schema: Type[BaseModel] = CnpjInput


class FiliaisTool(BaseTool):
    name: str = "filiais"
    description: str = """Lists every branch of a company (same CNPJ base).

WHEN TO USE:
- You want to map the geographic footprint of a company
- You need to know how many units a company has

RETURNS:
- All branches with full cnpj, address and registration status"""
    args_schema: Type[BaseModel] = CnpjInput


class SociosTool(BaseTool):
    name: str = "socios"
    description: str = """Lists the full partner structure (quadro societario) of a company.

WHEN TO USE:
- You want to identify the owners/partners
- You need the partners' CPF/CNPJ for further searches

RETURNS:
- Partners with: nome, cpf_cnpj, qualificacao, data_entrada"""
    args_schema: Type[BaseModel] = CnpjInput


class RegimeTributarioTool(BaseTool):
    name: str = "regime_tributario"
    description: str = """Checks the tax regime of a company: Simples Nacional or MEI.

WHEN TO USE:
- You need to know whether the company can issue simplified invoices
- You want to filter companies by regime

RETURNS:
- simples_nacional: true/false
- mei: true/false
- opt-in/exclusion dates"""
    args_schema: Type[BaseModel] = CnpjInput
