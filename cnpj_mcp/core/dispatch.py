# cnpj_mcp/core/dispatch.py
# The dispatch table: how each tool's arguments become one request against the registry API.
# Author: Shibo Li
# Date: 2025-06-13
# Version: 1.0.2

import string
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Tuple
from urllib.parse import quote

from cnpj_mcp.models.common import OutboundRequest
from cnpj_mcp.services.registry_client import build_query


class MissingArgumentError(ValueError):
    """Raised when a path-bound argument is absent from an invocation."""

    def __init__(self, argument: str):
        super().__init__(f"missing required argument: {argument}")
        self.argument = argument


@dataclass(frozen=True)
class Route:
    """
    Binding rule of one tool.
    Attributes:
        path (str): Path template; every {placeholder} is filled from the argument of the same name.
        query (Tuple[str, ...]): Arguments forwarded as query parameters.
        forward_all (bool): Forward the whole argument mapping as query parameters.
        body (bool): Forward the whole argument mapping as a JSON body (POST).
    """
    path: str
    query: Tuple[str, ...] = ()
    forward_all: bool = False
    body: bool = False

    @property
    def path_arguments(self) -> Tuple[str, ...]:
        return tuple(field for _, field, _, _ in string.Formatter().parse(self.path) if field)

    @property
    def method(self) -> str:
        return "POST" if self.body else "GET"

    def bind(self, arguments: Mapping[str, Any]) -> OutboundRequest:
        segments: Dict[str, str] = {}
        for name in self.path_arguments:
            value = arguments.get(name)
            if value is None:
                raise MissingArgumentError(name)
            segments[name] = quote(str(value), safe="")
        path = self.path.format(**segments)

        if self.body:
            return OutboundRequest(method="POST", path=path, body=dict(arguments))
        if self.forward_all:
            return OutboundRequest(path=path, params=build_query(arguments))
        return OutboundRequest(path=path, params=build_query({name: arguments.get(name) for name in self.query}))


DISPATCH_TABLE: Dict[str, Route] = {
    # Single-company lookups
    "buscar_empresa": Route("/api/cnpj/{cnpj}"),
    "empresa_completa": Route("/api/cnpj/{cnpj}/completo"),
    "filiais": Route("/api/cnpj/{cnpj}/filiais"),
    "socios": Route("/api/cnpj/{cnpj}/socios"),
    "regime_tributario": Route("/api/cnpj/{cnpj}/regime"),

    # Search and discovery
    "buscar_por_nome": Route("/api/cnpj/buscar/nome", query=("nome", "uf", "limite")),
    "buscar_por_cnae": Route("/api/cnpj/buscar/cnae/{cnae}", query=("uf", "limite")),
    "buscar_por_socio": Route("/api/cnpj/buscar/socio", query=("nome", "uf", "limite")),
    "buscar_por_cep": Route("/api/cnpj/buscar/cep/{cep}", query=("cnae", "situacao", "limite")),
    "buscar_avancado": Route("/api/cnpj/buscar/avancado", forward_all=True),

    # Analysis and benchmark
    "benchmark_empresa": Route("/api/cnpj/{cnpj}/benchmark", query=("uf",)),
    "buscar_similares": Route("/api/cnpj/{cnpj}/similares", query=("limite", "score_minimo", "uf")),
    "ranking_cnae": Route("/api/cnpj/ranking/cnae/{cnae}", query=("uf", "limite", "ordenar_por")),

    # Statistics
    "estatisticas_por_uf": Route("/api/cnpj/stats/por-uf"),
    "estatisticas_por_cnae": Route("/api/cnpj/stats/por-cnae", query=("limite",)),

    # Bulk
    "bulk_lookup": Route("/api/cnpj/bulk", body=True),
}
