import json

import pytest

from cnpj_mcp.core.dispatch import DISPATCH_TABLE, Route
from cnpj_mcp.core.tool_registry import ToolRegistry


def test_definitions_cover_the_catalog(registry):
    definitions = registry.get_definitions()
    assert [d.name for d in definitions] == list(registry.tools)
    assert all(d.description for d in definitions)


def test_input_schema_declares_required_fields_and_enums(registry):
    schemas = {d.name: d.inputSchema for d in registry.get_definitions()}

    assert schemas["buscar_empresa"]["required"] == ["cnpj"]
    assert schemas["bulk_lookup"]["properties"]["cnpjs"]["type"] == "array"
    assert "required" not in schemas["buscar_avancado"]
    assert "01" in json.dumps(schemas["buscar_avancado"]["properties"]["porte"])
    assert schemas["estatisticas_por_uf"]["properties"] == {}


def test_registry_refuses_a_table_out_of_sync(client):
    table = dict(DISPATCH_TABLE)
    table.pop("filiais")
    table["extra"] = Route("/extra")
    with pytest.raises(ValueError):
        ToolRegistry(client=client, table=table)


async def test_unknown_tool_makes_no_network_call(registry, upstream):
    result = await registry.execute("consultar_tudo", {"cnpj": "1"})

    assert result == {"error": "unknown tool: consultar_tudo", "code": "UNKNOWN_TOOL"}
    assert upstream.requests == []


async def test_missing_path_argument_makes_no_network_call(registry, upstream):
    result = await registry.execute("buscar_empresa", {})

    assert result == {"error": "missing required argument: cnpj", "code": "INVALID_ARGUMENTS"}
    assert upstream.requests == []


@pytest.mark.parametrize("tool_name", ["buscar_empresa", "empresa_completa", "filiais", "socios",
                                       "regime_tributario", "benchmark_empresa"])
async def test_lookup_not_found(registry, upstream, tool_name):
    upstream.reply(404, json={"message": "nao encontrado"})

    result = await registry.execute(tool_name, {"cnpj": "99999999"})

    assert result == {"error": "not found", "code": "NOT_FOUND"}


async def test_rate_limited(registry, upstream):
    upstream.reply(429)
    result = await registry.execute("buscar_por_nome", {"nome": "padaria"})
    assert result["code"] == "RATE_LIMIT"


async def test_null_arguments_are_never_sent(registry, upstream):
    await registry.execute("ranking_cnae", {"cnae": "5611201", "uf": None, "limite": 15, "ordenar_por": None})

    (request,) = upstream.requests
    query = request.url.query.decode()
    assert query == "limite=15"
    assert "None" not in query and "null" not in query


async def test_bulk_lookup_is_not_truncated(registry, upstream):
    cnpjs = [f"{i:014d}" for i in range(150)]
    upstream.reply(400, json={"message": "maximo 100 CNPJs"})

    result = await registry.execute("bulk_lookup", {"cnpjs": cnpjs})

    (request,) = upstream.requests
    assert json.loads(request.content) == {"cnpjs": cnpjs}
    assert result == {"error": "maximo 100 CNPJs", "code": "API_ERROR", "status": 400}


def test_result_limits_accept_any_number(registry):
    schemas = {d.name: d.inputSchema for d in registry.get_definitions()}
    for name in ("buscar_por_nome", "buscar_por_cnae", "buscar_por_socio", "buscar_por_cep",
                 "buscar_avancado", "buscar_similares", "ranking_cnae", "estatisticas_por_cnae"):
        types = [option.get("type") for option in schemas[name]["properties"]["limite"]["anyOf"]]
        assert "number" in types
        assert "integer" not in types


async def test_fractional_limit_is_forwarded(registry, upstream):
    await registry.execute("buscar_similares", {"cnpj": "67616128", "limite": 7.5})

    (request,) = upstream.requests
    assert request.url.params["limite"] == "7.5"
