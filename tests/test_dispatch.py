import pytest

from cnpj_mcp.core.dispatch import DISPATCH_TABLE, MissingArgumentError, Route
from cnpj_mcp.core.tool_registry import check_lockstep, discover_tools


def test_catalog_and_dispatch_table_are_in_lockstep():
    names = [tool.name for tool in discover_tools()]
    assert len(names) == len(set(names)) == 16
    assert set(names) == set(DISPATCH_TABLE)


def test_check_lockstep_reports_both_directions():
    table = {"a": Route("/a"), "orphan": Route("/orphan")}
    with pytest.raises(ValueError) as excinfo:
        check_lockstep(["a", "lonely"], table)
    assert "lonely" in str(excinfo.value)
    assert "orphan" in str(excinfo.value)


def test_check_lockstep_rejects_duplicate_names():
    with pytest.raises(ValueError):
        check_lockstep(["a", "a"], {"a": Route("/a")})


def test_single_entity_lookup_binds_path_only():
    request = DISPATCH_TABLE["socios"].bind({"cnpj": "00000000000191"})
    assert request.method == "GET"
    assert request.path == "/api/cnpj/00000000000191/socios"
    assert request.params == {}


def test_path_segment_is_percent_encoded():
    request = DISPATCH_TABLE["buscar_empresa"].bind({"cnpj": "00.000.000/0001-91"})
    assert request.path == "/api/cnpj/00.000.000%2F0001-91"


def test_sub_resource_binds_filters_as_query():
    request = DISPATCH_TABLE["buscar_similares"].bind({"cnpj": "67616128", "score_minimo": 60, "uf": None})
    assert request.path == "/api/cnpj/67616128/similares"
    assert request.params == {"score_minimo": "60"}


def test_search_by_postal_code():
    request = DISPATCH_TABLE["buscar_por_cep"].bind({"cep": "01310100", "situacao": "02", "limite": 10})
    assert request.path == "/api/cnpj/buscar/cep/01310100"
    assert request.params == {"situacao": "02", "limite": "10"}


def test_bound_query_ignores_arguments_outside_the_route():
    request = DISPATCH_TABLE["buscar_por_nome"].bind({"nome": "acme", "municipio": "Santos"})
    assert request.params == {"nome": "acme"}


def test_advanced_search_forwards_every_argument():
    arguments = {"cnae": "4711302", "municipio": "Campinas", "capital_min": 100000.0, "porte": None}
    request = DISPATCH_TABLE["buscar_avancado"].bind(arguments)
    assert request.path == "/api/cnpj/buscar/avancado"
    assert request.params == {"cnae": "4711302", "municipio": "Campinas", "capital_min": "100000"}


def test_statistics_without_arguments():
    request = DISPATCH_TABLE["estatisticas_por_uf"].bind({})
    assert request.path == "/api/cnpj/stats/por-uf"
    assert request.params == {}


def test_bulk_lookup_is_a_post_with_the_arguments_as_body():
    request = DISPATCH_TABLE["bulk_lookup"].bind({"cnpjs": ["1", "2"]})
    assert request.method == "POST"
    assert request.body == {"cnpjs": ["1", "2"]}
    assert request.params == {}


def test_missing_path_argument():
    with pytest.raises(MissingArgumentError) as excinfo:
        DISPATCH_TABLE["buscar_por_cnae"].bind({"limite": 5})
    assert excinfo.value.argument == "cnae"


def test_every_route_exposes_its_path_arguments():
    assert DISPATCH_TABLE["ranking_cnae"].path_arguments == ("cnae",)
    assert DISPATCH_TABLE["buscar_avancado"].path_arguments == ()
