import pandas as pd
import pytest

from catalogo.data.normalize import normalize_text
from catalogo.data.schemas import Group, Record
from catalogo.search.pipeline import (
    cap_groups,
    filter_catalog,
    group_by_category,
    run_search,
    status_message,
)


def _frame(rows):
    return pd.DataFrame(rows, columns=["DescripcionCIAN", "ActividadBMX", "DescripcionBMX"])


def test_end_to_end_example(sample_store):
    result = sample_store.search("agri", 200)
    assert [g.category for g in result.groups] == ["Agricultura"]
    assert [r.code for r in result.groups[0].items] == ["111", "112"]
    assert result.total == 2
    assert result.shown == 2
    assert not result.truncated
    assert status_message(result) == "Encontradas 2 coincidencias"


@pytest.mark.parametrize("query", ["", "   ", "\t\n"])
def test_blank_query_yields_nothing(sample_store, query):
    result = sample_store.search(query, 200)
    assert result.groups == []
    assert result.total == 0
    assert result.shown == 0
    assert status_message(result) == ""


def test_no_match_message(sample_store):
    result = sample_store.search("xyz", 200)
    assert result.groups == []
    assert result.total == 0
    assert status_message(result) == 'No se encontraron resultados para "xyz"'


def test_cap_of_one(sample_store):
    result = sample_store.search("agri", 1)
    assert result.codes() == ["111"]
    assert result.shown == 1
    assert result.total == 2
    assert result.truncated
    assert status_message(result) == "Encontradas 2 coincidencias. Mostrando los primeros 1"


def test_accent_insensitive_match():
    df = _frame([
        ["Elaboración de café", "3111", "Tostado"],
        ["Pesca de camarón", "0211", "Captura"],
    ])
    assert run_search(df, "CAFE").codes() == ["3111"]
    assert run_search(df, "  camaron ").codes() == ["0211"]


def test_every_match_contains_term_and_nothing_else():
    df = _frame([
        ["Cultivo de soya", "1", ""],
        ["Cultivo de trigo", "2", ""],
        ["Soya procesada", "3", ""],
        ["Pesca", "4", ""],
    ])
    term = normalize_text("SOYA")
    matched = filter_catalog(df, term)
    assert matched["ActividadBMX"].tolist() == ["1", "3"]
    for cat in df["DescripcionCIAN"]:
        in_result = cat in matched["DescripcionCIAN"].tolist()
        assert in_result == (term in normalize_text(cat))


def test_substring_not_regex():
    df = _frame([["Cultivo (otros)", "1", ""], ["Cultivo otros", "2", ""]])
    assert run_search(df, "(otros").codes() == ["1"]
    assert run_search(df, ".*").codes() == []


def test_grouping_preserves_first_seen_order():
    df = _frame([
        ["A", "rec1", ""],
        ["B", "rec2", ""],
        ["A", "rec3", ""],
        ["C", "rec4", ""],
    ])
    groups = group_by_category(df)
    assert [g.category for g in groups] == ["A", "B", "C"]
    assert [r.code for r in groups[0].items] == ["rec1", "rec3"]


def test_grouping_uses_original_text():
    df = _frame([["Café", "1", ""], ["cafe", "2", ""]])
    groups = run_search(df, "cafe").groups
    assert [g.category for g in groups] == ["Café", "cafe"]


def test_empty_category_goes_to_sentinel_group():
    df = _frame([["", "1", ""], [None, "2", ""]])
    groups = group_by_category(df)
    assert [g.category for g in groups] == ["(Sin DescripcionCIAN)"]
    assert [r.code for r in groups[0].items] == ["1", "2"]


def _groups(layout):
    return [Group(cat, [Record(cat, code) for code in codes]) for cat, codes in layout]


def test_cap_cuts_group_and_stops():
    groups = _groups([("A", ["1", "2"]), ("B", ["3", "4", "5"]), ("C", ["6"])])
    capped, shown = cap_groups(groups, 3)
    assert [(g.category, [r.code for r in g.items]) for g in capped] == [("A", ["1", "2"]), ("B", ["3"])]
    assert shown == 3


@pytest.mark.parametrize("cap", [1, 2, 4, 5, 6, 100])
def test_cap_never_exceeds_limit(cap):
    groups = _groups([("A", ["1", "2"]), ("B", ["3", "4", "5"]), ("C", ["6"])])
    capped, shown = cap_groups(groups, cap)
    assert shown == sum(len(g.items) for g in capped)
    assert shown == min(cap, 6)
    assert all(g.items for g in capped)


def test_cap_does_not_mutate_input():
    groups = _groups([("A", ["1", "2", "3"])])
    cap_groups(groups, 1)
    assert len(groups[0].items) == 3


def test_cap_must_be_positive():
    with pytest.raises(ValueError):
        cap_groups([], 0)


def test_result_dict_shape(sample_store):
    data = sample_store.search("pesca", 100).to_dict()
    assert data["groups"] == [{
        "DescripcionCIAN": "Pesca",
        "items": [{"DescripcionCIAN": "Pesca", "ActividadBMX": "211", "DescripcionBMX": "Captura"}],
    }]
    assert data["total"] == 1 and data["shown"] == 1 and data["max_results"] == 100
    assert data["truncated"] is False


def test_empty_catalog():
    assert run_search(_frame([]), "agri").groups == []
