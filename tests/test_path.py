"""
Unit tests for path-table helpers.
"""

from bfpaths.graph import Graph
from bfpaths.path import full_path, path_weight, render_path
from bfpaths.symbols import SymbolTable


def test_full_path_appends_target():
    paths = [[], [0], None, [0, 1]]

    assert full_path(paths, 0) == [0]
    assert full_path(paths, 3) == [0, 1, 3]
    assert full_path(paths, 2) == []


def test_full_path_does_not_alias_the_table():
    paths = [[], [0]]
    out = full_path(paths, 1)
    out.append(99)

    assert paths[1] == [0]


def test_path_weight_sums_hops_using_cheapest_parallel_edge():
    g = Graph.from_edges(3, [(0, 1, 5), (0, 1, 2), (1, 2, -4)])

    assert path_weight(g, [0, 1], 2) == -2
    assert path_weight(g, [], 0) == 0


def test_path_weight_returns_none_for_missing_hop():
    g = Graph.from_edges(3, [(0, 1, 1)])

    assert path_weight(g, [0], 2) is None


def test_render_path_maps_ids_to_labels():
    st = SymbolTable()
    for label in ["src", "mid", "dst"]:
        st.intern(label)

    assert render_path(st, [0, 2, 1]) == ["src", "dst", "mid"]
