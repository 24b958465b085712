import pytest

from algobox.graphs import is_bipartite, prim_mst


def _cycle(n):
    return [(i, (i + 1) % n) for i in range(n)]


@pytest.mark.parametrize("n", [2, 4, 6, 8])
def test_even_cycle_is_bipartite(n):
    assert is_bipartite(n, _cycle(n))


@pytest.mark.parametrize("n", [3, 5, 7])
def test_odd_cycle_is_not_bipartite(n):
    assert not is_bipartite(n, _cycle(n))


def test_graph_without_edges_is_bipartite():
    assert is_bipartite(5, [])


def test_self_loop_is_not_bipartite():
    assert not is_bipartite(3, [(0, 1), (2, 2)])


def test_odd_cycle_in_second_component_detected():
    edges = [(0, 1), (2, 3), (3, 4), (4, 2)]
    assert not is_bipartite(5, edges)


def test_bipartite_rejects_unknown_vertex():
    with pytest.raises(ValueError):
        is_bipartite(2, [(0, 5)])


def test_prim_on_tree_keeps_every_edge():
    edges = [(0, 1, 4), (1, 2, 7), (1, 3, 2)]
    tree = prim_mst(4, edges, 0)
    assert {frozenset(pair) for pair in tree} == {
        frozenset((a, b)) for a, b, _ in edges
    }


def test_prim_drops_heaviest_triangle_edge():
    edges = [(0, 1, 1), (1, 2, 2), (0, 2, 3)]
    tree = prim_mst(3, edges, 0)
    assert {frozenset(pair) for pair in tree} == {
        frozenset((0, 1)),
        frozenset((1, 2)),
    }


def test_prim_result_lists_vertices_in_order_without_source():
    edges = [(0, 1, 5), (1, 2, 1), (2, 3, 1), (3, 0, 5), (0, 2, 2)]
    tree = prim_mst(4, edges, 2)
    assert [vertex for _, vertex in tree] == [0, 1, 3]
    weights = {frozenset((a, b)): w for a, b, w in edges}
    for parent, vertex in tree:
        assert frozenset((parent, vertex)) in weights


def test_prim_unreachable_vertex_has_no_parent():
    tree = prim_mst(3, [(0, 1, 1)], 0)
    assert tree[-1] == (None, 2)


def test_prim_rejects_bad_source():
    with pytest.raises(ValueError):
        prim_mst(2, [(0, 1, 1)], 3)