import pytest

from algokit.graphs import DisjointSet, Graph, connected_components, prim_mst

PRIM_MATRIX = [
    [0, 4, 6, 0, 0, 0],
    [4, 0, 6, 3, 4, 0],
    [6, 6, 0, 1, 8, 0],
    [0, 3, 1, 0, 2, 3],
    [0, 4, 8, 2, 0, 7],
    [0, 0, 0, 3, 7, 0],
]


def test_connected_components_source_example():
    edges = [(0, 1, 10), (2, 3, 10), (4, 5, 10), (5, 6, 10), (4, 6, 10)]
    assert connected_components(7, edges) == [[0, 1], [2, 3], [4, 5, 6]]


def test_connected_components_without_edges():
    assert connected_components(3, []) == [[0], [1], [2]]


def test_connected_components_partition_vertices():
    edges = [(0, 4), (4, 2), (5, 6), (1, 7)]
    components = connected_components(8, edges)
    flat = sorted(v for component in components for v in component)
    assert flat == list(range(8))
    assert [0, 4, 2] in components


def test_connected_components_rejects_bad_vertex():
    with pytest.raises(ValueError):
        connected_components(2, [(0, 5)])


def test_disjoint_set_union_and_find():
    sets = DisjointSet(5)
    assert sets.union(0, 1) is True
    assert sets.union(1, 2) is True
    assert sets.union(0, 2) is False
    assert sets.find(2) == sets.find(0)
    assert sets.find(3) != sets.find(0)


def test_kruskal_source_example():
    graph = Graph(4)
    for x, y, w in [(0, 1, 1), (1, 3, 3), (3, 2, 4), (2, 0, 2), (0, 3, 2), (1, 2, 2)]:
        graph.add_edge(x, y, w)
    assert graph.kruskal_mst() == 5


def test_kruskal_on_tree_takes_every_edge():
    edges = [(0, 1, 7), (1, 2, 3), (1, 3, 9)]
    graph = Graph(4)
    for x, y, w in edges:
        graph.add_edge(x, y, w)
    assert graph.kruskal_mst() == sum(w for _, _, w in edges)


def test_add_edge_rejects_bad_vertex():
    graph = Graph(2)
    with pytest.raises(ValueError):
        graph.add_edge(0, 2, 1)


def test_prim_matches_kruskal_weight():
    tree = prim_mst(PRIM_MATRIX)
    graph = Graph(len(PRIM_MATRIX))
    for i, row in enumerate(PRIM_MATRIX):
        for j in range(i + 1, len(row)):
            if row[j]:
                graph.add_edge(i, j, row[j])
    assert len(tree) == len(PRIM_MATRIX) - 1
    assert sum(weight for _, _, weight in tree) == graph.kruskal_mst()


def test_prim_edges_exist_and_span():
    tree = prim_mst(PRIM_MATRIX)
    for parent, vertex, weight in tree:
        assert PRIM_MATRIX[parent][vertex] == weight != 0
    assert [vertex for _, vertex, _ in tree] == list(range(1, len(PRIM_MATRIX)))
    assert len(connected_components(len(PRIM_MATRIX), tree)) == 1


def test_prim_disconnected_raises():
    with pytest.raises(ValueError):
        prim_mst([[0, 1, 0], [1, 0, 0], [0, 0, 0]])


def test_prim_non_square_raises():
    with pytest.raises(ValueError):
        prim_mst([[0, 1], [1]])