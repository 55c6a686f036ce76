import pytest
from hypothesis import given
from hypothesis import strategies as st

from dpkit.graph import Graph, main, parse_graph


def _tree() -> Graph:
    graph = Graph(4)
    graph.add_edge(1, 2)
    graph.add_edge(1, 3)
    graph.add_edge(2, 4)
    return graph


def test_neighbours_are_symmetric_and_ordered():
    graph = _tree()
    assert graph.neighbours(1) == [2, 3]
    assert graph.neighbours(2) == [1, 4]
    assert graph.neighbours(4) == [2]


def test_bfs_on_tree():
    assert _tree().bfs() == [1, 2, 3, 4]


def test_dfs_on_tree():
    assert _tree().dfs() == [1, 2, 4, 3]


def test_isolated_vertices_are_visited():
    graph = Graph(3)
    assert graph.bfs() == [1, 2, 3]
    assert graph.dfs() == [1, 2, 3]


def test_adjacency_matrix_matches_edges():
    matrix = _tree().adjacency_matrix()
    assert matrix[0][1] == matrix[1][0] == 1
    assert matrix[1][3] == matrix[3][1] == 1
    assert matrix[2][3] == 0
    assert len(matrix) == 4


@pytest.mark.parametrize("edge", [(0, 1), (1, 5), (-1, 2)])
def test_add_edge_rejects_unknown_vertex(edge):
    with pytest.raises(ValueError):
        _tree().add_edge(*edge)


def test_negative_vertex_count_rejected():
    with pytest.raises(ValueError):
        Graph(-1)


def test_neighbours_rejects_unknown_vertex():
    with pytest.raises(ValueError):
        _tree().neighbours(9)


_edges = st.integers(min_value=1, max_value=8).flatmap(
    lambda n: st.tuples(
        st.just(n),
        st.lists(
            st.tuples(st.integers(1, n), st.integers(1, n)), max_size=15
        ),
    )
)


@given(_edges)
def test_traversals_visit_each_vertex_once(data):
    n, edges = data
    graph = Graph(n)
    for u, v in edges:
        graph.add_edge(u, v)
    assert sorted(graph.bfs()) == list(range(1, n + 1))
    assert sorted(graph.dfs()) == list(range(1, n + 1))
    assert graph.bfs()[0] == graph.dfs()[0] == 1


@given(_edges)
def test_adjacency_matrix_is_symmetric(data):
    n, edges = data
    graph = Graph(n)
    for u, v in edges:
        graph.add_edge(u, v)
    matrix = graph.adjacency_matrix()
    assert all(matrix[i][j] == matrix[j][i] for i in range(n) for j in range(n))


def test_parse_graph_reads_edges():
    graph = parse_graph("4 3\n1 2\n1 3\n2 4\n")
    assert graph.vertex_count == 4
    assert graph.dfs() == _tree().dfs()
    assert graph.neighbours(1) == [2, 3]


def test_parse_graph_short_input():
    with pytest.raises(ValueError):
        parse_graph("3 2\n1 2\n")


def test_parse_graph_non_integer():
    with pytest.raises(ValueError):
        parse_graph("3 x")


def test_main_prints_bfs(tmp_path, capsys):
    path = tmp_path / "graph.txt"
    path.write_text("4 3\n1 2\n1 3\n2 4\n")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out.split() == ["1", "2", "3", "4"]


def test_main_prints_dfs(tmp_path, capsys):
    path = tmp_path / "graph.txt"
    path.write_text("4 3\n1 2\n1 3\n2 4\n")
    assert main([str(path), "--order", "dfs"]) == 0
    assert capsys.readouterr().out.split() == [str(v) for v in _tree().dfs()]


def test_main_rejects_broken_input(tmp_path):
    path = tmp_path / "graph.txt"
    path.write_text("2 1\n1\n")
    with pytest.raises(SystemExit) as excinfo:
        main([str(path)])
    assert excinfo.value.code == 2