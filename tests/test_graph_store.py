import pytest

from georoute.domain.errors import FormatError, GraphIOError
from georoute.domain.models import Coordinate
from georoute.graph.store import load_graph, parse_graph

A = Coordinate(0.0, 0.0)
B = Coordinate(0.0, 1.0)
C = Coordinate(0.0, 2.0)


def _parse(text: str):
    return parse_graph(text.splitlines())


def test_line_graph_has_all_vertices(line_graph):
    assert len(line_graph) == 3
    assert list(line_graph) == [A, B, C]
    assert line_graph.edge_count == 2
    assert dict(line_graph.labels) == {"A": A, "B": B, "C": C}
    assert line_graph.vertex_for("B") == B
    assert line_graph.vertex_for("Z") is None


def test_adjacency_is_symmetric(line_graph):
    adjacency = line_graph.adjacency()
    assert adjacency == {A: {B}, B: {A, C}, C: {B}}
    for u, neighbours in adjacency.items():
        for v in neighbours:
            assert u in adjacency[v]


def test_membership_and_neighbours(line_graph):
    assert A in line_graph
    assert Coordinate(99, 99) not in line_graph
    assert line_graph.neighbors(Coordinate(99, 99)) == frozenset()
    assert line_graph.index_of(C) == 2
    assert line_graph.coordinate(line_graph.index_of(B)) == B


def test_duplicate_edges_are_stored_once():
    graph = _parse("2 3\nA 0 0\nB 0 1\n0 1\n1 0\n0 1\n")
    assert graph.neighbors(A) == {B}
    assert graph.edge_count == 1


def test_identical_coordinates_collapse_into_one_vertex():
    graph = _parse("3 1\nA 0 0\nB 0 0\nC 1 1\n1 2\n")
    assert len(graph) == 2
    assert graph.vertex_for("A") == graph.vertex_for("B") == A
    assert graph.neighbors(A) == {Coordinate(1, 1)}


def test_relabelling_same_coordinate_is_accepted():
    graph = _parse("2 0\nA 0 0\nA 0 0\n")
    assert len(graph) == 1


def test_label_reused_for_other_coordinate_is_rejected():
    with pytest.raises(FormatError) as excinfo:
        _parse("2 0\nA 0 0\nA 1 1\n")
    assert excinfo.value.line_number == 3


def test_self_loop_is_kept():
    graph = _parse("1 1\nA 0 0\n0 0\n")
    assert graph.neighbors(A) == {A}
    assert graph.edge_count == 1


def test_isolated_vertices_and_empty_graph():
    graph = _parse("2 0\nA 0 0\nB 5 5\n")
    assert graph.neighbors(A) == frozenset()
    assert graph.edge_count == 0

    empty = _parse("0 0\n")
    assert len(empty) == 0


def test_extra_whitespace_and_trailing_lines_are_tolerated():
    graph = _parse("2  1\nA   0.5 -1.25\nB 0 1\n0  1\nthis line is ignored\n")
    assert Coordinate(0.5, -1.25) in graph
    assert graph.edge_count == 1


def test_coordinates_are_kept_verbatim():
    graph = _parse("1 0\nP 35.123456789012345 -78.98765432109876\n")
    assert graph.vertex_for("P") == Coordinate(35.123456789012345, -78.98765432109876)


@pytest.mark.parametrize(
    "text, line_number",
    [
        ("", 1),
        ("3\n", 1),
        ("x 2\n", 1),
        ("2 y\n", 1),
        ("-1 0\n", 1),
        ("2 0\nA 0 0\n", 3),
        ("1 0\nA 0\n", 2),
        ("1 0\nA zero 0\n", 2),
        ("1 0\nA nan 0\n", 2),
        ("1 0\nA 0 inf\n", 2),
        ("1 0\n\n", 2),
        ("2 1\nA 0 0\nB 0 1\n0\n", 4),
        ("2 1\nA 0 0\nB 0 1\n0 x\n", 4),
        ("2 1\nA 0 0\nB 0 1\n0 2\n", 4),
        ("2 1\nA 0 0\nB 0 1\n-1 0\n", 4),
        ("2 2\nA 0 0\nB 0 1\n0 1\n", 5),
    ],
)
def test_malformed_descriptions_raise_format_error(text, line_number):
    with pytest.raises(FormatError) as excinfo:
        _parse(text)
    assert excinfo.value.line_number == line_number


def test_load_graph_reads_file(line_graph_path):
    graph = load_graph(line_graph_path)
    assert list(graph) == [A, B, C]


def test_load_graph_reports_file_in_format_error(tmp_path):
    path = tmp_path / "bad.graph"
    path.write_text("1 0\nA 0\n", encoding="utf-8")

    with pytest.raises(FormatError) as excinfo:
        load_graph(path)

    assert excinfo.value.file_path == str(path)
    assert f"{path}:2" in str(excinfo.value)


def test_load_graph_missing_file_raises_io_error(tmp_path):
    path = tmp_path / "missing.graph"

    with pytest.raises(GraphIOError) as excinfo:
        load_graph(path)

    assert excinfo.value.file_path == str(path)
    assert isinstance(excinfo.value.cause, FileNotFoundError)
