import pytest

from ssspgraph.metis import (
    MetisFormatError,
    MetisGraph,
    PartitionError,
    parse_metis_graph,
    parse_partition,
    read_metis_graph,
    read_partition_file,
)


def test_parse_partition_in_order():
    assert parse_partition(["0\n", "1\n", "0\n", "1\n"], 2) == [0, 1, 0, 1]


def test_parse_partition_multiple_per_line():
    assert parse_partition(["0 1", "1 0"], 2) == [0, 1, 1, 0]


def test_parse_partition_rejects_out_of_range():
    with pytest.raises(PartitionError) as info:
        parse_partition(["0", "2"], 2)
    assert info.value.part_id == 2
    assert info.value.num_parts == 2


def test_parse_partition_stops_at_non_integer():
    assert parse_partition(["0", "x", "1"], 2) == [0]


def test_parse_partition_empty():
    assert parse_partition([], 4) == []


def test_read_partition_file(tmp_path):
    path = tmp_path / "graph.part.3"
    path.write_text("2\n0\n1\n2\n")
    assert read_partition_file(path, 3) == [2, 0, 1, 2]


def test_read_partition_file_missing(tmp_path):
    with pytest.raises(OSError):
        read_partition_file(tmp_path / "absent", 2)


def test_parse_metis_header_and_rows():
    graph = parse_metis_graph(["3 2\n", "2\n", "1 3\n", "\n"])
    assert graph.num_vertices == 3
    assert graph.num_edges == 2
    assert len(graph.adjacency) == 3
    assert graph.adjacency[2] == ()


def test_single_neighbor_gets_unit_weight():
    graph = parse_metis_graph(["1 0", "5"])
    assert graph.adjacency[0] == ((4, 1),)


def test_neighbor_weight_pairs():
    graph = parse_metis_graph(["1 0", "2 7 4"])
    assert graph.adjacency[0] == ((1, 7), (3, 1))


def test_invalid_header():
    with pytest.raises(MetisFormatError):
        parse_metis_graph(["only\n", "1\n"])


def test_empty_input():
    with pytest.raises(MetisFormatError):
        parse_metis_graph([])


def test_truncated_file():
    with pytest.raises(MetisFormatError, match="vertex 1"):
        parse_metis_graph(["3 1", "2"])


def test_extra_lines_ignored():
    graph = parse_metis_graph(["1 0", "", "9 9 9"])
    assert graph.adjacency == ((),)


def test_read_metis_graph_round_trip(tmp_path):
    path = tmp_path / "g.graph"
    path.write_text("2 1\n2\n1\n")
    graph = read_metis_graph(path)
    assert graph == MetisGraph(2, 1, (((1, 1),), ((0, 1),)))
    assert all(
        0 <= neighbor < graph.num_vertices
        for row in graph.adjacency
        for neighbor, _ in row
    )