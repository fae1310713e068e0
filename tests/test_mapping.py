import pytest

from ssspgraph.mapping import NodeMapper


def test_round_trip_of_identifiers():
    mapper = NodeMapper()
    for node in [5, -3, 100000000, 0]:
        assert mapper.node_id(mapper.index(node)) == node


def test_repeated_identifier_keeps_its_index():
    mapper = NodeMapper()
    first = mapper.index(42)
    mapper.index(7)
    assert mapper.index(42) == first
    assert len(mapper) == 2


def test_first_index_is_zero():
    mapper = NodeMapper()
    assert mapper.index(99) == 0


def test_indices_are_consecutive():
    mapper = NodeMapper()
    ids = [10, 30, 20, 40]
    assert [mapper.index(node) for node in ids] == list(range(len(ids)))


def test_iteration_follows_first_appearance():
    mapper = NodeMapper()
    for node in [3, 1, 3, 2, 1]:
        mapper.index(node)
    assert list(mapper) == [3, 1, 2]


def test_contains_does_not_assign():
    mapper = NodeMapper()
    mapper.index(3)
    assert 3 in mapper
    assert 4 not in mapper
    assert len(mapper) == 1


@pytest.mark.parametrize("bad_index", [-1, 2, 50])
def test_node_id_out_of_range(bad_index):
    mapper = NodeMapper()
    mapper.index(1)
    mapper.index(2)
    with pytest.raises(IndexError):
        mapper.node_id(bad_index)