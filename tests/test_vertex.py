import pytest

from vertex import Vertex


def test_ids_are_sequential_and_labelled():
    a = Vertex("a")
    b = Vertex()
    assert b.id == a.id + 1
    assert a.label == f"{a.id} - a"
    assert b.label == f"{b.id} - "


def test_identity_not_content():
    a, b = Vertex("x"), Vertex("x")
    assert a != b
    assert len({a, b}) == 2


def test_add_edge_and_lookup():
    a, b, c = Vertex("a"), Vertex("b"), Vertex("c")
    edge = a.add_edge(b, 3)
    assert a.get_edge(b) is edge
    assert a.has_successor(b)
    assert not a.has_successor(c)
    assert a.get_successors() == {b}
    assert a.get_edge(c) is None
    assert b.get_edge(a) is None


def test_add_edge_replaces():
    a, b = Vertex(), Vertex()
    a.add_edge(b, 3)
    a.add_edge(b, 7)
    assert a.get_edge(b).get_capacity() == 7
    assert len(a.get_successors()) == 1


def test_add_single_has_unit_capacity():
    a, b = Vertex(), Vertex()
    assert a.add_single(b).get_capacity() == 1


def test_require_edge_fails_clearly():
    a, b = Vertex("a"), Vertex("b")
    with pytest.raises(KeyError, match="no such edge"):
        a.require_edge(b)
    with pytest.raises(KeyError, match="no such residual edge"):
        a.require_res_edge(b)


def test_residual_map_is_separate():
    a, b = Vertex(), Vertex()
    a.add_edge(b, 2)
    a.add_res_edge(b, 5)
    assert a.get_res_successors() == {b}
    assert a.get_res_edge(b).get_capacity() == 5
    assert a.get_edge(b).get_capacity() == 2


def test_str_lists_outgoing_edges():
    a, b = Vertex("a"), Vertex("b")
    a.add_edge(b, 2)
    assert str(a) == "{ " + a.label + " : " + b.label + " - c = 2 f = 0 }"
