import pytest

from edge import Edge


def test_new_edge_has_no_flow():
    e = Edge(4)
    assert e.get_capacity() == 4
    assert e.get_flow() == 0
    assert e.remaining_capacity() == 4


def test_default_capacity_is_zero():
    assert Edge().get_capacity() == 0


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        Edge(-1)


def test_augment_and_cancel():
    e = Edge(3)
    e.augment(2)
    assert e.get_flow() == 2
    e.augment(-1)
    assert e.get_flow() == 1
    assert e.remaining_capacity() == 2


@pytest.mark.parametrize("delta", [4, -1])
def test_augment_out_of_bounds(delta):
    e = Edge(3)
    with pytest.raises(ValueError):
        e.augment(delta)
    assert e.get_flow() == 0


def test_str():
    e = Edge(5)
    e.set_f(2)
    assert str(e) == "c = 5 f = 2"


def test_repr_shows_capacity_and_flow():
    e = Edge(3)
    e.augment(1)
    assert repr(e) == "Edge(cap=3, flow=1)"
