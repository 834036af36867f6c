import pytest

from load_data import load_matching_instance


def test_load_matching_instance(tmp_path):
    path = tmp_path / "friends.csv"
    path.write_text("workaholic,procrastinator\nw2,p1\nw1,p1\nw1,p2\n")

    workaholics, procrastinators, friendships = load_matching_instance(str(path))

    assert workaholics == ["w1", "w2"]
    assert procrastinators == ["p1", "p2"]
    assert friendships == [(1, 0), (0, 0), (0, 1)]


def test_custom_columns_and_missing_values(tmp_path):
    path = tmp_path / "friends.csv"
    path.write_text("a,b\n1,7\n2,\n3,8\n")

    workaholics, procrastinators, friendships = load_matching_instance(
        str(path), workaholic_col="a", procrastinator_col="b"
    )

    assert workaholics == [1, 3]
    assert procrastinators == [7.0, 8.0]
    assert friendships == [(0, 0), (1, 1)]


def test_missing_columns(tmp_path):
    path = tmp_path / "friends.csv"
    path.write_text("x,y\n1,2\n")
    with pytest.raises(ValueError):
        load_matching_instance(str(path))


def test_sparse_extra_column_keeps_rows(tmp_path):
    path = tmp_path / "friends.csv"
    path.write_text("workaholic,procrastinator,note\nw1,p1,\nw2,p2,x\n")

    workaholics, procrastinators, friendships = load_matching_instance(str(path))

    assert workaholics == ["w1", "w2"]
    assert procrastinators == ["p1", "p2"]
    assert friendships == [(0, 0), (1, 1)]
