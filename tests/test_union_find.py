import pytest

from union_find import WeightedQuickUnionUF


def test_starts_as_singletons():
    uf = WeightedQuickUnionUF(5)
    assert uf.get_count() == 5
    assert len(uf) == 5
    assert all(uf.find(p) == p for p in range(5))
    assert not uf.connected(0, 4)


def test_union_merges_components():
    uf = WeightedQuickUnionUF(6)
    uf.union(0, 1)
    uf.union(2, 3)
    uf.union(1, 3)

    assert uf.get_count() == 3
    assert uf.connected(0, 2)
    assert uf.connected(1, 3)
    assert not uf.connected(0, 4)

    # already connected, nothing changes
    uf.union(0, 3)
    assert uf.get_count() == 3


def test_union_links_q_below_p_on_ties():
    uf = WeightedQuickUnionUF(3)
    uf.union(0, 1)
    assert uf.find(1) == 0

    # the smaller tree goes below the larger one
    uf.union(2, 1)
    assert uf.find(2) == 0


def test_find_compresses_path():
    uf = WeightedQuickUnionUF(4)
    uf.union(0, 1)
    uf.union(2, 3)
    uf.union(0, 2)
    assert uf.parent[3] == 2

    assert uf.find(3) == 0
    assert uf.parent[3] == 0


def test_invalid_arguments():
    with pytest.raises(ValueError):
        WeightedQuickUnionUF(0)

    uf = WeightedQuickUnionUF(3)
    with pytest.raises(IndexError):
        uf.find(3)
    with pytest.raises(IndexError):
        uf.union(-1, 0)
