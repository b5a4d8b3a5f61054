"""Bitset itemset tests."""

import types

import pytest

from apriori_rules import Itemset, union


def test_set_and_has_bit() -> None:
    itemset = Itemset()
    itemset.set_bit(3)
    itemset.set_bit(11)
    assert itemset.has_bit(3)
    assert itemset.has_bit(11)
    assert not itemset.has_bit(4)
    assert itemset.storage_blocks == 2


def test_has_bit_beyond_storage_is_false() -> None:
    itemset = Itemset([1])
    assert not itemset.has_bit(500)
    assert itemset.storage_blocks == 1


def test_negative_position_rejected() -> None:
    with pytest.raises(ValueError):
        Itemset().set_bit(-1)


def test_union_with_is_bitwise_or() -> None:
    a = Itemset([0, 5, 9])
    b = Itemset([1, 5, 30])
    expected = {p: a.has_bit(p) or b.has_bit(p) for p in range(40)}
    a.union_with(b)
    assert {p: a.has_bit(p) for p in range(40)} == expected


def test_union_with_grows_receiver_only() -> None:
    small = Itemset([1])
    large = Itemset([20])
    small.union_with(large)
    assert small.storage_blocks == 3
    assert list(small.members()) == [1, 20]
    assert list(large.members()) == [20]


def test_union_returns_new_itemset() -> None:
    a = Itemset([0])
    b = Itemset([2])
    c = union(a, b)
    assert list(c.members()) == [0, 2]
    assert list(a.members()) == [0]


def test_equality_by_membership() -> None:
    a = Itemset([2])
    b = Itemset([2])
    b.union_with(Itemset([2]))
    grown = Itemset([2]).union_with(Itemset([17]))
    assert a == b
    assert a.equals(b)
    assert a != grown
    assert hash(a) == hash(b)
    assert len({a, b, grown}) == 2


def test_members_ascending_and_restartable() -> None:
    itemset = Itemset([12, 0, 7, 64])
    members = itemset.members()
    assert isinstance(members, types.GeneratorType)
    assert list(members) == [0, 7, 12, 64]
    assert list(itemset.members()) == [0, 7, 12, 64]
    assert len(itemset) == 4


def test_empty_itemset() -> None:
    empty = Itemset()
    assert not empty
    assert len(empty) == 0
    assert empty.canonical_key() == 0
    assert list(empty.members()) == []


def test_subset() -> None:
    assert Itemset([1, 3]).is_subset_of(Itemset([1, 2, 3]))
    assert not Itemset([1, 4]).is_subset_of(Itemset([1, 2, 3]))
    assert Itemset().is_subset_of(Itemset([1]))


def test_canonical_key_orders_itemsets() -> None:
    itemsets = [Itemset([3]), Itemset([0]), Itemset([1, 0])]
    assert [list(i.members()) for i in sorted(itemsets)] == [[0], [0, 1], [3]]


# ---------------------------------------------------------------------------
# Wide item spaces: positions past any native integer width
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("position", [63, 64, 65, 127, 128, 1000])
def test_wide_positions_round_trip(position: int) -> None:
    itemset = Itemset([position])
    assert itemset.has_bit(position)
    assert not itemset.has_bit(position % 64 if position >= 64 else position + 1)
    assert list(itemset.members()) == [position]


def test_wide_positions_do_not_alias() -> None:
    # positions 6, 70 and 134 collide under a 64-bit fold
    low, mid, high = Itemset([6]), Itemset([70]), Itemset([134])
    assert low != mid
    assert mid != high
    assert len({low.canonical_key(), mid.canonical_key(), high.canonical_key()}) == 3


def test_wide_union_and_equality() -> None:
    a = Itemset([2, 100])
    b = Itemset([70, 200])
    a.union_with(b)
    assert [p for p in range(256) if a.has_bit(p)] == [2, 70, 100, 200]
    assert a == Itemset([200, 100, 70, 2])
    assert a != Itemset([2, 70, 100])
