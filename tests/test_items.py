"""Item dictionary tests."""

import pytest

from apriori_rules import ItemDictionary, UnknownItemError


def test_positions_follow_first_seen_order() -> None:
    items = ItemDictionary()
    assert [items.add_item(label) for label in ["milk", "bread", "eggs"]] == [0, 1, 2]
    assert items.count() == 3


def test_readding_keeps_position_and_count() -> None:
    items = ItemDictionary(["milk", "bread"])
    assert items.add_item("milk") == 0
    assert items.add_item("eggs") == 2
    assert items.add_item("bread") == 1
    assert items.count() == 3
    assert len(items) == 3


def test_forward_and_reverse_lookup() -> None:
    items = ItemDictionary(["x", "y", "z"])
    for label in ["x", "y", "z"]:
        assert items.label_of(items.position_of(label)) == label


def test_all_labels_ordered_by_position() -> None:
    labels = ["zeta", "alpha", "mu", "beta"]
    items = ItemDictionary(labels)
    items.add_item("alpha")
    assert items.all_labels() == labels


def test_label_of_unknown_position_raises() -> None:
    items = ItemDictionary(["a"])
    with pytest.raises(UnknownItemError):
        items.label_of(1)
    with pytest.raises(KeyError):
        items.label_of(-1)


def test_position_of_unknown_label_raises() -> None:
    items = ItemDictionary(["a"])
    with pytest.raises(UnknownItemError, match="'b'"):
        items.position_of("b")
    assert "b" not in items
    assert "a" in items
