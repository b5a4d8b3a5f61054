"""Support counting tests."""

import pytest

from apriori_rules import FrequencyEngine, Itemset, TransactionStore, support


def test_support_of_singletons(basket_data) -> None:
    for label in ["A", "B", "C"]:
        itemset = basket_data.itemset_of([label])
        assert support(itemset, basket_data.transactions) == pytest.approx(0.75)


def test_support_of_pairs_and_triple(basket_data) -> None:
    store = basket_data.transactions
    assert support(basket_data.itemset_of(["A", "B"]), store) == pytest.approx(0.5)
    assert support(basket_data.itemset_of(["A", "C"]), store) == pytest.approx(0.5)
    assert support(basket_data.itemset_of(["B", "C"]), store) == pytest.approx(0.5)
    assert support(basket_data.itemset_of(["A", "B", "C"]), store) == pytest.approx(0.25)


def test_support_in_unit_interval(basket_data) -> None:
    store = basket_data.transactions
    for positions in [[0], [1, 2], [0, 1, 2], [5], [0, 9]]:
        assert 0.0 <= support(Itemset(positions), store) <= 1.0


def test_empty_itemset_has_full_support(basket_data) -> None:
    assert support(Itemset(), basket_data.transactions) == 1.0


def test_empty_store_has_zero_support() -> None:
    store = TransactionStore()
    assert support(Itemset([0]), store) == 0.0
    assert support(Itemset(), store) == 0.0


def test_engine_memoizes_by_key(basket_data) -> None:
    engine = FrequencyEngine(basket_data.transactions)
    assert engine.support(Itemset([0, 1])) == pytest.approx(0.5)
    assert engine.support(Itemset([1, 0])) == pytest.approx(0.5)
    assert engine.evaluations == 1
    engine.support(Itemset([2]))
    assert engine.evaluations == 2


def test_store_hands_out_copies(basket_data) -> None:
    store = basket_data.transactions
    first = store[0]
    first.set_bit(2)
    assert not store[0].has_bit(2)
    assert support(basket_data.itemset_of(["A", "B", "C"]), store) == pytest.approx(0.25)
