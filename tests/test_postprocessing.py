"""Rule and itemset filter tests."""

from apriori_rules.postprocessing.rule import (
    filter_itemsets,
    filter_rules,
    filter_rules_by_pattern,
)

RULES = [
    {'antecedent': ['bread'], 'consequent': ['butter'], 'support': 0.4, 'confidence': 0.9, 'lift': 1.4},
    {'antecedent': ['bread', 'milk'], 'consequent': ['eggs'], 'support': 0.2, 'confidence': 0.75, 'lift': 0.9},
    {'antecedent': ['Milk'], 'consequent': ['butter'], 'support': 0.3, 'confidence': 0.8, 'lift': 1.1},
]

ITEMSETS = [
    {'items': ['bread'], 'support': 0.6},
    {'items': ['bread', 'butter'], 'support': 0.4},
    {'items': ['bread', 'butter', 'milk'], 'support': 0.2},
]


def test_filter_rules_inclusive() -> None:
    assert len(filter_rules(RULES, 'confidence', 0.8)) == 2
    assert len(filter_rules(RULES, 'lift', 1.0)) == 2
    assert filter_rules(RULES, 'conviction', 0.0) == []


def test_filter_by_consequent() -> None:
    kept = filter_rules_by_pattern(RULES, consequent_contains=["butter"])
    assert [r['antecedent'] for r in kept] == [['bread'], ['Milk']]


def test_filter_by_antecedent_case_insensitive() -> None:
    kept = filter_rules_by_pattern(RULES, antecedent_contains=["milk"])
    assert len(kept) == 2


def test_filter_all_patterns_must_match() -> None:
    kept = filter_rules_by_pattern(RULES, antecedent_contains=['bread', 'milk'])
    assert [r['consequent'] for r in kept] == [['eggs']]
    kept = filter_rules_by_pattern(RULES, antecedent_contains=['bread', 'milk'], match_any=True)
    assert len(kept) == 3


def test_filter_excludes() -> None:
    kept = filter_rules_by_pattern(RULES, antecedent_excludes=['milk'], consequent_excludes=['eggs'])
    assert kept == [RULES[0]]


def test_filter_itemsets_by_support() -> None:
    kept, stats = filter_itemsets(ITEMSETS, 'support', 0.4)
    assert len(kept) == 2
    assert stats == {'num_itemsets': 2, 'average_support': 0.5}


def test_filter_itemsets_by_size() -> None:
    kept, stats = filter_itemsets(ITEMSETS, 'size', 2)
    assert [len(i['items']) for i in kept] == [2, 3]
    assert stats['num_itemsets'] == 2


def test_filter_itemsets_empty() -> None:
    kept, stats = filter_itemsets(ITEMSETS, 'support', 0.9)
    assert kept == []
    assert stats == {'num_itemsets': 0, 'average_support': 0.0}
