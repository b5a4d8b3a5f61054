"""
Transaction store: the read-only collection of input transactions.
"""
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Tuple

from apriori_rules.rule_mining.items import ItemDictionary
from apriori_rules.rule_mining.itemset import Itemset


class TransactionStore:
    """
    Immutable collection of transaction itemsets.

    Canonical keys are computed once at construction so support counting is
    a single AND per transaction.
    """

    def __init__(self, transactions: Iterable[Itemset] = ()):
        self._transactions: Tuple[Itemset, ...] = tuple(t.copy() for t in transactions)
        self._keys: Tuple[int, ...] = tuple(t.canonical_key() for t in self._transactions)

    @property
    def keys(self) -> Tuple[int, ...]:
        return self._keys

    def __len__(self):
        return len(self._transactions)

    def __iter__(self) -> Iterator[Itemset]:
        # hand out copies so callers cannot mutate stored transactions
        return (t.copy() for t in self._transactions)

    def __getitem__(self, index) -> Itemset:
        return self._transactions[index].copy()

    def __repr__(self):
        return f"TransactionStore(size={len(self._transactions)})"


@dataclass
class TransactionData:
    """Item dictionary and transaction store built together from one source."""
    items: ItemDictionary = field(default_factory=ItemDictionary)
    transactions: TransactionStore = field(default_factory=TransactionStore)

    def labels_of(self, itemset: Itemset) -> List[str]:
        """Member labels of itemset in position order."""
        return [self.items.label_of(position) for position in itemset.members()]

    def itemset_of(self, labels: Iterable[str]) -> Itemset:
        return Itemset(self.items.position_of(label) for label in labels)
