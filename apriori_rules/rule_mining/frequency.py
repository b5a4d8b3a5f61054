"""
Support counting against a transaction store.
"""
import logging
from typing import Dict

from apriori_rules.rule_mining.itemset import Itemset
from apriori_rules.rule_mining.store import TransactionStore

logger = logging.getLogger(__name__)


def support(itemset: Itemset, transactions: TransactionStore) -> float:
    """
    Fraction of transactions that contain every member of itemset.

    An empty store gives 0.0 for any itemset. The empty itemset is contained
    in every transaction, so its support over a non-empty store is 1.0.
    """
    total = len(transactions)
    if total == 0:
        logger.debug("Support requested over an empty transaction store")
        return 0.0
    key = itemset.canonical_key()
    frequency = sum(1 for t_key in transactions.keys if t_key & key == key)
    return frequency / total


class FrequencyEngine:
    """Support counter that memoizes results by canonical key for one run."""

    def __init__(self, transactions: TransactionStore):
        self.transactions = transactions
        self._cache: Dict[int, float] = {}

    def support(self, itemset: Itemset) -> float:
        key = itemset.canonical_key()
        value = self._cache.get(key)
        if value is None:
            value = support(itemset, self.transactions)
            self._cache[key] = value
        return value

    @property
    def evaluations(self) -> int:
        """Number of distinct itemsets whose support was counted."""
        return len(self._cache)
