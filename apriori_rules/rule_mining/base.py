"""
Base interfaces for rule mining algorithms.
"""
from abc import ABC, abstractmethod
from typing import Dict, List, Tuple, Any, Iterable, Sequence, Union
import pandas as pd

from apriori_rules.rule_mining.store import TransactionData

# Anything a miner accepts as its input transactions
MiningInput = Union[TransactionData, pd.DataFrame, Iterable[Sequence[str]]]


class FrequentItemsetMiner(ABC):
    """
    Base class for frequent itemset mining algorithms.

    These algorithms discover frequent co-occurring item combinations
    without necessarily forming rules (no antecedent -> consequent structure).
    """

    def __init__(self, min_support: float = 0.01, **kwargs):
        self.min_support = min_support
        self.config = kwargs

    @abstractmethod
    def mine_itemsets(self, data: MiningInput) -> Tuple[List[Dict[str, Any]], Dict[str, Any]]:
        """
        Mine frequent itemsets from data.

        Args:
            data: Transactions as TransactionData, a list of label lists,
                  or a DataFrame of categorical features

        Returns:
            Tuple of (itemsets, stats) where:
                itemsets: List of dicts with keys 'items' (list of labels) and 'support' (float)
                stats: Dict with mining statistics (execution_time, num_itemsets, etc.)
        """
        pass


class AssociationRuleMiner(ABC):
    """
    Base class for association rule mining algorithms.

    These algorithms discover rules in the form: antecedent -> consequent
    with quality metrics (support, confidence, lift).
    """

    def __init__(self, min_support: float = 0.01, min_confidence: float = 0.5, **kwargs):
        self.min_support = min_support
        self.min_confidence = min_confidence
        self.config = kwargs

    @abstractmethod
    def mine_rules(self, data: MiningInput) -> Tuple[List[Dict[str, Any]], Dict[str, Any]]:
        """
        Mine association rules from data.

        Args:
            data: Transactions as TransactionData, a list of label lists,
                  or a DataFrame of categorical features

        Returns:
            Tuple of (rules, stats) where:
                rules: List of dicts with keys:
                    - 'antecedent': list of labels (left-hand side)
                    - 'consequent': list of labels (right-hand side)
                    - 'support': float
                    - 'confidence': float
                    - 'lift': float
                stats: Dict with mining statistics
        """
        pass


class HybridMiner(FrequentItemsetMiner, AssociationRuleMiner):
    """
    Base class for algorithms that can produce both frequent itemsets and association rules.

    Important: max_items bounds the total number of items in a frequent
    itemset, and therefore also the size of any rule derived from it.
    """

    def __init__(
        self,
        min_support: float = 0.01,
        min_confidence: float = 0.5,
        max_items: int = None,
        **kwargs
    ):
        """
        Initialize hybrid miner with both support and confidence thresholds.

        Args:
            min_support: Minimum support threshold
            min_confidence: Minimum confidence threshold
            max_items: Maximum number of items in an itemset (None = unbounded)
            **kwargs: Additional configuration
        """
        # Call AssociationRuleMiner.__init__ which has both parameters
        AssociationRuleMiner.__init__(self, min_support, min_confidence, **kwargs)
        self.max_items = max_items

    @abstractmethod
    def mine_itemsets(self, data: MiningInput) -> Tuple[List[Dict[str, Any]], Dict[str, Any]]:
        """Mine frequent itemsets."""
        pass

    @abstractmethod
    def mine_rules(self, data: MiningInput) -> Tuple[List[Dict[str, Any]], Dict[str, Any]]:
        """Mine association rules."""
        pass
