"""
Level-wise Apriori mining over bitset itemsets.

The miner starts from one singleton candidate per known item, keeps the
candidates whose support reaches min_support, then joins every pair of
distinct frequent itemsets of the level into the next candidate level. The
loop stops when a filtered level comes out empty (the previous level is the
result) or after max_iterations joins, in which case an IterationCapWarning
is issued and the last non-empty level is returned as-is.

Rules are derived from the final frequent level by RuleGenerator.
"""
import logging
import math
import time
import warnings
from typing import Dict, List, Tuple, Any, Optional

from tqdm.auto import tqdm

from apriori_rules.preprocessing.transactions import as_transaction_data
from apriori_rules.rule_mining.base import HybridMiner, MiningInput
from apriori_rules.rule_mining.exceptions import IterationCapWarning
from apriori_rules.rule_mining.frequency import FrequencyEngine
from apriori_rules.rule_mining.itemset import Itemset, union
from apriori_rules.rule_mining.rules import RuleGenerator, MAX_BITMASK_ITEMS
from apriori_rules.rule_mining.store import TransactionData

logger = logging.getLogger(__name__)

DEFAULT_MAX_ITERATIONS = 10


def _check_fraction(name: str, value: float) -> None:
    if value is None or not math.isfinite(value) or not 0 < value <= 1:
        raise ValueError(f"{name} must be a finite value in (0, 1], got {value!r}")


class AprioriMiner(HybridMiner):
    """
    Apriori frequent itemset and association rule miner.

    Can generate:
    - Frequent itemsets (the last non-empty level of the level loop)
    - Association rules derived from those itemsets
    """

    def __init__(
        self,
        min_support: float = 0.5,
        min_confidence: float = 0.7,
        min_lift: Optional[float] = None,
        max_items: int = None,
        max_iterations: int = DEFAULT_MAX_ITERATIONS,
        max_rule_items: int = MAX_BITMASK_ITEMS,
        show_progress: bool = False,
        **kwargs
    ):
        """
        Initialize Apriori miner.

        Args:
            min_support: Minimum support for an itemset to be frequent (inclusive)
            min_confidence: Rules need a confidence strictly above this value
            min_lift: Minimum lift of emitted rules (None = lift not filtered)
            max_items: Maximum number of items in a frequent itemset (None = unbounded)
            max_iterations: Maximum number of join iterations before giving up
            max_rule_items: Largest itemset whose subsets are enumerated by bitmask
            show_progress: Show a progress bar while filtering candidate levels
        """
        _check_fraction('min_support', min_support)
        _check_fraction('min_confidence', min_confidence)
        if min_lift is not None and (not math.isfinite(min_lift) or min_lift < 0):
            raise ValueError(f"min_lift must be a finite non-negative value, got {min_lift!r}")
        if not isinstance(max_iterations, int) or max_iterations < 1:
            raise ValueError(f"max_iterations must be a positive integer, got {max_iterations!r}")
        if max_items is not None and max_items < 1:
            raise ValueError(f"max_items must be a positive integer, got {max_items!r}")

        super().__init__(min_support, min_confidence, max_items, **kwargs)
        self.min_lift = min_lift
        self.max_iterations = max_iterations
        self.max_rule_items = max_rule_items
        self.show_progress = show_progress

    def _filter_level(self, candidates: List[Itemset], engine: FrequencyEngine, level: int) -> List[Itemset]:
        """Keep candidates meeting min_support; duplicates collapse after filtering."""
        if self.show_progress:
            candidates_iter = tqdm(candidates, desc=f"Filtering level {level}", unit="itemset")
        else:
            candidates_iter = candidates

        frequent = []
        seen = set()
        for candidate in candidates_iter:
            if self.max_items is not None and len(candidate) > self.max_items:
                continue
            if engine.support(candidate) < self.min_support:
                continue
            key = candidate.canonical_key()
            if key not in seen:
                seen.add(key)
                frequent.append(candidate)
        return frequent

    @staticmethod
    def _join_level(frequent: List[Itemset]) -> List[Itemset]:
        """Union every unordered pair of frequent itemsets with different keys."""
        keys = [itemset.canonical_key() for itemset in frequent]
        candidates = []
        for i in range(len(frequent)):
            for j in range(i + 1, len(frequent)):
                if keys[i] == keys[j]:
                    continue
                candidates.append(union(frequent[i], frequent[j]))
        return candidates

    def find_frequent_itemsets(
        self,
        data: TransactionData,
        engine: FrequencyEngine = None
    ) -> Tuple[List[Itemset], Dict[str, Any]]:
        """
        Run the level loop.

        Args:
            data: Item dictionary and transaction store
            engine: Support counter to use (a fresh one is created if omitted)

        Returns:
            Tuple of (frequent, stats) where frequent is the last non-empty
            frequent level and stats describes the run (iterations, converged,
            warning, num_candidates)
        """
        engine = engine or FrequencyEngine(data.transactions)

        candidates = [Itemset([position]) for position in range(data.items.count())]
        num_candidates = len(candidates)
        frequent = self._filter_level(candidates, engine, level=1)
        logger.info("Level 1: %d candidates, %d frequent", len(candidates), len(frequent))

        result = frequent
        converged = not frequent
        iterations = 0

        while not converged and iterations < self.max_iterations:
            iterations += 1
            candidates = self._join_level(result)
            num_candidates += len(candidates)
            frequent = self._filter_level(candidates, engine, level=iterations + 1)
            logger.info("Level %d: %d candidates, %d frequent",
                        iterations + 1, len(candidates), len(frequent))

            if not frequent:
                converged = True
                break
            result = frequent

        warning = None
        if not converged:
            warning = (f"Maximum iterations reached ({self.max_iterations}); "
                       f"returning the last frequent level found")
            warnings.warn(warning, IterationCapWarning, stacklevel=2)

        stats = {
            'iterations': iterations,
            'converged': converged,
            'warning': warning,
            'num_candidates': num_candidates,
            'support_evaluations': engine.evaluations
        }
        return result, stats

    def mine(self, data: MiningInput) -> Tuple[List[Dict[str, Any]], Dict[str, Any]]:
        """
        Mine frequent itemsets and the rules derived from each of them.

        Args:
            data: Transactions as TransactionData, a list of label lists,
                  or a DataFrame of categorical features

        Returns:
            Tuple of (results, stats) where results holds one dict per
            frequent itemset with keys 'items', 'support' and 'rules'
        """
        start_time = time.time()
        data = as_transaction_data(data)
        engine = FrequencyEngine(data.transactions)

        frequent, run_stats = self.find_frequent_itemsets(data, engine)

        generator = RuleGenerator(
            data.items,
            engine,
            min_confidence=self.min_confidence,
            min_lift=self.min_lift,
            max_rule_items=self.max_rule_items
        )

        results = []
        for itemset in frequent:
            rules = generator.generate(itemset)
            results.append({
                'items': data.labels_of(itemset),
                'support': engine.support(itemset),
                'rules': [rule.to_dict() for rule in rules]
            })

        all_rules = [rule for result in results for rule in result['rules']]
        stats = self._base_stats(data, start_time)
        stats.update(run_stats)
        stats.update({
            'num_itemsets': len(results),
            'num_rules': len(all_rules),
            'evaluated_rules': generator.evaluated_rules,
            'degenerate_rules': generator.degenerate_rules,
            'average_support': sum(r['support'] for r in results) / len(results) if results else 0.0,
            'average_confidence': sum(r['confidence'] for r in all_rules) / len(all_rules) if all_rules else 0.0,
            'average_lift': sum(r['lift'] for r in all_rules) / len(all_rules) if all_rules else 0.0,
            'mode': 'both'
        })
        return results, stats

    def mine_itemsets(self, data: MiningInput) -> Tuple[List[Dict[str, Any]], Dict[str, Any]]:
        """
        Mine frequent itemsets.

        Args:
            data: Transactions as TransactionData, a list of label lists,
                  or a DataFrame of categorical features

        Returns:
            Tuple of (itemsets, stats)
        """
        start_time = time.time()
        data = as_transaction_data(data)
        engine = FrequencyEngine(data.transactions)

        frequent, run_stats = self.find_frequent_itemsets(data, engine)

        itemsets = [
            {'items': data.labels_of(itemset), 'support': engine.support(itemset)}
            for itemset in frequent
        ]

        stats = self._base_stats(data, start_time)
        stats.update(run_stats)
        stats.update({
            'num_itemsets': len(itemsets),
            'average_support': sum(i['support'] for i in itemsets) / len(itemsets) if itemsets else 0.0,
            'mode': 'itemsets'
        })
        return itemsets, stats

    def mine_rules(self, data: MiningInput) -> Tuple[List[Dict[str, Any]], Dict[str, Any]]:
        """
        Mine association rules from the final frequent level.

        Args:
            data: Transactions as TransactionData, a list of label lists,
                  or a DataFrame of categorical features

        Returns:
            Tuple of (rules, stats)
        """
        results, stats = self.mine(data)

        rules = []
        for result in results:
            for rule in result['rules']:
                rules.append({**rule, 'itemset': result['items']})

        stats.update({
            'num_rules': len(rules),
            'average_support': sum(r['support'] for r in rules) / len(rules) if rules else 0.0,
            'average_confidence': sum(r['confidence'] for r in rules) / len(rules) if rules else 0.0,
            'average_lift': sum(r['lift'] for r in rules) / len(rules) if rules else 0.0,
            'mode': 'rules'
        })
        return rules, stats

    def _base_stats(self, data: TransactionData, start_time: float) -> Dict[str, Any]:
        return {
            'num_transactions': len(data.transactions),
            'num_items': data.items.count(),
            'execution_time': time.time() - start_time,
            'algorithm': 'Apriori',
            'max_iterations': self.max_iterations
        }

    def __repr__(self):
        return (f"AprioriMiner(min_support={self.min_support}, "
                f"min_confidence={self.min_confidence}, min_lift={self.min_lift}, "
                f"max_items={self.max_items}, max_iterations={self.max_iterations})")
