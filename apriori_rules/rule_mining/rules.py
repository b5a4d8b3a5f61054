"""
Association rule derivation from frequent itemsets.

Every subset of a frequent itemset with at least two members is split at
each prefix/suffix boundary into ``antecedent -> consequent`` and scored by
confidence and lift.
"""
import logging
from dataclasses import dataclass
from itertools import combinations
from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple

from apriori_rules.rule_mining.frequency import FrequencyEngine
from apriori_rules.rule_mining.items import ItemDictionary
from apriori_rules.rule_mining.itemset import Itemset, union

logger = logging.getLogger(__name__)

# Largest itemset walked in bitmask order. Both walks are lazy but cost 2^k
# iterations; above this size subsets are produced by size with combinations
MAX_BITMASK_ITEMS = 20


@dataclass(frozen=True)
class Rule:
    antecedent: Tuple[str, ...]
    consequent: Tuple[str, ...]
    support: float
    confidence: float
    lift: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            'antecedent': list(self.antecedent),
            'consequent': list(self.consequent),
            'support': self.support,
            'confidence': self.confidence,
            'lift': self.lift
        }

    def __str__(self):
        return f"{' '.join(self.antecedent)} -> {' '.join(self.consequent)}"


def iter_subsets(elements: Sequence, max_bitmask_items: int = MAX_BITMASK_ITEMS) -> Iterator[list]:
    """
    Yield all 2^k subsets of elements, each keeping the input order.

    Args:
        elements: Ordered elements to draw subsets from
        max_bitmask_items: Largest k enumerated with a bitmask; bigger inputs
            are enumerated lazily by subset size instead

    Yields:
        Lists of elements, including the empty list and the full sequence
    """
    k = len(elements)
    if k <= max_bitmask_items:
        for mask in range(1 << k):
            yield [elements[i] for i in range(k) if mask >> i & 1]
    else:
        logger.warning("Enumerating 2^%d subsets of a %d-item set", k, k)
        for size in range(k + 1):
            for subset in combinations(elements, size):
                yield list(subset)


def iter_splits(subset: Sequence) -> Iterator[Tuple[list, list]]:
    """Yield (prefix, suffix) pairs for split points 1..len-1."""
    for p in range(1, len(subset)):
        yield list(subset[:p]), list(subset[p:])


class RuleGenerator:
    """
    Derive scored rules from frequent itemsets.

    A rule is emitted when its confidence is strictly greater than
    min_confidence. When min_lift is given, its lift must also be at least
    min_lift; with min_lift=None lift is reported but not filtered on.
    Rules whose antecedent or consequent has zero support are rejected and
    counted in ``degenerate_rules``.
    """

    def __init__(
        self,
        items: ItemDictionary,
        engine: FrequencyEngine,
        min_confidence: float,
        min_lift: Optional[float] = None,
        max_rule_items: int = MAX_BITMASK_ITEMS
    ):
        self.items = items
        self.engine = engine
        self.min_confidence = min_confidence
        self.min_lift = min_lift
        self.max_rule_items = max_rule_items
        self.evaluated_rules = 0
        self.degenerate_rules = 0

    def score(self, antecedent: Itemset, consequent: Itemset) -> Optional[Tuple[float, float, float]]:
        """
        Compute (support, confidence, lift) of antecedent -> consequent.

        Returns None when the antecedent or consequent support is zero.
        """
        ant_support = self.engine.support(antecedent)
        cons_support = self.engine.support(consequent)
        if ant_support == 0 or cons_support == 0:
            return None
        rule_support = self.engine.support(union(antecedent, consequent))
        confidence = rule_support / ant_support
        lift = confidence / cons_support
        return rule_support, confidence, lift

    def accepts(self, confidence: float, lift: float) -> bool:
        if confidence <= self.min_confidence:
            return False
        if self.min_lift is not None and lift < self.min_lift:
            return False
        return True

    def generate(self, itemset: Itemset) -> List[Rule]:
        """All qualifying rules derived from the subsets of itemset."""
        positions = list(itemset.members())
        rules = []
        for subset in iter_subsets(positions, self.max_rule_items):
            if len(subset) < 2:
                continue
            for ant_positions, cons_positions in iter_splits(subset):
                self.evaluated_rules += 1
                scores = self.score(Itemset(ant_positions), Itemset(cons_positions))
                if scores is None:
                    self.degenerate_rules += 1
                    continue
                rule_support, confidence, lift = scores
                if not self.accepts(confidence, lift):
                    continue
                rules.append(Rule(
                    antecedent=tuple(self.items.label_of(p) for p in ant_positions),
                    consequent=tuple(self.items.label_of(p) for p in cons_positions),
                    support=rule_support,
                    confidence=confidence,
                    lift=lift
                ))
        return rules
