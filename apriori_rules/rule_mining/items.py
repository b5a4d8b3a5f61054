"""
Item dictionary: maps item labels to dense bit positions and back.
"""
from typing import Dict, List

from apriori_rules.rule_mining.exceptions import UnknownItemError


class ItemDictionary:
    """
    Bidirectional mapping between item labels and bit positions.

    Positions are handed out in first-seen order (0, 1, 2, ...) and are
    never reused or reordered.
    """

    def __init__(self, labels: List[str] = None):
        self._positions: Dict[str, int] = {}
        self._labels: List[str] = []
        for label in labels or []:
            self.add_item(label)

    def add_item(self, label: str) -> int:
        """Insert label if absent and return its position."""
        position = self._positions.get(label)
        if position is None:
            position = len(self._labels)
            self._positions[label] = position
            self._labels.append(label)
        return position

    def position_of(self, label: str) -> int:
        try:
            return self._positions[label]
        except KeyError:
            raise UnknownItemError(f"Unknown item label: {label!r}") from None

    def label_of(self, position: int) -> str:
        if not 0 <= position < len(self._labels):
            raise UnknownItemError(f"No item at position {position}")
        return self._labels[position]

    def all_labels(self) -> List[str]:
        """All labels ordered by position."""
        return list(self._labels)

    def count(self) -> int:
        return len(self._labels)

    def __len__(self):
        return len(self._labels)

    def __contains__(self, label):
        return label in self._positions

    def __repr__(self):
        return f"ItemDictionary(count={len(self._labels)})"
