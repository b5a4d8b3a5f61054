"""
Bitset representation of an itemset.

Each item position maps to one bit of a growable ``bytearray`` (bit ``i``
lives in block ``i // 8`` at offset ``i % 8``). The canonical key folds every
block into a Python ``int``, so identity is not limited by a native integer
width no matter how many items exist.
"""
from typing import Iterable, Iterator

BLOCK_BITS = 8


class Itemset:
    """A set of item positions backed by a growable bit-vector."""

    __slots__ = ('_blocks',)

    def __init__(self, positions: Iterable[int] = ()):
        self._blocks = bytearray()
        for position in positions:
            self.set_bit(position)

    @classmethod
    def from_positions(cls, positions: Iterable[int]) -> 'Itemset':
        return cls(positions)

    def set_bit(self, position: int) -> None:
        """Mark position as a member, growing storage to cover it."""
        if position < 0:
            raise ValueError(f"Item position must be non-negative, got {position}")
        block_no, shift = divmod(position, BLOCK_BITS)
        if block_no >= len(self._blocks):
            self._blocks.extend(bytes(block_no + 1 - len(self._blocks)))
        self._blocks[block_no] |= 1 << shift

    def has_bit(self, position: int) -> bool:
        if position < 0:
            return False
        block_no, shift = divmod(position, BLOCK_BITS)
        if block_no >= len(self._blocks):
            return False
        return bool(self._blocks[block_no] & (1 << shift))

    def union_with(self, other: 'Itemset') -> 'Itemset':
        """OR other into this itemset in place. Returns self."""
        blocks = other._blocks
        if len(blocks) > len(self._blocks):
            self._blocks.extend(bytes(len(blocks) - len(self._blocks)))
        for i, block in enumerate(blocks):
            self._blocks[i] |= block
        return self

    def canonical_key(self) -> int:
        """Full bit-vector as a non-negative integer; trailing empty blocks do not matter."""
        return int.from_bytes(self._blocks, 'little')

    def equals(self, other: 'Itemset') -> bool:
        return self.canonical_key() == other.canonical_key()

    def is_subset_of(self, other: 'Itemset') -> bool:
        key = self.canonical_key()
        return key & other.canonical_key() == key

    def members(self) -> Iterator[int]:
        """Member positions in ascending order."""
        for block_no, block in enumerate(self._blocks):
            if not block:
                continue
            base = block_no * BLOCK_BITS
            for shift in range(BLOCK_BITS):
                if block & (1 << shift):
                    yield base + shift

    def copy(self) -> 'Itemset':
        clone = Itemset()
        clone._blocks = bytearray(self._blocks)
        return clone

    @property
    def storage_blocks(self) -> int:
        return len(self._blocks)

    def __len__(self):
        return bin(self.canonical_key()).count('1')

    def __bool__(self):
        return any(self._blocks)

    def __contains__(self, position):
        return self.has_bit(position)

    def __iter__(self):
        return self.members()

    def __eq__(self, other):
        if not isinstance(other, Itemset):
            return NotImplemented
        return self.equals(other)

    def __hash__(self):
        return hash(self.canonical_key())

    def __lt__(self, other):
        if not isinstance(other, Itemset):
            return NotImplemented
        return self.canonical_key() < other.canonical_key()

    def __repr__(self):
        return f"Itemset({list(self.members())})"


def union(first: Itemset, second: Itemset) -> Itemset:
    """New itemset holding the members of both arguments."""
    return first.copy().union_with(second)
