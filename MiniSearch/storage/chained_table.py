import math
from typing import Any, Callable, Iterator, List, NamedTuple, Optional

from ..errors import EmptyCollectionError

HASH_MULTIPLIER = 1871

_INT32_MASK = 0xFFFFFFFF
_INT32_SIGN = 0x80000000


def string_hash(key: str, buckets: int) -> int:
    """
    Hash a string into one of the table's buckets.

    Sums HASH_MULTIPLIER * code point over the characters, wrapping the
    accumulator as a signed 32-bit integer, then reduces it modulo the
    bucket count. Python's modulo keeps the result in [0, buckets) even when
    the wrapped sum is negative.

    Args:
        key: Title or term to hash
        buckets: Number of buckets in the table

    Returns:
        Bucket index
    """
    h = 0
    for ch in key:
        h = (h + HASH_MULTIPLIER * ord(ch)) & _INT32_MASK
    if h & _INT32_SIGN:
        h -= 1 << 32
    return h % buckets


class BucketStats(NamedTuple):
    """Distribution of chain lengths across a table's buckets."""
    buckets: int
    size: int
    min_length: int
    max_length: int
    mean: float
    stdev: float


class ChainNode:
    """Singly linked node holding one stored value."""

    __slots__ = ("value", "next")

    def __init__(self, value: Any, next_node: Optional["ChainNode"] = None):
        self.value = value
        self.next = next_node

    def __repr__(self) -> str:
        return f"ChainNode({self.value!r})"


class ChainedHashTable:
    """
    Fixed-size hash table resolving collisions with separate chaining.

    Values are located by a string key extracted with key_func. Chains are
    walked with loops, so a long chain never grows the call stack. The
    bucket array is never resized.
    """

    def __init__(self, buckets: int, key_func: Callable[[Any], str]):
        if buckets <= 0:
            raise ValueError("Bucket count must be positive")
        self._buckets: List[Optional[ChainNode]] = [None] * buckets
        self._key_func = key_func

    @property
    def bucket_count(self) -> int:
        return len(self._buckets)

    def bucket_index(self, key: str) -> int:
        return string_hash(key, len(self._buckets))

    def find(self, key: str) -> Optional[ChainNode]:
        """Return the first node whose value has the given key, or None."""
        node = self._buckets[self.bucket_index(key)]
        while node is not None:
            if self._key_func(node.value) == key:
                return node
            node = node.next
        return None

    def append(self, value: Any) -> ChainNode:
        """
        Link a new node holding value at the tail of its bucket's chain.
        Callers are responsible for checking that the key is not already present.
        """
        loc = self.bucket_index(self._key_func(value))
        new_node = ChainNode(value)
        node = self._buckets[loc]
        if node is None:
            self._buckets[loc] = new_node
            return new_node
        while node.next is not None:
            node = node.next
        node.next = new_node
        return new_node

    def remove(self, key: str) -> Optional[Any]:
        """
        Unlink the first node with the given key.

        Returns:
            The removed value, or None when the key is absent
        """
        loc = self.bucket_index(key)
        prev = None
        node = self._buckets[loc]
        while node is not None:
            if self._key_func(node.value) == key:
                if prev is None:
                    self._buckets[loc] = node.next
                else:
                    prev.next = node.next
                return node.value
            prev = node
            node = node.next
        return None

    def chain_length(self, index: int) -> int:
        length = 0
        node = self._buckets[index]
        while node is not None:
            length += 1
            node = node.next
        return length

    def size(self) -> int:
        """Count the stored values by walking every chain."""
        return sum(self.chain_length(i) for i in range(len(self._buckets)))

    def stats(self) -> BucketStats:
        """
        Summarize chain lengths.

        Returns:
            BucketStats with min, max, mean and population standard deviation
        """
        lengths = [self.chain_length(i) for i in range(len(self._buckets))]
        total = sum(lengths)
        mean = total / len(lengths)
        variance = sum((length - mean) ** 2 for length in lengths) / len(lengths)
        return BucketStats(
            buckets=len(lengths),
            size=total,
            min_length=min(lengths),
            max_length=max(lengths),
            mean=mean,
            stdev=math.sqrt(variance),
        )

    def cursor(self) -> "TableCursor":
        return TableCursor(self._buckets)

    def __iter__(self) -> Iterator[Any]:
        return self.cursor()


class TableCursor:
    """
    Single-pass forward cursor over a chained table.

    Visits buckets in index order and each chain from head to tail. The
    table must not be mutated while the cursor is in use.
    """

    def __init__(self, buckets: List[Optional[ChainNode]]):
        self._buckets = buckets
        self._row = -1
        self._node: Optional[ChainNode] = None
        self._advance_row()

    def _advance_row(self) -> None:
        # Move to the head of the next non-empty bucket, or run off the end
        self._row += 1
        while self._row < len(self._buckets):
            if self._buckets[self._row] is not None:
                self._node = self._buckets[self._row]
                return
            self._row += 1
        self._node = None

    def has_next(self) -> bool:
        return self._node is not None

    def next(self) -> Any:
        """
        Return the current value and move to the following one.

        Raises:
            EmptyCollectionError: If the cursor is exhausted
        """
        if self._node is None:
            raise EmptyCollectionError("Cursor has no more entries")
        value = self._node.value
        if self._node.next is not None:
            self._node = self._node.next
        else:
            self._advance_row()
        return value

    def __iter__(self) -> "TableCursor":
        return self

    def __next__(self) -> Any:
        if self._node is None:
            raise StopIteration
        return self.next()
