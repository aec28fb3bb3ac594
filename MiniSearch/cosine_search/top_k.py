from typing import Any, List, Tuple

from ..errors import EmptyCollectionError

INITIAL_CAPACITY = 10


class TopKSelector:
    """
    Max-heap of (score, document) pairs.

    Scores and documents live in two lists stored in level order at the
    same index; comparisons use the score only. The order of documents
    with equal scores is unspecified.
    """

    def __init__(self, capacity: int = INITIAL_CAPACITY):
        if capacity <= 0:
            raise ValueError("Capacity must be positive")
        self._scores: List[float] = [0.0] * capacity
        self._documents: List[Any] = [None] * capacity
        self._next = 0

    # Navigating the tree stored in the lists
    @staticmethod
    def _parent(i: int) -> int:
        return (i - 1) // 2

    @staticmethod
    def _lchild(i: int) -> int:
        return 2 * i + 1

    @staticmethod
    def _rchild(i: int) -> int:
        return 2 * i + 2

    def _is_leaf(self, i: int) -> bool:
        return self._lchild(i) >= self._next

    def _max_child(self, i: int) -> int:
        """Index of the larger child of i, or -1 when i is a leaf."""
        left = self._lchild(i)
        right = self._rchild(i)
        if left >= self._next:
            return -1
        if right >= self._next:
            return left
        if self._scores[left] > self._scores[right]:
            return left
        return right

    def _swap(self, i: int, j: int) -> None:
        self._scores[i], self._scores[j] = self._scores[j], self._scores[i]
        self._documents[i], self._documents[j] = self._documents[j], self._documents[i]

    def _resize(self) -> None:
        # Double both lists; existing pairs keep their indices
        extra = len(self._scores)
        self._scores.extend([0.0] * extra)
        self._documents.extend([None] * extra)

    def is_empty(self) -> bool:
        return self._next == 0

    def size(self) -> int:
        return self._next

    def capacity(self) -> int:
        return len(self._scores)

    def insert(self, score: float, document: Any) -> None:
        """
        Add a pair and sift it up while its score beats its parent's.

        Args:
            score: Similarity score used for ordering
            document: Document associated with the score
        """
        if self._next == len(self._scores):
            self._resize()

        i = self._next
        self._scores[i] = score
        self._documents[i] = document
        self._next += 1

        while i > 0:
            p = self._parent(i)
            if not self._scores[i] > self._scores[p]:
                break
            self._swap(i, p)
            i = p

    def extract_max_with_score(self) -> Tuple[float, Any]:
        """
        Remove the highest scored pair.

        Returns:
            (score, document) of the former root

        Raises:
            EmptyCollectionError: If the selector is empty
        """
        if self.is_empty():
            raise EmptyCollectionError("Cannot extract from an empty TopKSelector")

        self._next -= 1
        self._swap(0, self._next)

        i = 0
        while not self._is_leaf(i):
            mc = self._max_child(i)
            if not self._scores[i] < self._scores[mc]:
                break
            self._swap(i, mc)
            i = mc

        score = self._scores[self._next]
        document = self._documents[self._next]
        self._documents[self._next] = None
        return score, document

    def extract_max(self) -> Any:
        """Remove the highest scored pair and return its document."""
        return self.extract_max_with_score()[1]

    def peek_max_score(self) -> float:
        if self.is_empty():
            raise EmptyCollectionError("Cannot peek into an empty TopKSelector")
        return self._scores[0]

    def __len__(self) -> int:
        return self._next

    def __bool__(self) -> bool:
        return self._next > 0
