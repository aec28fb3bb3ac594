"""Tests for the max-heap top-K selector."""
import random

import pytest

from MiniSearch.cosine_search.top_k import INITIAL_CAPACITY, TopKSelector
from MiniSearch.errors import EmptyCollectionError
from MiniSearch.preprocessing.document import Document


class TestTopKSelector:
    def test_empty(self) -> None:
        heap = TopKSelector()
        assert heap.is_empty()
        assert heap.size() == 0
        assert not heap

    def test_extract_from_empty_raises(self) -> None:
        heap = TopKSelector()
        with pytest.raises(EmptyCollectionError):
            heap.extract_max()
        with pytest.raises(EmptyCollectionError):
            heap.peek_max_score()

    def test_extract_returns_document_of_best_score(self) -> None:
        heap = TopKSelector()
        low, high, mid = Document("low"), Document("high"), Document("mid")
        heap.insert(0.1, low)
        heap.insert(0.9, high)
        heap.insert(0.5, mid)
        assert heap.peek_max_score() == 0.9
        assert heap.extract_max() is high
        assert heap.extract_max() is mid
        assert heap.extract_max() is low
        assert heap.is_empty()

    def test_scores_come_out_non_increasing(self) -> None:
        rng = random.Random(7)
        heap = TopKSelector()
        scores = [rng.random() for _ in range(200)]
        for i, score in enumerate(scores):
            heap.insert(score, Document(f"doc {i}"))

        extracted = []
        while not heap.is_empty():
            score, _ = heap.extract_max_with_score()
            extracted.append(score)

        assert extracted == sorted(scores, reverse=True)

    def test_duplicate_scores(self) -> None:
        heap = TopKSelector()
        for i, score in enumerate([0.5, 0.5, 0.2, 0.5, 0.9]):
            heap.insert(score, Document(f"doc {i}"))
        extracted = [heap.extract_max_with_score()[0] for _ in range(5)]
        assert extracted == [0.9, 0.5, 0.5, 0.5, 0.2]

    def test_pairs_stay_together(self) -> None:
        heap = TopKSelector()
        docs = {score: Document(f"doc {score}") for score in (0.3, 0.8, 0.1, 0.6, 0.4)}
        for score, doc in docs.items():
            heap.insert(score, doc)
        while heap:
            score, doc = heap.extract_max_with_score()
            assert doc is docs[score]

    def test_grows_by_doubling(self) -> None:
        heap = TopKSelector()
        assert heap.capacity() == INITIAL_CAPACITY
        for i in range(INITIAL_CAPACITY + 1):
            heap.insert(float(i), Document(f"doc {i}"))
        assert heap.capacity() == INITIAL_CAPACITY * 2
        assert len(heap) == INITIAL_CAPACITY + 1
        assert heap.extract_max().title == f"doc {INITIAL_CAPACITY}"

    def test_interleaved_insert_and_extract(self) -> None:
        heap = TopKSelector(capacity=1)
        heap.insert(0.2, "a")
        heap.insert(0.7, "b")
        assert heap.extract_max() == "b"
        heap.insert(0.4, "c")
        heap.insert(0.1, "d")
        assert [heap.extract_max() for _ in range(3)] == ["c", "a", "d"]

    def test_invalid_capacity(self) -> None:
        with pytest.raises(ValueError):
            TopKSelector(capacity=0)
