import math
from typing import Iterator, Optional

from ..preprocessing.preprocess import DEFAULT_PIPELINE, PreprocessingPipeline
from ..preprocessing.stopwords import StopWordSet
from ..storage.chained_table import BucketStats, ChainedHashTable

# Slightly larger prime used to accommodate the stop words
DEFAULT_BUCKETS = 179

_DEFAULT_STOP_WORDS = StopWordSet()


class TermEntry:
    """Frequency counts of one term in the two compared texts."""

    __slots__ = ("term", "freq", "is_stop_word")

    def __init__(self, term: str, is_stop_word: bool = False):
        self.term = term
        self.freq = [0, 0]
        self.is_stop_word = is_stop_word

    def __repr__(self) -> str:
        flag = " (stop word)" if self.is_stop_word else ""
        return f"{self.term} ({self.freq[0]}, {self.freq[1]}){flag}"


def _term_of(entry: TermEntry) -> str:
    return entry.term


class TermFrequencyIndex:
    """
    Term frequency table for a pair of texts.

    Stop words are inserted up front with a flag so that the similarity
    computation can skip them while walking the table once. Build a new
    instance for every comparison.
    """

    def __init__(self, stop_words: Optional[StopWordSet] = None,
                 buckets: int = DEFAULT_BUCKETS,
                 pipeline: Optional[PreprocessingPipeline] = None):
        """
        Args:
            stop_words: Terms excluded from scoring (defaults to the built-in list)
            buckets: Fixed number of hash buckets
            pipeline: Text normalization pipeline (letters only, lowercase by default)
        """
        self.stop_words = _DEFAULT_STOP_WORDS if stop_words is None else stop_words
        self.pipeline = pipeline or DEFAULT_PIPELINE
        self._table = ChainedHashTable(buckets, _term_of)
        self._initialized = False

    def initialize(self, text_a: str, text_b: str) -> "TermFrequencyIndex":
        """
        Count the terms of both texts.

        Args:
            text_a: First text, counted in slot 0
            text_b: Second text, counted in slot 1

        Returns:
            Self for chaining operations

        Raises:
            RuntimeError: If the index was already initialized
        """
        if self._initialized:
            raise RuntimeError("TermFrequencyIndex can only be initialized once")
        self._initialized = True

        self._insert_stop_words()

        for term in self.pipeline.terms(text_a):
            self.insert(term, 0)
        for term in self.pipeline.terms(text_b):
            self.insert(term, 1)

        return self

    def _insert_stop_words(self) -> None:
        for word in self.stop_words:
            node = self._table.find(word)
            if node is None:
                self._table.append(TermEntry(word, is_stop_word=True))
            else:
                node.value.is_stop_word = True

    def insert(self, term: str, doc_num: int) -> None:
        """
        Count one occurrence of a term.

        Args:
            term: Normalized term
            doc_num: 0 for the first text, 1 for the second
        """
        if doc_num not in (0, 1):
            raise ValueError("doc_num must be 0 or 1")
        node = self._table.find(term)
        if node is None:
            entry = TermEntry(term)
            self._table.append(entry)
        else:
            entry = node.value
        entry.freq[doc_num] += 1

    def lookup(self, term: str) -> Optional[TermEntry]:
        node = self._table.find(term)
        return node.value if node is not None else None

    def cosine_similarity(self) -> float:
        """
        Cosine similarity of the two term frequency vectors.

        Stop words are skipped. When either text has no remaining terms
        the result is NaN rather than an exception.

        Returns:
            Similarity in [0, 1], or NaN when undefined
        """
        sum_prod = 0.0
        sum_a_squared = 0.0
        sum_b_squared = 0.0

        for entry in self._table:
            if entry.is_stop_word:
                continue
            a, b = entry.freq
            sum_prod += a * b
            sum_a_squared += a * a
            sum_b_squared += b * b

        denominator = math.sqrt(sum_a_squared) * math.sqrt(sum_b_squared)
        if denominator == 0:
            return math.nan
        return sum_prod / denominator

    def entries(self) -> Iterator[TermEntry]:
        """Iterate every stored entry, stop words included."""
        return iter(self._table)

    def term_count(self) -> int:
        return self._table.size()

    def stats(self) -> BucketStats:
        return self._table.stats()


def cosine_similarity(text_a: str, text_b: str, stop_words: Optional[StopWordSet] = None,
                      buckets: int = DEFAULT_BUCKETS) -> float:
    """
    Compare two texts with a fresh TermFrequencyIndex.

    Args:
        text_a: First text (typically the query)
        text_b: Second text (typically an article body)
        stop_words: Terms excluded from scoring
        buckets: Hash bucket count for the index

    Returns:
        Cosine similarity, or NaN when undefined
    """
    index = TermFrequencyIndex(stop_words=stop_words, buckets=buckets)
    index.initialize(text_a, text_b)
    return index.cosine_similarity()
