import logging
import math
import time
from typing import List, NamedTuple, Optional

from ..preprocessing.document import Document
from ..preprocessing.stopwords import StopWordSet
from ..storage.document_store import DocumentStore
from .term_frequency import DEFAULT_BUCKETS, TermFrequencyIndex
from .top_k import TopKSelector

logger = logging.getLogger(__name__)

DEFAULT_TOP_K = 3


class SearchResult(NamedTuple):
    document: Document
    score: float


class QueryEngine:
    """Scans the whole document store and ranks articles against a query."""

    def __init__(self, store: DocumentStore, stop_words: Optional[StopWordSet] = None,
                 top_k: int = DEFAULT_TOP_K, term_buckets: int = DEFAULT_BUCKETS):
        """
        Initialize the query engine.

        Args:
            store: Document store to search
            stop_words: Terms excluded from scoring (defaults to the built-in list)
            top_k: Default number of results returned by search
            term_buckets: Hash bucket count for each TermFrequencyIndex
        """
        self.store = store
        self.stop_words = stop_words if stop_words is not None else StopWordSet()
        self.top_k = top_k
        self.term_buckets = term_buckets

    @classmethod
    def from_config(cls, store: DocumentStore, config: dict) -> "QueryEngine":
        return cls(
            store,
            stop_words=StopWordSet.from_config(config),
            top_k=config.get("search", {}).get("top_k", DEFAULT_TOP_K),
            term_buckets=config.get("term_frequency", {}).get("buckets", DEFAULT_BUCKETS),
        )

    def similarity(self, query: str, document: Document) -> float:
        """
        Cosine similarity between the query and a document body.

        Args:
            query: Free-text query
            document: Document to compare against

        Returns:
            Similarity score, NaN when undefined
        """
        index = TermFrequencyIndex(stop_words=self.stop_words, buckets=self.term_buckets)
        index.initialize(query, document.body)
        return index.cosine_similarity()

    def search(self, query: str, top_k: Optional[int] = None) -> List[SearchResult]:
        """
        Rank the stored documents against a query.

        Args:
            query: Free-text query
            top_k: Maximum number of results (defaults to the engine setting)

        Returns:
            Up to top_k results in non-increasing score order; an empty list
            means no document shares a scored term with the query
        """
        limit = self.top_k if top_k is None else top_k
        start_time = time.time()

        heap = TopKSelector()
        scanned = 0
        cursor = self.store.reset()
        while cursor.has_next():
            document = cursor.next()
            scanned += 1
            score = self.similarity(query, document)
            if is_similar(score):
                heap.insert(score, document)

        logger.debug("Query %r matched %d of %d articles", query, heap.size(), scanned)

        results = []
        while len(results) < limit and not heap.is_empty():
            score, document = heap.extract_max_with_score()
            results.append(SearchResult(document, score))

        logger.info("Search for %r returned %d results in %.6f seconds",
                    query, len(results), time.time() - start_time)
        return results

    def search_documents(self, query: str, top_k: Optional[int] = None) -> List[Document]:
        """Same ranking as search, returning only the documents."""
        return [result.document for result in self.search(query, top_k)]


def is_similar(score: float) -> bool:
    """True when a similarity score is a real number above zero."""
    return not math.isnan(score) and score > 0
