import logging
from typing import Iterable, Iterator, Optional, Union

from ..preprocessing.document import Document
from .chained_table import BucketStats, ChainedHashTable, TableCursor

logger = logging.getLogger(__name__)

# Prime close to 2500
DEFAULT_BUCKETS = 2521


def _title_of(document: Document) -> str:
    return document.title


class DocumentStore:
    """
    Hash table of articles keyed by title, using separate chaining.

    Duplicate titles are not allowed: inserting a document whose title is
    already stored is silently ignored.
    """

    def __init__(self, buckets: int = DEFAULT_BUCKETS):
        """
        Initialize an empty store.

        Args:
            buckets: Fixed number of hash buckets
        """
        self._table = ChainedHashTable(buckets, _title_of)

    @classmethod
    def from_config(cls, config: dict) -> "DocumentStore":
        buckets = config.get("document_store", {}).get("buckets", DEFAULT_BUCKETS)
        return cls(buckets=buckets)

    def initialize(self, documents: Iterable[Document]) -> None:
        """
        Insert every document from an iterable.

        Args:
            documents: Documents to add; repeated titles keep the first one
        """
        for document in documents:
            self.insert(document)
        logger.info("Document store initialized with %d articles", self.size())

    def insert(self, document: Document) -> None:
        """
        Add a document at the end of its bucket's chain.

        Args:
            document: Document to store
        """
        if self.member(document):
            logger.debug("Ignoring duplicate article %r", document.title)
            return
        self._table.append(document)

    def delete(self, title: str) -> None:
        """
        Remove the document with the given title, if present.

        Args:
            title: Title of the document to remove
        """
        removed = self._table.remove(title)
        if removed is None:
            logger.debug("Delete of absent article %r ignored", title)

    def lookup(self, title: str) -> Optional[Document]:
        """
        Find a document by title.

        Args:
            title: Title to look for

        Returns:
            The stored document, or None if not found
        """
        node = self._table.find(title)
        if node is not None:
            return node.value
        return None

    def member(self, item: Union[str, Document]) -> bool:
        """Is the document (or a document with this title) in the store?"""
        title = item.title if isinstance(item, Document) else item
        return self.lookup(title) is not None

    def size(self) -> int:
        return self._table.size()

    def reset(self) -> TableCursor:
        """
        Start a traversal over every stored document.

        Returns:
            Cursor yielding documents in bucket order, then chain order
        """
        return self._table.cursor()

    def stats(self) -> BucketStats:
        return self._table.stats()

    def __contains__(self, item: Union[str, Document]) -> bool:
        return self.member(item)

    def __iter__(self) -> Iterator[Document]:
        return self.reset()

    def __len__(self) -> int:
        return self.size()
