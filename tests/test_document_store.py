"""Tests for the chained hash table and the article store."""
from typing import List

import pytest

from MiniSearch.errors import EmptyCollectionError
from MiniSearch.preprocessing.document import Document
from MiniSearch.storage.chained_table import string_hash
from MiniSearch.storage.document_store import DocumentStore


class TestStringHash:
    def test_small_key(self) -> None:
        # 1871 * (97 + 98) = 364845, 364845 % 2521 = 1821
        assert string_hash("ab", 2521) == 1821

    def test_empty_key_hashes_to_zero(self) -> None:
        assert string_hash("", 2521) == 0

    def test_long_key_wraps_as_signed_32_bit(self) -> None:
        key = "z" * 10000
        total = 10000 * 1871 * ord("z")
        assert total > 2 ** 31
        wrapped = (total + 2 ** 31) % 2 ** 32 - 2 ** 31
        assert wrapped < 0
        assert string_hash(key, 2521) == wrapped % 2521

    def test_result_in_range(self) -> None:
        for key in ["x" * n for n in (1, 5000, 20000, 50000)]:
            assert 0 <= string_hash(key, 179) < 179


class TestDocumentStoreInsert:
    def test_insert_then_lookup(self) -> None:
        store = DocumentStore()
        doc = Document("Singapore", "island city state")
        store.insert(doc)
        assert store.lookup("Singapore") is doc
        assert store.size() == 1

    def test_duplicate_title_ignored(self, store: DocumentStore) -> None:
        before = store.size()
        store.insert(Document("Singapore", "a different body"))
        assert store.size() == before
        assert "island" in store.lookup("Singapore").body

    def test_titles_are_case_sensitive(self, store: DocumentStore) -> None:
        store.insert(Document("singapore", "lowercase title"))
        assert store.member("singapore")
        assert store.lookup("singapore").body == "lowercase title"
        assert store.lookup("Singapore").body != "lowercase title"

    def test_size_grows_by_one_per_new_title(self) -> None:
        store = DocumentStore()
        for i in range(50):
            store.insert(Document(f"Article {i}", "body"))
            assert store.size() == i + 1
        assert len(store) == 50


class TestDocumentStoreLookup:
    def test_absent_title_returns_none(self, store: DocumentStore) -> None:
        assert store.lookup("Tim Lim") is None
        assert not store.member("Tim Lim")

    def test_member_accepts_document(self, store: DocumentStore, articles: List[Document]) -> None:
        assert store.member(articles[0])
        assert articles[1] in store
        assert Document("Atlantis") not in store


class TestDocumentStoreDelete:
    def test_delete_then_lookup(self, store: DocumentStore) -> None:
        store.delete("Malaysia")
        assert store.lookup("Malaysia") is None
        assert store.size() == 2

    def test_delete_absent_is_noop(self, store: DocumentStore) -> None:
        store.delete("Tim Lim")
        store.delete("Tim Lim")
        assert store.size() == 3
        assert store.lookup("Tim Lim") is None

    def test_delete_then_reinsert_restores_body(self, store: DocumentStore) -> None:
        original = store.lookup("Malaysia")
        store.delete("Malaysia")
        assert not store.member("Malaysia")
        store.insert(original)
        assert store.member("Malaysia")
        assert store.lookup("Malaysia").body == original.body

    def test_delete_from_middle_of_chain(self) -> None:
        store = DocumentStore(buckets=1)
        for title in ("first", "second", "third"):
            store.insert(Document(title, title))
        store.delete("second")
        assert [doc.title for doc in store] == ["first", "third"]
        store.delete("first")
        assert [doc.title for doc in store] == ["third"]


class TestDocumentStoreTraversal:
    def test_traversal_yields_every_document(self) -> None:
        store = DocumentStore()
        titles = {f"Article {i}" for i in range(200)}
        for title in titles:
            store.insert(Document(title, "body"))
        seen = [doc.title for doc in store]
        assert len(seen) == 200
        assert set(seen) == titles

    def test_traversal_is_repeatable(self, store: DocumentStore) -> None:
        first = [doc.title for doc in store]
        second = [doc.title for doc in store]
        assert first == second

    def test_chain_keeps_insertion_order(self) -> None:
        store = DocumentStore(buckets=1)
        titles = ["delta", "alpha", "charlie", "bravo"]
        for title in titles:
            store.insert(Document(title))
        assert [doc.title for doc in store] == titles

    def test_cursor_has_next_and_next(self, store: DocumentStore) -> None:
        cursor = store.reset()
        count = 0
        while cursor.has_next():
            cursor.next()
            count += 1
        assert count == store.size()
        assert not cursor.has_next()

    def test_cursor_next_past_end_raises(self, store: DocumentStore) -> None:
        cursor = store.reset()
        for _ in range(store.size()):
            cursor.next()
        with pytest.raises(EmptyCollectionError):
            cursor.next()

    def test_empty_store_cursor(self) -> None:
        cursor = DocumentStore().reset()
        assert not cursor.has_next()
        with pytest.raises(EmptyCollectionError):
            cursor.next()


class TestDocumentStoreStats:
    def test_stats_single_bucket(self) -> None:
        store = DocumentStore(buckets=1)
        for i in range(4):
            store.insert(Document(f"Article {i}"))
        stats = store.stats()
        assert stats.buckets == 1
        assert stats.size == 4
        assert stats.min_length == stats.max_length == 4
        assert stats.mean == 4
        assert stats.stdev == 0

    def test_stats_spread(self, store: DocumentStore) -> None:
        stats = store.stats()
        assert stats.buckets == 2521
        assert stats.size == 3
        assert stats.min_length == 0
        assert stats.max_length >= 1
        assert stats.mean == pytest.approx(3 / 2521)

    def test_from_config(self) -> None:
        store = DocumentStore.from_config({"document_store": {"buckets": 7}})
        assert store.stats().buckets == 7

    def test_invalid_bucket_count(self) -> None:
        with pytest.raises(ValueError):
            DocumentStore(buckets=0)
