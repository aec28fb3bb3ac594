"""Shared fixtures for MiniSearch tests."""
import json
from pathlib import Path
from typing import List

import pytest

from MiniSearch.cosine_search.query_engine import QueryEngine
from MiniSearch.preprocessing.document import Document
from MiniSearch.storage.document_store import DocumentStore

ARTICLES = [
    ("Singapore", "Singapore is an island city state at the tip of the peninsula."),
    ("Malaysia", "Malaysia is a country on the Malay peninsula and on Borneo."),
    ("Mathematics", "Mathematics studies quantity, structure, space and change."),
]


@pytest.fixture()
def articles() -> List[Document]:
    return [Document(title, body) for title, body in ARTICLES]


@pytest.fixture()
def store(articles: List[Document]) -> DocumentStore:
    document_store = DocumentStore()
    document_store.initialize(articles)
    return document_store


@pytest.fixture()
def engine(store: DocumentStore) -> QueryEngine:
    return QueryEngine(store)


@pytest.fixture()
def corpus_json(tmp_path: Path) -> Path:
    """Write the sample articles to a JSON corpus file."""
    path = tmp_path / "articles.json"
    path.write_text(
        json.dumps([{"title": title, "body": body} for title, body in ARTICLES]),
        encoding="utf-8",
    )
    return path
