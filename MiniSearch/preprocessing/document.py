from typing import Any


class Document:
    """
    Represents an article in the retrieval system.
    A document is identified by its title and cannot be changed once built.
    """

    __slots__ = ("_title", "_body")

    def __init__(self, title: str, body: str = ""):
        """
        Initialize a document.

        Args:
            title: Unique, case-sensitive, non-empty title
            body: Free text of the article

        Raises:
            ValueError: If the title is empty
        """
        if not title:
            raise ValueError("Document title must be a non-empty string")
        object.__setattr__(self, "_title", title)
        object.__setattr__(self, "_body", body or "")

    @property
    def title(self) -> str:
        return self._title

    @property
    def body(self) -> str:
        return self._body

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Document is immutable")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Document):
            return NotImplemented
        return self._title == other._title

    def __hash__(self) -> int:
        return hash(self._title)

    def __repr__(self) -> str:
        return f"Document(title={self._title!r})"

    def snippet(self, length: int = 150) -> str:
        """
        Get a one-line preview of the body.

        Args:
            length: Maximum number of characters

        Returns:
            Body prefix with newlines flattened, with "..." appended when cut
        """
        text = self._body.replace("\n", " ").strip()
        if len(text) > length:
            return text[:length] + "..."
        return text
