import json
import logging
import os
from typing import Iterable, Iterator, Optional

from ..errors import ConfigError

logger = logging.getLogger(__name__)

# Common English terms excluded from similarity scoring
DEFAULT_STOP_WORDS = (
    "the", "of", "and", "a", "to", "in", "is",
    "you", "that", "it", "he", "was", "for", "on", "are", "as", "with",
    "his", "they", "i", "at", "be", "this", "have", "from", "or", "one",
    "had", "by", "word", "but", "not", "what", "all", "were", "we", "when",
    "your", "can", "said", "there", "use", "an", "each", "which", "she",
    "do", "how", "their", "if", "will", "up", "other", "about", "out", "many",
    "then", "them", "these", "so", "some", "her", "would", "make", "like",
    "him", "into", "time", "has", "look", "two", "more", "write", "go", "see",
    "number", "no", "way", "could", "people", "my", "than", "first", "water",
    "been", "call", "who", "oil", "its", "now", "find", "long", "down", "day",
    "did", "get", "come", "made", "may", "part",
)


class StopWordSet:
    """Static set of lowercase terms that never contribute to a similarity score."""

    def __init__(self, words: Optional[Iterable[str]] = None):
        """
        Args:
            words: Stop words to use (defaults to DEFAULT_STOP_WORDS)
        """
        source = DEFAULT_STOP_WORDS if words is None else words
        self._words = frozenset(word.lower() for word in source if word)

    @classmethod
    def from_json(cls, path: str, include_defaults: bool = True) -> "StopWordSet":
        """
        Load stop words from a JSON array file.

        Args:
            path: Path to a JSON file containing a list of words
            include_defaults: Whether to keep the built-in list as well

        Returns:
            New StopWordSet

        Raises:
            ConfigError: If the file is not a JSON array of strings
        """
        words = list(DEFAULT_STOP_WORDS) if include_defaults else []
        if os.path.exists(path):
            try:
                with open(path, "r", encoding="utf-8") as f:
                    loaded = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                raise ConfigError(f"Could not load stop words {path}: {e}") from e

            if not isinstance(loaded, list) or not all(isinstance(word, str) for word in loaded):
                raise ConfigError(f"Stop words file {path} must contain a JSON array of strings")
            words.extend(loaded)
        else:
            logger.warning("Stop words file %s not found", path)
        return cls(words)

    @classmethod
    def from_config(cls, config: dict) -> "StopWordSet":
        """Build the stop word set described by the "stop_words" config section."""
        section = config.get("stop_words", {})
        if not section.get("use", True):
            return cls(())
        extra_path = section.get("extra_path")
        if extra_path:
            return cls.from_json(extra_path)
        return cls()

    def __contains__(self, term: str) -> bool:
        return term in self._words

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._words))

    def __len__(self) -> int:
        return len(self._words)

    def __repr__(self) -> str:
        return f"StopWordSet({len(self._words)} words)"
