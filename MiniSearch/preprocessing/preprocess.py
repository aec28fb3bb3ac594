from abc import ABC, abstractmethod
from typing import List, Optional


class TextPreprocessor(ABC):
    @abstractmethod
    def preprocess(self, text: str) -> str:
        raise NotImplementedError()


class LettersOnlyPreprocessor(TextPreprocessor):
    """Preprocessor that drops every character that is neither a letter nor whitespace."""

    def preprocess(self, text: str) -> str:
        """
        Remove digits, punctuation and symbols from the text.

        Args:
            text: Raw text

        Returns:
            Text containing only letters and whitespace
        """
        return "".join(c for c in text if c.isalpha() or c.isspace())


class LowercasePreprocessor(TextPreprocessor):
    def preprocess(self, text: str) -> str:
        return text.lower()


class PreprocessingPipeline:
    """Pipeline of text preprocessors followed by whitespace splitting."""

    def __init__(self, preprocessors: Optional[List[TextPreprocessor]] = None, name="Default Pipeline"):
        """
        Initialize a preprocessing pipeline.

        Args:
            preprocessors: List of preprocessor objects (defaults to letters-only then lowercase)
            name: Name of the pipeline
        """
        if preprocessors is None:
            preprocessors = [LettersOnlyPreprocessor(), LowercasePreprocessor()]
        self.preprocessors = preprocessors
        self.name = name

    def normalize(self, text: str) -> str:
        """
        Apply all preprocessors to the text in order.

        Args:
            text: Original text

        Returns:
            Normalized text
        """
        for preprocessor in self.preprocessors:
            text = preprocessor.preprocess(text)
        return text

    def terms(self, text: str) -> List[str]:
        """
        Normalize the text and split it into terms.

        Args:
            text: Original text

        Returns:
            List of terms; runs of whitespace never produce empty terms
        """
        return self.normalize(text).split()


DEFAULT_PIPELINE = PreprocessingPipeline(name="TermFrequencyPipeline")


def normalize_text(text: str) -> str:
    """Keep letters and whitespace only, lowercased."""
    return DEFAULT_PIPELINE.normalize(text)


def split_terms(text: str) -> List[str]:
    """Normalize text and split it on whitespace."""
    return DEFAULT_PIPELINE.terms(text)
