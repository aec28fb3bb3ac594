"""Exception types raised by MiniSearch components."""


class MiniSearchError(Exception):
    """Base class for all MiniSearch errors."""


class EmptyCollectionError(MiniSearchError, IndexError):
    """
    Raised when an element is taken from an exhausted collection:
    extracting from an empty TopKSelector, or advancing a store cursor
    past its last entry.
    """


class CorpusError(MiniSearchError):
    """Raised when a corpus source cannot be located or read."""


class ConfigError(MiniSearchError):
    """Raised when a configuration file exists but cannot be used."""
