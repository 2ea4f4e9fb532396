"""
Exceptions raised by lexical-semantic backends.
"""


class LexiconError(Exception):
    """Base class for all lexicon errors."""


class UnsupportedOperationError(LexiconError, NotImplementedError):
    """The backend cannot answer this operation or relation."""


class ModelLoadError(LexiconError, OSError):
    """A vector model could not be loaded."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Could not load word2vec vector file {source}. Reason: {reason}")
