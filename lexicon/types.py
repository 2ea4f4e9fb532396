"""
Value types shared by the lexical-semantic interface.
"""
from typing import Any, Optional

import numpy as np


class Domain:
    """A named knowledge domain (e.g. medicine, sports)."""

    def __init__(self, name: str):
        self.name = name

    def __eq__(self, other) -> bool:
        return isinstance(other, Domain) and self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self) -> str:
        return f"Domain({self.name!r})"


class Concept:
    """
    A concept known to a backend.

    Two concepts are equal when their identifiers are equal; the payload is
    whatever the backend attaches and does not take part in comparisons.
    """

    def __init__(self, payload: Any, concept_id: str):
        """
        Args:
            payload: Backend-specific data attached to the concept
            concept_id: Identifier of the concept within its backend
        """
        self.payload = payload
        self.id = concept_id

    def __eq__(self, other) -> bool:
        return isinstance(other, Concept) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"Concept({self.id!r})"


class WordVector:
    """A word paired with its embedding vector."""

    def __init__(self, word: str, vector: Optional[np.ndarray]):
        self.word = word
        self.vector = vector

    def __repr__(self) -> str:
        dim = None if self.vector is None else len(self.vector)
        return f"WordVector({self.word!r}, dim={dim})"
