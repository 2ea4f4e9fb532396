"""
Relations between words and between concepts.
"""
from enum import Enum


class WordRelation(Enum):
    """Lexical relations that can hold between two words."""
    SYNONYMY = "synonymy"
    ANTONYMY = "antonymy"
    HYPERNYMY = "hypernymy"
    HYPONYMY = "hyponymy"
    RELATEDNESS = "relatedness"
    SIMILARITY = "similarity"


class ConceptRelation(Enum):
    """Semantic relations that can hold between two concepts."""
    SYNONYMY = "synonymy"
    HYPERNYMY = "hypernymy"
    HYPONYMY = "hyponymy"
    MERONYMY = "meronymy"
    HOLONYMY = "holonymy"
    RELATEDNESS = "relatedness"
    SIMILARITY = "similarity"
