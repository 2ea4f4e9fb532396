"""
Compute word similarity using embeddings.
"""
import math
from typing import Dict, Optional, Set, TypeVar

from features.word_embeddings import WordEmbeddings
import config

R = TypeVar("R")

NORMALIZATIONS = ("clip", "shift")


def passes(score: float, threshold: float) -> bool:
    """True if a normalized score reaches the threshold."""
    return score >= threshold


class EmbeddingSimilarity:
    """Computes normalized similarity between words and classifies it against a threshold."""

    def __init__(self, word_embeddings: WordEmbeddings, threshold: Optional[float] = None,
                 normalization: Optional[str] = None):
        """
        Initialize similarity components.

        Args:
            word_embeddings: Loaded word embeddings
            threshold: Minimum normalized score for two words to count as related
            normalization: "clip" or "shift" (see normalize_similarity)
        """
        self.word_embeddings = word_embeddings
        self.threshold = config.SIMILARITY_THRESHOLD if threshold is None else threshold
        self.normalization = normalization or config.NORMALIZATION

        if not 0.0 <= self.threshold <= 1.0:
            raise ValueError(f"Threshold must be between 0 and 1, got {self.threshold}")
        if self.normalization not in NORMALIZATIONS:
            raise ValueError(f"Unknown normalization: {self.normalization}. "
                             f"Choose from: {', '.join(NORMALIZATIONS)}")

    def similarity(self, word1: str, word2: str) -> float:
        """
        Compute similarity between two words using embeddings.

        Args:
            word1: First word
            word2: Second word

        Returns:
            Similarity score between 0 and 1
        """
        embedding_sim = self.word_embeddings.cosine_similarity(word1, word2)
        return self.normalize_similarity(embedding_sim)

    def normalize_similarity(self, sim: float) -> float:
        """
        Bring a cosine similarity into [0, 1].

        "clip" treats negative similarity as no similarity at all, "shift"
        rescales [-1, 1] linearly.
        """
        if math.isnan(sim):
            return 0.0
        if self.normalization == "shift":
            sim = (sim + 1.0) / 2.0
        return min(max(sim, 0.0), 1.0)

    def is_related(self, score: float) -> bool:
        return passes(score, self.threshold)

    def classify(self, scores: Dict[R, float]) -> Set[R]:
        """Keep the relations whose score reaches the threshold."""
        return {rel for rel, score in scores.items() if self.is_related(score)}
