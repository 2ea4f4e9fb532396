"""
Evaluate the relatedness threshold against gold-standard word pairs.
"""
import logging
from typing import Dict, Iterable, List, Optional

from data.load_pairs import WordPair
from similarity.embedding_similarity import EmbeddingSimilarity, passes

logger = logging.getLogger(__name__)


class ThresholdEvaluator:
    """Scores threshold-based relatedness decisions against gold labels."""

    def __init__(self, similarity_fn: EmbeddingSimilarity):
        """
        Initialize evaluator.

        Args:
            similarity_fn: Scorer providing normalized similarity
        """
        self.similarity_fn = similarity_fn

    def score_pairs(self, pairs: Iterable[WordPair]) -> List[Dict]:
        """
        Compute the normalized similarity of each pair.
        Pairs with a word missing from the vocabulary are marked as skipped.
        """
        embeddings = self.similarity_fn.word_embeddings
        scored = []
        for pair in pairs:
            known = embeddings.contains(pair.word1) and embeddings.contains(pair.word2)
            scored.append({
                "pair": pair,
                "score": self.similarity_fn.similarity(pair.word1, pair.word2) if known else None,
            })
        return scored

    def evaluate(self, pairs: Iterable[WordPair], threshold: Optional[float] = None) -> Dict:
        """
        Classify every pair with the threshold and compare with the gold labels.

        Args:
            pairs: Gold-standard word pairs
            threshold: Threshold to test (default: the scorer's own)

        Returns:
            Dictionary with confusion counts, precision, recall, f1 and accuracy
        """
        return self._evaluate_scored(self.score_pairs(pairs), threshold)

    def sweep(self, pairs: Iterable[WordPair], thresholds: Iterable[float]) -> List[Dict]:
        """Evaluate several thresholds, scoring the pairs only once."""
        scored = self.score_pairs(pairs)
        return [self._evaluate_scored(scored, t) for t in thresholds]

    def best_threshold(self, pairs: Iterable[WordPair], thresholds: Iterable[float]) -> Dict:
        """Result of the threshold with the highest f1 (lowest threshold on ties)."""
        return self.pick_best(self.sweep(pairs, thresholds))

    @staticmethod
    def pick_best(results: List[Dict]) -> Dict:
        """Pick the sweep result with the highest f1 (lowest threshold on ties)."""
        if not results:
            raise ValueError("No thresholds to evaluate")
        return max(results, key=lambda r: (r["f1"], -r["threshold"]))

    def _evaluate_scored(self, scored: List[Dict], threshold: Optional[float]) -> Dict:
        if threshold is None:
            threshold = self.similarity_fn.threshold

        tp = fp = tn = fn = skipped = 0
        for item in scored:
            if item["score"] is None:
                skipped += 1
                continue
            predicted = passes(item["score"], threshold)
            if item["pair"].related:
                if predicted:
                    tp += 1
                else:
                    fn += 1
            elif predicted:
                fp += 1
            else:
                tn += 1

        precision = tp / (tp + fp) if tp + fp else 0.0
        recall = tp / (tp + fn) if tp + fn else 0.0
        f1 = 2 * precision * recall / (precision + recall) if precision + recall else 0.0
        evaluated = tp + fp + tn + fn
        accuracy = (tp + tn) / evaluated if evaluated else 0.0

        if skipped:
            logger.info("Skipped %d out-of-vocabulary pairs", skipped)

        return {
            "threshold": threshold,
            "true_positives": tp,
            "false_positives": fp,
            "true_negatives": tn,
            "false_negatives": fn,
            "skipped": skipped,
            "precision": precision,
            "recall": recall,
            "f1": f1,
            "accuracy": accuracy,
        }
