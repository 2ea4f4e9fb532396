"""
Command line front end for querying a word vector model.
"""
import argparse
import logging
import sys
from typing import List, Optional

from adaptors.word2vec_adaptor import Word2VecAdaptor
from data.load_pairs import load_word_pairs
from evaluation.threshold_evaluator import ThresholdEvaluator
from lexicon.errors import LexiconError
from lexicon.relations import WordRelation
import config


def show_related(adaptor: Word2VecAdaptor, word: str, weighted: bool = False):
    """Print the words related to a word, most similar first when weighted."""
    if weighted:
        related = adaptor.get_related_words_weighted(None, None, word, WordRelation.RELATEDNESS)
        if not related:
            print(f"'{word}' not found in the vocabulary.")
        for w, score in sorted(related.items(), key=lambda item: -item[1]):
            print(f"  {w:>20s}  {score:.4f}")
    else:
        related = adaptor.get_related_words(None, None, word, WordRelation.RELATEDNESS)
        if not related:
            print(f"'{word}' not found in the vocabulary.")
        for w in sorted(related):
            print(f"  {w}")


def show_relations(adaptor: Word2VecAdaptor, word1: str, word2: str):
    weighted = adaptor.get_word_relations_weighted(None, None, word1, word2)
    holding = adaptor.get_word_relations(None, None, word1, word2)
    print(f"{word1} / {word2} (threshold {adaptor.threshold:.2f}):")
    for rel, score in weighted.items():
        mark = "yes" if rel in holding else "no"
        print(f"  {rel.value:<12} {score:.4f}  {mark}")


def run_evaluation(adaptor: Word2VecAdaptor, pairs_path: str,
                   thresholds: Optional[List[float]] = None) -> List[dict]:
    """
    Evaluate thresholds against a file of gold word pairs.

    Args:
        adaptor: Adaptor whose scorer is evaluated
        pairs_path: TSV file of word1, word2, label rows
        thresholds: Thresholds to try (default: the adaptor's threshold)

    Returns:
        One result dictionary per threshold
    """
    pairs = load_word_pairs(pairs_path)
    evaluator = ThresholdEvaluator(adaptor.scorer)
    results = evaluator.sweep(pairs, thresholds or [adaptor.threshold])

    print(f"\n{'='*70}")
    print(f"THRESHOLD EVALUATION - {len(pairs)} pairs")
    print(f"{'='*70}")
    print(f"{'Threshold':<12} {'Precision':<12} {'Recall':<12} {'F1':<12} {'Accuracy':<12} {'Skipped':<8}")
    print(f"{'-'*70}")
    for r in results:
        print(f"{r['threshold']:<12.2f} "
              f"{r['precision']:<12.2%} "
              f"{r['recall']:<12.2%} "
              f"{r['f1']:<12.3f} "
              f"{r['accuracy']:<12.2%} "
              f"{r['skipped']:<8d}")
    best = evaluator.pick_best(results)
    print(f"Best threshold: {best['threshold']:.2f} (f1 {best['f1']:.3f})")
    print(f"{'='*70}\n")
    return results


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Query word2vec embeddings as a lexical resource")
    parser.add_argument(
        "--model",
        type=str,
        default=config.EMBEDDING_MODEL,
        help=f"Vector file or gensim-data model name (default: {config.EMBEDDING_MODEL})"
    )
    parser.add_argument(
        "--binary",
        action="store_true",
        default=None,
        help="Read the vector file as binary word2vec format"
    )
    parser.add_argument(
        "--threshold",
        type=float,
        default=None,
        help=f"Similarity threshold for relations (default: {config.SIMILARITY_THRESHOLD})"
    )
    parser.add_argument(
        "--normalization",
        choices=["clip", "shift"],
        default=None,
        help=f"How cosine similarity is mapped to [0, 1] (default: {config.NORMALIZATION})"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    related = subparsers.add_parser("related", help="Nearest words of a word")
    related.add_argument("word")
    related.add_argument("--weighted", action="store_true", help="Show similarity scores")
    related.add_argument(
        "--topn",
        type=int,
        default=None,
        help=f"Number of words to return (default: {config.NB_RELATED_WORDS})"
    )

    similarity = subparsers.add_parser("similarity", help="Normalized similarity of two words")
    similarity.add_argument("word1")
    similarity.add_argument("word2")

    relations = subparsers.add_parser("relations", help="Relations holding between two words")
    relations.add_argument("word1")
    relations.add_argument("word2")

    evaluate = subparsers.add_parser("evaluate", help="Evaluate thresholds on gold word pairs")
    evaluate.add_argument("pairs", help="TSV file with word1, word2, label columns")
    evaluate.add_argument(
        "--thresholds",
        type=float,
        nargs="+",
        default=None,
        help="Thresholds to evaluate (default: the configured threshold)"
    )
    return parser


def resolve_log_level(name: str) -> int:
    """Turn a level name such as "info" into its logging constant."""
    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {name!r}")
    return level


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command == "evaluate" and args.thresholds:
        bad = [t for t in args.thresholds if not 0.0 <= t <= 1.0]
        if bad:
            parser.error(f"thresholds must be between 0 and 1, got {bad}")

    try:
        level = resolve_log_level(config.LOG_LEVEL)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    try:
        adaptor = Word2VecAdaptor(
            args.model,
            threshold=args.threshold,
            related_words=getattr(args, "topn", None),
            normalization=args.normalization,
            binary=args.binary,
        )
        if args.command == "related":
            show_related(adaptor, args.word, weighted=args.weighted)
        elif args.command == "similarity":
            print(f"{adaptor.scorer.similarity(args.word1, args.word2):.4f}")
        elif args.command == "relations":
            show_relations(adaptor, args.word1, args.word2)
        elif args.command == "evaluate":
            run_evaluation(adaptor, args.pairs, args.thresholds)
    except (LexiconError, ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
