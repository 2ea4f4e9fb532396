"""
Adaptor exposing word2vec-style embeddings through the lexical-semantic interface.

A flat vector space only knows how close two words are, so the adaptor answers
nearest-neighbour and similarity queries. Synonymy and antonymy cannot be told
apart from plain relatedness, and languages, domains, glosses and concept
hierarchies do not exist in the model; those operations raise
UnsupportedOperationError.
"""
import logging
from typing import Dict, Optional, Set

import config
from features.word_embeddings import WordEmbeddings
from lexicon.base import LexicalSemanticAPI
from lexicon.errors import UnsupportedOperationError
from lexicon.relations import WordRelation, ConceptRelation
from lexicon.types import Concept, Domain, WordVector
from similarity.embedding_similarity import EmbeddingSimilarity

logger = logging.getLogger(__name__)

NOT_SUPPORTED = "Not supported by word vector models."


class Word2VecAdaptor(LexicalSemanticAPI):
    """Lexical-semantic backend over a pre-trained word vector model."""

    def __init__(self, source: str = config.EMBEDDING_MODEL, threshold: Optional[float] = None,
                 related_words: Optional[int] = None, normalization: Optional[str] = None,
                 binary: Optional[bool] = None, embeddings: Optional[WordEmbeddings] = None):
        """
        Load the vector model and set up scoring.

        Args:
            source: Path to a vector file, or name of a gensim-data model
            threshold: Minimum similarity for a relation to hold (default 0.66)
            related_words: Number of nearest words returned by related-word queries
            normalization: How cosine similarity is mapped into [0, 1]
            binary: Whether a word2vec-format file is binary
            embeddings: Already loaded embeddings; source and binary are then ignored

        Raises:
            ModelLoadError: If the vector file cannot be loaded
        """
        self.embeddings = embeddings or WordEmbeddings(source, binary=binary)
        self.scorer = EmbeddingSimilarity(self.embeddings, threshold=threshold,
                                          normalization=normalization)
        self.related_words = config.NB_RELATED_WORDS if related_words is None else related_words
        logger.debug("Word2VecAdaptor ready: %d words, threshold %.2f",
                     self.embeddings.vocabulary_size, self.scorer.threshold)

    @property
    def threshold(self) -> float:
        return self.scorer.threshold

    # --- words ---

    def get_related_words(self, language: Optional[str], domain: Optional[Domain],
                          word: str, relation: WordRelation) -> Set[str]:
        """
        Return the nearest neighbours of a word.

        Language and domain are ignored; every non-lexical relation is served
        by the same neighbourhood.

        Raises:
            UnsupportedOperationError: For synonymy and antonymy
        """
        if relation in (WordRelation.ANTONYMY, WordRelation.SYNONYMY):
            raise UnsupportedOperationError(
                "Word vector models do not support antonymy or synonymy relations.")
        nearest = self.embeddings.most_similar(word, topn=self.related_words)
        return {w for w, _ in nearest}

    def get_related_words_weighted(self, language: Optional[str], domain: Optional[Domain],
                                   word: str, relation: WordRelation) -> Dict[str, float]:
        related = self.get_related_words(language, domain, word, relation)
        return {w: self._similarity(word, w) for w in related}

    def get_word_relations(self, language: Optional[str], domain: Optional[Domain],
                           word1: str, word2: str) -> Set[WordRelation]:
        return self.scorer.classify(self.get_word_relations_weighted(language, domain, word1, word2))

    def get_word_relations_weighted(self, language: Optional[str], domain: Optional[Domain],
                                    word1: str, word2: str) -> Dict[WordRelation, float]:
        sim = self._similarity(word1, word2)
        return {
            WordRelation.RELATEDNESS: sim,
            WordRelation.SIMILARITY: sim,
        }

    def get_word_languages(self, domain: Optional[Domain], word: str) -> Set[str]:
        raise UnsupportedOperationError(NOT_SUPPORTED)

    def get_word_domains(self, language: Optional[str], word: str) -> Set[Domain]:
        raise UnsupportedOperationError(NOT_SUPPORTED)

    def get_word_domains_weighted(self, language: Optional[str], word: str,
                                  domains: Set[Domain]) -> Dict[Domain, float]:
        raise UnsupportedOperationError(NOT_SUPPORTED)

    # --- words and concepts ---

    def get_concepts(self, language: Optional[str], domain: Optional[Domain],
                     word: str) -> Set[Concept]:
        """
        A word has exactly one "concept" here: the word itself, carrying its vector.
        """
        if not word:
            return set()
        vector = WordVector(word, self.embeddings.get_embedding(word))
        return {Concept(vector, word)}

    def get_concepts_weighted(self, language: Optional[str], domain: Optional[Domain],
                              word: str) -> Dict[Concept, float]:
        return {concept: 1.0 for concept in self.get_concepts(language, domain, word)}

    def get_constrained_concepts(self, language: Optional[str], domain: Optional[Domain],
                                 word: str, hypernym: Concept) -> Set[Concept]:
        raise UnsupportedOperationError(NOT_SUPPORTED)

    def get_constrained_concepts_weighted(self, language: Optional[str], domain: Optional[Domain],
                                          word: str, hypernym: Concept) -> Dict[Concept, float]:
        raise UnsupportedOperationError(NOT_SUPPORTED)

    def get_words(self, language: Optional[str], concept: Optional[Concept]) -> Optional[Set[str]]:
        if concept is None:
            return None
        return {concept.id}

    def get_words_weighted(self, language: Optional[str],
                           concept: Optional[Concept]) -> Optional[Dict[str, float]]:
        if concept is None:
            return None
        return {concept.id: 1.0}

    def get_gloss(self, language: Optional[str], concept: Concept) -> str:
        raise UnsupportedOperationError(NOT_SUPPORTED)

    # --- concepts ---

    def get_related_concepts(self, concept: Concept,
                             relations: Optional[Set[ConceptRelation]]) -> Set[Concept]:
        # relations are ignored: the only thing a vector model knows is relatedness
        related = self.get_related_words(None, None, concept.id, WordRelation.RELATEDNESS)
        return {Concept(w, w) for w in related}

    def get_related_concepts_weighted(self, concept: Concept,
                                      relations: Optional[Set[ConceptRelation]]) -> Dict[Concept, float]:
        related = self.get_related_words_weighted(None, None, concept.id, WordRelation.RELATEDNESS)
        return {Concept(w, w): sim for w, sim in related.items()}

    def get_concept_relations(self, concept1: Optional[Concept],
                              concept2: Optional[Concept]) -> Set[ConceptRelation]:
        return self.scorer.classify(self.get_concept_relations_weighted(concept1, concept2))

    def get_concept_relations_weighted(self, concept1: Optional[Concept],
                                       concept2: Optional[Concept]) -> Dict[ConceptRelation, float]:
        if concept1 is None or concept2 is None:
            return {}
        rels = self.get_word_relations_weighted(None, None, concept1.id, concept2.id)
        sim = rels[WordRelation.SIMILARITY]
        return {
            ConceptRelation.RELATEDNESS: sim,
            ConceptRelation.SIMILARITY: sim,
        }

    def get_concept_languages(self, concept: Concept) -> Set[str]:
        raise UnsupportedOperationError(NOT_SUPPORTED)

    def get_concept_domains(self, concept: Concept) -> Set[Domain]:
        raise UnsupportedOperationError(NOT_SUPPORTED)

    def get_concept_domains_weighted(self, concept: Concept) -> Dict[Domain, float]:
        raise UnsupportedOperationError(NOT_SUPPORTED)

    # --- resource ---

    def get_languages(self) -> Set[str]:
        raise UnsupportedOperationError(NOT_SUPPORTED)

    def get_domains(self) -> Set[Domain]:
        raise UnsupportedOperationError(NOT_SUPPORTED)

    def _similarity(self, word1: str, word2: str) -> float:
        return self.scorer.similarity(word1, word2)
