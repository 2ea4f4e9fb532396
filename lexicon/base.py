"""
Generic lexical-semantic query interface.

Backends (wordnets, thesauri, word vector models, ...) implement whatever
subset of these operations they can answer and raise
UnsupportedOperationError for the rest.
"""
from abc import ABC, abstractmethod
from typing import Dict, Optional, Set

from lexicon.relations import WordRelation, ConceptRelation
from lexicon.types import Concept, Domain


class LexicalSemanticAPI(ABC):
    """Abstract interface over words, concepts, languages and domains."""

    # --- words ---

    @abstractmethod
    def get_related_words(self, language: Optional[str], domain: Optional[Domain],
                          word: str, relation: WordRelation) -> Set[str]:
        """
        Get words standing in the given relation to a word.

        Args:
            language: Language of the word (None if unknown)
            domain: Domain restricting the lookup (None for any)
            word: Query word
            relation: Relation the returned words must have to the query word

        Returns:
            Set of related words
        """

    @abstractmethod
    def get_related_words_weighted(self, language: Optional[str], domain: Optional[Domain],
                                   word: str, relation: WordRelation) -> Dict[str, float]:
        """Same as get_related_words, with a strength in [0, 1] for each word."""

    @abstractmethod
    def get_word_relations(self, language: Optional[str], domain: Optional[Domain],
                           word1: str, word2: str) -> Set[WordRelation]:
        """Get the relations holding between two words."""

    @abstractmethod
    def get_word_relations_weighted(self, language: Optional[str], domain: Optional[Domain],
                                    word1: str, word2: str) -> Dict[WordRelation, float]:
        """Get the relations between two words with their strengths."""

    @abstractmethod
    def get_word_languages(self, domain: Optional[Domain], word: str) -> Set[str]:
        """Get the languages a word belongs to."""

    @abstractmethod
    def get_word_domains(self, language: Optional[str], word: str) -> Set[Domain]:
        """Get the domains a word is used in."""

    @abstractmethod
    def get_word_domains_weighted(self, language: Optional[str], word: str,
                                  domains: Set[Domain]) -> Dict[Domain, float]:
        """Score how strongly a word belongs to each of the given domains."""

    # --- words and concepts ---

    @abstractmethod
    def get_concepts(self, language: Optional[str], domain: Optional[Domain],
                     word: str) -> Set[Concept]:
        """Get the concepts (senses) a word can denote."""

    @abstractmethod
    def get_concepts_weighted(self, language: Optional[str], domain: Optional[Domain],
                              word: str) -> Dict[Concept, float]:
        """Get the concepts of a word with the likelihood of each."""

    @abstractmethod
    def get_constrained_concepts(self, language: Optional[str], domain: Optional[Domain],
                                 word: str, hypernym: Concept) -> Set[Concept]:
        """Get the concepts of a word that fall under the given hypernym."""

    @abstractmethod
    def get_constrained_concepts_weighted(self, language: Optional[str], domain: Optional[Domain],
                                          word: str, hypernym: Concept) -> Dict[Concept, float]:
        """Weighted version of get_constrained_concepts."""

    @abstractmethod
    def get_words(self, language: Optional[str], concept: Optional[Concept]) -> Optional[Set[str]]:
        """Get the words lexicalizing a concept."""

    @abstractmethod
    def get_words_weighted(self, language: Optional[str],
                           concept: Optional[Concept]) -> Optional[Dict[str, float]]:
        """Get the words lexicalizing a concept with their weights."""

    @abstractmethod
    def get_gloss(self, language: Optional[str], concept: Concept) -> str:
        """Get the textual definition of a concept."""

    # --- concepts ---

    @abstractmethod
    def get_related_concepts(self, concept: Concept,
                             relations: Optional[Set[ConceptRelation]]) -> Set[Concept]:
        """Get the concepts related to a concept through any of the given relations."""

    @abstractmethod
    def get_related_concepts_weighted(self, concept: Concept,
                                      relations: Optional[Set[ConceptRelation]]) -> Dict[Concept, float]:
        """Weighted version of get_related_concepts."""

    @abstractmethod
    def get_concept_relations(self, concept1: Optional[Concept],
                              concept2: Optional[Concept]) -> Set[ConceptRelation]:
        """Get the relations holding between two concepts."""

    @abstractmethod
    def get_concept_relations_weighted(self, concept1: Optional[Concept],
                                       concept2: Optional[Concept]) -> Dict[ConceptRelation, float]:
        """Get the relations between two concepts with their strengths."""

    @abstractmethod
    def get_concept_languages(self, concept: Concept) -> Set[str]:
        """Get the languages in which a concept is lexicalized."""

    @abstractmethod
    def get_concept_domains(self, concept: Concept) -> Set[Domain]:
        """Get the domains a concept belongs to."""

    @abstractmethod
    def get_concept_domains_weighted(self, concept: Concept) -> Dict[Domain, float]:
        """Get the domains of a concept with their weights."""

    # --- resource ---

    @abstractmethod
    def get_languages(self) -> Set[str]:
        """Get all languages covered by the backend."""

    @abstractmethod
    def get_domains(self) -> Set[Domain]:
        """Get all domains covered by the backend."""
