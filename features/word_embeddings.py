"""
Load and query pre-trained word embeddings.
"""
import logging
import os
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import gensim.downloader as api
import numpy as np
from gensim import utils
from gensim.models import KeyedVectors

import config
from lexicon.errors import ModelLoadError

logger = logging.getLogger(__name__)

# Global cache for embedding models (loaded once, reused across instances)
_embedding_model_cache: Dict[Tuple[str, Optional[bool]], KeyedVectors] = {}

# Suffixes of models saved with gensim's own save()
NATIVE_SUFFIXES = {".kv", ".model", ".wv"}

# Suffixes of files written by word2vec itself (possibly gzipped)
WORD2VEC_SUFFIXES = {".bin", ".txt", ".vec", ".gz"}


def clear_cache():
    """Drop all models held in the in-memory cache."""
    _embedding_model_cache.clear()


def looks_like_path(source: str) -> bool:
    """True if a model source names a file rather than a gensim-data model."""
    if os.sep in source or (os.altsep and os.altsep in source) or "~" in source:
        return True
    return Path(source).suffix in WORD2VEC_SUFFIXES | NATIVE_SUFFIXES


class WordEmbeddings:
    """Wrapper for pre-trained word embeddings."""

    def __init__(self, source: str = config.EMBEDDING_MODEL, binary: Optional[bool] = None,
                 model: Optional[KeyedVectors] = None):
        """
        Initialize word embeddings.
        Uses global cache and disk cache to avoid reloading models.

        Args:
            source: Path to a vector file, or name of a gensim-data model
            binary: Whether a word2vec-format file is binary (default: guessed
                from the file extension)
            model: Already loaded vectors; skips loading and caching

        Raises:
            ModelLoadError: If the model cannot be loaded
        """
        self.source = str(source)
        self.binary = binary

        # one entry per (source, binary flag)
        cache_key = (self.source, binary)
        if model is not None:
            self.model = model
        elif cache_key in _embedding_model_cache:
            logger.debug("Reusing in-memory model %s", self.source)
            self.model = _embedding_model_cache[cache_key]
        else:
            self.model = self._load_model()
            _embedding_model_cache[cache_key] = self.model

    def _load_model(self) -> KeyedVectors:
        """Load the embedding model from a file, the disk cache or the gensim API."""
        path = Path(self.source).expanduser()
        try:
            if path.exists():
                return self._load_file(path)
            if looks_like_path(self.source):
                raise ModelLoadError(self.source, "No such file")
            return self._load_named(self.source)
        except ModelLoadError:
            raise
        except Exception as e:
            raise ModelLoadError(self.source, str(e)) from e

    def _load_file(self, path: Path) -> KeyedVectors:
        logger.info("Loading word embeddings from %s...", path)
        if path.suffix in NATIVE_SUFFIXES:
            # a full Word2Vec model keeps its vectors in .wv
            model = _as_keyed_vectors(utils.SaveLoad.load(str(path)), self.source)
        else:
            binary = self.binary if self.binary is not None else ".bin" in path.suffixes
            model = KeyedVectors.load_word2vec_format(str(path), binary=binary)
        logger.info("Loaded %d vectors of size %d from %s",
                    len(model.key_to_index), model.vector_size, path)
        return model

    def _load_named(self, model_name: str) -> KeyedVectors:
        # Create cache filename from model name (replace hyphens with underscores for filename)
        cache_path = Path(config.MODELS_DIR) / (model_name.replace("-", "_") + ".kv")

        # Try to load from disk cache first
        if cache_path.exists():
            try:
                logger.info("Loading word embeddings model from cache: %s...", cache_path)
                return KeyedVectors.load(str(cache_path))
            except Exception as e:
                logger.warning("Could not load from cache (%s), loading from API...", e)

        logger.info("Loading word embeddings model: %s (this may take a while on first run)...",
                    model_name)
        model = _as_keyed_vectors(api.load(model_name), model_name)
        logger.info("Successfully loaded %s", model_name)

        # Save to disk cache for future use
        try:
            cache_path.parent.mkdir(parents=True, exist_ok=True)
            model.save(str(cache_path))
            logger.info("Cached %s at %s", model_name, cache_path)
        except OSError as e:
            logger.warning("Could not save to cache (%s), but model is loaded", e)
        return model

    @property
    def vocabulary_size(self) -> int:
        return len(self.model.key_to_index)

    @property
    def vector_size(self) -> int:
        return self.model.vector_size

    def resolve_key(self, word: str) -> Optional[str]:
        """
        Find the vocabulary key of a single word, trying different case variations.

        Args:
            word: Word to look up

        Returns:
            The matching key, or None if no variant is in the vocabulary
        """
        for word_variant in [word, word.upper(), word.lower(), word.title()]:
            if word_variant in self.model.key_to_index:
                return word_variant
        return None

    def contains(self, word: str) -> bool:
        """True if every word of a word or phrase has a vector."""
        words = word.split()
        return bool(words) and all(self.resolve_key(w) is not None for w in words)

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    def get_embedding(self, word: str) -> Optional[np.ndarray]:
        """
        Get embedding vector for a word or phrase.
        Handles multi-word phrases by averaging word embeddings.

        Args:
            word: Word or phrase to embed

        Returns:
            Embedding vector or None if word not found
        """
        words = word.split()
        if len(words) > 1:
            # Average embeddings of the known words
            embeddings = [self._get_single_word_embedding(w) for w in words]
            embeddings = [emb for emb in embeddings if emb is not None]
            if embeddings:
                return np.mean(embeddings, axis=0)
            return None

        return self._get_single_word_embedding(word)

    def _get_single_word_embedding(self, word: str) -> Optional[np.ndarray]:
        key = self.resolve_key(word)
        if key is None:
            return None
        return self.model[key]

    def cosine_similarity(self, word1: str, word2: str) -> float:
        """
        Compute cosine similarity between two words.

        Args:
            word1: First word
            word2: Second word

        Returns:
            Similarity score between -1 and 1, or 0 if words not found
        """
        key1 = self.resolve_key(word1)
        key2 = self.resolve_key(word2)
        if key1 is not None and key2 is not None:
            return float(self.model.similarity(key1, key2))

        # Phrases (or unknown words) go through the averaged embeddings
        emb1 = self.get_embedding(word1)
        emb2 = self.get_embedding(word2)

        if emb1 is None or emb2 is None:
            return 0.0

        # Normalize vectors (use max to ensure minimum threshold for division)
        emb1_norm = emb1 / max(np.linalg.norm(emb1), 1e-8)
        emb2_norm = emb2 / max(np.linalg.norm(emb2), 1e-8)

        return float(np.dot(emb1_norm, emb2_norm))

    def most_similar(self, word: str, topn: int = config.NB_RELATED_WORDS) -> List[Tuple[str, float]]:
        """
        Find the nearest neighbours of a word or phrase.

        Args:
            word: Word or phrase to look up
            topn: Maximum number of neighbours to return

        Returns:
            (word, cosine similarity) pairs, most similar first; empty if the
            word is not in the vocabulary
        """
        if topn <= 0:
            return []
        keys = [self.resolve_key(w) for w in word.split()]
        keys = [k for k in keys if k is not None]
        if not keys:
            return []
        # gensim leaves the query keys out of the result
        neighbours = self.model.most_similar(positive=keys, topn=topn)
        return [(w, float(score)) for w, score in neighbours]


def _as_keyed_vectors(obj, source: str) -> KeyedVectors:
    if isinstance(obj, KeyedVectors):
        return obj
    wv = getattr(obj, "wv", None)
    if isinstance(wv, KeyedVectors):
        return wv
    raise ModelLoadError(source, f"expected word vectors, got {type(obj).__name__}")
