"""Tests for loading and querying word vectors."""

from __future__ import annotations

import logging

import numpy as np
import pytest
from gensim.models import KeyedVectors, Word2Vec

import config
from features import word_embeddings
from features.word_embeddings import WordEmbeddings
from lexicon.errors import ModelLoadError


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------


def test_load_word2vec_text_file(vector_file: str) -> None:
    emb = WordEmbeddings(vector_file)

    assert emb.vocabulary_size == 8
    assert emb.vector_size == 3
    assert emb.contains("queen")


def test_load_word2vec_binary_file(tmp_path, keyed_vectors: KeyedVectors) -> None:
    path = tmp_path / "vectors.bin"
    keyed_vectors.save_word2vec_format(str(path), binary=True)

    emb = WordEmbeddings(str(path))

    assert emb.vocabulary_size == 8
    np.testing.assert_allclose(emb.get_embedding("king"), [1.0, 0.0, 0.0])


def test_binary_flag_overrides_extension(tmp_path, keyed_vectors: KeyedVectors) -> None:
    path = tmp_path / "vectors.dat"
    keyed_vectors.save_word2vec_format(str(path), binary=True)

    emb = WordEmbeddings(str(path), binary=True)

    assert emb.contains("apple")


def test_load_native_keyed_vectors(tmp_path, keyed_vectors: KeyedVectors) -> None:
    path = tmp_path / "vectors.kv"
    keyed_vectors.save(str(path))

    emb = WordEmbeddings(str(path))

    assert emb.contains("banana")


def test_load_full_word2vec_model_uses_its_vectors(tmp_path) -> None:
    model = Word2Vec(sentences=[["hello", "world"]] * 5, vector_size=4, min_count=1, workers=1)
    path = tmp_path / "w2v.model"
    model.save(str(path))

    emb = WordEmbeddings(str(path))

    assert isinstance(emb.model, KeyedVectors)
    assert emb.contains("hello")


def test_same_source_shares_loaded_model(vector_file: str) -> None:
    first = WordEmbeddings(vector_file)
    second = WordEmbeddings(vector_file)

    assert first.model is second.model


def test_clear_cache_forces_reload(vector_file: str) -> None:
    first = WordEmbeddings(vector_file)
    word_embeddings.clear_cache()
    second = WordEmbeddings(vector_file)

    assert first.model is not second.model


def test_unreadable_file_raises_model_load_error(tmp_path) -> None:
    path = tmp_path / "broken.txt"
    path.write_text("this is not a vector file\n")

    with pytest.raises(ModelLoadError) as excinfo:
        WordEmbeddings(str(path))

    assert str(excinfo.value).startswith(f"Could not load word2vec vector file {path}")
    assert excinfo.value.__cause__ is not None
    assert isinstance(excinfo.value, OSError)


def test_unknown_model_name_raises_model_load_error(monkeypatch) -> None:
    def fail(name):
        raise ValueError(f"Incorrect model/corpus name: {name}")

    monkeypatch.setattr(word_embeddings.api, "load", fail)

    with pytest.raises(ModelLoadError, match="no-such-model"):
        WordEmbeddings("no-such-model")


def test_named_model_is_saved_and_reloaded_from_disk(monkeypatch, keyed_vectors) -> None:
    calls = []

    def fake_load(name):
        calls.append(name)
        return keyed_vectors

    monkeypatch.setattr(word_embeddings.api, "load", fake_load)
    WordEmbeddings("tiny-test-vectors")
    assert calls == ["tiny-test-vectors"]

    word_embeddings.clear_cache()
    emb = WordEmbeddings("tiny-test-vectors")

    assert calls == ["tiny-test-vectors"]
    assert emb.contains("prince")


@pytest.mark.parametrize(
    "source",
    ["typo/vectors.txt", "~/typo/vectors.bin", "vectors.bin", "vectors.vec.gz", "vectors.kv"],
)
def test_missing_file_is_not_looked_up_as_model_name(monkeypatch, tmp_path, source) -> None:
    calls = []
    monkeypatch.setattr(word_embeddings.api, "load", lambda name: calls.append(name))
    monkeypatch.chdir(tmp_path)

    with pytest.raises(ModelLoadError, match="No such file"):
        WordEmbeddings(source)

    assert calls == []


@pytest.mark.parametrize(
    "source, expected",
    [
        ("word2vec-google-news-300", False),
        ("glove-wiki-gigaword-100", False),
        ("models/vectors", True),
        ("~/vectors", True),
        ("vectors.bin", True),
        ("GoogleNews-vectors-negative300.bin.gz", True),
        ("w2v.model", True),
    ],
)
def test_looks_like_path(source: str, expected: bool) -> None:
    assert word_embeddings.looks_like_path(source) is expected


def test_named_model_survives_unwritable_cache_dir(
    monkeypatch, tmp_path, keyed_vectors, caplog
) -> None:
    plain_file = tmp_path / "plain"
    plain_file.write_text("not a directory")
    monkeypatch.setattr(config, "MODELS_DIR", plain_file / "models")
    monkeypatch.setattr(word_embeddings.api, "load", lambda name: keyed_vectors)
    caplog.set_level(logging.WARNING, logger="features.word_embeddings")

    emb = WordEmbeddings("tiny-test-vectors")

    assert emb.contains("queen")
    assert any(
        r.levelno == logging.WARNING and "Could not save to cache" in r.getMessage()
        for r in caplog.records
    )


def test_corrupt_disk_cache_falls_back_to_api(
    monkeypatch, tmp_path, keyed_vectors, caplog
) -> None:
    models_dir = tmp_path / "models"
    models_dir.mkdir()
    (models_dir / "tiny_test_vectors.kv").write_bytes(b"not a pickle")
    monkeypatch.setattr(config, "MODELS_DIR", models_dir)
    calls = []

    def fake_load(name):
        calls.append(name)
        return keyed_vectors

    monkeypatch.setattr(word_embeddings.api, "load", fake_load)
    caplog.set_level(logging.WARNING, logger="features.word_embeddings")

    emb = WordEmbeddings("tiny-test-vectors")

    assert calls == ["tiny-test-vectors"]
    assert emb.contains("prince")
    assert any(
        r.levelno == logging.WARNING and "Could not load from cache" in r.getMessage()
        for r in caplog.records
    )


def test_binary_flag_is_part_of_cache_key(vector_file: str) -> None:
    guessed = WordEmbeddings(vector_file)
    same = WordEmbeddings(vector_file)
    explicit = WordEmbeddings(vector_file, binary=False)

    assert same.model is guessed.model
    assert explicit.model is not guessed.model


def test_named_corpus_is_rejected(monkeypatch) -> None:
    monkeypatch.setattr(word_embeddings.api, "load", lambda name: [["not", "vectors"]])

    with pytest.raises(ModelLoadError, match="expected word vectors"):
        WordEmbeddings("text8")


# ---------------------------------------------------------------------------
# Lookup
# ---------------------------------------------------------------------------


def test_resolve_key_tries_case_variants(embeddings: WordEmbeddings) -> None:
    assert embeddings.resolve_key("king") == "king"
    assert embeddings.resolve_key("KING") == "king"
    assert embeddings.resolve_key("paris") == "Paris"
    assert embeddings.resolve_key("unknownword") is None


def test_contains_phrases(embeddings: WordEmbeddings) -> None:
    assert "king queen" in embeddings
    assert not embeddings.contains("king unknownword")
    assert not embeddings.contains("")


def test_phrase_embedding_averages_known_words(embeddings: WordEmbeddings) -> None:
    np.testing.assert_allclose(
        embeddings.get_embedding("king apple"), [0.5, 0.5, 0.0], rtol=1e-6
    )
    np.testing.assert_allclose(
        embeddings.get_embedding("king unknownword"), [1.0, 0.0, 0.0], rtol=1e-6
    )
    assert embeddings.get_embedding("foo bar") is None


def test_cosine_similarity(embeddings: WordEmbeddings) -> None:
    assert embeddings.cosine_similarity("king", "king") == pytest.approx(1.0)
    assert embeddings.cosine_similarity("king", "apple") == pytest.approx(0.0, abs=1e-6)
    assert embeddings.cosine_similarity("king", "anti") == pytest.approx(-1.0)
    assert embeddings.cosine_similarity("king", "unknownword") == 0.0


def test_cosine_similarity_of_phrase(embeddings: WordEmbeddings) -> None:
    # (0.5, 0.5, 0) against (1, 0, 0)
    assert embeddings.cosine_similarity("king apple", "king") == pytest.approx(2 ** -0.5)


def test_most_similar_orders_neighbours(embeddings: WordEmbeddings) -> None:
    neighbours = embeddings.most_similar("king", topn=2)

    assert [w for w, _ in neighbours] == ["queen", "prince"]
    assert all(isinstance(score, float) for _, score in neighbours)


def test_most_similar_excludes_query_words(embeddings: WordEmbeddings) -> None:
    words = [w for w, _ in embeddings.most_similar("king queen", topn=7)]

    assert "king" not in words
    assert "queen" not in words
    assert words[0] == "prince"


def test_most_similar_unknown_word_is_empty(embeddings: WordEmbeddings) -> None:
    assert embeddings.most_similar("unknownword") == []
    assert embeddings.most_similar("king", topn=0) == []
