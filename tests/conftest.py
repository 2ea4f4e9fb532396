import numpy as np
import pytest
from gensim.models import KeyedVectors

import config
from features import word_embeddings
from features.word_embeddings import WordEmbeddings

# Small hand-made vector space:
#   royalty words point along x, fruit along y, "car" along z,
#   "anti" is the exact opposite of "king".
VECTORS = {
    "king": [1.0, 0.0, 0.0],
    "queen": [0.9, 0.1, 0.0],
    "prince": [0.8, 0.3, 0.0],
    "apple": [0.0, 1.0, 0.0],
    "banana": [0.05, 0.95, 0.1],
    "car": [0.0, 0.0, 1.0],
    "anti": [-1.0, 0.0, 0.0],
    "Paris": [0.0, 0.2, 0.9],
}


@pytest.fixture(autouse=True)
def isolated_cache(tmp_path, monkeypatch):
    word_embeddings.clear_cache()
    monkeypatch.setattr(config, "MODELS_DIR", tmp_path / "models")
    yield
    word_embeddings.clear_cache()


@pytest.fixture
def keyed_vectors() -> KeyedVectors:
    kv = KeyedVectors(vector_size=3)
    kv.add_vectors(list(VECTORS), np.array(list(VECTORS.values()), dtype=np.float32))
    return kv


@pytest.fixture
def embeddings(keyed_vectors) -> WordEmbeddings:
    return WordEmbeddings(model=keyed_vectors)


@pytest.fixture
def vector_file(tmp_path, keyed_vectors) -> str:
    path = tmp_path / "vectors.txt"
    keyed_vectors.save_word2vec_format(str(path), binary=False)
    return str(path)
