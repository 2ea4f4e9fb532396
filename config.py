# config.py
import os
from pathlib import Path

# Default pre-trained model, a path to a vector file or a gensim-data model name
EMBEDDING_MODEL = os.getenv("WORD2VEC_ADAPTOR_MODEL", "word2vec-google-news-300")

# the similarity threshold was set empirically
# based on an ontology matching experiment
SIMILARITY_THRESHOLD = float(os.getenv("WORD2VEC_ADAPTOR_THRESHOLD", "0.66"))

# Number of top related/similar words to return
NB_RELATED_WORDS = int(os.getenv("WORD2VEC_ADAPTOR_RELATED_WORDS", "10"))

# "clip" clamps cosine similarity into [0, 1], "shift" maps [-1, 1] onto [0, 1]
NORMALIZATION = os.getenv("WORD2VEC_ADAPTOR_NORMALIZATION", "clip")

# Directory for downloaded models saved in gensim's native format
MODELS_DIR = Path(os.getenv("WORD2VEC_ADAPTOR_MODELS_DIR", Path(__file__).parent / "models"))

LOG_LEVEL = os.getenv("WORD2VEC_ADAPTOR_LOG_LEVEL", "INFO")
