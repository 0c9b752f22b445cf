"""
word_suggestion.core

The suggestion engine.
Contains:
 - the bigram frequency model and its query config (BigramModel, BigramConfig)
 - the corpus file reader (read_corpus)
 - the error raised when the corpus can't be read (CorpusUnreadable)
"""

from .errors import CorpusUnreadable
from .corpus_loader import read_corpus
from .bigram_model import BigramModel, BigramConfig, DEFAULT_CONNECTORS

__all__ = [
    "BigramModel",
    "BigramConfig",
    "DEFAULT_CONNECTORS",
    "CorpusUnreadable",
    "read_corpus",
]
