"""
word_suggestion

Next-word suggestions from a bigram model of short text messages.
"""

from .context import tokenize_corpus, tokenize_line, normalize_word
from .core import BigramModel, BigramConfig, CorpusUnreadable, read_corpus

__all__ = [
    "BigramModel",
    "BigramConfig",
    "CorpusUnreadable",
    "read_corpus",
    "tokenize_corpus",
    "tokenize_line",
    "normalize_word",
]

__version__ = "0.1.0"
