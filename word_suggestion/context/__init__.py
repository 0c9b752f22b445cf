# word_suggestion/context/__init__.py
# text handling shared by the model and the prompt loop

from .tokenizer import tokenize_line, tokenize_corpus  # corpus lines -> token lists
from .normalizer import normalize_word  # query normalization

__all__ = [
    "tokenize_line",
    "tokenize_corpus",
    "normalize_word",
]
