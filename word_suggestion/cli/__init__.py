# word_suggestion/cli/__init__.py

from .cli import CLI, main, format_suggestions

__all__ = ["CLI", "main", "format_suggestions"]
