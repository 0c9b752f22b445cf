# word_suggestion/context/normalizer.py


def normalize_word(s: str) -> str:
    """Normalize a query the same way corpus tokens are (strip + lowercase)."""
    if not s:
        return ""
    return s.strip().lower()
