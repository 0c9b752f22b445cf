# word_suggestion/core/errors.py


class CorpusUnreadable(OSError):
    """Raised when the corpus file cannot be opened or read."""

    def __init__(self, path, reason: str = ""):
        self.path = str(path)
        self.reason = reason
        msg = f"corpus not readable: {self.path}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)
