# word_suggestion/core/corpus_loader.py
# reads the message corpus from disk for BigramModel.from_path

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Union

from .errors import CorpusUnreadable

logger = logging.getLogger(__name__)


def read_corpus(path: Union[str, Path], encoding: str = "utf-8") -> List[str]:
    """
    Return every line of the corpus file (newlines stripped, blank lines kept;
    the tokenizer decides what to drop).
    Raises CorpusUnreadable if the file is missing or cannot be decoded.
    """
    p = Path(path)
    try:
        with p.open("r", encoding=encoding) as fh:
            lines = [ln.rstrip("\r\n") for ln in fh]
    except (OSError, UnicodeDecodeError) as e:
        logger.error("failed to read corpus %s: %s", p, e)
        raise CorpusUnreadable(p, reason=str(e)) from e
    logger.debug("read %d lines from %s", len(lines), p)
    return lines
