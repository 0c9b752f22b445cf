# word_suggestion/context/tokenizer.py
# corpus tokenizer: raw message lines -> lowercased token lists

import re
from typing import Iterable, List, Union

Token = str
CorpusLine = List[Token]

# same line breaks as reading a file in text mode, nothing else
_newline_re = re.compile(r"\r\n|\r|\n")


def tokenize_line(line: str) -> CorpusLine:
    """
    Lowercase a line and split it on runs of whitespace.
    Punctuation stays part of the token ("dogs!" != "dogs").
    """
    if not line:
        return []
    return line.lower().split()


def tokenize_corpus(text: Union[str, Iterable[str]]) -> List[CorpusLine]:
    """
    Turn corpus text into an ordered list of token lines.
    Blank and whitespace-only lines are dropped, order is preserved.
    Accepts a whole text (str), a list of lines or an open text stream.
    """
    if isinstance(text, str):
        text = _newline_re.split(text)
    out = []
    for line in text:
        if not line or line.isspace():
            continue
        out.append(tokenize_line(line))
    return out
