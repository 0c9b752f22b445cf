# bigram_model.py
# word-following (bigram) frequency model for next-word suggestions.

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Iterable, Tuple, Optional, Sequence, Union
from collections import defaultdict, Counter
from pathlib import Path
import logging
import random

from ..context.tokenizer import tokenize_corpus
from ..utils.logger_utils import Log
from .corpus_loader import read_corpus

logger = logging.getLogger(__name__)

Word = str
BigramKey = Tuple[Word, Word]
Candidate = Tuple[Word, int, float]  # (follower, count, confidence)

DEFAULT_CONNECTORS = ("the", "this", "of")


@dataclass(frozen=True)
class BigramConfig:
    """
    Knobs for the suggestion query.
    seed only affects the order of padding connectors.
    """
    result_count: int = 3
    confidence_threshold: float = 0.65
    connectors: Tuple[Word, ...] = DEFAULT_CONNECTORS
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        # lists from json configs are accepted, stored as a tuple
        object.__setattr__(self, "connectors", tuple(self.connectors))
        if self.result_count < 0:
            raise ValueError(f"result_count must be >= 0, got {self.result_count}")
        if not 0.0 <= self.confidence_threshold <= 1.0:
            raise ValueError(
                f"confidence_threshold must be within [0, 1], got {self.confidence_threshold}"
            )
        if not self.connectors:
            raise ValueError("connectors must not be empty")


class BigramModel:
    """
    Counts how often each word immediately follows another across a corpus
    of messages, and ranks likely followers of a word.

    Suggestions are followers whose confidence P(follower | origin) is strictly
    above the threshold, ranked by raw count (ties: follower ascending).
    Short lists are padded with connector words so callers always get
    exactly result_count entries.

    The model is built once and never mutated afterwards.
    """

    def __init__(self, corpus_lines: Iterable[Sequence[Word]], config: Optional[BigramConfig] = None) -> None:
        self.cfg = config or BigramConfig()
        # origin → Counter(follower)
        self._chain: Dict[Word, Counter] = defaultdict(Counter)
        self._total_transactions: int = 0

        with Log.time_block("build_bigrams"):
            for tokens in corpus_lines:
                self._total_transactions += 1
                for a, b in zip(tokens, tokens[1:]):
                    self._chain[a][b] += 1
            # plain dict so lookups of unseen origins don't add keys
            self._chain = dict(self._chain)

        logger.info(
            "built bigram model: %d lines, %d distinct bigrams, %d origins",
            self._total_transactions, len(self), len(self._chain),
        )

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------
    @classmethod
    def from_text(cls, text: Union[str, Iterable[str]], config: Optional[BigramConfig] = None) -> "BigramModel":
        """Build from raw corpus text (a str, a list of lines or an open stream)."""
        return cls(tokenize_corpus(text), config=config)

    @classmethod
    def from_path(cls, path: Union[str, Path], config: Optional[BigramConfig] = None) -> "BigramModel":
        """Build from a corpus file. Raises CorpusUnreadable if it can't be read."""
        return cls.from_text(read_corpus(path), config=config)

    # ------------------------------------------------------------------
    # Counts
    # ------------------------------------------------------------------
    @property
    def total_transactions(self) -> int:
        return self._total_transactions

    def frequency(self, origin: Word, follower: Word) -> int:
        counter = self._chain.get(origin)
        if not counter:
            return 0
        return counter.get(follower, 0)

    def followers(self, origin: Word) -> Dict[Word, int]:
        return dict(self._chain.get(origin, {}))

    def sum_of_followers(self, origin: Word) -> int:
        """Number of times origin is followed by any word."""
        counter = self._chain.get(origin)
        if not counter:
            return 0
        return sum(counter.values())

    def frequency_table(self) -> Dict[BigramKey, int]:
        return {
            (a, b): c
            for a, counter in self._chain.items()
            for b, c in counter.items()
        }

    # ------------------------------------------------------------------
    # Scores
    # ------------------------------------------------------------------
    def confidence(self, origin: Word, follower: Word) -> float:
        """P(follower | origin). 0.0 when origin was never followed by anything."""
        total = self.sum_of_followers(origin)
        if total == 0:
            return 0.0
        return self.frequency(origin, follower) / total

    def support(self, origin: Word, follower: Word) -> float:
        """
        Share of corpus lines holding the pair, count / total_transactions.
        Not used for ranking. An empty corpus gives 0.0.
        """
        if self._total_transactions == 0:
            return 0.0
        return self.frequency(origin, follower) / self._total_transactions

    # ------------------------------------------------------------------
    # Suggestions (public API)
    # ------------------------------------------------------------------
    def candidates(self, origin: Word, confidence_threshold: Optional[float] = None) -> List[Candidate]:
        """
        Followers of origin with confidence > threshold as
        (follower, count, confidence), sorted by count desc then follower.
        """
        threshold = self.cfg.confidence_threshold if confidence_threshold is None else confidence_threshold
        counter = self._chain.get(origin)
        if not counter:
            return []

        total = sum(counter.values())
        kept = []
        for follower, count in counter.items():
            conf = count / total
            if conf > threshold:
                kept.append((follower, count, conf))

        kept.sort(key=lambda x: (-x[1], x[0]))
        return kept

    def suggest(
        self,
        origin: Word,
        result_count: Optional[int] = None,
        confidence_threshold: Optional[float] = None,
        rng: Optional[random.Random] = None,
    ) -> List[Word]:
        """
        Return exactly result_count next-word suggestions for origin.
        Real suggestions come first, connector padding after.
        rng only shuffles the padding; without one a fresh
        random.Random(cfg.seed) is used for this call.
        """
        n = self.cfg.result_count if result_count is None else result_count
        if n < 0:
            raise ValueError(f"result_count must be >= 0, got {n}")
        if n == 0:
            return []

        ranked = self.candidates(origin, confidence_threshold)
        out = [w for w, _, _ in ranked[:n]]

        missing = n - len(out)
        if missing:
            out.extend(self._padding(missing, rng))
        return out

    def _padding(self, n: int, rng: Optional[random.Random]) -> List[Word]:
        """n connectors in shuffled order, repeating the set when n exceeds it."""
        rng = rng or random.Random(self.cfg.seed)
        pool = list(self.cfg.connectors)
        rng.shuffle(pool)
        return [pool[i % len(pool)] for i in range(n)]

    # ------------------------------------------------------------------
    # Introspection helpers
    # ------------------------------------------------------------------
    def vocabulary_size(self) -> int:
        """Number of distinct origin words."""
        return len(self._chain)

    def __len__(self) -> int:
        return sum(len(c) for c in self._chain.values())

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, tuple) or len(key) != 2:
            return False
        return self.frequency(key[0], key[1]) > 0

    def __repr__(self) -> str:
        return (
            f"BigramModel(bigrams={len(self)}, transactions={self._total_transactions}, "
            f"result_count={self.cfg.result_count})"
        )
