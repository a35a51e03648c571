# corrector.py
"""
AutoCorrector - boundary between raw text and the PrefixTree.

 - loads a whitespace-delimited word list into the tree (normalized tokens)
 - normalizes queries before forwarding them to PrefixTree.suggest()
 - keeps per-query statistics (QueryStats)

A dictionary that cannot be read is logged as a warning and leaves the tree
empty or partial; queries still work and simply find less.
"""

from __future__ import annotations
import logging
import time
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

from trie_autocorrector.context.normalizer import normalize_token
from trie_autocorrector.context.tokenizer import read_tokens
from trie_autocorrector.core.trie import DEFAULT_MAX_DIST, MAX_SUGGESTIONS, PrefixTree
from trie_autocorrector.utils.logger_utils import Log
from trie_autocorrector.utils.metrics_tracker import QueryStats

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class AutoCorrector:
    """
    Public API:
      load_dictionary(path) -> int
      load_words(words) -> int
      add_word(word) -> bool
      correct(word, max_dist=None) -> List[str]
      check(word, max_dist=None) -> (List[str], exact)
      is_correct(word) -> bool
      word_count, stats
    """

    def __init__(
        self,
        dictionary: Optional[PathLike] = None,
        *,
        max_dist: int = DEFAULT_MAX_DIST,
        max_suggestions: int = MAX_SUGGESTIONS,
        prune: bool = False,
    ) -> None:
        self.tree = PrefixTree()
        self.max_dist = max_dist
        self.max_suggestions = max_suggestions
        self.prune = prune
        self.stats = QueryStats()
        self.loaded = False

        if max_dist < 0:
            raise ValueError(f"max_dist must be >= 0, got {max_dist}")
        if max_suggestions < 1:
            raise ValueError(f"max_suggestions must be >= 1, got {max_suggestions}")

        if dictionary is not None:
            self.load_dictionary(dictionary)

    @classmethod
    def from_config(cls, cfg, dictionary: Optional[PathLike] = None) -> "AutoCorrector":
        """Build from a Config; `dictionary` overrides cfg["dictionary"]."""
        return cls(
            dictionary if dictionary is not None else cfg["dictionary"],
            max_dist=cfg["max_dist"],
            max_suggestions=cfg["max_suggestions"],
            prune=cfg["prune"],
        )

    # Loading ------------------------------------------------------------------
    def load_dictionary(self, path: PathLike) -> int:
        """
        Insert every normalized token of the file at `path`.
        Returns how many tokens were inserted; 0 if the file could not be read.
        """
        path = Path(path)
        count = 0
        try:
            with Log.time_block(f"load {path.name}"):
                with path.open("r", encoding="utf-8", errors="replace") as fh:
                    for token in read_tokens(fh):
                        if self.add_word(token):
                            count += 1
        except OSError as e:
            logger.warning("Could not open dictionary file %s: %s", path, e)
            if count:
                logger.warning("Dictionary %s only partially loaded (%d words)", path, count)
            return count

        self.loaded = True
        logger.info("Loaded %d words from dictionary (%d distinct).", count, self.tree.word_count)
        return count

    def load_words(self, words: Iterable[str]) -> int:
        """In-memory counterpart of load_dictionary."""
        count = 0
        for w in words:
            if self.add_word(w):
                count += 1
        if count:
            self.loaded = True
        return count

    def add_word(self, word: str) -> bool:
        """Normalize and insert; False if nothing was left to insert."""
        clean = normalize_token(word)
        if not clean:
            return False
        self.tree.insert(clean)
        return True

    # Queries ------------------------------------------------------------------
    def correct(self, word: str, max_dist: Optional[int] = None) -> List[str]:
        """
        Suggestions for a raw query token.
        [word] (normalized) when it is spelled correctly, [] when the token
        has no letters or nothing is close enough.
        """
        return self.check(word, max_dist)[0]

    def check(self, word: str, max_dist: Optional[int] = None) -> Tuple[List[str], bool]:
        """Like correct(), plus whether the token is already in the dictionary."""
        clean = normalize_token(word)
        if not clean:
            return [], False

        t0 = time.perf_counter()
        scored = self.tree.suggest_with_scores(
            clean,
            self.max_dist if max_dist is None else max_dist,
            self.max_suggestions,
            self.prune,
        )
        elapsed_ms = (time.perf_counter() - t0) * 1000.0
        out = [w for w, _ in scored]
        # only the exact-match path can return the query itself
        exact = out == [clean]
        self.stats.record_query(out, exact, elapsed_ms)
        return out, exact

    def is_correct(self, word: str) -> bool:
        clean = normalize_token(word)
        return bool(clean) and self.tree.search(clean)

    @property
    def word_count(self) -> int:
        return self.tree.word_count

    def __repr__(self) -> str:
        return f"AutoCorrector(words={self.word_count}, max_dist={self.max_dist}, prune={self.prune})"
