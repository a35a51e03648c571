# trie.py
# Prefix tree with per-word frequencies and "did you mean" suggestions.
# Nodes live in a flat arena (list) and refer to their children by index,
# so insertion, lookup, traversal and teardown never recurse.

from __future__ import annotations
import logging
from typing import Dict, Iterable, List, Optional, Set, Tuple

from .edit_distance import bounded_edit_distance, edit_row, first_row

logger = logging.getLogger(__name__)

Word = str
Score = int
Candidate = Tuple[Word, Score]

ROOT = 0
DEFAULT_MAX_DIST = 2
MAX_SUGGESTIONS = 5


class TrieNode:
    """
    A single node in the PrefixTree.
    children: char -> arena index of the child node
    is_word: True if the path from the root to this node is an inserted word
    freq: how many times that word was inserted (0 on internal nodes)
    """

    __slots__ = ("children", "is_word", "freq")

    def __init__(self) -> None:
        self.children: Dict[str, int] = {}
        self.is_word = False
        self.freq = 0

    def __repr__(self) -> str:
        return f"TrieNode(children={sorted(self.children)}, is_word={self.is_word}, freq={self.freq})"


def _rank_key(item: Candidate) -> Tuple[int, str]:
    # higher frequency first, then lexicographic
    return (-item[1], item[0])


class PrefixTree:
    """
    Trie used by the AutoCorrector for:
     - exact membership checks
     - fuzzy suggestions within a bounded edit distance, ranked by frequency
     - prefix completion (words_with_prefix)

    Not thread safe: wrap the whole tree in a lock if it is shared.
    """

    def __init__(self) -> None:
        self._nodes: List[TrieNode] = [TrieNode()]
        self._word_count = 0

    # properties ----------------------------------------------------------------
    @property
    def root(self) -> TrieNode:
        return self._nodes[ROOT]

    @property
    def word_count(self) -> int:
        """Number of distinct words inserted."""
        return self._word_count

    @property
    def node_count(self) -> int:
        """Number of nodes in the arena, root included."""
        return len(self._nodes)

    # insertion -----------------------------------------------------------------
    def insert(self, word: str) -> None:
        """
        Insert a word, creating nodes for unseen characters.
        Repeat insertions only bump the word's frequency.
        The empty word is ignored: the root is never a word.
        """
        if not word:
            return

        nodes = self._nodes
        idx = ROOT
        for ch in word:
            nxt = nodes[idx].children.get(ch)
            if nxt is None:
                nxt = len(nodes)
                nodes.append(TrieNode())
                nodes[idx].children[ch] = nxt
            idx = nxt

        node = nodes[idx]
        if not node.is_word:
            node.is_word = True
            self._word_count += 1
        node.freq += 1

    def insert_many(self, words: Iterable[str]) -> None:
        for w in words:
            self.insert(w)

    # lookup --------------------------------------------------------------------
    def _find_index(self, s: str) -> Optional[int]:
        """Walk the path spelled by s; None as soon as an edge is missing."""
        nodes = self._nodes
        idx: Optional[int] = ROOT
        for ch in s:
            idx = nodes[idx].children.get(ch)
            if idx is None:
                return None
        return idx

    def _find(self, s: str) -> Optional[TrieNode]:
        idx = self._find_index(s)
        return None if idx is None else self._nodes[idx]

    def search(self, word: str) -> bool:
        """True if word was inserted at least once."""
        node = self._find(word)
        return node is not None and node.is_word

    def starts_with(self, prefix: str) -> bool:
        """True if some inserted word starts with a non-empty prefix."""
        if not prefix:
            return False
        return self._find(prefix) is not None

    def frequency(self, word: str) -> int:
        """Insertion count of word (0 when absent)."""
        node = self._find(word)
        if node is None or not node.is_word:
            return 0
        return node.freq

    def __contains__(self, word: str) -> bool:
        return self.search(word)

    def __len__(self) -> int:
        return self._word_count

    # prefix completion ---------------------------------------------------------
    def words_with_prefix(self, prefix: str, limit: int = 50) -> List[Candidate]:
        """
        Return (word, freq) for words starting with prefix.
        Sorted by higher freq first, lexicographically second.
        """
        if not prefix:
            return []
        start = self._find_index(prefix)
        if start is None:
            return []

        nodes = self._nodes
        out: List[Candidate] = []
        stack: List[Tuple[int, str]] = [(start, prefix)]
        while stack:
            idx, spelled = stack.pop()
            node = nodes[idx]
            if node.is_word:
                out.append((spelled, node.freq))
            for ch, child in node.children.items():
                stack.append((child, spelled + ch))

        out.sort(key=_rank_key)
        return out[:limit]

    # suggestions ---------------------------------------------------------------
    def suggest(
        self,
        word: str,
        max_dist: int = DEFAULT_MAX_DIST,
        limit: int = MAX_SUGGESTIONS,
        prune: bool = False,
    ) -> List[Word]:
        """
        "Did you mean" lookup.
        An inserted word comes back alone as [word]. Otherwise returns up to
        `limit` words within max_dist edits of `word`, most frequent first,
        ties in lexicographic order.
        """
        return [w for w, _ in self.suggest_with_scores(word, max_dist, limit, prune)]

    def suggest_with_scores(
        self,
        word: str,
        max_dist: int = DEFAULT_MAX_DIST,
        limit: int = MAX_SUGGESTIONS,
        prune: bool = False,
    ) -> List[Candidate]:
        """Same as suggest() but keeps the (word, freq) pairs."""
        if limit < 1:
            raise ValueError(f"limit must be >= 1, got {limit}")

        node = self._find(word)
        if node is not None and node.is_word:
            return [(word, node.freq)]

        # no candidate can be closer than 0 edits
        if max_dist < 0:
            return []

        if prune:
            found = self._collect_pruned(word, max_dist)
        else:
            found = self._collect_all(word, max_dist)

        found.sort(key=_rank_key)
        logger.debug("suggest(%r, %d): %d candidates", word, max_dist, len(found))
        return found[:limit]

    def _collect_all(self, target: str, max_dist: int) -> List[Candidate]:
        """Visit every node and check each stored word against target."""
        nodes = self._nodes
        results: List[Candidate] = []
        seen: Set[str] = set()

        stack: List[Tuple[int, str]] = [(ROOT, "")]
        while stack:
            idx, spelled = stack.pop()
            node = nodes[idx]
            if node.is_word and spelled not in seen:
                if bounded_edit_distance(target, spelled, max_dist) <= max_dist:
                    results.append((spelled, node.freq))
                    seen.add(spelled)
            for ch, child in node.children.items():
                stack.append((child, spelled + ch))
        return results

    def _collect_pruned(self, target: str, max_dist: int) -> List[Candidate]:
        """
        Same result as _collect_all, but each frame carries the DP row of
        its spelled prefix against target. A row whose minimum is above
        max_dist rules out the node and its whole subtree.
        """
        nodes = self._nodes
        results: List[Candidate] = []
        seen: Set[str] = set()

        stack: List[Tuple[int, str, List[int]]] = [(ROOT, "", first_row(target))]
        while stack:
            idx, spelled, row = stack.pop()
            node = nodes[idx]
            if node.is_word and spelled not in seen and row[-1] <= max_dist:
                results.append((spelled, node.freq))
                seen.add(spelled)
            for ch, child in node.children.items():
                child_row = edit_row(row, ch, target)
                if min(child_row) <= max_dist:
                    stack.append((child, spelled + ch, child_row))
        return results

    # teardown ------------------------------------------------------------------
    def clear(self) -> None:
        """Drop every node; the tree is empty again but still usable."""
        self._nodes = [TrieNode()]
        self._word_count = 0

    def __repr__(self) -> str:
        return f"PrefixTree(words={self._word_count}, nodes={len(self._nodes)})"
