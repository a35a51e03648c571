"""
trie_autocorrector.core

The data structure and the code around it:
 - PrefixTree / TrieNode: arena-backed trie with word frequencies
 - bounded_edit_distance: Levenshtein with an early-exit ceiling
 - AutoCorrector: normalizes tokens and forwards them to the tree
 - run_benchmark / generate_dictionary: timing harness
"""

from .edit_distance import bounded_edit_distance, levenshtein
from .trie import PrefixTree, TrieNode, DEFAULT_MAX_DIST, MAX_SUGGESTIONS
from .corrector import AutoCorrector
from .bench_profiling import BenchmarkResult, generate_dictionary, run_benchmark

__all__ = [
    "bounded_edit_distance",
    "levenshtein",
    "PrefixTree",
    "TrieNode",
    "DEFAULT_MAX_DIST",
    "MAX_SUGGESTIONS",
    "AutoCorrector",
    "BenchmarkResult",
    "generate_dictionary",
    "run_benchmark",
]
