"""
trie_autocorrector

Trie-based spelling corrector: exact lookup plus "did you mean"
suggestions within a bounded edit distance, ranked by word frequency.
"""

from .core import (
    AutoCorrector,
    PrefixTree,
    TrieNode,
    bounded_edit_distance,
    levenshtein,
)

__all__ = [
    "AutoCorrector",
    "PrefixTree",
    "TrieNode",
    "bounded_edit_distance",
    "levenshtein",
]

__version__ = "0.1.0"
