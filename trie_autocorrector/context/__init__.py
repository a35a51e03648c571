# trie_autocorrector/context/__init__.py
# token normalization and tokenizing at the boundary of the PrefixTree

from .normalizer import normalize_token, normalize_tokens  # letters only, lower-case
from .tokenizer import simple_tokenize, iter_tokens, read_tokens  # whitespace split

__all__ = [
    "normalize_token",
    "normalize_tokens",
    "simple_tokenize",
    "iter_tokens",
    "read_tokens",
]
