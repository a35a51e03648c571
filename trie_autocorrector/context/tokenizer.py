# trie_autocorrector/context/tokenizer.py
# whitespace tokenizer for dictionary sources

from typing import Iterable, Iterator, TextIO


def simple_tokenize(s: str):
    """Split on any run of whitespace. Empty input gives []."""
    if not s:
        return []
    return s.split()


def iter_tokens(lines: Iterable[str]) -> Iterator[str]:
    """Yield whitespace-delimited tokens from an iterable of lines."""
    for line in lines:
        yield from simple_tokenize(line)


def read_tokens(fh: TextIO) -> Iterator[str]:
    """Stream tokens from an open text file without loading it whole."""
    return iter_tokens(fh)
