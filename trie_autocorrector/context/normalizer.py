# trie_autocorrector/context/normalizer.py
# Reduces raw tokens to the alphabet the PrefixTree stores: letters only, lower-case.


def normalize_token(token: str) -> str:
    """
    Keep alphabetic characters and lower-case them.
    "Hello," -> "hello", "don't" -> "dont", "42" -> "".
    """
    if not token:
        return ""
    return "".join(ch.lower() for ch in token if ch.isalpha())


def normalize_tokens(tokens):
    """Normalize each token and drop the ones that end up empty."""
    for t in tokens:
        clean = normalize_token(t)
        if clean:
            yield clean
