"""
Human-readable rendering of token payloads for training logs.
"""

import unicodedata

from .types import Token, TokenPair, Vocabulary


def render_bytes(b: bytes) -> str:
    """
    Decode bytes as UTF-8 and escape control characters.

    Invalid UTF-8 sequences are replaced with the Unicode replacement character.
    """
    cleaned = []
    for c in b.decode("utf-8", errors="replace"):
        # control category codes vary: Cc, Cf, Cn etc.
        if unicodedata.category(c).startswith("C"):
            cleaned.append(f"\\u{ord(c):04x}")
        else:
            cleaned.append(c)
    return "".join(cleaned)


def describe_merge(pair: TokenPair, new_tok: Token, vocab: Vocabulary) -> str:
    """Show how a merged token derives from its two children, e.g. ``[256] [a][a] -> aa``."""
    left, right = render_bytes(vocab[pair[0]]), render_bytes(vocab[pair[1]])
    return f"[{new_tok}] [{left}][{right}] -> {render_bytes(vocab[new_tok])}"
