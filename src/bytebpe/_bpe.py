"""
Core Byte Pair Encoding (BPE) operations.
"""

from collections.abc import Sequence

from .types import Token, TokenPair


def bytes_of(text: str) -> list[Token]:
    """
    Convert text into base tokens, one per byte of its UTF-8 encoding.

    Every token lies in the [0-255] range. Lone surrogates are replaced
    rather than raising.
    """
    return list(text.encode("utf-8", errors="replace"))


def bpe_freqs(tokens: Sequence[Token]) -> dict[TokenPair, int]:
    """
    Compute the frequency of all consecutive token pairs in the token list.

    Args:
        tokens (Sequence[Token]): Tokens to analyze.

    Returns:
        dict[TokenPair, int]: Mapping of token pairs to their occurrence counts.
            Empty for sequences shorter than two tokens.
    """
    pairs: dict[TokenPair, int] = {}

    for pair in zip(tokens, tokens[1:]):
        pairs[pair] = pairs.get(pair, 0) + 1

    return pairs


def most_frequent_pair(freqs: dict[TokenPair, int]) -> TokenPair | None:
    """
    Pick the pair to merge next.

    Ties on count go to the smallest pair so that training is reproducible
    regardless of dict ordering. Returns ``None`` if no pair occurs at least
    twice.
    """
    if not freqs:
        return None
    pair = min(freqs, key=lambda p: (-freqs[p], p))
    if freqs[pair] < 2:
        return None
    return pair


def bpe_merge(tokens: Sequence[Token], target: TokenPair, new_tok: Token) -> list[Token]:
    """
    Merge all occurrences of a target token pair into a single new token.

    Matches are taken left to right without overlap, so merging ``(e, e)``
    into ``"eee"`` leaves the trailing ``e`` untouched.

    Note that some of the new tokens generated may be partial utf-8 sequences
    so they cannot be decoded into valid strings on their own. When decoding,
    set errors = "replace" in python's `bytes.decode()` method.

    Args:
        tokens (Sequence[Token]): Original tokens.
        target (TokenPair): The consecutive pair of tokens to merge.
        new_tok (Token): The new token that replaces the target pair.

    Returns:
        list[Token]: New token list with all target pairs replaced by new_tok.
    """
    if len(tokens) < 2:
        return list(tokens)

    newtoks: list[Token] = []
    n = len(tokens)

    i = 0
    while i < n:
        # check if we can form a pair and it matches the target
        if i < n - 1 and tokens[i] == target[0] and tokens[i + 1] == target[1]:
            newtoks.append(new_tok)
            i += 2
        else:
            newtoks.append(tokens[i])
            i += 1

    return newtoks
