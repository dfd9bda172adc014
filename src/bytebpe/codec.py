"""Encoding text with trained merges and decoding tokens back to text."""

from collections.abc import Mapping, Sequence

from ._bpe import bpe_freqs, bpe_merge, bytes_of
from .errors import UnknownIdentifierError
from .types import Token, TokenPair, Vocabulary
from .vocab import vocabulary_of


def encode(text: str, merges: Mapping[TokenPair, Token]) -> list[Token]:
    """
    Encode text into tokens by replaying learned merges.

    Merges are applied in training order: at every step the pair with the
    lowest merge token wins, because higher tokens may be built out of lower
    ones. Encoding stops when no adjacent pair has a merge rule.

    :param text: Input text to encode.
    :param merges: Merge rules, e.g. a :class:`MergeTable`.
    :returns: Encoded token sequence.
    """
    tokens = bytes_of(text)
    while len(tokens) >= 2:
        freqs = bpe_freqs(tokens)
        # retrieve the byte pair with the lowest merge index
        pair = min(freqs, key=lambda p: merges.get(p, float("inf")))
        # no merge mapping for any remaining pair
        if pair not in merges:
            break
        tokens = bpe_merge(tokens, pair, merges[pair])

    return tokens


def encode_batch(texts: Sequence[str], merges: Mapping[TokenPair, Token]) -> list[list[Token]]:
    """Encode many texts, keeping input order."""
    return [encode(text, merges) for text in texts]


def decode(tokens: Sequence[Token], vocab: Mapping[Token, bytes]) -> str:
    """
    Decode tokens into UTF-8 text.

    A single token may hold only part of a multi-byte character, so the
    joined bytes are decoded with invalid sequences replaced.

    :param tokens: Token sequence to decode.
    :param vocab: Token id to byte payload mapping.
    :returns: Decoded text where invalid UTF-8 is replaced.
    :raises UnknownIdentifierError: If a token is missing from ``vocab``.
    """
    buf = bytearray()
    for tok in tokens:
        try:
            buf += vocab[tok]
        except KeyError:
            raise UnknownIdentifierError(tok) from None
    # byte stream -> python string
    return buf.decode("utf-8", errors="replace")


def decode_batch(token_batch: Sequence[Sequence[Token]], vocab: Mapping[Token, bytes]) -> list[str]:
    """Decode many token sequences, keeping input order."""
    return [decode(tokens, vocab) for tokens in token_batch]


def decode_with_merges(tokens: Sequence[Token], merges: Mapping[TokenPair, Token]) -> str:
    """Build the vocabulary for ``merges`` and decode ``tokens`` with it."""
    vocab: Vocabulary = vocabulary_of(merges)
    return decode(tokens, vocab)
