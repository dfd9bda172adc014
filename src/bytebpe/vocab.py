"""Vocabulary construction from merge history."""

import logging
from collections.abc import Mapping

from .config import BASE_VOCAB_SIZE
from .errors import InvalidMergeTableError
from .types import Token, TokenPair, Vocabulary

log = logging.getLogger(__name__)


def base_vocabulary() -> Vocabulary:
    """Return the 256 single-byte tokens."""
    return {btok: bytes([btok]) for btok in range(BASE_VOCAB_SIZE)}


def vocabulary_of(merges: Mapping[TokenPair, Token]) -> Vocabulary:
    """
    Build token-to-bytes vocabulary mapping.

    Adds base 256 byte tokens, then merged tokens in merge order so child
    tokens exist before their parent.

    :param merges: Merge rules in training order.
    :returns: Mapping of every token id to its byte payload.
    :raises InvalidMergeTableError: If a rule refers to a token that is
        neither a base byte nor produced by an earlier rule, or reuses an
        id that is already defined.
    """
    vocab = base_vocabulary()
    for (tok0, tok1), mtok in merges.items():
        # a byte token or an earlier merge already owns this id
        if mtok in vocab:
            raise InvalidMergeTableError(
                "merge token is already defined", pair=(tok0, tok1), invalid_tok=mtok
            )
        try:
            vocab[mtok] = vocab[tok0] + vocab[tok1]
        except KeyError as e:
            raise InvalidMergeTableError(
                "merge rule refers to an undefined token",
                pair=(tok0, tok1),
                invalid_tok=e.args[0],
            ) from e

    log.debug(f"built vocabulary with {len(vocab)} tokens")
    return vocab
