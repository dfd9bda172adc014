"""Standalone BPE training module."""

from collections.abc import Sequence
from dataclasses import dataclass
import logging

from ._bpe import bpe_freqs, bpe_merge, most_frequent_pair
from ._decorators import log_duration
from ._render import describe_merge
from .config import BPEConfig
from .errors import VocabularyError
from .merges import MergeTable
from .types import MergeRule, Token, Vocabulary
from .vocab import base_vocabulary

log = logging.getLogger(__name__)


@dataclass
class BPETrainingResult:
    """Results from one BPE training run."""

    vocab: Vocabulary
    merges: MergeTable
    n_merges_completed: int


@log_duration("training")
def train_bpe(
    tokens: Sequence[Token],
    n_merges: int,
    verbose: bool = False,
    config: BPEConfig | None = None,
) -> BPETrainingResult:
    """
    Learn up to ``n_merges`` merge rules from a token sequence.

    Each round counts adjacent pairs, merges every occurrence of the most
    frequent one into a fresh token and records the rule. Training stops
    early once no pair occurs at least twice.

    :param tokens: Input token sequence used for training. Not modified.
    :param n_merges: Maximum number of merge operations to perform.
    :param verbose: Log each learned merge when ``True``.
    :param config: Reserved range and id width; defaults to ``BPEConfig()``.
    :returns: Training output containing vocab, merge rules, and completed merge count.
    """
    config = config or BPEConfig()

    # work on a private copy so the caller's sequence is never touched
    toks: list[Token] = list(tokens)
    rules: list[MergeRule] = []
    vocab = base_vocabulary()

    for i in range(n_merges):
        freqs = bpe_freqs(toks)
        pair = most_frequent_pair(freqs)
        # 1. text compressed to a single token
        # 2. short text where no pair repeats before vocab size is met
        if pair is None:
            break

        new_tok = config.vocab_start + i
        toks = bpe_merge(toks, pair, new_tok)
        rules.append((pair, new_tok))
        vocab[new_tok] = vocab[pair[0]] + vocab[pair[1]]

        if verbose:
            log.info(
                "merge %d/%d: %s %s had %d occurrences",
                i + 1,
                n_merges,
                pair,
                describe_merge(pair, new_tok, vocab),
                freqs[pair],
            )

    if len(rules) < n_merges:
        log.warning(
            f"no more byte pairs to merge after {len(rules)} merges "
            f"(requested {n_merges}) stopping early"
        )

    return BPETrainingResult(
        vocab=vocab,
        merges=MergeTable(rules, vocab_start=config.vocab_start),
        n_merges_completed=len(rules),
    )


def train(
    ids: Sequence[Token],
    vocab_size: int,
    config: BPEConfig | None = None,
) -> MergeTable:
    """
    Train a merge table that grows the vocabulary up to ``vocab_size``.

    :param ids: Base token sequence, usually from :func:`bytes_of`.
    :param vocab_size: Target vocabulary size including the reserved range.
    :param config: Reserved range and id width; defaults to ``BPEConfig()``.
    :returns: The learned merge table, possibly shorter than requested.
    :raises VocabularyError: If ``vocab_size`` does not exceed the reserved
        range or does not fit in the configured id width.
    """
    config = config or BPEConfig()
    check_vocab_size(vocab_size, config)
    return train_bpe(ids, vocab_size - config.vocab_start, config=config).merges


def check_vocab_size(vocab_size: int, config: BPEConfig) -> None:
    """Raise ``VocabularyError`` unless ``vocab_size`` leaves room for at least one merge."""
    if vocab_size <= config.vocab_start:
        raise VocabularyError(
            f"vocab size must be greater than {config.vocab_start}",
            vocab_size=vocab_size,
        )
    if vocab_size > config.max_vocab_size:
        raise VocabularyError(
            f"vocab size must not exceed {config.max_vocab_size} for {config.id_bits}-bit ids",
            vocab_size=vocab_size,
        )
