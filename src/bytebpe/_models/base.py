"""
Base tokenizer interface for byte-level tokenization implementations.
"""

import logging
from abc import ABC, abstractmethod

from ..codec import decode, decode_batch, encode, encode_batch
from ..config import BPEConfig
from ..errors import ConfigError, TrainingError
from ..merges import MergeTable
from ..types import Token, Vocabulary
from ..vocab import base_vocabulary, vocabulary_of

log = logging.getLogger(__name__)


class Tokenizer(ABC):
    """
    Abstract base class for byte-level tokenizers.

    Holds the learned merge table and the vocabulary derived from it.
    """

    TOKENIZER_TYPE: str = "base"

    def __init__(self, config: BPEConfig | None = None) -> None:
        """Initialize tokenizer with base 256 vocabulary."""
        super().__init__()
        self.config = config or BPEConfig()
        # byte pair -> merge token
        self.merges = MergeTable(vocab_start=self.config.vocab_start)
        # tokens -> bytes
        self.vocab: Vocabulary = base_vocabulary()
        self._trained = False

    @abstractmethod
    def train(
        self,
        text: str | list[str],
        vocab_size: int,
        verbose: bool = False,
    ) -> None:
        """Train tokenizer on text to learn merges up to target vocab size."""
        ...

    @classmethod
    def from_merges(
        cls, merges: MergeTable, config: BPEConfig | None = None
    ) -> "Tokenizer":
        """
        Create a ready-to-use tokenizer from an existing merge table.

        :param merges: Previously trained merge rules.
        :param config: Tokenizer config. Defaults to one whose ``vocab_start``
            is the table's.
        :raises ConfigError: If ``config.vocab_start`` differs from the table's.
        :raises InvalidMergeTableError: If the table cannot produce a vocabulary.
        """
        if config is None:
            config = BPEConfig(vocab_start=merges.vocab_start)
        elif config.vocab_start != merges.vocab_start:
            raise ConfigError(
                f"merge table starts at {merges.vocab_start}, config at {config.vocab_start}",
                field="vocab_start",
            )
        tok = cls(config)
        tok._set_merges(merges)
        return tok

    def encode(self, text: str) -> list[Token]:
        """Encode text into a sequence of tokens."""
        self._require_trained("encoding")
        return encode(text, self.merges)

    def decode(self, tokens: list[Token]) -> str:
        """
        Decode a sequence of tokens back into text.

        :raises TrainingError: If the tokenizer has not been trained yet.
        :raises UnknownIdentifierError: If any token ID is not in the vocabulary.
        """
        self._require_trained("decoding")
        return decode(tokens, self.vocab)

    def encode_batch(self, texts: list[str]) -> list[list[Token]]:
        """Encode multiple texts into sequences of tokens."""
        self._require_trained("encoding")
        if not texts:
            return []
        return encode_batch(texts, self.merges)

    def decode_batch(self, token_batch: list[list[Token]]) -> list[str]:
        """Decode multiple token sequences."""
        self._require_trained("decoding")
        if not token_batch:
            return []
        return decode_batch(token_batch, self.vocab)

    def vocab_size(self) -> int:
        """
        Return the number of entries in the vocabulary.

        This counts defined tokens. With a ``vocab_start`` above 256 the
        unused ids in between are not counted, so the largest token id can
        exceed ``vocab_size() - 1``.
        """
        return len(self.vocab)

    def _set_merges(self, merges: MergeTable) -> None:
        # build first so a bad table leaves the tokenizer untouched
        vocab = vocabulary_of(merges)
        self.merges = merges
        self.vocab = vocab
        self._trained = True
        log.debug(
            f"{self.TOKENIZER_TYPE} tokenizer ready: {len(self.merges)} merge rules, {len(self.vocab)} total tokens"
        )

    def _require_trained(self, action: str) -> None:
        if not self._trained:
            raise TrainingError(
                f"{self.__class__.__name__} must be trained before {action}"
            )
