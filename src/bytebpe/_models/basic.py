"""Basic byte-level tokenizer implementation."""

from typing import override

from .base import Tokenizer
from .._bpe import bytes_of
from ..trainer import check_vocab_size, train_bpe


class BasicTokenizer(Tokenizer):
    """
    Tokenizer that operates directly on byte sequences without regex splitting.

    Example:
       >>> tok = BasicTokenizer()
       >>> tok.train("aaabdaaabac", vocab_size=276)
       >>> tok.encode("aaabdaaabac")
       [258, 100, 258, 97, 99]
    """

    TOKENIZER_TYPE = "basic"

    @override
    def train(
        self, text: str | list[str], vocab_size: int, verbose: bool = False
    ) -> None:
        """
        Train the tokenizer on raw text using byte-level BPE.

        This implementation concatenates list inputs, encodes text as UTF-8
        bytes, and learns ``vocab_size - vocab_start`` merges on top of the
        base byte vocabulary.

        :param text: Training text as a single string or list of strings.
        :param vocab_size: Target vocabulary size including the base 256 bytes.
        :param verbose: Log each learned merge when ``True``.
        :raises VocabularyError: If ``vocab_size`` does not exceed ``vocab_start``
            or is too large for the configured id width.
        """
        check_vocab_size(vocab_size, self.config)

        # handle list input and convert text to bytes
        if isinstance(text, list):
            text = "".join(text)

        tokens = bytes_of(text)

        # merges beyond base byte vocabulary
        n_merges = vocab_size - self.config.vocab_start

        result = train_bpe(tokens, n_merges, verbose=verbose, config=self.config)

        self.merges = result.merges  # used for encoding text -> tokens
        self.vocab = result.vocab  # used for decoding tokens -> text
        self._trained = True
