"""Custom exception hierarchy for bytebpe errors."""

from .types import Token, TokenPair


class ByteBPEError(Exception):
    """Base exception for all bytebpe errors."""


class ConfigError(ByteBPEError):
    """Raised when a configuration value is invalid."""

    def __init__(self, message: str, *, field: str | None = None) -> None:
        if field:
            message = f"{message} (field: {field})"
        super().__init__(message)
        self.field = field


class TrainingError(ByteBPEError):
    """Raised when a tokenizer is used before it has been trained."""


class VocabularyError(ByteBPEError):
    """Raised when vocabulary operations fail."""

    def __init__(
        self,
        message: str,
        *,
        vocab_size: int | None = None,
        invalid_tok: Token | None = None,
    ) -> None:
        """Initialize with optional token and vocab_size that get appended to the message."""
        extra = ""
        # training: vocab size out of range
        if vocab_size is not None:
            extra += f" (vocab size: {vocab_size})"
        # decoding: token not in vocab
        if invalid_tok is not None:
            extra += f" (invalid token: {invalid_tok})"
        super().__init__(message + extra)
        self.vocab_size = vocab_size
        self.invalid_tok = invalid_tok


class UnknownIdentifierError(VocabularyError):
    """Raised when decoding meets a token id that the vocabulary does not define."""

    def __init__(self, invalid_tok: Token) -> None:
        super().__init__("token id not in vocabulary", invalid_tok=invalid_tok)


class InvalidMergeTableError(VocabularyError):
    """Raised when a merge table is corrupt or out of order."""

    def __init__(
        self,
        message: str,
        *,
        pair: TokenPair | None = None,
        invalid_tok: Token | None = None,
    ) -> None:
        if pair is not None:
            message = f"{message} (pair: {pair})"
        super().__init__(message, invalid_tok=invalid_tok)
        self.pair = pair
