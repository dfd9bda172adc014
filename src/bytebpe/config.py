"""Training configuration: reserved byte range and identifier width."""

import os
from dataclasses import dataclass
from typing import Final

from .errors import ConfigError

# raw byte values occupy token ids 0-255
BASE_VOCAB_SIZE: Final[int] = 256
DEFAULT_ID_BITS: Final[int] = 16

ENV_VOCAB_START: Final[str] = "BYTEBPE_VOCAB_START"
ENV_ID_BITS: Final[str] = "BYTEBPE_ID_BITS"


@dataclass(frozen=True)
class BPEConfig:
    """
    Settings shared by training and vocabulary construction.

    :param vocab_start: First id handed out to a merge. Ids below it are
        reserved, so it can never be smaller than the base byte range.
    :param id_bits: Width of a token id. The vocabulary may hold at most
        ``2 ** id_bits`` entries.
    """

    vocab_start: int = BASE_VOCAB_SIZE
    id_bits: int = DEFAULT_ID_BITS

    def __post_init__(self) -> None:
        if self.vocab_start < BASE_VOCAB_SIZE:
            raise ConfigError(
                f"vocab start must be at least {BASE_VOCAB_SIZE}",
                field="vocab_start",
            )
        # 9 bits is the smallest width that leaves room for a single merge
        if self.id_bits < 9:
            raise ConfigError("id width must be at least 9 bits", field="id_bits")
        if self.vocab_start >= self.max_vocab_size:
            raise ConfigError(
                f"vocab start {self.vocab_start} does not fit in {self.id_bits} bits",
                field="vocab_start",
            )

    @property
    def max_vocab_size(self) -> int:
        """Largest vocabulary the id width can address."""
        return 1 << self.id_bits

    @classmethod
    def from_env(cls) -> "BPEConfig":
        """Build a config from ``BYTEBPE_VOCAB_START`` / ``BYTEBPE_ID_BITS``, falling back to defaults."""
        return cls(
            vocab_start=_read_int(ENV_VOCAB_START, BASE_VOCAB_SIZE),
            id_bits=_read_int(ENV_ID_BITS, DEFAULT_ID_BITS),
        )


def _read_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"expected an integer, got {raw!r}", field=name)
