"""bytebpe: byte-level BPE training, encoding and decoding."""

from ._bpe import bpe_freqs, bpe_merge, bytes_of, most_frequent_pair
from ._models.base import Tokenizer
from ._models.basic import BasicTokenizer
from .codec import decode, decode_batch, decode_with_merges, encode, encode_batch
from .config import BASE_VOCAB_SIZE, BPEConfig
from .errors import (
    ByteBPEError,
    ConfigError,
    InvalidMergeTableError,
    TrainingError,
    UnknownIdentifierError,
    VocabularyError,
)
from .merges import MergeTable
from .trainer import BPETrainingResult, train, train_bpe
from .vocab import vocabulary_of

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("bytebpe")
except PackageNotFoundError:
    __version__ = "dev"

__all__ = [
    "BASE_VOCAB_SIZE",
    "BPEConfig",
    "BPETrainingResult",
    "BasicTokenizer",
    "ByteBPEError",
    "ConfigError",
    "InvalidMergeTableError",
    "MergeTable",
    "Tokenizer",
    "TrainingError",
    "UnknownIdentifierError",
    "VocabularyError",
    "bpe_freqs",
    "bpe_merge",
    "bytes_of",
    "decode",
    "decode_batch",
    "decode_with_merges",
    "encode",
    "encode_batch",
    "most_frequent_pair",
    "train",
    "train_bpe",
    "vocabulary_of",
]
