"""Train a BasicTokenizer on a local text file or a Hugging Face dataset.

Reports merge count, compression ratio and size reduction, and checks that
the corpus survives an encode/decode round trip.
"""

import argparse
import logging
import time
from pathlib import Path

from bytebpe import BasicTokenizer, BPEConfig

HF_DATASET = "stevez80/Sci-Fi-Books-gutenberg"

# Configure logging to show INFO level and above.
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%H:%M:%S",
)
log = logging.getLogger("train")


def format_bytes(num_bytes: float) -> str:
    """Format bytes to human-readable string."""
    for unit in ["B", "KB", "MB", "GB"]:
        if num_bytes < 1024.0:
            return f"{num_bytes:.2f} {unit}"
        num_bytes /= 1024.0
    return f"{num_bytes:.2f} TB"


def load_corpus(args: argparse.Namespace) -> str:
    """Read the training text from ``--file`` or from ``--dataset``."""
    if args.file is not None:
        log.info(f"reading corpus from {args.file}")
        return Path(args.file).read_text(encoding="utf-8")

    # only needed for hub corpora
    from datasets import load_dataset

    log.info(f"loading {args.dataset} ({args.split})")
    ds = load_dataset(args.dataset, split=args.split)
    if args.num_docs is not None:
        return "".join(ds[: args.num_docs][args.column])
    return "".join(ds[args.column])


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--file", help="UTF-8 text file to train on")
    source.add_argument("--dataset", default=HF_DATASET, help="Hugging Face dataset name")
    parser.add_argument("--split", default="train")
    parser.add_argument("--column", default="text")
    parser.add_argument(
        "--num-docs",
        type=int,
        default=None,
        help="documents to read from --dataset (all when omitted); ignored with --file",
    )
    parser.add_argument("--vocab-size", type=int, default=512)
    parser.add_argument("--verbose", action="store_true", help="log every merge")
    return parser.parse_args(argv)


def main() -> None:
    args = parse_args()
    text = load_corpus(args)

    text_size = len(text.encode("utf-8"))
    log.info(f"corpus size: {format_bytes(text_size)} ({len(text):,} chars)")

    tokenizer = BasicTokenizer(BPEConfig.from_env())
    tokenizer.train(text, vocab_size=args.vocab_size, verbose=args.verbose)
    log.info(
        f"merges created: {len(tokenizer.merges):,}, vocab size: {tokenizer.vocab_size():,}"
    )

    encode_start = time.perf_counter()
    encoded = tokenizer.encode(text)
    encode_time = time.perf_counter() - encode_start
    log.info(f"encoded {len(encoded):,} tokens in {encode_time * 1000:.2f}ms")

    decoded = tokenizer.decode(encoded)
    if decoded != text:
        raise SystemExit(
            f"round trip failed: got {len(decoded)} chars, expected {len(text)} chars"
        )

    if encoded:
        compression_ratio = text_size / len(encoded)
        reduction_pct = (1 - len(encoded) / text_size) * 100
        log.info(
            f"compression ratio: {compression_ratio:.2f}x, size reduction: {reduction_pct:.1f}%"
        )


if __name__ == "__main__":
    main()
