"""Unit tests for the command-line training script."""

import importlib.util
from pathlib import Path

import pytest

SCRIPT = Path(__file__).resolve().parent.parent / "train.py"


@pytest.fixture(scope="module")
def train_script():
    """Load ``train.py`` from the repository root as a module."""
    spec = importlib.util.spec_from_file_location("train_script", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_num_docs_defaults_to_all(train_script):
    args = train_script.parse_args(["--file", "corpus.txt"])
    assert args.file == "corpus.txt"
    assert args.num_docs is None


def test_file_and_dataset_are_exclusive(train_script):
    with pytest.raises(SystemExit):
        train_script.parse_args(["--file", "corpus.txt", "--dataset", "some/name"])


def test_load_corpus_from_file(train_script, tmp_path):
    corpus = tmp_path / "corpus.txt"
    corpus.write_text("héllo wörld", encoding="utf-8")
    args = train_script.parse_args(["--file", str(corpus), "--num-docs", "5"])
    assert train_script.load_corpus(args) == "héllo wörld"
