"""Load the noise-word list, the document list, and document tokens.

The docs file lists one document file name per line (any whitespace works);
those names double as document ids. A docs parquet with `doc_id` and `text`
columns can be used instead of separate files.
"""

from collections.abc import Iterator
from pathlib import Path

import polars as pl


class MissingInputFileError(FileNotFoundError):
    """An input the index cannot be built without is not on disk."""


def _require(path: Path, what: str) -> Path:
    if not path.is_file():
        raise MissingInputFileError(f"{what} not found at {path}")
    return path


def load_noise_words(path: Path) -> frozenset[str]:
    text = _require(path, "noise words file").read_text(encoding="utf-8")
    return frozenset(text.split())


def load_document_list(path: Path) -> list[str]:
    text = _require(path, "document list").read_text(encoding="utf-8")
    return text.split()


def resolve_document(doc_id: str, base_dir: Path) -> Path:
    """Find a listed document next to the docs file, else relative to the cwd."""
    candidate = base_dir / doc_id
    if candidate.is_file():
        return candidate
    return _require(Path(doc_id), "document")


def tokenize(path: Path) -> list[str]:
    return _require(path, "document").read_text(encoding="utf-8").split()


def iter_documents(docs_file: Path) -> Iterator[tuple[str, list[str]]]:
    """Yield (doc_id, tokens) for every document named in docs_file, in order."""
    base_dir = docs_file.parent
    for doc_id in load_document_list(docs_file):
        yield doc_id, tokenize(resolve_document(doc_id, base_dir))


def load_docs_parquet(path: Path) -> Iterator[tuple[str, list[str]]]:
    """Yield (doc_id, tokens) per row of a docs parquet, in row order."""
    df = pl.read_parquet(_require(path, "docs parquet"))
    missing = {"doc_id", "text"} - set(df.columns)
    if missing:
        raise ValueError(f"docs parquet {path} is missing columns {sorted(missing)}")
    for row in df.select("doc_id", "text").iter_rows(named=True):
        yield row["doc_id"], (row["text"] or "").split()
