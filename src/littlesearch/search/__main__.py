"""Build a keyword index over a set of documents and run two-keyword searches.

Usage:
    python -m littlesearch.search --docs docs.txt --noise-words noisewords.txt
    python -m littlesearch.search --docs-parquet docs.parquet \\
        --noise-words noisewords.txt --query cat dog [--export index.parquet]
"""

import argparse
from collections.abc import Callable, Iterable, Iterator
from pathlib import Path

from littlesearch.etl.inputs import (
    MissingInputFileError,
    iter_documents,
    load_docs_parquet,
    load_noise_words,
)
from littlesearch.index.engine import SearchEngine
from littlesearch.index.query import TOP_N
from littlesearch.search.export import export_index


def _announce(
    documents: Iterable[tuple[str, list[str]]],
) -> Iterator[tuple[str, list[str]]]:
    for doc_id, tokens in documents:
        print(f"Loading keywords from file: {doc_id}")
        yield doc_id, tokens


def build_engine(
    noise_words_file: Path,
    docs_file: Path | None = None,
    docs_parquet: Path | None = None,
) -> SearchEngine:
    engine = SearchEngine(load_noise_words(noise_words_file))
    if docs_parquet is not None:
        documents = load_docs_parquet(docs_parquet)
    else:
        assert docs_file is not None
        documents = iter_documents(docs_file)
    engine.make_index(_announce(documents))
    print(f"Indexed {len(engine)} keywords")
    return engine


def run_query(engine: SearchEngine, word1: str, word2: str, top_n: int) -> str:
    kw1 = engine.get_keyword(word1)
    kw2 = engine.get_keyword(word2)
    return f"Result = {engine.top5_search(kw1, kw2, limit=top_n)}"


def prompt_loop(
    engine: SearchEngine,
    top_n: int,
    read: Callable[[str], str] = input,
) -> None:
    """Ask for pairs of words until an empty line or EOF."""
    while True:
        try:
            word1 = read("Enter a word to check: ").strip()
            if not word1:
                return
            word2 = read("Enter another word to check: ").strip()
        except EOFError:
            return
        print(run_query(engine, word1, word2, top_n))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Top-5 keyword search")
    parser.add_argument("--docs", default="docs.txt", help="File listing documents")
    parser.add_argument(
        "--docs-parquet",
        default=None,
        help="Parquet with doc_id and text columns (replaces --docs)",
    )
    parser.add_argument("--noise-words", default="noisewords.txt")
    parser.add_argument(
        "--query", nargs=2, metavar=("KW1", "KW2"), help="Run one search and exit"
    )
    parser.add_argument("--export", default=None, help="Write index to parquet")
    parser.add_argument("--top-n", type=int, default=TOP_N)
    args = parser.parse_args(argv)

    try:
        engine = build_engine(
            Path(args.noise_words),
            docs_file=Path(args.docs),
            docs_parquet=Path(args.docs_parquet) if args.docs_parquet else None,
        )
    except MissingInputFileError as exc:
        parser.error(str(exc))

    if args.export:
        n = export_index(engine, Path(args.export))
        print(f"Wrote {n} occurrences to {args.export}")

    if args.query:
        print(run_query(engine, args.query[0], args.query[1], args.top_n))
    else:
        prompt_loop(engine, args.top_n)


if __name__ == "__main__":
    main()
