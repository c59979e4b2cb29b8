"""Keyword index over a fixed set of documents, with top-5 OR search."""

from collections.abc import Iterable, Mapping
from pathlib import Path

import polars as pl

from littlesearch.data_models.occurrence import Occurrence
from littlesearch.etl.inputs import iter_documents, load_noise_words, tokenize
from littlesearch.index.keyword import normalize
from littlesearch.index.occurrence_list import insert_last
from littlesearch.index.query import TOP_N, top_n_search
from littlesearch.index.scan import scan_document

_SCHEMA = {
    "form": pl.String,
    "rank": pl.Int64,
    "doc_id": pl.String,
    "frequency": pl.Int64,
}


class SearchEngine:
    def __init__(self, noise_words: Iterable[str] = ()) -> None:
        self._index: dict[str, list[Occurrence]] = {}
        self._noise_words: frozenset[str] = frozenset(noise_words)

    @property
    def noise_words(self) -> frozenset[str]:
        return self._noise_words

    def get_keyword(self, word: str) -> str | None:
        return normalize(word, self._noise_words)

    def load_keywords(
        self, doc_file: Path, doc_id: str | None = None
    ) -> dict[str, Occurrence]:
        """Scan a document file into a keyword -> Occurrence table."""
        return scan_document(
            tokenize(doc_file), doc_id or str(doc_file), self._noise_words
        )

    def merge_keywords(self, kws: Mapping[str, Occurrence]) -> None:
        """Fold one document's keyword table into the master index."""
        for keyword, occ in kws.items():
            occs = self._index.get(keyword)
            if occs is None:
                self._index[keyword] = [occ]
            else:
                occs.append(occ)
                insert_last(occs)

    def add_document(self, doc_id: str, tokens: Iterable[str]) -> None:
        self.merge_keywords(scan_document(tokens, doc_id, self._noise_words))

    def make_index(
        self,
        documents: Iterable[tuple[str, Iterable[str]]],
        noise_words: Iterable[str] | None = None,
    ) -> None:
        """Build the index from (doc_id, tokens) pairs in the given order."""
        if noise_words is not None:
            self._noise_words = frozenset(noise_words)
        for doc_id, tokens in documents:
            self.add_document(doc_id, tokens)

    @classmethod
    def from_files(cls, docs_file: Path, noise_words_file: Path) -> "SearchEngine":
        engine = cls(load_noise_words(noise_words_file))
        engine.make_index(iter_documents(docs_file))
        return engine

    def occurrences(self, keyword: str | None) -> list[Occurrence]:
        if keyword is None:
            return []
        return list(self._index.get(keyword, ()))

    def keywords(self) -> list[str]:
        return sorted(self._index)

    def top5_search(
        self, kw1: str | None, kw2: str | None, limit: int = TOP_N
    ) -> list[str] | None:
        """Documents containing kw1 or kw2, most frequent first, at most `limit`."""
        return top_n_search(self.occurrences(kw1), self.occurrences(kw2), limit)

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, keyword: object) -> bool:
        return keyword in self._index

    def to_polars(self) -> pl.DataFrame:
        rows = [
            (form, rank, occ.doc_id, occ.frequency)
            for form, occs in self._index.items()
            for rank, occ in enumerate(occs)
        ]
        if not rows:
            return pl.DataFrame(schema=_SCHEMA)
        return pl.DataFrame(rows, schema=_SCHEMA, orient="row").sort(["form", "rank"])
