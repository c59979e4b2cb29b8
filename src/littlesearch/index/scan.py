from collections.abc import Container, Iterable

from littlesearch.data_models.occurrence import Occurrence
from littlesearch.index.keyword import normalize


def scan_document(
    tokens: Iterable[str], doc_id: str, noise_words: Container[str] = frozenset()
) -> dict[str, Occurrence]:
    """Count keyword occurrences in one document's tokens."""
    table: dict[str, Occurrence] = {}
    for raw in tokens:
        keyword = normalize(raw, noise_words)
        if keyword is None:
            continue
        if keyword in table:
            table[keyword] = table[keyword].bump()
        else:
            table[keyword] = Occurrence(doc_id=doc_id, frequency=1)
    return table
