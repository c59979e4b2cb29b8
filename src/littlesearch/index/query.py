"""Two-keyword OR search over occurrence lists."""

from collections.abc import Sequence

from littlesearch.data_models.occurrence import Occurrence

TOP_N = 5


def _merge_pass(
    outer: Sequence[Occurrence],
    inner: Sequence[Occurrence],
    results: list[str],
    limit: int,
) -> None:
    # Each outer occurrence is compared against every inner one: the inner
    # document wins only with a strictly higher frequency.
    for o in outer:
        if len(results) >= limit:
            return
        if not inner:
            if o.doc_id not in results:
                results.append(o.doc_id)
            continue
        for i in inner:
            candidate = o.doc_id if i.frequency <= o.frequency else i.doc_id
            if candidate not in results and len(results) < limit:
                results.append(candidate)


def top_n_search(
    first: Sequence[Occurrence],
    second: Sequence[Occurrence],
    limit: int = TOP_N,
) -> list[str] | None:
    """Return up to `limit` document ids matching either list, or None.

    Documents come out roughly in descending order of their best frequency;
    equal frequencies favour the first keyword's document. No duplicates.
    When both lists are non-empty, a document is only picked if it wins at
    least one comparison against the other list, so entries below the other
    list's lowest frequency are left out.
    """
    results: list[str] = []
    _merge_pass(first, second, results, limit)
    _merge_pass(second, first, results, limit)
    return results or None
