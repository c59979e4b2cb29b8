"""Descending-frequency occurrence lists and binary-search insertion."""

from collections.abc import Sequence

from littlesearch.data_models.occurrence import Occurrence


def insert_last(occs: list[Occurrence]) -> list[int] | None:
    """Move the last occurrence into place among the already-sorted rest.

    occs[:-1] must be in non-increasing frequency order. The tail is located by
    binary search over that prefix and moved in place. Returns the midpoint
    indices probed, or None for a single-element list.

    On an equal frequency the search stops and the tail goes in front of the
    matching element. If the tail is smaller than the element at the last
    probed midpoint it goes right after it, otherwise at the midpoint.
    """
    if len(occs) == 1:
        return None

    tail = occs[-1]
    low, high = 0, len(occs) - 2
    mids: list[int] = []
    while low <= high:
        mid = (low + high) // 2
        mids.append(mid)
        if tail.frequency > occs[mid].frequency:
            high = mid - 1
        elif tail.frequency < occs[mid].frequency:
            low = mid + 1
        else:
            break

    pos = mids[-1]
    if tail.frequency < occs[pos].frequency:
        pos += 1
    occs.pop()
    occs.insert(pos, tail)
    return mids


def is_descending(occs: Sequence[Occurrence]) -> bool:
    return all(a.frequency >= b.frequency for a, b in zip(occs, occs[1:]))
