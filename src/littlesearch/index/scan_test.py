from littlesearch.data_models.occurrence import Occurrence
from littlesearch.index.scan import scan_document


def test_counts_keywords_in_document():
    tokens = "The Cat sat. cat CAT!".split()
    table = scan_document(tokens, "d1", frozenset({"the"}))
    assert table == {
        "cat": Occurrence(doc_id="d1", frequency=3),
        "sat": Occurrence(doc_id="d1", frequency=1),
    }


def test_skips_non_keywords():
    table = scan_document(["123", "it's", "ok"], "d2")
    assert list(table) == ["ok"]


def test_empty_document():
    assert scan_document([], "d3") == {}
