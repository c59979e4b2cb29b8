import pytest

from littlesearch.index.keyword import normalize, strip_trailing_punctuation


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("Hello,", "hello"),
        ("  WORLD!?!  ", "world"),
        ("end...", "end"),
        ("sat.", "sat"),
        ("a.", "a"),
        ("Cat", "cat"),
    ],
)
def test_keywords(raw, expected):
    assert normalize(raw) == expected


@pytest.mark.parametrize(
    "raw",
    ["it's", "3rd", "(paren", "e-mail", "don't.", "abc123", "'quoted'", "!", "", "   "],
)
def test_rejected(raw):
    assert normalize(raw) is None


def test_noise_words_rejected_after_cleaning():
    noise = frozenset({"the", "and"})
    assert normalize("The", noise) is None
    assert normalize("AND!", noise) is None
    assert normalize("then", noise) == "then"


def test_strip_stops_at_one_character():
    assert strip_trailing_punctuation("..") == "."
    assert strip_trailing_punctuation("a?!") == "a"
    assert strip_trailing_punctuation("!") == ""


def test_only_trailing_punctuation_stripped():
    assert strip_trailing_punctuation(".cat.") == ".cat"
    assert normalize(".cat.") is None


@pytest.mark.parametrize("raw", ["Hello,", "end...", "WORLD!?!", "a.", "x"])
def test_idempotent(raw):
    keyword = normalize(raw)
    assert keyword is not None
    assert normalize(keyword) == keyword
