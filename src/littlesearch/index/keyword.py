"""Turn raw whitespace-delimited tokens into canonical keywords."""

from collections.abc import Container

PUNCTUATION = frozenset(".,?:;!")


def strip_trailing_punctuation(word: str) -> str:
    """Drop trailing punctuation one char at a time, never below one character.

    strip_trailing_punctuation("cat!?")  -> "cat"
    strip_trailing_punctuation("a.")     -> "a"
    strip_trailing_punctuation("!")      -> ""
    """
    while word and word[-1] in PUNCTUATION:
        word = word[:-1]
        if len(word) <= 1:
            break
    return word


def normalize(raw: str, noise_words: Container[str] = frozenset()) -> str | None:
    """Return the keyword for a raw token, or None if it is not one.

    Only trailing punctuation is cleaned off. Leading or embedded punctuation,
    digits, or any other non-letter rejects the whole token.
    """
    word = strip_trailing_punctuation(raw.strip().lower())
    if not word:
        return None
    if word in noise_words:
        return None
    if not all(ch.isalpha() for ch in word):
        return None
    return word
