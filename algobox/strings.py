"""String utilities: palindromes, reversal, prefix function and more."""

from __future__ import annotations

import itertools
import string
from collections import Counter
from collections.abc import Iterator

__all__ = [
    "first_non_repeating",
    "prefix_function",
    "is_palindrome",
    "palindrome_verdict",
    "reverse_string",
    "reverse_words",
    "keep_letters",
    "permutations",
    "anagram_deletions",
]

_ASCII_LETTERS = frozenset(string.ascii_letters)
_LOWERCASE = frozenset(string.ascii_lowercase)


def first_non_repeating(text: str) -> str | None:
    """Return the first character occurring exactly once, or None."""
    counts = Counter(text)
    return next((ch for ch in text if counts[ch] == 1), None)


def prefix_function(text: str) -> list[int]:
    """Return the KMP prefix function of ``text``."""
    pi = [0] * len(text)
    for i in range(1, len(text)):
        j = pi[i - 1]
        while j > 0 and text[i] != text[j]:
            j = pi[j - 1]
        if text[i] == text[j]:
            j += 1
        pi[i] = j
    return pi


def is_palindrome(text: str) -> bool:
    """Return True when ``text`` reads the same backwards."""
    return text == text[::-1]


def palindrome_verdict(text: str) -> str:
    """Return a sentence stating whether ``text`` is a palindrome."""
    if is_palindrome(text):
        return "String is a Palindrome"
    return "String is not a Palindrome"


def reverse_string(text: str) -> str:
    """Return ``text`` reversed."""
    return text[::-1]


def reverse_words(text: str) -> str:
    """Reverse the order of space-separated words, keeping every space."""
    return " ".join(reversed(text.split(" ")))


def keep_letters(text: str) -> str:
    """Drop every character that is not an ASCII letter."""
    return "".join(ch for ch in text if ch in _ASCII_LETTERS)


def permutations(text: str) -> Iterator[str]:
    """Yield every arrangement of the characters of ``text``.

    Repeated characters produce repeated results, as positions are permuted.
    """
    for arrangement in itertools.permutations(text):
        yield "".join(arrangement)


def anagram_deletions(first: str, second: str) -> int:
    """Count deletions needed to make two lowercase strings anagrams."""
    for ch in itertools.chain(first, second):
        if ch not in _LOWERCASE:
            raise ValueError(f"only lowercase letters a-z are allowed, got {ch!r}")
    counts = Counter(first)
    counts.subtract(second)
    return sum(abs(n) for n in counts.values())