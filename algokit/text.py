"""Simple string exercises."""

import string
from collections import Counter
from typing import Tuple

_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def is_palindrome(word: str) -> bool:
    """Return whether ``word`` reads the same backwards."""
    return word == word[::-1]


def longest_word(sentence: str) -> str:
    """Return the first longest word of a sentence split on single spaces."""
    return max(sentence.split(" "), key=len)


def to_upper(s: str) -> str:
    """Upper-case the ASCII letters ``a-z``; leave everything else alone."""
    return s.translate(_UPPER)


def largest_number(digits: str) -> str:
    """Rearrange a string of digits into the largest number it can form."""
    return "".join(sorted(digits, reverse=True))


def most_frequent_char(s: str) -> Tuple[str, int]:
    """Return the most frequent letter ``a-z`` of ``s`` and its count.

    Ties go to the earlier letter of the alphabet; with no letters the
    result is ``("a", 0)``.
    """
    counts = Counter(char for char in s if "a" <= char <= "z")
    best, best_count = "a", 0
    for letter in string.ascii_lowercase:
        if counts[letter] > best_count:
            best, best_count = letter, counts[letter]
    return best, best_count