"""String puzzles: encoding, comparison, uniqueness and rearrangement."""

from __future__ import annotations

from collections import Counter
from functools import cmp_to_key
from itertools import combinations, groupby
from typing import Iterable, Iterator

_ASCII_SIZE = 128


def urlify(text: str, length: int) -> str:
    """Replace every space in the first ``length`` characters with ``%20``."""
    if not 0 <= length <= len(text):
        raise ValueError(f"length {length} is outside 0..{len(text)}")
    return text[:length].replace(" ", "%20")


def is_anagram_sorted(first: str, second: str) -> bool:
    """Decide whether two strings are anagrams by sorting both."""
    if len(first) != len(second):
        return False
    return sorted(first) == sorted(second)


def is_anagram_counted(first: str, second: str) -> bool:
    """Decide whether two strings are anagrams by counting characters."""
    if len(first) != len(second):
        return False
    return Counter(first) == Counter(second)


def is_permutation_sorted(first: str, second: str) -> bool:
    """Decide whether one string is a permutation of the other by sorting."""
    if len(first) != len(second):
        return False
    return sorted(first) == sorted(second)


def is_permutation_counted(first: str, second: str) -> bool:
    """Decide whether one string is a permutation of the other by counting."""
    if len(first) != len(second):
        return False
    remaining = Counter(first)
    for ch in second:
        remaining[ch] -= 1
        if remaining[ch] < 0:
            return False
    return True


def _ascii_codes(text: str) -> Iterator[int]:
    for ch in text:
        code = ord(ch)
        if code >= _ASCII_SIZE:
            raise ValueError(f"character {ch!r} is outside the ASCII range")
        yield code


def is_unique_bruteforce(text: str) -> bool:
    """Check that no character repeats by comparing every pair."""
    return not any(a == b for a, b in combinations(text, 2))


def is_unique_hashing(text: str) -> bool:
    """Check that no ASCII character repeats, using a table of seen codes."""
    if len(text) > _ASCII_SIZE:
        return False
    seen: set[int] = set()
    for code in _ascii_codes(text):
        if code in seen:
            return False
        seen.add(code)
    return True


def is_unique_bitset(text: str) -> bool:
    """Check that no ASCII character repeats, using a 128-bit vector."""
    bits = 0
    for code in _ascii_codes(text):
        mask = 1 << code
        if bits & mask:
            return False
        bits |= mask
    return True


def _concatenation_order(a: str, b: str) -> int:
    ab, ba = a + b, b + a
    if ab > ba:
        return -1
    if ab < ba:
        return 1
    return 0


def largest_number(numbers: Iterable[str | int]) -> str:
    """Concatenate the numbers in the order that gives the largest string."""
    parts = [str(number) for number in numbers]
    return "".join(sorted(parts, key=cmp_to_key(_concatenation_order)))


def reverse_words(text: str) -> str:
    """Reverse the order of dot-separated words, joining them with spaces."""
    words = [word for word in text.split(".") if word]
    return " ".join(reversed(words))


def compress(text: str) -> str:
    """Run-length encode ``text``; return it unchanged unless that is shorter."""
    if len(text) < 2:
        return text
    encoded = "".join(f"{ch}{sum(1 for _ in run)}" for ch, run in groupby(text))
    return encoded if len(encoded) < len(text) else text


def is_rotation_naive(first: str, second: str) -> bool:
    """Rebuild ``first`` from ``second`` by splitting off an in-order prefix match."""
    if len(first) != len(second):
        return False
    head: list[str] = []
    tail: list[str] = []
    matched = 0
    for ch in second:
        if matched < len(first) and ch == first[matched]:
            head.append(ch)
            matched += 1
        else:
            tail.append(ch)
    return "".join(head) + "".join(tail) == first


def is_rotation(first: str, second: str) -> bool:
    """Return whether ``second`` occurs inside ``first`` doubled."""
    return second in first + first