"""Solvers for string and sequence puzzles."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, NamedTuple, Sequence

MOD = 1_000_000_007
ALPHABET_SIZE = 26


def _letter_index(ch: str) -> int:
    if not "a" <= ch <= "z":
        raise ValueError(f"expected a lowercase latin letter, got {ch!r}")
    return ord(ch) - ord("a")


def _parity_mask(word: str) -> int:
    """Bit i is set when letter i occurs an odd number of times."""
    mask = 0
    for ch in word:
        mask ^= 1 << _letter_index(ch)
    return mask


def count_palindrome_pairs(words: Iterable[str]) -> int:
    """Count pairs of words whose letters can be rearranged into a palindrome."""
    counts = Counter(_parity_mask(word) for word in words)
    total = 0
    for mask, count in counts.items():
        total += count * (count - 1) // 2
        for bit in range(ALPHABET_SIZE):
            neighbour = mask ^ (1 << bit)
            if neighbour > mask:
                total += count * counts.get(neighbour, 0)
    return total


def _assign_marks(
    n: int, prefix: str, suffix: str, pieces: Sequence[str], expected: Counter
) -> str | None:
    text = prefix + suffix[n - 2:]
    prefixes = Counter(text[:length] for length in range(1, n))
    suffixes = Counter(text[start:] for start in range(1, n))
    if prefixes + suffixes != expected:
        return None
    marks = []
    for piece in pieces:
        if prefixes[piece] > 0:
            marks.append("P")
            prefixes[piece] -= 1
        else:
            marks.append("S")
            suffixes[piece] -= 1
    return "".join(marks)


def restore_prefix_suffix(n: int, pieces: Iterable[str]) -> str:
    """Label each piece as a proper prefix ('P') or suffix ('S') of one string of length n."""
    pieces = list(pieces)
    if n < 2 or len(pieces) != 2 * n - 2:
        raise ValueError("expected 2n-2 pieces for a string of length n >= 2")
    longest = [piece for piece in pieces if len(piece) == n - 1]
    if len(longest) != 2:
        raise ValueError("expected exactly two pieces of length n-1")
    expected = Counter(pieces)
    first, second = longest
    for prefix, suffix in ((first, second), (second, first)):
        marks = _assign_marks(n, prefix, suffix, pieces, expected)
        if marks is not None:
            return marks
    raise ValueError("pieces are not the prefixes and suffixes of one string")


class MessageSplit(NamedTuple):
    """Ways to split a message, longest part achievable, fewest parts needed."""

    ways: int
    longest: int
    fewest: int


def split_message(text: str, limits: Sequence[int]) -> MessageSplit:
    """Split text into parts where each letter's limit bounds the part length."""
    if len(limits) != ALPHABET_SIZE:
        raise ValueError("expected one limit per letter")
    caps = [limits[_letter_index(ch)] for ch in text]
    n = len(caps)
    ways = [0] * (n + 1)
    ways[0] = 1
    longest = [0] * (n + 1)
    fewest = [n] * (n + 1)
    fewest[0] = 0
    for start in range(n):
        cap = n
        for end, letter_cap in enumerate(caps[start:], start):
            cap = min(cap, letter_cap)
            length = end - start + 1
            if length > cap:
                break
            ways[end + 1] += ways[start]
            if ways[end + 1] > MOD:
                ways[end + 1] -= MOD
            longest[end + 1] = max(longest[end + 1], longest[start], length)
            fewest[end + 1] = min(fewest[end + 1], fewest[start] + 1)
    return MessageSplit(ways[n], longest[n], fewest[n])


def balanced_bracket_sequence(n: int, k: int) -> str:
    """Build n bracket pairs whose nesting depths sum to k."""
    if n * (n - 1) // 2 < k:
        raise ValueError("Impossible")
    parts = []
    closing = 0
    while n > 0:
        if k >= n - 1:
            parts.append("(")
            closing += 1
            k -= n - 1
        else:
            parts.append("()")
        n -= 1
    return "".join(parts) + ")" * closing


def first_winner(rounds: Iterable[tuple[str, int]]) -> str:
    """Winner of a scoring game; ties go to whoever first reached the top score."""
    rounds = list(rounds)
    if not rounds:
        raise ValueError("no rounds played")
    totals: dict[str, int] = {}
    for name, score in rounds:
        totals[name] = totals.get(name, 0) + score
    best = max(totals.values())
    winners = {name for name, total in totals.items() if total == best}
    if len(winners) == 1:
        return next(iter(winners))
    running: dict[str, int] = {}
    for name, score in rounds:
        running[name] = running.get(name, 0) + score
        if name in winners and running[name] >= best:
            return name
    raise AssertionError("a winner always reaches the top score")