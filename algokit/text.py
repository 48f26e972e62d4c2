"""String puzzles."""

from __future__ import annotations

import string
from collections import Counter
from collections.abc import Iterable, Iterator
from functools import reduce
from itertools import groupby
from operator import xor

_ROMAN = {"M": 1000, "D": 500, "C": 100, "L": 50, "X": 10, "V": 5, "I": 1}
_SUBTRACTIVE = {"C": "DM", "X": "LC", "I": "VX"}
_BRACKETS = {"}": "{", "]": "[", ")": "("}
_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
MORSE = dict(
    zip(
        string.ascii_lowercase,
        [
            ".-", "-...", "-.-.", "-..", ".", "..-.", "--.", "....",
            "..", ".---", "-.-", ".-..", "--", "-.", "---", ".--.",
            "--.-", ".-.", "...", "-", "..-", "...-", ".--", "-..-",
            "-.--", "--..",
        ],
    )
)


def roman_to_int(s: str) -> int:
    """Value of a Roman numeral; characters that are not numerals are ignored."""
    total = 0
    for ch, following in zip(s, s[1:] + " "):
        value = _ROMAN.get(ch)
        if value is None:
            continue
        total += -value if following in _SUBTRACTIVE.get(ch, "") else value
    return total


def longest_common_prefix(strs: list[str]) -> str:
    """Longest prefix shared by every string."""
    prefix = []
    for chars in zip(*strs):
        if any(c != chars[0] for c in chars):
            break
        prefix.append(chars[0])
    return "".join(prefix)


def is_valid(s: str) -> bool:
    """True when every bracket is closed by its partner in the right order."""
    stack: list[str] = []
    for ch in s:
        if ch in "{[(":
            stack.append(ch)
            continue
        if not stack:
            return False
        top = stack.pop()
        expected = _BRACKETS.get(ch)
        if expected is not None and top != expected:
            return False
    return not stack


def str_str(haystack: str, needle: str) -> int:
    """Index of the first occurrence of ``needle`` in ``haystack``, or -1."""
    return haystack.find(needle)


def count_and_say(n: int) -> str:
    """The ``n``-th term of the count-and-say sequence, starting from "1"."""
    if n < 1:
        raise ValueError("n must be positive")
    term = "1"
    for _ in range(n - 1):
        term = "".join(f"{len(list(run))}{digit}" for digit, run in groupby(term))
    return term


def length_of_last_word(s: str) -> int:
    """Length of the last space-separated word."""
    return len(s.rstrip(" ").rsplit(" ", 1)[-1])


def _strike(pool: Iterable[str], ch: str) -> Iterator[str]:
    # Each removal lets the element that slides into its place go unchecked.
    skip = False
    for item in pool:
        if skip:
            skip = False
            yield item
        elif item == ch:
            skip = True
        else:
            yield item


def can_construct(ransom_note: str, magazine: str) -> bool:
    """True when the magazine's letters strike out every letter of the note."""
    remaining = list(ransom_note)
    for ch in magazine:
        remaining = list(_strike(remaining, ch))
    return not remaining


def find_the_difference(s: str, t: str) -> str:
    """The one character added to ``s`` to make ``t``."""
    return chr(reduce(xor, map(ord, s + t), 0))


def judge_circle(moves: str) -> bool:
    """True when the moves R, L, U and D bring the robot back to its start."""
    counts = Counter(moves)
    return counts["L"] == counts["R"] and counts["U"] == counts["D"]


def to_lower_case(s: str) -> str:
    """Lower-case the ASCII capitals of ``s``, leaving everything else alone."""
    return s.translate(_LOWER)


def num_jewels_in_stones(jewels: str, stones: str) -> int:
    """How many stones are of a jewel type."""
    kinds = set(jewels)
    return sum(stone in kinds for stone in stones)


def _to_morse(word: str) -> str:
    try:
        return "".join(MORSE[ch] for ch in word)
    except KeyError as exc:
        raise ValueError(f"not a lowercase letter: {exc.args[0]!r}") from None


def unique_morse_representations(words: Iterable[str]) -> int:
    """Number of distinct Morse transformations among the words."""
    return len({_to_morse(word) for word in words})


def remove_outer_parentheses(s: str) -> str:
    """Strip the outermost pair of every primitive parenthesis group."""
    depth = 0
    kept = []
    for ch in s:
        if ch == "(":
            depth += 1
            if depth > 1:
                kept.append(ch)
        elif ch == ")":
            if depth == 0:
                raise ValueError("unbalanced closing parenthesis")
            depth -= 1
            if depth:
                kept.append(ch)
    return "".join(kept)


def defang_ip_addr(address: str) -> str:
    """Replace every period with "[.]"."""
    return address.replace(".", "[.]")