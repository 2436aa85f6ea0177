"""Stateless recognizers for weak numeric PIN patterns.

Every function in this module is a total predicate over an arbitrary string:
it never raises, and a string that contains no digits (including the empty
string) simply produces no match. Only the ASCII digits ``0-9`` are treated
as digits.
"""
from typing import FrozenSet, Tuple

DIGITS: FrozenSet[str] = frozenset("0123456789")

# Diagonal and cross sweeps over a phone-style keypad (1-5-9 / 3-5-7).
CROSS_PATTERNS: FrozenSet[str] = frozenset({
    "159753", "159357", "951357", "951753",
    "357159", "357951", "753159", "753951",
})

ODD_EVEN_SERIES: Tuple[str, ...] = ("13579", "02468")

# 012 .. 789 ascending and 987 .. 210 descending. 890 / 901 do not wrap.
CONSECUTIVE_TRIPLES: Tuple[str, ...] = tuple(
    "".join(str(d + i) for i in range(3)) for d in range(8)
) + tuple(
    "".join(str(d - i) for i in range(3)) for d in range(9, 1, -1)
)

DEFAULT_MIN_RUN = 2


def is_cross_pattern(pin: str) -> bool:
    """Returns True if the PIN is exactly one of the keypad cross sweeps."""
    return pin in CROSS_PATTERNS


def has_odd_or_even_series(pin: str) -> bool:
    """Returns True if the PIN contains ``13579`` or ``02468``."""
    return any(series in pin for series in ODD_EVEN_SERIES)


def has_consecutive_series(pin: str) -> bool:
    """Returns True if the PIN contains three ascending or descending digits.

    Args:
        pin (str): The candidate PIN.

    Returns:
        bool: True if any of the sixteen consecutive triples (``012`` to
        ``789`` and ``987`` to ``210``) occurs anywhere in the PIN.
    """
    return any(triple in pin for triple in CONSECUTIVE_TRIPLES)


def longest_digit_run(pin: str) -> int:
    """Returns the length of the longest run of one repeated digit.

    Non-digit characters break a run and are never counted.
    """
    longest = 0
    current = 0
    previous = None
    for ch in pin:
        if ch not in DIGITS:
            current = 0
            previous = None
            continue
        current = current + 1 if ch == previous else 1
        previous = ch
        longest = max(longest, current)
    return longest


def longest_pair_run(pin: str) -> int:
    """Returns the highest count of one digit pair repeated back-to-back.

    A pair repeated back-to-back always starts at offsets of the same parity
    (``1212`` has ``12`` at 0 and 2), so the PIN is walked once per parity,
    two characters at a time.

    Args:
        pin (str): The candidate PIN.

    Returns:
        int: 0 if the PIN holds no two adjacent digits, otherwise the
        largest number of consecutive repetitions of a single pair.
    """
    longest = 0
    for start in (0, 1):
        current = 0
        previous = None
        for i in range(start, len(pin) - 1, 2):
            pair = pin[i:i + 2]
            if pair[0] not in DIGITS or pair[1] not in DIGITS:
                current = 0
                previous = None
                continue
            current = current + 1 if pair == previous else 1
            previous = pair
            longest = max(longest, current)
    return longest


def has_repeated_digits(pin: str, min_run: int = DEFAULT_MIN_RUN) -> bool:
    """Returns True if some digit occurs ``min_run`` or more times in a row."""
    longest = longest_digit_run(pin)
    return longest > 0 and longest >= min_run


def has_repeated_pairs(pin: str, min_repeats: int = DEFAULT_MIN_RUN) -> bool:
    """Returns True if some digit pair repeats ``min_repeats`` or more times in a row."""
    longest = longest_pair_run(pin)
    return longest > 0 and longest >= min_repeats


def is_digits_only(pin: str) -> bool:
    """Returns True if the PIN is non-empty and made of ASCII digits only."""
    return bool(pin) and all(ch in DIGITS for ch in pin)


def is_length_within(pin: str, min_length: int, max_length: int) -> bool:
    return min_length <= len(pin) <= max_length
