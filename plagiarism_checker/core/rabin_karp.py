"""
Rabin-Karp (hashing) matching strategy.

For each window size the start offsets of every window in document A
are bucketed by polynomial hash, then document B is scanned with the
same window. A hash hit is only a hint: every pair is confirmed by
comparing the substrings themselves before it is reported.
"""

from collections import defaultdict
from typing import Dict, Iterator, List, Tuple

from .models import Match
from .overlap import overlaps_any
from .windows import collect_candidates

PRIME = 101
MODULUS = 2 ** 61 - 1


def polynomial_hash(text: str) -> int:
    """hash = (hash * PRIME + code point) mod MODULUS over the whole string."""
    value = 0
    for ch in text:
        value = (value * PRIME + ord(ch)) % MODULUS
    return value


def rolling_hashes(text: str, window: int) -> Iterator[Tuple[int, int]]:
    """
    Yield ``(start, hash)`` for every length-``window`` substring of ``text``.

    Each hash equals ``polynomial_hash(text[start:start + window])``; after
    the first window it is updated in O(1) per shift.
    """
    if window <= 0 or window > len(text):
        return

    high = pow(PRIME, window - 1, MODULUS)
    value = polynomial_hash(text[:window])
    yield 0, value

    for start in range(1, len(text) - window + 1):
        outgoing = ord(text[start - 1])
        incoming = ord(text[start + window - 1])
        value = ((value - outgoing * high) * PRIME + incoming) % MODULUS
        yield start, value


def search_window(text_a: str, text_b: str, window: int) -> List[Match]:
    """Find verified equal windows of one size, skipping pairs that overlap this pass's output."""
    table: Dict[int, List[int]] = defaultdict(list)
    for start_a, value in rolling_hashes(text_a, window):
        table[value].append(start_a)

    accepted: List[Match] = []
    for start_b, value in rolling_hashes(text_b, window):
        starts_a = table.get(value)
        if not starts_a:
            continue

        segment = text_b[start_b:start_b + window]
        for start_a in starts_a:
            # Collision guard
            if text_a[start_a:start_a + window] != segment:
                continue
            candidate = Match(segment, (start_a, start_a + window), (start_b, start_b + window))
            if not overlaps_any(accepted, candidate):
                accepted.append(candidate)

    return accepted


def find_candidates(text_a: str,
                    text_b: str,
                    min_length: int,
                    max_workers: int = 1,
                    show_progress: bool = False) -> List[Match]:
    """Unresolved Rabin-Karp candidates for every window size, smallest first."""
    return collect_candidates(search_window, text_a, text_b, min_length,
                              max_workers=max_workers,
                              show_progress=show_progress,
                              desc="Rabin-Karp windows")
