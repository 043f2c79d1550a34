"""
Knuth-Morris-Pratt (automaton) matching strategy.

Every window of document A is used as a pattern in turn: its failure
function is built and document B is scanned for all occurrences. This is
far more work than the hashing strategy and discovers candidates in a
different order (A-major rather than B-major), which is visible through
the resolver's tie-breaking.
"""

from typing import List, Optional

from .models import Match
from .overlap import overlaps_any
from .windows import collect_candidates


def compute_lps(pattern: str) -> List[int]:
    """
    Longest proper prefix that is also a suffix, for every prefix of ``pattern``.

    lps[i] is the length of the longest proper prefix of pattern[0..i]
    that is also a suffix of it.
    """
    m = len(pattern)
    lps = [0] * m

    length = 0
    i = 1
    while i < m:
        if pattern[i] == pattern[length]:
            length += 1
            lps[i] = length
            i += 1
        elif length != 0:
            length = lps[length - 1]
        else:
            lps[i] = 0
            i += 1

    return lps


def kmp_search(text: str, pattern: str, lps: Optional[List[int]] = None) -> List[int]:
    """Start offsets of every (possibly overlapping) occurrence of ``pattern`` in ``text``."""
    if not pattern:
        return []
    if lps is None:
        lps = compute_lps(pattern)

    m = len(pattern)
    occurrences = []
    j = 0
    for i, ch in enumerate(text):
        while j > 0 and ch != pattern[j]:
            j = lps[j - 1]
        if ch == pattern[j]:
            j += 1
        if j == m:
            occurrences.append(i - m + 1)
            j = lps[j - 1]

    return occurrences


def search_window(text_a: str, text_b: str, window: int) -> List[Match]:
    """Search B for every window of A, skipping pairs that overlap this pass's output."""
    accepted: List[Match] = []
    for start_a in range(len(text_a) - window + 1):
        pattern = text_a[start_a:start_a + window]
        lps = compute_lps(pattern)

        for start_b in kmp_search(text_b, pattern, lps):
            candidate = Match(pattern, (start_a, start_a + window), (start_b, start_b + window))
            if not overlaps_any(accepted, candidate):
                accepted.append(candidate)

    return accepted


def find_candidates(text_a: str,
                    text_b: str,
                    min_length: int,
                    max_workers: int = 1,
                    show_progress: bool = False) -> List[Match]:
    """Unresolved KMP candidates for every window size, smallest first."""
    return collect_candidates(search_window, text_a, text_b, min_length,
                              max_workers=max_workers,
                              show_progress=show_progress,
                              desc="KMP windows")
