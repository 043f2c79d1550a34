"""
Text normalization applied to both documents before matching.

Line breaks are flattened to single spaces and every character is
lowercased. A CRLF pair becomes one space and a lone CR becomes a
space too, unlike splitting on LF alone, which would leave a stray CR
before the space. All reported spans are offsets into this normalized
text; ``normalize_with_offsets`` keeps the mapping back to the caller's text.
"""

import re
from typing import List, Tuple

LINE_BREAK_PATTERN = re.compile(r'\r\n|\r|\n')

Span = Tuple[int, int]


def normalize(text: str) -> str:
    """Join lines with a single space and lowercase the result."""
    return ' '.join(LINE_BREAK_PATTERN.split(text)).lower()


def normalize_with_offsets(text: str) -> Tuple[str, List[Span]]:
    """
    Normalize ``text`` and record where each output character came from.

    :return: (normalized_text, offsets) where ``offsets[k]`` is the
        half-open interval of ``text`` that produced normalized character k
    """
    offsets = []
    i = 0
    n = len(text)
    while i < n:
        ch = text[i]
        if ch == '\r' and i + 1 < n and text[i + 1] == '\n':
            offsets.append((i, i + 2))
            i += 2
            continue
        # Some characters lowercase to more than one code point
        width = 1 if ch in '\r\n' else len(ch.lower())
        offsets.extend([(i, i + 1)] * width)
        i += 1

    # Whole-string lowercasing is context sensitive (final sigma) but has
    # the same length as the per-character pieces, so offsets still line up.
    return normalize(text), offsets


def map_span_to_original(span: Span, offsets: List[Span]) -> Span:
    """Translate a normalized-text span back onto the original text."""
    start, end = span
    if start >= end:
        anchor = offsets[start][0] if start < len(offsets) else (offsets[-1][1] if offsets else 0)
        return anchor, anchor
    return offsets[start][0], offsets[end - 1][1]
