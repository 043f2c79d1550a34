"""
HTML rendering of matched spans for the results view.

Spans reported by the engine index the normalized text. To highlight the
caller's original text, translate them first with ``spans_in_original``.
"""

import html
from typing import Iterable, List, Tuple

from ..core.normalizer import map_span_to_original, normalize_with_offsets
from ..core.scoring import severity_band
from ..core.validation import ParameterValidationError

Span = Tuple[int, int]

HIGHLIGHT_CLASS = "match-highlight"

SEVERITY_COLORS = {
    "Low": "#22c55e",
    "Medium": "#eab308",
    "High": "#ef4444",
}


def spans_in_original(original_text: str, spans: Iterable[Span]) -> List[Span]:
    """
    Map normalized-text spans onto ``original_text``.

    A span boundary inside a character whose lowercase form is longer maps
    to that whole character on both sides, so neighbouring spans can
    collide; overlapping results are merged. Returned spans are sorted.
    """
    _, offsets = normalize_with_offsets(original_text)
    mapped = sorted(map_span_to_original(span, offsets) for span in spans)

    merged: List[Span] = []
    for start, end in mapped:
        if merged and start < merged[-1][1]:
            merged[-1] = (merged[-1][0], max(merged[-1][1], end))
        else:
            merged.append((start, end))
    return merged


def highlight_html(text: str, spans: Iterable[Span], css_class: str = HIGHLIGHT_CLASS) -> str:
    """
    Escape ``text`` and wrap every span in a ``<mark>`` element.

    Spans may arrive in any order but must be disjoint and inside the text.
    """
    parts = []
    cursor = 0
    for start, end in sorted(spans):
        if start < cursor or start > end or end > len(text):
            raise ParameterValidationError(
                f"Invalid or overlapping highlight span ({start}, {end})",
                field="spans",
                value=(start, end)
            )
        parts.append(html.escape(text[cursor:start]))
        parts.append(f'<mark class="{css_class}">{html.escape(text[start:end])}</mark>')
        cursor = end
    parts.append(html.escape(text[cursor:]))
    return ''.join(parts)


def severity_badge_html(similarity_score: float) -> str:
    """Coloured badge for the severity band of a score."""
    band = severity_band(similarity_score)
    color = SEVERITY_COLORS[band]
    return (
        f'<span class="severity-badge" style="background: {color}; color: #ffffff; '
        f'border-radius: 8px; padding: 0.2rem 0.6rem; font-weight: 600;">{band}</span>'
    )
