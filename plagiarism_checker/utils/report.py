"""Tabular and plain-text views of a comparison result."""

from typing import List

import pandas as pd

from ..core.models import ComparisonResult

PREVIEW_LENGTH = 80


def matches_table(result: ComparisonResult) -> pd.DataFrame:
    """One row per match, longest first, numbered from 1."""
    rows = [
        {
            '#': index,
            'Matched Text': match.text,
            'Length': match.length,
            'Document 1 Span': f"{match.start_a}-{match.end_a}",
            'Document 2 Span': f"{match.start_b}-{match.end_b}",
        }
        for index, match in enumerate(result.matches, 1)
    ]
    return pd.DataFrame(rows, columns=['#', 'Matched Text', 'Length', 'Document 1 Span', 'Document 2 Span'])


def _preview(text: str) -> str:
    if len(text) <= PREVIEW_LENGTH:
        return text
    return text[:PREVIEW_LENGTH - 3] + "..."


def format_report(result: ComparisonResult) -> str:
    """Human readable summary used by the command line front end."""
    lines: List[str] = [
        f"Algorithm: {result.algorithm.label}",
        f"Minimum match length: {result.min_match_length}",
        f"Similarity: {result.similarity_score:.2f}% ({result.severity})",
        f"Found {len(result.matches)} matching segments",
    ]
    for index, match in enumerate(result.matches, 1):
        lines.append(
            f"  #{index} [{match.length} chars] "
            f"doc1 {match.start_a}-{match.end_a} <-> doc2 {match.start_b}-{match.end_b}: "
            f"{_preview(match.text)!r}"
        )
    return "\n".join(lines)
