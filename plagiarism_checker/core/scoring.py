"""Coverage-based similarity score and its severity banding."""

import logging
from typing import Sequence

from .models import Match

logger = logging.getLogger(__name__)

LOW_SEVERITY_LIMIT = 20.0
MEDIUM_SEVERITY_LIMIT = 50.0


def score(matches: Sequence[Match], text_a: str, text_b: str) -> float:
    """
    Percentage of the shorter normalized document covered by matches.

    Returns 0.0 when the shorter document is empty. Disjoint matches can
    never cover more than the shorter document; if they somehow do, the
    score is clamped to 100 and a warning is logged.
    """
    shorter = min(len(text_a), len(text_b))
    if shorter == 0:
        return 0.0

    matched = sum(match.length for match in matches)
    if matched > shorter:
        logger.warning(
            f"Matched characters ({matched}) exceed shorter document length ({shorter}); clamping score"
        )
        matched = shorter

    return (matched / shorter) * 100


def severity_band(similarity_score: float) -> str:
    """Low below 20%, Medium below 50%, High otherwise."""
    if similarity_score < LOW_SEVERITY_LIMIT:
        return "Low"
    if similarity_score < MEDIUM_SEVERITY_LIMIT:
        return "Medium"
    return "High"
