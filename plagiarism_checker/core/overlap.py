"""
Overlap resolution shared by both matching strategies.

Candidates are ranked by length (longest first, discovery order on ties)
and accepted greedily when they intersect none of the already accepted
matches on either document. Greedy longest-first is a heuristic; it
does not guarantee the largest possible non-overlapping cover.
"""

import logging
from typing import Iterable, List, Sequence

from .models import Match

logger = logging.getLogger(__name__)


def overlaps_any(accepted: Sequence[Match], candidate: Match) -> bool:
    """True when ``candidate`` intersects any accepted match on either side."""
    return any(candidate.overlaps(match) for match in accepted)


def resolve(candidates: Iterable[Match]) -> List[Match]:
    """
    Select a pairwise-disjoint subset of candidates.

    :param candidates: raw matcher output, in discovery order
    :return: accepted matches, ordered by descending length
    """
    # sorted() is stable, so equal lengths keep discovery order
    ordered = sorted(candidates, key=lambda match: match.length, reverse=True)

    accepted: List[Match] = []
    for candidate in ordered:
        if not overlaps_any(accepted, candidate):
            accepted.append(candidate)

    logger.debug(f"Resolved {len(ordered)} candidates into {len(accepted)} matches")
    return accepted
