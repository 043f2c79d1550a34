"""
Two-document comparison entry point.

Normalizes both texts, runs the selected matching strategy, resolves
overlapping candidates and scores the coverage. Each call is pure and
keeps no state between invocations.
"""

from typing import Any, Callable, Dict, List, Union

from . import kmp, rabin_karp
from .logging_config import LoggerMixin
from .models import Algorithm, ComparisonResult, Match
from .normalizer import normalize
from .overlap import resolve
from .scoring import score
from .validation import ParameterValidator, handle_exceptions, validate_inputs

DEFAULT_MIN_MATCH_LENGTH = 5

CandidateFinder = Callable[..., List[Match]]

MATCHERS: Dict[Algorithm, CandidateFinder] = {
    Algorithm.HASHING: rabin_karp.find_candidates,
    Algorithm.AUTOMATON: kmp.find_candidates,
}


class PlagiarismChecker(LoggerMixin):
    """
    Compares two documents for verbatim shared segments.

    Holds the comparison settings only; no document state survives a call.
    """

    def __init__(self,
                 min_match_length: int = DEFAULT_MIN_MATCH_LENGTH,
                 algorithm: Union[Algorithm, str] = Algorithm.HASHING,
                 max_workers: int = 1,
                 show_progress: bool = False):
        """
        Args:
            min_match_length: Shortest segment reported, at least 1
            algorithm: Default matching strategy
            max_workers: Threads used to search window sizes in parallel
            show_progress: Display a progress bar over window sizes

        Raises:
            ParameterValidationError: If parameters are invalid
        """
        self.min_match_length = ParameterValidator.validate_positive_integer(
            min_match_length, "min_match_length", min_value=1
        )
        self.algorithm = Algorithm.from_value(algorithm)
        self.max_workers = ParameterValidator.validate_positive_integer(
            max_workers, "max_workers", min_value=1
        )
        self.show_progress = show_progress

    @handle_exceptions()
    @validate_inputs(
        text_a=lambda x: ParameterValidator.validate_text(x, "text_a"),
        text_b=lambda x: ParameterValidator.validate_text(x, "text_b"),
    )
    def compare(self, text_a: str, text_b: str, algorithm: Union[Algorithm, str, None] = None) -> ComparisonResult:
        """
        Find shared segments between two documents and score them.

        Args:
            text_a: First document
            text_b: Second document
            algorithm: Overrides the checker's default strategy

        Returns:
            ComparisonResult with matches ordered by descending length

        Raises:
            ParameterValidationError: If an input is not text or the algorithm is unknown
        """
        selected = self.algorithm if algorithm is None else Algorithm.from_value(algorithm)
        normalized_a = normalize(text_a)
        normalized_b = normalize(text_b)

        with self.log_operation("compare_documents",
                                algorithm=selected.value,
                                min_match_length=self.min_match_length,
                                length_a=len(normalized_a),
                                length_b=len(normalized_b)) as operation:
            candidates = MATCHERS[selected](
                normalized_a,
                normalized_b,
                self.min_match_length,
                max_workers=self.max_workers,
                show_progress=self.show_progress,
            )
            matches = resolve(candidates)
            similarity = score(matches, normalized_a, normalized_b)

            operation.extra.update(candidates=len(candidates),
                                   matches=len(matches),
                                   similarity_score=round(similarity, 2))

        return ComparisonResult(
            matches=matches,
            similarity_score=similarity,
            algorithm=selected,
            min_match_length=self.min_match_length,
            normalized_a=normalized_a,
            normalized_b=normalized_b,
            metadata={
                'candidates': len(candidates),
                'duration_seconds': operation.duration,
            },
        )


def compare(text_a: str,
            text_b: str,
            algorithm: Union[Algorithm, str] = Algorithm.HASHING,
            min_match_length: int = DEFAULT_MIN_MATCH_LENGTH,
            **options: Any) -> ComparisonResult:
    """
    Compare two documents with the given strategy.

    Extra keyword options (``max_workers``, ``show_progress``) are passed
    to :class:`PlagiarismChecker`.
    """
    checker = PlagiarismChecker(min_match_length=min_match_length, algorithm=algorithm, **options)
    return checker.compare(text_a, text_b)
