"""Result types shared by the matchers, the resolver and the front ends."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Tuple

from .validation import ParameterValidationError

Span = Tuple[int, int]


class Algorithm(str, Enum):
    """Matching strategy selector."""

    HASHING = "rabin-karp"
    AUTOMATON = "kmp"

    @property
    def label(self) -> str:
        return "Rabin-Karp (Hashing)" if self is Algorithm.HASHING else "KMP (Knuth-Morris-Pratt)"

    @classmethod
    def from_value(cls, value: Any) -> "Algorithm":
        """Accept the enum itself, its value, its name or a short alias."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if key in (member.value, member.name.lower()):
                    return member
        raise ParameterValidationError(
            f"Unknown algorithm: {value!r}. Expected one of {[m.value for m in cls]}",
            field="algorithm",
            value=value
        )


def spans_overlap(first: Span, second: Span) -> bool:
    """Half-open interval intersection test."""
    return first[0] < second[1] and second[0] < first[1]


@dataclass(frozen=True)
class Match:
    """
    A segment found verbatim in both normalized documents.

    Spans are half-open offsets into the normalized texts.
    """

    text: str
    span_a: Span
    span_b: Span

    @property
    def length(self) -> int:
        return len(self.text)

    @property
    def start_a(self) -> int:
        return self.span_a[0]

    @property
    def end_a(self) -> int:
        return self.span_a[1]

    @property
    def start_b(self) -> int:
        return self.span_b[0]

    @property
    def end_b(self) -> int:
        return self.span_b[1]

    def overlaps(self, other: "Match") -> bool:
        """True when the spans intersect on either document."""
        return spans_overlap(self.span_a, other.span_a) or spans_overlap(self.span_b, other.span_b)

    def swapped(self) -> "Match":
        return Match(self.text, self.span_b, self.span_a)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'text': self.text,
            'length': self.length,
            'start_a': self.start_a,
            'end_a': self.end_a,
            'start_b': self.start_b,
            'end_b': self.end_b,
        }


@dataclass
class ComparisonResult:
    """Outcome of one two-document comparison."""

    matches: List[Match]
    similarity_score: float
    algorithm: Algorithm
    min_match_length: int
    normalized_a: str = ""
    normalized_b: str = ""
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def matched_characters(self) -> int:
        return sum(match.length for match in self.matches)

    @property
    def severity(self) -> str:
        from .scoring import severity_band
        return severity_band(self.similarity_score)

    def spans_a(self) -> List[Span]:
        return sorted(match.span_a for match in self.matches)

    def spans_b(self) -> List[Span]:
        return sorted(match.span_b for match in self.matches)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'algorithm': self.algorithm.value,
            'min_match_length': self.min_match_length,
            'similarity_score': self.similarity_score,
            'matched_characters': self.matched_characters,
            'matches': [match.to_dict() for match in self.matches],
        }
