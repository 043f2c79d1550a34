"""
Core matching engine.

This package contains the comparison pipeline:
- Text normalization
- Rabin-Karp (hashing) and KMP (automaton) candidate search
- Greedy longest-first overlap resolution
- Coverage scoring
"""

from .models import Algorithm, Match, ComparisonResult
from .normalizer import normalize, normalize_with_offsets, map_span_to_original
from .overlap import resolve
from .scoring import score, severity_band
from .comparator import PlagiarismChecker, compare, DEFAULT_MIN_MATCH_LENGTH
from .logging_config import setup_logging, LoggerMixin
from .validation import (
    ValidationError, FileValidationError, ParameterValidationError,
    FileValidator, ParameterValidator,
    validate_inputs, handle_exceptions
)

__all__ = [
    'Algorithm',
    'Match',
    'ComparisonResult',
    'normalize',
    'normalize_with_offsets',
    'map_span_to_original',
    'resolve',
    'score',
    'severity_band',
    'PlagiarismChecker',
    'compare',
    'DEFAULT_MIN_MATCH_LENGTH',
    'setup_logging',
    'LoggerMixin',
    'ValidationError',
    'FileValidationError',
    'ParameterValidationError',
    'FileValidator',
    'ParameterValidator',
    'validate_inputs',
    'handle_exceptions'
]
