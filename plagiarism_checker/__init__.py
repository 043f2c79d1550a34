"""
Plagiarism Checker

Finds verbatim shared segments between two documents using Rabin-Karp
or Knuth-Morris-Pratt string matching and scores their overlap.
"""

__version__ = "1.0.0"

from .core import *
from .utils import *
