"""
Core Utility Functions.

Common utilities used across the application.
"""

import math
from typing import Iterable, Optional, Set


def normalize_string_set(items: Optional[Iterable[str]]) -> Set[str]:
    """
    Normalize a collection of strings to a set of lowercase, stripped strings.

    Args:
        items: Strings (may be None, or contain None / empty strings)

    Returns:
        Set of normalized strings
    """
    return {s.lower().strip() for s in (items or []) if s}


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves upward (2.5 -> 3, unlike round())."""
    return int(math.floor(value + 0.5))
