"""
Algorithm constants for outfit generation and selection.

These are values that don't change based on environment but may need
to be tuned or referenced across the codebase.
"""

from dataclasses import dataclass, field
from typing import Dict, Tuple


# =============================================================================
# Candidate Generation
# =============================================================================

@dataclass(frozen=True)
class GenerationConfig:
    """Fan-out caps and accessory preferences for candidate enumeration."""

    # Per-stage top-K
    MAX_PANTS_PER_SHIRT: int = 3
    MAX_SHOES_PER_PANT: int = 2
    MAX_JACKETS_PER_SET: int = 1
    MAX_WATCHES: int = 1

    # Score floor for a candidate to enter the selection pool
    MIN_COMBO_SCORE: float = 1.2

    # Tuck style recorded on every generated outfit
    DEFAULT_TUCK: str = "Tucked"

    # Undershirt preference order (first id present in the catalog wins)
    UNDERSHIRTS_REFINED: Tuple[str, ...] = ("tee-white", "tee-cream", "tee-grey")
    UNDERSHIRTS_DEFAULT: Tuple[str, ...] = ("tee-white", "tee-grey", "tee-cream")

    # Belt preference order per shoe situation
    BELTS: Dict[str, Tuple[str, ...]] = field(default_factory=lambda: {
        "black": ("belt-black-pebbled", "belt-reversible"),
        "dress": ("belt-reversible", "belt-clean-brown"),
        "rugged": ("belt-rugged", "belt-reversible"),
        "default": ("belt-braided", "belt-clean-brown"),
    })

    # Shoes at or above this formality count as dressy for belt matching
    DRESSY_SHOE_FORMALITY: int = 7

    # Both shirt and pants at or above this skip the undershirt without a jacket
    NO_UNDERSHIRT_FORMALITY: int = 6


DEFAULT_GENERATION_CONFIG = GenerationConfig()


# =============================================================================
# Diversity Selection
# =============================================================================

@dataclass(frozen=True)
class SelectionConfig:
    """Group caps and MMR weights for the two-pass selector."""

    CAP_PER_SHIRT: int = 4
    CAP_PER_PANTS_COLOR: int = 5
    CAP_SHORTS: int = 4
    CAP_PER_SILHOUETTE: int = 3

    # MMR: ALPHA * score + BETA * (1 - max_similarity)
    ALPHA: float = 0.75
    BETA: float = 0.25


DEFAULT_SELECTION_CONFIG = SelectionConfig()
