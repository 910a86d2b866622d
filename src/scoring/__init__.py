"""
Shared Scoring Module.

Attribute inference (colors, vibes, capsules) and the combination scorer
used by the candidate generator and the accessory selector.

Quick start::

    from scoring import combo_score, infer_color_token, vibe_from_tags

    color = infer_color_token("chinos-khaki", "Khaki Chinos")   # "khaki"
    vibe = vibe_from_tags(["Refined", "Crossover"])             # {"refined", "crossover"}
    score = combo_score(shirt, pants, shoes)
"""

from scoring.item_utils import (
    capsule_counts,
    capsule_overlap,
    colors_play_nice,
    combined_vibe,
    dominant_capsule,
    formality_distance,
    infer_color_token,
    item_color,
    vibe_from_tags,
    vibe_overlap,
)
from scoring.scorer import ComboScorer, ScoreBreakdown, combo_score

__all__ = [
    "capsule_counts",
    "capsule_overlap",
    "colors_play_nice",
    "combined_vibe",
    "dominant_capsule",
    "formality_distance",
    "infer_color_token",
    "item_color",
    "vibe_from_tags",
    "vibe_overlap",
    "ComboScorer",
    "ScoreBreakdown",
    "combo_score",
]
