"""
Combination scorer: deterministic style compatibility for one outfit.

score = color_bonus + capsule_bonus - formality_penalty, rounded to 3 places.

    formality_penalty  0.15 * d(shirt, pants)
                     + 0.10 * d(avg, shoes)
                     + 0.10 * d(avg, jacket)            [jacket]
    color_bonus        0.25 per harmonious pair among
                       shirt/pants, pants/shoes, pants/jacket [jacket]
    capsule_bonus      0.6 * overlap(shirt, pants)
                     + 0.4 * overlap(pants, shoes)
                     + 0.3 * overlap(shirt, jacket)     [jacket]
                     + 0.2 * overlap(watch, jacket+shirt) [watch]
                     + 0.1 * overlap(belt, shoes)       [belt]

Usage::

    from scoring.scorer import combo_score

    score = combo_score(shirt, pants, shoes, belt=belt, watch=watch)
"""

from dataclasses import dataclass
from typing import Optional

from scoring.item_utils import (
    capsule_overlap,
    colors_play_nice,
    formality_distance,
    item_color,
)
from wardrobe.models import WardrobeItem

HARMONY_STEP = 0.25


@dataclass(frozen=True)
class ScoreBreakdown:
    formality_penalty: float
    color_bonus: float
    capsule_bonus: float

    @property
    def total(self) -> float:
        return round(self.color_bonus + self.capsule_bonus - self.formality_penalty, 3)


def harmony_bonus(*conditions: bool) -> float:
    return sum(1 for c in conditions if c) * HARMONY_STEP


class ComboScorer:
    """
    Stateless outfit scorer.

    Safe to share across the whole generation run.
    """

    def breakdown(
        self,
        shirt: WardrobeItem,
        pants: WardrobeItem,
        shoes: Optional[WardrobeItem],
        belt: Optional[WardrobeItem] = None,
        watch: Optional[WardrobeItem] = None,
        jacket: Optional[WardrobeItem] = None,
    ) -> ScoreBreakdown:
        shoes_formality = shoes.formality if shoes is not None else 5
        form_avg = (shirt.formality + pants.formality + shoes_formality) / 3

        penalty = (
            0.15 * formality_distance(shirt.formality, pants.formality)
            + 0.10 * formality_distance(form_avg, shoes_formality)
        )
        if jacket is not None:
            penalty += 0.10 * formality_distance(form_avg, jacket.formality)

        c_shirt = item_color(shirt)
        c_pants = item_color(pants)
        c_shoes = item_color(shoes) if shoes is not None else "neutral"
        color = harmony_bonus(
            colors_play_nice(c_shirt, c_pants),
            colors_play_nice(c_pants, c_shoes),
            jacket is not None and colors_play_nice(c_pants, item_color(jacket)),
        )

        shoe_tags = shoes.capsule_tags if shoes is not None else []
        capsule = (
            0.6 * capsule_overlap(shirt.capsule_tags, pants.capsule_tags)
            + 0.4 * capsule_overlap(pants.capsule_tags, shoe_tags)
        )
        if jacket is not None:
            capsule += 0.3 * capsule_overlap(shirt.capsule_tags, jacket.capsule_tags)
        if watch is not None:
            upper_tags = list(jacket.capsule_tags if jacket is not None else []) + list(shirt.capsule_tags)
            capsule += 0.2 * capsule_overlap(watch.capsule_tags, upper_tags)
        if belt is not None:
            capsule += 0.1 * capsule_overlap(belt.capsule_tags, shoe_tags)

        return ScoreBreakdown(
            formality_penalty=penalty,
            color_bonus=color,
            capsule_bonus=capsule,
        )

    def score(self, *args, **kwargs) -> float:
        return self.breakdown(*args, **kwargs).total


_DEFAULT_SCORER = ComboScorer()


def combo_score(
    shirt: WardrobeItem,
    pants: WardrobeItem,
    shoes: Optional[WardrobeItem],
    belt: Optional[WardrobeItem] = None,
    watch: Optional[WardrobeItem] = None,
    jacket: Optional[WardrobeItem] = None,
) -> float:
    """Compatibility score for one combination (higher is better, unbounded)."""
    return _DEFAULT_SCORER.score(shirt, pants, shoes, belt=belt, watch=watch, jacket=jacket)
