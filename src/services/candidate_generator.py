"""
Candidate Generator

Enumerates outfit combinations from the wardrobe catalog and keeps the
ones worth offering to the diversity selector.

Pipeline (outer to inner, each stage lazily ranked and capped):
1. shirts                          (every shirt in the catalog)
2. pants  per shirt                (top MAX_PANTS_PER_SHIRT)
3. shoes  per shirt/pants          (top MAX_SHOES_PER_PANT, no boots with shorts)
4. belt                            (single pick, falls back to first belt)
5. jacket      in {none} + picks   (top MAX_JACKETS_PER_SET)
6. watch       in {none} + picks   (top MAX_WATCHES)
7. undershirt  in {none} + pick    (none only for formal, unlayered looks)

Each full combination then goes through:
style guard -> dedup against the combination index -> score -> threshold.
"""

from dataclasses import dataclass
from typing import Iterator, List, Optional, Set

from config.constants import DEFAULT_GENERATION_CONFIG, GenerationConfig
from core.logging import get_logger
from core.utils import round_half_up
from scoring.item_utils import (
    capsule_overlap,
    colors_play_nice,
    combined_vibe,
    dominant_capsule,
    formality_distance,
    item_color,
    vibe_from_tags,
)
from scoring.scorer import ComboScorer
from services.accessories import (
    pick_belt,
    pick_jackets,
    pick_undershirt,
    pick_watches,
)
from services.style_guard import OutfitChoice, StyleGuard
from wardrobe.catalog import WardrobeIndex
from wardrobe.models import (
    Category,
    OutfitCandidate,
    OutfitSignature,
    WardrobeItem,
    combination_key,
)

logger = get_logger(__name__)


@dataclass
class GenerationStats:
    """Counters for one generation pass."""
    combinations: int = 0
    guard_rejected: int = 0
    duplicates: int = 0
    below_threshold: int = 0
    accepted: int = 0

    def as_dict(self) -> dict:
        return {
            "combinations": self.combinations,
            "guard_rejected": self.guard_rejected,
            "duplicates": self.duplicates,
            "below_threshold": self.below_threshold,
            "accepted": self.accepted,
        }


# =============================================================================
# Stage ranking
# =============================================================================

def rank_pants(
    shirt: WardrobeItem,
    pants_pool: List[WardrobeItem],
    config: GenerationConfig = DEFAULT_GENERATION_CONFIG,
) -> List[WardrobeItem]:
    """Pants for a shirt: capsule overlap + 0.25 color bonus (desc), formality gap (asc)."""
    shirt_color = item_color(shirt)

    def _rank(pants: WardrobeItem):
        score = capsule_overlap(shirt.capsule_tags, pants.capsule_tags)
        if colors_play_nice(shirt_color, item_color(pants)):
            score += 0.25
        return (-score, formality_distance(shirt.formality, pants.formality))

    return sorted(pants_pool, key=_rank)[: config.MAX_PANTS_PER_SHIRT]


def rank_shoes(
    shirt: WardrobeItem,
    pants: WardrobeItem,
    shoes_pool: List[WardrobeItem],
    config: GenerationConfig = DEFAULT_GENERATION_CONFIG,
) -> List[WardrobeItem]:
    """Shoes for a shirt/pants pair; boots are dropped when the pants are shorts."""
    target = round_half_up((shirt.formality + pants.formality) / 2)
    eligible = [s for s in shoes_pool if not (pants.is_shorts and s.is_boots)]

    def _rank(shoes: WardrobeItem):
        score = (
            capsule_overlap(pants.capsule_tags, shoes.capsule_tags)
            + capsule_overlap(shirt.capsule_tags, shoes.capsule_tags)
        )
        return (-score, formality_distance(target, shoes.formality))

    return sorted(eligible, key=_rank)[: config.MAX_SHOES_PER_PANT]


def undershirt_options(
    shirt: WardrobeItem,
    pants: WardrobeItem,
    jacket: Optional[WardrobeItem],
    undershirt: Optional[WardrobeItem],
    config: GenerationConfig = DEFAULT_GENERATION_CONFIG,
) -> List[Optional[WardrobeItem]]:
    formal = (
        shirt.formality >= config.NO_UNDERSHIRT_FORMALITY
        and pants.formality >= config.NO_UNDERSHIRT_FORMALITY
    )
    if (jacket is None and formal) or undershirt is None:
        return [None]
    return [None, undershirt]


# =============================================================================
# Enumeration
# =============================================================================

def iter_combinations(
    index: WardrobeIndex,
    config: GenerationConfig = DEFAULT_GENERATION_CONFIG,
) -> Iterator[OutfitChoice]:
    """Lazily yield every capped shirt x pants x shoes x accessory combination."""
    shirts = index.pool(Category.SHIRT.value)
    pants_pool = index.pool(Category.PANTS.value)
    shoes_pool = index.pool(Category.SHOES.value)
    belt_pool = index.pool(Category.BELT.value)
    watch_pool = index.pool(Category.WATCH.value)
    jacket_pool = index.pool(Category.JACKET.value)

    for shirt in shirts:
        shirt_vibe = vibe_from_tags(shirt.capsule_tags)

        for pants in rank_pants(shirt, pants_pool, config):
            for shoes in rank_shoes(shirt, pants, shoes_pool, config):
                vibe = shirt_vibe | combined_vibe(pants, shoes)

                belt = pick_belt(index, shoes, vibe, config)
                if belt is None and belt_pool:
                    belt = belt_pool[0]
                watches = pick_watches(vibe, watch_pool, config)
                jackets = pick_jackets(vibe, shirt, pants, jacket_pool, config)
                undershirt = pick_undershirt(
                    index, vibe, jackets[0] if jackets else None, config
                )

                for jacket in [None, *jackets]:
                    for watch in [None, *watches]:
                        for under in undershirt_options(shirt, pants, jacket, undershirt, config):
                            yield OutfitChoice(
                                shirt=shirt,
                                pants=pants,
                                shoes=shoes,
                                belt=belt,
                                watch=watch,
                                jacket=jacket,
                                undershirt=under,
                            )


def build_candidate(
    choice: OutfitChoice,
    score: float,
    config: GenerationConfig = DEFAULT_GENERATION_CONFIG,
) -> OutfitCandidate:
    """Pants color for grouping is inferred from id and name, as the scorer does."""
    items = [
        choice.jacket, choice.shirt, choice.pants, choice.shoes,
        choice.belt, choice.watch, choice.undershirt,
    ]
    return OutfitCandidate(
        items=choice.item_ids(),
        score=score,
        signature=OutfitSignature(
            shirt=choice.shirt.id,
            pants=choice.pants.id,
            shoes=choice.shoes.id,
            jacket=choice.jacket.id if choice.jacket is not None else None,
        ),
        capsule=dominant_capsule(items),
        tuck=config.DEFAULT_TUCK,
        is_shorts=choice.pants.is_shorts,
        pants_color=item_color(choice.pants),
    )


def generate_candidates(
    index: WardrobeIndex,
    combination_index: Set[str],
    min_score: Optional[float] = None,
    guard: Optional[StyleGuard] = None,
    scorer: Optional[ComboScorer] = None,
    config: GenerationConfig = DEFAULT_GENERATION_CONFIG,
    stats: Optional[GenerationStats] = None,
) -> List[OutfitCandidate]:
    """
    Build the selection pool.

    *combination_index* is seeded from the validated corpus and grows with
    every accepted candidate, so no key is produced twice in one run.

    Returns:
        Candidates in enumeration order, each scoring at least *min_score*
    """
    guard = guard or StyleGuard()
    scorer = scorer or ComboScorer()
    threshold = config.MIN_COMBO_SCORE if min_score is None else min_score
    stats = stats if stats is not None else GenerationStats()

    candidates: List[OutfitCandidate] = []
    for choice in iter_combinations(index, config):
        stats.combinations += 1

        reason = guard.check(choice)
        if reason:
            stats.guard_rejected += 1
            logger.debug(
                "Style guard rejected combination",
                items=choice.item_ids(),
                reason=reason,
            )
            continue

        key = combination_key(choice.item_ids())
        if key in combination_index:
            stats.duplicates += 1
            continue

        score = scorer.score(
            choice.shirt, choice.pants, choice.shoes,
            belt=choice.belt, watch=choice.watch, jacket=choice.jacket,
        )
        if score < threshold:
            stats.below_threshold += 1
            continue

        candidates.append(build_candidate(choice, score, config))
        combination_index.add(key)
        stats.accepted += 1

    logger.info("Generated candidate combinations", count=len(candidates), **stats.as_dict())
    return candidates
