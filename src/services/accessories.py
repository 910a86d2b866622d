"""
Accessory selection for a partially built outfit.

Given the running vibe of the shirt/pants/shoes already chosen, pick the
belt, watch, jacket and undershirt candidates that complete the look.
Preference lists live in config.constants.GenerationConfig.
"""

from typing import List, Optional, Sequence, Set

from config.constants import DEFAULT_GENERATION_CONFIG, GenerationConfig
from core.utils import round_half_up
from scoring.item_utils import (
    colors_play_nice,
    formality_distance,
    item_color,
    vibe_overlap,
)
from wardrobe.catalog import WardrobeIndex
from wardrobe.models import WardrobeItem


def pick_undershirt(
    index: WardrobeIndex,
    vibe: Set[str],
    jacket: Optional[WardrobeItem] = None,
    config: GenerationConfig = DEFAULT_GENERATION_CONFIG,
) -> Optional[WardrobeItem]:
    """Undershirt for casual looks or layered looks; None otherwise."""
    if "casual" not in vibe and jacket is None:
        return None
    if "refined" in vibe:
        return index.pick_first(config.UNDERSHIRTS_REFINED)
    return index.pick_first(config.UNDERSHIRTS_DEFAULT)


def pick_belt(
    index: WardrobeIndex,
    shoes: Optional[WardrobeItem],
    vibe: Set[str],
    config: GenerationConfig = DEFAULT_GENERATION_CONFIG,
) -> Optional[WardrobeItem]:
    """
    Belt matched to the shoes.

    Black shoes take a black belt, dressy shoes a dress-brown belt,
    adventurer looks a rugged belt, everything else a versatile brown one.
    """
    shoe_id = (shoes.id if shoes is not None else "").lower()
    shoe_formality = shoes.formality if shoes is not None else 5

    if "black" in shoe_id:
        prefs = config.BELTS["black"]
    elif shoe_formality >= config.DRESSY_SHOE_FORMALITY:
        prefs = config.BELTS["dress"]
    elif "adventurer" in vibe:
        prefs = config.BELTS["rugged"]
    else:
        prefs = config.BELTS["default"]
    return index.pick_first(prefs)


def watch_target_formality(vibe: Set[str]) -> int:
    if "refined" in vibe:
        return 7
    if "adventurer" in vibe:
        return 5
    return 6


def pick_watches(
    vibe: Set[str],
    pool: Sequence[WardrobeItem],
    config: GenerationConfig = DEFAULT_GENERATION_CONFIG,
) -> List[WardrobeItem]:
    """Watches ranked by vibe overlap (desc) then distance to the vibe's target formality (asc)."""
    target = watch_target_formality(vibe)
    ranked = sorted(
        pool,
        key=lambda w: (-vibe_overlap(w.capsule_tags, vibe), formality_distance(w.formality, target)),
    )
    return ranked[: config.MAX_WATCHES]


def pick_jackets(
    vibe: Set[str],
    shirt: WardrobeItem,
    pants: WardrobeItem,
    jackets: Sequence[WardrobeItem],
    config: GenerationConfig = DEFAULT_GENERATION_CONFIG,
) -> List[WardrobeItem]:
    """
    Layering candidates for a shirt/pants pair.

    Never offered over shorts.  Ranked by vibe overlap plus 0.2 when the
    jacket color works with the pants (desc), then by distance to the
    shirt/pants formality mean (asc).
    """
    if pants.is_shorts:
        return []

    avg_formality = round_half_up((shirt.formality + pants.formality) / 2)
    pants_color = item_color(pants)

    def _rank(jacket: WardrobeItem):
        score = vibe_overlap(jacket.capsule_tags, vibe)
        if colors_play_nice(item_color(jacket), pants_color):
            score += 0.2
        return (-score, formality_distance(jacket.formality, avg_formality))

    return sorted(jackets, key=_rank)[: config.MAX_JACKETS_PER_SET]
