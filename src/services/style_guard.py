"""Style guard: hard vetoes for garment pairings that never make an outfit.

Each rule is a pure predicate over a (partial) outfit returning either
``None`` (no violation) or a human-readable rejection reason.  Rules are
evaluated in order and the first violation short-circuits.  There is no
score override: a guarded combination is never generated.

Integration point in candidate_generator.generate_candidates():
    reason = guard.check(choice)
    if reason:
        continue
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Tuple

from wardrobe.models import WardrobeItem


@dataclass(frozen=True)
class OutfitChoice:
    """One concrete combination of catalog items."""

    shirt: WardrobeItem
    pants: WardrobeItem
    shoes: WardrobeItem
    belt: Optional[WardrobeItem] = None
    watch: Optional[WardrobeItem] = None
    jacket: Optional[WardrobeItem] = None
    undershirt: Optional[WardrobeItem] = None

    def item_ids(self) -> List[str]:
        """Ids in corpus order: jacket, shirt, pants, shoes, belt, watch, undershirt."""
        ordered = (
            self.jacket, self.shirt, self.pants, self.shoes,
            self.belt, self.watch, self.undershirt,
        )
        return [item.id for item in ordered if item is not None]


StyleRule = Callable[[OutfitChoice], Optional[str]]


# ============================================================================
# Rules
# ============================================================================

def shorts_with_outerwear(choice: OutfitChoice) -> Optional[str]:
    """No jacket, shacket, coat, cardigan or sweater over shorts."""
    if choice.pants.is_shorts and choice.jacket is not None and choice.jacket.is_outerwear:
        return "Shorts cannot be paired with jackets/shackets/sweaters."
    return None


def shorts_with_boots(choice: OutfitChoice) -> Optional[str]:
    """No boots with shorts."""
    if choice.pants.is_shorts and choice.shoes.is_boots:
        return "Shorts cannot be paired with boots."
    return None


DEFAULT_RULES: Tuple[StyleRule, ...] = (
    shorts_with_outerwear,
    shorts_with_boots,
)


# ============================================================================
# Guard
# ============================================================================

class StyleGuard:
    """Ordered rule list; extend by passing additional rules."""

    def __init__(self, rules: Optional[Iterable[StyleRule]] = None) -> None:
        self._rules: List[StyleRule] = list(DEFAULT_RULES if rules is None else rules)

    @property
    def rules(self) -> List[StyleRule]:
        return list(self._rules)

    def check(self, choice: OutfitChoice) -> Optional[str]:
        """Return the first violation reason, or None when the outfit is allowed."""
        for rule in self._rules:
            reason = rule(choice)
            if reason:
                return reason
        return None


def check_style_guard(choice: OutfitChoice) -> Optional[str]:
    """Evaluate the default rules against *choice*."""
    return StyleGuard().check(choice)
