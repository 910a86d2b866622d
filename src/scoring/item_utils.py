"""
Shared item-attribute helpers for outfit scoring.

Color tokens, vibes and capsule counts are inferred from item ids, names
and capsule tags.  Every helper is a pure function over WardrobeItem
values (or their raw fields) so the scorer, the accessory selector and the
diversity selector all agree on the same reading of an item.
"""

import re
from typing import Dict, Iterable, List, Optional, Set

from core.utils import normalize_string_set
from wardrobe.models import CAPSULES, WardrobeItem


# ── Color palette ─────────────────────────────────────────────────
# Checked in order; the first token found in "<id> <name>" wins.
# Multi-word tokens are reported hyphenated ("light grey" -> "light-grey").
COLOR_PALETTE: List[str] = [
    "white", "black", "navy", "blue",
    "light grey", "light-gray", "lightgrey", "grey", "gray",
    "khaki", "olive", "charcoal", "tan", "brown", "dark brown",
    "cream", "beige", "deep navy",
]

_DENIM_RE = re.compile(r"denim|jeans")

NEUTRAL_COLORS: Set[str] = {
    "white", "black", "grey", "gray", "light-grey", "charcoal",
    "tan", "beige", "cream", "brown", "dark-brown", "neutral",
}
BLUE_COLORS: Set[str] = {"navy", "deep-navy", "blue"}
EARTH_COLORS: Set[str] = {"khaki", "olive", "brown", "dark-brown", "tan", "beige", "cream"}

# Capsule tag (lower-cased) -> vibe label
_VIBE_TAGS = ("refined", "crossover", "adventurer", "shorts")
_CASUAL_SOURCES = {"adventurer", "shorts"}


def infer_color_token(item_id: Optional[str] = "", name: Optional[str] = "") -> str:
    """Color keyword for an item, or ``"neutral"`` when nothing matches."""
    source = f"{item_id or ''} {name or ''}".lower()

    for token in COLOR_PALETTE:
        normalized = token.replace(" ", "-")
        if normalized in source or token in source:
            return normalized

    if _DENIM_RE.search(source):
        return "navy"
    if "charcoal" in source:
        return "charcoal"
    return "neutral"


def item_color(item: WardrobeItem) -> str:
    return infer_color_token(item.id, item.name)


def colors_play_nice(top_color: Optional[str], bottom_color: Optional[str]) -> bool:
    """
    Whether two color tokens coordinate.

    Neutrals go with everything, blue pairs with earth tones, identical
    tokens match, and anything else is allowed as well.
    """
    if top_color in NEUTRAL_COLORS or bottom_color in NEUTRAL_COLORS:
        return True

    is_blue = top_color in BLUE_COLORS or bottom_color in BLUE_COLORS
    is_earth = top_color in EARTH_COLORS or bottom_color in EARTH_COLORS
    if is_blue and is_earth:
        return True

    if top_color == bottom_color:
        return True

    # Unlisted pairs are allowed; tightening this needs a product decision.
    return True


def formality_distance(a: Optional[float] = 5, b: Optional[float] = 5) -> float:
    """Absolute formality gap; a missing score counts as 5."""
    return abs((5 if a is None else a) - (5 if b is None else b))


def capsule_overlap(a_tags: Optional[Iterable[str]], b_tags: Optional[Iterable[str]]) -> int:
    """Number of capsule tags two items share."""
    return len(set(a_tags or []) & set(b_tags or []))


def vibe_overlap(tags: Optional[Iterable[str]], vibe: Set[str]) -> int:
    """Number of an item's capsule tags present in a (lower-case) vibe set."""
    return len(normalize_string_set(tags) & vibe)


def vibe_from_tags(tags: Optional[Iterable[str]]) -> Set[str]:
    """
    Map capsule tags onto vibe labels.

    ``casual`` is derived whenever ``adventurer`` or ``shorts`` is present.
    """
    normalized = normalize_string_set(tags)
    vibe = {label for label in _VIBE_TAGS if label in normalized}
    if vibe & _CASUAL_SOURCES:
        vibe.add("casual")
    return vibe


def combined_vibe(*items: Optional[WardrobeItem]) -> Set[str]:
    vibe: Set[str] = set()
    for item in items:
        if item is not None:
            vibe |= vibe_from_tags(item.capsule_tags)
    return vibe


def capsule_counts(items: Iterable[Optional[WardrobeItem]]) -> Dict[str, int]:
    """Occurrences of each style family across the items' capsule tags."""
    totals = {capsule: 0 for capsule in CAPSULES}
    for item in items:
        if item is None:
            continue
        for tag in item.capsule_tags:
            if tag in totals:
                totals[tag] += 1
    return totals


def dominant_capsule(items: Iterable[Optional[WardrobeItem]]) -> str:
    """Style family with the highest count; ties go Refined > Crossover > Adventurer."""
    totals = capsule_counts(items)
    best = CAPSULES[0]
    for capsule in CAPSULES[1:]:
        if totals[capsule] > totals[best]:
            best = capsule
    return best
