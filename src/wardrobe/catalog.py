"""
Catalog loading and corpus validation.

Reads the wardrobe catalog and the persisted outfit corpus, builds the
id lookup passed explicitly to every engine component, and drops corpus
outfits that reference items no longer in the catalog.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Set, Union

from core.logging import get_logger
from wardrobe.models import (
    CorpusOutfit,
    OutfitCorpusDocument,
    WardrobeDocument,
    WardrobeItem,
    combination_key,
)

logger = get_logger(__name__)

PathLike = Union[str, Path]


# =============================================================================
# Loading
# =============================================================================

def _read_json(path: PathLike) -> dict:
    return json.loads(Path(path).read_text(encoding="utf-8"))


def load_wardrobe(path: PathLike) -> WardrobeDocument:
    """
    Read the wardrobe document.

    I/O, JSON and validation errors propagate unchanged; a run cannot
    proceed without its catalog.
    """
    return WardrobeDocument.model_validate(_read_json(path))


def load_corpus(path: PathLike) -> OutfitCorpusDocument:
    """Read the outfit corpus document. Errors propagate unchanged."""
    return OutfitCorpusDocument.model_validate(_read_json(path))


# =============================================================================
# Wardrobe index
# =============================================================================

@dataclass
class WardrobeIndex:
    """Read-only lookup over one catalog snapshot."""

    items: List[WardrobeItem]
    by_id: Dict[str, WardrobeItem] = field(default_factory=dict)

    @classmethod
    def from_items(cls, items: Iterable[WardrobeItem]) -> "WardrobeIndex":
        items = list(items)
        by_id: Dict[str, WardrobeItem] = {}
        for item in items:
            # First occurrence wins on duplicate ids
            by_id.setdefault(item.id, item)
        return cls(items=items, by_id=by_id)

    @property
    def valid_ids(self) -> Set[str]:
        return set(self.by_id)

    def get(self, item_id: Optional[str]) -> Optional[WardrobeItem]:
        if item_id is None:
            return None
        return self.by_id.get(item_id)

    def pool(self, category: str) -> List[WardrobeItem]:
        """Items of one category, in catalog order."""
        return [item for item in self.items if item.category == category]

    def pick_first(self, ids: Iterable[str]) -> Optional[WardrobeItem]:
        """First id from a preference list that exists in the catalog."""
        for item_id in ids:
            found = self.by_id.get(item_id)
            if found is not None:
                return found
        return None


# =============================================================================
# Corpus validation
# =============================================================================

@dataclass
class StaleOutfit:
    """A corpus outfit dropped because it references missing items."""
    outfit: CorpusOutfit
    missing_ids: List[str]


@dataclass
class CorpusValidation:
    valid: List[CorpusOutfit] = field(default_factory=list)
    dropped: List[StaleOutfit] = field(default_factory=list)


def validate_corpus(
    outfits: Iterable[CorpusOutfit],
    valid_ids: Set[str],
) -> CorpusValidation:
    """
    Split corpus outfits into those fully backed by the catalog and stale ones.

    Each dropped outfit is logged with the ids it is missing.
    """
    result = CorpusValidation()
    for outfit in outfits:
        missing = [item_id for item_id in outfit.items if item_id not in valid_ids]
        if missing:
            result.dropped.append(StaleOutfit(outfit=outfit, missing_ids=missing))
            logger.warning(
                "Dropping outfit with missing items",
                outfit_id=outfit.id,
                missing_ids=missing,
            )
        else:
            result.valid.append(outfit)
    return result


def build_combination_index(outfits: Iterable[CorpusOutfit]) -> Set[str]:
    """Dedup keys of every outfit already in the corpus."""
    return {combination_key(outfit.items) for outfit in outfits}
