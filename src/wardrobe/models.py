"""
Pydantic models for wardrobe catalogs and outfit corpora.

Models cover:
- Wardrobe items (read-only catalog input)
- Persisted corpus outfits and the two JSON documents
- Ephemeral outfit candidates produced by the generator
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


# =============================================================================
# Enums
# =============================================================================

class Category(str, Enum):
    """Catalog categories, spelled as they appear in wardrobe.json."""
    JACKET = "Jacket/Overshirt"
    SHIRT = "Shirt"
    UNDERSHIRT = "Undershirt"
    PANTS = "Pants"
    SHOES = "Shoes"
    BELT = "Belt"
    WATCH = "Watch"


class Capsule(str, Enum):
    """Style families, declared in tie-break order."""
    REFINED = "Refined"
    CROSSOVER = "Crossover"
    ADVENTURER = "Adventurer"


CAPSULES: Tuple[str, ...] = tuple(c.value for c in Capsule)

# Seasonal marker carried in capsuleTags; never a style family
SHORTS_TAG = "Shorts"

_OUTERWEAR_RE = re.compile(r"shacket|jacket|coat|cardigan|crewneck|shawl", re.IGNORECASE)


# =============================================================================
# Catalog
# =============================================================================

class WardrobeItem(BaseModel):
    """A single garment or accessory. Immutable for the duration of a run."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: str
    category: str
    name: str = ""
    formality_score: Optional[int] = Field(default=None, alias="formalityScore")
    capsule_tags: List[str] = Field(default_factory=list, alias="capsuleTags")

    # Explicit type markers; when absent the id/name convention is used
    silhouette: Optional[str] = None    # shorts / boots / ...
    layer_type: Optional[str] = Field(default=None, alias="layerType")  # outerwear / base

    @field_validator("name", mode="before")
    @classmethod
    def _null_name(cls, v):
        return "" if v is None else v

    @field_validator("capsule_tags", mode="before")
    @classmethod
    def _null_tags(cls, v):
        return [] if v is None else v

    @property
    def formality(self) -> int:
        return self.formality_score if self.formality_score is not None else 5

    @property
    def is_shorts(self) -> bool:
        if self.silhouette:
            return self.silhouette.lower() == "shorts"
        if "shorts" in self.id.lower():
            return True
        return any(t.lower() == "shorts" for t in self.capsule_tags)

    @property
    def is_boots(self) -> bool:
        if self.silhouette:
            return self.silhouette.lower() == "boots"
        return "boot" in self.id.lower()

    @property
    def is_outerwear(self) -> bool:
        if self.layer_type:
            return self.layer_type.lower() == "outerwear"
        if self.category == Category.JACKET.value:
            return True
        return bool(_OUTERWEAR_RE.search(self.id) or _OUTERWEAR_RE.search(self.name))


class WardrobeDocument(BaseModel):
    """``{ "items": [...] }`` as stored in wardrobe.json."""

    model_config = ConfigDict(extra="allow")

    items: List[WardrobeItem] = Field(default_factory=list)


# =============================================================================
# Corpus
# =============================================================================

class CorpusOutfit(BaseModel):
    """A persisted outfit. Unknown fields survive a read/write cycle."""

    model_config = ConfigDict(extra="allow")

    id: str
    items: List[str] = Field(default_factory=list)
    tuck: str = "Tucked"

    @field_validator("items", mode="before")
    @classmethod
    def _null_items(cls, v):
        return [] if v is None else v


class OutfitCorpusDocument(BaseModel):
    """``{ "outfits": [...] }`` as stored in outfits.json."""

    model_config = ConfigDict(extra="allow")

    outfits: List[CorpusOutfit] = Field(default_factory=list)


# =============================================================================
# Candidates (engine-internal)
# =============================================================================

@dataclass(frozen=True)
class OutfitSignature:
    """Core pieces of a candidate, used for grouping during selection."""
    shirt: str
    pants: str
    shoes: str
    jacket: Optional[str] = None


def combination_key(item_ids: Iterable[str]) -> str:
    """Sorted, de-duplicated, pipe-joined ids. Two outfits with equal keys are duplicates."""
    return "|".join(sorted(set(item_ids)))


@dataclass
class OutfitCandidate:
    """A scored combination waiting for selection."""

    items: List[str]
    score: float
    signature: OutfitSignature
    capsule: str
    tuck: str = "Tucked"
    is_shorts: bool = False
    pants_color: str = "neutral"

    @property
    def key(self) -> str:
        return combination_key(self.items)
