"""
Wardrobe catalog and outfit corpus: models, loading, validation, persistence.
"""

from wardrobe.models import (
    CAPSULES,
    Capsule,
    Category,
    CorpusOutfit,
    OutfitCandidate,
    OutfitCorpusDocument,
    OutfitSignature,
    WardrobeDocument,
    WardrobeItem,
    combination_key,
)
from wardrobe.catalog import (
    CorpusValidation,
    StaleOutfit,
    WardrobeIndex,
    build_combination_index,
    load_corpus,
    load_wardrobe,
    validate_corpus,
)
from wardrobe.corpus import OutfitIdSequence, append_outfits, write_corpus

__all__ = [
    "CAPSULES",
    "Capsule",
    "Category",
    "CorpusOutfit",
    "OutfitCandidate",
    "OutfitCorpusDocument",
    "OutfitSignature",
    "WardrobeDocument",
    "WardrobeItem",
    "combination_key",
    "CorpusValidation",
    "StaleOutfit",
    "WardrobeIndex",
    "build_combination_index",
    "load_corpus",
    "load_wardrobe",
    "validate_corpus",
    "OutfitIdSequence",
    "append_outfits",
    "write_corpus",
]
