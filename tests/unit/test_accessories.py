"""
Tests for belt, watch, jacket and undershirt selection.
"""

import pytest

from services.accessories import (
    pick_belt,
    pick_jackets,
    pick_undershirt,
    pick_watches,
    watch_target_formality,
)
from wardrobe.catalog import WardrobeIndex
from wardrobe.models import WardrobeItem


def _item(item_id, category, formality=5, tags=None):
    return WardrobeItem.model_validate({
        "id": item_id,
        "category": category,
        "formalityScore": formality,
        "capsuleTags": tags or [],
    })


@pytest.fixture
def index():
    return WardrobeIndex.from_items([
        _item("belt-clean-brown", "Belt", 6, ["Refined"]),
        _item("belt-rugged", "Belt", 4, ["Adventurer"]),
        _item("tee-white", "Undershirt", 3),
        _item("tee-grey", "Undershirt", 3),
    ])


FIELD_WATCH = _item("field-watch", "Watch", 5, ["Adventurer", "Crossover"])
DRESS_WATCH = _item("dress-watch", "Watch", 8, ["Refined"])
CHORE = _item("chore-jacket-olive", "Jacket/Overshirt", 4, ["Adventurer", "Crossover"])
BLAZER = _item("blazer-navy", "Jacket/Overshirt", 8, ["Refined"])
OXFORD = _item("oxford-white", "Shirt", 6, ["Refined"])
CHINOS = _item("chinos-khaki", "Pants", 5, ["Refined"])
SHORTS = _item("shorts-chino-navy", "Pants", 3, ["Shorts"])


class TestPickBelt:

    def test_black_shoes_without_black_belt(self, index):
        shoes = _item("derby-black", "Shoes", 8)
        assert pick_belt(index, shoes, set()) is None

    def test_black_shoes_take_reversible_fallback(self):
        index = WardrobeIndex.from_items([_item("belt-reversible", "Belt")])
        shoes = _item("derby-black", "Shoes", 8)
        assert pick_belt(index, shoes, set()).id == "belt-reversible"

    def test_dressy_shoes(self, index):
        shoes = _item("loafers-brown", "Shoes", 7)
        assert pick_belt(index, shoes, {"adventurer"}).id == "belt-clean-brown"

    def test_adventurer_vibe(self, index):
        shoes = _item("boots-brown", "Shoes", 5)
        assert pick_belt(index, shoes, {"adventurer", "casual"}).id == "belt-rugged"

    def test_default(self, index):
        shoes = _item("sneakers-white", "Shoes", 3)
        assert pick_belt(index, shoes, {"refined"}).id == "belt-clean-brown"
        assert pick_belt(index, None, set()).id == "belt-clean-brown"


class TestPickUndershirt:

    def test_none_for_dressed_up_look_without_jacket(self, index):
        assert pick_undershirt(index, {"refined"}) is None

    def test_casual_vibe(self, index):
        assert pick_undershirt(index, {"adventurer", "casual"}).id == "tee-white"

    def test_jacket_triggers_layering(self, index):
        assert pick_undershirt(index, set(), jacket=BLAZER).id == "tee-white"

    def test_preference_order(self):
        index = WardrobeIndex.from_items([
            _item("tee-grey", "Undershirt"),
            _item("tee-cream", "Undershirt"),
        ])
        assert pick_undershirt(index, {"refined", "casual"}).id == "tee-cream"
        assert pick_undershirt(index, {"casual"}).id == "tee-grey"

    def test_missing_undershirts(self):
        assert pick_undershirt(WardrobeIndex.from_items([]), {"casual"}) is None


class TestPickWatches:

    def test_target_formality(self):
        assert watch_target_formality({"refined"}) == 7
        assert watch_target_formality({"refined", "adventurer"}) == 7
        assert watch_target_formality({"adventurer"}) == 5
        assert watch_target_formality(set()) == 6

    def test_vibe_overlap_first(self):
        assert pick_watches({"refined"}, [FIELD_WATCH, DRESS_WATCH]) == [DRESS_WATCH]
        assert pick_watches({"adventurer", "casual"}, [DRESS_WATCH, FIELD_WATCH]) == [FIELD_WATCH]

    def test_formality_breaks_ties(self):
        # Neither overlaps; field watch (5) is closer to 6 than dress watch (8)
        assert pick_watches(set(), [DRESS_WATCH, FIELD_WATCH]) == [FIELD_WATCH]

    def test_empty_pool(self):
        assert pick_watches({"refined"}, []) == []


class TestPickJackets:

    def test_never_over_shorts(self):
        assert pick_jackets({"casual"}, OXFORD, SHORTS, [CHORE, BLAZER]) == []

    def test_ranked_by_vibe(self):
        assert pick_jackets({"refined"}, OXFORD, CHINOS, [CHORE, BLAZER]) == [BLAZER]
        assert pick_jackets({"adventurer", "crossover"}, OXFORD, CHINOS, [BLAZER, CHORE]) == [CHORE]

    def test_stable_on_full_tie(self):
        # Both jackets sit 2 away from round(5.5) = 6
        assert pick_jackets(set(), OXFORD, CHINOS, [CHORE, BLAZER]) == [CHORE]

    def test_no_jackets(self):
        assert pick_jackets({"refined"}, OXFORD, CHINOS, []) == []
