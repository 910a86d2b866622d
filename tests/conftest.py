"""
Pytest configuration and shared fixtures for the outfit generator tests.
"""
import json
import os
import sys
from typing import Callable, List, Optional

import pytest

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(__file__)), "src"))

# Load environment variables
from dotenv import load_dotenv
load_dotenv(os.path.join(os.path.dirname(os.path.dirname(__file__)), ".env"))

from wardrobe.models import WardrobeItem


# ============================================================================
# Fixtures: Test Data Factories
# ============================================================================

def make_item(
    item_id: str,
    category: str,
    formality: Optional[int] = 5,
    tags: Optional[List[str]] = None,
    name: str = "",
    **extra,
) -> WardrobeItem:
    """Build a WardrobeItem the way it appears in wardrobe.json."""
    return WardrobeItem.model_validate({
        "id": item_id,
        "category": category,
        "name": name,
        "formalityScore": formality,
        "capsuleTags": tags or [],
        **extra,
    })


@pytest.fixture
def item_factory() -> Callable[..., WardrobeItem]:
    return make_item


@pytest.fixture
def sample_wardrobe_dict() -> dict:
    """A small but complete catalog covering every category."""
    return {
        "items": [
            {"id": "oxford-white", "category": "Shirt", "name": "White Oxford",
             "formalityScore": 6, "capsuleTags": ["Refined", "Crossover"]},
            {"id": "flannel-olive", "category": "Shirt", "name": "Olive Flannel",
             "formalityScore": 4, "capsuleTags": ["Adventurer", "Crossover"]},
            {"id": "linen-blue", "category": "Shirt", "name": "Blue Linen",
             "formalityScore": 5, "capsuleTags": ["Crossover", "Shorts"]},
            {"id": "chinos-khaki", "category": "Pants", "name": "Khaki Chinos",
             "formalityScore": 5, "capsuleTags": ["Refined", "Crossover"]},
            {"id": "trousers-charcoal", "category": "Pants", "name": "Charcoal Trousers",
             "formalityScore": 7, "capsuleTags": ["Refined"]},
            {"id": "jeans-dark", "category": "Pants", "name": "Dark Jeans",
             "formalityScore": 4, "capsuleTags": ["Adventurer", "Crossover"]},
            {"id": "shorts-chino-navy", "category": "Pants", "name": "Navy Chino Shorts",
             "formalityScore": 3, "capsuleTags": ["Shorts", "Crossover"]},
            {"id": "loafers-brown", "category": "Shoes", "name": "Brown Loafers",
             "formalityScore": 7, "capsuleTags": ["Refined", "Crossover"]},
            {"id": "boots-brown", "category": "Shoes", "name": "Brown Boots",
             "formalityScore": 5, "capsuleTags": ["Adventurer", "Crossover"]},
            {"id": "sneakers-white", "category": "Shoes", "name": "White Sneakers",
             "formalityScore": 3, "capsuleTags": ["Crossover", "Shorts"]},
            {"id": "chore-jacket-olive", "category": "Jacket/Overshirt", "name": "Olive Chore Jacket",
             "formalityScore": 4, "capsuleTags": ["Adventurer", "Crossover"]},
            {"id": "blazer-navy", "category": "Jacket/Overshirt", "name": "Navy Blazer",
             "formalityScore": 8, "capsuleTags": ["Refined"]},
            {"id": "belt-clean-brown", "category": "Belt", "name": "Brown Leather Belt",
             "formalityScore": 6, "capsuleTags": ["Refined", "Crossover"]},
            {"id": "belt-rugged", "category": "Belt", "name": "Rugged Belt",
             "formalityScore": 4, "capsuleTags": ["Adventurer"]},
            {"id": "field-watch", "category": "Watch", "name": "Field Watch",
             "formalityScore": 5, "capsuleTags": ["Adventurer", "Crossover"]},
            {"id": "dress-watch", "category": "Watch", "name": "Dress Watch",
             "formalityScore": 8, "capsuleTags": ["Refined"]},
            {"id": "tee-white", "category": "Undershirt", "name": "White Tee",
             "formalityScore": 3, "capsuleTags": ["Crossover"]},
            {"id": "tee-grey", "category": "Undershirt", "name": "Grey Tee",
             "formalityScore": 3, "capsuleTags": ["Crossover"]},
        ]
    }


@pytest.fixture
def write_json(tmp_path) -> Callable[[str, dict], str]:
    """Write a document under tmp_path and return its path."""
    def _write(name: str, payload: dict) -> str:
        path = tmp_path / name
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        return str(path)
    return _write


@pytest.fixture
def wardrobe_file(write_json, sample_wardrobe_dict) -> str:
    return write_json("wardrobe.json", sample_wardrobe_dict)


@pytest.fixture
def empty_corpus_file(write_json) -> str:
    return write_json("outfits.json", {"outfits": []})


@pytest.fixture
def settings_factory():
    """Settings isolated from the developer's environment and .env file."""
    from config.settings import get_settings_for_testing
    return get_settings_for_testing


# ============================================================================
# Markers auto-use
# ============================================================================

def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
