"""
Services module for the outfit generation pipeline.

Provides the style guard, accessory selection, candidate generation,
diversity selection and the engine that runs them end to end.
"""

from services.candidate_generator import GenerationStats, generate_candidates, iter_combinations
from services.diversity import DiversitySelector, SelectionResult, capsule_targets
from services.outfit_engine import OutfitEngine, RunReport, run_engine
from services.style_guard import OutfitChoice, StyleGuard, check_style_guard

__all__ = [
    "GenerationStats",
    "generate_candidates",
    "iter_combinations",
    "DiversitySelector",
    "SelectionResult",
    "capsule_targets",
    "OutfitEngine",
    "RunReport",
    "run_engine",
    "OutfitChoice",
    "StyleGuard",
    "check_style_guard",
]
