"""
Outfit Corpus Engine
====================

Batch job that grows the persisted outfit corpus from the wardrobe catalog.

Steps:
  1. Load       - wardrobe catalog + existing outfit corpus (blocking reads)
  2. Validate   - drop corpus outfits that reference items no longer in the catalog
  3. Index      - seed the combination index and the outfit id sequence
  4. Generate   - enumerate, guard, dedupe, score and threshold candidates
  5. Select     - two-pass MMR with group caps and capsule quotas
  6. Write      - append selected outfits with fresh ids, one write of the corpus

Nothing is written until selection has finished; a failure before step 6
leaves the corpus file untouched.
"""

import uuid
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Union

from config.constants import (
    DEFAULT_GENERATION_CONFIG,
    DEFAULT_SELECTION_CONFIG,
    GenerationConfig,
    SelectionConfig,
)
from config.settings import Settings, get_settings
from core.logging import bind_context, clear_context, get_logger
from services.candidate_generator import GenerationStats, generate_candidates
from services.diversity import DiversitySelector
from services.style_guard import StyleGuard
from wardrobe.catalog import (
    WardrobeIndex,
    build_combination_index,
    load_corpus,
    load_wardrobe,
    validate_corpus,
)
from wardrobe.corpus import OutfitIdSequence, append_outfits, write_corpus
from wardrobe.models import Category

logger = get_logger(__name__)

PathLike = Union[str, Path]


@dataclass
class RunReport:
    """Outcome of one engine run."""

    removed_outfits: int = 0
    candidates: int = 0
    selected: int = 0
    total_outfits: int = 0
    target: int = 0
    capsule_targets: Dict[str, int] = field(default_factory=dict)
    capsule_counts: Dict[str, int] = field(default_factory=dict)
    new_outfit_ids: List[str] = field(default_factory=list)
    generation: Dict[str, int] = field(default_factory=dict)
    written: bool = False


class OutfitEngine:
    """Runs the load -> validate -> generate -> select -> write pipeline."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        generation_config: GenerationConfig = DEFAULT_GENERATION_CONFIG,
        selection_config: SelectionConfig = DEFAULT_SELECTION_CONFIG,
        guard: Optional[StyleGuard] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.generation_config = generation_config
        self.selection_config = selection_config
        self.guard = guard or StyleGuard()

    def run(
        self,
        wardrobe_path: Optional[PathLike] = None,
        outfits_path: Optional[PathLike] = None,
        dry_run: bool = False,
    ) -> RunReport:
        """
        Execute one generation run.

        Args:
            wardrobe_path: Wardrobe document (defaults to settings.wardrobe_path)
            outfits_path: Corpus document, rewritten in place (defaults to settings.outfits_path)
            dry_run: Generate and select but skip the final write

        Raises:
            OSError, json.JSONDecodeError, pydantic.ValidationError: on unreadable input
        """
        wardrobe_path = Path(wardrobe_path or self.settings.wardrobe_path)
        outfits_path = Path(outfits_path or self.settings.outfits_path)
        target = self.settings.target_outfits

        bind_context(run_id=uuid.uuid4().hex[:8])
        try:
            return self._run(wardrobe_path, outfits_path, target, dry_run)
        finally:
            clear_context()

    def _run(
        self,
        wardrobe_path: Path,
        outfits_path: Path,
        target: int,
        dry_run: bool,
    ) -> RunReport:
        report = RunReport(target=target)

        # --- 1. Load ---
        logger.info("Loading wardrobe and outfit data", wardrobe=str(wardrobe_path), outfits=str(outfits_path))
        wardrobe = load_wardrobe(wardrobe_path)
        corpus = load_corpus(outfits_path)
        index = WardrobeIndex.from_items(wardrobe.items)
        logger.info(
            "Wardrobe inventory",
            shirts=len(index.pool(Category.SHIRT.value)),
            pants=len(index.pool(Category.PANTS.value)),
            shoes=len(index.pool(Category.SHOES.value)),
            jackets=len(index.pool(Category.JACKET.value)),
        )

        # --- 2. Validate ---
        validation = validate_corpus(corpus.outfits, index.valid_ids)
        corpus.outfits = validation.valid
        report.removed_outfits = len(validation.dropped)
        if validation.dropped:
            logger.warning("Removed outfits with invalid items", count=len(validation.dropped))
        logger.info("Existing valid outfits", count=len(validation.valid))

        # --- 3. Index ---
        combos = build_combination_index(validation.valid)
        sequence = OutfitIdSequence.from_ids(o.id for o in validation.valid)

        # --- 4. Generate ---
        stats = GenerationStats()
        candidates = generate_candidates(
            index,
            combos,
            min_score=self.settings.min_combo_score,
            guard=self.guard,
            config=self.generation_config,
            stats=stats,
        )
        report.candidates = len(candidates)
        report.generation = stats.as_dict()

        # --- 5. Select ---
        selector = DiversitySelector(self.settings.capsule_quotas, self.selection_config)
        result = selector.select(candidates, target)
        report.selected = len(result.selected)
        report.capsule_targets = result.capsule_targets
        report.capsule_counts = result.capsule_counts
        logger.info(
            "Capsule distribution",
            targets=result.capsule_targets,
            actual=result.capsule_counts,
        )
        if report.selected < target:
            logger.info("Selection stopped early", selected=report.selected, target=target)

        # --- 6. Write ---
        appended = append_outfits(corpus, result.selected, sequence)
        report.new_outfit_ids = [o.id for o in appended]
        report.total_outfits = len(corpus.outfits)

        if dry_run:
            logger.info("Dry run, corpus not written", path=str(outfits_path))
        else:
            write_corpus(outfits_path, corpus)
            report.written = True

        logger.info(
            "Run complete",
            removed=report.removed_outfits,
            generated=report.selected,
            total=report.total_outfits,
            path=str(outfits_path),
        )
        return report


def run_engine(
    wardrobe_path: Optional[PathLike] = None,
    outfits_path: Optional[PathLike] = None,
    settings: Optional[Settings] = None,
    dry_run: bool = False,
) -> RunReport:
    """Convenience wrapper: build an engine from settings and run it once."""
    return OutfitEngine(settings=settings).run(wardrobe_path, outfits_path, dry_run=dry_run)
