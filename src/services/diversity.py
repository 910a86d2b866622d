"""
Diversity Selector

Two-pass greedy selection (MMR-style) over the candidate pool.

For each slot, among the *feasible* candidates pick the one maximising:

    mmr = ALPHA * score + BETA * (1 - max_jaccard_with_selected)

Feasibility:
  - group caps: per shirt id, per pants color, shorts total, per silhouette key
  - pass 1 only: the candidate's dominant capsule has not yet met its quota

Pass 2 keeps the group caps but drops the capsule quota and fills the
remaining slots.  Ties keep the earlier (higher-scoring) pool entry; no
randomness is involved anywhere.
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Optional, Sequence

from config.constants import DEFAULT_SELECTION_CONFIG, SelectionConfig
from core.logging import get_logger
from core.utils import round_half_up
from wardrobe.models import CAPSULES, OutfitCandidate

logger = get_logger(__name__)


# =============================================================================
# Grouping keys
# =============================================================================

def jaccard(a: Iterable[str], b: Iterable[str]) -> float:
    """Item-set overlap between two outfits (0 = disjoint, 1 = identical)."""
    sa, sb = set(a), set(b)
    union = sa | sb
    if not union:
        return 0.0
    return len(sa & sb) / len(union)


def silhouette_key(cand: OutfitCandidate) -> str:
    """First hyphen token of the shirt, pants and shoes ids (e.g. ``oxford_chinos_loafers``)."""
    sig = cand.signature
    return "_".join(part.split("-")[0] for part in (sig.shirt, sig.pants, sig.shoes))


def capsule_targets(total: int, quotas: Mapping[str, float]) -> Dict[str, int]:
    """
    Per-capsule target counts that sum exactly to *total*.

    Rounded shares first; any rounding drift is then handed out one at a
    time, highest quota first.
    """
    targets = {c: round_half_up(total * quotas.get(c, 0.0)) for c in CAPSULES}
    diff = total - sum(targets.values())
    priority = sorted(CAPSULES, key=lambda c: -quotas.get(c, 0.0))

    i = 0
    while diff != 0:
        capsule = priority[i % len(priority)]
        step = 1 if diff > 0 else -1
        targets[capsule] += step
        diff -= step
        i += 1
    return targets


# =============================================================================
# Selection state
# =============================================================================

@dataclass
class _GroupCounters:
    by_shirt: Counter = field(default_factory=Counter)
    by_pants_color: Counter = field(default_factory=Counter)
    by_silhouette: Counter = field(default_factory=Counter)
    by_capsule: Counter = field(default_factory=Counter)
    shorts: int = 0

    def record(self, cand: OutfitCandidate) -> None:
        self.by_shirt[cand.signature.shirt] += 1
        self.by_pants_color[cand.pants_color] += 1
        self.by_silhouette[silhouette_key(cand)] += 1
        self.by_capsule[cand.capsule] += 1
        if cand.is_shorts:
            self.shorts += 1


@dataclass
class _PoolEntry:
    cand: OutfitCandidate
    items: frozenset
    # Highest Jaccard similarity to anything selected so far
    max_similarity: float = 0.0


@dataclass
class SelectionResult:
    selected: List[OutfitCandidate]
    capsule_targets: Dict[str, int]
    capsule_counts: Dict[str, int]
    pass1_count: int

    @property
    def pass2_count(self) -> int:
        return len(self.selected) - self.pass1_count


class DiversitySelector:
    """Bounded, balanced, diverse subset of a candidate pool."""

    def __init__(
        self,
        quotas: Mapping[str, float],
        config: SelectionConfig = DEFAULT_SELECTION_CONFIG,
    ) -> None:
        self.quotas = dict(quotas)
        self.config = config

    def _can_take(
        self,
        cand: OutfitCandidate,
        counters: _GroupCounters,
        targets: Mapping[str, int],
        strict_capsule: bool,
    ) -> bool:
        cfg = self.config
        if counters.by_shirt[cand.signature.shirt] >= cfg.CAP_PER_SHIRT:
            return False
        if counters.by_pants_color[cand.pants_color] >= cfg.CAP_PER_PANTS_COLOR:
            return False
        if cand.is_shorts and counters.shorts >= cfg.CAP_SHORTS:
            return False
        if counters.by_silhouette[silhouette_key(cand)] >= cfg.CAP_PER_SILHOUETTE:
            return False
        if strict_capsule and counters.by_capsule[cand.capsule] >= targets.get(cand.capsule, 0):
            return False
        return True

    def _pick_next(
        self,
        pool: List[_PoolEntry],
        counters: _GroupCounters,
        targets: Mapping[str, int],
        strict_capsule: bool,
    ) -> Optional[_PoolEntry]:
        best_idx = -1
        best_value = float("-inf")
        for i, entry in enumerate(pool):
            if not self._can_take(entry.cand, counters, targets, strict_capsule):
                continue
            value = (
                self.config.ALPHA * entry.cand.score
                + self.config.BETA * (1.0 - entry.max_similarity)
            )
            if value > best_value:
                best_value = value
                best_idx = i
        if best_idx == -1:
            return None
        return pool.pop(best_idx)

    def _run_pass(
        self,
        pool: List[_PoolEntry],
        selected: List[OutfitCandidate],
        counters: _GroupCounters,
        targets: Mapping[str, int],
        target: int,
        strict_capsule: bool,
    ) -> None:
        while len(selected) < target:
            pick = self._pick_next(pool, counters, targets, strict_capsule)
            if pick is None:
                break
            selected.append(pick.cand)
            counters.record(pick.cand)
            for entry in pool:
                sim = jaccard(entry.items, pick.items)
                if sim > entry.max_similarity:
                    entry.max_similarity = sim

    def select(self, candidates: Sequence[OutfitCandidate], target: int) -> SelectionResult:
        """
        Choose up to *target* candidates.

        Returns:
            SelectionResult with the picks in selection order plus capsule
            targets and the per-capsule counts actually reached
        """
        ordered = sorted(candidates, key=lambda c: -c.score)
        pool = [_PoolEntry(cand=c, items=frozenset(c.items)) for c in ordered]
        targets = capsule_targets(target, self.quotas)
        counters = _GroupCounters()
        selected: List[OutfitCandidate] = []

        self._run_pass(pool, selected, counters, targets, target, strict_capsule=True)
        pass1_count = len(selected)
        logger.info("Selection pass 1 complete", selected=pass1_count, target=target)

        self._run_pass(pool, selected, counters, targets, target, strict_capsule=False)
        logger.info(
            "Selection pass 2 complete",
            selected=len(selected),
            added=len(selected) - pass1_count,
            target=target,
        )

        counts = {c: counters.by_capsule[c] for c in CAPSULES}
        return SelectionResult(
            selected=selected,
            capsule_targets=targets,
            capsule_counts=counts,
            pass1_count=pass1_count,
        )
