"""
Tests for the two-pass diversity selector.
"""

import pytest

from config.constants import SelectionConfig
from services.diversity import (
    DiversitySelector,
    capsule_targets,
    jaccard,
    silhouette_key,
)
from wardrobe.models import OutfitCandidate, OutfitSignature

ALL_REFINED = {"Refined": 1.0, "Crossover": 0.0, "Adventurer": 0.0}


def _cand(shirt, pants, shoes, score, capsule="Refined", pants_color=None, is_shorts=False):
    return OutfitCandidate(
        items=[shirt, pants, shoes],
        score=score,
        signature=OutfitSignature(shirt=shirt, pants=pants, shoes=shoes),
        capsule=capsule,
        is_shorts=is_shorts,
        pants_color=pants_color or pants,
    )


def _distinct(n, score=2.0, capsule="Refined", **kwargs):
    """n candidates that share no items, groups or silhouettes."""
    return [
        _cand(f"s{i}", f"p{i}", f"h{i}", score - i * 0.01, capsule=capsule, **kwargs)
        for i in range(n)
    ]


class TestHelpers:

    def test_jaccard(self):
        assert jaccard({"a", "b"}, {"b", "c"}) == pytest.approx(1 / 3)
        assert jaccard(["a"], ["a"]) == 1.0
        assert jaccard([], []) == 0.0

    def test_silhouette_key(self):
        cand = _cand("oxford-white", "chinos-khaki", "loafers-brown", 1.0)
        assert silhouette_key(cand) == "oxford_chinos_loafers"


class TestCapsuleTargets:

    def test_rounded_shares(self):
        quotas = {"Refined": 0.40, "Crossover": 0.35, "Adventurer": 0.25}
        assert capsule_targets(7, quotas) == {"Refined": 3, "Crossover": 2, "Adventurer": 2}

    def test_overshoot_removed_from_largest_quota(self):
        quotas = {"Refined": 0.5, "Crossover": 0.25, "Adventurer": 0.25}
        # 5 + round(2.5) + round(2.5) = 11
        assert capsule_targets(10, quotas) == {"Refined": 4, "Crossover": 3, "Adventurer": 3}

    def test_undershoot_spread_round_robin(self):
        quotas = {"Refined": 0.1, "Crossover": 0.1, "Adventurer": 0.1}
        assert capsule_targets(10, quotas) == {"Refined": 4, "Crossover": 3, "Adventurer": 3}

    @pytest.mark.parametrize("total", [0, 1, 2, 3, 10, 37, 250])
    def test_sums_to_total(self, total):
        quotas = {"Refined": 0.40, "Crossover": 0.35, "Adventurer": 0.25}
        assert sum(capsule_targets(total, quotas).values()) == total


class TestGroupCaps:

    def test_per_shirt(self):
        cands = [_cand("s0", f"p{i}", f"h{i}", 2.0 - i * 0.01) for i in range(6)]
        result = DiversitySelector(ALL_REFINED).select(cands, 10)
        assert len(result.selected) == 4

    def test_per_pants_color(self):
        cands = _distinct(7, pants_color="khaki")
        result = DiversitySelector(ALL_REFINED).select(cands, 10)
        assert len(result.selected) == 5

    def test_shorts_total(self):
        cands = _distinct(6, is_shorts=True)
        result = DiversitySelector(ALL_REFINED).select(cands, 10)
        assert len(result.selected) == 4

    def test_per_silhouette(self):
        cands = [
            _cand(f"oxford-{i}", f"chinos-{i}", f"loafers-{i}", 2.0 - i * 0.01)
            for i in range(5)
        ]
        result = DiversitySelector(ALL_REFINED).select(cands, 10)
        assert len(result.selected) == 3

    def test_custom_caps(self):
        config = SelectionConfig(CAP_PER_PANTS_COLOR=2)
        cands = _distinct(5, pants_color="navy")
        assert len(DiversitySelector(ALL_REFINED, config).select(cands, 10).selected) == 2


class TestQuotas:

    def test_pass_one_honours_capsule_targets(self):
        quotas = {"Refined": 0.5, "Crossover": 0.0, "Adventurer": 0.5}
        refined = _distinct(5, score=3.0)
        adventurer = [
            _cand(f"a{i}", f"ap{i}", f"ah{i}", 1.0 - i * 0.01, capsule="Adventurer")
            for i in range(5)
        ]
        result = DiversitySelector(quotas).select(refined + adventurer, 4)

        assert result.capsule_targets == {"Refined": 2, "Crossover": 0, "Adventurer": 2}
        assert result.capsule_counts == {"Refined": 2, "Crossover": 0, "Adventurer": 2}
        assert result.pass1_count == 4
        assert result.pass2_count == 0

    def test_pass_two_fills_remaining_slots(self):
        cands = _distinct(5, capsule="Adventurer")
        result = DiversitySelector(ALL_REFINED).select(cands, 3)

        assert result.pass1_count == 0
        assert result.pass2_count == 3
        assert result.capsule_counts["Adventurer"] == 3

    def test_counts_never_exceed_selection(self):
        cands = _distinct(8) + _distinct(8, capsule="Crossover")
        result = DiversitySelector(ALL_REFINED).select(cands, 6)
        assert sum(result.capsule_counts.values()) == len(result.selected) == 6


class TestMMR:

    def test_prefers_dissimilar_candidate(self):
        first = _cand("s1", "p1", "h1", 2.0)
        overlapping = _cand("s2", "p1", "h1", 1.95)
        disjoint = _cand("s3", "p3", "h3", 1.9)

        result = DiversitySelector(ALL_REFINED).select([overlapping, disjoint, first], 2)
        assert result.selected == [first, disjoint]

    def test_tie_keeps_earlier_candidate(self):
        a = _cand("s1", "p1", "h1", 1.5)
        b = _cand("s2", "p2", "h2", 1.5)
        assert DiversitySelector(ALL_REFINED).select([a, b], 1).selected == [a]
        assert DiversitySelector(ALL_REFINED).select([b, a], 1).selected == [b]

    def test_no_duplicates_in_selection(self):
        cands = _distinct(10)
        result = DiversitySelector(ALL_REFINED).select(cands, 10)
        assert len({id(c) for c in result.selected}) == len(result.selected)


class TestEdgeCases:

    def test_empty_pool(self):
        result = DiversitySelector(ALL_REFINED).select([], 10)
        assert result.selected == []
        assert result.capsule_counts == {"Refined": 0, "Crossover": 0, "Adventurer": 0}

    def test_zero_target(self):
        assert DiversitySelector(ALL_REFINED).select(_distinct(3), 0).selected == []

    def test_fewer_candidates_than_target(self):
        assert len(DiversitySelector(ALL_REFINED).select(_distinct(3), 10).selected) == 3

    def test_deterministic(self):
        cands = _distinct(6) + [_cand("s0", "p9", "h9", 1.99)]
        a = DiversitySelector(ALL_REFINED).select(cands, 5).selected
        b = DiversitySelector(ALL_REFINED).select(list(cands), 5).selected
        assert [c.items for c in a] == [c.items for c in b]
