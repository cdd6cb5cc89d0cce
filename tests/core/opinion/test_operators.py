"""Tests for the opinion algebra.

Validates:
- Evidence <-> opinion mapping (EBSL Theorem 1).
- Trust level + evidence amount -> opinion, with input clamping and guards.
- Cumulative fusion, including the dogmatic fallback.
- Scalar multiplication, generic / EBSL / traditional discounting.
- Expectation.
"""

from __future__ import annotations

import math

import pytest

from ebsl_reputation.core.opinion import (
    Opinion,
    discount_opinion,
    ebsl_discount,
    evidence_to_opinion,
    expectation,
    fuse,
    fuse_all,
    generic_discount,
    opinion_from_evidence,
    opinion_to_evidence,
    scalar_multiply,
    scale_evidence,
)
from ebsl_reputation.exceptions import InvalidOpinionError


def _sum(o: Opinion) -> float:
    return o.belief + o.disbelief + o.uncertainty


# ===========================================================================
# Evidence mapping
# ===========================================================================


class TestEvidenceMapping:
    """(p, n, c) / (p + n + c) and its inverse."""

    def test_evidence_to_opinion(self) -> None:
        """8 positive and 2 negative observations with c = 2."""
        o = evidence_to_opinion(8, 2)
        assert o.belief == pytest.approx(8 / 12)
        assert o.disbelief == pytest.approx(2 / 12)
        assert o.uncertainty == pytest.approx(2 / 12)

    def test_no_evidence_is_vacuous(self) -> None:
        """No evidence gives exactly the vacuous opinion."""
        assert evidence_to_opinion(0, 0) == Opinion.vacuous()

    def test_round_trip(self) -> None:
        """opinion_to_evidence inverts evidence_to_opinion."""
        p, n = opinion_to_evidence(evidence_to_opinion(8, 2))
        assert p == pytest.approx(8.0)
        assert n == pytest.approx(2.0)

    def test_dogmatic_opinion_has_infinite_evidence(self) -> None:
        """A dogmatic opinion maps to infinite evidence where it has mass."""
        p, n = opinion_to_evidence(Opinion(1.0, 0.0, 0.0))
        assert math.isinf(p)
        assert n == 0.0

    def test_huge_evidence_does_not_overflow(self) -> None:
        """Finite amounts whose sum overflows still map to a valid opinion."""
        o = evidence_to_opinion(1e308, 1e308)
        assert o.belief == pytest.approx(0.5)
        assert o.disbelief == pytest.approx(0.5)
        assert o.uncertainty < 1e-300
        assert o.belief + o.disbelief + o.uncertainty == pytest.approx(1.0)

    def test_huge_evidence_keeps_ratio(self) -> None:
        """Rescaling preserves the positive/negative ratio."""
        o = evidence_to_opinion(1.5e308, 0.5e308)
        assert o.belief == pytest.approx(0.75)
        assert o.disbelief == pytest.approx(0.25)

    def test_negative_evidence_rejected(self) -> None:
        """Evidence amounts cannot be negative."""
        with pytest.raises(InvalidOpinionError):
            evidence_to_opinion(-1, 2)

    def test_non_positive_constant_rejected(self) -> None:
        """The evidence constant must be positive."""
        with pytest.raises(InvalidOpinionError):
            evidence_to_opinion(1, 1, c=0)

    def test_base_rate_out_of_range_rejected(self) -> None:
        """Base rates outside [0, 1] are rejected, not clamped."""
        with pytest.raises(InvalidOpinionError):
            evidence_to_opinion(1, 1, base_rate=1.5)


class TestOpinionFromEvidence:
    """Trust level (0-100) + evidence amount -> opinion."""

    def test_high_trust(self) -> None:
        """90% trust with 10 observations: (9, 1, 2) / 12."""
        o = opinion_from_evidence(90, 10)
        assert o.belief == pytest.approx(0.75, abs=0.05)
        assert o.disbelief == pytest.approx(0.083, abs=0.05)
        assert o.uncertainty == pytest.approx(0.167, abs=0.05)

    def test_low_trust(self) -> None:
        """20% trust with 10 observations: (2, 8, 2) / 12."""
        o = opinion_from_evidence(20, 10)
        assert o.belief == pytest.approx(0.167, abs=0.05)
        assert o.disbelief == pytest.approx(0.667, abs=0.05)

    def test_moderate_trust_less_evidence(self) -> None:
        """50% trust with 5 observations: (2.5, 2.5, 2) / 7."""
        o = opinion_from_evidence(50, 5)
        assert o.belief == pytest.approx(2.5 / 7)
        assert o.uncertainty == pytest.approx(2 / 7)

    def test_base_rate_passed_through(self) -> None:
        """The base rate is carried unchanged."""
        assert opinion_from_evidence(50, 5, base_rate=0.3).base_rate == 0.3

    def test_more_evidence_less_uncertainty(self) -> None:
        """Uncertainty strictly decreases as evidence grows."""
        u = [opinion_from_evidence(70, r).uncertainty for r in (0, 1, 5, 10, 100)]
        assert all(a > b for a, b in zip(u, u[1:]))

    def test_zero_evidence_is_vacuous(self) -> None:
        """Without evidence the trust level does not matter."""
        assert opinion_from_evidence(95, 0) == Opinion.vacuous()

    @pytest.mark.parametrize(
        "raw, clamped", [(150, 100), (-20, 0), (math.inf, 100), (-math.inf, 0)]
    )
    def test_trust_level_clamped(self, raw: float, clamped: float) -> None:
        """Trust levels outside [0, 100] are clamped to the nearest bound."""
        assert opinion_from_evidence(raw, 10) == opinion_from_evidence(clamped, 10)

    def test_nan_trust_level_rejected(self) -> None:
        """NaN trust levels never reach the algebra."""
        with pytest.raises(InvalidOpinionError, match="NaN"):
            opinion_from_evidence(math.nan, 10)

    def test_non_numeric_trust_level_rejected(self) -> None:
        """String trust levels are rejected."""
        with pytest.raises(InvalidOpinionError):
            opinion_from_evidence("90", 10)  # type: ignore[arg-type]

    @pytest.mark.parametrize("count", [-1.0, math.inf, math.nan])
    def test_bad_evidence_count_rejected(self, count: float) -> None:
        """Negative or non-finite evidence counts are rejected."""
        with pytest.raises(InvalidOpinionError):
            opinion_from_evidence(50, count)


# ===========================================================================
# Fusion
# ===========================================================================


class TestFuse:
    """Cumulative fusion."""

    def test_fusion_formula(self) -> None:
        """Hand-computed cumulative fusion of two opinions."""
        a = Opinion(0.6, 0.2, 0.2)
        b = Opinion(0.4, 0.3, 0.3)
        fused = fuse(a, b)
        assert fused.belief == pytest.approx(0.26 / 0.44)
        assert fused.disbelief == pytest.approx(0.12 / 0.44)
        assert fused.uncertainty == pytest.approx(0.06 / 0.44)
        assert _sum(fused) == pytest.approx(1.0)

    def test_fusion_reduces_uncertainty(self) -> None:
        """The fused opinion is more certain than either input."""
        a = Opinion(0.6, 0.2, 0.2)
        b = Opinion(0.4, 0.3, 0.3)
        fused = fuse(a, b)
        assert fused.uncertainty < a.uncertainty
        assert fused.uncertainty < b.uncertainty

    def test_fusion_adds_evidence(self) -> None:
        """Fusing evidence-based opinions adds their evidence."""
        fused = fuse(evidence_to_opinion(3, 1), evidence_to_opinion(5, 1))
        expected = evidence_to_opinion(8, 2)
        assert fused.belief == pytest.approx(expected.belief)
        assert fused.disbelief == pytest.approx(expected.disbelief)
        assert fused.uncertainty == pytest.approx(expected.uncertainty)

    def test_vacuous_is_neutral_element(self) -> None:
        """Fusing with the vacuous opinion changes nothing."""
        a = Opinion(0.6, 0.2, 0.2)
        fused = fuse(a, Opinion.vacuous())
        assert fused.belief == pytest.approx(a.belief)
        assert fused.uncertainty == pytest.approx(a.uncertainty)

    def test_both_dogmatic_falls_back_to_average(self) -> None:
        """Two dogmatic opinions average instead of dividing by zero."""
        fused = fuse(Opinion(0.8, 0.2, 0.0), Opinion(0.4, 0.6, 0.0))
        assert fused.belief == pytest.approx(0.6)
        assert fused.disbelief == pytest.approx(0.4)
        assert fused.uncertainty == 0.0

    def test_one_dogmatic_dominates(self) -> None:
        """A dogmatic opinion absorbs an uncertain one."""
        fused = fuse(Opinion(1.0, 0.0, 0.0), Opinion(0.0, 0.5, 0.5))
        assert fused.belief == pytest.approx(1.0)
        assert fused.uncertainty == pytest.approx(0.0)

    def test_base_rate_weighted_by_uncertainty(self) -> None:
        """Equal uncertainties give the plain mean of the base rates."""
        fused = fuse(Opinion(0.5, 0.0, 0.5, 0.2), Opinion(0.0, 0.5, 0.5, 0.8))
        assert fused.base_rate == pytest.approx(0.5)

    def test_inputs_unchanged(self) -> None:
        """Fusion does not modify its inputs."""
        a = Opinion(0.6, 0.2, 0.2)
        b = Opinion(0.4, 0.3, 0.3)
        fuse(a, b)
        assert a == Opinion(0.6, 0.2, 0.2)
        assert b == Opinion(0.4, 0.3, 0.3)


class TestFuseAll:
    """Folding many opinions."""

    def test_empty_is_vacuous(self) -> None:
        """No opinions fuse to the vacuous opinion."""
        assert fuse_all([]) == Opinion.vacuous()

    def test_single_opinion_returned(self) -> None:
        """A single opinion is returned unchanged."""
        a = Opinion(0.6, 0.2, 0.2, 0.3)
        assert fuse_all([a]) == a

    def test_order_does_not_matter(self) -> None:
        """Folding in any order gives the same opinion."""
        ops = [opinion_from_evidence(t, 10) for t in (80, 90, 70, 20)]
        forward = fuse_all(ops)
        backward = fuse_all(reversed(ops))
        assert forward.belief == pytest.approx(backward.belief)
        assert forward.uncertainty == pytest.approx(backward.uncertainty)


# ===========================================================================
# Scalar multiplication and discounting
# ===========================================================================


class TestScalarMultiply:
    """k · ω moves the removed belief and disbelief into uncertainty."""

    def test_half(self) -> None:
        """Scaling by 0.5 halves belief and disbelief."""
        o = scalar_multiply(0.5, Opinion(0.8, 0.1, 0.1))
        assert o.belief == pytest.approx(0.4)
        assert o.disbelief == pytest.approx(0.05)
        assert o.uncertainty == pytest.approx(0.55)

    def test_zero_gives_vacuous(self) -> None:
        """Scaling by 0 removes all evidence."""
        o = scalar_multiply(0.0, Opinion(0.8, 0.1, 0.1, 0.3))
        assert o.uncertainty == pytest.approx(1.0)
        assert o.base_rate == 0.3

    def test_one_is_identity(self) -> None:
        """Scaling by 1 keeps the opinion."""
        a = Opinion(0.8, 0.1, 0.1)
        o = scalar_multiply(1.0, a)
        assert o.belief == pytest.approx(a.belief)
        assert o.uncertainty == pytest.approx(a.uncertainty)

    @pytest.mark.parametrize("k", [-0.1, 1.1, math.nan])
    def test_scalar_out_of_range_rejected(self, k: float) -> None:
        """Scalars outside [0, 1] are rejected."""
        with pytest.raises(InvalidOpinionError):
            scalar_multiply(k, Opinion(0.8, 0.1, 0.1))


class TestScaleEvidence:
    """EBSL scalar multiplication of the underlying evidence."""

    def test_half_evidence(self) -> None:
        """(αb, αd, u) / (α(b + d) + u) with α = 0.5."""
        o = scale_evidence(0.5, Opinion(0.8, 0.1, 0.1))
        assert o.belief == pytest.approx(0.4 / 0.55)
        assert o.disbelief == pytest.approx(0.05 / 0.55)
        assert o.uncertainty == pytest.approx(0.1 / 0.55)

    def test_consistent_with_evidence_scaling(self) -> None:
        """Scaling the opinion equals scaling its evidence."""
        o = scale_evidence(0.5, evidence_to_opinion(8, 2))
        expected = evidence_to_opinion(4, 1)
        assert o.belief == pytest.approx(expected.belief)
        assert o.uncertainty == pytest.approx(expected.uncertainty)

    def test_zero_alpha_vacuous(self) -> None:
        """α = 0 yields the vacuous opinion."""
        assert scale_evidence(0.0, Opinion(0.8, 0.1, 0.1)).is_vacuous

    def test_dogmatic_unchanged(self) -> None:
        """Any positive α leaves a dogmatic opinion as it is."""
        o = Opinion(0.5, 0.5, 0.0)
        assert scale_evidence(1e-320, o) == o

    def test_negative_alpha_rejected(self) -> None:
        """α must be non-negative."""
        with pytest.raises(InvalidOpinionError):
            scale_evidence(-1.0, Opinion(0.8, 0.1, 0.1))


class TestGenericDiscount:
    """x ⊡ y = g(x) · y."""

    def test_belief_is_default_factor(self) -> None:
        """The referrer's belief scales the target opinion."""
        x = Opinion(0.5, 0.3, 0.2)
        y = Opinion(0.8, 0.1, 0.1)
        o = generic_discount(x, y)
        assert o.belief == pytest.approx(0.4)
        assert o.disbelief == pytest.approx(0.05)
        assert o.uncertainty == pytest.approx(0.55)

    def test_discount_strictly_increases_uncertainty(self) -> None:
        """Partial trust in the referrer makes the target less certain."""
        x = Opinion(0.5, 0.3, 0.2)
        y = Opinion(0.8, 0.1, 0.1)
        assert generic_discount(x, y).uncertainty > y.uncertainty

    def test_full_trust_preserves_target(self) -> None:
        """A fully trusted referrer passes the opinion through."""
        y = Opinion(0.8, 0.1, 0.1)
        o = generic_discount(Opinion(1.0, 0.0, 0.0), y)
        assert o.uncertainty == pytest.approx(y.uncertainty)

    def test_custom_factor_function(self) -> None:
        """A custom g(x), here the expectation, replaces the belief."""
        x = Opinion(0.5, 0.3, 0.2)
        o = generic_discount(x, Opinion(0.8, 0.1, 0.1), g=expectation)
        assert o.belief == pytest.approx(0.6 * 0.8)

    def test_custom_factor_clamped(self) -> None:
        """Factors outside [0, 1] are clamped."""
        y = Opinion(0.8, 0.1, 0.1)
        o = generic_discount(Opinion.vacuous(), y, g=lambda _: 5.0)
        assert o.belief == pytest.approx(0.8)

    def test_nan_factor_rejected(self) -> None:
        """A NaN factor is an error."""
        with pytest.raises(InvalidOpinionError):
            generic_discount(Opinion.vacuous(), Opinion.vacuous(), g=lambda _: math.nan)

    def test_matches_traditional_discount(self) -> None:
        """With g = belief, ⊡ and the traditional ⊗ coincide."""
        x = Opinion(0.5, 0.3, 0.2)
        y = Opinion(0.8, 0.1, 0.1)
        a = generic_discount(x, y)
        b = discount_opinion(x, y)
        assert a.belief == pytest.approx(b.belief)
        assert a.disbelief == pytest.approx(b.disbelief)
        assert a.uncertainty == pytest.approx(b.uncertainty)


class TestEbslDiscount:
    """x ⊙ y = (p(x) / θ) · y on evidence."""

    def test_factor_from_positive_evidence(self) -> None:
        """p(x) = 5, θ = 10 gives a factor of 0.5."""
        x = Opinion(0.5, 0.3, 0.2)
        o = ebsl_discount(x, Opinion(0.8, 0.1, 0.1), theta=10)
        assert o.belief == pytest.approx(0.727, abs=0.01)

    def test_default_theta_discounts_heavily(self) -> None:
        """With θ = 100 a referrer with 5 positive observations passes 5%."""
        x = Opinion(0.5, 0.3, 0.2)
        o = ebsl_discount(x, Opinion(0.8, 0.1, 0.1))
        assert o.belief == pytest.approx(0.04 / 0.145)

    def test_dogmatic_referrer_factor_clamped(self) -> None:
        """Infinite positive evidence clamps the factor to 1."""
        y = Opinion(0.8, 0.1, 0.1)
        o = ebsl_discount(Opinion(1.0, 0.0, 0.0), y)
        assert o.belief == pytest.approx(y.belief)

    def test_non_positive_theta_rejected(self) -> None:
        """θ must be positive."""
        with pytest.raises(InvalidOpinionError):
            ebsl_discount(Opinion.vacuous(), Opinion.vacuous(), theta=0)


class TestTraditionalDiscount:
    """x ⊗ y = (xb·yb, xb·yd, xd + xu + xb·yu)."""

    def test_formula(self) -> None:
        """Hand-computed traditional discount."""
        o = discount_opinion(Opinion(0.6, 0.3, 0.1), Opinion(0.5, 0.2, 0.3, 0.4))
        assert o.belief == pytest.approx(0.3)
        assert o.disbelief == pytest.approx(0.12)
        assert o.uncertainty == pytest.approx(0.3 + 0.1 + 0.18)
        assert o.base_rate == 0.4


# ===========================================================================
# Expectation
# ===========================================================================


class TestExpectation:
    """E(ω) = b + u · a."""

    def test_formula(self) -> None:
        """0.8 + 0.1 · 0.5 = 0.85."""
        assert expectation(Opinion(0.8, 0.1, 0.1)) == pytest.approx(0.85)

    @pytest.mark.parametrize("base_rate", [0.0, 0.25, 0.5, 0.9, 1.0])
    def test_vacuous_equals_base_rate_exactly(self, base_rate: float) -> None:
        """With no evidence the expectation is exactly the base rate."""
        assert expectation(Opinion.vacuous(base_rate)) == base_rate

    def test_bounds(self) -> None:
        """Full belief and full disbelief project to 1 and 0."""
        assert expectation(Opinion(1.0, 0.0, 0.0)) == 1.0
        assert expectation(Opinion(0.0, 1.0, 0.0)) == 0.0
