"""Reputation data models: options, results, categories, and summaries.

Defines the data structures exchanged with callers of the aggregator:

- ``DiscountMethod``    -- which discount operator transmits trust along paths.
- ``ReputationOptions`` -- tunable parameters, validated before use.
- ``PathDetail``        -- diagnostic record for one trust path.
- ``ReputationResult``  -- aggregate opinion and 0-100 score for an address.
- ``TrustCategory``     -- human-facing bucket for a score.
- ``ReputationSummary`` -- display-ready view of a result.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from ebsl_reputation.core.opinion import DEFAULT_THETA, Opinion
from ebsl_reputation.exceptions import InvalidOptionsError


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return int(math.floor(value + 0.5))


# ---------------------------------------------------------------------------
# DiscountMethod
# ---------------------------------------------------------------------------


class DiscountMethod(str, Enum):
    """Discount operator used for transitive trust.

    - **GENERIC** (⊡): scale the hop's opinion by the referrer's belief.
    - **EBSL** (⊙): scale the hop's evidence by the referrer's positive
      evidence over the threshold θ.
    - **TRADITIONAL** (⊗): classic subjective-logic discounting.
    """

    GENERIC = "generic"
    EBSL = "ebsl"
    TRADITIONAL = "traditional"


# ---------------------------------------------------------------------------
# ReputationOptions
# ---------------------------------------------------------------------------

# Evidence assigned to each direct attestation. Ten observations per
# attestation keep a single attestation's opinion well away from vacuous.
DEFAULT_ATTESTATION_EVIDENCE: float = 10.0


@dataclass
class ReputationOptions:
    """Parameters of the reputation aggregator.

    Attributes:
        max_path_depth: Maximum hops in a transitive trust path.
        transitive_weight: Factor in [0, 1] applied to the fused transitive
            opinion before it is fused with the direct one.
        max_paths: Maximum number of paths used, shortest first.
        min_trust_level: Attestations below this level are not followed
            when searching for paths.
        discount_method: Operator used along each path.
        theta: Threshold for the EBSL discount.
        evidence_weight: Evidence amount per direct attestation.
        path_evidence: Evidence amount per hop of a trust path.
    """

    max_path_depth: int = 3
    transitive_weight: float = 0.5
    max_paths: int = 10
    min_trust_level: float = 50.0
    discount_method: DiscountMethod = DiscountMethod.GENERIC
    theta: float = DEFAULT_THETA
    evidence_weight: float = DEFAULT_ATTESTATION_EVIDENCE
    path_evidence: float = DEFAULT_ATTESTATION_EVIDENCE

    def validate(self) -> None:
        """Raise InvalidOptionsError if any option is out of range.

        A string ``discount_method`` is converted to :class:`DiscountMethod`
        in place.
        """
        try:
            self.discount_method = DiscountMethod(self.discount_method)
        except ValueError as exc:
            valid = ", ".join(m.value for m in DiscountMethod)
            raise InvalidOptionsError(
                f"Unknown discount method '{self.discount_method}'. Valid: {valid}"
            ) from exc

        for name in ("max_path_depth", "max_paths"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise InvalidOptionsError(
                    f"Option '{name}' must be a non-negative integer, got {value!r}"
                )

        for name in ("transitive_weight", "min_trust_level", "theta",
                     "evidence_weight", "path_evidence"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise InvalidOptionsError(
                    f"Option '{name}' must be numeric, got {type(value).__name__}"
                )
            if not math.isfinite(value):
                raise InvalidOptionsError(f"Option '{name}' must be finite, got {value}")

        if not 0.0 <= self.transitive_weight <= 1.0:
            raise InvalidOptionsError(
                f"transitive_weight must be in [0, 1], got {self.transitive_weight}"
            )
        if not 0.0 <= self.min_trust_level <= 100.0:
            raise InvalidOptionsError(
                f"min_trust_level must be in [0, 100], got {self.min_trust_level}"
            )
        if self.theta <= 0.0:
            raise InvalidOptionsError(f"theta must be positive, got {self.theta}")
        if self.evidence_weight < 0.0 or self.path_evidence < 0.0:
            raise InvalidOptionsError("Evidence amounts must be non-negative")


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PathDetail:
    """One transitive path used in a reputation calculation.

    Attributes:
        addresses: Observer, intermediaries, and target, in order.
        opinion: Trust transmitted through the whole path.
        expectation: Projected probability of ``opinion``.
    """

    addresses: tuple[str, ...]
    opinion: Opinion
    expectation: float

    def as_dict(self) -> dict[str, Any]:
        return {
            "path": list(self.addresses),
            "opinion": self.opinion.as_dict(),
            "expectation": self.expectation,
        }


@dataclass(frozen=True)
class ReputationResult:
    """Reputation of one address, computed fresh per call.

    Attributes:
        score: Expectation of ``opinion`` on a 0-100 integer scale.
        opinion: Fused direct and (weighted) transitive opinion.
        direct_count: Number of direct attestations used.
        transitive_count: Number of trust paths used.
        paths: Diagnostics for each path used.
        method: ``"direct-only"`` without an observer, otherwise the
            discount method name.
    """

    score: int
    opinion: Opinion
    direct_count: int
    transitive_count: int = 0
    paths: list[PathDetail] = field(default_factory=list)
    method: str = "direct-only"

    def as_dict(self) -> dict[str, Any]:
        return {
            "score": self.score,
            "opinion": self.opinion.as_dict(),
            "directCount": self.direct_count,
            "transitiveCount": self.transitive_count,
            "paths": [p.as_dict() for p in self.paths],
            "method": self.method,
        }


# ---------------------------------------------------------------------------
# TrustCategory and thresholds
# ---------------------------------------------------------------------------


class TrustCategory(Enum):
    """Human-facing reputation buckets; the value is the display label."""

    UNTRUSTED = "Untrusted"
    LOW_TRUST = "Low Trust"
    NEUTRAL = "Neutral"
    TRUSTED = "Trusted"
    HIGHLY_TRUSTED = "Highly Trusted"


CATEGORY_LOW_TRUST_THRESHOLD: float = 20.0
CATEGORY_NEUTRAL_THRESHOLD: float = 40.0
CATEGORY_TRUSTED_THRESHOLD: float = 60.0
CATEGORY_HIGHLY_TRUSTED_THRESHOLD: float = 80.0


@dataclass(frozen=True)
class ReputationSummary:
    """Display-ready view of a :class:`ReputationResult`.

    Percentages are rounded integers in [0, 100].
    """

    score: int
    category: TrustCategory
    confidence: int
    belief: int
    disbelief: int
    uncertainty: int
    direct_count: int
    transitive_count: int
    total_evidence: int

    def as_dict(self) -> dict[str, Any]:
        return {
            "score": self.score,
            "category": self.category.value,
            "confidence": self.confidence,
            "belief": self.belief,
            "disbelief": self.disbelief,
            "uncertainty": self.uncertainty,
            "directCount": self.direct_count,
            "transitiveCount": self.transitive_count,
            "totalEvidence": self.total_evidence,
        }
