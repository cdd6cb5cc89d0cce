"""Map reputation results to categories and display percentages."""

from __future__ import annotations

from .models import (
    CATEGORY_HIGHLY_TRUSTED_THRESHOLD,
    CATEGORY_LOW_TRUST_THRESHOLD,
    CATEGORY_NEUTRAL_THRESHOLD,
    CATEGORY_TRUSTED_THRESHOLD,
    ReputationResult,
    ReputationSummary,
    TrustCategory,
    round_half_up,
)


def category_for_score(score: float) -> TrustCategory:
    """Map a 0-100 score to its trust category.

    Boundaries:
        - Highly Trusted: score >= 80
        - Trusted:        60 <= score < 80
        - Neutral:        40 <= score < 60
        - Low Trust:      20 <= score < 40
        - Untrusted:      score < 20
    """
    if score >= CATEGORY_HIGHLY_TRUSTED_THRESHOLD:
        return TrustCategory.HIGHLY_TRUSTED
    if score >= CATEGORY_TRUSTED_THRESHOLD:
        return TrustCategory.TRUSTED
    if score >= CATEGORY_NEUTRAL_THRESHOLD:
        return TrustCategory.NEUTRAL
    if score >= CATEGORY_LOW_TRUST_THRESHOLD:
        return TrustCategory.LOW_TRUST
    return TrustCategory.UNTRUSTED


def summarize(result: ReputationResult) -> ReputationSummary:
    """Build the display summary of a reputation result.

    ``confidence`` is the share of the opinion not held as uncertainty;
    ``total_evidence`` counts direct attestations plus trust paths.
    """
    opinion = result.opinion
    return ReputationSummary(
        score=result.score,
        category=category_for_score(result.score),
        confidence=round_half_up((1.0 - opinion.uncertainty) * 100),
        belief=round_half_up(opinion.belief * 100),
        disbelief=round_half_up(opinion.disbelief * 100),
        uncertainty=round_half_up(opinion.uncertainty * 100),
        direct_count=result.direct_count,
        transitive_count=result.transitive_count,
        total_evidence=result.direct_count + result.transitive_count,
    )
