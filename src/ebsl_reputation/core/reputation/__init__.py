"""Reputation aggregation for attestation networks.

Submodules:
    models      -- ReputationOptions, ReputationResult, PathDetail, TrustCategory,
                   ReputationSummary
    direct      -- direct_reputation
    transitive  -- transitive_trust
    engine      -- ReputationEngine and calculate_reputation
    summary     -- summarize and category_for_score
"""

from ebsl_reputation.core.reputation.direct import direct_reputation
from ebsl_reputation.core.reputation.engine import (
    ReputationEngine,
    calculate_reputation,
)
from ebsl_reputation.core.reputation.models import (
    DEFAULT_ATTESTATION_EVIDENCE,
    DiscountMethod,
    PathDetail,
    ReputationOptions,
    ReputationResult,
    ReputationSummary,
    TrustCategory,
)
from ebsl_reputation.core.reputation.summary import category_for_score, summarize
from ebsl_reputation.core.reputation.transitive import transitive_trust

__all__ = [
    "DEFAULT_ATTESTATION_EVIDENCE",
    "DiscountMethod",
    "PathDetail",
    "ReputationEngine",
    "ReputationOptions",
    "ReputationResult",
    "ReputationSummary",
    "TrustCategory",
    "calculate_reputation",
    "category_for_score",
    "direct_reputation",
    "summarize",
    "transitive_trust",
]
