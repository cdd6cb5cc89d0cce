"""ebsl-reputation: Evidence-Based Subjective Logic trust scoring for attestation networks."""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

from ebsl_reputation.core.attestation import (
    Attestation,
    AttestationGraph,
    build_attestation_graph,
    find_address_paths,
    find_trust_paths,
    normalize_address,
)
from ebsl_reputation.core.opinion import (
    Opinion,
    discount_opinion,
    ebsl_discount,
    expectation,
    fuse,
    fuse_all,
    generic_discount,
    opinion_from_evidence,
    scalar_multiply,
)
from ebsl_reputation.core.reputation import (
    ReputationEngine,
    ReputationOptions,
    ReputationResult,
    ReputationSummary,
    TrustCategory,
    calculate_reputation,
    direct_reputation,
    summarize,
    transitive_trust,
)

__all__ = [
    "Attestation",
    "AttestationGraph",
    "Opinion",
    "ReputationEngine",
    "ReputationOptions",
    "ReputationResult",
    "ReputationSummary",
    "TrustCategory",
    "__version__",
    "build_attestation_graph",
    "calculate_reputation",
    "direct_reputation",
    "discount_opinion",
    "ebsl_discount",
    "expectation",
    "find_address_paths",
    "find_trust_paths",
    "fuse",
    "fuse_all",
    "generic_discount",
    "normalize_address",
    "opinion_from_evidence",
    "scalar_multiply",
    "summarize",
    "transitive_trust",
]
