"""Direct reputation: fuse the attestations that target one address."""

from __future__ import annotations

from typing import Iterable

from ebsl_reputation.core.attestation import Attestation
from ebsl_reputation.core.opinion import Opinion, fuse_all, opinion_from_evidence

from .models import DEFAULT_ATTESTATION_EVIDENCE


def direct_reputation(
    attestations: Iterable[Attestation],
    evidence_weight: float = DEFAULT_ATTESTATION_EVIDENCE,
) -> Opinion:
    """Fuse all active attestations into a single opinion.

    Each active attestation becomes ``opinion_from_evidence(trust_level,
    evidence_weight)``; the opinions are combined with cumulative fusion,
    whose commutativity makes the input order irrelevant.

    Args:
        attestations: Attestations about one subject.
        evidence_weight: Evidence amount carried by each attestation.

    Returns:
        The fused opinion, or the vacuous opinion (0, 0, 1, 0.5) when there
        are no active attestations.
    """
    return fuse_all(
        opinion_from_evidence(a.trust_level, evidence_weight)
        for a in attestations
        if a.is_active
    )
