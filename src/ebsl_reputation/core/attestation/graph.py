"""Attester graph construction.

The graph maps each attester to the attestations it has issued, which is
the adjacency list the trust-path finder walks.
"""

from __future__ import annotations

from typing import Iterable

from .models import Attestation, AttestationGraph, normalize_address


def build_attestation_graph(attestations: Iterable[Attestation]) -> AttestationGraph:
    """Group active attestations by lower-cased attester address.

    Inactive (revoked) attestations are dropped; an attester whose
    attestations are all inactive does not appear in the graph. Input order
    is preserved within each attester's list, and the input is not modified.

    Args:
        attestations: Raw attestations, as read from the data layer.

    Returns:
        Mapping of normalized attester address to its active attestations.
    """
    graph: AttestationGraph = {}
    for attestation in attestations:
        if not attestation.is_active:
            continue
        graph.setdefault(attestation.attester_key, []).append(attestation)
    return graph


def attestations_for_subject(
    attestations: Iterable[Attestation],
    subject: str,
) -> list[Attestation]:
    """Return the active attestations whose subject is ``subject``."""
    key = normalize_address(subject)
    return [a for a in attestations if a.is_active and a.subject_key == key]
