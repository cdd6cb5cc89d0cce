"""Attestations, the attester graph, and trust-path discovery.

Submodules:
    models  -- Attestation record, AttestationGraph alias, address normalization
    graph   -- build_attestation_graph and subject filtering
    paths   -- bounded depth-first trust-path search
    loader  -- JSON / YAML attestation files
"""

from ebsl_reputation.core.attestation.graph import (
    attestations_for_subject,
    build_attestation_graph,
)
from ebsl_reputation.core.attestation.loader import (
    load_attestations,
    parse_attestations,
)
from ebsl_reputation.core.attestation.models import (
    Attestation,
    AttestationGraph,
    normalize_address,
)
from ebsl_reputation.core.attestation.paths import (
    DEFAULT_MAX_DEPTH,
    DEFAULT_PATH_EVIDENCE,
    find_address_paths,
    find_attestation_paths,
    find_trust_paths,
    path_opinions,
)

__all__ = [
    "Attestation",
    "AttestationGraph",
    "DEFAULT_MAX_DEPTH",
    "DEFAULT_PATH_EVIDENCE",
    "attestations_for_subject",
    "build_attestation_graph",
    "find_address_paths",
    "find_attestation_paths",
    "find_trust_paths",
    "load_attestations",
    "normalize_address",
    "parse_attestations",
    "path_opinions",
]
