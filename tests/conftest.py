"""Shared fixtures for ebsl_reputation tests."""

from __future__ import annotations

import pytest

from ebsl_reputation.core.attestation import (
    Attestation,
    AttestationGraph,
    build_attestation_graph,
)


@pytest.fixture
def diamond_attestations() -> list[Attestation]:
    """0xAAA trusts 0xBBB and 0xCCC, both of which trust 0xDDD.

    Addresses are mixed case on purpose: the engine must compare them
    case-insensitively.
    """
    return [
        Attestation("0xAAA", "0xBBB", 80, timestamp=1_700_000_000),
        Attestation("0xAAA", "0xCCC", 70, timestamp=1_700_000_100),
        Attestation("0xBBB", "0xDDD", 90, timestamp=1_700_000_200),
        Attestation("0xCCC", "0xDDD", 85, timestamp=1_700_000_300),
    ]


@pytest.fixture
def diamond_graph(diamond_attestations: list[Attestation]) -> AttestationGraph:
    """Attester graph of the diamond network."""
    return build_attestation_graph(diamond_attestations)
