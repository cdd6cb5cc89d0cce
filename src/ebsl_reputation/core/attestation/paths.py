"""Bounded trust-path discovery over the attester graph.

A trust path is a chain observer -> a1 -> ... -> target in which every
arrow is an active attestation. Discovery is a depth-first search that:

- never revisits an address already on the current path, so it terminates
  on arbitrarily cyclic graphs;
- never extends a path beyond ``max_depth`` hops, so its cost is bounded by
  ``branching ** max_depth``;
- stops extending a path once it reaches the target.

Different paths may share intermediate addresses; only repetition within a
single path is excluded.
"""

from __future__ import annotations

import logging
from typing import Iterator

from ebsl_reputation.core.opinion import Opinion, opinion_from_evidence

from .models import Attestation, AttestationGraph, normalize_address

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH: int = 3

# Evidence amount assigned to each hop when it is turned into an opinion.
DEFAULT_PATH_EVIDENCE: float = 10.0

_Edge = tuple[str, Attestation]


def _adjacency(
    graph: AttestationGraph,
    min_trust_level: float,
) -> dict[str, list[_Edge]]:
    """Normalize the graph into attester -> [(subject_key, attestation)].

    Only the first active attestation per (attester, subject) pair is kept,
    and edges below ``min_trust_level`` are dropped.
    """
    adjacency: dict[str, list[_Edge]] = {}
    seen_by_attester: dict[str, set[str]] = {}
    for attester, attestations in graph.items():
        key = normalize_address(attester)
        edges = adjacency.setdefault(key, [])
        seen = seen_by_attester.setdefault(key, set())
        for attestation in attestations:
            if not attestation.is_active:
                continue
            subject = attestation.subject_key
            if subject in seen:
                continue
            seen.add(subject)
            if attestation.trust_level < min_trust_level:
                continue
            edges.append((subject, attestation))
    return adjacency


def find_attestation_paths(
    observer: str,
    target: str,
    graph: AttestationGraph,
    max_depth: int = DEFAULT_MAX_DEPTH,
    min_trust_level: float = 0.0,
) -> list[list[Attestation]]:
    """Find every simple path from ``observer`` to ``target``.

    Depth is counted in hops (attestations), not addresses: ``max_depth=2``
    allows observer -> x -> target.

    Args:
        observer: Address the search starts from.
        target: Address the search looks for.
        graph: Attester graph from :func:`build_attestation_graph`.
        max_depth: Maximum number of hops per path.
        min_trust_level: Attestations below this trust level are not
            followed.

    Returns:
        One list of attestations (the hops) per path, shortest first, ties
        in graph order. Empty when the observer is the target, the target is
        unreachable, or ``max_depth < 1``.
    """
    start = normalize_address(observer)
    goal = normalize_address(target)
    if start == goal or max_depth < 1:
        return []

    adjacency = _adjacency(graph, min_trust_level)
    found: list[list[Attestation]] = []
    hops: list[Attestation] = []
    on_path: set[str] = {start}
    # One edge iterator per address on the current path; hops[i] leads
    # into the address of frame i + 1.
    stack: list[Iterator[_Edge]] = [iter(adjacency.get(start, []))]

    while stack:
        edge = next(stack[-1], None)
        if edge is None:
            stack.pop()
            if hops:
                on_path.discard(hops.pop().subject_key)
            continue
        subject, attestation = edge
        if subject in on_path:
            continue
        if subject == goal:
            found.append(hops + [attestation])
        elif len(hops) + 1 < max_depth:
            hops.append(attestation)
            on_path.add(subject)
            stack.append(iter(adjacency.get(subject, [])))

    found.sort(key=len)
    logger.debug(
        "Found %d trust path(s) from %s to %s within %d hop(s)",
        len(found), start, goal, max_depth,
    )
    return found


def find_address_paths(
    observer: str,
    target: str,
    graph: AttestationGraph,
    max_depth: int = DEFAULT_MAX_DEPTH,
    min_trust_level: float = 0.0,
) -> list[list[str]]:
    """Like :func:`find_attestation_paths` but returns address sequences.

    Each sequence starts with the observer and ends with the target, so a
    path of ``k`` hops has ``k + 1`` addresses.
    """
    return [
        [observer] + [hop.subject for hop in path]
        for path in find_attestation_paths(
            observer, target, graph, max_depth, min_trust_level
        )
    ]


def path_opinions(
    path: list[Attestation],
    evidence_count: float = DEFAULT_PATH_EVIDENCE,
) -> list[Opinion]:
    """Turn the hops of a path into one opinion per hop."""
    return [
        opinion_from_evidence(hop.trust_level, evidence_count)
        for hop in path
    ]


def find_trust_paths(
    observer: str,
    target: str,
    graph: AttestationGraph,
    max_depth: int = DEFAULT_MAX_DEPTH,
    min_trust_level: float = 0.0,
    evidence_count: float = DEFAULT_PATH_EVIDENCE,
) -> list[list[Opinion]]:
    """Find trust paths and return the opinion sequence along each.

    The result feeds :func:`ebsl_reputation.core.reputation.transitive_trust`
    directly. Every returned path has between 1 and ``max_depth`` opinions
    and no path passes through the same address twice.
    """
    return [
        path_opinions(path, evidence_count)
        for path in find_attestation_paths(
            observer, target, graph, max_depth, min_trust_level
        )
    ]
