"""Reputation aggregator.

Combines the direct opinion about an address with the trust that reaches
it from an observer through the attestation graph:

    direct      = ⊕ { ω(att) : att targets the address }
    transitive  = ⊕ { transitive_trust(path) : path observer -> address }
    opinion     = direct ⊕ (w · transitive)
    score       = round(100 · E(opinion)), clamped to [0, 100]

where w is the transitive weight. Without an observer the result is the
direct opinion alone (global reputation).

References:
    Škorić, de Hoogh, Zannone (2016). Evidence-based subjective logic,
    Section 6 (flow-based reputation).
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Any, Iterable, Mapping

from ebsl_reputation.core.attestation import (
    Attestation,
    AttestationGraph,
    attestations_for_subject,
    find_attestation_paths,
    path_opinions,
)
from ebsl_reputation.core.opinion import (
    Opinion,
    expectation,
    fuse,
    fuse_all,
    scalar_multiply,
)

from .direct import direct_reputation
from .models import (
    PathDetail,
    ReputationOptions,
    ReputationResult,
    round_half_up,
)
from .transitive import transitive_trust

logger = logging.getLogger(__name__)


class ReputationEngine:
    """Reputation computation engine.

    The engine holds a validated copy of its :class:`ReputationOptions` and
    nothing else; the caller's options object is never modified. Each call
    is independent, so one engine can be shared between threads.

    Args:
        options: Aggregator options. If None, uses the defaults. A mapping
            of option names to values is also accepted.

    Raises:
        InvalidOptionsError: If the options fail validation.
    """

    def __init__(
        self,
        options: ReputationOptions | Mapping[str, Any] | None = None,
    ) -> None:
        if options is None:
            options = ReputationOptions()
        elif isinstance(options, Mapping):
            options = ReputationOptions(**options)
        else:
            options = dataclasses.replace(options)
        options.validate()
        self._options = options

    @property
    def options(self) -> ReputationOptions:
        """Return the configured options."""
        return self._options

    def transitive_paths(
        self,
        observer: str,
        target: str,
        graph: AttestationGraph,
    ) -> list[PathDetail]:
        """Find the trust paths from ``observer`` to ``target``.

        At most ``max_paths`` paths are kept, shortest first; each carries
        the opinion transmitted along it.
        """
        opts = self._options
        found = find_attestation_paths(
            observer,
            target,
            graph,
            max_depth=opts.max_path_depth,
            min_trust_level=opts.min_trust_level,
        )[: opts.max_paths]

        details: list[PathDetail] = []
        for hops in found:
            opinion = transitive_trust(
                path_opinions(hops, opts.path_evidence),
                opts.discount_method,
                opts.theta,
            )
            details.append(
                PathDetail(
                    addresses=tuple([observer] + [h.subject for h in hops]),
                    opinion=opinion,
                    expectation=expectation(opinion),
                )
            )
        return details

    def calculate(
        self,
        target: str,
        direct_attestations: Iterable[Attestation],
        graph: AttestationGraph,
        observer: str | None = None,
    ) -> ReputationResult:
        """Compute the reputation of ``target``.

        Args:
            target: Address whose reputation is computed.
            direct_attestations: Attestations about ``target``. Inactive ones
                and ones about other subjects are ignored.
            graph: Attester graph used for path discovery.
            observer: Viewer for personalised reputation. None computes the
                global (direct-only) reputation.

        Returns:
            A fresh :class:`ReputationResult`.
        """
        opts = self._options
        used = attestations_for_subject(direct_attestations, target)
        direct = direct_reputation(used, opts.evidence_weight)

        if not observer:
            return ReputationResult(
                score=_score(direct),
                opinion=direct,
                direct_count=len(used),
            )

        paths = self.transitive_paths(observer, target, graph)
        opinion = direct
        if paths:
            transitive = fuse_all(p.opinion for p in paths)
            opinion = fuse(direct, scalar_multiply(opts.transitive_weight, transitive))

        logger.debug(
            "Reputation of %s for %s: %d direct, %d path(s)",
            target, observer, len(used), len(paths),
        )
        return ReputationResult(
            score=_score(opinion),
            opinion=opinion,
            direct_count=len(used),
            transitive_count=len(paths),
            paths=paths,
            method=opts.discount_method.value,
        )


def _score(opinion: Opinion) -> int:
    return max(0, min(100, round_half_up(expectation(opinion) * 100)))


def calculate_reputation(
    target: str,
    direct_attestations: Iterable[Attestation],
    graph: AttestationGraph,
    observer: str | None = None,
    options: ReputationOptions | Mapping[str, Any] | None = None,
) -> ReputationResult:
    """Compute the reputation of ``target`` with a one-off engine.

    See :meth:`ReputationEngine.calculate`.
    """
    return ReputationEngine(options).calculate(
        target, direct_attestations, graph, observer
    )
