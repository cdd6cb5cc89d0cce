"""Subjective-logic opinions and their algebra.

Submodules:
    models     -- Opinion value type and EBSL constants
    operators  -- evidence mapping, fusion, discounting, expectation

All public names are re-exported here so callers can write
``from ebsl_reputation.core.opinion import Opinion, fuse``.
"""

from ebsl_reputation.core.opinion.models import (
    DEFAULT_BASE_RATE,
    EVIDENCE_CONSTANT_C,
    Opinion,
)
from ebsl_reputation.core.opinion.operators import (
    DEFAULT_THETA,
    discount_opinion,
    ebsl_discount,
    evidence_to_opinion,
    expectation,
    fuse,
    fuse_all,
    generic_discount,
    opinion_from_evidence,
    opinion_to_evidence,
    scalar_multiply,
    scale_evidence,
)

__all__ = [
    "DEFAULT_BASE_RATE",
    "DEFAULT_THETA",
    "EVIDENCE_CONSTANT_C",
    "Opinion",
    "discount_opinion",
    "ebsl_discount",
    "evidence_to_opinion",
    "expectation",
    "fuse",
    "fuse_all",
    "generic_discount",
    "opinion_from_evidence",
    "opinion_to_evidence",
    "scalar_multiply",
    "scale_evidence",
]
