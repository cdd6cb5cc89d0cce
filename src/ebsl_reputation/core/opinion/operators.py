"""Opinion algebra: evidence mapping, fusion, discounting, and expectation.

Operators:
    evidence_to_opinion   -- (p, n) evidence -> opinion, (p, n, c) / (p + n + c)
    opinion_to_evidence   -- inverse of evidence_to_opinion
    opinion_from_evidence -- 0..100 trust level + evidence amount -> opinion
    fuse / fuse_all       -- cumulative fusion (consensus, ⊕)
    scalar_multiply       -- k · ω, moves (1 - k) of b and d into u
    scale_evidence        -- EBSL scalar multiplication of the evidence
    generic_discount      -- x ⊡ y = g(x) · y, g defaults to belief
    ebsl_discount         -- x ⊙ y = (p(x) / θ) ∘ y
    discount_opinion      -- traditional subjective-logic discount (⊗)
    expectation           -- E(ω) = b + u · a

Every operator returns a fresh :class:`Opinion` whose components sum to 1,
and none of them mutate their inputs.

References:
    Jøsang, A. (2016). Subjective Logic. Springer. Sections 3.2 and 12.3.
    Škorić, de Hoogh, Zannone (2016). Evidence-based subjective logic.
    Definitions 2, 11, 12 and 13; Theorem 1.
"""

from __future__ import annotations

import math
from functools import reduce
from typing import Callable, Iterable

from ebsl_reputation.exceptions import InvalidOpinionError

from .models import DEFAULT_BASE_RATE, EVIDENCE_CONSTANT_C, Opinion

# Largest trust level an attestation can carry.
MAX_TRUST_LEVEL: float = 100.0

# Default EBSL discount threshold θ; must exceed the largest positive
# evidence amount present in the system.
DEFAULT_THETA: float = 100.0


def _clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return max(low, min(high, value))


def _opinion(
    belief: float,
    disbelief: float,
    uncertainty: float,
    base_rate: float,
) -> Opinion:
    """Build an opinion, absorbing floating-point drift in the components."""
    b = _clamp(belief)
    d = _clamp(disbelief)
    u = _clamp(uncertainty)
    total = b + d + u
    return Opinion(
        belief=b / total,
        disbelief=d / total,
        uncertainty=u / total,
        base_rate=_clamp(base_rate),
    )


def _require_finite(value: float, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidOpinionError(
            f"{name} must be numeric, got {type(value).__name__}"
        )
    if not math.isfinite(value):
        raise InvalidOpinionError(f"{name} must be finite, got {value}")
    return float(value)


# ---------------------------------------------------------------------------
# Evidence mapping
# ---------------------------------------------------------------------------


def evidence_to_opinion(
    positive: float,
    negative: float,
    c: float = EVIDENCE_CONSTANT_C,
    base_rate: float = DEFAULT_BASE_RATE,
) -> Opinion:
    """Map evidence amounts to an opinion (EBSL Theorem 1).

    (b, d, u) = (p, n, c) / (p + n + c)

    Args:
        positive: Positive evidence p >= 0.
        negative: Negative evidence n >= 0.
        c: Soft evidence threshold (prior weight). Must be positive.
        base_rate: Prior probability carried by the opinion.

    Returns:
        The corresponding opinion.

    Raises:
        InvalidOpinionError: If an amount is negative or non-finite, or if
            ``c`` is not positive.
    """
    p = _require_finite(positive, "positive evidence")
    n = _require_finite(negative, "negative evidence")
    c = _require_finite(c, "evidence constant")
    if p < 0.0 or n < 0.0:
        raise InvalidOpinionError(
            f"Evidence amounts must be non-negative, got p={p}, n={n}"
        )
    if c <= 0.0:
        raise InvalidOpinionError(f"Evidence constant must be positive, got {c}")
    a = _require_finite(base_rate, "base_rate")
    if a < 0.0 or a > 1.0:
        raise InvalidOpinionError(f"base_rate must be in [0, 1], got {a}")

    total = p + n + c
    if math.isinf(total):
        # Each amount is finite but the sum overflows: rescale by the largest.
        largest = max(p, n, c)
        p, n, c = p / largest, n / largest, c / largest
        total = p + n + c
    return _opinion(p / total, n / total, c / total, a)


def opinion_to_evidence(
    opinion: Opinion,
    c: float = EVIDENCE_CONSTANT_C,
) -> tuple[float, float]:
    """Recover the (positive, negative) evidence behind an opinion.

    p = c · b / u and n = c · d / u. A dogmatic opinion (u = 0) stands for
    an infinite amount of evidence in every direction it has mass in.
    """
    if opinion.uncertainty == 0.0:
        p = math.inf if opinion.belief > 0.0 else 0.0
        n = math.inf if opinion.disbelief > 0.0 else 0.0
        return p, n
    return (
        c * opinion.belief / opinion.uncertainty,
        c * opinion.disbelief / opinion.uncertainty,
    )


def opinion_from_evidence(
    trust_level: float,
    evidence_count: float,
    base_rate: float = DEFAULT_BASE_RATE,
) -> Opinion:
    """Convert a 0..100 trust level and an evidence amount into an opinion.

    The trust level is read as the positive-evidence ratio p = level / 100
    and ``evidence_count`` as the number r of equivalent observations:

        b = r·p / (r + W),  d = r·(1 - p) / (r + W),  u = W / (r + W)

    with the non-informative prior weight W = 2. More evidence strictly
    lowers the uncertainty.

    Trust levels outside [0, 100], including infinities, are clamped to
    the nearest bound.

    Raises:
        InvalidOpinionError: If the trust level is NaN or non-numeric, or if
            the evidence count is negative or non-finite.
    """
    if isinstance(trust_level, bool) or not isinstance(trust_level, (int, float)):
        raise InvalidOpinionError(
            f"trust_level must be numeric, got {type(trust_level).__name__}"
        )
    if math.isnan(trust_level):
        raise InvalidOpinionError("trust_level must not be NaN")
    count = _require_finite(evidence_count, "evidence_count")
    if count < 0.0:
        raise InvalidOpinionError(
            f"evidence_count must be non-negative, got {count}"
        )

    ratio = _clamp(float(trust_level), 0.0, MAX_TRUST_LEVEL) / MAX_TRUST_LEVEL
    return evidence_to_opinion(
        ratio * count, (1.0 - ratio) * count, base_rate=base_rate
    )


# ---------------------------------------------------------------------------
# Fusion
# ---------------------------------------------------------------------------


def fuse(a: Opinion, b: Opinion) -> Opinion:
    """Cumulative fusion of two independent opinions (⊕).

    With D = uA + uB - uA·uB > 0:

        b = (bA·uB + bB·uA) / D
        d = (dA·uB + dB·uA) / D
        u = uA·uB / D

    In evidence space this adds the two evidence amounts, so the operator
    is commutative and associative and never raises uncertainty above
    min(uA, uB). The fused base rate is the uncertainty-weighted mean.

    When both opinions are dogmatic (D = 0) the result is the equal-weight
    average of belief and disbelief with zero uncertainty.
    """
    ua, ub = a.uncertainty, b.uncertainty
    denominator = ua + ub - ua * ub

    if ua + ub == 0.0:
        base_rate = (a.base_rate + b.base_rate) / 2.0
    else:
        base_rate = (a.base_rate * ub + b.base_rate * ua) / (ua + ub)

    if denominator == 0.0:
        return _opinion(
            (a.belief + b.belief) / 2.0,
            (a.disbelief + b.disbelief) / 2.0,
            0.0,
            base_rate,
        )

    return _opinion(
        (a.belief * ub + b.belief * ua) / denominator,
        (a.disbelief * ub + b.disbelief * ua) / denominator,
        (ua * ub) / denominator,
        base_rate,
    )


def fuse_all(
    opinions: Iterable[Opinion],
    base_rate: float = DEFAULT_BASE_RATE,
) -> Opinion:
    """Fold any number of opinions with :func:`fuse`.

    An empty input yields the vacuous opinion with ``base_rate``.
    """
    items = list(opinions)
    if not items:
        return Opinion.vacuous(base_rate)
    return reduce(fuse, items)


# ---------------------------------------------------------------------------
# Scalar multiplication and discounting
# ---------------------------------------------------------------------------


def scalar_multiply(k: float, opinion: Opinion) -> Opinion:
    """Scale belief and disbelief by ``k`` and move the removed mass to u.

        b' = k·b,  d' = k·d,  u' = 1 - b' - d'

    Raises:
        InvalidOpinionError: If ``k`` is not a finite number in [0, 1].
    """
    k = _require_finite(k, "scalar")
    if k < 0.0 or k > 1.0:
        raise InvalidOpinionError(f"scalar must be in [0, 1], got {k}")

    belief = k * opinion.belief
    disbelief = k * opinion.disbelief
    return _opinion(belief, disbelief, 1.0 - belief - disbelief, opinion.base_rate)


def scale_evidence(alpha: float, opinion: Opinion) -> Opinion:
    """EBSL scalar multiplication: multiply the underlying evidence by alpha.

        α · ω = (α·b, α·d, u) / (α·(b + d) + u)

    ``alpha = 0`` gives the vacuous opinion; a dogmatic opinion is returned
    unchanged for any positive ``alpha``.

    Raises:
        InvalidOpinionError: If ``alpha`` is negative or non-finite.
    """
    alpha = _require_finite(alpha, "alpha")
    if alpha < 0.0:
        raise InvalidOpinionError(f"alpha must be non-negative, got {alpha}")
    if alpha == 0.0:
        return Opinion.vacuous(opinion.base_rate)
    if opinion.is_dogmatic:
        # Infinite evidence stays infinite under any positive scaling.
        return opinion

    denominator = alpha * (opinion.belief + opinion.disbelief) + opinion.uncertainty
    return _opinion(
        alpha * opinion.belief / denominator,
        alpha * opinion.disbelief / denominator,
        opinion.uncertainty / denominator,
        opinion.base_rate,
    )


def generic_discount(
    discounting: Opinion,
    target: Opinion,
    g: Callable[[Opinion], float] | None = None,
) -> Opinion:
    """Generic EBSL discount x ⊡ y = g(x) · y.

    The discount factor is the discounting opinion's belief (trust in the
    referrer) unless ``g`` supplies another function, and is clamped to
    [0, 1]. The result is never more certain than ``target``; it is strictly
    less certain when the factor is below 1 and ``target`` carries evidence.

    Raises:
        InvalidOpinionError: If ``g`` returns NaN.
    """
    factor = g(discounting) if g is not None else discounting.belief
    if math.isnan(factor):
        raise InvalidOpinionError("discount factor must not be NaN")
    return scalar_multiply(_clamp(factor), target)


def ebsl_discount(
    discounting: Opinion,
    target: Opinion,
    theta: float = DEFAULT_THETA,
) -> Opinion:
    """Evidence-flow discount x ⊙ y = g(x) · y with g(x) = p(x) / θ.

    p(x) is the positive evidence behind ``discounting``; θ must exceed the
    largest positive evidence in the system, so the factor is clamped to
    [0, 1]. The target's evidence is scaled with :func:`scale_evidence`.

    Raises:
        InvalidOpinionError: If ``theta`` is not a positive finite number.
    """
    theta = _require_finite(theta, "theta")
    if theta <= 0.0:
        raise InvalidOpinionError(f"theta must be positive, got {theta}")

    positive, _ = opinion_to_evidence(discounting)
    return scale_evidence(_clamp(positive / theta), target)


def discount_opinion(discounting: Opinion, target: Opinion) -> Opinion:
    """Traditional subjective-logic discount x ⊗ y.

        b = xb·yb,  d = xb·yd,  u = xd + xu + xb·yu

    Kept for comparison with the EBSL operators; it is not right-distributive
    over fusion.
    """
    xb = discounting.belief
    return _opinion(
        xb * target.belief,
        xb * target.disbelief,
        discounting.disbelief + discounting.uncertainty + xb * target.uncertainty,
        target.base_rate,
    )


# ---------------------------------------------------------------------------
# Projection
# ---------------------------------------------------------------------------


def expectation(opinion: Opinion) -> float:
    """Projected probability E(ω) = b + u·a, in [0, 1].

    A vacuous opinion projects exactly onto its base rate.
    """
    return min(1.0, opinion.belief + opinion.uncertainty * opinion.base_rate)
