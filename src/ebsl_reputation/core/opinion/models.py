"""Opinion data model for Evidence-Based Subjective Logic.

An opinion ω = (b, d, u, a) is a belief state about a binary proposition
("this address is trustworthy"):

- ``belief``      -- evidence FOR the proposition,      b in [0, 1]
- ``disbelief``   -- evidence AGAINST the proposition,  d in [0, 1]
- ``uncertainty`` -- absence of evidence,               u in [0, 1]
- ``base_rate``   -- prior probability absent evidence, a in [0, 1]

Constraint: b + d + u = 1.

Opinions correspond one-to-one with evidence amounts (p, n) through the
EBSL mapping (b, d, u) = (p, n, c) / (p + n + c), where c is the soft
evidence threshold ``EVIDENCE_CONSTANT_C``.

References:
    Jøsang, A. (2016). Subjective Logic. Springer.
    Škorić, de Hoogh, Zannone (2016). Flow-based reputation with
    uncertainty: evidence-based subjective logic. Int. J. Inf. Secur.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from ebsl_reputation.exceptions import InvalidOpinionError


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

# Non-informative prior weight W (the EBSL constant c).
EVIDENCE_CONSTANT_C: float = 2.0

DEFAULT_BASE_RATE: float = 0.5

# Tolerance for the b + d + u = 1 constraint.
ADDITIVITY_EPSILON: float = 1e-9


def _validate_component(value: Any, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidOpinionError(
            f"{name} must be numeric, got {type(value).__name__}"
        )
    if not math.isfinite(value):
        raise InvalidOpinionError(f"{name} must be finite, got {value}")
    if value < 0.0 or value > 1.0:
        raise InvalidOpinionError(f"{name} must be in [0, 1], got {value}")
    return float(value)


# ---------------------------------------------------------------------------
# Opinion
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Opinion:
    """A subjective opinion ω = (b, d, u, a).

    Opinions are immutable values. Every operator in
    :mod:`ebsl_reputation.core.opinion.operators` returns a new opinion and
    leaves its inputs untouched.

    Attributes:
        belief: Evidence for the proposition.
        disbelief: Evidence against the proposition.
        uncertainty: Lack of evidence.
        base_rate: Prior probability used when evidence is absent.

    Raises:
        InvalidOpinionError: If a component is non-numeric, non-finite,
            outside [0, 1], or if b + d + u differs from 1 by more than
            ``ADDITIVITY_EPSILON``.
    """

    belief: float
    disbelief: float
    uncertainty: float
    base_rate: float = DEFAULT_BASE_RATE

    def __post_init__(self) -> None:
        b = _validate_component(self.belief, "belief")
        d = _validate_component(self.disbelief, "disbelief")
        u = _validate_component(self.uncertainty, "uncertainty")
        a = _validate_component(self.base_rate, "base_rate")

        object.__setattr__(self, "belief", b)
        object.__setattr__(self, "disbelief", d)
        object.__setattr__(self, "uncertainty", u)
        object.__setattr__(self, "base_rate", a)

        total = b + d + u
        if abs(total - 1.0) > ADDITIVITY_EPSILON:
            raise InvalidOpinionError(
                "belief + disbelief + uncertainty must sum to 1, "
                f"got {b} + {d} + {u} = {total}"
            )

    @classmethod
    def vacuous(cls, base_rate: float = DEFAULT_BASE_RATE) -> Opinion:
        """Return the "no evidence" opinion (0, 0, 1, base_rate)."""
        return cls(belief=0.0, disbelief=0.0, uncertainty=1.0, base_rate=base_rate)

    @property
    def is_vacuous(self) -> bool:
        """True when the opinion carries no evidence at all."""
        return self.uncertainty == 1.0

    @property
    def is_dogmatic(self) -> bool:
        """True when the opinion carries no uncertainty (infinite evidence)."""
        return self.uncertainty == 0.0

    def as_dict(self) -> dict[str, float]:
        """Return the opinion as a JSON-serializable dictionary.

        The base rate key is ``baseRate`` to match the attestation records
        exchanged with the surrounding application.
        """
        return {
            "belief": self.belief,
            "disbelief": self.disbelief,
            "uncertainty": self.uncertainty,
            "baseRate": self.base_rate,
        }
