"""Transitive trust: discount opinions along a trust path.

For a path observer -> a1 -> ... -> target with hop opinions
[ω1, ω2, ..., ωk], trust is transmitted front to back:

    result = ω1
    result = discount(result, ωi)   for i = 2..k

With the generic and traditional operators the uncertainty of the result
never decreases as the path grows, so longer chains are never more certain
than shorter ones.
"""

from __future__ import annotations

from typing import Callable, Sequence

from ebsl_reputation.core.opinion import (
    DEFAULT_THETA,
    Opinion,
    discount_opinion,
    ebsl_discount,
    generic_discount,
)

from .models import DiscountMethod


def _discount_operator(
    method: DiscountMethod | str,
    theta: float,
) -> Callable[[Opinion, Opinion], Opinion]:
    method = DiscountMethod(method)
    if method is DiscountMethod.EBSL:
        return lambda x, y: ebsl_discount(x, y, theta)
    if method is DiscountMethod.TRADITIONAL:
        return discount_opinion
    return generic_discount


def transitive_trust(
    path: Sequence[Opinion],
    method: DiscountMethod | str = DiscountMethod.GENERIC,
    theta: float = DEFAULT_THETA,
) -> Opinion:
    """Collapse the hop opinions of a path into one opinion.

    Args:
        path: One opinion per hop, observer side first.
        method: Discount operator to apply at each hop.
        theta: Threshold for the EBSL operator; ignored otherwise.

    Returns:
        The transmitted opinion. An empty path yields the vacuous opinion and
        a single-hop path yields its only opinion.

    Raises:
        ValueError: If ``method`` is not a known discount method.
    """
    if not path:
        return Opinion.vacuous()

    discount = _discount_operator(method, theta)
    result = path[0]
    for hop in path[1:]:
        result = discount(result, hop)
    return result
