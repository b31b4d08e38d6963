"""Filtered sign predicates and the trisegment collinearity classifier."""

from __future__ import annotations

import logging
from fractions import Fraction
from typing import Optional, Sequence

from .geometry import Point, Segment
from .numbers import FT, Uncertain, is_finite, sign, uncertain_and
from .types import Collinearity

logger = logging.getLogger(__name__)

_EPSILON = 2.0 ** -53
# Shewchuk's orient2d stage A bound; also valid for a 2x2 dot product of differences
_ERRBOUND_A = (3.0 + 16.0 * _EPSILON) * _EPSILON
# below this magnitude products may be subnormal and the bound no longer holds
_UNDERFLOW_GUARD = 1e-280


def _float_filter(left: float, right: float, total: float) -> Optional[int]:
    """Sign of ``total`` when the rounding error provably cannot flip it."""

    magnitude = abs(left) + abs(right)
    if not (is_finite(total) and is_finite(magnitude)) or magnitude <= _UNDERFLOW_GUARD:
        return None
    if abs(total) > _ERRBOUND_A * magnitude:
        return sign(total)
    return None


def _all_floats(values: Sequence[FT]) -> bool:
    return not any(isinstance(value, Fraction) for value in values)


def orientation(p: Point, q: Point, r: Point) -> Uncertain[int]:
    """+1 for a left turn ``p -> q -> r``, -1 for a right turn, 0 when collinear."""

    coords = (p.x, p.y, q.x, q.y, r.x, r.y)
    if not all(is_finite(value) for value in coords):
        return Uncertain.indeterminate()
    if _all_floats(coords):
        left = (p.x - r.x) * (q.y - r.y)
        right = (p.y - r.y) * (q.x - r.x)
        filtered = _float_filter(left, right, left - right)
        if filtered is not None:
            return Uncertain(filtered)
    px, py, qx, qy, rx, ry = (Fraction(value) for value in coords)
    return Uncertain(sign((px - rx) * (qy - ry) - (py - ry) * (qx - rx)))


def direction_dot_sign(e0: Segment, e1: Segment) -> Uncertain[int]:
    """Sign of the dot product of the two edge directions."""

    coords = (
        e0.source.x, e0.source.y, e0.target.x, e0.target.y,
        e1.source.x, e1.source.y, e1.target.x, e1.target.y,
    )
    if not all(is_finite(value) for value in coords):
        return Uncertain.indeterminate()
    if _all_floats(coords):
        dx0, dy0 = e0.direction
        dx1, dy1 = e1.direction
        left = dx0 * dx1
        right = dy0 * dy1
        filtered = _float_filter(left, right, left + right)
        if filtered is not None:
            return Uncertain(filtered)
    s0x, s0y, t0x, t0y, s1x, s1y, t1x, t1y = (Fraction(value) for value in coords)
    return Uncertain(sign((t0x - s0x) * (t1x - s1x) + (t0y - s0y) * (t1y - s1y)))


def _sign_is(value: Uncertain[int], expected: int) -> Uncertain[bool]:
    if not value.is_certain:
        return Uncertain.indeterminate()
    return Uncertain(value.make_certain() == expected)


def are_edges_collinear(e0: Segment, e1: Segment) -> Uncertain[bool]:
    return uncertain_and(
        _sign_is(orientation(e0.source, e0.target, e1.source), 0),
        _sign_is(orientation(e0.source, e0.target, e1.target), 0),
    )


def are_parallel_edges_equally_oriented(e0: Segment, e1: Segment) -> Uncertain[bool]:
    return _sign_is(direction_dot_sign(e0, e1), 1)


def are_edges_orderly_collinear(e0: Segment, e1: Segment) -> Uncertain[bool]:
    return uncertain_and(are_edges_collinear(e0, e1), are_parallel_edges_equally_oriented(e0, e1))


def classify_collinearity(e0: Segment, e1: Segment, e2: Segment) -> Uncertain[Collinearity]:
    """Classify which pairs of ``(e0, e1, e2)`` are collinear with equal orientation."""

    is_01 = are_edges_orderly_collinear(e0, e1)
    is_02 = are_edges_orderly_collinear(e0, e2)
    is_12 = are_edges_orderly_collinear(e1, e2)
    if not (is_01.is_certain and is_02.is_certain and is_12.is_certain):
        logger.debug("Collinearity of %s, %s, %s is indeterminate", e0, e1, e2)
        return Uncertain.indeterminate()

    flags = (is_01.make_certain(), is_02.make_certain(), is_12.make_certain())
    if flags == (False, False, False):
        result = Collinearity.NONE
    elif flags == (True, False, False):
        result = Collinearity.E0E1
    elif flags == (False, True, False):
        result = Collinearity.E0E2
    elif flags == (False, False, True):
        result = Collinearity.E1E2
    else:
        result = Collinearity.ALL
    return Uncertain(result)


__all__ = [
    "are_edges_collinear",
    "are_edges_orderly_collinear",
    "are_parallel_edges_equally_oriented",
    "classify_collinearity",
    "direction_dot_sign",
    "orientation",
]
