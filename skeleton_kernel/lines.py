"""Normalized supporting lines of oriented edges."""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from .geometry import Line, Point, Segment
from .logging_utils import describe
from .numbers import FT, inexact_sqrt, is_finite, is_zero

logger = logging.getLogger(__name__)


def compute_normalized_line_coeff(edge: Segment) -> Optional[Line]:
    """Return the supporting line of ``edge`` with ``(a, b)`` its unit left normal.

    Axis-aligned edges get exact coefficients; other edges are normalized
    with an inexact square root. ``None`` signals overflow.
    """

    s = edge.source
    t = edge.target

    if s.y == t.y:
        a: FT = 0
        if t.x > s.x:
            b: FT = 1
            c: FT = -s.y
        elif t.x == s.x:
            b = 0
            c = 0
        else:
            b = -1
            c = s.y
        kind = "horizontal"
    elif s.x == t.x:
        b = 0
        if t.y > s.y:
            a = -1
            c = s.x
        else:
            a = 1
            c = -s.x
        kind = "vertical"
    else:
        sa = s.y - t.y
        sb = t.x - s.x
        l2 = sa * sa + sb * sb
        if not is_finite(l2):
            logger.debug("Line coefficients overflow for %s (l2=%s)", describe(edge), describe(l2))
            return None
        l = inexact_sqrt(l2)
        if is_zero(l):
            # both deltas underflowed
            logger.debug("Line coefficients underflow for %s", describe(edge))
            return None
        a = sa / l
        b = sb / l
        c = -s.x * a - s.y * b
        kind = "general"

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Line coefficients for %s line %s: a=%s b=%s c=%s",
            kind,
            describe(edge),
            describe(a),
            describe(b),
            describe(c),
        )

    if not (is_finite(a) and is_finite(b) and is_finite(c)):
        return None
    return Line(a, b, c)


def line_project_point(line: Line, point: Point) -> Optional[Tuple[FT, FT]]:
    """Orthogonal projection of ``point`` onto ``line``; ``None`` for a null line."""

    la, lb, lc = line.a, line.b, line.c
    px, py = point.x, point.y
    if is_zero(la) and is_zero(lb):
        return None
    if is_zero(la):
        return px, -lc / lb
    if is_zero(lb):
        return -lc / la, py
    a2 = la * la
    b2 = lb * lb
    d = a2 + b2
    x = (b2 * px - la * lb * py - la * lc) / d
    y = (-la * lb * px + a2 * py - lb * lc) / d
    return x, y


def squared_distance_from_point_to_line(point: Point, source: Point, target: Point) -> Optional[FT]:
    """Squared distance from ``point`` to the line through ``source`` and ``target``."""

    ldx = target.x - source.x
    ldy = target.y - source.y
    rdx = source.x - point.x
    rdy = source.y - point.y

    cross = ldx * rdy - rdx * ldy
    n = cross * cross
    d = ldx * ldx + ldy * ldy
    if is_zero(d) or not (is_finite(n) and is_finite(d)):
        return None
    return n / d


__all__ = [
    "compute_normalized_line_coeff",
    "line_project_point",
    "squared_distance_from_point_to_line",
]
