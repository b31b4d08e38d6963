"""Offset event constructions for straight skeletons.

An offset line of a normalized edge line ``(a, b, c)`` at distance ``t`` is

    a*x + b*y + c - t = 0

with ``t > 0`` to the left of the edge. An event is the point where the
offset lines of three edges meet at the same ``t``. When two of the edges
are collinear their offsets coincide, so the event is instead found on the
line perpendicular to the collinear pair through their shared (degenerate)
seed point.

Every construction returns ``None`` when an intermediate value overflows.
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from .geometry import Line, Point, Segment, midpoint, squared_distance
from .lines import compute_normalized_line_coeff, line_project_point
from .logging_utils import debug_log_call, describe
from .numbers import FT, Rational, certified_is_zero, is_finite, is_zero
from .seeds import EventArena, NodeSeed, Seed, SeededTrisegment
from .trisegment import SEED_EDGE_PAIRS
from .types import Collinearity, PreconditionError, SeedId

logger = logging.getLogger(__name__)


def _require_solvable(st: SeededTrisegment) -> None:
    event = st.event
    if event.is_null:
        raise PreconditionError("offset events are undefined for a null trisegment")
    if event.collinearity is Collinearity.ALL:
        raise PreconditionError("offset events are undefined when all three edges are collinear")


def _normalized_lines(*edges: Segment) -> Optional[Tuple[Line, ...]]:
    lines = []
    for edge in edges:
        line = compute_normalized_line_coeff(edge)
        if line is None:
            return None
        lines.append(line)
    return tuple(lines)


@debug_log_call(logger)
def compute_oriented_midpoint(e0: Segment, e1: Segment) -> Optional[Point]:
    """Midpoint of the gap between two consecutive edges, in either order.

    ``e0`` and ``e1`` may be given as ``e0 -> e1`` or ``e1 -> e0``; the
    closer pair of facing endpoints is used.
    """

    delta01 = squared_distance(e0.target, e1.source)
    delta10 = squared_distance(e1.target, e0.source)
    if not (is_finite(delta01) and is_finite(delta10)):
        return None

    if delta01 <= delta10:
        mp = midpoint(e0.target, e1.source)
    else:
        mp = midpoint(e1.target, e0.source)

    if not mp.is_finite:
        return None
    return mp


def _resolve_node(seed: NodeSeed, arena: Optional[EventArena]) -> Optional[Point]:
    if arena is None:
        raise PreconditionError(f"seed {seed} refers to an arena event but no arena was given")
    return construct_offset_lines_isec(arena[seed], arena)


@debug_log_call(logger)
def compute_seed_point(
    st: SeededTrisegment, sid: SeedId, arena: Optional[EventArena] = None
) -> Optional[Point]:
    """Return the left, right or degenerate pseudo seed point of ``st``.

    Contour-vertex seeds resolve to the oriented midpoint of the edge pair;
    node seeds resolve to the event point of the arena entry they name,
    recursively. The UNKNOWN pseudo seed of collinear ``e0, e2`` has no
    offset vertex behind it and always uses the midpoint rule.
    """

    e0, e1, e2 = st.event.edges
    if sid is SeedId.LEFT:
        seed: Seed = st.left_seed
        if isinstance(seed, NodeSeed):
            return _resolve_node(seed, arena)
        return compute_oriented_midpoint(e0, e1)
    if sid is SeedId.RIGHT:
        seed = st.right_seed
        if isinstance(seed, NodeSeed):
            return _resolve_node(seed, arena)
        return compute_oriented_midpoint(e1, e2)
    return compute_oriented_midpoint(e0, e2)


def compute_degenerate_seed_point(
    st: SeededTrisegment, arena: Optional[EventArena] = None
) -> Optional[Point]:
    """Seed point of the collinear edge pair of a degenerate trisegment."""

    event = st.event
    sid = event.degenerate_seed_id
    pair = SEED_EDGE_PAIRS[sid]
    if event.collinear_index not in pair or event.non_collinear_index in pair:
        raise PreconditionError(
            f"degenerate seed {sid.value} does not join the collinear edges of {event}"
        )
    return compute_seed_point(st, sid, arena)


@debug_log_call(logger)
def compute_normal_offset_lines_isec_time(st: SeededTrisegment) -> Optional[Rational]:
    """Offset time at which three pairwise non-collinear offset lines meet.

    Solving the three offset line equations for ``t`` gives

        t = a2*b0*c1 - a2*b1*c0 - b2*a0*c1 + b2*a1*c0 + b1*a0*c2 - b0*a1*c2
            ---------------------------------------------------------------
                 -a2*b1 + a2*b0 + b2*a1 - b2*a0 + b1*a0 - b0*a1

    The pair is returned undivided; the caller checks the denominator.
    """

    lines = _normalized_lines(*st.event.edges)
    if lines is None:
        return None
    l0, l1, l2 = lines

    num = (
        (l2.a * l0.b * l1.c)
        - (l2.a * l1.b * l0.c)
        - (l2.b * l0.a * l1.c)
        + (l2.b * l1.a * l0.c)
        + (l1.b * l0.a * l2.c)
        - (l0.b * l1.a * l2.c)
    )
    den = (
        (-l2.a * l1.b)
        + (l2.a * l0.b)
        + (l2.b * l1.a)
        - (l2.b * l0.a)
        + (l1.b * l0.a)
        - (l0.b * l1.a)
    )

    logger.debug("Event time (normal): n=%s d=%s", describe(num), describe(den))

    if not (is_finite(num) and is_finite(den)):
        return None
    return Rational(num, den)


def _degenerate_time_terms(
    st: SeededTrisegment, arena: Optional[EventArena]
) -> Optional[Tuple[Line, FT, FT, FT, FT]]:
    """Return ``(l0, px, py, num, den)`` for a trisegment with one collinear pair.

    ``l0`` is the line of the collinear pair and ``(px, py)`` the projection
    of the degenerate seed onto it. The event lies on ``(px, py) + t*(a0, b0)``
    and on the offset of the remaining edge ``l2``, which gives ``t`` in
    closed form. ``a0^2 + b0^2 = 1`` is used to drop one coordinate.
    """

    event = st.event
    lines = _normalized_lines(event.collinear_edge, event.non_collinear_edge)
    q = compute_degenerate_seed_point(st, arena)
    if lines is None or q is None:
        return None
    l0, l2 = lines

    projected = line_project_point(l0, q)
    if projected is None:
        return None
    px, py = projected

    logger.debug("Seed point: %s. Projected seed point: (%s,%s)", q, describe(px), describe(py))

    if not is_zero(l0.b):
        num = (l2.a * l0.b - l0.a * l2.b) * px + l0.b * l2.c - l2.b * l0.c
        den = (l0.a * l0.a - 1) * l2.b + (1 - l2.a * l0.a) * l0.b
        kind = "non-vertical"
    else:
        num = (l2.a * l0.b - l0.a * l2.b) * py - l0.a * l2.c + l2.a * l0.c
        den = l0.a * l0.b * l2.b - l0.b * l0.b * l2.a + l2.a - l0.a
        kind = "vertical"

    logger.debug("Event time (degenerate, %s): n=%s d=%s", kind, describe(num), describe(den))

    if not (is_finite(num) and is_finite(den)):
        return None
    return l0, px, py, num, den


@debug_log_call(logger)
def compute_degenerate_offset_lines_isec_time(
    st: SeededTrisegment, arena: Optional[EventArena] = None
) -> Optional[Rational]:
    """Offset time for a trisegment where exactly two edges are collinear.

    The collinear pair need not be consecutive but must share orientation.
    """

    terms = _degenerate_time_terms(st, arena)
    if terms is None:
        return None
    _, _, _, num, den = terms
    return Rational(num, den)


def compute_offset_lines_isec_time(
    st: SeededTrisegment, arena: Optional[EventArena] = None
) -> Optional[Rational]:
    """Offset distance ``num/den`` at which the three offset lines meet.

    Positive when the lines meet to the left of the edges, negative to the
    right. ``den`` is zero when no single meeting point exists.
    """

    _require_solvable(st)
    if st.event.collinearity is Collinearity.NONE:
        return compute_normal_offset_lines_isec_time(st)
    return compute_degenerate_offset_lines_isec_time(st, arena)


@debug_log_call(logger)
def construct_normal_offset_lines_isec(st: SeededTrisegment) -> Optional[Point]:
    """Event point of three pairwise non-collinear edges."""

    lines = _normalized_lines(*st.event.edges)
    if lines is None:
        return None
    l0, l1, l2 = lines

    den = l0.a * l2.b - l0.a * l1.b - l1.a * l2.b + l2.a * l1.b + l0.b * l1.a - l0.b * l2.a

    logger.debug("Event point: d=%s", describe(den))

    if certified_is_zero(den) or not is_finite(den):
        return None

    num_x = l0.b * l2.c - l0.b * l1.c - l1.b * l2.c + l2.b * l1.c + l1.b * l0.c - l2.b * l0.c
    num_y = l0.a * l2.c - l0.a * l1.c - l1.a * l2.c + l2.a * l1.c + l1.a * l0.c - l2.a * l0.c
    if not (is_finite(num_x) and is_finite(num_y)):
        return None

    x = num_x / den
    y = -num_y / den
    if not (is_finite(x) and is_finite(y)):
        return None
    return Point(x, y)


@debug_log_call(logger)
def construct_degenerate_offset_lines_isec(
    st: SeededTrisegment, arena: Optional[EventArena] = None
) -> Optional[Point]:
    """Event point for a trisegment where exactly two edges are collinear."""

    terms = _degenerate_time_terms(st, arena)
    if terms is None:
        return None
    l0, px, py, num, den = terms
    if certified_is_zero(den):
        return None

    x = px + l0.a * num / den
    y = py + l0.b * num / den
    if not (is_finite(x) and is_finite(y)):
        return None
    return Point(x, y)


def construct_offset_lines_isec(
    st: SeededTrisegment, arena: Optional[EventArena] = None
) -> Optional[Point]:
    """Point where the offset lines of the trisegment edges meet."""

    _require_solvable(st)
    if st.event.collinearity is Collinearity.NONE:
        return construct_normal_offset_lines_isec(st)
    return construct_degenerate_offset_lines_isec(st, arena)


@debug_log_call(logger)
def compute_offset_lines_isec_dist_to_point(
    p: Optional[Point], st: SeededTrisegment, arena: Optional[EventArena] = None
) -> Optional[FT]:
    """Squared distance from ``p`` to the event point of ``st``."""

    if p is None:
        return None
    i = construct_offset_lines_isec(st, arena)
    if i is None:
        return None
    sdist = squared_distance(p, i)
    if not is_finite(sdist):
        return None
    return sdist


__all__ = [
    "compute_degenerate_offset_lines_isec_time",
    "compute_degenerate_seed_point",
    "compute_normal_offset_lines_isec_time",
    "compute_offset_lines_isec_dist_to_point",
    "compute_offset_lines_isec_time",
    "compute_oriented_midpoint",
    "compute_seed_point",
    "construct_degenerate_offset_lines_isec",
    "construct_normal_offset_lines_isec",
    "construct_offset_lines_isec",
]
