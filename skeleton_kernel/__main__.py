import argparse
import logging
from fractions import Fraction
from typing import List, Optional, Sequence

import numpy as np

from skeleton_kernel import (
    Collinearity,
    Point,
    Segment,
    compute_offset_lines_isec_dist_to_point,
    compute_offset_lines_isec_time,
    construct_offset_lines_isec,
    construct_seeded_trisegment,
    construct_trisegment,
)

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _fmt(value: object) -> str:
    return f"{float(value):.6g}"


def _load_contour(path: str, exact: bool) -> List[Point]:
    coords = np.loadtxt(path, dtype=float, ndmin=2)
    if coords.size and coords.shape[1] != 2:
        raise ValueError(f"{path}: expected two columns (x y), got {coords.shape[1]}")
    if exact:
        if not np.isfinite(coords).all():
            raise ValueError(f"{path}: exact mode needs finite coordinates")
        return [Point(Fraction(float(x)), Fraction(float(y))) for x, y in coords]
    return [Point(float(x), float(y)) for x, y in coords]


def _contour_edges(vertices: Sequence[Point]) -> List[Segment]:
    count = len(vertices)
    return [Segment(vertices[i], vertices[(i + 1) % count]) for i in range(count)]


def _describe_event(edges: Sequence[Segment], index: int, probe: Optional[Point]) -> str:
    count = len(edges)
    e0, e1, e2 = edges[index - 1], edges[index], edges[(index + 1) % count]
    event = construct_trisegment(e0, e1, e2)
    if event.is_null:
        return "collinearity=indeterminate"
    if event.collinearity is Collinearity.ALL:
        return "collinearity=all (no event)"

    st = construct_seeded_trisegment(event)
    parts = [f"collinearity={event.collinearity.value}"]
    time = compute_offset_lines_isec_time(st)
    if time is None:
        parts.append("time=overflow")
    elif not time.is_defined:
        parts.append(f"time={_fmt(time.num)}/0 (none)")
    else:
        parts.append(f"time={_fmt(time.num)}/{_fmt(time.den)} ({_fmt(time.quotient())})")

    point = construct_offset_lines_isec(st)
    if point is None:
        parts.append("point=none")
    else:
        parts.append(f"point=({_fmt(point.x)}, {_fmt(point.y)})")

    if probe is not None:
        sdist = compute_offset_lines_isec_dist_to_point(probe, st)
        parts.append("dist2=none" if sdist is None else f"dist2={_fmt(sdist)}")
    return " ".join(parts)


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        description="Evaluate the initial straight skeleton events of a closed contour"
    )
    parser.add_argument("path", help="Text file with one 'x y' vertex per line")
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--exact",
        action="store_true",
        help="Evaluate with exact rational arithmetic over the input coordinates",
    )
    parser.add_argument(
        "--point",
        nargs=2,
        type=float,
        metavar=("X", "Y"),
        help="Also report the squared distance from this point to each event",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    logger.info("Loading contour from %s", args.path)
    try:
        vertices = _load_contour(args.path, args.exact)
    except ValueError as exc:
        logger.error("Cannot load contour: %s", exc)
        raise SystemExit(1) from exc
    if len(vertices) < 3:
        logger.error("Contour needs at least three vertices, got %d", len(vertices))
        raise SystemExit(1)

    edges = _contour_edges(vertices)
    logger.info("Evaluating %d initial event(s)%s", len(edges), " in exact mode" if args.exact else "")

    probe = Point(args.point[0], args.point[1]) if args.point else None
    for index, edge in enumerate(edges):
        print(f"edge {index} {edge.source}->{edge.target}: {_describe_event(edges, index, probe)}")


if __name__ == "__main__":
    main()
