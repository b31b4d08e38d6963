"""Planar value types consumed by the event constructions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence, Tuple

from .numbers import FT, is_finite, to_field


@dataclass(frozen=True)
class Point:
    x: FT
    y: FT

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", to_field(self.x))
        object.__setattr__(self, "y", to_field(self.y))

    @classmethod
    def of(cls, coords: Sequence[object]) -> "Point":
        if len(coords) != 2:
            raise ValueError("point needs exactly two coordinates")
        return cls(coords[0], coords[1])

    @property
    def is_finite(self) -> bool:
        return is_finite(self.x) and is_finite(self.y)

    def __iter__(self) -> Iterator[FT]:
        yield self.x
        yield self.y

    def __str__(self) -> str:
        return f"({self.x},{self.y})"


@dataclass(frozen=True)
class Segment:
    """Oriented edge from ``source`` to ``target``."""

    source: Point
    target: Point

    @classmethod
    def of(cls, source: Sequence[object], target: Sequence[object]) -> "Segment":
        return cls(Point.of(source), Point.of(target))

    @property
    def direction(self) -> Tuple[FT, FT]:
        return self.target.x - self.source.x, self.target.y - self.source.y

    @property
    def is_degenerate(self) -> bool:
        return self.source == self.target

    def __str__(self) -> str:
        return f"{{{self.source}->{self.target}}}"


@dataclass(frozen=True)
class Line:
    """Line ``a*x + b*y + c = 0``; normalized lines have ``(a, b)`` as unit left normal."""

    a: FT
    b: FT
    c: FT

    def side_value(self, point: Point) -> FT:
        """Signed offset of ``point``: positive to the left of the source edge."""

        return self.a * point.x + self.b * point.y + self.c

    def __str__(self) -> str:
        return f"[a={self.a}, b={self.b}, c={self.c}]"


def squared_distance(p: Point, q: Point) -> FT:
    dx = q.x - p.x
    dy = q.y - p.y
    return dx * dx + dy * dy


def midpoint(p: Point, q: Point) -> Point:
    return Point((p.x + q.x) / 2, (p.y + q.y) / 2)


__all__ = ["Line", "Point", "Segment", "midpoint", "squared_distance"]
