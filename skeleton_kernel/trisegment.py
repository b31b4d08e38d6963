"""Three oriented edges whose offsets define a skeleton event."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from .geometry import Segment
from .predicates import classify_collinearity
from .types import Collinearity, PreconditionError, SeedId

logger = logging.getLogger(__name__)

# collinearity -> (degenerate seed, collinear edge index, non-collinear edge index)
_DEGENERATE_LAYOUT: Dict[Collinearity, Tuple[SeedId, int, int]] = {
    Collinearity.E0E1: (SeedId.LEFT, 0, 2),
    Collinearity.E1E2: (SeedId.RIGHT, 1, 0),
    Collinearity.E0E2: (SeedId.UNKNOWN, 0, 1),
}

# edges joined by each seed
SEED_EDGE_PAIRS: Dict[SeedId, Tuple[int, int]] = {
    SeedId.LEFT: (0, 1),
    SeedId.RIGHT: (1, 2),
    SeedId.UNKNOWN: (0, 2),
}


@dataclass(frozen=True)
class Trisegment:
    """Edges ``e0, e1, e2`` in contour order plus their collinearity.

    ``collinearity`` is ``None`` only for the null trisegment, which stands
    for a triple whose collinearity could not be determined.
    """

    e0: Optional[Segment]
    e1: Optional[Segment]
    e2: Optional[Segment]
    collinearity: Optional[Collinearity]

    def __post_init__(self) -> None:
        edges = (self.e0, self.e1, self.e2)
        if self.collinearity is None:
            if any(edge is not None for edge in edges):
                raise ValueError("null trisegment cannot carry edges")
        elif any(edge is None for edge in edges):
            raise ValueError("trisegment needs three edges")

    @classmethod
    def null(cls) -> "Trisegment":
        return cls(None, None, None, None)

    @property
    def is_null(self) -> bool:
        return self.collinearity is None

    @property
    def edges(self) -> Tuple[Segment, Segment, Segment]:
        self._require_edges()
        return self.e0, self.e1, self.e2  # type: ignore[return-value]

    def edge(self, index: int) -> Segment:
        return self.edges[index]

    @property
    def degenerate_seed_id(self) -> SeedId:
        """Seed whose edge pair is collinear; UNKNOWN when e0 and e2 are."""

        return self._layout()[0]

    @property
    def collinear_index(self) -> int:
        return self._layout()[1]

    @property
    def non_collinear_index(self) -> int:
        return self._layout()[2]

    @property
    def collinear_edge(self) -> Segment:
        return self.edge(self.collinear_index)

    @property
    def non_collinear_edge(self) -> Segment:
        return self.edge(self.non_collinear_index)

    def _layout(self) -> Tuple[SeedId, int, int]:
        self._require_edges()
        layout = _DEGENERATE_LAYOUT.get(self.collinearity)  # type: ignore[arg-type]
        if layout is None:
            raise PreconditionError(f"trisegment with collinearity {self.collinearity.value} has no degenerate seed")
        return layout

    def _require_edges(self) -> None:
        if self.is_null:
            raise PreconditionError("null trisegment has no edges")

    def __str__(self) -> str:
        if self.is_null:
            return "{null}"
        return f"{{e0={self.e0} e1={self.e1} e2={self.e2} collinearity={self.collinearity.value}}}"


def construct_trisegment(e0: Segment, e1: Segment, e2: Segment) -> Trisegment:
    """Build the trisegment of three edges, or the null one if unclassifiable."""

    collinearity = classify_collinearity(e0, e1, e2)
    if not collinearity.is_certain:
        logger.debug("Trisegment construction failed for %s, %s, %s", e0, e1, e2)
        return Trisegment.null()
    return Trisegment(e0, e1, e2, collinearity.make_certain())


__all__ = ["SEED_EDGE_PAIRS", "Trisegment", "construct_trisegment"]
