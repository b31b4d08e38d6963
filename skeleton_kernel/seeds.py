"""Seeded trisegments and the arena that owns propagated events."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Union

from .config import get_kernel_config
from .trisegment import Trisegment
from .types import Collinearity, InvalidSeedError, PreconditionError, PropagationDepthError


@dataclass(frozen=True)
class NilSeed:
    """Seed that is a contour vertex."""

    def __str__(self) -> str:
        return "nil"


NIL = NilSeed()


@dataclass(frozen=True)
class NodeSeed:
    """Seed that is the skeleton node produced by an earlier arena event."""

    index: int

    def __str__(self) -> str:
        return f"#{self.index}"


Seed = Union[NilSeed, NodeSeed]


@dataclass(frozen=True)
class SeededTrisegment:
    """Event trisegment plus the left and right seeds that bound it."""

    event: Trisegment
    left_seed: Seed = NIL
    right_seed: Seed = NIL

    @property
    def is_initial(self) -> bool:
        return isinstance(self.left_seed, NilSeed) and isinstance(self.right_seed, NilSeed)

    def __str__(self) -> str:
        return f"{self.event} lseed={self.left_seed} rseed={self.right_seed}"


def construct_seeded_trisegment(
    event: Trisegment, left_seed: Seed = NIL, right_seed: Seed = NIL
) -> SeededTrisegment:
    """Attach seeds to ``event``; without seeds the event is an initial one."""

    for seed in (left_seed, right_seed):
        if not isinstance(seed, (NilSeed, NodeSeed)):
            raise TypeError(f"unsupported seed {seed!r}")
    return SeededTrisegment(event, left_seed, right_seed)


@dataclass
class EventArena:
    """Append-only store of seeded trisegments.

    A node seed may only name an index already present when its event is
    added, so the seed graph is acyclic by construction.
    """

    max_depth: Optional[int] = field(default_factory=lambda: get_kernel_config().max_propagation_depth)
    _nodes: List[SeededTrisegment] = field(default_factory=list)
    _depths: List[int] = field(default_factory=list)

    def add(self, st: SeededTrisegment) -> NodeSeed:
        """Register ``st`` and return the seed that refers to it."""

        if st.event.is_null:
            raise PreconditionError("cannot register a null trisegment")
        if st.event.collinearity is Collinearity.ALL:
            raise PreconditionError("cannot register an event whose three edges are collinear")
        depth = 0
        for seed in (st.left_seed, st.right_seed):
            if isinstance(seed, NodeSeed):
                self._check_index(seed.index)
                depth = max(depth, self._depths[seed.index] + 1)
        if self.max_depth is not None and depth > self.max_depth:
            raise PropagationDepthError(
                f"event would have propagation depth {depth} (limit {self.max_depth})"
            )
        self._nodes.append(st)
        self._depths.append(depth)
        return NodeSeed(len(self._nodes) - 1)

    def add_event(self, event: Trisegment, left_seed: Seed = NIL, right_seed: Seed = NIL) -> NodeSeed:
        return self.add(construct_seeded_trisegment(event, left_seed, right_seed))

    def depth(self, seed: Seed) -> int:
        """Number of propagated events between ``seed`` and the contour."""

        if isinstance(seed, NilSeed):
            return -1
        self._check_index(seed.index)
        return self._depths[seed.index]

    def __getitem__(self, key: Union[int, NodeSeed]) -> SeededTrisegment:
        index = key.index if isinstance(key, NodeSeed) else key
        self._check_index(index)
        return self._nodes[index]

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[SeededTrisegment]:
        return iter(self._nodes)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._nodes):
            raise InvalidSeedError(f"seed #{index} does not refer to a registered event")

    def __str__(self) -> str:  # pragma: no cover - debugging helper
        if not self._nodes:
            return "EventArena[]"
        lines = ["EventArena["]
        for idx, (node, depth) in enumerate(zip(self._nodes, self._depths)):
            lines.append(f"  {idx} (depth {depth}): {node}")
        lines.append("]")
        return "\n".join(lines)


__all__ = [
    "EventArena",
    "NIL",
    "NilSeed",
    "NodeSeed",
    "Seed",
    "SeededTrisegment",
    "construct_seeded_trisegment",
]
