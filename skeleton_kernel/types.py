from __future__ import annotations

from enum import Enum


class SkeletonKernelError(RuntimeError):
    """Base class for errors raised by the offset event kernel."""


class PreconditionError(SkeletonKernelError, ValueError):
    """Raised when a caller violates the contract of a construction."""


class InvalidSeedError(SkeletonKernelError):
    """Raised when a seed refers to an event that does not exist yet."""


class PropagationDepthError(SkeletonKernelError):
    """Raised when an event chain grows beyond the configured depth."""


class Collinearity(Enum):
    """Which edges of a trisegment share a supporting line and orientation."""

    NONE = "none"
    E0E1 = "e0e1"
    E1E2 = "e1e2"
    E0E2 = "e0e2"
    ALL = "all"

    @property
    def is_degenerate(self) -> bool:
        return self in (Collinearity.E0E1, Collinearity.E1E2, Collinearity.E0E2)


class SeedId(Enum):
    LEFT = "left"
    RIGHT = "right"
    UNKNOWN = "unknown"


__all__ = [
    "Collinearity",
    "InvalidSeedError",
    "PreconditionError",
    "PropagationDepthError",
    "SeedId",
    "SkeletonKernelError",
]
