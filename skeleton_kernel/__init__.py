from .config import KernelConfig, get_kernel_config, set_kernel_config
from .geometry import Line, Point, Segment
from .numbers import Rational, Uncertain
from .types import (
    Collinearity,
    SeedId,
    SkeletonKernelError,
    PreconditionError,
    InvalidSeedError,
    PropagationDepthError,
)
from .lines import (
    compute_normalized_line_coeff,
    line_project_point,
    squared_distance_from_point_to_line,
)
from .predicates import classify_collinearity
from .trisegment import Trisegment, construct_trisegment
from .seeds import (
    NIL,
    EventArena,
    NilSeed,
    NodeSeed,
    SeededTrisegment,
    construct_seeded_trisegment,
)
from .events import (
    compute_oriented_midpoint,
    compute_seed_point,
    compute_degenerate_seed_point,
    compute_offset_lines_isec_time,
    construct_offset_lines_isec,
    compute_offset_lines_isec_dist_to_point,
)

__all__ = [
    'KernelConfig',
    'get_kernel_config',
    'set_kernel_config',
    'Line',
    'Point',
    'Segment',
    'Rational',
    'Uncertain',
    'Collinearity',
    'SeedId',
    'SkeletonKernelError',
    'PreconditionError',
    'InvalidSeedError',
    'PropagationDepthError',
    'compute_normalized_line_coeff',
    'line_project_point',
    'squared_distance_from_point_to_line',
    'classify_collinearity',
    'Trisegment',
    'construct_trisegment',
    'NIL',
    'EventArena',
    'NilSeed',
    'NodeSeed',
    'SeededTrisegment',
    'construct_seeded_trisegment',
    'compute_oriented_midpoint',
    'compute_seed_point',
    'compute_degenerate_seed_point',
    'compute_offset_lines_isec_time',
    'construct_offset_lines_isec',
    'compute_offset_lines_isec_dist_to_point',
]
