import math

import pytest

from skeleton_kernel import (
    NIL,
    Collinearity,
    EventArena,
    InvalidSeedError,
    KernelConfig,
    NodeSeed,
    Point,
    PreconditionError,
    PropagationDepthError,
    SeedId,
    Segment,
    Trisegment,
    compute_degenerate_seed_point,
    compute_offset_lines_isec_time,
    compute_oriented_midpoint,
    compute_seed_point,
    construct_offset_lines_isec,
    construct_seeded_trisegment,
    construct_trisegment,
    get_kernel_config,
    set_kernel_config,
)
from skeleton_kernel import events, seeds


def _event(*edges):
    return construct_trisegment(*(Segment.of(a, b) for a, b in edges))


SQUARE_CORNER = (((0, 0), (10, 0)), ((10, 0), (10, 10)), ((10, 10), (0, 10)))


def test_seeded_trisegment_without_seeds_is_initial():
    st = construct_seeded_trisegment(_event(*SQUARE_CORNER))

    assert st.is_initial
    assert st.left_seed is NIL
    assert st.right_seed is NIL


def test_seeded_trisegment_rejects_foreign_seeds():
    with pytest.raises(TypeError):
        construct_seeded_trisegment(_event(*SQUARE_CORNER), 3)


def test_oriented_midpoint_accepts_either_edge_order():
    e0 = Segment.of((0, 0), (4, 0))
    e1 = Segment.of((6, 0), (6, 5))

    assert compute_oriented_midpoint(e0, e1) == Point(5, 0)
    assert compute_oriented_midpoint(e1, e0) == Point(5, 0)


def test_oriented_midpoint_overflow_returns_none():
    e0 = Segment.of((0, 0), (1e300, 0))
    e1 = Segment.of((-1e300, 0), (0, 5))

    assert compute_oriented_midpoint(e0, e1) is None


def test_contour_seed_points():
    st = construct_seeded_trisegment(_event(((0, 0), (4, 0)), ((7, 1), (7, 8)), ((6, 0), (10, 0))))

    assert compute_seed_point(st, SeedId.LEFT) == Point(5.5, 0.5)
    assert compute_seed_point(st, SeedId.RIGHT) == Point(8.5, 0.5)
    assert compute_seed_point(st, SeedId.UNKNOWN) == Point(5, 0)
    assert compute_degenerate_seed_point(st) == Point(5, 0)


def test_node_seed_resolves_to_previous_event_point():
    arena = EventArena()
    corner = arena.add_event(_event(*SQUARE_CORNER))
    st = construct_seeded_trisegment(
        _event(((0, 0), (5, 0)), ((5, 0), (10, 0)), ((20, 0), (20, 10))),
        left_seed=corner,
    )

    assert not st.is_initial
    assert compute_seed_point(st, SeedId.LEFT, arena) == Point(5, 5)
    # right seed is still a contour vertex
    assert compute_seed_point(st, SeedId.RIGHT, arena) == Point(15, 0)


def test_node_seed_without_arena_is_rejected():
    arena = EventArena()
    corner = arena.add_event(_event(*SQUARE_CORNER))
    st = construct_seeded_trisegment(
        _event(((0, 0), (5, 0)), ((5, 0), (10, 0)), ((20, 0), (20, 10))),
        left_seed=corner,
    )

    with pytest.raises(PreconditionError):
        compute_seed_point(st, SeedId.LEFT)
    with pytest.raises(PreconditionError):
        compute_offset_lines_isec_time(st)


def test_arena_rejects_forward_references():
    arena = EventArena()

    with pytest.raises(InvalidSeedError):
        arena.add_event(_event(*SQUARE_CORNER), left_seed=NodeSeed(0))
    assert len(arena) == 0

    first = arena.add_event(_event(*SQUARE_CORNER))
    with pytest.raises(InvalidSeedError):
        arena.add_event(_event(*SQUARE_CORNER), right_seed=NodeSeed(first.index + 1))
    with pytest.raises(InvalidSeedError):
        arena[5]


def test_arena_rejects_null_events():
    with pytest.raises(PreconditionError):
        EventArena().add_event(Trisegment.null())


def test_arena_rejects_all_collinear_events():
    arena = EventArena()

    with pytest.raises(PreconditionError):
        arena.add_event(_event(((0, 0), (2, 0)), ((2, 0), (4, 0)), ((4, 0), (6, 0))))
    assert len(arena) == 0


# corner of the square (-2,2)-(8,12); its event point is (3, 7)
SHIFTED_CORNER = (((-2, 2), (8, 2)), ((8, 2), (8, 12)), ((8, 12), (-2, 12)))


def test_right_node_seed_drives_degenerate_event():
    arena = EventArena()
    corner = arena.add_event(_event(*SHIFTED_CORNER))
    st = construct_seeded_trisegment(
        _event(((0, 10), (0, 0)), ((0, 0), (5, 0)), ((5, 0), (10, 0))),
        right_seed=corner,
    )
    assert st.event.collinearity is Collinearity.E1E2

    assert compute_seed_point(st, SeedId.RIGHT, arena) == Point(3, 7)
    assert compute_degenerate_seed_point(st, arena) == Point(3, 7)
    # left seed is still a contour vertex
    assert compute_seed_point(st, SeedId.LEFT, arena) == Point(0, 0)

    # the seed projects to (3, 0); a contour seed would give t=5 at (5, 5)
    assert float(compute_offset_lines_isec_time(st, arena)) == pytest.approx(3.0)
    assert construct_offset_lines_isec(st, arena) == Point(3, 3)


def test_unknown_seed_ignores_node_seeds():
    arena = EventArena()
    corner = arena.add_event(_event(*SHIFTED_CORNER))
    st = construct_seeded_trisegment(
        _event(((0, 0), (4, 0)), ((7, 1), (7, 8)), ((6, 0), (10, 0))),
        left_seed=corner,
        right_seed=corner,
    )
    assert st.event.collinearity is Collinearity.E0E2

    assert compute_seed_point(st, SeedId.LEFT, arena) == Point(3, 7)
    assert compute_seed_point(st, SeedId.UNKNOWN, arena) == Point(5, 0)
    assert compute_seed_point(st, SeedId.UNKNOWN) == Point(5, 0)
    assert float(compute_offset_lines_isec_time(st, arena)) == pytest.approx(2.0)
    assert construct_offset_lines_isec(st, arena) == Point(5, 2)


def test_arena_lookup_and_depth():
    arena = EventArena()
    a = arena.add_event(_event(*SQUARE_CORNER))
    b = arena.add_event(_event(*SQUARE_CORNER))
    c = arena.add_event(_event(*SQUARE_CORNER), left_seed=a, right_seed=b)
    d = arena.add_event(_event(*SQUARE_CORNER), left_seed=c)

    assert len(arena) == 4
    assert arena[c].left_seed == a
    assert arena[c.index] is arena[c]
    assert list(arena)[3] is arena[d]
    assert arena.depth(NIL) == -1
    assert [arena.depth(seed) for seed in (a, b, c, d)] == [0, 0, 1, 2]


def test_arena_enforces_max_depth():
    arena = EventArena(max_depth=1)
    a = arena.add_event(_event(*SQUARE_CORNER))
    b = arena.add_event(_event(*SQUARE_CORNER), left_seed=a)

    with pytest.raises(PropagationDepthError):
        arena.add_event(_event(*SQUARE_CORNER), left_seed=b)
    assert len(arena) == 2


def test_arena_default_depth_comes_from_config():
    original = get_kernel_config()
    try:
        set_kernel_config(KernelConfig(max_propagation_depth=3))
        assert EventArena().max_depth == 3
        # returned configs are copies
        get_kernel_config().max_propagation_depth = 99
        assert get_kernel_config().max_propagation_depth == 3
    finally:
        set_kernel_config(original)


def _chain_level(k):
    # e0, e1 collinear on y=0; e2 vertical at x=10+k
    return _event(((0, 0), (5, 0)), ((5, 0), (10, 0)), ((10 + k, 0), (10 + k, 10)))


def test_five_deep_seed_chain_terminates_at_contour(monkeypatch):
    arena = EventArena()
    seed = arena.add_event(_chain_level(0))
    for k in range(1, 4):
        seed = arena.add_event(_chain_level(k), left_seed=seed)
    top = construct_seeded_trisegment(_chain_level(4), left_seed=seed)
    assert arena.depth(seed) == 3

    isec_calls = []
    midpoint_calls = []
    real_isec = events.construct_offset_lines_isec
    real_midpoint = events.compute_oriented_midpoint

    def counting_isec(st, arena=None):
        isec_calls.append(st)
        return real_isec(st, arena)

    def counting_midpoint(e0, e1):
        midpoint_calls.append((e0, e1))
        return real_midpoint(e0, e1)

    monkeypatch.setattr(events, "construct_offset_lines_isec", counting_isec)
    monkeypatch.setattr(events, "compute_oriented_midpoint", counting_midpoint)

    point = events.construct_offset_lines_isec(top, arena)

    assert point is not None
    assert math.isfinite(point.x) and math.isfinite(point.y)
    assert point == Point(5, 9)
    assert len(isec_calls) == 5
    assert len(midpoint_calls) == 1

    time = compute_offset_lines_isec_time(top, arena)
    assert float(time) == pytest.approx(9.0)


def test_failed_seed_propagates_absence():
    arena = EventArena()
    # parallel e1 gives the first event no point
    broken = arena.add_event(_event(((0, 0), (4, 0)), ((4, 4), (6, 4)), ((6, 0), (10, 0))))
    st = construct_seeded_trisegment(_chain_level(0), left_seed=broken)

    assert compute_seed_point(st, SeedId.LEFT, arena) is None
    assert compute_offset_lines_isec_time(st, arena) is None
    assert construct_offset_lines_isec(st, arena) is None


def test_seeds_module_is_documented():
    assert seeds.__doc__.startswith("Seeded trisegments")
